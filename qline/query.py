from __future__ import annotations

from .types import *
from .sources import adapt, reshaping_pull

# --- operator mixins ---
from .extensions.core import _CoreOperations
from .extensions.set import _SetOperations
from .extensions.partition import _PartitionOperations
from .extensions.grouping import _GroupingOperations
from .extensions.ordering import _OrderingOperations
from .extensions.terminal import _TerminalOperations, ConversionAccessor
from .extensions.stats import _StatsOperations


# --- base engine ---

class _BaseQuery(Generic[T]):
    def __init__(self, source: Any, arity: Optional[int] = None):
        """wrap a source; nothing is pulled until the query is driven"""
        self._pull_source, self._arity = adapt(source, arity)
        # wrapped queries and materializing sources report their width live
        tracks = arity is None and hasattr(source, '__pull__') and hasattr(source, 'arity')
        self._arity_source = source if tracks else None
        self._stages: List[Stage] = []
        self._ended = False

    @property
    def arity(self) -> int:
        """number of values each step produces"""
        if self._arity_source is not None:
            return self._arity_source.arity
        return self._arity

    @arity.setter
    def arity(self, value: int) -> None:
        self._arity = value
        self._arity_source = None

    def _add_stage(self, stage: Stage) -> 'Query[T]':
        self._stages.append(stage)
        return self

    def _next(self) -> Tuple[bool, Optional[tuple]]:
        """drive one upstream item through every stage, packed form"""
        if self._ended:
            return False, None
        while True:
            has_next, values = self._pull_source()
            if not has_next:
                return False, None
            for stage in self._stages:
                values = stage(values)
                if values is Skip:
                    break
                if values is End:
                    # terminal, never resurrected
                    self._ended = True
                    return False, None
            else:
                return True, values

    def pull(self) -> Tuple[bool, Any]:
        """
        pull the next output value.
        returns (True, value) or (False, None) once the pipeline is exhausted.
        single-element steps come back as a bare value, wider ones as a tuple.
        """
        has_next, values = self._next()
        if not has_next:
            return False, None
        return True, unpack(values)

    def __pull__(self, arity: Optional[int] = None) -> PullFunc:
        return reshaping_pull(self._next, arity)

    def __iter__(self) -> Iterator[Any]:
        while True:
            has_next, values = self._next()
            if not has_next:
                return
            yield unpack(values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(arity={self.arity}, stages={len(self._stages)})"


# --- main query class ---

class Query(
    _BaseQuery[T],
    _CoreOperations[T],
    _SetOperations[T],
    _PartitionOperations[T],
    _GroupingOperations[T],
    _OrderingOperations[T],
    _TerminalOperations[T],
    _StatsOperations[T]
):
    """a deferred, chainable pipeline over any enumerable source."""
    def __init__(self, source: Any = (), arity: Optional[int] = None):
        super().__init__(source, arity)
        self.to = ConversionAccessor(self)


# --- ordered query class ---

class OrderedQuery(Query[T]):
    """the result of order_by; accepts tie-break comparers until it is driven."""

    def __init__(self, sorted_source: Any):
        super().__init__(sorted_source)
        self._sorted_source = sorted_source

    def then_by(self, comparer: Comparer) -> 'OrderedQuery[T]':
        """tie-break with comparer when every earlier comparer returns 0"""
        self._sorted_source.add_comparer(comparer)
        return self

    def then_by_descending(self, comparer: Comparer) -> 'OrderedQuery[T]':
        return self.then_by(lambda left, right: comparer(right, left))

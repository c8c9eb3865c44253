from __future__ import annotations
import logging
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import Query

logger = logging.getLogger(__name__)


class _CoreOperations(Generic[T]):
    def where(self: 'Query[T]', predicate: Predicate) -> 'Query[T]':
        """filter elements based on a predicate"""
        def where_stage(values):
            return values if apply(predicate, values) else Skip
        return self._add_stage(where_stage)

    def select(self: 'Query[T]', selector: Selector[U], arity: Optional[int] = None) -> 'Query[U]':
        """
        project each element to a new form.
        returning a tuple widens the step, e.g. select(lambda x: (x, x * x))
        feeds two arguments to every later callback.
        the query's arity becomes `arity` when given; otherwise it is 1 until
        a wider result comes through, and then tracks the produced width.
        """
        if arity is not None and arity < 1:
            raise ValueError("arity must be positive")
        self.arity = 1 if arity is None else arity

        def select_stage(values):
            result = pack(apply(selector, values))
            if arity is None:
                self.arity = len(result)
            elif len(result) != arity:
                raise ValueError(f"mismatched number of binding variables: expected {arity}, got {len(result)}")
            return result
        return self._add_stage(select_stage)

    def of_type(self: 'Query[T]', type_filter: Union[Type, Tuple[Type, ...]]) -> 'Query[T]':
        """filters the elements of a sequence based on a specified type"""
        # syntactic sugar over where(), but the argument is checked up front
        types = type_filter if isinstance(type_filter, tuple) else (type_filter,)
        if not types or not all(isinstance(t, type) for t in types):
            raise TypeError(f"of_type expects a type or a tuple of types, got {type(type_filter).__name__}")
        return self.where(lambda *values: isinstance(unpack(values), type_filter))

    def chain(self: 'Query[T]', *others: Any) -> 'Query[T]':
        """a new query that runs this one to exhaustion, then each of others in turn"""
        from ..query import Query
        from ..sources import Chain
        return Query(Chain(self, *others))

    def select_many(self: 'Query[T]', selector: Selector, inner_arity: int = 1) -> 'Query[U]':
        """
        project every element to a sequence and flatten the results.
        this is an EAGER operation: the current query is drained immediately,
        and a new query over the collected items is returned.
        """
        from ..query import Query
        from ..sources import buffer_pull, drain

        buffer = []
        for values in drain(self):
            inner = apply(selector, values)
            if inner is Skip:
                continue
            buffer.extend(drain(inner, inner_arity))
        logger.debug("select_many collected %d items", len(buffer))
        return Query(buffer_pull(buffer), inner_arity)

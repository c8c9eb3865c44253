"""
sources that must see their whole upstream before producing anything.

each one holds the query it wraps and drains it exactly once, on the first
pull. a fresh query is then put on top, so everything downstream stays lazy.
"""
from __future__ import annotations
import logging
import typing
from abc import ABC, abstractmethod
from .types import *
from .sources import buffer_pull, drain, reshaping_pull

if typing.TYPE_CHECKING:
    from .query import Query

logger = logging.getLogger(__name__)


class _MaterializedSource(ABC):
    def __init__(self, upstream: 'Query'):
        self._upstream = upstream
        self._materialized = False
        self._buffer: List[tuple] = []

    @property
    def arity(self) -> int:
        return self._upstream.arity

    @abstractmethod
    def _materialize(self, values: List[tuple]) -> List[tuple]:
        """turn the drained upstream into the buffer to emit"""

    def __pull__(self, arity: Optional[int] = None) -> PullFunc:
        emit = None

        def pull():
            nonlocal emit
            if emit is None:
                if not self._materialized:
                    values = drain(self._upstream)
                    logger.debug("%s drained %d items", type(self).__name__, len(values))
                    self._buffer = self._materialize(values)
                    self._materialized = True
                emit = buffer_pull(self._buffer)
            return emit()
        return reshaping_pull(pull, arity)


# --- sorting ---

class SortedSource(_MaterializedSource):
    """in-place quicksort driven by a chain of comparers. not stable."""

    def __init__(self, upstream: 'Query', comparer: Comparer):
        super().__init__(upstream)
        self._comparers: List[Comparer] = [comparer]

    def add_comparer(self, comparer: Comparer) -> None:
        self._comparers.append(comparer)

    def _compare(self, left: tuple, right: tuple) -> Union[int, float]:
        left, right = unpack(left), unpack(right)
        for comparer in self._comparers:
            result = comparer(left, right)
            if result:
                return result
        return 0

    def _partition(self, items: List[tuple], low: int, high: int) -> int:
        # lomuto: last element is the pivot
        pivot = items[high]
        boundary = low
        for index in range(low, high):
            if self._compare(items[index], pivot) <= 0:
                items[boundary], items[index] = items[index], items[boundary]
                boundary += 1
        items[boundary], items[high] = items[high], items[boundary]
        return boundary

    def _quicksort(self, items: List[tuple], low: int, high: int) -> None:
        # recurse into the smaller side and loop on the larger to bound the stack
        while low < high:
            pivot = self._partition(items, low, high)
            if pivot - low < high - pivot:
                self._quicksort(items, low, pivot - 1)
                low = pivot + 1
            else:
                self._quicksort(items, pivot + 1, high)
                high = pivot - 1

    def _materialize(self, values: List[tuple]) -> List[tuple]:
        self._quicksort(values, 0, len(values) - 1)
        return values


# --- grouping ---

class GroupedSource(_MaterializedSource):
    """(key, members) pairs in first-seen key order"""

    def __init__(self, upstream: 'Query', selector: KeySelector):
        super().__init__(upstream)
        self._selector = selector

    @property
    def arity(self) -> int:
        return 2

    def _materialize(self, values: List[tuple]) -> List[tuple]:
        groups: Dict[Any, List[Any]] = {}
        for item in values:
            groups.setdefault(apply(self._selector, item), []).append(unpack(item))
        logger.debug("grouped into %d keys", len(groups))
        return list(groups.items())


# --- reversal ---

class ReversedSource(_MaterializedSource):
    def _materialize(self, values: List[tuple]) -> List[tuple]:
        left, right = 0, len(values) - 1
        while left < right:
            values[left], values[right] = values[right], values[left]
            left += 1
            right -= 1
        return values


# --- chunking ---

class ChunkedSource:
    """
    collects up to `size` upstream items per pull.
    the upstream is consumed one chunk at a time rather than all at once.
    """

    def __init__(self, upstream: 'Query', size: int):
        self._upstream = upstream
        self._size = size

    @property
    def arity(self) -> int:
        return 1

    def __pull__(self, arity: Optional[int] = None) -> PullFunc:
        upstream = self._upstream.__pull__()

        def pull():
            chunk = []
            while len(chunk) < self._size:
                has_next, values = upstream()
                if not has_next:
                    break
                chunk.append(unpack(values))
            if not chunk:
                return False, None
            return True, (chunk,)
        return reshaping_pull(pull, arity)

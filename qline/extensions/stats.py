from __future__ import annotations
import typing
import math
import numpy as np
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import Query

Number = Union[int, float]


def _three_way(left: Any, right: Any) -> int:
    return (left > right) - (left < right)


class _StatsOperations(Generic[T]):
    def _numeric_values(self: 'Query[T]') -> List[Number]:
        """helper to materialize numeric values for reductions."""
        data = self.to_array()
        if data and not all(isinstance(x, (int, float, np.number)) for x in data):
            raise TypeError("sequence contains non-numeric types for statistical operation.")
        return data

    def sum(self: 'Query[T]') -> Number:
        """calc sum"""
        data = self._numeric_values()
        if not data:
            return 0
        if all(isinstance(x, (float, np.floating)) for x in data):
            result = np.sum(data)
        else:
            # python ints stay exact past the int64 range
            result = sum(data)
        return result.item() if hasattr(result, 'item') else result

    def max(self: 'Query[T]') -> Number:
        """find maximum"""
        data = self._numeric_values()
        if not data: raise ValueError("cannot find maximum of empty sequence")
        return max(data)

    def min(self: 'Query[T]') -> Number:
        """find minimum"""
        data = self._numeric_values()
        if not data: raise ValueError("cannot find minimum of empty sequence")
        return min(data)

    def max_by(self: 'Query[T]', getter: Selector[Number]) -> Optional[T]:
        """the element with the largest getter value; the first one wins a tie"""
        best, best_value = None, -math.inf
        while True:
            has_next, values = self._next()
            if not has_next:
                return best
            value = apply(getter, values)
            if value > best_value:
                best, best_value = unpack(values), value

    def min_by(self: 'Query[T]', getter: Selector[Number]) -> Optional[T]:
        """the element with the smallest getter value; the first one wins a tie"""
        best, best_value = None, math.inf
        while True:
            has_next, values = self._next()
            if not has_next:
                return best
            value = apply(getter, values)
            if value < best_value:
                best, best_value = unpack(values), value

    def mean(self: 'Query[T]') -> float:
        """calc average in a single pass"""
        total, count = 0, 0
        for value in self:
            total += value
            count += 1
        if count == 0: raise ValueError("cannot calculate mean of empty sequence")
        return total / count

    def median(self: 'Query[T]') -> Number:
        """calculate median value"""
        ordered = self.order_by(_three_way).to_array()
        n = len(ordered)
        if n == 0: raise ValueError("cannot calculate median of empty sequence")
        mid = n // 2
        return (ordered[mid] + ordered[mid - 1]) / 2 if n % 2 == 0 else ordered[mid]

from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import Query, OrderedQuery


class _OrderingOperations(Generic[T]):
    def order_by(self: 'Query[T]', comparer: Comparer) -> 'OrderedQuery[T]':
        """
        sort elements with a three-way comparer (negative, zero, positive).
        the sort is an in-place quicksort and is NOT stable: elements that
        compare equal may come out in any order. add then_by() to break ties.
        """
        from ..query import OrderedQuery
        from ..materialize import SortedSource
        return OrderedQuery(SortedSource(self, comparer))

    def order_by_descending(self: 'Query[T]', comparer: Comparer) -> 'OrderedQuery[T]':
        """sort elements with comparer, largest first"""
        return self.order_by(lambda left, right: comparer(right, left))

    def reverse(self: 'Query[T]') -> 'Query[T]':
        """inverts the order of the elements in a sequence"""
        from ..query import Query
        from ..materialize import ReversedSource
        return Query(ReversedSource(self))

from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import Query


class _GroupingOperations(Generic[T]):
    def group_by(self: 'Query[T]', key_selector: KeySelector[K]) -> 'Query[Tuple[K, List[T]]]':
        """
        group elements by a key.
        the result is a two-valued query of (key, members) in first-seen key
        order, so later callbacks take two arguments:

            Q(people).group_by(lambda p: p['city']).select(lambda city, members: len(members))
        """
        from ..query import Query
        from ..materialize import GroupedSource
        return Query(GroupedSource(self, key_selector))

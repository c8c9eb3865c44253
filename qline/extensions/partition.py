from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import Query


class _PartitionOperations(Generic[T]):
    def skip(self: 'Query[T]', count: int) -> 'Query[T]':
        """skip the first 'count' elements"""
        if count < 0:
            raise ValueError("skip count must not be negative")
        skipped = 0

        def skip_stage(values):
            nonlocal skipped
            if skipped < count:
                skipped += 1
                return Skip
            return values
        return self._add_stage(skip_stage)

    def skip_while(self: 'Query[T]', condition: Predicate) -> 'Query[T]':
        """skip elements while condition is true; everything after the first miss passes"""
        skipping = True

        def skip_while_stage(values):
            nonlocal skipping
            if skipping and apply(condition, values):
                return Skip
            skipping = False
            return values
        return self._add_stage(skip_while_stage)

    def take(self: 'Query[T]', count: int) -> 'Query[T]':
        """take the first 'count' elements, then end the whole pipeline"""
        if count < 0:
            raise ValueError("take count must not be negative")
        taken = 0

        def take_stage(values):
            nonlocal taken
            if taken >= count:
                return End
            taken += 1
            return values
        return self._add_stage(take_stage)

    def take_while(self: 'Query[T]', condition: Predicate) -> 'Query[T]':
        """take elements while condition is true"""
        def take_while_stage(values):
            return values if apply(condition, values) else End
        return self._add_stage(take_while_stage)

    def chunk(self: 'Query[T]', size: int) -> 'Query[List[T]]':
        """split into lists of `size` items; the last one may be shorter"""
        from ..query import Query
        from ..materialize import ChunkedSource
        if size <= 0:
            raise ValueError("chunk size must be positive")
        return Query(ChunkedSource(self, size))

from __future__ import annotations
import logging
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import Query

logger = logging.getLogger(__name__)


def _collect(other: Any) -> List[Any]:
    """drain another source into a list of plain values"""
    from ..sources import drain
    return [unpack(values) for values in drain(other)]


class _SetOperations(Generic[T]):
    """
    set-theoretic operators, built as filtering stages.
    the plain forms hash values; the *_by forms compare pairwise with a
    caller-supplied comparer and are quadratic.
    """

    def distinct(self: 'Query[T]') -> 'Query[T]':
        """return distinct elements. preserves order of first appearance."""
        seen = set()

        def distinct_stage(values):
            key = unpack(values)
            if key in seen:
                return Skip
            seen.add(key)
            return values
        return self._add_stage(distinct_stage)

    def distinct_by(self: 'Query[T]', comparer: Comparer) -> 'Query[T]':
        """drop any element for which comparer(accepted, element) is truthy"""
        accepted = []

        def distinct_by_stage(values):
            candidate = unpack(values)
            if any(comparer(existing, candidate) for existing in accepted):
                return Skip
            accepted.append(candidate)
            return values
        return self._add_stage(distinct_by_stage)

    def union(self: 'Query[T]', other: Any) -> 'Query[T]':
        """return the order-preserving union of two sequences (distinct elements)."""
        return self.chain(other).distinct()

    def union_by(self: 'Query[T]', other: Any, comparer: Comparer) -> 'Query[T]':
        return self.chain(other).distinct_by(comparer)

    def except_(self: 'Query[T]', other: Any) -> 'Query[T]':
        """return elements not in other (set difference). other is read now."""
        excluded = set(_collect(other))
        logger.debug("except_ built a set of %d values", len(excluded))

        def except_stage(values):
            return Skip if unpack(values) in excluded else values
        return self._add_stage(except_stage)

    def except_by(self: 'Query[T]', other: Any, comparer: Comparer) -> 'Query[T]':
        """return elements for which no item of other matches comparer(element, item)"""
        others = _collect(other)

        def except_by_stage(values):
            candidate = unpack(values)
            if any(comparer(candidate, item) for item in others):
                return Skip
            return values
        return self._add_stage(except_by_stage)

    def intersect(self: 'Query[T]', other: Any) -> 'Query[T]':
        """return the order-preserving intersection of two sequences."""
        included = set(_collect(other))
        logger.debug("intersect built a set of %d values", len(included))

        def intersect_stage(values):
            return values if unpack(values) in included else Skip
        return self._add_stage(intersect_stage)

    def intersect_by(self: 'Query[T]', other: Any, comparer: Comparer) -> 'Query[T]':
        others = _collect(other)

        def intersect_by_stage(values):
            candidate = unpack(values)
            if any(comparer(candidate, item) for item in others):
                return values
            return Skip
        return self._add_stage(intersect_by_stage)

"""
the enumerable capability: everything a query can pull from.

a source is adapted into a pull function `() -> (has_next, values)` where
`values` is a tuple holding `arity` elements.
"""
from __future__ import annotations
from collections.abc import Mapping
from .types import *


def _reshape(item: Any, arity: int) -> tuple:
    if arity == 1:
        return (item,)
    try:
        values = tuple(item)
    except TypeError:
        raise ValueError(f"expected {arity} values per item, got a single {type(item).__name__}") from None
    if len(values) != arity:
        raise ValueError(f"mismatched number of binding variables: expected {arity}, got {len(values)}")
    return values


def _iterator_pull(iterator: Iterator[Any], arity: int) -> PullFunc:
    def pull():
        for item in iterator:
            return True, _reshape(item, arity)
        return False, None
    return pull


def buffer_pull(buffer: List[tuple]) -> PullFunc:
    """pull function over a list of already-packed value tuples"""
    position = 0

    def pull():
        nonlocal position
        if position >= len(buffer):
            return False, None
        values = buffer[position]
        position += 1
        return True, values
    return pull


def reshaping_pull(pull: PullFunc, arity: Optional[int]) -> PullFunc:
    """re-cut the output of a natural pull function into tuples of `arity` elements"""
    if arity is None:
        return pull

    def reshaped():
        has_next, values = pull()
        if not has_next:
            return False, None
        return True, _reshape(unpack(values), arity)
    return reshaped


def adapt(source: Any, arity: Optional[int] = None) -> Tuple[PullFunc, int]:
    """
    adapt a source to a pull function.
    returns the pull function and the arity it produces.

    mappings default to arity 2 (key, value); iterables default to 1.
    objects exposing `__pull__(arity)` adapt themselves, and a bare
    non-iterable callable is taken to be a pull function already.
    """
    if hasattr(source, '__pull__'):
        return source.__pull__(arity), arity if arity is not None else getattr(source, 'arity', 1)
    if isinstance(source, Mapping):
        if arity is None or arity == 2:
            return _iterator_pull(iter(source.items()), 2), 2
        if arity == 1:
            return _iterator_pull(iter(source.keys()), 1), 1
        raise ValueError(f"a mapping yields 1 or 2 values per item, not {arity}")
    if isinstance(source, Iterable):
        arity = 1 if arity is None else arity
        if arity < 1:
            raise ValueError("arity must be positive")
        return _iterator_pull(iter(source), arity), arity
    if callable(source):
        return source, 1 if arity is None else arity
    raise TypeError(f"'{type(source).__name__}' object is not enumerable")


def drain(source: Any, arity: Optional[int] = None) -> List[tuple]:
    """pull every value tuple out of a source"""
    pull, _ = adapt(source, arity)
    buffer = []
    while True:
        has_next, values = pull()
        if not has_next:
            return buffer
        buffer.append(values)


class Chain:
    """enumerates its first source to exhaustion, then the second, and so on"""

    def __init__(self, *sources: Any):
        self._sources = list(sources)
        self._index = 0

    @property
    def arity(self) -> int:
        if not self._sources:
            return 1
        first = self._sources[0]
        if hasattr(first, 'arity'):
            return first.arity
        return 2 if isinstance(first, Mapping) else 1

    def __pull__(self, arity: Optional[int] = None) -> PullFunc:
        pulls = [adapt(source, arity)[0] for source in self._sources]

        def pull():
            while self._index < len(pulls):
                has_next, values = pulls[self._index]()
                if has_next:
                    return True, values
                # only ever moves forward
                self._index += 1
            return False, None
        return pull

    def __iter__(self) -> Iterator[Any]:
        pull = self.__pull__()
        while True:
            has_next, values = pull()
            if not has_next:
                return
            yield unpack(values)


def range_values(start: Union[int, float], end: Union[int, float],
                 step: Union[int, float] = 1) -> Iterator[Union[int, float]]:
    """inclusive arithmetic sequence from start to end"""
    if step == 0:
        raise ValueError("range step must not be zero")
    if (end - start) * step < 0:
        raise ValueError(f"range step {step} can never reach {end} from {start}")

    def generate():
        # values are start + index * step, never a running sum
        index = 0
        while True:
            value = start + index * step
            if (value > end) if step > 0 else (value < end):
                return
            yield value
            index += 1
    return generate()

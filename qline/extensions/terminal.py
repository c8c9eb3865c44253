from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import Query


class _TerminalOperations(Generic[T]):
    """operations that drive the pipeline and return a plain result"""

    def count(self: 'Query[T]') -> int:
        """count elements"""
        total = 0
        while self._next()[0]:
            total += 1
        return total

    def any(self: 'Query[T]', condition: Optional[Predicate] = None) -> bool:
        """check if any element satisfies condition (or exists at all)"""
        while True:
            has_next, values = self._next()
            if not has_next:
                return False
            if condition is None or apply(condition, values):
                return True

    def all(self: 'Query[T]', condition: Predicate) -> bool:
        """check if all elements satisfy condition"""
        while True:
            has_next, values = self._next()
            if not has_next:
                return True
            if not apply(condition, values):
                return False

    def contains(self: 'Query[T]', value: Any) -> bool:
        return self.any(lambda *values: unpack(values) == value)

    def first(self: 'Query[T]', condition: Optional[Predicate] = None) -> T:
        """get first element"""
        while True:
            has_next, values = self._next()
            if not has_next:
                break
            if condition is None or apply(condition, values):
                return unpack(values)
        if condition is None:
            raise ValueError("sequence contains no elements")
        raise ValueError("no element satisfies the condition")

    def first_or_default(self: 'Query[T]', condition: Optional[Predicate] = None,
                         default: Optional[T] = None) -> Optional[T]:
        """get first element or default"""
        try: return self.first(condition)
        except ValueError: return default

    def for_each(self: 'Query[T]', action: Callable[..., Any]) -> None:
        """
        performs the specified action on each element for side-effects.
        two-valued steps call action(key, value).
        """
        while True:
            has_next, values = self._next()
            if not has_next:
                return
            apply(action, values)

    def aggregate(self: 'Query[T]', accumulator: Accumulator[T, T], seed: Optional[T] = None) -> T:
        """applies accumulator function over sequence"""
        has_next, values = (True, (seed,)) if seed is not None else self._next()
        if not has_next:
            raise ValueError("cannot aggregate empty sequence without seed")
        result = unpack(values)
        for item in self:
            result = accumulator(result, item)
        return result

    def to_array(self: 'Query[T]') -> List[T]:
        """convert to list"""
        return list(self)

    def to_set(self: 'Query[T]') -> Set[T]:
        return set(self)

    def to_map(self: 'Query[T]', mapper: Optional[Callable[..., Tuple[K, V]]] = None,
               strict: bool = False) -> Dict[K, V]:
        """
        convert to dictionary.
        mapper turns each element into a (key, value) pair; without one the
        elements must already be pairs. strict=True refuses duplicate keys,
        otherwise later entries win.
        """
        result = {}
        while True:
            has_next, values = self._next()
            if not has_next:
                return result
            entry = apply(mapper, values) if mapper else unpack(values)
            try:
                key, value = entry
            except (TypeError, ValueError):
                raise ValueError(f"to_map needs (key, value) pairs, got {entry!r}") from None
            if strict and key in result:
                raise ValueError(f"duplicate key {key!r}")
            result[key] = value


class ConversionAccessor(Generic[T]):
    """conversions to python, numpy and pandas containers, reached via query.to"""

    def __init__(self, query_instance: 'Query[T]'):
        self._query = query_instance

    def list(self) -> List[T]:
        """convert to list"""
        return self._query.to_array()

    def set(self) -> Set[T]:
        """convert to set"""
        return self._query.to_set()

    def dict(self, mapper: Optional[Callable[..., Tuple[K, V]]] = None, strict: bool = False) -> Dict[K, V]:
        return self._query.to_map(mapper, strict)

    def numpy(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._query.to_array())

    def series(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._query.to_array())

    def frame(self, columns: Optional[List[str]] = None) -> pd.DataFrame:
        """convert to pandas dataframe; pairs and records become rows"""
        return pd.DataFrame(self._query.to_array(), columns=columns)

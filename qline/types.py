from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[..., bool]
Selector = Callable[..., U]
KeySelector = Callable[..., K]
Comparer = Callable[[Any, Any], Union[int, float]]
Accumulator = Callable[[U, T], U]

# a pull function returns (True, values) or (False, None)
PullFunc = Callable[[], Tuple[bool, Optional[tuple]]]
Stage = Callable[[tuple], Any]


class _Marker:
    """out-of-band control signal passed between pipeline stages"""
    __slots__ = ('_name',)

    def __init__(self, name: str):
        self._name = name

    def __repr__(self) -> str:
        return self._name

    def __reduce__(self):
        # keep identity across copy/pickle
        return self._name


# drop the current item and keep pulling
Skip = _Marker('Skip')
# nothing more will ever be produced
End = _Marker('End')


def is_marker(value: Any) -> bool:
    return value is Skip or value is End


# --- auto pack / unpack ---

def pack(value: Any) -> tuple:
    """a tuple result is a multi-value step, anything else is a single value"""
    return value if isinstance(value, tuple) else (value,)


def unpack(values: tuple) -> Any:
    return values[0] if len(values) == 1 else values


def apply(func: Callable, values: tuple) -> Any:
    """call a user callback with one value, or with the tuple spread as arguments"""
    if len(values) == 1:
        return func(values[0])
    return func(*values)

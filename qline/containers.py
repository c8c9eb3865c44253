"""
guarded list and dict variants.

typed collections check every element, key and value against a set of
accepted types; read-only collections refuse every mutation. both stay plain
list/dict subclasses, so a query can use them directly as a source.
"""
from .types import *


class ReadOnlyError(TypeError):
    """raised by any mutating call on a read-only collection"""

    def __init__(self, message: str = "collection is read-only"):
        super().__init__(message)


def _as_types(accepted: Union[Type, Iterable[Type]]) -> Tuple[Type, ...]:
    types = (accepted,) if isinstance(accepted, type) else tuple(accepted)
    if not types or not all(isinstance(t, type) for t in types):
        raise TypeError("accepted types must be a type or a collection of types")
    return types


def _check(value: Any, accepted: Tuple[Type, ...], role: str = "value") -> Any:
    if not isinstance(value, accepted):
        names = ", ".join(t.__name__ for t in accepted)
        raise TypeError(f"{role} must be one of ({names}), got {type(value).__name__}")
    return value


# --- typed ---

class TypedList(list):
    """a list accepting only instances of the declared types"""

    def __init__(self, accepted: Union[Type, Iterable[Type]], items: Iterable[Any] = ()):
        self.accepted = _as_types(accepted)
        super().__init__(_check(item, self.accepted) for item in items)

    def append(self, item: Any) -> None:
        super().append(_check(item, self.accepted))

    def insert(self, index: int, item: Any) -> None:
        super().insert(index, _check(item, self.accepted))

    def extend(self, items: Iterable[Any]) -> None:
        super().extend([_check(item, self.accepted) for item in items])

    def __iadd__(self, items: Iterable[Any]) -> 'TypedList':
        self.extend(items)
        return self

    def __setitem__(self, index, value) -> None:
        if isinstance(index, slice):
            value = [_check(item, self.accepted) for item in value]
        else:
            _check(value, self.accepted)
        super().__setitem__(index, value)


class TypedDict(dict):
    """a dict accepting only keys and values of the declared types"""

    def __init__(self, key_types: Union[Type, Iterable[Type]],
                 value_types: Union[Type, Iterable[Type]], items: Any = ()):
        self.key_types = _as_types(key_types)
        self.value_types = _as_types(value_types)
        super().__init__()
        self.update(items)

    def __setitem__(self, key, value) -> None:
        _check(key, self.key_types, "key")
        _check(value, self.value_types, "value")
        super().__setitem__(key, value)

    def setdefault(self, key, default=None):
        if key not in self:
            self[key] = default
        return self[key]

    def update(self, items: Any = (), **kwargs) -> None:
        pairs = items.items() if hasattr(items, 'items') else items
        for key, value in pairs:
            self[key] = value
        for key, value in kwargs.items():
            self[key] = value

    def __ior__(self, items: Any) -> 'TypedDict':
        self.update(items)
        return self


# --- read-only ---

def _refuse(self, *args, **kwargs):
    raise ReadOnlyError()


class ReadOnlyList(list):
    """a list that can be read and iterated but never changed"""

    def __init__(self, items: Iterable[Any] = ()):
        super().__init__(items)

    append = insert = extend = remove = pop = clear = sort = reverse = _refuse
    __setitem__ = __delitem__ = __iadd__ = __imul__ = _refuse


class ReadOnlyDict(dict):
    """a dict that can be read and iterated but never changed"""

    def __init__(self, items: Any = (), **kwargs):
        super().__init__(items, **kwargs)

    update = setdefault = pop = popitem = clear = _refuse
    __setitem__ = __delitem__ = __ior__ = _refuse

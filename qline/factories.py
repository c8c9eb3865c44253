import typing
from .types import *
from .sources import Chain, range_values

if typing.TYPE_CHECKING:
    from .query import Query

def from_iterable(data: Any, arity: Optional[int] = None) -> 'Query[T]':
    """create a query over any enumerable source; mappings default to (key, value) pairs"""
    from .query import Query
    return Query(data, arity)

def from_range(start: Union[int, float], end: Union[int, float],
               step: Union[int, float] = 1) -> 'Query[Union[int, float]]':
    """create a query over start..end inclusive; the step must move towards end"""
    from .query import Query
    return Query(range_values(start, end, step))

def repeat(item: T, count: int) -> 'Query[T]':
    """create query with repeated item"""
    from .query import Query
    if count < 0:
        raise ValueError("repeat count must not be negative")
    return Query([item] * count)

def empty() -> 'Query[Any]':
    """create empty query"""
    from .query import Query
    return Query([])

def chain(*sources: Any) -> Chain:
    """a source enumerating each of sources in turn; wrap it in a query to chain operators"""
    return Chain(*sources)

# --- aliases ---
qline = from_iterable
Q = from_iterable
q = from_iterable

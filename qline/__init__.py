"""
             ___  _  _
     __ _   / / |(_)| |_ _  ___
    / _` | / /| || || ' \| |/ -_)
    \__, |/_/ |_||_||_||_|_|\___|
       |_|
"""

# expose the main classes
from .query import Query, OrderedQuery

# expose the control markers
from .types import Skip, End

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    repeat,
    empty,
    chain,
    qline,
    Q
)

# expose supporting sources and collections
from .sources import Chain, adapt
from .containers import TypedList, TypedDict, ReadOnlyList, ReadOnlyDict, ReadOnlyError
from .trie import Trie

# define what `import *` does
__all__ = [
    "Query",
    "OrderedQuery",
    "Skip",
    "End",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "chain",
    "qline",
    "Q",
    "Chain",
    "adapt",
    "TypedList",
    "TypedDict",
    "ReadOnlyList",
    "ReadOnlyDict",
    "ReadOnlyError",
    "Trie"
]

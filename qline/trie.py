from .types import *


class _TrieNode:
    __slots__ = ('children', 'terminal')

    def __init__(self):
        self.children: Dict[str, '_TrieNode'] = {}
        self.terminal = False


class Trie:
    """
    a set of strings indexed by prefix.
    iteration yields the stored keys in lexical order, so a trie can be the
    source of a query:

        Q(trie).where(lambda word: len(word) > 3).to_array()
    """

    def __init__(self, keys: Iterable[str] = ()):
        self._root = _TrieNode()
        self._count = 0
        for key in keys:
            self.insert(key)

    def _find(self, prefix: str) -> Optional[_TrieNode]:
        node = self._root
        for char in prefix:
            node = node.children.get(char)
            if node is None:
                return None
        return node

    def insert(self, key: str) -> bool:
        """add key; returns False if it was already present"""
        if not isinstance(key, str):
            raise TypeError(f"trie keys must be str, got {type(key).__name__}")
        node = self._root
        for char in key:
            node = node.children.setdefault(char, _TrieNode())
        if node.terminal:
            return False
        node.terminal = True
        self._count += 1
        return True

    def contains(self, key: str) -> bool:
        node = self._find(key)
        return node is not None and node.terminal

    __contains__ = contains

    def with_prefix(self, prefix: str) -> List[str]:
        """all stored keys starting with prefix"""
        node = self._find(prefix)
        if node is None:
            return []
        return list(self._walk(node, prefix))

    def delete(self, key: str) -> None:
        """remove key, pruning branches that no longer lead anywhere"""
        path = [self._root]
        for char in key:
            node = path[-1].children.get(char)
            if node is None:
                raise KeyError(key)
            path.append(node)
        if not path[-1].terminal:
            raise KeyError(key)
        path[-1].terminal = False
        self._count -= 1
        # prune from the leaf upwards
        for depth in range(len(key), 0, -1):
            node = path[depth]
            if node.terminal or node.children:
                break
            del path[depth - 1].children[key[depth - 1]]

    def count(self) -> int:
        return self._count

    def clear(self) -> None:
        self._root = _TrieNode()
        self._count = 0

    def _walk(self, node: _TrieNode, prefix: str) -> Iterator[str]:
        # explicit stack, children visited in lexical order
        stack = [(node, prefix)]
        while stack:
            current, text = stack.pop()
            if current.terminal:
                yield text
            for char in sorted(current.children, reverse=True):
                stack.append((current.children[char], text + char))

    def __iter__(self) -> Iterator[str]:
        return self._walk(self._root, "")

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f"Trie(count={self._count})"

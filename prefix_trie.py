"""
Prefix Trie: uncompressed, one edge per text unit.

Techniques used:
  - Accumulated values: every node stores the full string it represents, so
    enumeration never has to re-thread the path from the root.
  - Iterative traversal: lookups walk a loop and subtree collection uses an
    explicit stack, so the call stack stays constant on deep tries.
  - Pluggable text units: edges are keyed by whatever a splitter yields
    (code points by default, or base-plus-combining-mark clusters).

Complexity (n = key length in units, m = nodes under the prefix):
  insert / search / contains  O(n)
  autocomplete                O(n + m)
"""

from __future__ import annotations

import logging
import unicodedata
from typing import Callable, Iterable, Iterator

logger = logging.getLogger(__name__)

Splitter = Callable[[str], Iterable[str]]


# ---------------------------------------------------------------------------
# Text units
# ---------------------------------------------------------------------------


def split_codepoints(text: str) -> Iterator[str]:
    """Yield one code point at a time."""
    return iter(text)


def split_clusters(text: str) -> Iterator[str]:
    """Yield a base code point together with the combining marks after it.

    >>> [len(unit) for unit in split_clusters("cafe\\u0301s")]
    [1, 1, 1, 2, 1]
    """
    cluster = ""
    for ch in text:
        if cluster and unicodedata.combining(ch):
            cluster += ch
            continue
        if cluster:
            yield cluster
        cluster = ch
    if cluster:
        yield cluster


SPLITTERS: dict[str, Splitter] = {
    "codepoint": split_codepoints,
    "cluster": split_clusters,
}


# ---------------------------------------------------------------------------
# Nodes
# ---------------------------------------------------------------------------


class TrieNode:
    """One position in the trie, standing for the prefix in ``value``."""

    __slots__ = ("_value", "is_terminal", "children")

    def __init__(self, value: str = "") -> None:
        self._value = value
        self.is_terminal = False
        self.children: dict[str, TrieNode] = {}

    @property
    def value(self) -> str:
        return self._value

    def child(self, unit: str) -> TrieNode:
        """Return the child for *unit*, creating it if absent."""
        node = self.children.get(unit)
        if node is None:
            node = TrieNode(self._value + unit)
            self.children[unit] = node
        return node

    def __repr__(self) -> str:
        return (
            f"TrieNode(value={self._value!r}, is_terminal={self.is_terminal}, "
            f"children={len(self.children)})"
        )


# ---------------------------------------------------------------------------
# Trie
# ---------------------------------------------------------------------------


class Trie:
    """A prefix tree over strings with exact and prefix lookups.

    >>> t = Trie()
    >>> for w in ("app", "apple", "application"):
    ...     t.insert(w)
    >>> t.search("app"), t.search("ap")
    (True, False)
    >>> t.contains("ap")
    True
    >>> sorted(t.autocomplete("appl"))
    ['apple', 'application']
    """

    def __init__(self, split: Splitter = split_codepoints) -> None:
        self._root = TrieNode()
        self._split = split
        self._size = 0
        self._nodes = 1
        logger.debug("Created trie with splitter %s", getattr(split, "__name__", split))

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def insert(self, word: str) -> None:
        """Add *word*; inserting it again changes nothing."""
        node = self._root
        for unit in self._split(word):
            if unit not in node.children:
                self._nodes += 1
            node = node.child(unit)
        if not node.is_terminal:
            node.is_terminal = True
            self._size += 1
            logger.debug("Inserted %r", word)

    def search(self, word: str) -> bool:
        """Return ``True`` if *word* itself was inserted."""
        node = self._find_node(word)
        return node is not None and node.is_terminal

    def contains(self, prefix: str) -> bool:
        """Return ``True`` if some inserted word starts with *prefix*."""
        node = self._find_node(prefix)
        # Only the root can exist without lying on an inserted word.
        return node is not None and (node.is_terminal or bool(node.children))

    def autocomplete(self, prefix: str) -> list[str]:
        """Return every inserted word that begins with *prefix* (unordered)."""
        return list(self.iter_prefix(prefix))

    def iter_prefix(self, prefix: str) -> Iterator[str]:
        """Yield words beginning with *prefix*, lazily."""
        node = self._find_node(prefix)
        if node is None:
            return
        stack = [node]
        while stack:
            current = stack.pop()
            if current.is_terminal:
                yield current.value
            stack.extend(current.children.values())

    @property
    def root(self) -> TrieNode:
        return self._root

    @property
    def node_count(self) -> int:
        """Number of nodes, the root included."""
        return self._nodes

    def __len__(self) -> int:
        return self._size

    def __contains__(self, word: str) -> bool:
        return self.search(word)

    def __iter__(self) -> Iterator[str]:
        return self.iter_prefix("")

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _find_node(self, key: str) -> TrieNode | None:
        """Walk the trie following *key*; return the landing node or None."""
        node = self._root
        for unit in self._split(key):
            node = node.children.get(unit)
            if node is None:
                return None
        return node

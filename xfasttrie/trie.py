"""An X-fast trie keyed by 32-bit unsigned integers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Optional, TypeVar

V = TypeVar("V")

KEY_BITS = 32
_KEY_LIMIT = 1 << KEY_BITS


@dataclass(eq=False)
class _Leaf(Generic[V]):
    """A stored key; leaves form a doubly linked list in key order."""

    key: int
    value: V
    prev: Optional["_Leaf"] = None
    next: Optional["_Leaf"] = None


@dataclass(eq=False)
class _Node:
    """An internal trie node.

    ``jump`` is set only while the node has a single child: it then points to
    the smallest leaf below the node when the left child is missing, and to
    the largest when the right child is missing.
    """

    children: list = field(default_factory=lambda: [None, None])
    jump: Optional[_Leaf] = None


def _check_key(key: int) -> int:
    if not isinstance(key, int) or isinstance(key, bool):
        raise TypeError(f"key must be an int, not {type(key).__name__}")
    if not 0 <= key < _KEY_LIMIT:
        raise ValueError(f"key {key} is outside 0..{_KEY_LIMIT - 1}")
    return key


class XFastTrie(Generic[V]):
    """Ordered map from 32-bit unsigned keys to values with fast predecessor lookup."""

    def __init__(self):
        self._root = _Node()
        # _levels[n] maps every stored n-bit prefix to its node; the last
        # level holds the leaves themselves.
        self._levels: list[dict] = [{} for _ in range(KEY_BITS + 1)]
        self._levels[0][0] = self._root
        self._min: Optional[_Leaf] = None
        self._max: Optional[_Leaf] = None

    @property
    def _leaves(self) -> dict:
        return self._levels[KEY_BITS]

    def insert(self, key: int, value: V) -> bool:
        """Store ``value`` under ``key``; return False if the key was already present."""
        key = _check_key(key)
        if key in self._leaves:
            return False

        pred = self._predecessor_leaf(key)
        succ = pred.next if pred is not None else self._min
        leaf = _Leaf(key, value, pred, succ)
        if pred is None:
            self._min = leaf
        else:
            pred.next = leaf
        if succ is None:
            self._max = leaf
        else:
            succ.prev = leaf

        node = self._root
        for depth in range(KEY_BITS):
            shift = KEY_BITS - 1 - depth
            bit = (key >> shift) & 1
            child = node.children[bit]
            if child is None:
                child = leaf if depth == KEY_BITS - 1 else _Node()
                node.children[bit] = child
                self._levels[depth + 1][key >> shift] = child
            self._update_jump(node, leaf)
            node = child
        return True

    @staticmethod
    def _update_jump(node: _Node, leaf: _Leaf) -> None:
        left, right = node.children
        if left is not None and right is not None:
            node.jump = None
        elif left is None:
            if node.jump is None or leaf.key < node.jump.key:
                node.jump = leaf
        elif node.jump is None or leaf.key > node.jump.key:
            node.jump = leaf

    def get(self, key: int) -> Optional[V]:
        """Return the value stored under ``key``, or None."""
        leaf = self._leaves.get(_check_key(key))
        return leaf.value if leaf is not None else None

    def contains(self, key: int) -> bool:
        """Return whether ``key`` is stored."""
        return _check_key(key) in self._leaves

    def __contains__(self, key: int) -> bool:
        return self.contains(key)

    def predecessor(self, key: int) -> Optional[int]:
        """Return the largest stored key not greater than ``key``, or None."""
        leaf = self._predecessor_leaf(_check_key(key))
        return leaf.key if leaf is not None else None

    def _predecessor_leaf(self, key: int) -> Optional[_Leaf]:
        leaf = self._leaves.get(key)
        if leaf is not None:
            return leaf
        length = self.longest_prefix_search(key)
        node = self._levels[length][key >> (KEY_BITS - length)]
        if node.jump is None:
            return None
        if (key >> (KEY_BITS - 1 - length)) & 1:
            return node.jump
        return node.jump.prev

    def longest_prefix_search(self, key: int) -> int:
        """Return the length in bits of the longest stored prefix of ``key``."""
        key = _check_key(key)
        low, high = 0, KEY_BITS
        while low < high:
            mid = (low + high + 1) // 2
            if (key >> (KEY_BITS - mid)) in self._levels[mid]:
                low = mid
            else:
                high = mid - 1
        return low
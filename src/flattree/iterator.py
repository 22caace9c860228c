"""Stateful cursor for walking a flat tree one step at a time."""
from __future__ import annotations

from . import tree_math


class TreeIterator:
    """Cursor over the flat index space.

    Tracks the current index together with its offset and ``factor``
    (``2 << depth``), so moves along a level are a single addition.
    Every move returns the new index.
    """

    def __init__(self, index: int = 0):
        self.index = 0
        self.offset = 0
        self.factor = 2
        self.seek(index)

    def __repr__(self) -> str:
        return f"TreeIterator(index={self.index}, depth={self.depth}, offset={self.offset})"

    @property
    def depth(self) -> int:
        return self.factor.bit_length() - 2

    def _set(self, index: int, depth: int) -> int:
        self.index = index
        self.offset = tree_math.offset_with_depth(index, depth)
        self.factor = 2 << depth
        return index

    def seek(self, index: int) -> int:
        return self._set(index, tree_math.depth(index))

    def is_left(self) -> bool:
        return self.offset & 0x01 == 0

    def is_right(self) -> bool:
        return not self.is_left()

    def contains(self, index: int) -> bool:
        """Whether ``index`` lies within the subtree rooted at the current node."""
        half = self.factor >> 1
        return self.index - half < index < self.index + half

    def count_nodes(self) -> int:
        return self.factor - 1

    def count_leaves(self) -> int:
        return self.factor >> 1

    def prev(self) -> int:
        # Offset 0 has no left neighbour; stay put.
        if not self.offset:
            return self.index
        return self._set(self.index - self.factor, self.depth)

    def next(self) -> int:
        d = self.depth
        return self._set(tree_math.index(d, self.offset + 1), d)

    def sibling(self) -> int:
        d = self.depth
        return self._set(tree_math.sibling_with_depth(self.index, d), d)

    def parent(self) -> int:
        d = self.depth
        return self._set(tree_math.parent_with_depth(self.index, d), d + 1)

    def left_span(self) -> int:
        return self._set(tree_math.left_span_with_depth(self.index, self.depth), 0)

    def right_span(self) -> int:
        return self._set(tree_math.right_span_with_depth(self.index, self.depth), 0)

    def left_child(self) -> int | None:
        """Move to the left child. At a leaf nothing moves and None is returned."""
        d = self.depth
        child = tree_math.left_child_with_depth(self.index, d)
        if child is None:
            return None
        return self._set(child, d - 1)

    def right_child(self) -> int | None:
        d = self.depth
        child = tree_math.right_child_with_depth(self.index, d)
        if child is None:
            return None
        return self._set(child, d - 1)

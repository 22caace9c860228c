"""Index arithmetic for a complete binary tree laid out as a flat array.

Nodes are numbered in-order so that leaves and parents interleave::

    depth 2:          3
    depth 1:    1           5
    depth 0: 0     2     4     6

Even indices are leaves. The depth of a node is the number of trailing one
bits of its index, and its offset is its position among the nodes of the same
depth, counted from the left.

Every ``*_with_depth`` function trusts the caller's ``depth`` to equal
``depth(i)``; the plain variants compute it. Arguments and results are
unsigned 64-bit integers: results that do not fit raise IndexOverflowError.
"""
from __future__ import annotations

from .constants import LEAF_DEPTH, MAX_DEPTH, U64_MAX
from .exceptions import IndexOverflowError, InvalidIndexError, NotALeafBoundaryError


def _check_u64(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0 or value > U64_MAX:
        raise InvalidIndexError(f"{name} out of 64-bit range: {value}")
    return value


def _check_depth(depth: int) -> int:
    _check_u64("depth", depth)
    if depth > MAX_DEPTH:
        raise InvalidIndexError(f"depth must be at most {MAX_DEPTH}, got {depth}")
    return depth


def _fit(value: int, what: str) -> int:
    if value > U64_MAX:
        raise IndexOverflowError(f"{what} does not fit in 64 bits: {value:#x}")
    return value


# Coordinate conversion


def index(depth: int, offset: int) -> int:
    """Flat index of the node at (depth, offset).

    Parameters
    - depth: Node depth, 0 for leaves.
    - offset: Position among the nodes of that depth.

    Returns
    - ``(offset << (depth + 1)) | ((1 << depth) - 1)``.

    Raises
    - IndexOverflowError: If the index does not fit in 64 bits.
    """
    _check_u64("depth", depth)
    _check_u64("offset", offset)
    if depth > MAX_DEPTH:
        raise IndexOverflowError(f"no 64-bit index has depth {depth}")
    return _fit((offset << (depth + 1)) | ((1 << depth) - 1), "index")


def depth(i: int) -> int:
    """Number of trailing one bits of ``i``; 0 for leaves."""
    _check_u64("index", i)
    d = 0
    while i & 0x01:
        i >>= 1
        d += 1
    return d


def offset_with_depth(i: int, depth: int) -> int:
    # For a leaf this is i // 2.
    _check_u64("index", i)
    _check_depth(depth)
    return i >> (depth + 1)


def offset(i: int) -> int:
    return offset_with_depth(i, depth(i))


# Immediate relations


def parent_with_depth(i: int, depth: int) -> int:
    return index(depth + 1, offset_with_depth(i, depth) >> 1)


def parent(i: int) -> int:
    """Node one level up whose subtree contains ``i``."""
    return parent_with_depth(i, depth(i))


def sibling_with_depth(i: int, depth: int) -> int:
    return index(depth, offset_with_depth(i, depth) ^ 1)


def sibling(i: int) -> int:
    """The other child of ``parent(i)``."""
    return sibling_with_depth(i, depth(i))


def uncle_with_depth(i: int, depth: int) -> int:
    return sibling_with_depth(parent_with_depth(i, depth), depth + 1)


def uncle(i: int) -> int:
    """Sibling of the parent of ``i``."""
    return uncle_with_depth(i, depth(i))


def children_with_depth(i: int, depth: int) -> tuple[int, int] | None:
    _check_u64("index", i)
    if _check_depth(depth) == LEAF_DEPTH:
        return None
    off = offset_with_depth(i, depth) << 1
    return index(depth - 1, off), index(depth - 1, off + 1)


def children(i: int) -> tuple[int, int] | None:
    """(left, right) children of ``i``, or None when ``i`` is a leaf."""
    return children_with_depth(i, depth(i))


def left_child_with_depth(i: int, depth: int) -> int | None:
    _check_u64("index", i)
    if _check_depth(depth) == LEAF_DEPTH:
        return None
    return index(depth - 1, offset_with_depth(i, depth) << 1)


def left_child(i: int) -> int | None:
    return left_child_with_depth(i, depth(i))


def right_child_with_depth(i: int, depth: int) -> int | None:
    _check_u64("index", i)
    if _check_depth(depth) == LEAF_DEPTH:
        return None
    return index(depth - 1, (offset_with_depth(i, depth) << 1) + 1)


def right_child(i: int) -> int | None:
    return right_child_with_depth(i, depth(i))


# Span and size


def left_span_with_depth(i: int, depth: int) -> int:
    """Leftmost leaf under ``i`` (``i`` itself for a leaf)."""
    _check_u64("index", i)
    if _check_depth(depth) == LEAF_DEPTH:
        return i
    return offset_with_depth(i, depth) * (2 << depth)


def left_span(i: int) -> int:
    return left_span_with_depth(i, depth(i))


def right_span_with_depth(i: int, depth: int) -> int:
    """Rightmost leaf under ``i`` (``i`` itself for a leaf)."""
    _check_u64("index", i)
    if _check_depth(depth) == LEAF_DEPTH:
        return i
    return _fit((offset_with_depth(i, depth) + 1) * (2 << depth) - 2, "right span")


def right_span(i: int) -> int:
    return right_span_with_depth(i, depth(i))


def spans_with_depth(i: int, depth: int) -> tuple[int, int]:
    return left_span_with_depth(i, depth), right_span_with_depth(i, depth)


def spans(i: int) -> tuple[int, int]:
    """Inclusive (left, right) leaf range covered by the subtree at ``i``."""
    return spans_with_depth(i, depth(i))


def count_with_depth(i: int, depth: int) -> int:
    # Independent of i: every subtree of a given depth has the same size.
    _check_u64("index", i)
    _check_depth(depth)
    return _fit((2 << depth) - 1, "count")


def count(i: int) -> int:
    """Number of nodes in the subtree rooted at ``i``, ``2^(depth + 1) - 1``."""
    return count_with_depth(i, depth(i))


def is_leaf(i: int) -> bool:
    return _check_u64("index", i) & 0x01 == 0


def leaf_count_from_index(i: int) -> int:
    """Number of leaves in the prefix ``[0, i)``; ``i`` must be even."""
    if _check_u64("index", i) & 0x01:
        raise NotALeafBoundaryError(f"prefix length must be even, got {i}")
    return i >> 1


# Roots decomposition


def full_roots(i: int) -> list[int]:
    """Roots of the maximal full subtrees that exactly tile the prefix ``[0, i)``.

    The prefix holds ``i // 2`` leaves. Each set bit of that count, from the
    most significant down, is one full subtree, so the roots come out in
    ascending (left to right) order.

    Parameters
    - i: Prefix length in flat index units. Must be even.

    Returns
    - List of root indices, empty for ``i == 0``.

    Raises
    - NotALeafBoundaryError: If ``i`` is odd.
    """
    remaining = leaf_count_from_index(i)
    result: list[int] = []
    off = 0
    while remaining:
        factor = 1
        while factor * 2 <= remaining:
            factor *= 2
        result.append(off + factor - 1)
        off += 2 * factor
        remaining -= factor
    return result

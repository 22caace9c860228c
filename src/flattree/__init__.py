"""flattree: index arithmetic for flat (array-backed) complete binary trees."""

from .constants import LEAF_DEPTH, MAX_DEPTH, U64_MAX, WORD_BITS
from .exceptions import (
    FlatTreeError,
    IndexOverflowError,
    InvalidIndexError,
    NotALeafBoundaryError,
)
from .iterator import TreeIterator
from .tree_math import (
    children,
    children_with_depth,
    count,
    count_with_depth,
    depth,
    full_roots,
    index,
    is_leaf,
    leaf_count_from_index,
    left_child,
    left_child_with_depth,
    left_span,
    left_span_with_depth,
    offset,
    offset_with_depth,
    parent,
    parent_with_depth,
    right_child,
    right_child_with_depth,
    right_span,
    right_span_with_depth,
    sibling,
    sibling_with_depth,
    spans,
    spans_with_depth,
    uncle,
    uncle_with_depth,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "LEAF_DEPTH",
    "MAX_DEPTH",
    "U64_MAX",
    "WORD_BITS",
    "FlatTreeError",
    "IndexOverflowError",
    "InvalidIndexError",
    "NotALeafBoundaryError",
    "TreeIterator",
    "children",
    "children_with_depth",
    "count",
    "count_with_depth",
    "depth",
    "full_roots",
    "index",
    "is_leaf",
    "leaf_count_from_index",
    "left_child",
    "left_child_with_depth",
    "left_span",
    "left_span_with_depth",
    "offset",
    "offset_with_depth",
    "parent",
    "parent_with_depth",
    "right_child",
    "right_child_with_depth",
    "right_span",
    "right_span_with_depth",
    "sibling",
    "sibling_with_depth",
    "spans",
    "spans_with_depth",
    "uncle",
    "uncle_with_depth",
]

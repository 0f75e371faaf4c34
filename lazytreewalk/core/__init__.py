"""Core abstractions for lazytreewalk.

This package contains the node and adapter capabilities the traversal
consumes, the filter contract, and the traversal iterators themselves.
"""

from .node import TreeNode
from .adapter import TreeAdapter, NodeAdapter, CallableAdapter, AdapterLike, as_adapter
from .filter import (
    NodeFilter,
    NoFilter,
    NO_FILTER,
    FilterLike,
    PredicateFilter,
    VisitedFilter,
    AnyFilter,
    as_filter,
)
from .traverser import (
    TreeIterator,
    DepthFirstIterator,
    BreadthFirstIterator,
    create_iterator,
)

__all__ = [
    "TreeNode",
    "TreeAdapter",
    "NodeAdapter",
    "CallableAdapter",
    "AdapterLike",
    "as_adapter",
    "NodeFilter",
    "NoFilter",
    "NO_FILTER",
    "FilterLike",
    "PredicateFilter",
    "VisitedFilter",
    "AnyFilter",
    "as_filter",
    "TreeIterator",
    "DepthFirstIterator",
    "BreadthFirstIterator",
    "create_iterator",
]

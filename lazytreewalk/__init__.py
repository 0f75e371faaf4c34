"""lazytreewalk - Lazy depth-first and breadth-first tree traversal.

Walk any tree-shaped structure one node at a time:

    from lazytreewalk import depth_first_search, breadth_first_search

    for node in depth_first_search(root):
        ...

A filter can skip whole subtrees, and because filters may keep state it
can also deduplicate nodes shared between several parents:

    for node in breadth_first_search(root, VisitedFilter()):
        ...
"""

import logging

__version__ = "0.1.0"

from .core import (
    TreeNode,
    TreeAdapter,
    NodeAdapter,
    CallableAdapter,
    AdapterLike,
    NodeFilter,
    NoFilter,
    NO_FILTER,
    FilterLike,
    PredicateFilter,
    VisitedFilter,
    AnyFilter,
    TreeIterator,
    DepthFirstIterator,
    BreadthFirstIterator,
    create_iterator,
)
from .config import TraversalConfig, TraversalStrategy
from .errors import (
    TraversalError,
    TraversalExhaustedError,
    UnsupportedOperationError,
    InvalidConfigurationError,
)
from .api import (
    depth_first_search,
    breadth_first_search,
    traverse_tree,
    iterate,
    count_nodes,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Core
    "TreeNode",
    "TreeAdapter",
    "NodeAdapter",
    "CallableAdapter",
    "AdapterLike",
    "NodeFilter",
    "NoFilter",
    "NO_FILTER",
    "FilterLike",
    "PredicateFilter",
    "VisitedFilter",
    "AnyFilter",
    "TreeIterator",
    "DepthFirstIterator",
    "BreadthFirstIterator",
    "create_iterator",
    # Config
    "TraversalConfig",
    "TraversalStrategy",
    # Errors
    "TraversalError",
    "TraversalExhaustedError",
    "UnsupportedOperationError",
    "InvalidConfigurationError",
    # API
    "depth_first_search",
    "breadth_first_search",
    "traverse_tree",
    "iterate",
    "count_nodes",
]

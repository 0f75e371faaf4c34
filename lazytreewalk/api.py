"""High-level API for lazytreewalk.

Simple functional entry points over the iterator classes. Every call
builds a fresh iterator, so calling a function again restarts the walk;
an iterator itself is single-pass and forward-only.
"""

from typing import Any, Optional, Union

from .config import TraversalConfig, TraversalStrategy
from .core.adapter import AdapterLike
from .core.filter import FilterLike
from .core.traverser import ITERATORS, BreadthFirstIterator, DepthFirstIterator, TreeIterator
from .errors import InvalidConfigurationError


def depth_first_search(root: Any,
                       node_filter: Optional[FilterLike] = None,
                       adapter: Optional[AdapterLike] = None) -> DepthFirstIterator:
    """Walk ``root`` and its descendants in depth-first pre-order.

    Args:
        root: Starting node
        node_filter: NodeFilter or predicate; a node it ignores is skipped
            together with its subtree (None = no filtering)
        adapter: TreeAdapter or children callable
            (None = call ``node.get_children()``)

    Returns:
        Lazy single-pass iterator over the visible nodes

    Example:
        >>> for node in depth_first_search(root, VisitedFilter()):
        ...     print(node)
    """
    return DepthFirstIterator(root, node_filter, adapter)


def breadth_first_search(root: Any,
                         node_filter: Optional[FilterLike] = None,
                         adapter: Optional[AdapterLike] = None) -> BreadthFirstIterator:
    """Walk ``root`` and its descendants in breadth-first (level) order.

    Arguments as for ``depth_first_search``.

    Returns:
        Lazy single-pass iterator over the visible nodes
    """
    return BreadthFirstIterator(root, node_filter, adapter)


def traverse_tree(root: Any,
                  strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST,
                  node_filter: Optional[FilterLike] = None,
                  adapter: Optional[AdapterLike] = None) -> TreeIterator:
    """Walk a tree with a strategy chosen at runtime.

    Args:
        root: Starting node
        strategy: TraversalStrategy or its name ("dfs", "bfs", ...)
        node_filter: NodeFilter or predicate (None = no filtering)
        adapter: TreeAdapter or children callable

    Returns:
        Lazy single-pass iterator over the visible nodes

    Raises:
        ValueError: If the strategy name is not recognized
        InvalidConfigurationError: If the filter or adapter is unusable
    """
    config = TraversalConfig(
        strategy=TraversalStrategy.from_name(strategy),
        node_filter=node_filter,
        adapter=adapter,
    )
    return iterate(root, config)


def iterate(root: Any, config: TraversalConfig) -> TreeIterator:
    """Create the iterator described by a TraversalConfig.

    Raises:
        InvalidConfigurationError: If the config fails validation
    """
    errors = config.validate()
    if errors:
        raise InvalidConfigurationError(
            f"Invalid configuration: {'; '.join(errors)}"
        )
    iterator_class = ITERATORS[config.strategy]
    return iterator_class(root, config.node_filter, config.adapter)


def count_nodes(root: Any,
                strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST,
                node_filter: Optional[FilterLike] = None,
                adapter: Optional[AdapterLike] = None) -> int:
    """Count the nodes a traversal would produce.

    Both strategies visit the same set of nodes on a tree; with a stateful
    filter on a shared structure the count can depend on the order.
    """
    iterator = traverse_tree(root, strategy, node_filter, adapter)
    for _ in iterator:
        pass
    return iterator.produced_count

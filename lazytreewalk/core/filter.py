"""Node filters for lazytreewalk.

A filter decides, for every node the traversal reaches, whether that node
and its whole subtree are skipped. Filters may keep state between calls;
that is how shared nodes (and cycles) are handled: a filter that remembers
what it has already let through turns a graph walk into a tree walk.

The traversal guarantees:
- ``is_ignored`` is called exactly once per node-occurrence, i.e. once for
  every path along which the traversal reaches the node
- calls happen lazily, in traversal order, and never for nodes inside a
  subtree that was already ignored
- a node's children are not requested before its filter call returns
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Hashable, Optional, Set, Union


class NodeFilter(ABC):
    """Defines conditions for ignoring nodes during traversal."""

    @abstractmethod
    def is_ignored(self, node: Any) -> bool:
        """Check whether a node must be completely ignored.

        Ignoring a node also ignores every node reachable only through it.

        Args:
            node: Node the traversal just reached

        Returns:
            True if the node and its subtree should be skipped
        """
        pass


class NoFilter(NodeFilter):
    """Filter that never ignores anything."""

    def is_ignored(self, node: Any) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_FILTER"


NO_FILTER = NoFilter()

# Anything as_filter() accepts: a filter or a predicate returning True to ignore
FilterLike = Union[NodeFilter, Callable[[Any], Any]]


class PredicateFilter(NodeFilter):
    """Filter that ignores nodes matching a predicate.

    Example:
        >>> hidden = PredicateFilter(lambda node: node.name.startswith("."))
    """

    def __init__(self, predicate: Callable[[Any], Any]):
        """Initialize with a predicate.

        Args:
            predicate: Called with each node; truthy result ignores it
        """
        self.predicate = predicate

    def is_ignored(self, node: Any) -> bool:
        return bool(self.predicate(node))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.predicate!r})"


class VisitedFilter(NodeFilter):
    """Filter that ignores every node it has already let through.

    With this filter a node reachable along several paths is produced
    exactly once, at the first path the traversal order reaches, and its
    subtree is walked only once. It also makes cyclic structures finite.

    By default nodes are tracked by identity. Pass ``key`` to track them
    by a derived value instead (e.g. a path or a primary key), in which
    case distinct objects with equal keys count as the same node.

    One instance holds state across traversals; call ``reset()`` or use a
    fresh instance per traversal.
    """

    def __init__(self, key: Optional[Callable[[Any], Hashable]] = None):
        """Initialize the filter.

        Args:
            key: Optional function mapping a node to a hashable identity.
                None tracks the node objects themselves by identity.
        """
        self.key = key
        # id -> node; holding the node keeps its id from being reused
        self._seen_ids: Dict[int, Any] = {}
        self._seen_keys: Set[Hashable] = set()

    def is_ignored(self, node: Any) -> bool:
        if self.key is None:
            node_id = id(node)
            if node_id in self._seen_ids:
                return True
            self._seen_ids[node_id] = node
            return False

        node_key = self.key(node)
        if node_key in self._seen_keys:
            return True
        self._seen_keys.add(node_key)
        return False

    def __contains__(self, node: Any) -> bool:
        """Check whether a node has been let through already."""
        if self.key is None:
            return id(node) in self._seen_ids
        return self.key(node) in self._seen_keys

    def __len__(self) -> int:
        return self.seen_count

    @property
    def seen_count(self) -> int:
        """Number of distinct nodes let through so far."""
        if self.key is None:
            return len(self._seen_ids)
        return len(self._seen_keys)

    def reset(self) -> None:
        """Forget every node seen so far."""
        self._seen_ids.clear()
        self._seen_keys.clear()


class AnyFilter(NodeFilter):
    """Filter that ignores a node when any of its member filters does.

    Members are asked in order and asking stops at the first one that
    ignores the node, so a stateful filter placed after it never records
    that occurrence.
    """

    def __init__(self, *filters: FilterLike):
        self.filters = tuple(as_filter(f) for f in filters)

    def is_ignored(self, node: Any) -> bool:
        return any(f.is_ignored(node) for f in self.filters)

    def __repr__(self) -> str:
        members = ", ".join(repr(f) for f in self.filters)
        return f"{self.__class__.__name__}({members})"


def as_filter(node_filter: Optional[Any]) -> NodeFilter:
    """Coerce a filter argument to a NodeFilter.

    Args:
        node_filter: None for no filtering, a NodeFilter (or any object
            with an ``is_ignored`` method), or a predicate returning True
            for nodes to ignore

    Returns:
        NodeFilter instance

    Raises:
        TypeError: If the argument is neither a filter nor callable
    """
    if node_filter is None:
        return NO_FILTER
    if isinstance(node_filter, NodeFilter):
        return node_filter
    if callable(getattr(node_filter, "is_ignored", None)):
        # Duck-typed filter
        return node_filter
    if callable(node_filter):
        return PredicateFilter(node_filter)
    raise TypeError(
        f"Expected a NodeFilter or a predicate, got {type(node_filter).__name__}"
    )

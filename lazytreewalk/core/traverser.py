"""Lazy tree traversal iterators for lazytreewalk.

Both iterators are explicit state machines rather than recursive
generators: the frontier lives on the heap, so memory is bounded by the
depth of the tree (depth-first) or its width (breadth-first), and deep
trees never hit the recursion limit. Consumers pull one node at a time and
may stop at any point without cleanup.
"""

import logging
from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Deque, Dict, Iterator, List, Optional, Type, Union

from .adapter import AdapterLike, as_adapter
from .filter import FilterLike, as_filter
from ..config import TraversalStrategy
from ..errors import TraversalExhaustedError, UnsupportedOperationError


logger = logging.getLogger(__name__)

# Marks an exhausted child iterator
_END = object()


class TreeIterator(ABC):
    """Abstract base class for lazy traversal iterators.

    The iterator always holds one staged node: the next candidate to be
    produced. ``has_next()`` runs the filter on it, skipping ignored
    candidates, until a visible node is staged or the frontier is empty.
    ``__next__()`` hands out the staged node; the following one is staged
    on the next ``has_next()`` or pull.

    Iterators are single-pass: ``iter()`` returns the iterator itself.
    Create a new one to walk the tree again.
    """

    strategy_name = ""

    def __init__(self,
                 root: Any,
                 node_filter: Optional[FilterLike] = None,
                 adapter: Optional[AdapterLike] = None):
        """Initialize the iterator with the root staged.

        Args:
            root: Starting node; filtering it out yields an empty traversal
            node_filter: Filter deciding which subtrees to skip
                (None = no filtering)
            adapter: How to get a node's children
                (None = call ``node.get_children()``)
        """
        self.node_filter = as_filter(node_filter)
        self.adapter = as_adapter(adapter)
        self._current = root
        self._filter_applied = False
        self._done = False
        self._produced = 0
        # Set once a node is handed out; cleared when its step completes
        self._expand_pending = False
        self._advance_pending = False
        logger.debug("Created %s traversal from %r", self.strategy_name, root)

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        if not self.has_next():
            raise StopIteration
        self._produced += 1
        self._expand_pending = True
        self._advance_pending = True
        return self._current

    def has_next(self) -> bool:
        """Check whether another node can be produced.

        Calling this repeatedly without pulling does not advance the
        traversal past a visible node, and never queries the filter twice
        for the same occurrence.

        Stepping past the last produced node (fetching its children and
        staging the next candidate) happens here, so an error from a node
        or an adapter is raised by the pull after the one that delivered
        the previous node. A failed step resumes on the next call.

        Returns:
            True if the next pull will produce a node
        """
        if self._expand_pending:
            self._expand(self._current)
            self._expand_pending = False
        if self._advance_pending:
            self._move_to_next()
            self._advance_pending = False

        while True:
            if self._done:
                return False
            if self._filter_applied:
                return True
            if not self.node_filter.is_ignored(self._current):
                self._filter_applied = True
                return True
            self._move_to_next()

    def next_node(self) -> Any:
        """Produce the next node.

        Returns:
            The next visible node in traversal order

        Raises:
            TraversalExhaustedError: If the traversal has no more nodes
        """
        try:
            return next(self)
        except StopIteration:
            raise TraversalExhaustedError(
                f"{self.strategy_name} traversal has no more nodes"
            ) from None

    def remove(self) -> None:
        """Traversals are read-only.

        Raises:
            UnsupportedOperationError: Always
        """
        raise UnsupportedOperationError(
            f"{self.__class__.__name__} does not support removal"
        )

    @property
    def exhausted(self) -> bool:
        """True once the traversal is known to have no more nodes.

        This neither runs the filter nor steps past the last produced
        node, so it can still be False when nothing is left. Use
        ``has_next()`` for a definite answer.
        """
        return self._done

    @property
    def produced_count(self) -> int:
        """Number of nodes produced so far."""
        return self._produced

    def _finish(self) -> None:
        """Mark the traversal done and drop references to the tree."""
        self._done = True
        self._current = None
        self._clear_frontier()
        logger.debug(
            "%s traversal exhausted after %d node(s)",
            self.strategy_name, self._produced
        )

    def _stage(self, node: Any) -> None:
        self._current = node
        self._filter_applied = False

    @abstractmethod
    def _expand(self, node: Any) -> None:
        """Record a just-produced node so its children get visited."""
        pass

    @abstractmethod
    def _move_to_next(self) -> None:
        """Stage the next candidate node, or finish the traversal."""
        pass

    @abstractmethod
    def _clear_frontier(self) -> None:
        pass

    def __repr__(self) -> str:
        state = "exhausted" if self._done else f"produced={self._produced}"
        return f"{self.__class__.__name__}({state}, filter={self.node_filter!r})"


class DepthFirstIterator(TreeIterator):
    """Depth-first pre-order traversal.

    A node is produced, then its first child's whole subtree, then its
    second child's whole subtree, and so on. The frontier is a stack with
    one partially consumed child iterator per ancestor of the staged node.
    """

    strategy_name = "depth-first"

    def __init__(self,
                 root: Any,
                 node_filter: Optional[FilterLike] = None,
                 adapter: Optional[AdapterLike] = None):
        self._stack: List[Iterator[Any]] = []
        super().__init__(root, node_filter, adapter)

    def _expand(self, node: Any) -> None:
        self._stack.append(iter(self.adapter.get_children(node)))

    def _move_to_next(self) -> None:
        while self._stack:
            child = next(self._stack[-1], _END)
            if child is _END:
                self._stack.pop()
                continue
            self._stage(child)
            return
        self._finish()

    def _clear_frontier(self) -> None:
        self._stack.clear()


class BreadthFirstIterator(TreeIterator):
    """Breadth-first (level-order) traversal.

    Nodes come out in non-decreasing depth. Within a level they follow
    the order their parents were produced in, then each parent's child
    order. Produced nodes wait in a FIFO queue; their children are only
    requested when the queue reaches them.
    """

    strategy_name = "breadth-first"

    def __init__(self,
                 root: Any,
                 node_filter: Optional[FilterLike] = None,
                 adapter: Optional[AdapterLike] = None):
        self._queue: Deque[Any] = deque()
        self._children: Iterator[Any] = iter(())
        super().__init__(root, node_filter, adapter)

    def _expand(self, node: Any) -> None:
        self._queue.append(node)

    def _move_to_next(self) -> None:
        while True:
            child = next(self._children, _END)
            if child is not _END:
                self._stage(child)
                return
            if not self._queue:
                self._finish()
                return
            parent = self._queue.popleft()
            self._children = iter(self.adapter.get_children(parent))

    def _clear_frontier(self) -> None:
        self._queue.clear()
        self._children = iter(())


ITERATORS: Dict[TraversalStrategy, Type[TreeIterator]] = {
    TraversalStrategy.DEPTH_FIRST: DepthFirstIterator,
    TraversalStrategy.BREADTH_FIRST: BreadthFirstIterator,
}


# Factory function for creating iterators by name
def create_iterator(strategy: Union[TraversalStrategy, str],
                    root: Any,
                    node_filter: Optional[FilterLike] = None,
                    adapter: Optional[AdapterLike] = None) -> TreeIterator:
    """Create a traversal iterator by strategy name.

    Args:
        strategy: TraversalStrategy or its name (dfs, depth_first, bfs, ...)
        root: Starting node
        node_filter: Optional filter, see TreeIterator
        adapter: Optional adapter, see TreeIterator

    Returns:
        TreeIterator instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    iterator_class = ITERATORS[TraversalStrategy.from_name(strategy)]
    return iterator_class(root, node_filter, adapter)

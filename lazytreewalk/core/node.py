"""TreeNode abstraction for lazytreewalk.

A node only has to know its children. Nothing else about it is inspected
by the traversal, so any object with a ``get_children()`` method can be
walked; subclassing TreeNode is a convenience, not a requirement.
"""

from abc import ABC, abstractmethod
from typing import Iterable


class TreeNode(ABC):
    """Abstract base class for traversable nodes.

    The traversal never mutates a node. It calls ``get_children()`` once
    each time it steps into the node and consumes the result exactly once,
    in order.
    """

    @abstractmethod
    def get_children(self) -> Iterable["TreeNode"]:
        """Return the direct children of this node.

        The sequence must be ordered, finite and repeatable: calling this
        again has to yield an equivalent sequence. Returning a generator
        is fine since a fresh one is requested on every visit.

        Returns:
            Iterable of child nodes, possibly empty
        """
        pass

    def is_leaf(self) -> bool:
        """Check if this node has no children.

        Default implementation peeks at ``get_children()``.
        """
        for _ in self.get_children():
            return False
        return True

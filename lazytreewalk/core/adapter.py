"""TreeAdapter abstraction for lazytreewalk.

Adapters tell the traversal how to reach the children of a node. This
decouples the node representation from the traversal: nested dicts,
ASTs or third-party objects can be walked without wrapping every node.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, Optional, Union


class TreeAdapter(ABC):
    """Abstract adapter for navigating a specific kind of tree structure."""

    @abstractmethod
    def get_children(self, node: Any) -> Iterable[Any]:
        """Get the children of the given node.

        The traversal requests a fresh iterable every time it steps into
        a node. Returning a lazy iterator is encouraged; the traversal
        consumes it one child at a time.

        Args:
            node: The parent node

        Returns:
            Iterable yielding the child nodes in order
        """
        pass


class NodeAdapter(TreeAdapter):
    """Default adapter: asks the node itself via ``node.get_children()``."""

    def get_children(self, node: Any) -> Iterable[Any]:
        return node.get_children()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class CallableAdapter(TreeAdapter):
    """Adapter backed by a plain function ``node -> iterable of children``.

    Example:
        >>> tree = {"a": {"b": {}, "c": {}}}
        >>> adapter = CallableAdapter(lambda item: item[1].items())
    """

    def __init__(self, children: Callable[[Any], Iterable[Any]]):
        """Initialize with a children function.

        Args:
            children: Called with a node, returns its children
        """
        self.children = children

    def get_children(self, node: Any) -> Iterable[Any]:
        return self.children(node)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.children!r})"


DEFAULT_ADAPTER = NodeAdapter()

# Anything as_adapter() accepts
AdapterLike = Union[TreeAdapter, Callable[[Any], Iterable[Any]]]


def as_adapter(adapter: Optional[Any]) -> TreeAdapter:
    """Coerce an adapter argument to a TreeAdapter.

    Args:
        adapter: None for the default, a TreeAdapter, any object with a
            ``get_children(node)`` method, or a callable returning children

    Returns:
        TreeAdapter instance

    Raises:
        TypeError: If the argument cannot be used to reach children
    """
    if adapter is None:
        return DEFAULT_ADAPTER
    if isinstance(adapter, TreeAdapter):
        return adapter
    if callable(getattr(adapter, "get_children", None)):
        return CallableAdapter(adapter.get_children)
    if callable(adapter):
        return CallableAdapter(adapter)
    raise TypeError(
        f"Expected a TreeAdapter or a children callable, got {type(adapter).__name__}"
    )

"""Test fixtures for lazytreewalk consumers.

Small in-memory trees and an instrumented filter, so traversal order and
filter call patterns can be asserted without building a real structure.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional

from ..core.filter import NodeFilter
from ..core.node import TreeNode


class SimpleNode(TreeNode):
    """Named in-memory node with an ordered child list.

    The same SimpleNode may be appended under several parents to model
    shared nodes. ``children_requests`` counts calls to ``get_children()``
    so tests can check that the traversal stays lazy.

    Example:
        root = SimpleNode("A")
        b = root.add("B")
        b.add("D")
    """

    def __init__(self, name: str, children: Optional[Iterable["SimpleNode"]] = None):
        self.name = name
        self.children: List["SimpleNode"] = list(children or [])
        self.children_requests = 0

    def get_children(self) -> Iterable["SimpleNode"]:
        self.children_requests += 1
        return iter(self.children)

    def add(self, child: Any) -> "SimpleNode":
        """Append a child (a SimpleNode or a name) and return it."""
        if not isinstance(child, SimpleNode):
            child = SimpleNode(child)
        self.children.append(child)
        return child

    def __repr__(self) -> str:
        return f"SimpleNode({self.name!r})"


def build_tree(spec: Mapping[str, Any]) -> SimpleNode:
    """Build a SimpleNode tree from nested mappings.

    Args:
        spec: Mapping with exactly one key (the root name) whose value is a
            mapping of child name to grandchildren, recursively. ``None``
            or an empty mapping marks a leaf.

    Returns:
        The root SimpleNode

    Example:
        >>> root = build_tree({"A": {"B": {"D": None, "E": None}, "C": None}})
        >>> [c.name for c in root.children]
        ['B', 'C']
    """
    if len(spec) != 1:
        raise ValueError(f"Tree spec needs exactly one root, got {len(spec)}")
    (name, children), = spec.items()
    return _build(name, children)


def _build(name: str, children: Optional[Mapping[str, Any]]) -> SimpleNode:
    node = SimpleNode(name)
    for child_name, grandchildren in (children or {}).items():
        node.children.append(_build(child_name, grandchildren))
    return node


class RecordingFilter(NodeFilter):
    """Filter that records every query and ignores a fixed set of names.

    Attributes:
        queries: Names of the nodes queried, in call order
    """

    def __init__(self, ignore: Iterable[str] = ()):
        self.ignore = set(ignore)
        self.queries: List[str] = []

    def is_ignored(self, node: Any) -> bool:
        name = getattr(node, "name", node)
        self.queries.append(name)
        return name in self.ignore

    def query_counts(self) -> Dict[str, int]:
        """Return how many times each name was queried."""
        counts: Dict[str, int] = {}
        for name in self.queries:
            counts[name] = counts.get(name, 0) + 1
        return counts

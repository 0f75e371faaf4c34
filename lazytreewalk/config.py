"""Configuration system for lazytreewalk.

A TraversalConfig bundles the choices that parameterize a traversal:
which order to walk in, which filter decides what to skip, and which
adapter reaches the children. ``validate()`` reports problems up front so
they surface before the first pull rather than halfway through a walk.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Union


class TraversalStrategy(Enum):
    """How to traverse the tree."""
    DEPTH_FIRST = "dfs"      # Parent before children, subtree by subtree
    BREADTH_FIRST = "bfs"    # Level by level

    @classmethod
    def from_name(cls, name: Union["TraversalStrategy", str]) -> "TraversalStrategy":
        """Parse a strategy from an enum member, value or name.

        Accepts ``"dfs"``, ``"depth_first"``, ``"DEPTH_FIRST"``,
        ``"depth-first"`` and the breadth-first equivalents.

        Raises:
            ValueError: If the name is not recognized
        """
        if isinstance(name, cls):
            return name

        normalized = str(name).strip().lower().replace("-", "_")
        for strategy in cls:
            if normalized in (strategy.value, strategy.name.lower()):
                return strategy

        valid = ", ".join(s.value for s in cls)
        raise ValueError(f"Unknown traversal strategy: {name}. Choose from: {valid}")


@dataclass
class TraversalConfig:
    """Complete traversal configuration.

    Attributes:
        strategy: Traversal order
        node_filter: Filter object or predicate (None = no filtering)
        adapter: Adapter object or children callable
            (None = call ``node.get_children()``)
    """

    strategy: TraversalStrategy = TraversalStrategy.DEPTH_FIRST
    node_filter: Optional[Any] = None
    adapter: Optional[Any] = None

    def validate(self) -> List[str]:
        """Validate configuration consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.strategy, TraversalStrategy):
            errors.append(
                f"strategy must be a TraversalStrategy, got {self.strategy!r}"
            )

        if self.node_filter is not None:
            if not (callable(getattr(self.node_filter, "is_ignored", None))
                    or callable(self.node_filter)):
                errors.append(
                    "node_filter must have an is_ignored(node) method or be callable"
                )

        if self.adapter is not None:
            if not (callable(getattr(self.adapter, "get_children", None))
                    or callable(self.adapter)):
                errors.append(
                    "adapter must have a get_children(node) method or be callable"
                )

        return errors

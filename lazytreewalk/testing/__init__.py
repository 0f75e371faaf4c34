"""Testing utilities for lazytreewalk consumers."""

from .fixtures import SimpleNode, RecordingFilter, build_tree

__all__ = ["SimpleNode", "RecordingFilter", "build_tree"]

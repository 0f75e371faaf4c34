"""Unit tests for the iterator contract of lazytreewalk traversals.

Covers availability checks, exhaustion, the read-only guarantee and how
errors from filters and nodes surface.
"""

import unittest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from lazytreewalk import (
    depth_first_search,
    breadth_first_search,
    NodeFilter,
    TraversalError,
    TraversalExhaustedError,
    UnsupportedOperationError,
)
from lazytreewalk.testing import SimpleNode, RecordingFilter, build_tree


SEARCHES = (depth_first_search, breadth_first_search)


def reference_tree() -> SimpleNode:
    return build_tree({"A": {"B": {"D": None, "E": None}, "C": None}})


class FailOnceFilter(NodeFilter):
    """Raises the first time it sees a given name, then lets it through."""

    def __init__(self, name):
        self.name = name
        self.failed = False

    def is_ignored(self, node):
        if node.name == self.name and not self.failed:
            self.failed = True
            raise RuntimeError(f"cannot decide on {node.name}")
        return False


class BrokenNode(SimpleNode):
    def get_children(self):
        raise OSError("children unavailable")


class FlakyNode(SimpleNode):
    """Fails to list its children the first time it is asked."""

    def get_children(self):
        if self.children_requests == 0:
            self.children_requests += 1
            raise OSError(f"cannot list {self.name}")
        return super().get_children()


def pull_all(iterator):
    """Drain an iterator, recording errors as "<err>" and carrying on."""
    pulled = []
    while True:
        try:
            pulled.append(next(iterator).name)
        except StopIteration:
            return pulled
        except OSError:
            pulled.append("<err>")


class TestHasNext(unittest.TestCase):
    """Test availability checks."""

    def test_has_next_is_idempotent(self):
        """Repeated checks neither advance nor re-query the filter."""
        for search in SEARCHES:
            recorder = RecordingFilter()
            iterator = search(reference_tree(), recorder)

            self.assertTrue(iterator.has_next())
            self.assertTrue(iterator.has_next())
            self.assertTrue(iterator.has_next())
            self.assertEqual(recorder.queries, ["A"])
            self.assertEqual(next(iterator).name, "A")

    def test_has_next_skips_ignored_nodes(self):
        for search in SEARCHES:
            recorder = RecordingFilter(ignore={"A"})
            iterator = search(reference_tree(), recorder)

            self.assertFalse(iterator.has_next())
            self.assertFalse(iterator.has_next())
            self.assertEqual(recorder.queries, ["A"])

    def test_has_next_false_after_last_node(self):
        for search in SEARCHES:
            iterator = search(reference_tree())
            list(iterator)
            self.assertFalse(iterator.has_next())

    def test_exhausted_property(self):
        iterator = depth_first_search(SimpleNode("solo"))
        self.assertFalse(iterator.exhausted)
        next(iterator)
        # Stepping past the last node waits for the next check or pull
        self.assertFalse(iterator.exhausted)
        self.assertFalse(iterator.has_next())
        self.assertTrue(iterator.exhausted)
        self.assertEqual(iterator.produced_count, 1)


class TestExhaustion(unittest.TestCase):
    """Test pulling past the end."""

    def test_next_raises_stop_iteration(self):
        for search in SEARCHES:
            iterator = search(SimpleNode("solo"))
            next(iterator)
            with self.assertRaises(StopIteration):
                next(iterator)

    def test_next_node_raises_exhausted_error(self):
        for search in SEARCHES:
            iterator = search(SimpleNode("solo"))
            self.assertEqual(iterator.next_node().name, "solo")
            with self.assertRaises(TraversalExhaustedError):
                iterator.next_node()
            # Stays exhausted
            with self.assertRaises(TraversalExhaustedError):
                iterator.next_node()

    def test_exhausted_error_hierarchy(self):
        self.assertTrue(issubclass(TraversalExhaustedError, TraversalError))
        self.assertTrue(issubclass(TraversalExhaustedError, LookupError))

    def test_iterators_are_single_pass(self):
        for search in SEARCHES:
            iterator = search(reference_tree())
            self.assertIs(iter(iterator), iterator)
            self.assertEqual(len(list(iterator)), 5)
            self.assertEqual(list(iterator), [])

    def test_new_call_restarts(self):
        root = reference_tree()
        for search in SEARCHES:
            self.assertEqual(list(search(root)), list(search(root)))

    def test_early_stop(self):
        """Stopping early leaves the rest of the tree untouched."""
        root = reference_tree()
        iterator = depth_first_search(root)
        self.assertEqual(next(iterator).name, "A")
        self.assertEqual(root.children[1].children_requests, 0)


class TestRemoval(unittest.TestCase):
    """Test that traversals are read-only."""

    def test_remove_always_fails(self):
        for search in SEARCHES:
            iterator = search(reference_tree())
            with self.assertRaises(UnsupportedOperationError):
                iterator.remove()
            next(iterator)
            with self.assertRaises(UnsupportedOperationError):
                iterator.remove()
            list(iterator)
            with self.assertRaises(UnsupportedOperationError):
                iterator.remove()

    def test_unsupported_error_hierarchy(self):
        self.assertTrue(issubclass(UnsupportedOperationError, TraversalError))
        self.assertTrue(issubclass(UnsupportedOperationError, NotImplementedError))


class TestErrorPropagation(unittest.TestCase):
    """Errors from filters and nodes pass through unchanged."""

    def test_filter_error_propagates_and_retries(self):
        iterator = depth_first_search(reference_tree(), FailOnceFilter("C"))
        produced = [next(iterator).name for _ in range(4)]
        self.assertEqual(produced, ["A", "B", "D", "E"])

        with self.assertRaises(RuntimeError):
            next(iterator)

        # The staged node is queried again on the next pull
        self.assertEqual(next(iterator).name, "C")
        self.assertFalse(iterator.has_next())

    def test_filter_error_in_breadth_first(self):
        iterator = breadth_first_search(reference_tree(), FailOnceFilter("B"))
        self.assertEqual(next(iterator).name, "A")
        with self.assertRaises(RuntimeError):
            iterator.has_next()
        self.assertEqual([n.name for n in iterator], ["B", "C", "D", "E"])

    def test_node_error_propagates(self):
        root = SimpleNode("root", [BrokenNode("broken")])

        with self.assertRaises(OSError):
            list(depth_first_search(root))
        with self.assertRaises(OSError):
            list(breadth_first_search(root))

    def flaky_tree(self):
        """A[B (fails to list once), C[F]]"""
        return SimpleNode("A", [
            FlakyNode("B"),
            SimpleNode("C", [SimpleNode("F")]),
        ])

    def test_node_error_does_not_drop_or_repeat_nodes_breadth_first(self):
        """The node before a failing step is delivered once; so is every later node."""
        iterator = breadth_first_search(self.flaky_tree())

        self.assertEqual(pull_all(iterator), ["A", "B", "C", "<err>", "F"])
        self.assertEqual(iterator.produced_count, 4)

    def test_node_error_does_not_drop_or_repeat_nodes_depth_first(self):
        iterator = depth_first_search(self.flaky_tree())

        self.assertEqual(pull_all(iterator), ["A", "B", "<err>", "C", "F"])
        self.assertEqual(iterator.produced_count, 4)

    def test_node_error_raised_by_following_pull(self):
        """A node is returned before its children are requested."""
        root = SimpleNode("root", [BrokenNode("broken")])
        for search in SEARCHES:
            iterator = search(root)
            self.assertEqual(next(iterator).name, "root")
            self.assertEqual(next(iterator).name, "broken")
            self.assertEqual(iterator.produced_count, 2)
            with self.assertRaises(OSError):
                next(iterator)
            self.assertEqual(iterator.produced_count, 2)

    def test_truncated_child_listing_depth_first(self):
        """A children generator failing partway ends that listing only."""
        def children(node):
            if node.name == "r":
                yield SimpleNode("x")
                raise OSError("listing truncated")
            yield from node.children

        root = SimpleNode("r")
        iterator = depth_first_search(root, adapter=children)

        self.assertEqual(pull_all(iterator), ["r", "x", "<err>"])
        self.assertEqual(iterator.produced_count, 2)


if __name__ == "__main__":
    unittest.main()

#!/usr/bin/env python3
"""
Walk a structure with shared nodes, once plainly and once deduplicated.

This example demonstrates:
- Depth-first and breadth-first order on the same structure
- Using VisitedFilter so a node reachable from two parents appears once
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from lazytreewalk import depth_first_search, breadth_first_search, VisitedFilter
from lazytreewalk.testing import SimpleNode


def main():
    shared = SimpleNode("shared", [SimpleNode("leaf")])
    root = SimpleNode("root", [
        SimpleNode("left", [shared]),
        SimpleNode("right", [shared]),
    ])

    for label, search in (("depth-first", depth_first_search),
                          ("breadth-first", breadth_first_search)):
        plain = [node.name for node in search(root)]
        unique = [node.name for node in search(root, VisitedFilter())]
        print(f"{label}:")
        print(f"  every path:  {', '.join(plain)}")
        print(f"  deduplicated: {', '.join(unique)}")


if __name__ == "__main__":
    main()

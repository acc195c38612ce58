#!/usr/bin/env python3
"""
Project layout example showing the two halves of BranchTree.

This example demonstrates:
- Building a tree from nested (value, [children]) literals
- Pulling (BranchPath, value) pairs from the traversal by hand
- Rendering the same shape with the ASCII glyph style
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from branchtree import RenderConfig, Tree, TreeRenderer, print_tree


LAYOUT = ("project/", [
    ("branchtree/", [
        ("core/", ["path.py", "tree.py", "traverser.py"]),
        "config.py",
        "renderer.py",
    ]),
    ("tests/", ["test_traversal.py", "test_renderer.py"]),
    "setup.py",
])


def main():
    """Show the traversal output, then the rendered diagrams."""
    print("Raw traversal:")
    print("-" * 50)
    for path, value in Tree.from_nested(LAYOUT).into_traversal():
        print(f"  depth={path.depth} last={path.is_last!s:<5} {value}")

    print("\nUnicode diagram:")
    print("-" * 50)
    print_tree(Tree.from_nested(LAYOUT))

    print("\nASCII diagram:")
    print("-" * 50)
    renderer = TreeRenderer(RenderConfig.ascii())
    print(renderer.render(Tree.from_nested(LAYOUT)))
    print(f"\nPrefix cache: {renderer.get_stats()}")


if __name__ == "__main__":
    main()

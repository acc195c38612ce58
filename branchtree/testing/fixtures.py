"""Test fixtures for BranchTree consumers.

These helpers build the trees used throughout the test suite and provide a
straightforward recursive reference walk to compare the traversal engine
against.
"""

from typing import Any, List, Tuple

from ..core.tree import Tree, tr, _split_spec


SAMPLE_TREE_LINES = [
    "top",
    "├─ 1",
    "├─ 2",
    "│  ├─ A",
    "│  │  └─ ()",
    "│  ├─ B",
    "│  └─ C",
    "│     ├─ i",
    "│     └─ ii",
    "└─ 3",
    "   └─ x",
    "      ├─ α",
    "      └─ β",
]


def sample_tree() -> Tree[str]:
    """Build the demonstration tree.

    Structure:
    top
    ├─ 1
    ├─ 2 → A → (), B, C → i, ii
    └─ 3 → x → α, β
    """
    return tr("top",
              tr("1"),
              tr("2",
                 tr("A", tr("()")),
                 tr("B"),
                 tr("C", tr("i"), tr("ii"))),
              tr("3",
                 tr("x", tr("α"), tr("β"))))


def sample_tree_spec() -> Tuple[Any, list]:
    """Nested (value, [children]) description of the demonstration tree."""
    return ("top", [
        "1",
        ("2", [("A", ["()"]), "B", ("C", ["i", "ii"])]),
        ("3", [("x", ["α", "β"])]),
    ])


def chain_tree(depth: int, label: str = "n") -> Tree[str]:
    """Build a single-path tree with ``depth`` edges, bottom-up.

    Built iteratively so it can be far deeper than the recursion limit.
    """
    node = tr(f"{label}{depth}")
    for level in range(depth - 1, -1, -1):
        node = tr(f"{label}{level}", node)
    return node


def wide_tree(width: int, label: str = "leaf") -> Tree[str]:
    """Build a root with ``width`` leaf children."""
    return Tree("root", [tr(f"{label}{i}") for i in range(width)])


def reference_walk(spec: Any) -> List[Tuple[Tuple[bool, ...], Any]]:
    """Recursively compute the expected (path, value) pairs for a nested description.

    The description uses the format of ``Tree.from_nested``. This is the obvious
    recursive formulation, used as an oracle in tests; it is not meant for
    deep trees.
    """
    out: List[Tuple[Tuple[bool, ...], Any]] = []

    def visit(item: Any, path: Tuple[bool, ...]) -> None:
        value, children = _split_spec(item)
        out.append((path, value))
        for index, child in enumerate(children):
            visit(child, (index == len(children) - 1,) + path)

    visit(spec, ())
    return out


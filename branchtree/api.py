"""High-level API for BranchTree.

This module provides simple, functional interfaces for the common case of
walking or drawing a tree. These functions wrap TreeTraverser and
TreeRenderer for ease of use.
"""

import sys
from typing import Any, Iterator, Optional, TextIO, Tuple

from .config import RenderConfig
from .core.path import BranchPath
from .core.tree import Tree
from .renderer import TreeRenderer


def traverse_tree(tree: Tree) -> Iterator[Tuple[BranchPath, Any]]:
    """Consume a tree and iterate its (BranchPath, value) pairs.

    The tree is moved when this function is called, not on the first pull.

    Args:
        tree: A free tree; it is moved into the traversal

    Returns:
        Iterator of (BranchPath, value) pairs in depth-first pre-order

    Raises:
        TreeConsumedError: If the tree was adopted or already consumed

    Example:
        >>> for path, value in traverse_tree(tr("top", tr("a"))):
        ...     print(path.depth, value)
        0 top
        1 a
    """
    return tree.into_traversal()


def render_lines(
    tree: Tree,
    config: Optional[RenderConfig] = None,
) -> Iterator[str]:
    """Consume a tree and lazily produce its diagram lines.

    The config is validated first, so an invalid config leaves the tree
    untouched. The tree is then moved at call time; lines are rendered
    one pull at a time.

    Args:
        tree: A free tree; it is moved into the traversal
        config: Rendering options

    Returns:
        Iterator of diagram lines, one per node

    Raises:
        ConfigurationError: If the config does not validate
        TreeConsumedError: If the tree was adopted or already consumed
    """
    renderer = TreeRenderer(config)
    return renderer.render_lines(tree.into_traversal())


def render_tree(tree: Tree, config: Optional[RenderConfig] = None) -> str:
    """Consume a tree and return its diagram as one string.

    Example:
        >>> print(render_tree(tr("top", tr("a"), tr("b"))))
        top
        ├─ a
        └─ b
    """
    return TreeRenderer(config).render(tree)


def print_tree(
    tree: Tree,
    config: Optional[RenderConfig] = None,
    file: Optional[TextIO] = None,
) -> int:
    """Consume a tree and print its diagram line by line.

    Args:
        tree: A free tree; it is moved into the traversal
        config: Rendering options
        file: Stream to write to (defaults to sys.stdout)

    Returns:
        Number of lines printed
    """
    out = file if file is not None else sys.stdout
    count = 0
    for line in render_lines(tree, config):
        print(line, file=out)
        count += 1
    return count

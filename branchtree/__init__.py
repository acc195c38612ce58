"""BranchTree - Lazy Tree Diagram Rendering.

BranchTree walks an owned, ordered tree depth-first and draws it as a text
diagram with box-drawing connectors, one line per node:

    top
    ├─ 1
    └─ 2
       └─ A

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from branchtree import tr, print_tree
    print_tree(tr("top", tr("1"), tr("2", tr("A"))))
━━━━━━━━━━━━━━━━━━━━━━━━━━

Lower level, the traversal and rendering steps are separate:

    for path, value in tree.into_traversal():
        print(renderer.render_line(path, value))
"""

import logging

__version__ = "0.1.0"

from .core import (
    BranchPath,
    ROOT_PATH,
    Tree,
    Ownership,
    TreeConsumedError,
    tr,
    TreeTraverser,
    TraversalState,
)
from .config import (
    RenderConfig,
    GlyphStyle,
    Glyphs,
    UNICODE_GLYPHS,
    ASCII_GLYPHS,
    ConfigurationError,
)
from .renderer import TreeRenderer
from .api import (
    traverse_tree,
    render_lines,
    render_tree,
    print_tree,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Core
    "BranchPath",
    "ROOT_PATH",
    "Tree",
    "Ownership",
    "TreeConsumedError",
    "tr",
    "TreeTraverser",
    "TraversalState",
    # Config
    "RenderConfig",
    "GlyphStyle",
    "Glyphs",
    "UNICODE_GLYPHS",
    "ASCII_GLYPHS",
    "ConfigurationError",
    # Rendering
    "TreeRenderer",
    # API
    "traverse_tree",
    "render_lines",
    "render_tree",
    "print_tree",
]

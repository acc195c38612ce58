"""Core abstractions for BranchTree.

This package contains the owned tree type, the branch path descriptor and
the depth-first traversal engine that connects them.
"""

from .path import BranchPath, ROOT_PATH
from .tree import Tree, Ownership, TreeConsumedError, tr
from .traverser import TreeTraverser, TraversalState

__all__ = [
    "BranchPath",
    "ROOT_PATH",
    "Tree",
    "Ownership",
    "TreeConsumedError",
    "tr",
    "TreeTraverser",
    "TraversalState",
]

"""Testing utilities for BranchTree consumers."""

from .fixtures import (
    SAMPLE_TREE_LINES,
    sample_tree,
    sample_tree_spec,
    chain_tree,
    wide_tree,
    reference_walk,
)

__all__ = [
    'SAMPLE_TREE_LINES',
    'sample_tree',
    'sample_tree_spec',
    'chain_tree',
    'wide_tree',
    'reference_walk',
]

#!/usr/bin/env python3
"""Print the BranchTree demonstration tree.

Usage:
    python -m branchtree
"""

import sys

from .api import print_tree
from .testing.fixtures import sample_tree


def main() -> int:
    """Build the fixed sample tree and print it to stdout."""
    print_tree(sample_tree())
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""BranchPath descriptor for BranchTree.

A BranchPath records, for one yielded node, whether the node and each of its
ancestors (excluding the root) was the last child of its parent. It is the
only structural information a renderer needs to draw connectors.
"""

from typing import Any, Iterable, Optional, Tuple


class BranchPath(tuple):
    """Immutable tuple of last-child flags, innermost first.

    Index 0 is the node's own flag, index 1 its parent's, and so on outward
    to the level just below the root. The root's path is empty.

    Example:
        >>> path = BranchPath((True, False))
        >>> path.depth
        2
        >>> path.is_last
        True
        >>> path.ancestors
        (False,)
    """

    __slots__ = ()

    def __new__(cls, flags: Iterable[Any] = ()) -> "BranchPath":
        return super().__new__(cls, (bool(flag) for flag in flags))

    @classmethod
    def _from_bools(cls, flags: Tuple[bool, ...]) -> "BranchPath":
        """Wrap flags already known to be bools without re-checking them."""
        return tuple.__new__(cls, flags)

    @property
    def depth(self) -> int:
        """Depth of the node this path describes (root = 0)."""
        return len(self)

    @property
    def is_root(self) -> bool:
        return len(self) == 0

    @property
    def is_last(self) -> Optional[bool]:
        """The node's own last-child flag, or None for the root."""
        if not self:
            return None
        return self[0]

    @property
    def ancestors(self) -> Tuple[bool, ...]:
        """Flags of the enclosing levels, nearest ancestor first."""
        return tuple(self[1:])

    def split_first(self) -> Optional[Tuple[bool, Tuple[bool, ...]]]:
        """Split into (innermost, ancestors), or None for the root."""
        if not self:
            return None
        return self[0], tuple(self[1:])

    def outermost_first(self) -> Tuple[bool, ...]:
        """Flags ordered from the root-adjacent level inward."""
        return tuple(reversed(self))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({tuple(self)!r})"


ROOT_PATH = BranchPath()

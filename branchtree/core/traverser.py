"""Depth-first pre-order traversal engine for BranchTree.

The TreeTraverser walks an owned Tree and yields ``(BranchPath, value)``
pairs. It keeps an explicit stack of frames instead of nesting generators,
so the Python call stack stays flat no matter how deep the tree is.
"""

import logging
from collections import deque
from enum import Enum
from typing import Deque, Generic, List, Optional, Tuple, TypeVar, TYPE_CHECKING

from .path import BranchPath, ROOT_PATH

if TYPE_CHECKING:
    from .tree import Tree

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TraversalState(Enum):
    """Where a traversal is in its lifecycle."""
    PENDING = "pending"          # Root value not yet yielded
    DESCENDING = "descending"    # Walking the frame stack
    EXHAUSTED = "exhausted"      # Terminal; every pull returns nothing


class _Frame:
    """Bookkeeping for one open node on the path from the root.

    ``cursor`` holds the node's unvisited children. After the current child
    is popped from the left, an empty cursor means that child was the last.
    """

    __slots__ = ("cursor", "is_last")

    def __init__(self, children, is_last: Optional[bool]):
        self.cursor: Deque["Tree"] = deque(children)
        self.is_last = is_last


class TreeTraverser(Generic[T]):
    """Lazy, single-use pre-order iterator over an owned tree.

    Children are only taken out of their parent when the traversal reaches
    them, and every node is released as soon as it has been yielded. Use
    ``Tree.into_traversal()`` to create one.

    Example:
        >>> traversal = tr("top", tr("a"), tr("b")).into_traversal()
        >>> traversal.advance()
        (BranchPath(()), 'top')
        >>> traversal.advance()
        (BranchPath((False,)), 'a')
        >>> traversal.advance()
        (BranchPath((True,)), 'b')
        >>> traversal.advance() is None
        True
    """

    def __init__(self, tree: "Tree[T]"):
        """Take ownership of ``tree``.

        Args:
            tree: A free tree; it is consumed by this call

        Raises:
            TreeConsumedError: If the tree was adopted by a parent or
                already consumed
        """
        from .tree import Ownership, TreeConsumedError

        if tree.ownership is not Ownership.FREE:
            raise TreeConsumedError(
                f"Cannot traverse a tree that is already {tree.ownership.value}"
            )
        value, children = tree._release()
        self._root_value: Optional[T] = value
        self._root_children = children
        self._frames: List[_Frame] = []
        # Last-child flags of the open non-root frames, outermost first
        self._flags: List[bool] = []
        self._state = TraversalState.PENDING
        self._yielded = 0
        logger.debug("Traversal started with %d top-level children", len(children))

    @property
    def state(self) -> TraversalState:
        return self._state

    @property
    def open_frames(self) -> int:
        """Number of frames currently on the stack (root included)."""
        return len(self._frames)

    @property
    def yielded(self) -> int:
        """Number of items produced so far."""
        return self._yielded

    def advance(self) -> Optional[Tuple[BranchPath, T]]:
        """Produce the next (BranchPath, value) pair in pre-order.

        Returns:
            The next pair, or None once every node has been yielded.
            Further calls after that keep returning None.
        """
        if self._state is TraversalState.PENDING:
            value = self._root_value
            self._root_value = None
            self._frames.append(_Frame(self._root_children, None))
            self._root_children = ()
            self._state = TraversalState.DESCENDING
            self._yielded += 1
            return ROOT_PATH, value

        if self._state is TraversalState.EXHAUSTED:
            return None

        frames = self._frames
        while frames:
            frame = frames[-1]
            if not frame.cursor:
                frames.pop()
                if frame.is_last is not None:
                    self._flags.pop()
                continue

            child = frame.cursor.popleft()
            is_last = not frame.cursor
            value, grandchildren = child._release()
            path = BranchPath._from_bools((is_last, *reversed(self._flags)))

            frames.append(_Frame(grandchildren, is_last))
            self._flags.append(is_last)
            self._yielded += 1
            return path, value

        self._state = TraversalState.EXHAUSTED
        logger.debug("Traversal exhausted after %d items", self._yielded)
        return None

    def close(self) -> None:
        """Abandon the traversal and drop every node it still owns."""
        if self._state is not TraversalState.EXHAUSTED:
            logger.debug("Traversal closed after %d items", self._yielded)
        self._frames.clear()
        self._flags.clear()
        self._root_value = None
        self._root_children = ()
        self._state = TraversalState.EXHAUSTED

    def __iter__(self) -> "TreeTraverser[T]":
        return self

    def __next__(self) -> Tuple[BranchPath, T]:
        item = self.advance()
        if item is None:
            raise StopIteration
        return item

    def __enter__(self) -> "TreeTraverser[T]":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(state={self._state.value}, "
            f"open_frames={len(self._frames)}, yielded={self._yielded})"
        )

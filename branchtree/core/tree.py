"""Owned, ordered n-ary tree for BranchTree.

A Tree is built bottom-up and never changes afterwards. Building a parent
moves its children in, and ``into_traversal()`` moves the whole tree into a
TreeTraverser. Both moves are tracked so that a handle cannot be reused after
its contents have been handed over.
"""

from enum import Enum
from typing import Any, Generic, Iterable, Iterator, Tuple, TypeVar, TYPE_CHECKING

if TYPE_CHECKING:
    from .traverser import TreeTraverser

T = TypeVar("T")


class TreeConsumedError(RuntimeError):
    """Raised when a tree handle is used after its contents were moved."""
    pass


class Ownership(Enum):
    """Who currently owns a tree's contents."""
    FREE = "free"            # Standalone handle, may be traversed or adopted
    ADOPTED = "adopted"      # Moved into a parent tree at construction
    CONSUMED = "consumed"    # Moved into a traversal


class Tree(Generic[T]):
    """A node holding a value and an ordered tuple of child trees.

    Trees have no parent links and own their children exclusively, so they
    are acyclic by construction. Passing a tree as a child transfers it to
    the new parent; the same handle cannot be adopted twice.

    Example:
        >>> tree = Tree("top", [Tree("a"), Tree("b")])
        >>> [value for _, value in tree.into_traversal()]
        ['top', 'a', 'b']
    """

    __slots__ = ("_value", "_children", "_ownership")

    def __init__(self, value: T, children: Iterable["Tree[T]"] = ()):
        """Build a tree node.

        Args:
            value: Value stored at this node
            children: Already-built child trees, in display order

        Raises:
            TreeConsumedError: If a child was already adopted or consumed
            TypeError: If a child is not a Tree
        """
        if isinstance(children, Tree):
            raise TypeError("children must be an iterable of Tree, not a single Tree")
        adopted = tuple(children)
        seen = set()
        for child in adopted:
            if not isinstance(child, Tree):
                raise TypeError(
                    f"Tree children must be Tree instances, got {type(child).__name__}"
                )
            if child._ownership is not Ownership.FREE:
                raise TreeConsumedError(
                    f"Cannot adopt a tree that is already {child._ownership.value}"
                )
            if id(child) in seen:
                raise TreeConsumedError("The same tree cannot be adopted twice")
            seen.add(id(child))

        # Only mark once every child passed, so a failed build adopts nothing
        for child in adopted:
            child._ownership = Ownership.ADOPTED

        self._value = value
        self._children: Tuple["Tree[T]", ...] = adopted
        self._ownership = Ownership.FREE

    @classmethod
    def from_nested(cls, spec: Any) -> "Tree[Any]":
        """Build a tree from nested ``(value, [children...])`` pairs.

        A bare value (anything that is not a 2-tuple whose second item is a
        list or tuple) becomes a leaf. Construction is iterative, so deeply
        nested input does not hit the recursion limit.

        Args:
            spec: Nested description of the tree

        Returns:
            The built Tree

        Example:
            >>> Tree.from_nested(("top", ["a", ("b", ["c"])])).node_count()
            4
        """
        # Post-order over the spec: a node is built once all children are.
        root_holder: list = []
        stack = [(spec, root_holder, None)]
        while stack:
            item, out, built = stack.pop()
            value, child_specs = _split_spec(item)
            if built is None:
                built = []
                stack.append((item, out, built))
                for child_spec in reversed(child_specs):
                    stack.append((child_spec, built, None))
            else:
                out.append(cls(value, built))
        return root_holder[0]

    @property
    def ownership(self) -> Ownership:
        return self._ownership

    @property
    def value(self) -> T:
        self._check_readable()
        return self._value

    @property
    def children(self) -> Tuple["Tree[T]", ...]:
        self._check_readable()
        return self._children

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return not self.children

    def node_count(self) -> int:
        """Count the nodes in this subtree, without recursion."""
        count = 0
        pending = [self]
        while pending:
            node = pending.pop()
            count += 1
            pending.extend(node.children)
        return count

    def into_traversal(self) -> "TreeTraverser[T]":
        """Move this tree into a depth-first traversal.

        After this call the handle is consumed: reading ``value`` or
        ``children`` or traversing again raises TreeConsumedError.

        Returns:
            TreeTraverser yielding (BranchPath, value) pairs in pre-order

        Raises:
            TreeConsumedError: If the tree was adopted by a parent or
                already consumed
        """
        from .traverser import TreeTraverser

        # TreeTraverser checks ownership before taking the contents
        return TreeTraverser(self)

    def __iter__(self) -> Iterator[Tuple[Any, T]]:
        return self.into_traversal()

    def _release(self) -> Tuple[T, Tuple["Tree[T]", ...]]:
        """Hand over value and children, leaving this handle consumed."""
        value, children = self._value, self._children
        self._value = None
        self._children = ()
        self._ownership = Ownership.CONSUMED
        return value, children

    def _check_readable(self) -> None:
        if self._ownership is Ownership.CONSUMED:
            raise TreeConsumedError("Tree contents were moved into a traversal")

    def __repr__(self) -> str:
        if self._ownership is Ownership.CONSUMED:
            return f"{self.__class__.__name__}(<consumed>)"
        return (
            f"{self.__class__.__name__}({self._value!r}, "
            f"children={len(self._children)})"
        )


def tr(value: T, *children: Tree[T]) -> Tree[T]:
    """Builder shorthand: ``tr("top", tr("a"), tr("b", tr("c")))``."""
    return Tree(value, children)


def _split_spec(item: Any) -> Tuple[Any, Tuple[Any, ...]]:
    if isinstance(item, tuple) and len(item) == 2 and isinstance(item[1], (list, tuple)):
        return item[0], tuple(item[1])
    return item, ()

"""Element class for the view hierarchy that constraints are derived over."""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from .constraint import ConstraintSpec


@dataclass(eq=False)
class Element:
    """A node in the view hierarchy.

    Parents own their children; the link back from a child to its parent is
    a weak reference, so dropping a subtree never keeps its old parent
    alive. Elements compare by identity.

    Constraints registered on an element by the default sink are stored in
    ``constraints``. An element may own constraints that reference any of
    its descendants.

    The hierarchy is read, never restructured, by constraint derivation.
    Callers must not mutate it from another thread while a derivation is
    running.

    Example:
        root = Element("root")
        header = root.add_child(Element("header", size=[320, 44]))
        body = root.add_child(Element("body"))
        assert header.parent is root
    """

    name: str
    children: list[Element] = field(default_factory=list)
    size: NDArray[np.float64] | None = field(default=None, repr=False)
    constraints: list[ConstraintSpec] = field(default_factory=list, repr=False)
    _parent_ref: weakref.ref | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.size is not None:
            self.size = np.asarray(self.size, dtype=np.float64)
            if self.size.shape != (2,):
                raise ValueError(
                    f"Element '{self.name}' size must be [width, height], got shape {self.size.shape}"
                )
        children, self.children = self.children, []
        for child in children:
            self.add_child(child)

    @property
    def parent(self) -> Element | None:
        """The superview, or None for a root (or an orphan whose parent was dropped)."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    def add_child(self, node: Element) -> Element:
        """Add a child node.

        Args:
            node: The node to add as a child

        Returns:
            The added node (for chaining)

        Raises:
            ValueError: The node is this node or one of its ancestors
        """
        if self.is_descendant_of(node):
            raise ValueError(f"Cannot add '{node.name}' as a child of its own descendant '{self.name}'")
        current = node.parent
        if current is not None:
            current.remove_child(node)
        node._parent_ref = weakref.ref(self)
        self.children.append(node)
        return node

    def remove_child(self, node: Element) -> bool:
        """Remove a child node.

        Args:
            node: The node to remove

        Returns:
            True if the node was found and removed
        """
        for i, child in enumerate(self.children):
            if child is node:
                node._parent_ref = None
                del self.children[i]
                return True
        return False

    def iter_nodes(self, include_self: bool = True) -> Iterator[Element]:
        """Iterate over this node and all descendants (depth-first).

        Args:
            include_self: Whether to include this node in the iteration

        Yields:
            Element instances
        """
        if include_self:
            yield self
        for child in self.children:
            yield from child.iter_nodes(include_self=True)

    def iter_ancestors(self, include_self: bool = False) -> Iterator[Element]:
        """Iterate up the parent chain towards the root."""
        node = self if include_self else self.parent
        while node is not None:
            yield node
            node = node.parent

    def is_descendant_of(self, ancestor: Element) -> bool:
        """True if this node is ``ancestor`` or lies somewhere below it."""
        return any(node is ancestor for node in self.iter_ancestors(include_self=True))

    def iter_constraints(self) -> Iterator[tuple[Element, ConstraintSpec]]:
        """Iterate over all constraints registered in this subtree.

        Yields:
            Tuples of (owning_element, constraint)
        """
        for node in self.iter_nodes():
            for constraint in node.constraints:
                yield node, constraint

    def find(self, name: str) -> Element | None:
        """Find a descendant node by name.

        Args:
            name: The name to search for

        Returns:
            The first matching node, or None
        """
        for node in self.iter_nodes():
            if node.name == name:
                return node
        return None

    def find_all(self, name: str) -> list[Element]:
        """Find all descendant nodes with the given name."""
        return [node for node in self.iter_nodes() if node.name == name]

    @property
    def depth(self) -> int:
        """Get the depth of this node in the hierarchy (root = 0)."""
        return sum(1 for _ in self.iter_ancestors())

    @property
    def root(self) -> Element:
        """Get the root node of this hierarchy."""
        node = self
        for node in self.iter_ancestors(include_self=True):
            pass
        return node

    def __repr__(self) -> str:
        children_str = f", children={len(self.children)}" if self.children else ""
        constraints_str = f", constraints={len(self.constraints)}" if self.constraints else ""
        return f"Element({self.name!r}{children_str}{constraints_str})"

"""Owning-ancestor resolution for constraints between two anchors."""

from __future__ import annotations

from ..core.constraint import Anchor, Guide
from ..core.errors import NoCommonAncestorError, NoSuperviewError
from ..core.node import Element


def find_owning_ancestor(subject: Element, target: Anchor | None = None) -> Element:
    """Find the element a constraint between ``subject`` and ``target`` belongs on.

    Without a target, or with a layout guide as target, the owner is the
    subject's parent. With an element as target, the owner is the nearest
    node on the subject's parent chain (starting at the subject itself)
    that contains the target.

    Args:
        subject: The element being constrained
        target: The element or guide it is constrained against, if any

    Returns:
        The owning element

    Raises:
        NoSuperviewError: The owner should be the parent but there is none
        NoCommonAncestorError: Subject and target are in different trees
        TypeError: The target is neither an Element nor a Guide
    """
    if target is None or isinstance(target, Guide):
        parent = subject.parent
        if parent is None:
            raise NoSuperviewError(subject)
        return parent

    if not isinstance(target, Element):
        raise TypeError(f"Constraint target must be an Element or Guide, got {type(target).__name__}")

    for candidate in subject.iter_ancestors(include_self=True):
        if target.is_descendant_of(candidate):
            return candidate
    raise NoCommonAncestorError(subject, target)


def common_ancestor(first: Element, second: Element) -> Element | None:
    """Nearest common ancestor of two elements, or None.

    Records the first element's path once, so this runs in
    O(depth(first) + depth(second)).
    """
    path = {id(node) for node in first.iter_ancestors(include_self=True)}
    for node in second.iter_ancestors(include_self=True):
        if id(node) in path:
            return node
    return None

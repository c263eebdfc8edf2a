"""Recoverable failures raised while deriving constraints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .node import Element


class LayoutError(Exception):
    """Base class for failures that leave a constraint unproduced.

    These are recoverable: batch operations catch them per sub-operation
    and carry on. Precondition violations are plain ValueError/TypeError.
    """


class NoSuperviewError(LayoutError):
    """The subject has no parent but the operation needs one."""

    def __init__(self, subject: Element) -> None:
        self.subject = subject
        super().__init__(f"Can't create constraints: '{subject.name}' has no superview")


class NoCommonAncestorError(LayoutError):
    """The subject and target share no ancestor."""

    def __init__(self, subject: Element, target: Any) -> None:
        self.subject = subject
        self.target = target
        target_name = getattr(target, "name", repr(target))
        super().__init__(
            f"Can't create constraints: '{subject.name}' and '{target_name}' "
            "do not share a common superview"
        )

"""Constraint sinks: where synthesized constraints are handed off."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .constraint import ConstraintSpec
from .node import Element


@runtime_checkable
class ConstraintSink(Protocol):
    """Protocol for consumers of synthesized constraints.

    Any object with an attach() method satisfies this protocol. The return
    value is ignored; failures applying a constraint are the sink's concern.
    """

    def attach(self, spec: ConstraintSpec, owner: Element) -> None:
        """Register a constraint on its owning element."""
        ...


class ElementConstraintSink:
    """Stores constraints on the owning element's ``constraints`` list."""

    def attach(self, spec: ConstraintSpec, owner: Element) -> None:
        owner.constraints.append(spec)


class RecordingSink:
    """Keeps every attached constraint in order, with its owner.

    Useful for diagnostics, and for tests that need to see what was
    produced without inspecting the tree.
    """

    def __init__(self) -> None:
        self.records: list[tuple[ConstraintSpec, Element]] = []

    def attach(self, spec: ConstraintSpec, owner: Element) -> None:
        self.records.append((spec, owner))

    @property
    def specs(self) -> list[ConstraintSpec]:
        return [spec for spec, _ in self.records]

    def owned_by(self, owner: Element) -> list[ConstraintSpec]:
        """Constraints attached to the given owner."""
        return [spec for spec, node in self.records if node is owner]

    def clear(self) -> None:
        self.records.clear()

    def __len__(self) -> int:
        return len(self.records)

"""Primitive constraint specifications and the options used to build them."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from .attributes import Attribute, Relation

if TYPE_CHECKING:
    from .node import Element


@dataclass(frozen=True)
class Guide:
    """An opaque layout guide (safe area, top/bottom layout guide).

    Guides can be the target of a constraint but are not tree nodes, so the
    ancestor search never walks through them. Constraints against a guide
    are owned by the subject's parent.
    """

    name: str

    def __repr__(self) -> str:
        return f"Guide({self.name!r})"


Anchor = Union["Element", Guide]


@dataclass(frozen=True)
class ConstraintOptions:
    """Optional parameters of a single constraint.

    Attributes:
        relation: Relational operator between the two sides
        multiplier: Factor applied to the target attribute
        offset: User-facing offset, before any sign convention is applied
        priority: Layout priority, or None for the host default (required)
    """

    relation: Relation = Relation.EQUAL
    multiplier: float = 1.0
    offset: float = 0.0
    priority: float | None = None

    def replace(self, **changes) -> ConstraintOptions:
        """Return a copy with the given fields replaced."""
        return dataclasses.replace(self, **changes)


DEFAULT_OPTIONS = ConstraintOptions()


@dataclass(frozen=True)
class ConstraintSpec:
    """A fully resolved linear constraint.

    Reads as ``item.attribute <relation> multiplier * target.target_attribute + constant``.
    A spec without a target is a pure size constraint; its multiplier is
    always 0.
    """

    item: Element
    attribute: Attribute
    relation: Relation = Relation.EQUAL
    target: Anchor | None = None
    target_attribute: Attribute | None = None
    multiplier: float = 1.0
    constant: float = 0.0
    priority: float | None = None

    def __post_init__(self) -> None:
        if self.target is None:
            if self.target_attribute is not None:
                raise ValueError("A constraint without a target cannot have a target attribute")
            if self.multiplier != 0:
                raise ValueError("A constraint without a target must have a multiplier of 0")
        elif self.target_attribute is None:
            raise ValueError("A constraint with a target needs a target attribute")

    @property
    def is_size_constraint(self) -> bool:
        """True if this constrains a size to a constant."""
        return self.target is None

    def describe(self) -> str:
        """Render the constraint as a readable equation."""
        lhs = f"{_anchor_name(self.item)}.{self.attribute.value}"
        if self.target is None:
            rhs = f"{self.constant:g}"
        else:
            rhs = f"{_anchor_name(self.target)}.{self.target_attribute.value}"
            if self.multiplier != 1:
                rhs = f"{self.multiplier:g} * {rhs}"
            if self.constant > 0:
                rhs += f" + {self.constant:g}"
            elif self.constant < 0:
                rhs += f" - {-self.constant:g}"
        text = f"{lhs} {self.relation.value} {rhs}"
        if self.priority is not None:
            text += f" @{self.priority:g}"
        return text

    def __str__(self) -> str:
        return self.describe()


@dataclass(frozen=True)
class Derivation:
    """A synthesized constraint together with the node that must own it."""

    spec: ConstraintSpec
    owner: Element


def _anchor_name(anchor: Anchor) -> str:
    return getattr(anchor, "name", repr(anchor))

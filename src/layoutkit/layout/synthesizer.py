"""Constraint synthesis: high-level layout intents to primitive constraints.

Every operation resolves the owning ancestor, builds one or more
ConstraintSpecs and hands each to the configured sink. When an owner can't
be found the operation logs a warning and returns None for that constraint;
sibling constraints in the same call are still produced.

Offsets are user-facing. A positive offset moves a pinned edge inward, and
widens the gap when positioning one element next to another. Trailing edges
(right, bottom) and size-matching insets negate the offset before it becomes
the constraint constant; leading edges, centers and positions below or to
the right pass it through.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

import numpy as np
from numpy.typing import ArrayLike

from ..core.attributes import Attribute, Relation, is_size, is_trailing
from ..core.constraint import (
    DEFAULT_OPTIONS,
    Anchor,
    ConstraintOptions,
    ConstraintSpec,
    Derivation,
    Guide,
)
from ..core.errors import LayoutError
from ..core.node import Element
from ..core.sink import ConstraintSink, ElementConstraintSink
from .resolver import find_owning_ancestor

logger = logging.getLogger(__name__)


class EdgeConstraints(NamedTuple):
    top: ConstraintSpec | None
    right: ConstraintSpec | None
    bottom: ConstraintSpec | None
    left: ConstraintSpec | None


class HorizontalPair(NamedTuple):
    left: ConstraintSpec | None
    right: ConstraintSpec | None


class VerticalPair(NamedTuple):
    top: ConstraintSpec | None
    bottom: ConstraintSpec | None


class CenterConstraints(NamedTuple):
    horizontal: ConstraintSpec | None
    vertical: ConstraintSpec | None


class SizeConstraints(NamedTuple):
    width: ConstraintSpec | None
    height: ConstraintSpec | None


def signed_offset(attribute: Attribute, offset: float, target: Anchor | None = None) -> float:
    """Convert a user-facing offset into a constraint constant.

    Args:
        attribute: The attribute of the constrained element
        offset: Offset as the caller sees it
        target: The constraint target; size attributes are only insets
            when matched against a target

    Returns:
        The constant to store on the constraint
    """
    if is_trailing(attribute):
        return -offset
    if is_size(attribute) and target is not None:
        return -offset
    return offset


class ConstraintSynthesizer:
    """Builds constraints for single elements and attaches them to their owners.

    The synthesizer holds no state besides its sink, so one instance can be
    shared freely across a single-threaded UI.

    Example:
        synth = ConstraintSynthesizer()
        synth.pin_to_edges_of_superview(card, offset=12)
        synth.size_to_height(card, 88, priority=Priority.DEFAULT_HIGH)
        synth.position_below(footer, card, offset=8)
    """

    def __init__(self, sink: ConstraintSink | None = None) -> None:
        """Initialize the synthesizer.

        Args:
            sink: Where constraints are attached. Defaults to storing them on
                the owning element.
        """
        self.sink = sink if sink is not None else ElementConstraintSink()

    # -- General ---------------------------------------------------------

    def derive(
        self,
        subject: Element,
        attribute: Attribute,
        target: Anchor | None = None,
        target_attribute: Attribute | None = None,
        options: ConstraintOptions | None = None,
    ) -> Derivation:
        """Build a constraint and resolve its owner without attaching it.

        ``options.offset`` is used verbatim as the constant; no sign
        convention is applied here.

        Raises:
            LayoutError: The owner could not be resolved
            ValueError: A multiplier or target attribute was given without a target
        """
        options = options or DEFAULT_OPTIONS
        if target is None:
            if target_attribute is not None:
                raise ValueError("target_attribute requires a target")
            if options.multiplier not in (0, DEFAULT_OPTIONS.multiplier):
                raise ValueError(
                    f"multiplier {options.multiplier} is meaningless without a target"
                )
            multiplier = 0.0
        else:
            if target_attribute is None:
                raise ValueError("A target requires a target_attribute")
            multiplier = float(options.multiplier)

        owner = find_owning_ancestor(subject, target)
        spec = ConstraintSpec(
            item=subject,
            attribute=attribute,
            relation=options.relation,
            target=target,
            target_attribute=target_attribute,
            multiplier=multiplier,
            constant=float(options.offset),
            priority=options.priority,
        )
        return Derivation(spec=spec, owner=owner)

    def attach(self, derivation: Derivation) -> ConstraintSpec:
        """Hand a derived constraint to the sink."""
        self.sink.attach(derivation.spec, derivation.owner)
        logger.debug("Attached %s to '%s'", derivation.spec, derivation.owner.name)
        return derivation.spec

    def constrain(
        self,
        subject: Element,
        attribute: Attribute,
        target: Anchor | None = None,
        target_attribute: Attribute | None = None,
        options: ConstraintOptions | None = None,
    ) -> ConstraintSpec | None:
        """Derive a constraint and attach it to its owner.

        This is the primitive every other operation goes through.

        Args:
            subject: The element being constrained
            attribute: Attribute of the subject
            target: Element or guide to relate to, or None for a constant
            target_attribute: Attribute of the target
            options: Relation, multiplier, constant offset and priority

        Returns:
            The attached constraint, or None if no owner could be found
        """
        try:
            derivation = self.derive(subject, attribute, target, target_attribute, options)
        except LayoutError as exc:
            logger.warning("%s (%s.%s)", exc, subject.name, attribute.value)
            return None
        return self.attach(derivation)

    def relate(
        self,
        subject: Element,
        attribute: Attribute,
        target: Anchor,
        target_attribute: Attribute,
        offset: float = 0.0,
        priority: float | None = None,
        relation: Relation = Relation.EQUAL,
        multiplier: float = 1.0,
    ) -> ConstraintSpec | None:
        """Constrain two attributes with a user-facing offset.

        The sign convention described in the module docstring is applied to
        ``offset`` before the constraint is built.
        """
        options = ConstraintOptions(
            relation=relation,
            multiplier=multiplier,
            offset=signed_offset(attribute, offset, target),
            priority=priority,
        )
        return self.constrain(subject, attribute, target, target_attribute, options)

    def _constrain_to_superview(
        self, subject: Element, attribute: Attribute, offset: float, priority: float | None
    ) -> ConstraintSpec | None:
        # Owner is the superview itself
        try:
            superview = find_owning_ancestor(subject)
        except LayoutError as exc:
            logger.warning("%s (%s.%s)", exc, subject.name, attribute.value)
            return None
        spec = ConstraintSpec(
            item=subject,
            attribute=attribute,
            target=superview,
            target_attribute=attribute,
            constant=signed_offset(attribute, offset, superview),
            priority=priority,
        )
        return self.attach(Derivation(spec=spec, owner=superview))

    def _constrain_size(
        self,
        subject: Element,
        attribute: Attribute,
        size: float,
        relation: Relation = Relation.EQUAL,
        priority: float | None = None,
    ) -> ConstraintSpec | None:
        options = ConstraintOptions(relation=relation, offset=size, priority=priority)
        return self.constrain(subject, attribute, options=options)

    # -- Pin: superview --------------------------------------------------

    def pin_to_edges_of_superview(
        self, subject: Element, offset: float = 0.0, priority: float | None = None
    ) -> EdgeConstraints:
        """Pin all four edges of an element to its superview, inset by ``offset``."""
        return EdgeConstraints(
            self.pin_to_top_edge_of_superview(subject, offset, priority),
            self.pin_to_right_edge_of_superview(subject, offset, priority),
            self.pin_to_bottom_edge_of_superview(subject, offset, priority),
            self.pin_to_left_edge_of_superview(subject, offset, priority),
        )

    def pin_to_top_edge_of_superview(
        self, subject: Element, offset: float = 0.0, priority: float | None = None
    ) -> ConstraintSpec | None:
        return self._constrain_to_superview(subject, Attribute.TOP, offset, priority)

    def pin_to_right_edge_of_superview(
        self, subject: Element, offset: float = 0.0, priority: float | None = None
    ) -> ConstraintSpec | None:
        return self._constrain_to_superview(subject, Attribute.RIGHT, offset, priority)

    def pin_to_bottom_edge_of_superview(
        self, subject: Element, offset: float = 0.0, priority: float | None = None
    ) -> ConstraintSpec | None:
        return self._constrain_to_superview(subject, Attribute.BOTTOM, offset, priority)

    def pin_to_left_edge_of_superview(
        self, subject: Element, offset: float = 0.0, priority: float | None = None
    ) -> ConstraintSpec | None:
        return self._constrain_to_superview(subject, Attribute.LEFT, offset, priority)

    def pin_to_side_edges_of_superview(
        self, subject: Element, offset: float = 0.0, priority: float | None = None
    ) -> HorizontalPair:
        """Pin the left and right edges of an element to its superview."""
        return HorizontalPair(
            self.pin_to_left_edge_of_superview(subject, offset, priority),
            self.pin_to_right_edge_of_superview(subject, offset, priority),
        )

    def pin_to_top_and_bottom_edges_of_superview(
        self, subject: Element, offset: float = 0.0, priority: float | None = None
    ) -> VerticalPair:
        """Pin the top and bottom edges of an element to its superview."""
        return VerticalPair(
            self.pin_to_top_edge_of_superview(subject, offset, priority),
            self.pin_to_bottom_edge_of_superview(subject, offset, priority),
        )

    # -- Pin: edges of another item --------------------------------------

    def pin_top_edge_to_top_edge(
        self, subject: Element, item: Anchor, offset: float = 0.0, priority: float | None = None
    ) -> ConstraintSpec | None:
        return self.relate(subject, Attribute.TOP, item, Attribute.TOP, offset, priority)

    def pin_right_edge_to_right_edge(
        self, subject: Element, item: Anchor, offset: float = 0.0, priority: float | None = None
    ) -> ConstraintSpec | None:
        return self.relate(subject, Attribute.RIGHT, item, Attribute.RIGHT, offset, priority)

    def pin_bottom_edge_to_bottom_edge(
        self, subject: Element, item: Anchor, offset: float = 0.0, priority: float | None = None
    ) -> ConstraintSpec | None:
        return self.relate(subject, Attribute.BOTTOM, item, Attribute.BOTTOM, offset, priority)

    def pin_left_edge_to_left_edge(
        self, subject: Element, item: Anchor, offset: float = 0.0, priority: float | None = None
    ) -> ConstraintSpec | None:
        return self.relate(subject, Attribute.LEFT, item, Attribute.LEFT, offset, priority)

    # -- Pin: layout guides ----------------------------------------------

    def pin_to_top_layout_guide(
        self, subject: Element, guide: Guide, offset: float = 0.0, priority: float | None = None
    ) -> ConstraintSpec | None:
        """Pin the top edge of an element just below a top layout guide."""
        return self.relate(subject, Attribute.TOP, guide, Attribute.BOTTOM, offset, priority)

    def pin_to_bottom_layout_guide(
        self, subject: Element, guide: Guide, offset: float = 0.0, priority: float | None = None
    ) -> ConstraintSpec | None:
        """Pin the bottom edge of an element just above a bottom layout guide."""
        return self.relate(subject, Attribute.BOTTOM, guide, Attribute.TOP, offset, priority)

    # -- Center ----------------------------------------------------------

    def center_in_superview(
        self, subject: Element, offset: float = 0.0, priority: float | None = None
    ) -> CenterConstraints:
        """Center an element on both axes of its superview."""
        return CenterConstraints(
            self.center_horizontally_in_superview(subject, offset, priority),
            self.center_vertically_in_superview(subject, offset, priority),
        )

    def center_horizontally_in_superview(
        self, subject: Element, offset: float = 0.0, priority: float | None = None
    ) -> ConstraintSpec | None:
        return self._constrain_to_superview(subject, Attribute.CENTER_X, offset, priority)

    def center_vertically_in_superview(
        self, subject: Element, offset: float = 0.0, priority: float | None = None
    ) -> ConstraintSpec | None:
        return self._constrain_to_superview(subject, Attribute.CENTER_Y, offset, priority)

    def center_horizontally_to(
        self, subject: Element, item: Anchor, offset: float = 0.0, priority: float | None = None
    ) -> ConstraintSpec | None:
        return self.relate(subject, Attribute.CENTER_X, item, Attribute.CENTER_X, offset, priority)

    def center_vertically_to(
        self, subject: Element, item: Anchor, offset: float = 0.0, priority: float | None = None
    ) -> ConstraintSpec | None:
        return self.relate(subject, Attribute.CENTER_Y, item, Attribute.CENTER_Y, offset, priority)

    # -- Size: constants -------------------------------------------------

    def size_to_width(
        self, subject: Element, width: float, priority: float | None = None
    ) -> ConstraintSpec | None:
        return self._constrain_size(subject, Attribute.WIDTH, width, priority=priority)

    def size_to_min_width(
        self, subject: Element, width: float, priority: float | None = None
    ) -> ConstraintSpec | None:
        return self._constrain_size(
            subject, Attribute.WIDTH, width, Relation.GREATER_THAN_OR_EQUAL, priority
        )

    def size_to_max_width(
        self, subject: Element, width: float, priority: float | None = None
    ) -> ConstraintSpec | None:
        return self._constrain_size(
            subject, Attribute.WIDTH, width, Relation.LESS_THAN_OR_EQUAL, priority
        )

    def size_to_height(
        self, subject: Element, height: float, priority: float | None = None
    ) -> ConstraintSpec | None:
        return self._constrain_size(subject, Attribute.HEIGHT, height, priority=priority)

    def size_to_min_height(
        self, subject: Element, height: float, priority: float | None = None
    ) -> ConstraintSpec | None:
        return self._constrain_size(
            subject, Attribute.HEIGHT, height, Relation.GREATER_THAN_OR_EQUAL, priority
        )

    def size_to_max_height(
        self, subject: Element, height: float, priority: float | None = None
    ) -> ConstraintSpec | None:
        return self._constrain_size(
            subject, Attribute.HEIGHT, height, Relation.LESS_THAN_OR_EQUAL, priority
        )

    def size_to_width_and_height(
        self, subject: Element, size: float, priority: float | None = None
    ) -> SizeConstraints:
        return SizeConstraints(
            self.size_to_width(subject, size, priority),
            self.size_to_height(subject, size, priority),
        )

    def size_to_min_width_and_height(
        self, subject: Element, size: float, priority: float | None = None
    ) -> SizeConstraints:
        return SizeConstraints(
            self.size_to_min_width(subject, size, priority),
            self.size_to_min_height(subject, size, priority),
        )

    def size_to_max_width_and_height(
        self, subject: Element, size: float, priority: float | None = None
    ) -> SizeConstraints:
        return SizeConstraints(
            self.size_to_max_width(subject, size, priority),
            self.size_to_max_height(subject, size, priority),
        )

    def size_to(
        self, subject: Element, size: ArrayLike, priority: float | None = None
    ) -> SizeConstraints:
        """Constrain width and height to a ``[width, height]`` pair.

        Raises:
            ValueError: ``size`` is not a pair of numbers
        """
        size = np.asarray(size, dtype=np.float64)
        if size.shape != (2,):
            raise ValueError(f"size must be [width, height], got shape {size.shape}")
        return SizeConstraints(
            self.size_to_width(subject, float(size[0]), priority),
            self.size_to_height(subject, float(size[1]), priority),
        )

    def size_to_intrinsic_size(
        self, subject: Element, priority: float | None = None
    ) -> SizeConstraints:
        """Constrain an element to its declared ``size``.

        Raises:
            ValueError: The element has no declared size
        """
        if subject.size is None:
            raise ValueError(f"Cannot size '{subject.name}' to its intrinsic size: no size declared")
        return self.size_to(subject, subject.size, priority)

    # -- Size: relative --------------------------------------------------

    def size_width_to_width(
        self, subject: Element, item: Anchor, offset: float = 0.0, priority: float | None = None
    ) -> ConstraintSpec | None:
        """Match widths, with ``offset`` as an inset from the item's width."""
        return self.relate(subject, Attribute.WIDTH, item, Attribute.WIDTH, offset, priority)

    def size_height_to_height(
        self, subject: Element, item: Anchor, offset: float = 0.0, priority: float | None = None
    ) -> ConstraintSpec | None:
        """Match heights, with ``offset`` as an inset from the item's height."""
        return self.relate(subject, Attribute.HEIGHT, item, Attribute.HEIGHT, offset, priority)

    def size_height_to_width(
        self, subject: Element, item: Anchor, offset: float = 0.0, priority: float | None = None
    ) -> ConstraintSpec | None:
        return self.relate(subject, Attribute.HEIGHT, item, Attribute.WIDTH, offset, priority)

    def size_width_to_height(
        self, subject: Element, item: Anchor, offset: float = 0.0, priority: float | None = None
    ) -> ConstraintSpec | None:
        return self.relate(subject, Attribute.WIDTH, item, Attribute.HEIGHT, offset, priority)

    def size_width_and_height_to_width_and_height(
        self, subject: Element, item: Anchor, offset: float = 0.0, priority: float | None = None
    ) -> SizeConstraints:
        return SizeConstraints(
            self.size_width_to_width(subject, item, offset, priority),
            self.size_height_to_height(subject, item, offset, priority),
        )

    def size_height_to_width_with_aspect_ratio(
        self, subject: Element, aspect_ratio: float, priority: float | None = None
    ) -> ConstraintSpec | None:
        """Constrain ``height = aspect_ratio * width`` on the same element."""
        return self.relate(
            subject, Attribute.HEIGHT, subject, Attribute.WIDTH,
            priority=priority, multiplier=aspect_ratio,
        )

    def size_width_to_height_with_aspect_ratio(
        self, subject: Element, aspect_ratio: float, priority: float | None = None
    ) -> ConstraintSpec | None:
        """Constrain ``width = aspect_ratio * height`` on the same element."""
        return self.relate(
            subject, Attribute.WIDTH, subject, Attribute.HEIGHT,
            priority=priority, multiplier=aspect_ratio,
        )

    # -- Position --------------------------------------------------------

    def position_above(
        self, subject: Element, item: Anchor, offset: float = 0.0, priority: float | None = None
    ) -> ConstraintSpec | None:
        """Place the bottom edge of ``subject`` ``offset`` above the top of ``item``."""
        return self.relate(subject, Attribute.BOTTOM, item, Attribute.TOP, offset, priority)

    def position_below(
        self, subject: Element, item: Anchor, offset: float = 0.0, priority: float | None = None
    ) -> ConstraintSpec | None:
        """Place the top edge of ``subject`` ``offset`` below the bottom of ``item``."""
        return self.relate(subject, Attribute.TOP, item, Attribute.BOTTOM, offset, priority)

    def position_to_the_left(
        self, subject: Element, item: Anchor, offset: float = 0.0, priority: float | None = None
    ) -> ConstraintSpec | None:
        """Place the right edge of ``subject`` ``offset`` left of the left edge of ``item``."""
        return self.relate(subject, Attribute.RIGHT, item, Attribute.LEFT, offset, priority)

    def position_to_the_right(
        self, subject: Element, item: Anchor, offset: float = 0.0, priority: float | None = None
    ) -> ConstraintSpec | None:
        """Place the left edge of ``subject`` ``offset`` right of the right edge of ``item``."""
        return self.relate(subject, Attribute.LEFT, item, Attribute.RIGHT, offset, priority)

    # -- Between ---------------------------------------------------------

    def fit_between_vertically(
        self,
        subject: Element,
        top_item: Anchor,
        bottom_item: Anchor,
        offset: float = 0.0,
        priority: float | None = None,
    ) -> VerticalPair:
        """Stretch an element between an item above it and an item below it."""
        return VerticalPair(
            self.position_below(subject, top_item, offset, priority),
            self.position_above(subject, bottom_item, offset, priority),
        )

    def fit_between_horizontally(
        self,
        subject: Element,
        left_item: Anchor,
        right_item: Anchor,
        offset: float = 0.0,
        priority: float | None = None,
    ) -> HorizontalPair:
        """Stretch an element between an item on its left and one on its right."""
        return HorizontalPair(
            self.position_to_the_right(subject, left_item, offset, priority),
            self.position_to_the_left(subject, right_item, offset, priority),
        )

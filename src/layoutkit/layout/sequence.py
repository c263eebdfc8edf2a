"""Sequence layout: chains of constraints over ordered sibling elements.

A sequence operation works along one axis. The order of ``elements`` is
the visual order: left to right for the horizontal axis, top to bottom for
the vertical one. Every operation breaks down into pairwise synthesizer
calls, so a missing common ancestor for one pair leaves a None in the
result and the rest of the chain is still produced.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Sequence

from ..core.attributes import Axis, Relation, axis_attributes
from ..core.constraint import ConstraintSpec
from ..core.node import Element
from .synthesizer import ConstraintSynthesizer


@dataclass
class SequenceResult:
    """Constraints produced by a sequence operation, grouped by role.

    Attributes:
        edges: Element edges pinned to the container
        extents: Equal width/height constraints between neighbours
        adjacent: Neighbour-to-neighbour positioning with the separation gap
        bounds: Container edges bound to the first and last element
        centers: Constraints tying elements to the container's center line
    """

    edges: list[ConstraintSpec | None] = field(default_factory=list)
    extents: list[ConstraintSpec | None] = field(default_factory=list)
    adjacent: list[ConstraintSpec | None] = field(default_factory=list)
    bounds: list[ConstraintSpec | None] = field(default_factory=list)
    centers: list[ConstraintSpec | None] = field(default_factory=list)

    def __iter__(self) -> Iterator[ConstraintSpec | None]:
        yield from self.edges
        yield from self.extents
        yield from self.adjacent
        yield from self.bounds
        yield from self.centers

    @property
    def constraints(self) -> list[ConstraintSpec]:
        """All constraints that were produced, skipping failures."""
        return [spec for spec in self if spec is not None]

    @property
    def failures(self) -> int:
        """Number of constraints that could not be produced."""
        return sum(1 for spec in self if spec is None)


def _require_elements(elements: Sequence[Element]) -> list[Element]:
    elements = list(elements)
    if not elements:
        raise ValueError("Can only distribute 1 or more elements")
    return elements


class SequencePlanner:
    """Lays out ordered groups of sibling elements inside a container.

    Example:
        planner = SequencePlanner()
        planner.fill_horizontally(toolbar, [back, title, done], separation=8)
        planner.center_vertically(card, [icon, label], separation=4)
    """

    def __init__(self, synthesizer: ConstraintSynthesizer | None = None) -> None:
        """Initialize the planner.

        Args:
            synthesizer: Synthesizer used for each pairwise constraint.
                Defaults to one that stores constraints on their owners.
        """
        self.synthesizer = synthesizer if synthesizer is not None else ConstraintSynthesizer()

    # -- Chains ----------------------------------------------------------

    def position_after(
        self,
        anchor: Element,
        elements: Sequence[Element],
        axis: Axis | str,
        separation: float = 0.0,
        priority: float | None = None,
    ) -> list[ConstraintSpec | None]:
        """Chain elements after ``anchor``, each ``separation`` past the previous one.

        Raises:
            ValueError: ``elements`` is empty
        """
        elements = _require_elements(elements)
        leading, trailing, _, _ = axis_attributes(axis)
        chain = []
        previous = anchor
        for element in elements:
            chain.append(
                self.synthesizer.relate(element, leading, previous, trailing, separation, priority)
            )
            previous = element
        return chain

    def position_before(
        self,
        anchor: Element,
        elements: Sequence[Element],
        axis: Axis | str,
        separation: float = 0.0,
        priority: float | None = None,
    ) -> list[ConstraintSpec | None]:
        """Chain elements before ``anchor``, keeping their visual order.

        The last element sits right before the anchor, the first one
        furthest away from it.

        Raises:
            ValueError: ``elements`` is empty
        """
        elements = _require_elements(elements)
        leading, trailing, _, _ = axis_attributes(axis)
        chain = []
        following = anchor
        for element in reversed(elements):
            chain.append(
                self.synthesizer.relate(element, trailing, following, leading, separation, priority)
            )
            following = element
        return chain

    def position_to_the_right_all(
        self,
        anchor: Element,
        elements: Sequence[Element],
        separation: float = 0.0,
        priority: float | None = None,
    ) -> list[ConstraintSpec | None]:
        return self.position_after(anchor, elements, Axis.HORIZONTAL, separation, priority)

    def position_below_all(
        self,
        anchor: Element,
        elements: Sequence[Element],
        separation: float = 0.0,
        priority: float | None = None,
    ) -> list[ConstraintSpec | None]:
        return self.position_after(anchor, elements, Axis.VERTICAL, separation, priority)

    def position_to_the_left_all(
        self,
        anchor: Element,
        elements: Sequence[Element],
        separation: float = 0.0,
        priority: float | None = None,
    ) -> list[ConstraintSpec | None]:
        return self.position_before(anchor, elements, Axis.HORIZONTAL, separation, priority)

    def position_above_all(
        self,
        anchor: Element,
        elements: Sequence[Element],
        separation: float = 0.0,
        priority: float | None = None,
    ) -> list[ConstraintSpec | None]:
        return self.position_before(anchor, elements, Axis.VERTICAL, separation, priority)

    # -- Fill ------------------------------------------------------------

    def fill(
        self,
        container: Element,
        elements: Sequence[Element],
        axis: Axis | str,
        separation: float = 0.0,
        priority: float | None = None,
    ) -> SequenceResult:
        """Lay elements out edge to edge so they fill the container.

        The first element is inset ``separation`` from the container's
        leading edge and the last from its trailing edge. Neighbours are
        ``separation`` apart and share the same extent.

        Raises:
            ValueError: ``elements`` is empty
        """
        elements = _require_elements(elements)
        leading, trailing, _, extent = axis_attributes(axis)
        synth = self.synthesizer
        result = SequenceResult()

        if len(elements) == 1:
            element = elements[0]
            result.edges.append(synth.relate(element, leading, container, leading, separation, priority))
            result.edges.append(synth.relate(element, trailing, container, trailing, separation, priority))
            return result

        first = elements[0]
        result.edges.append(synth.relate(first, leading, container, leading, separation, priority))
        for previous, element in zip(elements, elements[1:]):
            result.extents.append(synth.relate(previous, extent, element, extent))
            result.adjacent.append(
                synth.relate(element, leading, previous, trailing, separation, priority)
            )
        last = elements[-1]
        result.edges.append(synth.relate(last, trailing, container, trailing, separation, priority))
        return result

    def fill_horizontally(
        self,
        container: Element,
        elements: Sequence[Element],
        separation: float = 0.0,
        priority: float | None = None,
    ) -> SequenceResult:
        return self.fill(container, elements, Axis.HORIZONTAL, separation, priority)

    def fill_vertically(
        self,
        container: Element,
        elements: Sequence[Element],
        separation: float = 0.0,
        priority: float | None = None,
    ) -> SequenceResult:
        return self.fill(container, elements, Axis.VERTICAL, separation, priority)

    # -- Bound -----------------------------------------------------------

    def bound(
        self,
        container: Element,
        elements: Sequence[Element],
        axis: Axis | str,
        separation: float = 0.0,
        priority: float | None = None,
    ) -> SequenceResult:
        """Chain elements and bind the container's edges around them.

        Elements keep their own extents. The container's leading and
        trailing edges sit ``separation`` outside the first and last
        element, which makes this the right tool for sizing scrollable
        content to what it holds.

        Raises:
            ValueError: ``elements`` is empty
        """
        elements = _require_elements(elements)
        leading, trailing, _, _ = axis_attributes(axis)
        synth = self.synthesizer
        result = SequenceResult()

        for previous, element in zip(elements, elements[1:]):
            result.adjacent.append(
                synth.relate(element, leading, previous, trailing, separation, priority)
            )
        result.bounds.append(
            synth.relate(container, leading, elements[0], leading, -separation, priority)
        )
        result.bounds.append(
            synth.relate(container, trailing, elements[-1], trailing, -separation, priority)
        )
        return result

    def bound_horizontally(
        self,
        container: Element,
        elements: Sequence[Element],
        separation: float = 0.0,
        priority: float | None = None,
    ) -> SequenceResult:
        return self.bound(container, elements, Axis.HORIZONTAL, separation, priority)

    def bound_vertically(
        self,
        container: Element,
        elements: Sequence[Element],
        separation: float = 0.0,
        priority: float | None = None,
    ) -> SequenceResult:
        return self.bound(container, elements, Axis.VERTICAL, separation, priority)

    # -- Center ----------------------------------------------------------

    def center(
        self,
        container: Element,
        elements: Sequence[Element],
        axis: Axis | str,
        separation: float = 0.0,
        priority: float | None = None,
    ) -> SequenceResult:
        """Center a group of elements on the container's center line.

        With an odd count the middle element is centered exactly. With an
        even count the two middle elements straddle the center line: the
        earlier one's trailing edge and the later one's leading edge are
        each held at most half a separation from it, leaving the solver
        room to settle the remaining slack. The other elements are chained
        outward from the middle in both directions.

        Raises:
            ValueError: ``elements`` is empty
        """
        elements = _require_elements(elements)
        leading, trailing, center, _ = axis_attributes(axis)
        synth = self.synthesizer
        result = SequenceResult()
        count = len(elements)

        if count % 2 == 0:
            after_index = count // 2
            before_index = after_index - 1
            before, after = elements[before_index], elements[after_index]
            result.centers.append(synth.relate(
                before, trailing, container, center, separation / 2, priority,
                relation=Relation.LESS_THAN_OR_EQUAL,
            ))
            result.centers.append(synth.relate(
                after, leading, container, center, separation / 2, priority,
                relation=Relation.LESS_THAN_OR_EQUAL,
            ))
        else:
            before_index = after_index = count // 2
            before = after = elements[after_index]
            result.centers.append(synth.relate(before, center, container, center, 0.0, priority))

        trailing_group = elements[after_index + 1:]
        if trailing_group:
            result.adjacent.extend(
                self.position_after(after, trailing_group, axis, separation, priority)
            )
        leading_group = elements[:before_index]
        if leading_group:
            result.adjacent.extend(
                self.position_before(before, leading_group, axis, separation, priority)
            )
        return result

    def center_horizontally(
        self,
        container: Element,
        elements: Sequence[Element],
        separation: float = 0.0,
        priority: float | None = None,
    ) -> SequenceResult:
        return self.center(container, elements, Axis.HORIZONTAL, separation, priority)

    def center_vertically(
        self,
        container: Element,
        elements: Sequence[Element],
        separation: float = 0.0,
        priority: float | None = None,
    ) -> SequenceResult:
        return self.center(container, elements, Axis.VERTICAL, separation, priority)

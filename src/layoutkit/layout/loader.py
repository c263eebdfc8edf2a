"""YAML loader for declarative element trees and layout directives."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import numpy as np
import yaml

from ..core.constraint import Anchor, Guide
from ..core.node import Element
from ..core.sink import ConstraintSink
from .sequence import SequencePlanner
from .synthesizer import ConstraintSynthesizer


# How each synthesizer operation takes its arguments after the subject
SUPERVIEW_OPERATIONS = frozenset({
    "pin_to_edges_of_superview",
    "pin_to_top_edge_of_superview",
    "pin_to_right_edge_of_superview",
    "pin_to_bottom_edge_of_superview",
    "pin_to_left_edge_of_superview",
    "pin_to_side_edges_of_superview",
    "pin_to_top_and_bottom_edges_of_superview",
    "center_in_superview",
    "center_horizontally_in_superview",
    "center_vertically_in_superview",
})

TARGET_OPERATIONS = frozenset({
    "pin_top_edge_to_top_edge",
    "pin_right_edge_to_right_edge",
    "pin_bottom_edge_to_bottom_edge",
    "pin_left_edge_to_left_edge",
    "pin_to_top_layout_guide",
    "pin_to_bottom_layout_guide",
    "center_horizontally_to",
    "center_vertically_to",
    "size_width_to_width",
    "size_height_to_height",
    "size_height_to_width",
    "size_width_to_height",
    "size_width_and_height_to_width_and_height",
    "position_above",
    "position_below",
    "position_to_the_left",
    "position_to_the_right",
})

VALUE_OPERATIONS = frozenset({
    "size_to_width",
    "size_to_min_width",
    "size_to_max_width",
    "size_to_height",
    "size_to_min_height",
    "size_to_max_height",
    "size_to_width_and_height",
    "size_to_min_width_and_height",
    "size_to_max_width_and_height",
    "size_to",
})

RATIO_OPERATIONS = frozenset({
    "size_height_to_width_with_aspect_ratio",
    "size_width_to_height_with_aspect_ratio",
})

BETWEEN_OPERATIONS = frozenset({
    "fit_between_vertically",
    "fit_between_horizontally",
})

SEQUENCE_OPERATIONS = frozenset({
    "fill_horizontally",
    "fill_vertically",
    "bound_horizontally",
    "bound_vertically",
    "center_horizontally",
    "center_vertically",
})

CHAIN_OPERATIONS = frozenset({
    "position_to_the_right_all",
    "position_below_all",
    "position_to_the_left_all",
    "position_above_all",
})


@dataclass
class LoadedLayout:
    """Result of loading a layout document.

    Attributes:
        root: Root element of the loaded tree
        elements: Every element by name, root included
        guides: Layout guides declared by the document
        results: Return value of each layout directive, in document order
    """

    root: Element
    elements: dict[str, Element] = field(default_factory=dict)
    guides: dict[str, Guide] = field(default_factory=dict)
    results: list[Any] = field(default_factory=list)

    def __getitem__(self, name: str) -> Element:
        return self.elements[name]


class LayoutLoader:
    """Builds element trees from YAML and applies their layout directives.

    YAML format:
        name: root
        size: [320, 480]           # optional intrinsic size [width, height]
        guides: [safe_area_top]    # optional opaque layout guides

        elements:                  # nested children, in order
          header:
            size: [320, 44]
          body:
            elements:
              left: {}
              right: {}

        layout:                    # applied top to bottom
          - op: pin_to_edges_of_superview
            element: body
            offset: 8
          - op: fill_horizontally
            container: body
            elements: [left, right]
            separation: 4
          - op: size_to_height
            element: header
            value: 44
            priority: 750
          - op: pin_to_top_layout_guide
            element: header
            target: safe_area_top

    Element names must be unique within a document.
    """

    def __init__(self, sink: ConstraintSink | None = None) -> None:
        """Initialize the loader.

        Args:
            sink: Where constraints are attached. Defaults to storing them on
                the owning element.
        """
        self._synthesizer = ConstraintSynthesizer(sink)
        self._planner = SequencePlanner(self._synthesizer)

    def load(self, path: str | Path) -> LoadedLayout:
        """Load a layout document from a YAML file.

        Args:
            path: Path to the YAML file

        Returns:
            The element tree with its layout applied
        """
        path = Path(path)
        with open(path) as f:
            data = yaml.safe_load(f)

        return self._build_layout(data)

    def load_string(self, yaml_string: str) -> LoadedLayout:
        """Load a layout document from a YAML string.

        Args:
            yaml_string: YAML content as a string

        Returns:
            The element tree with its layout applied
        """
        data = yaml.safe_load(yaml_string)
        return self._build_layout(data)

    def _build_layout(self, data: dict[str, Any]) -> LoadedLayout:
        """Build the element tree, then run each layout directive."""
        if not isinstance(data, dict):
            raise ValueError("Layout document must be a mapping")

        elements: dict[str, Element] = {}
        root = self._build_element(data.get("name", "root"), data, elements)
        layout = LoadedLayout(root=root, elements=elements)

        for guide_name in data.get("guides") or []:
            if guide_name in elements or guide_name in layout.guides:
                raise ValueError(f"Duplicate guide name '{guide_name}'")
            layout.guides[guide_name] = Guide(guide_name)

        for index, directive in enumerate(data.get("layout") or []):
            if not isinstance(directive, dict):
                raise ValueError(f"Layout directive {index} must be a mapping")
            if "op" not in directive:
                raise ValueError(f"Layout directive {index} has no 'op'")
            layout.results.append(self._apply(directive, layout))

        return layout

    def _build_element(
        self, name: str, element_def: dict[str, Any] | None, elements: dict[str, Element]
    ) -> Element:
        if name in elements:
            raise ValueError(f"Duplicate element name '{name}'")
        element_def = element_def or {}
        if not isinstance(element_def, dict):
            raise ValueError(f"Element '{name}' must be a mapping")

        size = element_def.get("size")
        if size is not None:
            size = np.array(size, dtype=np.float64)
        element = Element(name, size=size)
        elements[name] = element

        children = element_def.get("elements") or {}
        if not isinstance(children, dict):
            raise ValueError(f"Elements of '{name}' must be a mapping")
        for child_name, child_def in children.items():
            element.add_child(self._build_element(child_name, child_def, elements))
        return element

    def _apply(self, directive: dict[str, Any], layout: LoadedLayout) -> Any:
        """Dispatch one directive to the synthesizer or the planner."""
        op = directive["op"]
        priority = directive.get("priority")

        if op in SEQUENCE_OPERATIONS:
            container = self._element(directive, "container", layout)
            members = [self._lookup(name, layout) for name in directive.get("elements", [])]
            return getattr(self._planner, op)(
                container, members, directive.get("separation", 0.0), priority
            )

        if op in CHAIN_OPERATIONS:
            anchor = self._element(directive, "element", layout)
            members = [self._lookup(name, layout) for name in directive.get("elements", [])]
            return getattr(self._planner, op)(
                anchor, members, directive.get("separation", 0.0), priority
            )

        subject = self._element(directive, "element", layout)
        method = getattr(self._synthesizer, op, None)
        offset = directive.get("offset", 0.0)

        if op in SUPERVIEW_OPERATIONS:
            return method(subject, offset, priority)
        if op in TARGET_OPERATIONS:
            target = self._anchor(directive.get("target"), layout)
            return method(subject, target, offset, priority)
        if op in VALUE_OPERATIONS:
            if "value" not in directive:
                raise ValueError(f"Layout operation '{op}' needs a 'value'")
            return method(subject, directive["value"], priority)
        if op in RATIO_OPERATIONS:
            if "ratio" not in directive:
                raise ValueError(f"Layout operation '{op}' needs a 'ratio'")
            return method(subject, directive["ratio"], priority)
        if op in BETWEEN_OPERATIONS:
            targets = directive.get("targets", [])
            if len(targets) != 2:
                raise ValueError(f"Layout operation '{op}' needs exactly two 'targets'")
            first, second = (self._anchor(name, layout) for name in targets)
            return method(subject, first, second, offset, priority)
        if op == "size_to_intrinsic_size":
            return method(subject, priority)

        raise ValueError(f"Unknown layout operation: {op}")

    def _element(self, directive: dict[str, Any], key: str, layout: LoadedLayout) -> Element:
        if key not in directive:
            raise ValueError(f"Layout operation '{directive['op']}' needs '{key}'")
        return self._lookup(directive[key], layout)

    def _lookup(self, name: str, layout: LoadedLayout) -> Element:
        element = layout.elements.get(name)
        if element is None:
            raise ValueError(f"Unknown element '{name}'")
        return element

    def _anchor(self, name: str | None, layout: LoadedLayout) -> Anchor:
        if name is None:
            raise ValueError("Layout operation needs a 'target'")
        if name in layout.elements:
            return layout.elements[name]
        if name in layout.guides:
            return layout.guides[name]
        raise ValueError(f"Unknown element or guide '{name}'")

"""Attribute, relation and axis vocabulary for layout constraints."""

from enum import Enum


class Attribute(Enum):
    """Semantic edges and axes an element exposes to the layout host.

    Edges and centers are positions; width and height are sizes. Any
    attribute may be paired with any other, but derivations pair them by
    convention (top with top, width with width).
    """
    # Edges
    TOP = "top"
    LEFT = "left"
    BOTTOM = "bottom"
    RIGHT = "right"

    # Center lines
    CENTER_X = "center_x"
    CENTER_Y = "center_y"

    # Sizes
    WIDTH = "width"
    HEIGHT = "height"


class Relation(Enum):
    """Relational operator of a linear constraint."""
    EQUAL = "=="
    LESS_THAN_OR_EQUAL = "<="
    GREATER_THAN_OR_EQUAL = ">="


class Axis(Enum):
    """Layout axis driven by a sequence operation."""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Priority:
    """Common priority levels, passed through unmodified to the layout host."""
    REQUIRED = 1000.0
    DEFAULT_HIGH = 750.0
    DEFAULT_LOW = 250.0
    FITTING_SIZE = 50.0


# Per-axis attributes: (leading, trailing, center, extent)
AXIS_ATTRIBUTES: dict[Axis, tuple[Attribute, Attribute, Attribute, Attribute]] = {
    Axis.HORIZONTAL: (Attribute.LEFT, Attribute.RIGHT, Attribute.CENTER_X, Attribute.WIDTH),
    Axis.VERTICAL: (Attribute.TOP, Attribute.BOTTOM, Attribute.CENTER_Y, Attribute.HEIGHT),
}

TRAILING_ATTRIBUTES = frozenset({Attribute.RIGHT, Attribute.BOTTOM})
SIZE_ATTRIBUTES = frozenset({Attribute.WIDTH, Attribute.HEIGHT})


def is_trailing(attribute: Attribute) -> bool:
    """True for edges whose user-facing offsets point outward (right, bottom)."""
    return attribute in TRAILING_ATTRIBUTES


def is_size(attribute: Attribute) -> bool:
    """True for width and height."""
    return attribute in SIZE_ATTRIBUTES


def axis_attributes(axis: Axis | str) -> tuple[Attribute, Attribute, Attribute, Attribute]:
    """Look up the (leading, trailing, center, extent) attributes of an axis.

    Args:
        axis: The axis (enum or string name)

    Returns:
        Tuple of attributes for that axis
    """
    if isinstance(axis, str):
        axis = Axis(axis)
    return AXIS_ATTRIBUTES[axis]

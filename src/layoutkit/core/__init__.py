"""Core layout data model: the element tree and constraint primitives."""

from .attributes import Attribute, Axis, Priority, Relation
from .constraint import ConstraintOptions, ConstraintSpec, Derivation, Guide
from .errors import LayoutError, NoCommonAncestorError, NoSuperviewError
from .node import Element
from .sink import ConstraintSink, ElementConstraintSink, RecordingSink

__all__ = [
    "Attribute",
    "Axis",
    "Priority",
    "Relation",
    "ConstraintOptions",
    "ConstraintSpec",
    "Derivation",
    "Guide",
    "LayoutError",
    "NoCommonAncestorError",
    "NoSuperviewError",
    "Element",
    "ConstraintSink",
    "ElementConstraintSink",
    "RecordingSink",
]

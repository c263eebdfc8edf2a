"""layoutkit - fluent layout-constraint derivation over element trees."""

from .core import (
    Attribute,
    Axis,
    ConstraintOptions,
    ConstraintSink,
    ConstraintSpec,
    Derivation,
    Element,
    ElementConstraintSink,
    Guide,
    LayoutError,
    NoCommonAncestorError,
    NoSuperviewError,
    Priority,
    RecordingSink,
    Relation,
)
from .layout import (
    ConstraintSynthesizer,
    LayoutLoader,
    LoadedLayout,
    SequencePlanner,
    SequenceResult,
    common_ancestor,
    find_owning_ancestor,
)

__all__ = [
    "Attribute",
    "Axis",
    "ConstraintOptions",
    "ConstraintSink",
    "ConstraintSpec",
    "Derivation",
    "Element",
    "ElementConstraintSink",
    "Guide",
    "LayoutError",
    "NoCommonAncestorError",
    "NoSuperviewError",
    "Priority",
    "RecordingSink",
    "Relation",
    "ConstraintSynthesizer",
    "LayoutLoader",
    "LoadedLayout",
    "SequencePlanner",
    "SequenceResult",
    "common_ancestor",
    "find_owning_ancestor",
]

"""Constraint derivation: ancestor resolution, synthesis and sequence layout."""

from .loader import LayoutLoader, LoadedLayout
from .resolver import common_ancestor, find_owning_ancestor
from .sequence import SequencePlanner, SequenceResult
from .synthesizer import (
    CenterConstraints,
    ConstraintSynthesizer,
    EdgeConstraints,
    HorizontalPair,
    SizeConstraints,
    VerticalPair,
    signed_offset,
)

__all__ = [
    "LayoutLoader",
    "LoadedLayout",
    "common_ancestor",
    "find_owning_ancestor",
    "SequencePlanner",
    "SequenceResult",
    "CenterConstraints",
    "ConstraintSynthesizer",
    "EdgeConstraints",
    "HorizontalPair",
    "SizeConstraints",
    "VerticalPair",
    "signed_offset",
]

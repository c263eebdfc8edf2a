"""Shared fixtures for layoutkit tests."""

from types import SimpleNamespace

import pytest

from layoutkit import ConstraintSynthesizer, Element, RecordingSink, SequencePlanner


@pytest.fixture
def tree():
    """root -> b -> c, plus d as a second child of root.

    The namespace keeps a strong reference to the root, since children
    only hold weak references to their parents.
    """
    root = Element("root")
    b = root.add_child(Element("b"))
    c = b.add_child(Element("c"))
    d = root.add_child(Element("d"))
    return SimpleNamespace(root=root, b=b, c=c, d=d)


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def synth(sink):
    return ConstraintSynthesizer(sink)


@pytest.fixture
def planner(synth):
    return SequencePlanner(synth)


@pytest.fixture
def row():
    """A container holding five sibling elements v1..v5."""
    container = Element("container")
    views = [container.add_child(Element(f"v{i}")) for i in range(1, 6)]
    return SimpleNamespace(container=container, views=views)

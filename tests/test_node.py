"""Tests for the element tree and constraint data model."""

import gc

import numpy as np
import pytest

from layoutkit import Attribute, ConstraintOptions, ConstraintSpec, Element, Guide, Relation


def test_add_child_sets_parent(tree):
    assert tree.b.parent is tree.root
    assert tree.c.parent is tree.b
    assert tree.root.parent is None
    assert tree.root.children == [tree.b, tree.d]


def test_add_child_moves_node_from_previous_parent(tree):
    tree.d.add_child(tree.c)
    assert tree.c.parent is tree.d
    assert tree.c not in tree.b.children
    assert tree.d.children == [tree.c]


def test_remove_child(tree):
    assert tree.root.remove_child(tree.d)
    assert tree.d.parent is None
    assert not tree.root.remove_child(tree.d)


@pytest.mark.parametrize("child", ["root", "b", "c"])
def test_add_child_rejects_cycles(tree, child):
    with pytest.raises(ValueError, match="own descendant"):
        tree.c.add_child(getattr(tree, child))
    assert tree.root.parent is None
    assert tree.c.parent is tree.b
    assert tree.c.children == []


def test_parent_link_is_weak():
    root = Element("root")
    child = root.add_child(Element("child"))
    del root
    gc.collect()
    assert child.parent is None


def test_constructor_children_are_adopted():
    a, b = Element("a"), Element("b")
    root = Element("root", children=[a, b])
    assert a.parent is root
    assert b.parent is root


def test_elements_compare_by_identity():
    assert Element("x") != Element("x")


def test_depth_and_root(tree):
    assert tree.root.depth == 0
    assert tree.c.depth == 2
    assert tree.c.root is tree.root


def test_is_descendant_of(tree):
    assert tree.c.is_descendant_of(tree.root)
    assert tree.c.is_descendant_of(tree.b)
    assert tree.c.is_descendant_of(tree.c)
    assert not tree.c.is_descendant_of(tree.d)
    assert not tree.root.is_descendant_of(tree.c)


def test_find(tree):
    assert tree.root.find("c") is tree.c
    assert tree.root.find("missing") is None
    assert tree.root.find_all("d") == [tree.d]


def test_iter_nodes_depth_first(tree):
    assert [node.name for node in tree.root.iter_nodes()] == ["root", "b", "c", "d"]
    assert [node.name for node in tree.root.iter_nodes(include_self=False)] == ["b", "c", "d"]


def test_size_is_converted_to_array():
    element = Element("icon", size=[24, 32])
    assert isinstance(element.size, np.ndarray)
    np.testing.assert_array_equal(element.size, [24.0, 32.0])


def test_size_must_be_a_pair():
    with pytest.raises(ValueError):
        Element("bad", size=[1, 2, 3])


def test_size_spec_requires_zero_multiplier():
    item = Element("item")
    with pytest.raises(ValueError):
        ConstraintSpec(item, Attribute.WIDTH, multiplier=1.0, constant=10)
    with pytest.raises(ValueError):
        ConstraintSpec(item, Attribute.WIDTH, target_attribute=Attribute.WIDTH, multiplier=0.0)


def test_related_spec_requires_target_attribute():
    item, other = Element("item"), Element("other")
    with pytest.raises(ValueError):
        ConstraintSpec(item, Attribute.TOP, target=other)


def test_describe():
    item, other = Element("item"), Element("other")
    spec = ConstraintSpec(
        item, Attribute.RIGHT, Relation.LESS_THAN_OR_EQUAL, other, Attribute.CENTER_X,
        multiplier=2.0, constant=-4.0, priority=750.0,
    )
    assert spec.describe() == "item.right <= 2 * other.center_x - 4 @750"

    size = ConstraintSpec(item, Attribute.WIDTH, multiplier=0.0, constant=44.0)
    assert str(size) == "item.width == 44"
    assert size.is_size_constraint


def test_describe_guide_target():
    item = Element("item")
    spec = ConstraintSpec(item, Attribute.TOP, target=Guide("safe_area"), target_attribute=Attribute.BOTTOM, constant=8)
    assert spec.describe() == "item.top == safe_area.bottom + 8"


def test_options_defaults_and_replace():
    options = ConstraintOptions()
    assert options.relation is Relation.EQUAL
    assert options.multiplier == 1.0
    assert options.offset == 0.0
    assert options.priority is None

    changed = options.replace(offset=12.0, priority=250.0)
    assert changed.offset == 12.0
    assert changed.priority == 250.0
    assert options.offset == 0.0

"""Tests for owning-ancestor resolution."""

import pytest

from layoutkit import Element, Guide, NoCommonAncestorError, NoSuperviewError
from layoutkit.layout import common_ancestor, find_owning_ancestor


def test_same_element_owns_itself(tree):
    assert find_owning_ancestor(tree.c, tree.c) is tree.c


def test_cousins_resolve_to_root(tree):
    assert find_owning_ancestor(tree.c, tree.d) is tree.root


def test_ancestor_target_resolves_to_target(tree):
    assert find_owning_ancestor(tree.c, tree.b) is tree.b


def test_descendant_target_resolves_to_subject(tree):
    assert find_owning_ancestor(tree.b, tree.c) is tree.b


def test_no_target_resolves_to_parent(tree):
    assert find_owning_ancestor(tree.c) is tree.b


def test_guide_target_resolves_to_parent(tree):
    assert find_owning_ancestor(tree.c, Guide("safe_area")) is tree.b


@pytest.mark.parametrize("target", [None, Guide("top_layout_guide")])
def test_root_without_parent_fails(tree, target):
    with pytest.raises(NoSuperviewError) as excinfo:
        find_owning_ancestor(tree.root, target)
    assert excinfo.value.subject is tree.root


def test_separate_trees_fail(tree):
    other_root = Element("other_root")
    stranger = other_root.add_child(Element("stranger"))
    with pytest.raises(NoCommonAncestorError) as excinfo:
        find_owning_ancestor(tree.c, stranger)
    assert excinfo.value.subject is tree.c
    assert excinfo.value.target is stranger


def test_unknown_target_type_is_a_programmer_error(tree):
    with pytest.raises(TypeError):
        find_owning_ancestor(tree.c, "d")


def test_common_ancestor(tree):
    assert common_ancestor(tree.c, tree.d) is tree.root
    assert common_ancestor(tree.c, tree.b) is tree.b
    assert common_ancestor(tree.c, tree.c) is tree.c
    assert common_ancestor(tree.c, Element("alone")) is None

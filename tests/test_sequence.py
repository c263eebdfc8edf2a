"""Tests for fill, bound, center and chained positioning of sibling groups."""

import pytest

from layoutkit import Attribute, Axis, Element, Priority, Relation


def test_center_odd_count(planner, row):
    v1, v2, v3, v4, v5 = row.views
    result = planner.center_horizontally(row.container, row.views, separation=10.0)

    assert len(result.centers) == 1
    center = result.centers[0]
    assert center.item is v3
    assert center.attribute is Attribute.CENTER_X
    assert center.target is row.container
    assert center.target_attribute is Attribute.CENTER_X
    assert center.constant == 0.0

    assert len(result.adjacent) == 4
    pairs = [(spec.item, spec.attribute, spec.target, spec.target_attribute) for spec in result.adjacent]
    assert pairs == [
        (v4, Attribute.LEFT, v3, Attribute.RIGHT),
        (v5, Attribute.LEFT, v4, Attribute.RIGHT),
        (v2, Attribute.RIGHT, v3, Attribute.LEFT),
        (v1, Attribute.RIGHT, v2, Attribute.LEFT),
    ]
    assert [spec.constant for spec in result.adjacent] == [10.0, 10.0, -10.0, -10.0]
    assert result.edges == result.extents == result.bounds == []


def test_center_even_count(planner, row):
    v1, v2, v3, v4 = row.views[:4]
    result = planner.center_horizontally(row.container, [v1, v2, v3, v4], separation=10.0)

    before, after = result.centers
    assert before.item is v2
    assert before.attribute is Attribute.RIGHT
    assert before.relation is Relation.LESS_THAN_OR_EQUAL
    assert before.target_attribute is Attribute.CENTER_X
    assert before.constant == -5.0

    assert after.item is v3
    assert after.attribute is Attribute.LEFT
    assert after.relation is Relation.LESS_THAN_OR_EQUAL
    assert after.target_attribute is Attribute.CENTER_X
    assert after.constant == 5.0

    assert len(result.adjacent) == 2
    assert {spec.item for spec in result.adjacent} == {v1, v4}
    outer_after, outer_before = result.adjacent
    assert (outer_after.item, outer_after.target) == (v4, v3)
    assert (outer_before.item, outer_before.target) == (v1, v2)


def test_center_two_elements_only_straddles(planner, row):
    v1, v2 = row.views[:2]
    result = planner.center_vertically(row.container, [v1, v2], separation=4.0)

    assert [spec.attribute for spec in result.centers] == [Attribute.BOTTOM, Attribute.TOP]
    assert [spec.target_attribute for spec in result.centers] == [Attribute.CENTER_Y] * 2
    assert result.adjacent == []


def test_center_single_element(planner, row):
    result = planner.center(row.container, row.views[:1], Axis.VERTICAL, separation=4.0)
    assert len(result.centers) == 1
    assert result.centers[0].attribute is Attribute.CENTER_Y
    assert result.adjacent == []


def test_fill_single_element(planner, row):
    only = row.views[0]
    result = planner.fill_horizontally(row.container, [only], separation=8.0, priority=Priority.DEFAULT_HIGH)

    assert len(result.edges) == 2
    leading, trailing = result.edges
    assert (leading.attribute, leading.target, leading.constant) == (Attribute.LEFT, row.container, 8.0)
    assert (trailing.attribute, trailing.target, trailing.constant) == (Attribute.RIGHT, row.container, -8.0)
    assert leading.priority == trailing.priority == Priority.DEFAULT_HIGH
    assert result.extents == []
    assert result.adjacent == []


@pytest.mark.parametrize("count", [2, 3, 5])
def test_fill_counts(planner, row, count):
    views = row.views[:count]
    result = planner.fill_vertically(row.container, views, separation=3.0, priority=Priority.DEFAULT_LOW)

    assert len(result.extents) == count - 1
    assert len(result.adjacent) == count - 1
    assert len(result.edges) == 2
    assert result.failures == 0

    first_edge, last_edge = result.edges
    assert (first_edge.item, first_edge.attribute, first_edge.constant) == (views[0], Attribute.TOP, 3.0)
    assert (last_edge.item, last_edge.attribute, last_edge.constant) == (views[-1], Attribute.BOTTOM, -3.0)

    for index, extent in enumerate(result.extents):
        assert extent.item is views[index]
        assert extent.target is views[index + 1]
        assert extent.attribute is extent.target_attribute is Attribute.HEIGHT
        assert extent.constant == 0.0
        assert extent.priority is None

    for index, adjacent in enumerate(result.adjacent):
        assert adjacent.item is views[index + 1]
        assert adjacent.target is views[index]
        assert (adjacent.attribute, adjacent.target_attribute) == (Attribute.TOP, Attribute.BOTTOM)
        assert adjacent.constant == 3.0
        assert adjacent.priority == Priority.DEFAULT_LOW


@pytest.mark.parametrize("count", [1, 2, 4])
def test_bound_counts(planner, sink, row, count):
    views = row.views[:count]
    result = planner.bound_horizontally(row.container, views, separation=6.0)

    assert len(result.adjacent) == count - 1
    assert result.extents == []
    assert len(result.bounds) == 2

    leading, trailing = result.bounds
    assert (leading.item, leading.attribute, leading.target) == (row.container, Attribute.LEFT, views[0])
    assert (trailing.item, trailing.attribute, trailing.target) == (row.container, Attribute.RIGHT, views[-1])
    # Container edges sit one separation outside the content span
    assert leading.constant == -6.0
    assert trailing.constant == 6.0
    assert sink.owned_by(row.container) == result.constraints


@pytest.mark.parametrize("operation", [
    "fill_horizontally",
    "fill_vertically",
    "bound_horizontally",
    "bound_vertically",
    "center_horizontally",
    "center_vertically",
    "position_to_the_right_all",
    "position_below_all",
    "position_to_the_left_all",
    "position_above_all",
])
def test_empty_sequence_is_rejected(planner, sink, row, operation):
    with pytest.raises(ValueError):
        getattr(planner, operation)(row.container, [], 4.0)
    assert len(sink) == 0


def test_position_chains(planner, row):
    anchor, a, b = row.views[:3]

    below = planner.position_below_all(anchor, [a, b], 2.0)
    assert [(spec.item, spec.target) for spec in below] == [(a, anchor), (b, a)]
    assert all(spec.attribute is Attribute.TOP for spec in below)

    above = planner.position_above_all(anchor, [a, b], 2.0)
    assert [(spec.item, spec.target) for spec in above] == [(b, anchor), (a, b)]
    assert all(spec.constant == -2.0 for spec in above)


def test_partial_failure_keeps_going(planner, row):
    outsider_root = Element("outsider_root")
    outsider = outsider_root.add_child(Element("outsider"))
    views = [row.views[0], outsider, row.views[1]]

    result = planner.fill_horizontally(row.container, views, separation=1.0)

    assert len(result.edges) == 2
    assert result.edges[0] is not None
    assert result.edges[1] is not None
    assert result.extents == [None, None]
    assert result.adjacent == [None, None]
    assert result.failures == 4
    assert len(result.constraints) == 2
    assert outsider_root.constraints == []


def test_string_axis(planner, row):
    result = planner.fill(row.container, row.views[:2], "horizontal", 1.0)
    assert result.edges[0].attribute is Attribute.LEFT

"""
Tests for targets.py
"""

import pytest

from embed_models.models.targets import (
    FilterTargetType,
    TargetType,
    get_filter_target_type,
    get_target_type,
    is_column,
    is_hierarchy,
    is_measure,
    is_page_target,
    is_visual_target,
)


class TestFilterTargetPredicates:
    def test_column(self):
        assert is_column({"table": "t", "column": "c"})
        assert not is_column({"column": "c"})

    def test_hierarchy(self):
        assert is_hierarchy({"table": "t", "hierarchy": "h", "hierarchyLevel": "l"})
        assert not is_hierarchy({"table": "t", "hierarchy": "h"})

    def test_measure(self):
        assert is_measure({"table": "t", "measure": "m"})
        assert not is_measure({"table": "t"})

    def test_present_with_null_value_counts(self):
        assert is_column({"table": None, "column": None})

    def test_predicates_are_independent(self):
        malformed = {"table": "t", "column": "c", "measure": "m", "hierarchy": "h", "hierarchyLevel": "l"}
        assert is_column(malformed)
        assert is_measure(malformed)
        assert is_hierarchy(malformed)

    def test_non_mapping(self):
        assert not is_column(None)
        assert not is_measure("table")


class TestGetFilterTargetType:
    @pytest.mark.parametrize(
        "target, expected",
        [
            ({"table": "t", "column": "c"}, FilterTargetType.COLUMN),
            ({"table": "t", "hierarchy": "h", "hierarchyLevel": "l"}, FilterTargetType.HIERARCHY),
            ({"table": "t", "measure": "m"}, FilterTargetType.MEASURE),
            ({"table": "t"}, FilterTargetType.UNKNOWN),
            ({}, FilterTargetType.UNKNOWN),
        ],
    )
    def test_well_formed(self, target, expected):
        assert get_filter_target_type(target) is expected

    def test_precedence_on_malformed_input(self):
        everything = {"table": "t", "column": "c", "measure": "m", "hierarchy": "h", "hierarchyLevel": "l"}
        assert get_filter_target_type(everything) is FilterTargetType.MEASURE

        column_and_hierarchy = {"table": "t", "column": "c", "hierarchy": "h", "hierarchyLevel": "l"}
        assert get_filter_target_type(column_and_hierarchy) is FilterTargetType.COLUMN


class TestGetTargetType:
    def test_page(self):
        assert is_page_target({"type": "page", "name": "p"})
        assert get_target_type({"type": "page", "name": "p"}) is TargetType.PAGE

    def test_visual(self):
        assert is_visual_target({"type": "visual", "id": "v"})
        assert get_target_type({"type": "visual", "id": "v"}) is TargetType.VISUAL

    def test_only_tag_is_inspected(self):
        assert get_target_type({"type": "page"}) is TargetType.PAGE

    def test_unknown(self):
        assert get_target_type({"name": "p"}) is TargetType.UNKNOWN
        assert get_target_type(None) is TargetType.UNKNOWN

"""
Tests for the validators bound to the packaged schemas.
"""

import pytest

from embed_models.exceptions import UnknownSchemaKindError
from embed_models.models.filters import AdvancedFilter, BasicFilter
from embed_models.models.json_schema_loader import load_schema
from embed_models.models.validators import (
    get_validator,
    validate_filter,
    validate_filters_container,
    validate_load,
    validate_page,
    validate_settings,
    validate_target,
)


def messages(errors):
    assert errors, "expected a non-empty error list"
    return [error.message for error in errors]


# ============================================================================
# validate_load
# ============================================================================

class TestValidateLoad:
    def test_missing_access_token_and_id(self, load_schema_doc):
        properties = load_schema_doc["properties"]
        found = messages(validate_load({}))
        assert properties["accessToken"]["messages"]["required"] in found
        assert properties["id"]["messages"]["required"] in found

    def test_access_token_type(self, load_schema_doc):
        expected = load_schema_doc["properties"]["accessToken"]["messages"]["type"]
        assert expected in messages(validate_load({"accessToken": 1, "id": "x"}))

    def test_id_type(self, load_schema_doc):
        expected = load_schema_doc["properties"]["id"]["messages"]["type"]
        assert expected in messages(validate_load({"accessToken": "y", "id": 5}))

    def test_minimal_configuration_is_valid(self):
        assert validate_load({"id": "x", "accessToken": "y"}) is None

    def test_invalid_filter(self, load_schema_doc):
        expected = load_schema_doc["properties"]["filter"]["invalidMessage"]
        errors = validate_load({"id": "fakeId", "accessToken": "fakeAccessToken", "filter": {"x": 1}})
        assert expected in messages(errors)

    def test_page_name_type(self, load_schema_doc):
        expected = load_schema_doc["properties"]["pageName"]["messages"]["type"]
        errors = validate_load({"id": "fakeId", "accessToken": "fakeAccessToken", "pageName": 1})
        assert expected in messages(errors)

    def test_invalid_nested_settings(self):
        expected = load_schema("settings")["properties"]["filterPaneEnabled"]["messages"]["type"]
        errors = validate_load({"id": "x", "accessToken": "y", "settings": {"filterPaneEnabled": "yes"}})
        assert messages(errors) == [expected]

    def test_full_configuration_is_valid(self, column_target):
        config = {
            "accessToken": "token",
            "id": "report",
            "pageName": "ReportSection1",
            "settings": {"filterPaneEnabled": False, "navContentPaneEnabled": True},
            "filter": BasicFilter.from_items(column_target, "In", "East").to_json(),
        }
        assert validate_load(config) is None

    def test_non_object(self):
        assert messages(validate_load("config")) == ["load configuration must be an object"]


# ============================================================================
# validate_settings
# ============================================================================

class TestValidateSettings:
    @pytest.mark.parametrize("field", ["filterPaneEnabled", "navContentPaneEnabled"])
    def test_boolean_fields(self, field):
        expected = load_schema("settings")["properties"][field]["messages"]["type"]
        assert expected in messages(validate_settings({field: 1}))

    def test_empty_settings_are_valid(self):
        assert validate_settings({}) is None


# ============================================================================
# validate_target
# ============================================================================

class TestValidateTarget:
    def test_page_target_without_name(self):
        assert validate_target({"type": "page"}) is not None

    def test_visual_target_without_id(self):
        assert validate_target({"type": "visual"}) is not None

    def test_valid_targets(self):
        assert validate_target({"type": "page", "name": "page1"}) is None
        assert validate_target({"type": "visual", "id": "v1"}) is None

    def test_composition_message(self):
        expected = load_schema("target")["invalidMessage"]
        assert messages(validate_target({"type": "slide", "name": "x"})) == [expected]


# ============================================================================
# validate_page
# ============================================================================

class TestValidatePage:
    def test_valid_page(self):
        assert validate_page({"name": "ReportSection1", "displayName": "Page 1"}) is None

    def test_missing_fields(self):
        assert messages(validate_page({})) == ["name is required", "displayName is required"]


# ============================================================================
# validate_filter
# ============================================================================

class TestValidateFilter:
    def test_neither_basic_nor_advanced(self):
        expected = load_schema("filter")["invalidMessage"]
        errors = validate_filter({"target": {"table": "c", "column": "d"}})
        assert expected in messages(errors)

    def test_malformed_filters(self):
        malformed = {"filter": {"entity": "c", "property": "d"}}
        malformed_condition = {
            "target": {"table": "a", "column": "b"},
            "logicalOperator": "And",
            "conditions": [{"value": {"x": 1}, "operator": "condition1"}],
        }
        assert validate_filter(malformed) is not None
        assert validate_filter(malformed_condition) is not None

    def test_unknown_basic_operator(self, column_target):
        basic_filter = BasicFilter.from_items(column_target, "Between", 1)
        assert validate_filter(basic_filter.to_json()) is not None

    def test_too_many_serialized_conditions(self, column_target):
        value = AdvancedFilter.from_items(column_target, "And", {"value": 1, "operator": "Is"}).to_json()
        value["conditions"] = value["conditions"] * 3
        assert validate_filter(value) is not None


# ============================================================================
# validate_filters_container
# ============================================================================

class TestValidateFiltersContainer:
    def test_valid_container(self, column_target):
        container = {
            "target": {"type": "page", "name": "page1"},
            "filters": [
                BasicFilter.from_items(column_target, "In", 1).to_json(),
                AdvancedFilter.from_items(column_target, "Or", {"value": 1, "operator": "IsNot"}).to_json(),
            ],
        }
        assert validate_filters_container(container) is None

    def test_target_is_optional(self):
        assert validate_filters_container({"filters": []}) is None

    def test_missing_filters(self):
        assert messages(validate_filters_container({})) == ["filters is required"]

    def test_invalid_filter_entry(self):
        expected = load_schema("filter")["invalidMessage"]
        assert messages(validate_filters_container({"filters": [{"x": 1}]})) == [expected]

    def test_invalid_target(self):
        expected = load_schema("target")["invalidMessage"]
        errors = validate_filters_container({"target": {"type": "page"}, "filters": []})
        assert messages(errors) == [expected]


# ============================================================================
# get_validator
# ============================================================================

class TestGetValidator:
    def test_known_kind(self):
        assert get_validator("load") is validate_load

    def test_unknown_kind(self):
        with pytest.raises(UnknownSchemaKindError, match="basicFilter"):
            get_validator("basicFilter")

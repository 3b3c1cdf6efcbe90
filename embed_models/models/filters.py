# Copyright 2026 The embed-models Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Filter value types and classification of serialized filters.

Each filter variant can be built from an explicit sequence or from separate
positional items; both produce identical JSON::

    BasicFilter.from_list({"table": "t", "column": "c"}, "In", [1, 2])
    BasicFilter.from_items({"table": "t", "column": "c"}, "In", 1, 2)
"""

from __future__ import annotations

import copy
from abc import ABC
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any, Callable, ClassVar, Dict, List, Literal, Tuple, TypedDict

from ..exceptions import FilterConstructionError
from .config import FilterTarget, PrimitiveValue

BasicFilterOperators = Literal["In", "NotIn"]
AdvancedFilterLogicalOperators = Literal["And", "Or"]
AdvancedFilterConditionOperators = Literal[
    "None",
    "LessThan",
    "LessThanOrEqual",
    "GreaterThan",
    "GreaterThanOrEqual",
    "Contains",
    "DoesNotContain",
    "StartsWith",
    "DoesNotStartWith",
    "Is",
    "IsNot",
    "IsBlank",
    "IsNotBlank",
]

BASIC_FILTER_OPERATORS: Tuple[str, ...] = ("In", "NotIn")
ADVANCED_FILTER_LOGICAL_OPERATORS: Tuple[str, ...] = ("And", "Or")
ADVANCED_FILTER_CONDITION_OPERATORS: Tuple[str, ...] = (
    "None",
    "LessThan",
    "LessThanOrEqual",
    "GreaterThan",
    "GreaterThanOrEqual",
    "Contains",
    "DoesNotContain",
    "StartsWith",
    "DoesNotStartWith",
    "Is",
    "IsNot",
    "IsBlank",
    "IsNotBlank",
)

MAX_ADVANCED_FILTER_CONDITIONS = 2


class AdvancedFilterCondition(TypedDict):
    value: PrimitiveValue
    operator: AdvancedFilterConditionOperators


class FilterType(Enum):
    ADVANCED = "Advanced"
    BASIC = "Basic"
    UNKNOWN = "Unknown"


def _as_list(items: Any, name: str) -> List[Any]:
    if isinstance(items, (str, bytes, Mapping)) or not isinstance(items, Iterable):
        raise FilterConstructionError(f"{name} must be a sequence. You passed: {items!r}")
    return list(items)


class Filter(ABC):
    """Base for filter variants.

    ``filter_type`` is the discriminant of the variant and ``schema_url`` the
    identifier written to the ``$schema`` field of its JSON.
    """

    filter_type: ClassVar[FilterType]
    schema_url: ClassVar[str]

    def __init__(self, target: FilterTarget):
        self.target = target

    def to_json(self) -> Dict[str, Any]:
        return {
            "$schema": self.schema_url,
            "target": copy.deepcopy(self.target),
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Filter):
            return NotImplemented
        return self.to_json() == other.to_json()

    # Fields stay mutable, so instances are not hashable.
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_json()!r})"


class BasicFilter(Filter):
    """Filter keeping rows whose target value is (or is not) in a set of values."""

    filter_type = FilterType.BASIC
    schema_url = "http://powerbi.com/product/schema#basic"

    def __init__(self, target: FilterTarget, operator: BasicFilterOperators, values: Iterable[PrimitiveValue]):
        super().__init__(target)
        values = _as_list(values, "values")
        if not values:
            raise FilterConstructionError(f"values must be a non-empty array. You passed: {values}")

        self.operator = operator
        self.values: List[PrimitiveValue] = values

    @classmethod
    def from_list(
        cls, target: FilterTarget, operator: BasicFilterOperators, values: Iterable[PrimitiveValue]
    ) -> "BasicFilter":
        return cls(target, operator, values)

    @classmethod
    def from_items(cls, target: FilterTarget, operator: BasicFilterOperators, *values: PrimitiveValue) -> "BasicFilter":
        return cls(target, operator, values)

    def to_json(self) -> Dict[str, Any]:
        filter_json = super().to_json()
        filter_json["operator"] = self.operator
        filter_json["values"] = copy.deepcopy(self.values)
        return filter_json


class AdvancedFilter(Filter):
    """Filter combining one or two comparison conditions with a logical operator.

    With a single condition the logical operator is carried but has no effect.
    """

    filter_type = FilterType.ADVANCED
    schema_url = "http://powerbi.com/product/schema#advanced"

    def __init__(
        self,
        target: FilterTarget,
        logical_operator: AdvancedFilterLogicalOperators,
        conditions: Iterable[AdvancedFilterCondition],
    ):
        super().__init__(target)

        if not isinstance(logical_operator, str) or not logical_operator:
            raise FilterConstructionError(
                f"logicalOperator must be a valid operator ({', '.join(ADVANCED_FILTER_LOGICAL_OPERATORS)}). "
                f"You passed: {logical_operator!r}"
            )

        conditions = _as_list(conditions, "conditions")
        if not conditions:
            raise FilterConstructionError(f"conditions must be a non-empty array. You passed: {conditions}")
        if len(conditions) > MAX_ADVANCED_FILTER_CONDITIONS:
            raise FilterConstructionError(
                f"AdvancedFilters may not have more than {MAX_ADVANCED_FILTER_CONDITIONS} conditions. "
                f"You passed: {len(conditions)}"
            )

        self.logical_operator = logical_operator
        self.conditions: List[AdvancedFilterCondition] = conditions

    @classmethod
    def from_list(
        cls,
        target: FilterTarget,
        logical_operator: AdvancedFilterLogicalOperators,
        conditions: Iterable[AdvancedFilterCondition],
    ) -> "AdvancedFilter":
        return cls(target, logical_operator, conditions)

    @classmethod
    def from_items(
        cls,
        target: FilterTarget,
        logical_operator: AdvancedFilterLogicalOperators,
        *conditions: AdvancedFilterCondition,
    ) -> "AdvancedFilter":
        return cls(target, logical_operator, conditions)

    def to_json(self) -> Dict[str, Any]:
        filter_json = super().to_json()
        filter_json["logicalOperator"] = self.logical_operator
        filter_json["conditions"] = copy.deepcopy(self.conditions)
        return filter_json


def _looks_basic(value: Mapping) -> bool:
    return isinstance(value.get("operator"), str) and isinstance(value.get("values"), list)


def _looks_advanced(value: Mapping) -> bool:
    return isinstance(value.get("logicalOperator"), str) and isinstance(value.get("conditions"), list)


# Checked in order; a value matching both shapes is classified as Basic.
_FILTER_TYPE_CHECKS: Tuple[Tuple[FilterType, Callable[[Mapping], bool]], ...] = (
    (FilterType.BASIC, _looks_basic),
    (FilterType.ADVANCED, _looks_advanced),
)


def get_filter_type(value: Any) -> FilterType:
    """Classify deserialized filter JSON by its fields.

    The ``$schema`` field is not consulted. Filter instances should be
    inspected through ``filter_type`` instead.
    """
    if not isinstance(value, Mapping):
        return FilterType.UNKNOWN
    for filter_type, check in _FILTER_TYPE_CHECKS:
        if check(value):
            return filter_type
    return FilterType.UNKNOWN

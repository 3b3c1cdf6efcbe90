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

"""Structural classification of targets.

Two families of targets exist:

* Filter targets (column, hierarchy, measure) carry no tag and are told apart
  by which fields are present. A field counts as present when its key exists,
  even if the value is ``None``.
* Page and visual targets carry a ``type`` tag.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, Callable, Tuple


class FilterTargetType(Enum):
    COLUMN = "Column"
    HIERARCHY = "Hierarchy"
    MEASURE = "Measure"
    UNKNOWN = "Unknown"


class TargetType(Enum):
    PAGE = "page"
    VISUAL = "visual"
    UNKNOWN = "unknown"


def _has_fields(arg: Any, *fields: str) -> bool:
    return isinstance(arg, Mapping) and all(field in arg for field in fields)


def is_measure(arg: Any) -> bool:
    return _has_fields(arg, "table", "measure")


def is_column(arg: Any) -> bool:
    return _has_fields(arg, "table", "column")


def is_hierarchy(arg: Any) -> bool:
    return _has_fields(arg, "table", "hierarchy", "hierarchyLevel")


# Checked in order; first match wins. Malformed input carrying fields of
# several shapes is classified by the earliest matching entry.
_FILTER_TARGET_CHECKS: Tuple[Tuple[FilterTargetType, Callable[[Any], bool]], ...] = (
    (FilterTargetType.MEASURE, is_measure),
    (FilterTargetType.COLUMN, is_column),
    (FilterTargetType.HIERARCHY, is_hierarchy),
)


def get_filter_target_type(arg: Any) -> FilterTargetType:
    """Classify a deserialized filter target by the fields it carries."""
    for target_type, check in _FILTER_TARGET_CHECKS:
        if check(arg):
            return target_type
    return FilterTargetType.UNKNOWN


def is_page_target(arg: Any) -> bool:
    return isinstance(arg, Mapping) and arg.get("type") == TargetType.PAGE.value


def is_visual_target(arg: Any) -> bool:
    return isinstance(arg, Mapping) and arg.get("type") == TargetType.VISUAL.value


def get_target_type(arg: Any) -> TargetType:
    """Classify a page or visual target by its ``type`` tag.

    Only the tag is inspected; use ``validate_target`` to check the rest of
    the shape.
    """
    if is_page_target(arg):
        return TargetType.PAGE
    if is_visual_target(arg):
        return TargetType.VISUAL
    return TargetType.UNKNOWN

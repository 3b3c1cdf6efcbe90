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

"""Plain record shapes exchanged with the embedding client.

These are structural descriptions only. Values of these shapes are built as
ordinary dicts (usually straight from JSON) and checked with the validators in
:mod:`embed_models.models.validators`; nothing here carries behavior.
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, NotRequired, TypedDict, Union


class SchemaKind:
    """Names of the schema documents shipped with the package."""

    LOAD = "load"
    SETTINGS = "settings"
    PAGE = "page"
    TARGET = "target"
    PAGE_TARGET = "pageTarget"
    VISUAL_TARGET = "visualTarget"
    FILTER = "filter"
    BASIC_FILTER = "basicFilter"
    ADVANCED_FILTER = "advancedFilter"
    FILTERS_CONTAINER = "filtersContainer"

    @classmethod
    def get_all_kinds(cls) -> List[str]:
        return [
            cls.LOAD,
            cls.SETTINGS,
            cls.PAGE,
            cls.TARGET,
            cls.PAGE_TARGET,
            cls.VISUAL_TARGET,
            cls.FILTER,
            cls.BASIC_FILTER,
            cls.ADVANCED_FILTER,
            cls.FILTERS_CONTAINER,
        ]


PrimitiveValue = Union[str, int, float, bool]


class FilterColumnTarget(TypedDict):
    table: str
    column: str


class FilterHierarchyTarget(TypedDict):
    table: str
    hierarchy: str
    hierarchyLevel: str


class FilterMeasureTarget(TypedDict):
    table: str
    measure: str


FilterTarget = Union[FilterColumnTarget, FilterHierarchyTarget, FilterMeasureTarget]


class Settings(TypedDict, total=False):
    filterPaneEnabled: bool
    navContentPaneEnabled: bool


class LoadConfiguration(TypedDict):
    accessToken: str
    id: str
    settings: NotRequired[Settings]
    pageName: NotRequired[str]
    # Serialized filter, see Filter.to_json()
    filter: NotRequired[Dict[str, Any]]


class Page(TypedDict):
    name: str
    displayName: str


class Visual(TypedDict):
    id: str


class PageTarget(TypedDict):
    type: Literal["page"]
    name: str


class VisualTarget(TypedDict):
    type: Literal["visual"]
    id: str


Target = Union[PageTarget, VisualTarget]


class FiltersContainer(TypedDict):
    target: NotRequired[Target]
    filters: List[Dict[str, Any]]

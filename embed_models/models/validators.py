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

"""Validators bound to the packaged schema documents.

Each validator returns ``None`` for a valid value, or a non-empty list of
:class:`~embed_models.models.schema_validator.SchemaIssue`.
"""

from typing import Dict

from ..exceptions import UnknownSchemaKindError
from .config import SchemaKind
from .json_schema_loader import get_default_registry
from .schema_validator import Validate, build_validator


def _bind(kind: str, *references: str) -> Validate:
    registry = get_default_registry()
    return build_validator(registry[kind], registry.subset(references))


validate_settings = _bind(SchemaKind.SETTINGS)

validate_load = _bind(
    SchemaKind.LOAD,
    SchemaKind.SETTINGS,
    SchemaKind.BASIC_FILTER,
    SchemaKind.ADVANCED_FILTER,
)

validate_target = _bind(
    SchemaKind.TARGET,
    SchemaKind.PAGE_TARGET,
    SchemaKind.VISUAL_TARGET,
)

validate_page = _bind(SchemaKind.PAGE)

validate_filter = _bind(
    SchemaKind.FILTER,
    SchemaKind.BASIC_FILTER,
    SchemaKind.ADVANCED_FILTER,
)

validate_filters_container = _bind(
    SchemaKind.FILTERS_CONTAINER,
    SchemaKind.TARGET,
    SchemaKind.PAGE_TARGET,
    SchemaKind.VISUAL_TARGET,
    SchemaKind.FILTER,
    SchemaKind.BASIC_FILTER,
    SchemaKind.ADVANCED_FILTER,
)

_VALIDATORS: Dict[str, Validate] = {
    SchemaKind.LOAD: validate_load,
    SchemaKind.SETTINGS: validate_settings,
    SchemaKind.TARGET: validate_target,
    SchemaKind.PAGE: validate_page,
    SchemaKind.FILTER: validate_filter,
    SchemaKind.FILTERS_CONTAINER: validate_filters_container,
}


def get_validator_kinds() -> list:
    """Schema kinds that have a bound validator."""
    return list(_VALIDATORS)


def get_validator(kind: str) -> Validate:
    """Get the bound validator for a schema kind."""
    if kind not in _VALIDATORS:
        raise UnknownSchemaKindError(f"No validator for schema kind '{kind}'. Valid kinds: {get_validator_kinds()}")
    return _VALIDATORS[kind]

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

"""Filter and load-configuration models for the embedding client."""

__version__ = "0.1.0"

from .exceptions import (
    EmbedModelsError,
    FilterConstructionError,
    SchemaConfigurationError,
    SchemaNotFoundError,
    SchemaReferenceError,
    UnknownSchemaKindError,
)
from .models import (
    AdvancedFilter,
    BasicFilter,
    Filter,
    FilterTargetType,
    FilterType,
    SchemaIssue,
    TargetType,
    build_validator,
    get_filter_target_type,
    get_filter_type,
    get_target_type,
    is_column,
    is_hierarchy,
    is_measure,
    is_page_target,
    is_visual_target,
    normalize_error,
)
from .models.validators import (
    get_validator,
    validate_filter,
    validate_filters_container,
    validate_load,
    validate_page,
    validate_settings,
    validate_target,
)

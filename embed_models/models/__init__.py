"""Embed data model: filters, targets and schema validation.

Only the filter and target modules are imported eagerly; the bound
validators load schema documents and are exposed from
:mod:`embed_models.models.validators`.
"""

from .filters import (
    AdvancedFilter,
    BasicFilter,
    Filter,
    FilterType,
    get_filter_type,
)
from .schema_validator import SchemaIssue, build_validator, normalize_error
from .targets import (
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

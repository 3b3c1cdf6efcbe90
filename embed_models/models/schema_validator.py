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

"""Schema-driven validation with named cross references and normalized errors.

Schemas may refer to each other by bare name (``{"$ref": "basicFilter"}``).
:func:`build_validator` binds a root schema to a mapping of such names and
returns a function that checks a value and reports either ``None`` (valid) or
a non-empty list of :class:`SchemaIssue`.

Besides standard Draft-07 keywords, schema documents may carry override
messages that replace the generated text of a failure:

* ``messages``: keyword -> message, e.g. ``{"type": "id must be a string"}``.
  A ``required`` entry on a property's subschema is used when that property
  is missing from its parent object.
* ``requiredMessage``: shorthand for ``messages.required``.
* ``invalidMessage``: fallback for any other failing keyword of the subschema,
  typically a ``oneOf`` composition.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Iterator, List, Optional, Set

from jsonschema import Draft7Validator, validators
from jsonschema.exceptions import SchemaError, ValidationError
from referencing import Registry, Resource
from referencing.exceptions import Unresolvable
from referencing.jsonschema import DRAFT7

from ..exceptions import SchemaConfigurationError, SchemaReferenceError
from .json_schema_loader import SchemaRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SchemaIssue:
    """Public shape of a validation failure."""

    message: str


@dataclass(frozen=True)
class RawSchemaFailure:
    """A structural failure as reported by the schema evaluator."""

    path: str
    keyword: str
    message: Optional[str] = None


Validate = Callable[[Any], Optional[List[SchemaIssue]]]


def normalize_error(failure: RawSchemaFailure) -> SchemaIssue:
    """Convert a raw failure into the public error shape.

    An override message is used verbatim; otherwise one is synthesized from
    the failing location and keyword. Nothing but the message survives.
    """
    if failure.message:
        return SchemaIssue(message=failure.message)
    return SchemaIssue(message=f"{failure.path} is invalid. Not meeting {failure.keyword} constraint")


def _required(validator, required, instance, schema):
    # Same as the Draft-07 keyword, but each error points at the missing
    # property so its subschema's override message can be found.
    if not validator.is_type(instance, "object"):
        return
    for name in required:
        if name not in instance:
            yield ValidationError(f"{name!r} is a required property", path=(name,))


_SchemaValidator = validators.extend(Draft7Validator, validators={"required": _required})


def _message_for(schema: Any, keyword: str) -> Optional[str]:
    if not isinstance(schema, Mapping):
        return None

    messages = schema.get("messages")
    if isinstance(messages, Mapping) and isinstance(messages.get(keyword), str):
        return messages[keyword]

    if keyword == "required":
        message = schema.get("requiredMessage")
    else:
        message = schema.get("invalidMessage")
    return message if isinstance(message, str) else None


def _override_message(error: ValidationError) -> Optional[str]:
    if error.validator == "required":
        properties = error.schema.get("properties") if isinstance(error.schema, Mapping) else None
        if not isinstance(properties, Mapping) or not error.relative_path:
            return None
        return _message_for(properties.get(error.relative_path[-1]), "required")
    return _message_for(error.schema, str(error.validator))


def _to_raw_failure(error: ValidationError) -> RawSchemaFailure:
    return RawSchemaFailure(
        path=error.json_path,
        keyword=str(error.validator),
        message=_override_message(error),
    )


# Draft-07 keywords whose values hold subschemas; everything else is data.
_SUBSCHEMA_KEYWORDS = frozenset(
    {"additionalItems", "additionalProperties", "contains", "propertyNames", "if", "then", "else", "not", "items"}
)
_SUBSCHEMA_LIST_KEYWORDS = frozenset({"allOf", "anyOf", "oneOf", "items"})
_SUBSCHEMA_MAP_KEYWORDS = frozenset({"properties", "patternProperties", "definitions", "dependencies"})


def _iter_subschemas(schema: Mapping) -> Iterator[Any]:
    for key, value in schema.items():
        if key in _SUBSCHEMA_KEYWORDS and isinstance(value, Mapping):
            yield value
        elif key in _SUBSCHEMA_LIST_KEYWORDS and isinstance(value, list):
            yield from value
        elif key in _SUBSCHEMA_MAP_KEYWORDS and isinstance(value, Mapping):
            # dependencies may also map to a list of property names
            yield from (subschema for subschema in value.values() if isinstance(subschema, Mapping))


def _iter_reference_names(schema: Any) -> Iterator[str]:
    """Yield the document names referenced from schema positions of *schema*.

    Values of data keywords such as ``const``, ``enum`` and ``default`` are
    not searched. Local pointers (``#/definitions/...``) are skipped;
    ``name#/pointer`` yields ``name``.
    """
    if not isinstance(schema, Mapping):
        return
    ref = schema.get("$ref")
    if isinstance(ref, str):
        name = ref.split("#", 1)[0]
        if name:
            yield name
    for subschema in _iter_subschemas(schema):
        yield from _iter_reference_names(subschema)


def _check_references(schema: Any, auxiliary: Mapping[str, Any]) -> Set[str]:
    """Resolve every reference reachable from *schema* against *auxiliary*.

    Returns:
        The names reached, transitively

    Raises:
        SchemaReferenceError: If a reachable name is not in *auxiliary*
    """
    reached: Set[str] = set()
    missing: Set[str] = set()
    pending = list(_iter_reference_names(schema))

    while pending:
        name = pending.pop()
        if name in reached or name in missing:
            continue
        if name not in auxiliary:
            missing.add(name)
            continue
        reached.add(name)
        pending.extend(_iter_reference_names(auxiliary[name]))

    if missing:
        raise SchemaReferenceError(
            f"Schema references unknown schema(s): {sorted(missing)}. "
            f"Auxiliary schemas provided: {sorted(auxiliary)}"
        )
    return reached


def _check_schema(name: str, schema: Any) -> None:
    try:
        Draft7Validator.check_schema(schema)
    except SchemaError as e:
        raise SchemaConfigurationError(f"Schema '{name}' is not a valid JSON Schema: {e.message}") from e


def build_validator(schema: Mapping[str, Any], auxiliary_schemas: Optional[Mapping[str, Any]] = None) -> Validate:
    """Build a validation function for *schema*.

    Args:
        schema: Root schema the value is checked against
        auxiliary_schemas: Schemas the root may reference by name. Must cover
            every name reachable from the root, directly or through another
            auxiliary schema.

    Returns:
        A function taking a value and returning ``None`` when it satisfies the
        schema, or a non-empty list of :class:`SchemaIssue` in evaluation order.

    Raises:
        SchemaConfigurationError: If a schema is malformed
        SchemaReferenceError: If a referenced name is not provided
    """
    root = copy.deepcopy(dict(schema))
    auxiliary = SchemaRegistry(auxiliary_schemas)

    _check_schema("<root>", root)
    for name, document in auxiliary.items():
        _check_schema(name, document)
    reached = _check_references(root, auxiliary)

    registry = Registry().with_resources(
        (name, Resource.from_contents(document, default_specification=DRAFT7))
        for name, document in auxiliary.items()
    )
    validator = _SchemaValidator(root, registry=registry)
    logger.debug(f"Built validator referencing {sorted(reached)} (provided: {sorted(auxiliary)})")

    def validate(value: Any) -> Optional[List[SchemaIssue]]:
        try:
            failures = [_to_raw_failure(error) for error in validator.iter_errors(value)]
        except Unresolvable as e:
            raise SchemaReferenceError(f"Failed to resolve schema reference: {e}") from e

        if not failures:
            return None

        logger.debug(f"Validation found {len(failures)} issue(s)")
        return [normalize_error(failure) for failure in failures]

    return validate

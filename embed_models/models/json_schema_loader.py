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

"""JSON Schema loader and schema registry for embed model validation."""

import copy
import json
import logging
import os
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, Mapping, Optional, Tuple

from ..exceptions import SchemaConfigurationError, SchemaNotFoundError
from .config import SchemaKind

logger = logging.getLogger(__name__)

SCHEMA_DIR_ENV = "EMBED_MODELS_SCHEMA_DIR"

# Schema cache to avoid reloading files
_SCHEMA_CACHE: Dict[Tuple[str, str], dict] = {}


def get_schema_dir() -> Path:
    """Return the directory schema documents are loaded from.

    ``EMBED_MODELS_SCHEMA_DIR`` replaces the packaged ``schema`` directory when
    the embedding application ships its own documents.
    """
    env_dir = os.environ.get(SCHEMA_DIR_ENV)
    if env_dir:
        return Path(env_dir)
    return Path(__file__).parent.parent / "schema"


def get_schema_path(name: str, schema_dir: Optional[Path] = None) -> Path:
    """Get the path to the JSON Schema file for the given schema name.

    Args:
        name: Schema name (load, settings, basicFilter, ...)
        schema_dir: Directory to look in; defaults to :func:`get_schema_dir`

    Returns:
        Path to the schema file
    """
    return (schema_dir or get_schema_dir()) / f"{name}.json"


def load_schema(name: str, schema_dir: Optional[Path] = None) -> dict:
    """Load a JSON Schema file by name.

    The returned dict is shared through the cache and must be treated as
    read-only; validators take their own copy when they are built.

    Raises:
        SchemaNotFoundError: If the schema file doesn't exist
        SchemaConfigurationError: If the schema file is invalid JSON or not an object
    """
    schema_path = get_schema_path(name, schema_dir)

    cache_key = (str(schema_path.parent), name)
    if cache_key in _SCHEMA_CACHE:
        return _SCHEMA_CACHE[cache_key]

    if not schema_path.exists():
        raise SchemaNotFoundError(f"Schema file not found for '{name}': {schema_path}")

    try:
        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)
    except json.JSONDecodeError as e:
        raise SchemaConfigurationError(f"Invalid JSON in schema file {schema_path}: {e.msg}") from e

    if not isinstance(schema, dict):
        raise SchemaConfigurationError(
            f"Schema file {schema_path} must contain a JSON object, got {type(schema).__name__}"
        )

    logger.debug(f"Loaded schema '{name}' from {schema_path}")
    _SCHEMA_CACHE[cache_key] = schema

    return schema


def clear_cache() -> None:
    """Clear the schema cache. Useful for testing."""
    _SCHEMA_CACHE.clear()
    get_default_registry.cache_clear()


class SchemaRegistry(Mapping[str, Any]):
    """Immutable mapping from schema name to schema document.

    Documents are deep-copied on the way in, so later changes to the source
    dicts never leak into validators built from the registry.
    """

    def __init__(self, schemas: Optional[Mapping[str, Any]] = None):
        documents: Dict[str, Any] = {}
        for name, document in (schemas or {}).items():
            if not isinstance(name, str) or not name:
                raise SchemaConfigurationError(f"Schema names must be non-empty strings, got: {name!r}")
            documents[name] = copy.deepcopy(document)
        self._schemas = MappingProxyType(documents)

    @classmethod
    def from_names(cls, names: Iterable[str], schema_dir: Optional[Path] = None) -> "SchemaRegistry":
        """Build a registry by loading each named document from disk."""
        return cls({name: load_schema(name, schema_dir) for name in names})

    def subset(self, names: Iterable[str]) -> "SchemaRegistry":
        """Return a registry restricted to *names*.

        Raises:
            SchemaNotFoundError: If a name is not registered
        """
        selected = {}
        for name in names:
            if name not in self._schemas:
                raise SchemaNotFoundError(
                    f"Schema '{name}' is not registered. Registered: {sorted(self._schemas)}"
                )
            selected[name] = self._schemas[name]
        return SchemaRegistry(selected)

    def __getitem__(self, name: str) -> Any:
        return self._schemas[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._schemas)

    def __len__(self) -> int:
        return len(self._schemas)

    def __repr__(self) -> str:
        return f"SchemaRegistry({sorted(self._schemas)})"


@lru_cache(maxsize=1)
def get_default_registry() -> SchemaRegistry:
    """Registry holding every schema document shipped with the package."""
    return SchemaRegistry.from_names(SchemaKind.get_all_kinds())

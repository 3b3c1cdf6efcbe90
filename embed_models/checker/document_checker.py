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

"""Schema checker for JSON and YAML documents.

The schema kind of a document comes from its file name, ``<label>.<kind>.<ext>``
(for example ``report.load.json``), unless the caller fixes it explicitly.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional, Tuple

import yaml

from ..exceptions import EmbedModelsError, UnknownSchemaKindError
from ..models.validators import get_validator, get_validator_kinds
from .report import CheckResult

logger = logging.getLogger(__name__)

JSON_SUFFIXES = ('.json',)
YAML_SUFFIXES = ('.yaml', '.yml')
DOCUMENT_SUFFIXES = JSON_SUFFIXES + YAML_SUFFIXES


def document_name_decode(file_stem: str) -> Tuple[str, str]:
    """Decode a document file stem into label and schema kind."""
    # example: 'report.load' -> ('report', 'load')

    if "." not in file_stem:
        raise UnknownSchemaKindError(
            f"Cannot determine schema kind from '{file_stem}'. Expected format: 'label.kind'"
        )

    label, kind = file_stem.rsplit(".", 1)

    if not label.strip():
        raise UnknownSchemaKindError(f"Document label cannot be empty in: '{file_stem}'")

    if kind not in get_validator_kinds():
        raise UnknownSchemaKindError(f"Invalid schema kind: '{kind}'. Valid kinds: {get_validator_kinds()}")

    return label.strip(), kind


def load_document(file_path: Path) -> Any:
    """Load a JSON or YAML document."""
    with open(file_path, "r", encoding="utf-8") as f:
        if file_path.suffix.lower() in YAML_SUFFIXES:
            return yaml.safe_load(f)
        return json.load(f)


class DocumentChecker:
    """Checks one document against its schema kind."""

    def __init__(self, kind: Optional[str] = None):
        """Initialize the checker.

        Args:
            kind: Schema kind applied to every document; inferred from file names when None
        """
        self.kind = kind

    def check(self, file_path: Path, result: CheckResult) -> None:
        """Check a document and record issues on *result*."""
        try:
            kind = self.kind or document_name_decode(file_path.stem)[1]
            validate = get_validator(kind)
        except UnknownSchemaKindError as e:
            result.add_error(f"Invalid document name: {e}")
            return
        result.kind = kind

        try:
            document = load_document(file_path)
        except (OSError, ValueError, yaml.YAMLError) as e:
            result.add_error(f"Failed to load document: {e}")
            return

        logger.debug(f"Checking {file_path} as '{kind}'")
        try:
            issues = validate(document)
        except EmbedModelsError as e:
            result.add_error(f"Validator configuration error: {e}")
            return

        for issue in issues or []:
            result.add_error(issue.message)

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

"""Result reporting for the document checker."""

from pathlib import Path
from typing import Any, Dict, List, Optional


class CheckResult:
    """Container for checking results for a single document."""

    def __init__(self, file_path: Path, kind: Optional[str] = None):
        """Initialize check result.

        Args:
            file_path: Path to the document being checked
            kind: Schema kind the document is checked against, once known
        """
        self.file_path = file_path
        self.kind = kind
        self.errors: List[Dict[str, Any]] = []

    @property
    def ok(self) -> bool:
        return not self.errors

    def add_error(self, message: str) -> None:
        self.errors.append({'message': message})

    def to_dict(self) -> Dict[str, Any]:
        return {
            'file': str(self.file_path),
            'kind': self.kind,
            'errors': list(self.errors),
        }

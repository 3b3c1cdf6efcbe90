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

"""Checker package for embed model documents."""

from pathlib import Path
from typing import List, Optional

from .document_checker import DocumentChecker
from .report import CheckResult

__all__ = ['check_files', 'CheckResult']


def check_files(file_paths: List[Path], kind: Optional[str] = None) -> List[CheckResult]:
    """Check a list of JSON or YAML documents.

    Args:
        file_paths: List of file paths to check
        kind: Schema kind for every file; inferred from each file name when None

    Returns:
        List of CheckResult objects, one per file
    """
    checker = DocumentChecker(kind)
    results = []

    for file_path in file_paths:
        result = CheckResult(file_path, kind)
        checker.check(file_path, result)
        results.append(result)

    return results

#!/usr/bin/env python3
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

"""CLI entry point for checking embed model documents against their schemas."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List

from ..models.validators import get_validator_kinds
from ..utils.logging_utils import configure_split_stream_logging
from . import check_files
from .document_checker import DOCUMENT_SUFFIXES

logger = logging.getLogger(__name__)


def find_documents(paths: List[str]) -> List[Path]:
    """Find all JSON and YAML documents in given paths."""
    documents = []

    for path_str in paths:
        path = Path(path_str)

        if not path.exists():
            logger.warning(f"Path does not exist: {path}")
            continue

        if path.is_file():
            if path.suffix.lower() in DOCUMENT_SUFFIXES:
                documents.append(path)
            else:
                logger.warning(f"File is not a JSON or YAML document: {path}")
        elif path.is_dir():
            for suffix in DOCUMENT_SUFFIXES:
                documents.extend(path.rglob(f'*{suffix}'))
        else:
            logger.warning(f"Path is neither file nor directory: {path}")

    return sorted(set(documents))


def main(argv: List[str] | None = None) -> None:
    """Main entry point for the checker CLI."""
    parser = argparse.ArgumentParser(
        description='Check embed model documents (load configuration, filters, targets, ...) against their schemas',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        'paths',
        nargs='*',
        default=None,
        help='File paths or directories to check (default: current directory)',
    )
    parser.add_argument(
        '--kind',
        choices=get_validator_kinds(),
        default=None,
        help='Schema kind for every document (default: inferred from <label>.<kind>.<ext> file names)',
    )
    parser.add_argument(
        '--format',
        choices=['human', 'json'],
        default='human',
        help='Output format (default: human)',
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable debug logging',
    )

    args = parser.parse_args(argv)
    configure_split_stream_logging(level=logging.DEBUG if args.verbose else None)

    if not args.paths:
        args.paths = ['.']

    documents = find_documents(args.paths)

    if not documents:
        logger.error("No JSON or YAML documents found.")
        sys.exit(1)

    results = check_files(documents, kind=args.kind)
    logger.debug(f"Checked {len(results)} document(s)")

    if args.format == 'json':
        output = {
            'files': len(results),
            'errors': sum(len(r.errors) for r in results),
            'results': [r.to_dict() for r in results],
        }
        print(json.dumps(output, indent=2))
    else:  # human-readable
        for result in results:
            if result.errors:
                kind_info = f" ({result.kind})" if result.kind else ""
                print(f"\n{result.file_path}{kind_info}:")
                for error in result.errors:
                    print(f"  ERROR: {error['message']}")

    # Exit with error code if any errors found
    if any(not r.ok for r in results):
        sys.exit(1)
    if args.format == 'human':
        print("Check succeeded with no errors.")
    sys.exit(0)


if __name__ == '__main__':
    main()

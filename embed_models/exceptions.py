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

"""Custom exceptions for the embed models package.

Data that fails schema validation is never reported through these
exceptions; validators return a list of issues instead. The classes below
cover API misuse and validator wiring defects.
"""


class EmbedModelsError(Exception):
    """Base exception for embed model related errors."""
    pass


class FilterConstructionError(EmbedModelsError, ValueError):
    """Exception raised when a filter is constructed with invalid arguments."""
    pass


class SchemaConfigurationError(EmbedModelsError):
    """Exception raised when a validator is wired with unusable schemas."""
    pass


class SchemaReferenceError(SchemaConfigurationError):
    """Exception raised when a schema references a name that cannot be resolved."""
    pass


class SchemaNotFoundError(SchemaConfigurationError, FileNotFoundError):
    """Exception raised when a named schema document does not exist."""
    pass


class UnknownSchemaKindError(EmbedModelsError, KeyError):
    """Exception raised when no validator is bound to the requested schema kind."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""

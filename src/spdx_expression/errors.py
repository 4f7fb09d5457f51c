# Copyright 2026 Google LLC
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
#
# SPDX-License-Identifier: Apache-2.0

"""Exception types raised by spdx_expression."""

from __future__ import annotations

__all__ = [
    'ConfigError',
    'ParseError',
    'SpdxExpressionError',
]


class SpdxExpressionError(Exception):
    """Base class for every error raised by this package."""


class ParseError(SpdxExpressionError, ValueError):
    """Raised when an SPDX expression cannot be parsed.

    Parsing is all-or-nothing, so there is a single failure kind no matter
    whether a character was invalid, an operator was misplaced, or input
    was left over after a valid prefix.

    Attributes:
        expression: The original expression string, unmodified.
        position: Offset where the parser stopped. Diagnostic only.
    """

    def __init__(self, expression: str, position: int = 0) -> None:
        """Initialize with the offending text and the offset reached."""
        self.expression = expression
        self.position = position
        super().__init__(f'Parsing for expression `{expression}` failed.')


class ConfigError(SpdxExpressionError):
    """Raised when a ``[tool.spdx-expression]`` table holds invalid values."""

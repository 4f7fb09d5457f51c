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

"""Configuration read from ``[tool.spdx-expression]`` in ``pyproject.toml``.

Example::

    [tool.spdx-expression]
    max-depth = 50
    verbose = true
    json-log = false

All keys are optional. A missing file or table yields the defaults.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomlkit

from spdx_expression.errors import ConfigError
from spdx_expression.logging import configure_logging, get_logger
from spdx_expression.parser import DEFAULT_MAX_DEPTH, max_depth_limit

__all__ = [
    'ParserConfig',
    'load_config',
    'parse_config',
]

log = get_logger('spdx_expression.config')

TOOL_TABLE = 'spdx-expression'

_BOOL_KEYS = ('verbose', 'quiet', 'json-log')
_ALLOWED_KEYS = frozenset({'max-depth', *_BOOL_KEYS})


@dataclass(frozen=True)
class ParserConfig:
    """Settings for parsing and logging.

    Attributes:
        max_depth: Maximum parenthesis nesting accepted by the parser.
        verbose: Enable debug-level logging.
        quiet: Only log warnings and errors.
        json_log: Emit JSON log lines instead of console output.
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    verbose: bool = False
    quiet: bool = False
    json_log: bool = False

    def apply_logging(self) -> None:
        """Configure structlog according to the logging flags."""
        configure_logging(verbose=self.verbose, quiet=self.quiet, json_log=self.json_log)


def parse_config(table: Mapping[str, Any]) -> ParserConfig:
    """Validate a ``[tool.spdx-expression]`` table.

    Args:
        table: The table contents as plain Python values.

    Returns:
        A :class:`ParserConfig` with defaults for missing keys.

    Raises:
        ConfigError: On unknown keys, values of the wrong type, or a
            max-depth the interpreter stack cannot reach.
    """
    unknown = sorted(set(table) - _ALLOWED_KEYS)
    if unknown:
        raise ConfigError(f'Unknown key(s) in [tool.{TOOL_TABLE}]: {", ".join(unknown)}')

    max_depth = table.get('max-depth', DEFAULT_MAX_DEPTH)
    # bool is an int subclass; reject it explicitly.
    if isinstance(max_depth, bool) or not isinstance(max_depth, int) or max_depth <= 0:
        raise ConfigError(f'max-depth must be a positive integer, got {max_depth!r}')
    limit = max_depth_limit()
    if max_depth > limit:
        raise ConfigError(f'max-depth must be at most {limit} for the current recursion limit, got {max_depth}')

    flags: dict[str, bool] = {}
    for key in _BOOL_KEYS:
        value = table.get(key, False)
        if not isinstance(value, bool):
            raise ConfigError(f'{key} must be a boolean, got {value!r}')
        flags[key] = value

    return ParserConfig(
        max_depth=max_depth,
        verbose=flags['verbose'],
        quiet=flags['quiet'],
        json_log=flags['json-log'],
    )


def load_config(path: Path) -> ParserConfig:
    """Load :class:`ParserConfig` from a TOML file such as ``pyproject.toml``.

    Args:
        path: Path to the TOML file.

    Returns:
        The parsed configuration, or defaults when the file or the
        ``[tool.spdx-expression]`` table does not exist.

    Raises:
        ConfigError: If the table holds invalid values.
    """
    if not path.is_file():
        log.debug('config_not_found', path=str(path))
        return ParserConfig()
    doc = tomlkit.parse(path.read_text(encoding='utf-8')).unwrap()
    table = doc.get('tool', {}).get(TOOL_TABLE)
    if table is None:
        return ParserConfig()
    if not isinstance(table, dict):
        raise ConfigError(f'[tool.{TOOL_TABLE}] must be a table')
    return parse_config(table)

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

"""Structured logging for spdx_expression.

The parser reports what it does as structlog events on the
``spdx_expression.parser`` logger, all at debug level::

    ┌─────────────────────────────┬─────────────────────────────────────────┐
    │ Event                       │ Fields                                  │
    ├─────────────────────────────┼─────────────────────────────────────────┤
    │ spdx_parsed                 │ expression                              │
    │ spdx_parse_failed           │ expression, position                    │
    │ spdx_max_depth_exceeded     │ expression, position, max_depth         │
    │ spdx_max_depth_lowered      │ requested, max_depth                    │
    │ spdx_recursion_limit_hit    │ expression, max_depth                   │
    └─────────────────────────────┴─────────────────────────────────────────┘

Nothing is printed unless an application calls :func:`configure_logging`
(or :meth:`~spdx_expression.config.ParserConfig.apply_logging`). Output
goes to stderr, as console text or as one JSON object per line. Long
``expression`` fields are shortened so that a pathological input does not
flood the log.

Usage::

    from spdx_expression import parse
    from spdx_expression.logging import configure_logging

    configure_logging(verbose=True)
    parse('MIT OR Apache-2.0')  # logs spdx_parsed
"""

from __future__ import annotations

import logging
import sys
from collections.abc import MutableMapping
from typing import Any

import structlog

# Longest expression text copied into a log event.
MAX_LOGGED_EXPRESSION = 200


def _level_for(*, verbose: bool, quiet: bool) -> int:
    if quiet:
        return logging.WARNING
    if verbose:
        return logging.DEBUG
    return logging.INFO


def shorten_expression(
    logger: Any,  # noqa: ANN401
    method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Processor that truncates the ``expression`` field of an event.

    The cut text ends with ``...`` and the full length is recorded as
    ``expression_length``.
    """
    text = event_dict.get('expression')
    if isinstance(text, str) and len(text) > MAX_LOGGED_EXPRESSION:
        event_dict['expression'] = text[:MAX_LOGGED_EXPRESSION] + '...'
        event_dict['expression_length'] = len(text)
    return event_dict


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    json_log: bool = False,
) -> None:
    """Route spdx_expression events to stderr.

    Args:
        verbose: Show the debug-level parse events.
        quiet: Only show warnings and errors.
        json_log: Render events as JSON lines instead of console text.
    """
    logging.basicConfig(
        format='%(message)s',
        stream=sys.stderr,
        level=_level_for(verbose=verbose, quiet=quiet),
        force=True,
    )

    pre_chain: list[structlog.types.Processor] = [  # type: ignore[assignment]
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        shorten_expression,
    ]
    renderer: structlog.types.Processor
    if json_log:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    )
    for handler in logging.root.handlers:
        handler.setFormatter(formatter)


def get_logger(name: str = 'spdx_expression') -> structlog.stdlib.BoundLogger:
    """Return a structlog logger over the stdlib logger *name*.

    Wrapping a stdlib logger keeps its level filtering, so the parser's
    debug events cost nothing and print nothing until the application
    configures logging.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


__all__ = [
    'MAX_LOGGED_EXPRESSION',
    'configure_logging',
    'get_logger',
    'shorten_expression',
]

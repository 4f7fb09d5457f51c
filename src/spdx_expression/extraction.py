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

"""Collect the licenses and exceptions an expression references."""

from __future__ import annotations

from typing import TYPE_CHECKING

from spdx_expression.nodes import (
    And,
    Expression,
    Or,
    Parens,
    SimpleExpression,
    WithExpression,
)
from spdx_expression.parser import parse

if TYPE_CHECKING:
    from spdx_expression.expression import SPDXExpression

__all__ = [
    'licenses',
]

_NODE_TYPES = (SimpleExpression, WithExpression, And, Or, Parens)


def licenses(expr: str | Expression | SPDXExpression) -> list[str]:
    """Return the sorted, deduplicated license and exception tokens.

    License tokens are written the way they render: bare ids keep their
    ``+``, references keep their ``LicenseRef-`` and ``DocumentRef-<doc>:``
    qualifiers. ``WITH`` exceptions are included as separate tokens.
    Operators and parentheses are dropped.

    Args:
        expr: Expression text (parsed first), an AST node, or an
            :class:`~spdx_expression.expression.SPDXExpression`.

    Returns:
        Tokens in ascending codepoint order, each appearing once.

    Raises:
        ParseError: If *expr* is a string that does not parse.

    Examples::

        >>> licenses('MIT OR (Apache-2.0 AND MIT)')
        ['Apache-2.0', 'MIT']

        >>> licenses('GPL-2.0+ WITH Bison-exception-2.2')
        ['Bison-exception-2.2', 'GPL-2.0+']
    """
    if isinstance(expr, str):
        root = parse(expr)
    elif isinstance(expr, _NODE_TYPES):
        root = expr
    else:
        root = expr.root

    found: set[str] = set()
    stack: list[Expression] = [root]
    while stack:
        node = stack.pop()
        if isinstance(node, SimpleExpression):
            found.add(str(node))
        elif isinstance(node, WithExpression):
            found.add(str(node.license))
            found.add(node.exception)
        elif isinstance(node, (And, Or)):
            stack.append(node.right)
            stack.append(node.left)
        elif isinstance(node, Parens):
            stack.append(node.inner)
    return sorted(found)

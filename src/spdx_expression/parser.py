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

r"""SPDX license expression parser.

Parses SPDX license expressions into the AST defined in
:mod:`spdx_expression.nodes`.

Grammar (precedence climbing, loosest first)::

    expr      = term   ("OR"  term)*
    term      = factor ("AND" factor)*
    factor    = with-expr / simple / "(" expr ")"
    with-expr = simple-license WS "WITH" WS idstring
    simple    = license-ref / license-idstring

Operator precedence (tightest to loosest)::

    +  >  WITH  >  AND  >  OR

Rules:
    - Operators are case-insensitive (``AND``, ``and``, ``And``) and need
      at least one whitespace character on each side.
    - Identifiers are case-sensitive and never checked against the SPDX
      license list.
    - ``AND`` and ``OR`` are left-associative:
      ``A AND B AND C`` is ``And(And(A, B), C)``.
    - Only a single license may precede ``WITH``;
      ``(A AND B) WITH E`` is rejected.
    - The exception after ``WITH`` is a bare idstring: no ``+`` and no
      ``LicenseRef-``/``DocumentRef-`` prefix.
    - Parentheses are kept as :class:`~spdx_expression.nodes.Parens` nodes.

Usage::

    from spdx_expression.parser import parse
    from spdx_expression.nodes import And, Or, SimpleExpression

    expr = parse('MIT OR Apache-2.0 AND ISC')
    assert expr == Or(
        SimpleExpression('MIT'),
        And(SimpleExpression('Apache-2.0'), SimpleExpression('ISC')),
    )
"""

from __future__ import annotations

import sys
from functools import reduce

from spdx_expression._recognizers import (
    DOCUMENT_REF,
    LICENSE_REF,
    idstring,
    keyword,
    simple_license_expression,
    skip_whitespace,
)
from spdx_expression.errors import ParseError
from spdx_expression.logging import get_logger
from spdx_expression.nodes import And, Expression, Or, Parens, WithExpression

__all__ = [
    'DEFAULT_MAX_DEPTH',
    'max_depth_limit',
    'parse',
]

log = get_logger('spdx_expression.parser')

# Four Python frames per level of parentheses (expr, term, factor, parens).
DEFAULT_MAX_DEPTH = 100

# Frames kept free for callers of parse() and for the recognizers.
_STACK_HEADROOM = 200

_Match = tuple[int, Expression]


def max_depth_limit() -> int:
    """Return the deepest nesting the interpreter stack can parse.

    Derived from :func:`sys.getrecursionlimit`; a larger ``max_depth`` is
    lowered to this value by :func:`parse` and rejected by the config loader.
    """
    return max(1, (sys.getrecursionlimit() - _STACK_HEADROOM) // 4)


def _fold(initial: Expression, remainder: list[tuple[type[And] | type[Or], Expression]]) -> Expression:
    """Fold ``(operator, operand)`` pairs onto *initial*, left to right."""
    return reduce(lambda acc, pair: pair[0](acc, pair[1]), remainder, initial)


class _Parser:
    """Recursive descent parser for SPDX license expressions.

    Each rule takes the cursor and the current parenthesis depth and
    returns ``(new_pos, node)`` or ``None``. Nothing is consumed on
    ``None``, so callers backtrack by simply reusing their own ``pos``.
    """

    def __init__(self, text: str, max_depth: int) -> None:
        self._text = text
        self._max_depth = max_depth

    # expr = term ("OR" term)*
    def expression(self, pos: int, depth: int) -> _Match | None:
        m = self._term(pos, depth)
        if m is None:
            return None
        pos, initial = m
        remainder: list[tuple[type[And] | type[Or], Expression]] = []
        while True:
            after = keyword(self._text, pos, 'OR')
            if after is None:
                break
            m = self._term(after, depth)
            if m is None:
                break
            pos, operand = m
            remainder.append((Or, operand))
        return pos, _fold(initial, remainder)

    # term = factor ("AND" factor)*
    def _term(self, pos: int, depth: int) -> _Match | None:
        m = self._factor(pos, depth)
        if m is None:
            return None
        pos, initial = m
        remainder: list[tuple[type[And] | type[Or], Expression]] = []
        while True:
            after = keyword(self._text, pos, 'AND')
            if after is None:
                break
            m = self._factor(after, depth)
            if m is None:
                break
            pos, operand = m
            remainder.append((And, operand))
        return pos, _fold(initial, remainder)

    # factor = with-expr / simple / "(" expr ")"
    def _factor(self, pos: int, depth: int) -> _Match | None:
        m = self._with_expression(pos)
        if m is not None:
            return m
        m = simple_license_expression(self._text, pos)
        if m is not None:
            return m
        return self._parens(pos, depth)

    # with-expr = simple-license WS "WITH" WS idstring
    def _with_expression(self, pos: int) -> _Match | None:
        text = self._text
        m = simple_license_expression(text, pos)
        if m is None:
            return None
        end, lic = m
        after = keyword(text, end, 'WITH')
        if after is None:
            return None
        exc = idstring(text, after)
        if exc is None:
            return None
        end, exception = exc
        if exception.startswith((DOCUMENT_REF, LICENSE_REF)):
            return None
        return end, WithExpression(lic, exception)

    def _parens(self, pos: int, depth: int) -> _Match | None:
        text = self._text
        if not text.startswith('(', pos):
            return None
        if depth >= self._max_depth:
            log.debug('spdx_max_depth_exceeded', expression=text, position=pos, max_depth=self._max_depth)
            raise ParseError(text, pos)
        m = self.expression(skip_whitespace(text, pos + 1), depth + 1)
        if m is None:
            return None
        end, inner = m
        end = skip_whitespace(text, end)
        if not text.startswith(')', end):
            return None
        return end + 1, Parens(inner)


def parse(text: str, *, max_depth: int = DEFAULT_MAX_DEPTH) -> Expression:
    """Parse an SPDX license expression into an AST.

    Args:
        text: An SPDX license expression (e.g. ``"MIT OR Apache-2.0"``).
            Leading and trailing whitespace is ignored.
        max_depth: Maximum parenthesis nesting accepted. Deeper input is
            rejected with :class:`ParseError`. Values above
            :func:`max_depth_limit` are lowered to it.

    Returns:
        The root node of the parsed AST.

    Raises:
        ParseError: If *text* is not a complete, valid expression.

    Examples::

        >>> parse('GPL-2.0+')
        SimpleExpression(identifier='GPL-2.0+', document_ref=None, license_ref=False)

        >>> parse('DocumentRef-Doc:LicenseRef-Foo')
        SimpleExpression(identifier='Foo', document_ref='Doc', license_ref=True)
    """
    start = skip_whitespace(text, 0)
    limit = max_depth_limit()
    if max_depth > limit:
        log.debug('spdx_max_depth_lowered', requested=max_depth, max_depth=limit)
        max_depth = limit
    try:
        m = _Parser(text, max_depth).expression(start, 0)
    except RecursionError:
        # The caller's own stack was already deep.
        log.debug('spdx_recursion_limit_hit', expression=text, max_depth=max_depth)
        raise ParseError(text, start) from None
    end = start if m is None else skip_whitespace(text, m[0])
    if m is None or end != len(text):
        log.debug('spdx_parse_failed', expression=text, position=end)
        raise ParseError(text, end)
    log.debug('spdx_parsed', expression=text)
    return m[1]

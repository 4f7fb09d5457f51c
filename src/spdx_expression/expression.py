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

"""Immutable wrapper owning one parsed SPDX expression tree.

Usage::

    from spdx_expression import SPDXExpression

    expr = SPDXExpression.parse('mit or Apache-2.0')
    assert str(expr) == 'mit OR Apache-2.0'
    assert expr.licenses() == ['Apache-2.0', 'mit']
"""

from __future__ import annotations

from spdx_expression.extraction import licenses
from spdx_expression.nodes import Expression, render
from spdx_expression.parser import DEFAULT_MAX_DEPTH, parse

__all__ = [
    'SPDXExpression',
]


class SPDXExpression:
    """A parsed SPDX license expression.

    Instances are created by :meth:`parse` and never change afterwards.
    Two instances compare equal when their trees are equal, which means
    grouping matters: ``MIT`` and ``(MIT)`` are different expressions.
    """

    __slots__ = ('_root',)

    def __init__(self, root: Expression) -> None:
        self._root = root

    @classmethod
    def parse(cls, text: str, *, max_depth: int = DEFAULT_MAX_DEPTH) -> SPDXExpression:
        """Parse *text* into a new expression.

        Raises:
            ParseError: If *text* is not a valid SPDX expression.
        """
        return cls(parse(text, max_depth=max_depth))

    @property
    def root(self) -> Expression:
        """The root node of the AST."""
        return self._root

    def licenses(self) -> list[str]:
        """Return the sorted, deduplicated license and exception tokens."""
        return licenses(self._root)

    def __str__(self) -> str:
        return render(self._root)

    def __repr__(self) -> str:
        return f'SPDXExpression({render(self._root)!r})'

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SPDXExpression):
            return self._root == other._root
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._root)

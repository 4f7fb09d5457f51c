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

r"""AST node types for SPDX license expressions.

The tree is a closed union of frozen dataclasses::

    Expression = SimpleExpression | WithExpression | And | Or | Parens

``And`` and ``Or`` are binary. The parser builds chains of the same
operator as left-leaning trees, so ``A AND B AND C`` is
``And(And(A, B), C)``. ``Parens`` carries no meaning of its own; it only
records grouping the author wrote so that :func:`render` reproduces it.

Canonical rendering::

    ┌──────────────────┬──────────────────────────────────────────────┐
    │ Node             │ Text                                         │
    ├──────────────────┼──────────────────────────────────────────────┤
    │ SimpleExpression │ [DocumentRef-<doc>:][LicenseRef-]<identifier> │
    │ WithExpression   │ <license> WITH <exception>                   │
    │ And              │ <left> AND <right>                           │
    │ Or               │ <left> OR <right>                            │
    │ Parens           │ (<inner>)                                    │
    └──────────────────┴──────────────────────────────────────────────┘

Operator keywords are always written in upper case, whatever case the
input used.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    'And',
    'Expression',
    'Or',
    'Parens',
    'SimpleExpression',
    'WithExpression',
    'render',
]

_DOCUMENT_REF_PREFIX = 'DocumentRef-'
_LICENSE_REF_PREFIX = 'LicenseRef-'


@dataclass(frozen=True)
class SimpleExpression:
    """A single license: a bare SPDX id or a ``LicenseRef-``.

    Attributes:
        identifier: The id text without any ``LicenseRef-`` or
            ``DocumentRef-`` prefix. For bare ids a trailing ``+``
            (or-later) is kept here verbatim, e.g. ``"GPL-2.0+"``.
        document_ref: Inner id of a ``DocumentRef-<id>:`` qualifier.
            Only ever set together with ``license_ref``.
        license_ref: ``True`` if the text used the ``LicenseRef-`` prefix.
    """

    identifier: str
    document_ref: str | None = None
    license_ref: bool = False

    def __str__(self) -> str:
        """Return the canonical text of this license."""
        return _render_simple(self)


@dataclass(frozen=True)
class WithExpression:
    """A license modified by an exception (``license WITH exception``).

    Attributes:
        license: The license operand. Always a single license, never a
            compound or parenthesized expression.
        exception: The bare exception identifier.
    """

    license: SimpleExpression
    exception: str

    def __str__(self) -> str:
        """Return ``license WITH exception``."""
        return render(self)


def _shape(node: Expression) -> tuple[object, ...]:
    """Flatten a tree into a prefix-order tuple of operator types and leaves.

    Every operator has a fixed arity, so two trees are equal exactly when
    their shapes are equal. The walk uses an explicit stack.
    """
    out: list[object] = []
    stack: list[Expression] = [node]
    while stack:
        item = stack.pop()
        if isinstance(item, (And, Or)):
            out.append(type(item))
            stack.append(item.right)
            stack.append(item.left)
        elif isinstance(item, Parens):
            out.append(Parens)
            stack.append(item.inner)
        else:
            out.append(item)
    return tuple(out)


def _tree_eq(self: Expression, other: object) -> bool:
    if other.__class__ is not self.__class__:
        return NotImplemented
    return _shape(self) == _shape(other)  # type: ignore[arg-type]


def _tree_hash(self: Expression) -> int:
    return hash(_shape(self))


def _tree_repr(self: Expression) -> str:
    parts: list[str] = []
    stack: list[str | Expression] = [self]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, (And, Or)):
            stack.extend((')', item.right, ', right=', item.left, f'{type(item).__name__}(left='))
        elif isinstance(item, Parens):
            stack.extend((')', item.inner, 'Parens(inner='))
        else:
            parts.append(repr(item))
    return ''.join(parts)


# Compound nodes nest once per operator, so equality, hashing and repr are
# iterative rather than the recursive ones dataclass would generate.


@dataclass(frozen=True, eq=False, repr=False)
class And:
    """Conjunction: both operands apply."""

    left: Expression
    right: Expression

    __eq__ = _tree_eq
    __hash__ = _tree_hash
    __repr__ = _tree_repr

    def __str__(self) -> str:
        """Return ``left AND right``."""
        return render(self)


@dataclass(frozen=True, eq=False, repr=False)
class Or:
    """Disjunction: either operand may be chosen."""

    left: Expression
    right: Expression

    __eq__ = _tree_eq
    __hash__ = _tree_hash
    __repr__ = _tree_repr

    def __str__(self) -> str:
        """Return ``left OR right``."""
        return render(self)


@dataclass(frozen=True, eq=False, repr=False)
class Parens:
    """Explicit grouping written by the author."""

    inner: Expression

    __eq__ = _tree_eq
    __hash__ = _tree_hash
    __repr__ = _tree_repr

    def __str__(self) -> str:
        """Return ``(inner)``."""
        return render(self)


# Union of all AST node types.
Expression = SimpleExpression | WithExpression | And | Or | Parens


def _render_simple(node: SimpleExpression) -> str:
    doc = f'{_DOCUMENT_REF_PREFIX}{node.document_ref}:' if node.document_ref is not None else ''
    ref = _LICENSE_REF_PREFIX if node.license_ref else ''
    return f'{doc}{ref}{node.identifier}'


def render(node: Expression) -> str:
    """Render an AST back to its canonical SPDX text.

    The walk is depth-first with an explicit stack, so long ``AND``/``OR``
    chains (which nest to the left, one level per operator) never hit the
    interpreter's recursion limit.

    Args:
        node: Root of the tree to render.

    Returns:
        The canonical expression text.

    Examples::

        >>> render(And(SimpleExpression('MIT'), Parens(SimpleExpression('ISC'))))
        'MIT AND (ISC)'
    """
    if isinstance(node, str):
        raise TypeError(f'not an SPDX expression node: {node!r}')
    parts: list[str] = []
    # Items are either literal text or a node still to expand. Children are
    # pushed right-to-left so they pop in reading order.
    stack: list[str | Expression] = [node]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, SimpleExpression):
            parts.append(_render_simple(item))
        elif isinstance(item, WithExpression):
            parts.append(f'{_render_simple(item.license)} WITH {item.exception}')
        elif isinstance(item, And):
            stack.extend((item.right, ' AND ', item.left))
        elif isinstance(item, Or):
            stack.extend((item.right, ' OR ', item.left))
        elif isinstance(item, Parens):
            stack.extend((')', item.inner, '('))
        else:
            raise TypeError(f'not an SPDX expression node: {item!r}')
    return ''.join(parts)

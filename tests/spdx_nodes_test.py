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

"""Tests for AST nodes and canonical rendering."""

from __future__ import annotations

import dataclasses
import re

import pytest
from spdx_expression.nodes import (
    And,
    Or,
    Parens,
    SimpleExpression,
    WithExpression,
    render,
)
from spdx_expression.parser import parse

# ── Display ──────────────────────────────────────────────────────────────


class TestRender:
    """Tests for render() and __str__."""

    def test_simple(self) -> None:
        """Test bare id."""
        assert render(SimpleExpression('MIT')) == 'MIT'

    def test_license_ref(self) -> None:
        """Test LicenseRef prefix is restored."""
        assert str(SimpleExpression('license', None, True)) == 'LicenseRef-license'

    def test_document_ref(self) -> None:
        """Test DocumentRef qualifier is restored."""
        node = SimpleExpression('license', 'document', True)
        assert str(node) == 'DocumentRef-document:LicenseRef-license'

    def test_with(self) -> None:
        """Test WITH expression."""
        node = WithExpression(SimpleExpression('license'), 'exception')
        assert str(node) == 'license WITH exception'

    def test_and_chain(self) -> None:
        """Test left-nested AND renders flat."""
        node = And(
            And(SimpleExpression('license1'), SimpleExpression('license2')),
            SimpleExpression('license3'),
        )
        assert str(node) == 'license1 AND license2 AND license3'

    def test_or_chain(self) -> None:
        """Test left-nested OR renders flat."""
        node = Or(
            Or(SimpleExpression('license1'), SimpleExpression('license2')),
            SimpleExpression('license3'),
        )
        assert str(node) == 'license1 OR license2 OR license3'

    def test_parens(self) -> None:
        """Test Parens renders its parentheses."""
        node = And(
            Parens(Or(SimpleExpression('MIT'), SimpleExpression('ISC'))),
            SimpleExpression('BSD-3-Clause'),
        )
        assert str(node) == '(MIT OR ISC) AND BSD-3-Clause'

    def test_no_implicit_parens(self) -> None:
        """Test rendering is purely structural."""
        node = And(Or(SimpleExpression('A'), SimpleExpression('B')), SimpleExpression('C'))
        assert render(node) == 'A OR B AND C'

    def test_deep_chain_renders(self) -> None:
        """Test long chains render without hitting the recursion limit."""
        node = SimpleExpression('L0')
        for i in range(1, 5000):
            node = Or(node, SimpleExpression(f'L{i}'))
        assert render(node) == ' OR '.join(f'L{i}' for i in range(5000))

    def test_non_node_rejected(self) -> None:
        """Test render rejects foreign objects."""
        with pytest.raises(TypeError):
            render('MIT')  # type: ignore[arg-type]


# ── Round trip ───────────────────────────────────────────────────────────


def _canonicalize(text: str) -> str:
    """Uppercase operator keywords and collapse whitespace runs."""
    text = re.sub(r'\s+', ' ', text.strip())
    text = re.sub(r'\( ', '(', text)
    text = re.sub(r' \)', ')', text)
    return re.sub(r'(?<=\s)(and|or|with)(?=\s)', lambda m: m.group(1).upper(), text, flags=re.IGNORECASE)


class TestRoundTrip:
    """Tests for render(parse(e)) == canonicalize(e)."""

    @pytest.mark.parametrize(
        'text',
        [
            'MIT',
            'GPL-2.0+',
            'LicenseRef-Custom',
            'DocumentRef-foo:LicenseRef-Bar',
            'GPL-2.0+ WITH Bison-exception-2.2',
            'MIT AND BSD-3-Clause',
            'MIT or Apache-2.0',
            '(MIT)',
            '((MIT))',
            'mit and (isc Or zlib)',
            '( MIT  OR   ISC )',
            'license1+ and ((license2 with exception1) OR license3+ AND license4 WITH exception2)',
            '(MIT OR Apache-2.0 AND (GPL-2.0-only WITH Classpath-exception-2.0 OR ISC))',
        ],
    )
    def test_round_trip(self, text: str) -> None:
        """Test parse then render reproduces the canonical text."""
        assert render(parse(text)) == _canonicalize(text)

    def test_reparse_is_stable(self) -> None:
        """Test rendering a parsed tree parses back to the same tree."""
        tree = parse('a OR (b and c WITH d) or LicenseRef-e')
        assert parse(render(tree)) == tree


# ── Immutability ─────────────────────────────────────────────────────────


class TestNodeValues:
    """Tests for node equality and immutability."""

    def test_frozen(self) -> None:
        """Test nodes cannot be mutated."""
        node = SimpleExpression('MIT')
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.identifier = 'ISC'  # type: ignore[misc]

    def test_hashable(self) -> None:
        """Test equal trees hash equally."""
        a = parse('MIT AND (ISC OR Zlib)')
        b = parse('MIT and (ISC or Zlib)')
        assert a == b
        assert len({a, b}) == 1

    def test_parens_distinguish_trees(self) -> None:
        """Test explicit grouping is part of the value."""
        assert parse('MIT') != parse('(MIT)')

    def test_repr_matches_dataclass_format(self) -> None:
        """Test compound nodes repr like the generated dataclass repr."""
        tree = Or(Parens(SimpleExpression('MIT')), And(SimpleExpression('ISC'), SimpleExpression('Zlib')))
        assert repr(tree) == (
            "Or(left=Parens(inner=SimpleExpression(identifier='MIT', document_ref=None, license_ref=False)), "
            "right=And(left=SimpleExpression(identifier='ISC', document_ref=None, license_ref=False), "
            "right=SimpleExpression(identifier='Zlib', document_ref=None, license_ref=False)))"
        )

    def test_operator_type_is_part_of_the_value(self) -> None:
        """Test And and Or with the same operands differ."""
        a, b = SimpleExpression('MIT'), SimpleExpression('ISC')
        assert And(a, b) != Or(a, b)
        assert And(a, b) != And(b, a)
        assert And(And(a, b), a) != And(a, And(b, a))

    def test_long_chain_eq_hash_repr(self) -> None:
        """Test equality, hashing and repr of a long chain stay iterative."""
        text = ' AND '.join(f'L{i}' for i in range(5000))
        a = parse(text)
        b = parse(text)
        assert a == b
        assert hash(a) == hash(b)
        assert a != parse(text + ' AND L5000')
        assert repr(a).startswith('And(left=' * 4999)

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

"""Parse, render, and inspect SPDX license expressions.

Usage::

    from spdx_expression import SPDXExpression, licenses, parse, render

    tree = parse('MIT OR Apache-2.0 AND (GPL-2.0-only WITH Classpath-exception-2.0)')
    print(render(tree))
    print(licenses(tree))

    expr = SPDXExpression.parse('LicenseRef-Custom and ISC')
    assert str(expr) == 'LicenseRef-Custom AND ISC'
"""

from spdx_expression.errors import ConfigError, ParseError, SpdxExpressionError
from spdx_expression.expression import SPDXExpression
from spdx_expression.extraction import licenses
from spdx_expression.nodes import (
    And,
    Expression,
    Or,
    Parens,
    SimpleExpression,
    WithExpression,
    render,
)
from spdx_expression.parser import DEFAULT_MAX_DEPTH, max_depth_limit, parse

__all__ = [
    'DEFAULT_MAX_DEPTH',
    'And',
    'ConfigError',
    'Expression',
    'Or',
    'Parens',
    'ParseError',
    'SPDXExpression',
    'SimpleExpression',
    'SpdxExpressionError',
    'WithExpression',
    'licenses',
    'max_depth_limit',
    'parse',
    'render',
]

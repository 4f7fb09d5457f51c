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

"""Lexical recognizers for SPDX identifiers.

Every recognizer takes the full text and a cursor ``pos`` and returns
``(new_pos, value)`` on a match or ``None`` on a mismatch. The cursor is a
plain ``int`` passed by value, so a failed attempt never consumes input and
the caller can try the next alternative from the same ``pos``.

Grammar::

    idstring          = 1*(ALPHA / DIGIT / "-" / ".")
    license-idstring  = idstring ["+"]
    document-ref      = "DocumentRef-" idstring ":"
    license-ref       = [document-ref] "LicenseRef-" idstring
    simple-expression = license-ref / license-idstring
"""

from __future__ import annotations

import string

from spdx_expression.nodes import SimpleExpression

__all__ = [
    'document_ref',
    'idstring',
    'keyword',
    'license_idstring',
    'license_ref',
    'simple_license_expression',
    'skip_whitespace',
]

DOCUMENT_REF = 'DocumentRef-'
LICENSE_REF = 'LicenseRef-'


_ID_CHARS = frozenset(string.ascii_letters + string.digits + '-.')
_WHITESPACE = frozenset(' \t\r\n')


def idstring(text: str, pos: int) -> tuple[int, str] | None:
    """Match one or more identifier characters (alphanumerics, ``-``, ``.``)."""
    end = pos
    while end < len(text) and text[end] in _ID_CHARS:
        end += 1
    if end == pos:
        return None
    return end, text[pos:end]


def license_idstring(text: str, pos: int) -> tuple[int, str] | None:
    """Match an idstring with an optional trailing ``+`` kept in the value."""
    m = idstring(text, pos)
    if m is None:
        return None
    end, _ = m
    if text.startswith('+', end):
        end += 1
    return end, text[pos:end]


def document_ref(text: str, pos: int) -> tuple[int, str] | None:
    """Match ``DocumentRef-<id>:`` and return only ``<id>``."""
    if not text.startswith(DOCUMENT_REF, pos):
        return None
    m = idstring(text, pos + len(DOCUMENT_REF))
    if m is None:
        return None
    end, doc_id = m
    if not text.startswith(':', end):
        return None
    return end + 1, doc_id


def license_ref(text: str, pos: int) -> tuple[int, tuple[str | None, str]] | None:
    """Match ``[DocumentRef-<doc>:]LicenseRef-<id>``.

    Returns:
        ``(new_pos, (doc, id))`` where ``doc`` is ``None`` when no document
        qualifier was present, or ``None`` on mismatch.
    """
    doc: str | None = None
    cur = pos
    m = document_ref(text, cur)
    if m is not None:
        cur, doc = m
    if not text.startswith(LICENSE_REF, cur):
        return None
    m = idstring(text, cur + len(LICENSE_REF))
    if m is None:
        return None
    end, lic_id = m
    return end, (doc, lic_id)


def simple_license_expression(text: str, pos: int) -> tuple[int, SimpleExpression] | None:
    """Match a single license, preferring the ``LicenseRef-`` form.

    ``LicenseRef-Foo`` is also a valid bare idstring, so the reference form
    has to be tried first or the prefix would end up inside the identifier.
    """
    ref = license_ref(text, pos)
    if ref is not None:
        end, (doc, lic_id) = ref
        return end, SimpleExpression(lic_id, document_ref=doc, license_ref=True)
    bare = license_idstring(text, pos)
    if bare is not None:
        end, lic_id = bare
        return end, SimpleExpression(lic_id)
    return None


def skip_whitespace(text: str, pos: int) -> int:
    """Skip spaces, tabs, CRs and LFs from *pos*; return the next offset."""
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    return pos


def keyword(text: str, pos: int, word: str) -> int | None:
    """Match operator *word* case-insensitively, surrounded by whitespace.

    At least one whitespace character is required before the keyword
    (starting at *pos*) and after it. Returns the offset just past the
    trailing whitespace, or ``None``.
    """
    start = skip_whitespace(text, pos)
    if start == pos:
        return None
    end = start + len(word)
    found = text[start:end]
    # Keywords are ASCII.
    if not found.isascii() or found.upper() != word:
        return None
    after = skip_whitespace(text, end)
    if after == end:
        return None
    return after

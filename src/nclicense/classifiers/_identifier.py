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

"""Exact-match detection of non-commercial SPDX identifiers.

The ``license`` field is uppercased and looked up in a fixed table of
Creative Commons NonCommercial identifiers.  Only an exact match
counts: ``"MIT OR CC-BY-NC-4.0"`` is *not* a member and does not
match, and neither does a value with surrounding whitespace.  The
legacy ``licenses`` array is ignored.

This trades recall for precision.  Run it alone for a strict audit,
or together with :class:`~nclicense.classifiers.KeywordClassifier`
for a broad one.
"""

from __future__ import annotations

from collections.abc import Iterable

from nclicense.classifiers._types import ClassificationVerdict, LicenseDeclaration

NON_COMMERCIAL_SPDX: frozenset[str] = frozenset({
    'CC-BY-NC-1.0',
    'CC-BY-NC-2.0',
    'CC-BY-NC-2.5',
    'CC-BY-NC-3.0',
    'CC-BY-NC-4.0',
    'CC-BY-NC-SA-1.0',
    'CC-BY-NC-SA-2.0',
    'CC-BY-NC-SA-2.5',
    'CC-BY-NC-SA-3.0',
    'CC-BY-NC-SA-4.0',
})

REASON_SPDX = 'SPDX identifier is known to be non-commercial'


class IdentifierClassifier:
    """High-precision classifier based on identifier lookup.

    Example::

        classify = IdentifierClassifier()
        classify('.', LicenseDeclaration(license='cc-by-nc-sa-3.0')).license
        # 'cc-by-nc-sa-3.0'
        classify('.', LicenseDeclaration(license='CC-BY-4.0'))
        # None
    """

    def __init__(self, identifiers: Iterable[str] = NON_COMMERCIAL_SPDX) -> None:
        self._identifiers: frozenset[str] = frozenset(i.upper() for i in identifiers)

    @property
    def identifiers(self) -> frozenset[str]:
        """The uppercased identifier table."""
        return self._identifiers

    def __call__(self, path: str, declaration: LicenseDeclaration) -> ClassificationVerdict | None:
        """Return a verdict if the ``license`` field is a known NC identifier."""
        raw = declaration.license_text
        if raw.upper() not in self._identifiers:
            return None
        return ClassificationVerdict(
            name=declaration.name,
            version=declaration.version,
            license=raw,
            reason=REASON_SPDX,
        )

    def __repr__(self) -> str:
        return f'IdentifierClassifier(identifiers={sorted(self._identifiers)!r})'


__all__ = [
    'NON_COMMERCIAL_SPDX',
    'REASON_SPDX',
    'IdentifierClassifier',
]

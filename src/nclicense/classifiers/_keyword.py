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

r"""Keyword-based non-commercial license detection.

Lowercases the ``license`` field and looks for any of a fixed set of
indicator substrings::

    non-commercial  noncommercial  by-nc  cc-by-nc
    attribution-noncommercial      nc

Matching is plain substring containment, so SPDX identifiers
(``CC-BY-NC-4.0``), prose (``Creative Commons Attribution-NonCommercial``),
URLs (``https://creativecommons.org/licenses/by-nc/4.0/``) and compound
expressions (``MIT OR CC-BY-NC-4.0``) all match.  Surrounding whitespace
does not matter and is left untouched.

The bare ``nc`` token also occurs inside corporate suffixes such as
``Inc.``.  When the text contains ``inc.`` and ``nc`` is the *only*
term that matched, the declaration is reported clean and the legacy
array is not consulted.

When the ``license`` field yields nothing, the legacy ``licenses``
array is checked entry by entry.  The ``Inc.`` guard is not applied on
that path.

Pure implementation. No I/O, no logging, no side effects.
"""

from __future__ import annotations

from collections.abc import Iterable

from nclicense.classifiers._types import ClassificationVerdict, LicenseDeclaration

NC_KEYWORDS: tuple[str, ...] = (
    'non-commercial',
    'noncommercial',
    'by-nc',
    'cc-by-nc',
    'attribution-noncommercial',
    'nc',
)

REASON_LICENSE_FIELD = 'license field contains NC keyword'
REASON_LICENSES_ARRAY = 'licenses array contains NC keyword'

_BARE_TOKEN = 'nc'
_CORPORATE_SUFFIX = 'inc.'


class KeywordClassifier:
    """Broad-recall classifier based on keyword containment.

    Example::

        classify = KeywordClassifier()
        decl = LicenseDeclaration(name='pkg', version='1.0.0', license='CC-BY-NC-4.0')
        classify('node_modules/pkg', decl).reason
        # 'license field contains NC keyword'

        # Site-specific prose terms:
        classify = KeywordClassifier(extra_keywords=['research purposes only'])
    """

    def __init__(
        self,
        keywords: Iterable[str] = NC_KEYWORDS,
        *,
        extra_keywords: Iterable[str] = (),
    ) -> None:
        merged: list[str] = []
        for kw in (*keywords, *extra_keywords):
            kw = kw.lower()
            if kw and kw not in merged:
                merged.append(kw)
        self._keywords: tuple[str, ...] = tuple(merged)

    @property
    def keywords(self) -> tuple[str, ...]:
        """The lowercased vocabulary in match order."""
        return self._keywords

    def matched_keywords(self, text: str) -> list[str]:
        """Return every vocabulary term contained in *text* (already lowercased)."""
        return [kw for kw in self._keywords if kw in text]

    def __call__(self, path: str, declaration: LicenseDeclaration) -> ClassificationVerdict | None:
        """Classify *declaration*; see the module docstring for the rules."""
        raw = declaration.license_text
        text = raw.lower()
        matched = self.matched_keywords(text)
        if matched:
            if _is_corporate_suffix_artifact(text, matched):
                return None
            return ClassificationVerdict(
                name=declaration.name,
                version=declaration.version,
                license=raw,
                reason=REASON_LICENSE_FIELD,
            )

        for entry in declaration.license_entries():
            if self.matched_keywords(entry.type.lower()):
                return ClassificationVerdict(
                    name=declaration.name,
                    version=declaration.version,
                    license=entry.type,
                    reason=REASON_LICENSES_ARRAY,
                )

        return None

    def __repr__(self) -> str:
        return f'KeywordClassifier(keywords={self._keywords!r})'


def _is_corporate_suffix_artifact(text: str, matched: list[str]) -> bool:
    """``True`` if the only hit is ``nc`` and it can be explained by ``inc.``."""
    return _CORPORATE_SUFFIX in text and matched == [_BARE_TOKEN]


__all__ = [
    'NC_KEYWORDS',
    'REASON_LICENSES_ARRAY',
    'REASON_LICENSE_FIELD',
    'KeywordClassifier',
]

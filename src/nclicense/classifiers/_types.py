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

"""Pure types for license classification.

This module has **zero** runtime dependencies beyond the standard library.
Everything here is a frozen dataclass or protocol: no I/O, no logging,
no side effects.

A classifier receives the manifest path and a :class:`LicenseDeclaration`
and returns a :class:`ClassificationVerdict` when it detects a
non-commercial restriction, or ``None`` otherwise.  ``None`` is the only
"no match" state; there is no negative verdict object.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

__all__ = [
    'ClassificationVerdict',
    'Classifier',
    'LicenseDeclaration',
    'LicenseEntry',
]


@dataclass(frozen=True)
class LicenseEntry:
    """One item of the legacy ``licenses`` array.

    Attributes:
        type: The license name as written (e.g. ``"CC-BY-NC-4.0"``).
        url: Optional link to the license text.
    """

    type: str
    url: str = ''


@dataclass(frozen=True)
class LicenseDeclaration:
    """License information read from a single package manifest.

    ``license`` and ``licenses`` are typed loosely on purpose: manifests
    in the wild carry numbers, objects and arrays where a string is
    expected, and each classifier decides locally what it can use.

    Attributes:
        name: Package name.
        version: Package version (not validated).
        license: The ``license`` field, normally a string or ``None``.
        licenses: The legacy ``licenses`` array as a tuple, normally of
            :class:`LicenseEntry`, or ``None`` when absent.
    """

    name: str = ''
    version: str = ''
    license: object = None
    licenses: object = None

    @classmethod
    def from_manifest(cls, data: object) -> LicenseDeclaration:
        """Build a declaration from a parsed ``package.json`` object.

        String values are kept verbatim (no trimming, no case changes).
        Anything that is not a mapping produces an empty declaration.
        """
        if not isinstance(data, Mapping):
            return cls()

        name = data.get('name')
        version = data.get('version')

        licenses: object = data.get('licenses')
        if isinstance(licenses, list):
            licenses = tuple(_coerce_entry(item) for item in licenses)

        return cls(
            name=name if isinstance(name, str) else '',
            version=version if isinstance(version, str) else '',
            license=data.get('license'),
            licenses=licenses,
        )

    @property
    def license_text(self) -> str:
        """The ``license`` field if it is a string, else ``''``."""
        return self.license if isinstance(self.license, str) else ''

    def license_entries(self) -> list[LicenseEntry]:
        """Return the usable entries of the legacy ``licenses`` array."""
        if not isinstance(self.licenses, (tuple, list)):
            return []
        return [e for e in self.licenses if isinstance(e, LicenseEntry) and e.type]


def _coerce_entry(item: Any) -> object:  # noqa: ANN401
    """Convert a ``{"type": ..., "url": ...}`` mapping to a :class:`LicenseEntry`.

    Items that do not have a string ``type`` are returned unchanged so
    the declaration still mirrors the manifest.
    """
    if not isinstance(item, Mapping):
        return item
    lic_type = item.get('type')
    if not isinstance(lic_type, str):
        return item
    url = item.get('url')
    return LicenseEntry(type=lic_type, url=url if isinstance(url, str) else '')


@dataclass(frozen=True)
class ClassificationVerdict:
    """A detected non-commercial restriction.

    Attributes:
        name: Package name.
        version: Package version.
        license: The original, unnormalized license text that matched.
        reason: Human-readable description of the rule that fired.
        classifier: Name of the classifier that produced the verdict.
            Filled in by the registry; empty when a classifier is
            called directly.
    """

    name: str
    version: str
    license: str
    reason: str
    classifier: str = ''

    def to_dict(self) -> dict[str, str]:
        """Return a JSON-serializable mapping."""
        return {
            'name': self.name,
            'version': self.version,
            'license': self.license,
            'reason': self.reason,
            'classifier': self.classifier,
        }


@runtime_checkable
class Classifier(Protocol):
    """Protocol for license classifiers.

    Any callable with this signature qualifies, including plain
    functions.  Implementations must be pure: the same input always
    yields an equal result, and malformed declarations yield ``None``
    instead of raising.

    Built-in implementations:

    - :class:`~nclicense.classifiers.KeywordClassifier`
    - :class:`~nclicense.classifiers.IdentifierClassifier`
    """

    def __call__(self, path: str, declaration: LicenseDeclaration) -> ClassificationVerdict | None:
        """Classify one declaration.

        Args:
            path: Directory of the manifest (context only).
            declaration: The license declaration to inspect.

        Returns:
            A :class:`ClassificationVerdict` on a match, else ``None``.
        """
        ...

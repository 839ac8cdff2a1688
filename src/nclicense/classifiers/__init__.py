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

r"""License classifiers.

Each classifier is a pure callable ``(path, declaration) -> verdict | None``
(see :class:`Classifier`).  Classifiers are registered by name in an
explicit table; nothing is discovered from the filesystem.

Built-in classifiers:

- ``default-filter``: :class:`KeywordClassifier`, substring matching
  with broad recall.
- ``spdx-filter``: :class:`IdentifierClassifier`, exact lookup of
  Creative Commons NC identifiers.

Usage::

    from nclicense.classifiers import (
        DEFAULT_CLASSIFIERS,
        LicenseDeclaration,
        build_classifier_table,
    )

    decl = LicenseDeclaration.from_manifest({'name': 'x', 'version': '1.0.0', 'license': 'CC-BY-NC-4.0'})
    DEFAULT_CLASSIFIERS['spdx-filter']('node_modules/x', decl).reason
    # 'SPDX identifier is known to be non-commercial'

    table = build_classifier_table(extra_keywords=['academic use only'])
"""

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from nclicense.classifiers._identifier import (
    NON_COMMERCIAL_SPDX,
    REASON_SPDX,
    IdentifierClassifier,
)
from nclicense.classifiers._keyword import (
    NC_KEYWORDS,
    REASON_LICENSE_FIELD,
    REASON_LICENSES_ARRAY,
    KeywordClassifier,
)
from nclicense.classifiers._types import (
    ClassificationVerdict,
    Classifier,
    LicenseDeclaration,
    LicenseEntry,
)

KEYWORD_CLASSIFIER_NAME = 'default-filter'
IDENTIFIER_CLASSIFIER_NAME = 'spdx-filter'


def build_classifier_table(*, extra_keywords: Iterable[str] = ()) -> dict[str, Classifier]:
    """Return a fresh name -> classifier table in canonical run order.

    Args:
        extra_keywords: Additional substrings for the keyword classifier.
    """
    return {
        KEYWORD_CLASSIFIER_NAME: KeywordClassifier(extra_keywords=extra_keywords),
        IDENTIFIER_CLASSIFIER_NAME: IdentifierClassifier(),
    }


# Read-only module-level table for convenience.
DEFAULT_CLASSIFIERS: Mapping[str, Classifier] = MappingProxyType(build_classifier_table())

__all__ = [
    'DEFAULT_CLASSIFIERS',
    'IDENTIFIER_CLASSIFIER_NAME',
    'KEYWORD_CLASSIFIER_NAME',
    'NC_KEYWORDS',
    'NON_COMMERCIAL_SPDX',
    'REASON_LICENSES_ARRAY',
    'REASON_LICENSE_FIELD',
    'REASON_SPDX',
    'ClassificationVerdict',
    'Classifier',
    'IdentifierClassifier',
    'KeywordClassifier',
    'LicenseDeclaration',
    'LicenseEntry',
    'build_classifier_table',
]

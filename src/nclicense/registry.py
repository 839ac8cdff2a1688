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

"""Compose named classifiers and run them against one declaration.

The set of classifiers to run is always passed in explicitly; there is
no process-wide "enabled filters" state.  Callers build the list once
with :func:`select_classifiers` and reuse it for every manifest.

Usage::

    from nclicense.classifiers import DEFAULT_CLASSIFIERS, LicenseDeclaration
    from nclicense.registry import run_classifiers, select_classifiers

    active = select_classifiers(['default-filter'], DEFAULT_CLASSIFIERS)
    verdicts = run_classifiers(active, 'node_modules/x', decl)
    # [ClassificationVerdict(..., reason='license field contains NC keyword (filter: default-filter)')]
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, replace

from nclicense.classifiers import ClassificationVerdict, Classifier, LicenseDeclaration
from nclicense.errors import E, NcLicenseError
from nclicense.logging import get_logger

logger = get_logger(__name__)

__all__ = [
    'NamedClassifier',
    'annotate',
    'run_classifiers',
    'select_classifiers',
]


@dataclass(frozen=True)
class NamedClassifier:
    """A classifier paired with the name it is reported under."""

    name: str
    classify: Classifier


def select_classifiers(
    names: Iterable[str],
    table: Mapping[str, Classifier],
) -> list[NamedClassifier]:
    """Resolve classifier *names* against *table*.

    An empty *names* selects every classifier in *table* order.
    Otherwise the result follows the order of *names*; duplicates are
    dropped.

    Raises:
        NcLicenseError: If a name is not in *table*.
    """
    wanted = list(dict.fromkeys(names))
    if not wanted:
        return [NamedClassifier(name, fn) for name, fn in table.items()]

    unknown = [n for n in wanted if n not in table]
    if unknown:
        raise NcLicenseError(
            E.UNKNOWN_CLASSIFIER,
            f'Unknown classifier(s): {", ".join(unknown)}',
            hint=f'Available classifiers: {", ".join(table)}',
        )
    return [NamedClassifier(name, table[name]) for name in wanted]


def annotate(verdict: ClassificationVerdict, classifier_name: str) -> ClassificationVerdict:
    """Return *verdict* with provenance appended to its reason."""
    return replace(
        verdict,
        reason=f'{verdict.reason} (filter: {classifier_name})',
        classifier=classifier_name,
    )


def run_classifiers(
    classifiers: Sequence[NamedClassifier],
    path: str,
    declaration: LicenseDeclaration,
) -> list[ClassificationVerdict]:
    """Run every classifier on *declaration* and collect the matches.

    Args:
        classifiers: The active classifiers, in run order.
        path: Directory of the manifest (passed through to classifiers).
        declaration: The declaration to inspect.

    Returns:
        One annotated verdict per matching classifier. Empty when
        nothing matched.
    """
    results: list[ClassificationVerdict] = []
    for entry in classifiers:
        verdict = entry.classify(path, declaration)
        if verdict is None:
            continue
        annotated = annotate(verdict, entry.name)
        logger.debug(
            'classifier_matched',
            classifier=entry.name,
            package=f'{annotated.name}@{annotated.version}',
            license=annotated.license,
        )
        results.append(annotated)
    return results

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

"""Walk an installed dependency tree and classify every manifest.

Every directory below the scan root that contains a ``package.json`` is
treated as a package.  The walk descends into package directories too,
so nested ``node_modules`` and scoped ``@org/name`` packages are found.
Symlinked directories are not followed (``pnpm`` style trees would
otherwise be visited many times, or loop).

A manifest that cannot be read or parsed is logged and skipped; one
broken package never aborts the scan.
"""

from __future__ import annotations

import json
import os
import stat
from collections.abc import Collection, Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from nclicense.classifiers import ClassificationVerdict, LicenseDeclaration
from nclicense.logging import get_logger
from nclicense.registry import NamedClassifier, run_classifiers

if TYPE_CHECKING:
    from nclicense.report import ScanLog

logger = get_logger(__name__)

MANIFEST_NAME = 'package.json'

__all__ = [
    'MANIFEST_NAME',
    'Manifest',
    'ScanResult',
    'iter_manifests',
    'read_manifest',
    'scan_tree',
]


@dataclass(frozen=True)
class Manifest:
    """A discovered package manifest.

    Attributes:
        path: The package directory (parent of ``package.json``).
        declaration: License information parsed from the manifest.
    """

    path: Path
    declaration: LicenseDeclaration


@dataclass
class ScanResult:
    """Outcome of :func:`scan_tree`."""

    verdicts: list[ClassificationVerdict] = field(default_factory=list)
    packages_scanned: int = 0

    @property
    def flagged(self) -> bool:
        """``True`` if any verdict was produced."""
        return bool(self.verdicts)


def read_manifest(pkg_dir: Path) -> LicenseDeclaration | None:
    """Parse ``package.json`` in *pkg_dir*.

    Returns:
        The declaration, or ``None`` if the file is unreadable or not
        valid JSON.
    """
    manifest = pkg_dir / MANIFEST_NAME
    try:
        data = json.loads(manifest.read_text(encoding='utf-8'))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.warning('manifest_unreadable', path=str(manifest), error=str(exc))
        return None
    return LicenseDeclaration.from_manifest(data)


def _license_label(decl: LicenseDeclaration) -> str:
    """Render the raw ``license`` field for the scan log.

    Malformed values are shown as JSON rather than hidden behind
    ``no license``.
    """
    value = decl.license
    if not value:
        return 'no license'
    if isinstance(value, str):
        return value
    return json.dumps(value)


def _is_real_dir(path: Path) -> bool:
    try:
        mode = os.lstat(path).st_mode
    except OSError:
        return False
    return stat.S_ISDIR(mode)


def iter_manifests(root: Path) -> Iterator[Manifest]:
    """Yield every package manifest below *root*, depth first.

    Entries are visited in sorted order so output is stable across
    platforms.  A missing *root* yields nothing.
    """
    if not _is_real_dir(root):
        logger.debug('scan_root_missing', root=str(root))
        return

    try:
        children = sorted(root.iterdir(), key=lambda p: p.name)
    except OSError as exc:
        logger.warning('directory_unreadable', path=str(root), error=str(exc))
        return

    for child in children:
        if not _is_real_dir(child):
            continue
        if (child / MANIFEST_NAME).is_file():
            declaration = read_manifest(child)
            if declaration is not None:
                yield Manifest(path=child, declaration=declaration)
        yield from iter_manifests(child)


def scan_tree(
    root: Path,
    classifiers: Sequence[NamedClassifier],
    *,
    exempt: Collection[str] = (),
    scan_log: ScanLog | None = None,
) -> ScanResult:
    """Classify every manifest below *root*.

    Args:
        root: Directory to scan (usually ``node_modules``).
        classifiers: Active classifiers, in run order.
        exempt: Package names to count but never classify.
        scan_log: Optional log that records each package checked.

    Returns:
        A :class:`ScanResult` with all verdicts in discovery order.
    """
    result = ScanResult()
    for manifest in iter_manifests(root):
        decl = manifest.declaration
        result.packages_scanned += 1
        license_label = _license_label(decl)
        logger.debug('checking_package', name=decl.name, version=decl.version, license=license_label)
        if scan_log is not None:
            scan_log.add(f'Checking: {decl.name}@{decl.version} ({license_label})')

        if decl.name in exempt:
            logger.info('package_exempt', name=decl.name, version=decl.version)
            if scan_log is not None:
                scan_log.add('  Skipped: listed in exempt_packages')
            continue

        verdicts = run_classifiers(classifiers, str(manifest.path), decl)
        if scan_log is not None:
            for v in verdicts:
                scan_log.add(f'  Found NC license: {v.reason}')
        result.verdicts.extend(verdicts)
    return result

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

"""Configuration for nclicense.

Settings are read from the first of these that exists:

1. An explicit path (``--config``).
2. ``nclicense.toml`` in the working directory.
3. The ``[tool.nclicense]`` table of ``pyproject.toml``.

Example ``nclicense.toml``::

    scan_dir = "node_modules"
    classifiers = ["default-filter", "spdx-filter"]
    exempt_packages = ["internal-fonts"]
    extra_keywords = ["research purposes only"]
    log_dir = ".nc-license-logs"

Unknown keys and wrong types are rejected with :class:`NcLicenseError`
so typos do not silently disable a check.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from nclicense.errors import E, NcLicenseError
from nclicense.logging import get_logger

logger = get_logger(__name__)

CONFIG_FILENAME = 'nclicense.toml'
PYPROJECT_TABLE = 'nclicense'

DEFAULT_SCAN_DIR = 'node_modules'
DEFAULT_LOG_DIR = '.nc-license-logs'


@dataclass(frozen=True)
class NcLicenseConfig:
    """Resolved nclicense settings.

    Attributes:
        scan_dir: Directory tree to scan for ``package.json`` files.
        classifiers: Classifier names to run; empty means all.
        exempt_packages: Package names that are never classified.
        extra_keywords: Extra substrings for the keyword classifier.
        log_dir: Where ``--log`` writes scan logs.
        source: File the settings came from (``None`` for defaults).
    """

    scan_dir: str = DEFAULT_SCAN_DIR
    classifiers: tuple[str, ...] = ()
    exempt_packages: tuple[str, ...] = ()
    extra_keywords: tuple[str, ...] = ()
    log_dir: str = DEFAULT_LOG_DIR
    source: Path | None = field(default=None, compare=False)


VALID_KEYS: frozenset[str] = frozenset(f.name for f in fields(NcLicenseConfig)) - {'source'}


def _require_str(raw: dict[str, Any], key: str) -> str | None:
    value = raw.get(key)
    if value is None:
        return None
    if not isinstance(value, str) or not value:
        raise NcLicenseError(E.CONFIG_INVALID, f'{key} must be a non-empty string, got {value!r}')
    return value


def _require_str_list(raw: dict[str, Any], key: str) -> tuple[str, ...] | None:
    value = raw.get(key)
    if value is None:
        return None
    if not isinstance(value, list):
        raise NcLicenseError(
            E.CONFIG_INVALID,
            f'{key} must be a list of strings, got {type(value).__name__}',
            hint=f'Use {key} = ["..."] even for a single entry.',
        )
    for i, item in enumerate(value):
        if not isinstance(item, str):
            raise NcLicenseError(E.CONFIG_INVALID, f'{key}[{i}] must be a string, got {item!r}')
    return tuple(value)


def parse_config(raw: dict[str, Any], *, source: Path | None = None) -> NcLicenseConfig:
    """Validate a raw TOML table and build an :class:`NcLicenseConfig`.

    Raises:
        NcLicenseError: On unknown keys or wrongly typed values.
    """
    unknown = sorted(set(raw) - VALID_KEYS)
    if unknown:
        raise NcLicenseError(
            E.CONFIG_INVALID,
            f'Unknown key(s) in nclicense config: {", ".join(unknown)}',
            hint=f'Valid keys: {", ".join(sorted(VALID_KEYS))}',
        )

    overrides: dict[str, Any] = {}
    for key in ('scan_dir', 'log_dir'):
        value = _require_str(raw, key)
        if value is not None:
            overrides[key] = value
    for key in ('classifiers', 'exempt_packages', 'extra_keywords'):
        items = _require_str_list(raw, key)
        if items is not None:
            overrides[key] = items

    return NcLicenseConfig(source=source, **overrides)


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open('rb') as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise NcLicenseError(E.CONFIG_PARSE, f'Invalid TOML in {path}: {exc}') from exc
    except OSError as exc:
        raise NcLicenseError(E.CONFIG_PARSE, f'Cannot read {path}: {exc.strerror}') from exc


def load_config(start_dir: Path, path: Path | None = None) -> NcLicenseConfig:
    """Locate and parse the nclicense configuration.

    Args:
        start_dir: Directory searched for ``nclicense.toml`` and
            ``pyproject.toml``.
        path: Explicit config file; takes precedence over discovery.
            May be either an ``nclicense.toml``-style file or a
            ``pyproject.toml``.

    Returns:
        The parsed config, or defaults when no config file exists.
    """
    if path is not None:
        if not path.is_file():
            raise NcLicenseError(E.CONFIG_PARSE, f'Config file not found: {path}')
        candidates = [path]
    else:
        candidates = [start_dir / CONFIG_FILENAME, start_dir / 'pyproject.toml']

    for candidate in candidates:
        if not candidate.is_file():
            continue
        data = _read_toml(candidate)
        if candidate.name == 'pyproject.toml':
            tool = data.get('tool', {})
            if not isinstance(tool, dict):
                raise NcLicenseError(E.CONFIG_INVALID, f'{candidate}: [tool] must be a table')
            table = tool.get(PYPROJECT_TABLE)
            if table is None:
                if path is not None:
                    raise NcLicenseError(
                        E.CONFIG_INVALID,
                        f'{candidate} has no [tool.{PYPROJECT_TABLE}] table',
                    )
                continue
            if not isinstance(table, dict):
                raise NcLicenseError(E.CONFIG_INVALID, f'[tool.{PYPROJECT_TABLE}] must be a table')
            data = table
        logger.debug('config_loaded', path=str(candidate))
        return parse_config(data, source=candidate)

    return NcLicenseConfig()


__all__ = [
    'CONFIG_FILENAME',
    'DEFAULT_LOG_DIR',
    'DEFAULT_SCAN_DIR',
    'VALID_KEYS',
    'NcLicenseConfig',
    'load_config',
    'parse_config',
]

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

"""Tests for configuration loading and validation."""

from __future__ import annotations

from pathlib import Path

import pytest
from nclicense.config import (
    DEFAULT_LOG_DIR,
    DEFAULT_SCAN_DIR,
    VALID_KEYS,
    NcLicenseConfig,
    load_config,
    parse_config,
)
from nclicense.errors import E, NcLicenseError


class TestDefaults:
    """Tests for NcLicenseConfig defaults."""

    def test_defaults(self) -> None:
        """Test defaults."""
        cfg = NcLicenseConfig()
        assert cfg.scan_dir == DEFAULT_SCAN_DIR == 'node_modules'
        assert cfg.log_dir == DEFAULT_LOG_DIR == '.nc-license-logs'
        assert cfg.classifiers == ()
        assert cfg.exempt_packages == ()
        assert cfg.extra_keywords == ()
        assert cfg.source is None

    def test_valid_keys_match_dataclass(self) -> None:
        """VALID_KEYS matches the NcLicenseConfig fields."""
        fields = set(NcLicenseConfig.__dataclass_fields__) - {'source'}
        assert VALID_KEYS == fields


class TestParseConfig:
    """Tests for parse_config() validation."""

    def test_empty(self) -> None:
        """Test empty."""
        assert parse_config({}) == NcLicenseConfig()

    def test_all_keys(self) -> None:
        """Test all keys."""
        cfg = parse_config({
            'scan_dir': 'vendor/node_modules',
            'classifiers': ['spdx-filter'],
            'exempt_packages': ['fonts'],
            'extra_keywords': ['academic use only'],
            'log_dir': 'logs',
        })
        assert cfg.scan_dir == 'vendor/node_modules'
        assert cfg.classifiers == ('spdx-filter',)
        assert cfg.exempt_packages == ('fonts',)
        assert cfg.extra_keywords == ('academic use only',)
        assert cfg.log_dir == 'logs'

    def test_unknown_key(self) -> None:
        """Test unknown key."""
        with pytest.raises(NcLicenseError, match='Unknown key') as exc_info:
            parse_config({'clasifiers': ['spdx-filter']})
        assert exc_info.value.code == E.CONFIG_INVALID
        assert 'classifiers' in exc_info.value.hint

    def test_list_expected(self) -> None:
        """Test list expected."""
        with pytest.raises(NcLicenseError, match='classifiers must be a list of strings'):
            parse_config({'classifiers': 'spdx-filter'})

    def test_list_item_type(self) -> None:
        """Test list item type."""
        with pytest.raises(NcLicenseError, match=r'exempt_packages\[1\] must be a string'):
            parse_config({'exempt_packages': ['ok', 7]})

    def test_string_expected(self) -> None:
        """Test string expected."""
        with pytest.raises(NcLicenseError, match='scan_dir must be a non-empty string'):
            parse_config({'scan_dir': 3})

    def test_empty_string_rejected(self) -> None:
        """Test empty string rejected."""
        with pytest.raises(NcLicenseError, match='log_dir'):
            parse_config({'log_dir': ''})


class TestLoadConfig:
    """Tests for load_config() discovery."""

    def test_no_files(self, tmp_path: Path) -> None:
        """Test no files."""
        assert load_config(tmp_path) == NcLicenseConfig()

    def test_nclicense_toml(self, tmp_path: Path) -> None:
        """Test nclicense toml."""
        path = tmp_path / 'nclicense.toml'
        path.write_text('classifiers = ["spdx-filter"]\n')
        cfg = load_config(tmp_path)
        assert cfg.classifiers == ('spdx-filter',)
        assert cfg.source == path

    def test_pyproject_table(self, tmp_path: Path) -> None:
        """Test pyproject table."""
        (tmp_path / 'pyproject.toml').write_text(
            '[project]\nname = "app"\n\n[tool.nclicense]\nexempt_packages = ["internal-fonts"]\n'
        )
        cfg = load_config(tmp_path)
        assert cfg.exempt_packages == ('internal-fonts',)

    def test_pyproject_without_table(self, tmp_path: Path) -> None:
        """Test pyproject without table."""
        (tmp_path / 'pyproject.toml').write_text('[project]\nname = "app"\n')
        assert load_config(tmp_path) == NcLicenseConfig()

    def test_pyproject_tool_not_a_table(self, tmp_path: Path) -> None:
        """Test a scalar ``tool`` key is a config error, not a crash."""
        (tmp_path / 'pyproject.toml').write_text('tool = "poetry"\n')
        with pytest.raises(NcLicenseError, match=r'\[tool\] must be a table') as exc_info:
            load_config(tmp_path)
        assert exc_info.value.code == E.CONFIG_INVALID

    def test_nclicense_toml_wins(self, tmp_path: Path) -> None:
        """Test nclicense toml wins."""
        (tmp_path / 'nclicense.toml').write_text('log_dir = "a"\n')
        (tmp_path / 'pyproject.toml').write_text('[tool.nclicense]\nlog_dir = "b"\n')
        assert load_config(tmp_path).log_dir == 'a'

    def test_explicit_path(self, tmp_path: Path) -> None:
        """Test explicit path."""
        other = tmp_path / 'ci.toml'
        other.write_text('scan_dir = "deps"\n')
        (tmp_path / 'nclicense.toml').write_text('scan_dir = "ignored"\n')
        assert load_config(tmp_path, other).scan_dir == 'deps'

    def test_explicit_pyproject_without_table(self, tmp_path: Path) -> None:
        """Test explicit pyproject without table."""
        path = tmp_path / 'pyproject.toml'
        path.write_text('[project]\nname = "app"\n')
        with pytest.raises(NcLicenseError, match=r'no \[tool.nclicense\] table'):
            load_config(tmp_path, path)

    def test_explicit_path_missing(self, tmp_path: Path) -> None:
        """Test explicit path missing."""
        with pytest.raises(NcLicenseError, match='Config file not found') as exc_info:
            load_config(tmp_path, tmp_path / 'missing.toml')
        assert exc_info.value.code == E.CONFIG_PARSE

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Test invalid toml."""
        (tmp_path / 'nclicense.toml').write_text('classifiers = [\n')
        with pytest.raises(NcLicenseError, match='Invalid TOML') as exc_info:
            load_config(tmp_path)
        assert exc_info.value.code == E.CONFIG_PARSE

    def test_invalid_content(self, tmp_path: Path) -> None:
        """Test invalid content."""
        (tmp_path / 'nclicense.toml').write_text('bogus = true\n')
        with pytest.raises(NcLicenseError, match='Unknown key'):
            load_config(tmp_path)

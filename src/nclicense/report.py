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

r"""Reporting: terminal output, JSON export and scan log files.

Example terminal output::

    NC-license detected:
    - some-dataset@2.1.0 (CC-BY-NC-4.0): license field contains NC keyword (filter: default-filter)
    - some-dataset@2.1.0 (CC-BY-NC-4.0): SPDX identifier is known to be non-commercial (filter: spdx-filter)

Example scan log (``--log``)::

    NC License Scan Log
    Date: 2026-03-01T12:00:00+00:00
    Command: check-nc-licenses --log
    Working Directory: /work/app
    =====================================

    Starting scan with filters: default-filter, spdx-filter

    Checking: left-pad@1.3.0 (WTFPL)
    Checking: some-dataset@2.1.0 (CC-BY-NC-4.0)
      Found NC license: license field contains NC keyword (filter: default-filter)

    Total packages scanned: 2
    NC licenses found: 1
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from datetime import datetime, timezone
from io import StringIO
from pathlib import Path

from rich.console import Console
from rich.text import Text

from nclicense.classifiers import ClassificationVerdict
from nclicense.logging import get_logger

logger = get_logger(__name__)

DETECTED_HEADER = 'NC-license detected:'
CLEAN_MESSAGE = 'No NC-licenses detected.'

__all__ = [
    'CLEAN_MESSAGE',
    'DETECTED_HEADER',
    'ScanLog',
    'format_report',
    'format_verdict',
    'print_report',
    'verdicts_to_json',
]


def format_verdict(verdict: ClassificationVerdict) -> str:
    """Render one verdict as ``name@version (license): reason``."""
    return f'{verdict.name}@{verdict.version} ({verdict.license}): {verdict.reason}'


def print_report(
    verdicts: Sequence[ClassificationVerdict],
    *,
    console: Console | None = None,
    error_console: Console | None = None,
) -> None:
    """Print scan results.

    Findings go to *error_console* (stderr by default); the all-clear
    message goes to *console* (stdout by default).
    """
    if console is None:
        console = Console(soft_wrap=True)
    if error_console is None:
        error_console = Console(stderr=True, soft_wrap=True)

    if not verdicts:
        console.print(Text(CLEAN_MESSAGE, style='bold green'))
        return

    error_console.print(Text(DETECTED_HEADER, style='bold red'))
    for v in verdicts:
        line = Text('- ')
        line.append(f'{v.name}@{v.version}', style='bold')
        line.append(f' ({v.license})', style='yellow')
        line.append(f': {v.reason}')
        error_console.print(line)


def format_report(verdicts: Sequence[ClassificationVerdict], *, color: bool = False) -> str:
    """Render :func:`print_report` output to a single string.

    Useful for tests and non-interactive callers.
    """
    buf = StringIO()
    console = Console(file=buf, force_terminal=color, soft_wrap=True)
    print_report(verdicts, console=console, error_console=console)
    return buf.getvalue().rstrip('\n')


def verdicts_to_json(verdicts: Sequence[ClassificationVerdict], *, indent: int = 2) -> str:
    """Serialize verdicts to a JSON array."""
    return json.dumps([v.to_dict() for v in verdicts], indent=indent)


class ScanLog:
    """Collects a human-readable trace of a scan and writes it to disk.

    Example::

        scan_log = ScanLog(Path('.nc-license-logs'), command='check-nc-licenses --log')
        scan_log.add('Checking: left-pad@1.3.0 (WTFPL)')
        scan_log.save()  # .nc-license-logs/scan-2026-03-01T12-00-00-000000Z.log
    """

    TITLE = 'NC License Scan Log'
    SEPARATOR = '=' * 37

    def __init__(
        self,
        log_dir: Path,
        *,
        command: str = '',
        cwd: Path | None = None,
        started: datetime | None = None,
    ) -> None:
        self.log_dir = log_dir
        self.command = command
        self.cwd = cwd if cwd is not None else Path.cwd()
        self.started = started if started is not None else datetime.now(timezone.utc)
        self.lines: list[str] = []
        stamp = self.started.astimezone(timezone.utc).strftime('%Y-%m-%dT%H-%M-%S-%fZ')
        self.path = log_dir / f'scan-{stamp}.log'

    def add(self, line: str) -> None:
        """Append one line to the log body."""
        self.lines.append(line)

    @property
    def packages_checked(self) -> int:
        """Number of ``Checking:`` lines recorded so far."""
        return sum(1 for line in self.lines if line.startswith('Checking:'))

    def finish(self, findings: int) -> None:
        """Append the summary footer."""
        self.add('')
        self.add(f'Total packages scanned: {self.packages_checked}')
        self.add(f'NC licenses found: {findings}')

    def render(self) -> str:
        """Return the full log file content."""
        header = [
            self.TITLE,
            f'Date: {self.started.isoformat()}',
            f'Command: {self.command}',
            f'Working Directory: {self.cwd}',
            self.SEPARATOR,
            '',
        ]
        return '\n'.join([*header, *self.lines])

    def save(self) -> Path | None:
        """Write the log file.

        Returns:
            The written path, or ``None`` if writing failed.  Failure
            is logged as a warning and never interrupts the scan.
        """
        try:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            self.path.write_text(self.render(), encoding='utf-8')
        except OSError as exc:
            logger.warning('scan_log_write_failed', path=str(self.path), error=str(exc))
            return None
        logger.debug('scan_log_written', path=str(self.path))
        return self.path

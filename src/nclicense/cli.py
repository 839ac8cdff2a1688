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

"""Command-line entry point: ``check-nc-licenses``.

Exit codes:
    0  No non-commercial licenses detected.
    1  One or more non-commercial licenses detected.
    2  Configuration or usage error.

Usage::

    check-nc-licenses                          # all classifiers, ./node_modules
    check-nc-licenses --use default-filter     # keyword classifier only
    check-nc-licenses --use spdx-filter        # strict identifier classifier only
    check-nc-licenses --log                    # also save a scan log
    check-nc-licenses vendor/node_modules --format json
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.text import Text

from nclicense import __version__
from nclicense.classifiers import build_classifier_table
from nclicense.config import load_config
from nclicense.errors import NcLicenseError
from nclicense.logging import configure_logging, get_logger
from nclicense.registry import select_classifiers
from nclicense.report import ScanLog, print_report, verdicts_to_json
from nclicense.scan import scan_tree

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FOUND = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog='check-nc-licenses',
        description='Detect dependencies whose license restricts commercial use.',
    )
    parser.add_argument(
        'scan_dir',
        nargs='?',
        default=None,
        help='Directory to scan (default: node_modules, or scan_dir from config).',
    )
    parser.add_argument(
        '--use',
        action='append',
        default=[],
        metavar='FILTER',
        help='Run only this classifier (repeatable): default-filter, spdx-filter.',
    )
    parser.add_argument(
        '--log',
        action='store_true',
        help='Save a detailed scan log under the log directory.',
    )
    parser.add_argument(
        '--format',
        choices=('text', 'json'),
        default='text',
        help='Output format for findings.',
    )
    parser.add_argument(
        '--config',
        type=Path,
        default=None,
        help='Path to nclicense.toml or pyproject.toml.',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging.')
    parser.add_argument('-q', '--quiet', action='store_true', help='Only log warnings and errors.')
    parser.add_argument('--json-log', action='store_true', help='Emit logs as JSON lines.')
    parser.add_argument('-V', '--version', action='version', version=__version__)
    return parser


def _print_error(exc: NcLicenseError) -> None:
    console = Console(stderr=True, soft_wrap=True)
    console.print(Text(str(exc), style='bold red'))
    if exc.hint:
        console.print(Text(f'  = help: {exc.hint}', style='green'))


def run(args: argparse.Namespace, *, cwd: Path | None = None) -> int:
    """Execute a scan for parsed *args* and return the exit code."""
    cwd = cwd if cwd is not None else Path.cwd()
    config = load_config(cwd, args.config)

    table = build_classifier_table(extra_keywords=config.extra_keywords)
    classifiers = select_classifiers(args.use or config.classifiers, table)

    scan_dir = Path(args.scan_dir or config.scan_dir)
    if not scan_dir.is_absolute():
        scan_dir = cwd / scan_dir

    scan_log: ScanLog | None = None
    if args.log:
        log_dir = Path(config.log_dir)
        if not log_dir.is_absolute():
            log_dir = cwd / log_dir
        scan_log = ScanLog(log_dir, command=' '.join(sys.argv), cwd=cwd)
        scan_log.add(f'Starting scan with filters: {", ".join(c.name for c in classifiers)}')
        scan_log.add('')

    logger.info(
        'scan_started',
        root=str(scan_dir),
        classifiers=[c.name for c in classifiers],
    )
    result = scan_tree(
        scan_dir,
        classifiers,
        exempt=frozenset(config.exempt_packages),
        scan_log=scan_log,
    )
    logger.info('scan_finished', packages=result.packages_scanned, findings=len(result.verdicts))

    saved: Path | None = None
    if scan_log is not None:
        scan_log.finish(len(result.verdicts))
        saved = scan_log.save()

    if args.format == 'json':
        Console(soft_wrap=True).out(verdicts_to_json(result.verdicts), highlight=False)
    else:
        print_report(result.verdicts)

    if saved is not None:
        # stdout carries only the JSON document in json mode.
        to_stderr = result.flagged or args.format == 'json'
        Console(stderr=to_stderr, soft_wrap=True).print(Text(f'Full scan log saved to: {saved}'))

    return EXIT_FOUND if result.flagged else EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose, quiet=args.quiet, json_log=args.json_log)
    try:
        return run(args)
    except NcLicenseError as exc:
        _print_error(exc)
        return EXIT_USAGE


if __name__ == '__main__':
    sys.exit(main())

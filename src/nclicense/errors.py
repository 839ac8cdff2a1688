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

"""Error types for nclicense.

Only the orchestration layer raises these: configuration parsing,
classifier selection and the CLI.  Classifiers never raise for odd
manifest content; they return ``None``.

Usage::

    from nclicense.errors import E, NcLicenseError

    raise NcLicenseError(
        E.UNKNOWN_CLASSIFIER,
        "Unknown classifier 'foo'",
        hint='Available classifiers: default-filter, spdx-filter',
    )
"""

from __future__ import annotations

import enum

__all__ = [
    'E',
    'ErrorCode',
    'NcLicenseError',
]


class ErrorCode(str, enum.Enum):
    """Stable error codes, printed as ``error[<code>]``."""

    CONFIG_INVALID = 'NCL-CONFIG-INVALID'
    CONFIG_PARSE = 'NCL-CONFIG-PARSE'
    UNKNOWN_CLASSIFIER = 'NCL-UNKNOWN-CLASSIFIER'


# Short alias used at raise sites.
E = ErrorCode


class NcLicenseError(Exception):
    """A user-facing configuration or usage error.

    Attributes:
        code: The :class:`ErrorCode` identifying the failure.
        message: One-line description of what went wrong.
        hint: Optional actionable fix.
    """

    def __init__(self, code: ErrorCode, message: str, *, hint: str = '') -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.hint = hint

    def __str__(self) -> str:
        return f'error[{self.code.value}]: {self.message}'

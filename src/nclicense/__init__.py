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

"""nclicense: find dependencies with non-commercial license restrictions."""

__version__ = '0.4.0'

from nclicense.classifiers import (
    DEFAULT_CLASSIFIERS,
    ClassificationVerdict,
    Classifier,
    IdentifierClassifier,
    KeywordClassifier,
    LicenseDeclaration,
    LicenseEntry,
    build_classifier_table,
)
from nclicense.registry import NamedClassifier, run_classifiers, select_classifiers

__all__ = [
    'DEFAULT_CLASSIFIERS',
    'ClassificationVerdict',
    'Classifier',
    'IdentifierClassifier',
    'KeywordClassifier',
    'LicenseDeclaration',
    'LicenseEntry',
    'NamedClassifier',
    '__version__',
    'build_classifier_table',
    'run_classifiers',
    'select_classifiers',
]

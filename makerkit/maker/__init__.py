# Copyright 2025 Roger Cibrian
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

"""Maker contract and helpers.

Public API:

Maker : protocol
    Interface an orchestrator drives.
MakerBase : class
    Base class concrete makers subclass.
ensure_directory, ensure_file : coroutines
    Destructive staging helpers (see staging module).
external_binaries_exist, ensure_external_binaries_exist, is_installed : functions
    Dependency checks (see dependencies module).
"""

from .base import EXTENSION_POINTS, Maker, MakerBase
from .dependencies import (
    ensure_external_binaries_exist,
    external_binaries_exist,
    is_installed,
)
from .staging import ensure_directory, ensure_file

__all__ = [
    "EXTENSION_POINTS",
    "Maker",
    "MakerBase",
    "ensure_directory",
    "ensure_file",
    "ensure_external_binaries_exist",
    "external_binaries_exist",
    "is_installed",
]

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

"""Shared types for makers: target identifiers and per-invocation options.

Platform and Arch are plain string literals so they can be written directly
in YAML maker configuration and compared without conversion.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
import sys
from typing import Any, Literal, get_args

Platform = Literal["darwin", "mas", "win32", "linux"]
Arch = Literal["ia32", "x64", "armv7l", "arm64", "mips64el", "universal"]

SUPPORTED_PLATFORMS: tuple[str, ...] = get_args(Platform)
SUPPORTED_ARCHES: tuple[str, ...] = get_args(Arch)


@dataclass(frozen=True)
class MakerOptions:
    """Options for a single make() invocation.

    Attributes:
        dir: Directory containing the packaged application.
        make_dir: Directory to put all artifacts in (possibly in
            subdirectories). Not guaranteed to exist yet.
        app_name: Resolved human friendly name of the project.
        target_platform: Platform to make for.
        target_arch: Architecture to make for.
        forge_config: Fully resolved project configuration. Makers rarely
            need it.
        package_json: The application's package metadata.
    """

    dir: Path
    make_dir: Path
    app_name: str
    target_platform: Platform
    target_arch: Arch
    forge_config: Mapping[str, Any] = field(default_factory=dict)
    package_json: Mapping[str, Any] = field(default_factory=dict)


def current_platform() -> Platform:
    """Returns the Platform identifier of the running interpreter.

    Returns:
        "win32" on Windows, "darwin" on macOS, "linux" everywhere else.
    """
    if sys.platform.startswith("win"):
        return "win32"
    if sys.platform == "darwin":
        return "darwin"
    return "linux"

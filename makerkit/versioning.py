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

"""Version string helpers for platform metadata.

Windows installers and app manifests expect a 4-part numeric version
(major.minor.patch.revision) and reject semver prerelease tags.
"""

from __future__ import annotations

import re

__all__ = ["normalize_windows_version"]

# Everything from the first hyphen to the end (semver prerelease/build tail)
_PRERELEASE = re.compile(r"-.*")


def normalize_windows_version(version: str) -> str:
    """Converts a semver version to a 4-part Windows version.

    The prerelease suffix is dropped and a literal ".0" is appended. The
    input is not otherwise validated.

    Args:
        version: Semver-formatted version (e.g., "1.2.3-beta.1").

    Returns:
        Dot-delimited version with a trailing ".0" (e.g., "1.2.3.0").

    Example:
        ```python
        normalize_windows_version("1.2.3-beta.1")  # "1.2.3.0"
        normalize_windows_version("2.0.0")         # "2.0.0.0"
        ```
    """
    return f"{_PRERELEASE.sub('', version, count=1)}.0"

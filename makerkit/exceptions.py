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

"""Exception hierarchy for makerkit.

This module defines a custom exception hierarchy that allows orchestrators
to distinguish between the ways a maker can refuse to run. All exceptions
inherit from MakerKitError, allowing callers to catch all makerkit errors
with a single except clause if needed.

Filesystem errors raised while staging output (OSError and subclasses) and
errors raised by a config factory are NOT wrapped; they propagate unmodified.

Example:
    Catching specific error types:
        ```python
        from makerkit.exceptions import ContractViolation, MissingDependency

        try:
            maker.ensure_external_binaries_exist()
            artifacts = await maker.make(options)
        except MissingDependency as e:
            print(f"Install the missing tools: {e}")
        except ContractViolation as e:
            print(f"Broken maker {e.maker_name}: {e}")
        ```

    Catching all makerkit errors:
        ```python
        from makerkit.exceptions import MakerKitError

        try:
            makers = build_makers(load_maker_config(Path("makers.yaml")))
        except MakerKitError as e:
            print(f"makerkit error: {e}")
        ```
"""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "MakerKitError",
    "ConfigError",
    "ContractViolation",
    "MissingDependency",
]


class MakerKitError(Exception):
    """Base exception for all makerkit errors.

    All makerkit-specific exceptions inherit from this class, allowing
    callers to catch all makerkit errors with a single except clause.
    """

    pass


class ConfigError(MakerKitError):
    """Raised for configuration-related errors.

    This exception is raised when there are problems with:

    - YAML parse errors or empty maker configuration files
    - Missing or malformed fields in a maker entry (no name, platforms
        that are not a list, unknown platform or architecture names)
    - Unknown maker names (nothing registered under that name)

    Example:
        Catching configuration errors:
            ```python
            from makerkit.exceptions import ConfigError

            try:
                config = load_maker_config(Path("makers.yaml"))
            except ConfigError as e:
                print(f"Config error: {e}")
            ```
    """

    pass


class ContractViolation(MakerKitError):
    """Raised when a maker does not implement a required extension point.

    Raised synchronously the first time the missing piece is used:

    - make() or is_supported_on_current_platform() called on a maker whose
        class never overrode them
    - a maker class without a name or default_platforms is instantiated
    - config is read before prepare_config() was called

    Attributes:
        maker_name: Name of the offending maker (class name if it has none).
        method: Name of the missing method or attribute.
    """

    def __init__(self, maker_name: str, method: str, message: str) -> None:
        super().__init__(message)
        self.maker_name = maker_name
        self.method = method


class MissingDependency(MakerKitError):
    """Raised when required external binaries are not on the search path.

    The message lists EVERY binary the maker requires, not only the missing
    ones, so the developer knows the full set of tools to install.

    Attributes:
        maker_name: Name of the maker that requires the binaries.
        binaries: All required binaries, in declaration order.
        missing: The binaries that did not resolve.
    """

    def __init__(
        self, maker_name: str, binaries: Sequence[str], missing: Sequence[str]
    ) -> None:
        self.maker_name = maker_name
        self.binaries = tuple(binaries)
        self.missing = tuple(missing)
        super().__init__(
            f"Cannot make for {maker_name}, the following external binaries "
            f"need to be installed: {', '.join(self.binaries)}"
        )

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

"""Maker protocol and base class.

A maker turns a packaged application directory into distributable artifacts
for one platform/architecture pair. This module defines:

- Maker protocol: the interface an orchestrator drives
- MakerBase: shared lifecycle machinery concrete makers subclass

Lifecycle (driven by the orchestrator, once per target architecture):

    1. prepare_config(arch)               -> resolves maker.config
    2. platforms                          -> where this maker may run
    3. is_supported_on_current_platform() -> host check
    4. ensure_external_binaries_exist()   -> optional tool check
    5. await make(options)                -> list of absolute artifact paths

Contract Enforcement:
    make() and is_supported_on_current_platform() are required extension
    points. MakerBase records which of them a subclass implements when the
    class is created (__init_subclass__). The base bodies raise
    ContractViolation when invoked on a class that never implemented them,
    so an incomplete maker fails on first use instead of silently producing
    nothing. A make() that is not a coroutine function is rejected when the
    class is created.

Example:
    Implementing a maker:
        ```python
        from makerkit.maker import MakerBase
        from makerkit.types import MakerOptions, current_platform

        class TarMaker(MakerBase[dict]):
            name = "tar"
            default_platforms = ("linux", "darwin")
            required_external_binaries = ("tar",)

            def is_supported_on_current_platform(self) -> bool:
                return current_platform() in ("linux", "darwin")

            async def make(self, options: MakerOptions) -> list[str]:
                out_dir = options.make_dir / "tar" / options.target_arch
                await self.ensure_directory(out_dir)
                ...
                return [str(artifact.resolve())]
        ```
"""

from __future__ import annotations

from collections.abc import Sequence
import inspect
from pathlib import Path
from typing import Any, ClassVar, Generic, Protocol, TypeVar, runtime_checkable

from makerkit.config.source import ConfigSource, Static
from makerkit.exceptions import ContractViolation
from makerkit.logging import get_global_logger
from makerkit.maker import dependencies, staging
from makerkit.types import Arch, MakerOptions, Platform
from makerkit.versioning import normalize_windows_version

C = TypeVar("C")

# Methods every concrete maker must implement
EXTENSION_POINTS: tuple[str, ...] = ("make", "is_supported_on_current_platform")

_UNSET: Any = object()


@runtime_checkable
class Maker(Protocol):
    """Interface an orchestrator uses to drive a maker.

    Any object with these members is recognized as a maker by
    makerkit.registry.is_maker(); subclassing MakerBase is the usual way
    to get them.
    """

    name: str
    default_platforms: Sequence[Platform]

    @property
    def platforms(self) -> list[Platform]: ...

    def prepare_config(self, arch: Arch) -> None: ...

    def is_supported_on_current_platform(self) -> bool: ...

    async def make(self, options: MakerOptions) -> list[str]: ...


def _maker_name(obj: Any) -> str:
    name = getattr(obj, "name", None)
    if isinstance(name, str) and name:
        return name
    return obj.__name__ if isinstance(obj, type) else type(obj).__name__


class MakerBase(Generic[C]):
    """Base class for concrete makers.

    Subclasses set name and default_platforms as class attributes (or on
    the instance before calling super().__init__()) and implement make()
    and is_supported_on_current_platform().

    Attributes:
        name: Maker identifier (e.g., "zip", "deb").
        default_platforms: Platforms the maker runs on unless overridden.
        required_external_binaries: Tools that must be on PATH, checked by
            ensure_external_binaries_exist().
        platforms_to_make_on: Override passed at construction, or None.
    """

    name: ClassVar[str]
    default_platforms: ClassVar[Sequence[Platform]]
    required_external_binaries: ClassVar[Sequence[str]] = ()

    _implemented_methods: ClassVar[frozenset[str]] = frozenset()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        mro = cls.__mro__
        own_classes = mro[: mro.index(MakerBase)]
        cls._implemented_methods = frozenset(
            method
            for method in EXTENSION_POINTS
            if any(method in klass.__dict__ for klass in own_classes)
        )

        make = cls.__dict__.get("make")
        if make is not None and not inspect.iscoroutinefunction(inspect.unwrap(make)):
            raise ContractViolation(
                _maker_name(cls),
                "make",
                f"Maker {_maker_name(cls)} must define make as an async method",
            )

    def __init__(
        self,
        config_source: ConfigSource | None = None,
        platforms_to_make_on: Sequence[Platform] | None = None,
    ) -> None:
        """Initialize the maker.

        Args:
            config_source: Static configuration value or per-architecture
                Factory. Defaults to Static({}).
            platforms_to_make_on: Platforms to run on instead of
                default_platforms. An empty sequence counts as no override.

        Raises:
            ContractViolation: If neither the class nor the instance defines
                name or default_platforms.
        """
        for attribute in ("name", "default_platforms"):
            if not hasattr(self, attribute):
                raise ContractViolation(
                    _maker_name(self),
                    attribute,
                    f"Maker {_maker_name(self)} did not define {attribute}",
                )

        self._config_source: ConfigSource = (
            config_source if config_source is not None else Static({})
        )
        self.platforms_to_make_on: tuple[Platform, ...] | None = (
            tuple(platforms_to_make_on) if platforms_to_make_on else None
        )
        self._config: C = _UNSET

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r} platforms={self.platforms!r}>"

    # -------------------------------
    # Config and platforms
    # -------------------------------

    @property
    def config(self) -> C:
        """Configuration resolved by the last prepare_config() call.

        Raises:
            ContractViolation: If prepare_config() has not been called.
        """
        if self._config is _UNSET:
            raise ContractViolation(
                self.name,
                "prepare_config",
                f"Maker {self.name} config was read before prepare_config was called",
            )
        return self._config

    def prepare_config(self, arch: Arch) -> None:
        """Resolves config for the target architecture.

        Called once per architecture before make(). Errors raised by a
        Factory propagate unchanged and leave the previous config in place.

        Args:
            arch: Target architecture.
        """
        self._config = self._config_source.resolve(arch)
        get_global_logger().verbose("MAKER", f"{self.name}: config prepared for {arch}")

    @property
    def platforms(self) -> list[Platform]:
        """The override if one was supplied, otherwise default_platforms."""
        if self.platforms_to_make_on:
            return list(self.platforms_to_make_on)
        return list(self.default_platforms)

    # -------------------------------
    # Extension points
    # -------------------------------

    def is_supported_on_current_platform(self) -> bool:
        """Returns whether this maker can run on the current host.

        Makers must implement this. Normally it is a platform check, but it
        can be a deeper check for required tools. If a dependency is
        missing, log a helpful message saying what is missing and how to
        get it.

        Raises:
            ContractViolation: If the subclass did not implement it.
        """
        if "is_supported_on_current_platform" not in self._implemented_methods:
            raise ContractViolation(
                self.name,
                "is_supported_on_current_platform",
                f"Maker {self.name} did not implement the "
                f"is_supported_on_current_platform method",
            )
        return True

    async def make(self, options: MakerOptions) -> list[str]:
        """Produces artifacts and returns their absolute paths.

        Makers must implement this. options.make_dir may not exist yet;
        create whatever subdirectories are needed.

        Raises:
            ContractViolation: If the subclass did not implement it.
        """
        if "make" not in self._implemented_methods:
            raise ContractViolation(
                self.name, "make", f"Maker {self.name} did not implement the make method"
            )
        return []

    # -------------------------------
    # Helpers
    # -------------------------------

    async def ensure_directory(self, dir: Path | str) -> None:
        """Ensures the directory exists and is empty (destructive).

        See makerkit.maker.staging.ensure_directory.
        """
        await staging.ensure_directory(dir)

    async def ensure_file(self, file: Path | str) -> None:
        """Ensures the file's parent exists and the file does not (destructive).

        See makerkit.maker.staging.ensure_file.
        """
        await staging.ensure_file(file)

    def external_binaries_exist(self) -> bool:
        """Returns True if every required external binary is on PATH."""
        return dependencies.external_binaries_exist(self.required_external_binaries)

    def ensure_external_binaries_exist(self) -> None:
        """Raises MissingDependency if any required binary is missing."""
        dependencies.ensure_external_binaries_exist(
            self.name, self.required_external_binaries
        )

    def is_installed(self, module: str) -> bool:
        """Returns True if the module imports, False on any failure."""
        return dependencies.is_installed(module)

    def normalize_windows_version(self, version: str) -> str:
        """Returns a 4-part Windows version without prerelease information."""
        return normalize_windows_version(version)

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

"""Maker registry for makerkit.

Concrete makers register their class under a name, typically at module
import time. Maker configuration files then refer to makers by that name.

Design Philosophy:
    - Registry is a simple dict (no complex dependency injection needed)
    - Registering the same name twice overwrites the previous entry
    - Makers are instantiated on demand, one instance per config entry

Example:
    Register and create a maker:
        ```python
        from makerkit.registry import create_maker, register_maker

        register_maker("tar", TarMaker)

        maker = create_maker("tar", platforms_to_make_on=["linux"])
        ```
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from makerkit.config.source import ConfigSource
from makerkit.exceptions import ConfigError
from makerkit.logging import get_global_logger
from makerkit.maker.base import Maker, MakerBase
from makerkit.types import Platform

__all__ = [
    "register_maker",
    "get_maker_class",
    "create_maker",
    "available_makers",
    "is_maker",
]

_MAKER_REGISTRY: dict[str, type[MakerBase[Any]]] = {}


def register_maker(name: str, maker_class: type[MakerBase[Any]]) -> None:
    """Registers a maker class by name.

    Args:
        name: Name used in maker configuration files (e.g., "zip").
        maker_class: MakerBase subclass to instantiate for that name.

    Raises:
        TypeError: If maker_class is not a MakerBase subclass.
    """
    if not (isinstance(maker_class, type) and issubclass(maker_class, MakerBase)):
        raise TypeError(f"{maker_class!r} is not a MakerBase subclass")
    get_global_logger().debug("REGISTRY", f"Registered maker {name!r}")
    _MAKER_REGISTRY[name] = maker_class


def get_maker_class(name: str) -> type[MakerBase[Any]]:
    """Returns the maker class registered under name.

    Raises:
        ConfigError: If nothing is registered under name. The message lists
            the available makers.
    """
    if name not in _MAKER_REGISTRY:
        available = ", ".join(sorted(_MAKER_REGISTRY))
        raise ConfigError(f"Unknown maker: {name!r}. Available: {available or '(none)'}")
    return _MAKER_REGISTRY[name]


def create_maker(
    name: str,
    config_source: ConfigSource | None = None,
    platforms_to_make_on: Sequence[Platform] | None = None,
) -> MakerBase[Any]:
    """Instantiates the maker registered under name.

    Args:
        name: Registered maker name.
        config_source: Passed to the maker constructor.
        platforms_to_make_on: Passed to the maker constructor.

    Returns:
        A new maker instance.

    Raises:
        ConfigError: If the name is not registered.
        ContractViolation: If the registered class is missing name or
            default_platforms.
    """
    maker_class = get_maker_class(name)
    return maker_class(config_source, platforms_to_make_on)


def available_makers() -> list[str]:
    """Returns registered maker names, sorted."""
    return sorted(_MAKER_REGISTRY)


def is_maker(obj: object) -> bool:
    """Returns True if obj satisfies the Maker protocol.

    Orchestrators use this to tell maker instances apart from other values
    (for example, raw config entries) in a mixed list.
    """
    return not isinstance(obj, type) and isinstance(obj, Maker)

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

"""Maker configuration loading for makerkit.

Maker configuration lives in a YAML file listing the makers a project uses:

    makers:
      - name: zip
        platforms: [darwin, linux]
        config:
          compression: 9
          extra_files: [LICENSE]
        config_by_arch:
          arm64:
            compression: 6
      - name: deb
        enabled: false

Entry Fields:
    name (required): Registered maker name.
    platforms (optional): Platform override. Omitted or empty means the
        maker's default_platforms.
    config (optional): Mapping passed to the maker. Defaults to {}.
    config_by_arch (optional): Per-architecture overlays. When present the
        maker gets a Factory whose result is config deep-merged with the
        overlay for the requested architecture.
    enabled (optional): Set to false to skip the entry. Defaults to true.

Merge Behavior:
    Overlays follow "last wins" deep merging:

    - dict + dict -> deep merge
    - list + list -> overlay REPLACES base (not concatenated)
    - everything else -> overlay overwrites base

Example:
    Basic usage:
        ```python
        from pathlib import Path
        from makerkit.config import build_makers, load_maker_config

        config = load_maker_config(Path("makers.yaml"))
        for maker in build_makers(config):
            print(maker.name, maker.platforms)
        ```
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from makerkit.config.source import ConfigSource, Factory, Static
from makerkit.exceptions import ConfigError
from makerkit.logging import get_global_logger
from makerkit.types import SUPPORTED_ARCHES, SUPPORTED_PLATFORMS, Arch

if TYPE_CHECKING:
    from makerkit.maker.base import MakerBase

__all__ = ["load_maker_config", "config_source_for", "build_makers"]

_ENTRY_FIELDS = {"name", "platforms", "config", "config_by_arch", "enabled"}


# -------------------------------
# YAML helpers
# -------------------------------


def _load_yaml_file(p: Path) -> Any:
    """Loads a YAML file and returns the parsed Python object.

    Args:
        p: Path to the YAML file to load.

    Returns:
        The parsed Python object from the YAML file.

    Raises:
        ConfigError: When file does not exist, invalid YAML (parse error), or empty files.
    """
    if not p.exists():
        raise ConfigError(f"file not found: {p}")
    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as err:
        raise ConfigError(f"Error parsing YAML: {p}: {err}") from err
    if data is None:
        raise ConfigError(f"YAML file is empty: {p}")
    return data


# -------------------------------
# Merge logic
# -------------------------------


def _deep_merge_dicts(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Deep-merges two dicts with "overlay wins" semantics.

    This function does not mutate inputs; returns a new dict.
    """
    result: dict[str, Any] = dict(base)
    for k, v in overlay.items():
        if k in result and isinstance(result[k], dict) and isinstance(v, dict):
            result[k] = _deep_merge_dicts(result[k], v)
        else:
            # Replace lists and scalars entirely
            result[k] = v
    return result


# -------------------------------
# Validation
# -------------------------------


def _validate_entry(index: int, entry: Any) -> list[str]:
    """Returns human-readable problems with one maker entry."""
    where = f"makers[{index}]"
    if not isinstance(entry, dict):
        return [f"{where}: entry must be a mapping"]

    errors = []
    name = entry.get("name")
    if not isinstance(name, str) or not name.strip():
        errors.append(f"{where}: missing required field 'name'")
    else:
        where = f"makers[{index}] ({name})"

    unknown = sorted(set(entry) - _ENTRY_FIELDS)
    if unknown:
        errors.append(f"{where}: unknown field(s): {', '.join(unknown)}")

    platforms = entry.get("platforms")
    if platforms is not None:
        if not isinstance(platforms, list):
            errors.append(f"{where}: 'platforms' must be a list")
        else:
            for platform in platforms:
                if platform not in SUPPORTED_PLATFORMS:
                    errors.append(
                        f"{where}: unknown platform {platform!r}. "
                        f"Supported: {', '.join(SUPPORTED_PLATFORMS)}"
                    )

    if entry.get("config") is not None and not isinstance(entry["config"], dict):
        errors.append(f"{where}: 'config' must be a mapping")

    by_arch = entry.get("config_by_arch")
    if by_arch is not None:
        if not isinstance(by_arch, dict):
            errors.append(f"{where}: 'config_by_arch' must be a mapping")
        else:
            for arch, overlay in by_arch.items():
                if arch not in SUPPORTED_ARCHES:
                    errors.append(
                        f"{where}: unknown arch {arch!r} in 'config_by_arch'. "
                        f"Supported: {', '.join(SUPPORTED_ARCHES)}"
                    )
                elif not isinstance(overlay, dict):
                    errors.append(f"{where}: config_by_arch.{arch} must be a mapping")

    if "enabled" in entry and not isinstance(entry["enabled"], bool):
        errors.append(f"{where}: 'enabled' must be true or false")

    return errors


# -------------------------------
# Public API
# -------------------------------


def load_maker_config(config_path: Path) -> dict[str, Any]:
    """Loads and validates a maker configuration file.

    Args:
        config_path: Path to the YAML file.

    Returns:
        The parsed configuration. Its "makers" key holds the list of
        validated entries.

    Raises:
        ConfigError: If the file is missing, empty, not valid YAML, or any
            entry is invalid. All entry problems are reported together.
    """
    logger = get_global_logger()
    config_path = config_path.resolve()
    logger.verbose("CONFIG", f"Loading maker config: {config_path}")

    data = _load_yaml_file(config_path)
    if not isinstance(data, dict):
        raise ConfigError(f"top-level YAML must be a mapping (dict): {config_path}")

    makers = data.get("makers")
    if not isinstance(makers, list):
        raise ConfigError(f"'makers' must be a list of maker entries: {config_path}")

    errors: list[str] = []
    for index, entry in enumerate(makers):
        errors.extend(_validate_entry(index, entry))
    if errors:
        raise ConfigError(
            f"Invalid maker config {config_path}:\n  " + "\n  ".join(errors)
        )

    logger.verbose("CONFIG", f"Found {len(makers)} maker entries")
    return data


def config_source_for(entry: dict[str, Any]) -> ConfigSource:
    """Builds the config source for one maker entry.

    Args:
        entry: A validated maker entry.

    Returns:
        Static(config) when the entry has no config_by_arch, otherwise a
        Factory returning config deep-merged with the architecture's overlay
        (or a copy of config for architectures without one).
    """
    base: dict[str, Any] = entry.get("config") or {}
    by_arch: dict[str, dict[str, Any]] = entry.get("config_by_arch") or {}
    if not by_arch:
        return Static(base)

    def resolve(arch: Arch) -> dict[str, Any]:
        return _deep_merge_dicts(base, by_arch.get(arch, {}))

    return Factory(resolve)


def build_makers(config: dict[str, Any]) -> list[MakerBase[Any]]:
    """Instantiates every enabled maker in a loaded configuration.

    Args:
        config: Result of load_maker_config().

    Returns:
        Maker instances in file order. Disabled entries are skipped.

    Raises:
        ConfigError: If an entry names a maker that is not registered.
    """
    from makerkit.registry import create_maker

    logger = get_global_logger()
    makers: list[MakerBase[Any]] = []
    entries = config.get("makers", [])
    for index, entry in enumerate(entries, start=1):
        logger.step(index, len(entries), f"Preparing maker {entry['name']}...")
        if not entry.get("enabled", True):
            logger.verbose("CONFIG", f"Skipping disabled maker: {entry['name']}")
            continue
        maker = create_maker(
            entry["name"],
            config_source_for(entry),
            entry.get("platforms") or None,
        )
        logger.verbose("CONFIG", f"Created maker {maker.name!r} for {maker.platforms}")
        makers.append(maker)
    return makers

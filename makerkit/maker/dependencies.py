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

"""Dependency checks for makers.

Two kinds of dependencies are checked:

- External binaries (fakeroot, hdiutil, ...): looked up on PATH with
  shutil.which, which returns None instead of raising for absent tools.
- Optional Python modules: probed with importlib.import_module.

Validation is opt-in. Nothing here runs automatically before make(); the
orchestrator or the maker calls ensure_external_binaries_exist() when it
wants the gate.
"""

from __future__ import annotations

from collections.abc import Sequence
import importlib
import shutil

from makerkit.exceptions import MissingDependency
from makerkit.logging import get_global_logger

__all__ = [
    "missing_binaries",
    "external_binaries_exist",
    "ensure_external_binaries_exist",
    "is_installed",
]


def missing_binaries(binaries: Sequence[str]) -> list[str]:
    """Returns the binaries that do not resolve on PATH, in input order."""
    logger = get_global_logger()
    missing = []
    for binary in binaries:
        resolved = shutil.which(binary)
        if resolved is None:
            logger.debug("DEPS", f"{binary}: not found on PATH")
            missing.append(binary)
        else:
            logger.debug("DEPS", f"{binary}: {resolved}")
    return missing


def external_binaries_exist(binaries: Sequence[str]) -> bool:
    """Returns True if every binary resolves on PATH.

    Partial and total failure are not distinguished. An empty sequence
    always passes.
    """
    return not missing_binaries(binaries)


def ensure_external_binaries_exist(maker_name: str, binaries: Sequence[str]) -> None:
    """Raises if any required binary is missing.

    Args:
        maker_name: Maker name used in the error message.
        binaries: All binaries the maker requires, in declaration order.

    Raises:
        MissingDependency: If at least one binary does not resolve. The
            message lists every entry of binaries, not only the missing ones.
    """
    missing = missing_binaries(binaries)
    if missing:
        raise MissingDependency(maker_name, binaries, missing)


def is_installed(module: str) -> bool:
    """Checks if the given module can be imported.

    Used to test whether optional dependencies are available. ANY failure
    while importing counts as "not installed"; the reason is only logged.

    Args:
        module: Dotted module name (e.g., "yaml", "dmgbuild").

    Returns:
        True if the import succeeded, False otherwise.
    """
    try:
        importlib.import_module(module)
    except Exception as err:
        get_global_logger().debug(
            "DEPS", f"Module {module!r} not importable: {type(err).__name__}: {err}"
        )
        return False
    return True

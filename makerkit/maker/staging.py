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

"""Filesystem staging helpers used while makers produce artifacts.

Both helpers are DESTRUCTIVE: whatever exists at the target path is removed
first. Blocking filesystem calls run in a worker thread via asyncio.to_thread
so a make() coroutine suspends at each I/O boundary.

Concurrency:
    ensure_directory() removes and then recreates the directory. The two
    steps are not atomic, so another task or process can observe the path
    missing in between. No locking is done here. Callers that run several
    makers at once must serialize work per resolved absolute output path
    (for example with an asyncio.Lock keyed by that path).

Error Handling:
    OSError (PermissionError, NotADirectoryError, ...) propagates unwrapped.

Example:
    ```python
    from makerkit.maker.staging import ensure_directory, ensure_file

    out_dir = options.make_dir / "zip" / options.target_platform
    await ensure_directory(out_dir)

    artifact = out_dir / f"{options.app_name}.zip"
    await ensure_file(artifact)
    artifact.write_bytes(data)
    ```
"""

from __future__ import annotations

import asyncio
from pathlib import Path
import shutil

from makerkit.logging import get_global_logger

__all__ = ["ensure_directory", "ensure_file"]


def _remove_path(path: Path) -> None:
    """Removes a file, symlink or directory tree if anything is there."""
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    elif path.exists() or path.is_symlink():
        path.unlink()


async def ensure_directory(dir: Path | str) -> None:
    """Ensures the directory exists and is empty.

    If the directory already exists it is deleted and recreated. Missing
    parent directories are created.

    Args:
        dir: Directory to reset.

    Raises:
        OSError: If removal or creation fails.
    """
    logger = get_global_logger()
    path = Path(dir)

    if await asyncio.to_thread(lambda: path.exists() or path.is_symlink()):
        logger.debug("STAGING", f"Removing existing directory: {path}")
        await asyncio.to_thread(_remove_path, path)

    await asyncio.to_thread(path.mkdir, parents=True, exist_ok=True)
    logger.verbose("STAGING", f"[OK] Empty directory ready: {path}")


async def ensure_file(file: Path | str) -> None:
    """Ensures the parent path of a file exists and the file itself does not.

    The file is NOT created; the caller writes it afterwards.

    Args:
        file: Path of the file about to be written.

    Raises:
        OSError: If removal or directory creation fails.
    """
    logger = get_global_logger()
    path = Path(file)

    if await asyncio.to_thread(lambda: path.exists() or path.is_symlink()):
        logger.debug("STAGING", f"Removing existing file: {path}")
        await asyncio.to_thread(_remove_path, path)

    await asyncio.to_thread(path.parent.mkdir, parents=True, exist_ok=True)
    logger.verbose("STAGING", f"[OK] Parent directory ready: {path.parent}")

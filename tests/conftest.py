"""
Pytest configuration and shared fixtures for makerkit tests.

This module provides sample maker classes, MakerOptions builders and YAML
helpers used across the test suite.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from makerkit import registry
from makerkit.maker import MakerBase
from makerkit.types import MakerOptions


class CompleteMaker(MakerBase[Any]):
    """Maker implementing every extension point; writes one text artifact."""

    name = "complete"
    default_platforms = ("linux", "darwin")

    def is_supported_on_current_platform(self) -> bool:
        return True

    async def make(self, options: MakerOptions) -> list[str]:
        out_dir = options.make_dir / self.name / options.target_arch
        await self.ensure_directory(out_dir)
        artifact = out_dir / f"{options.app_name}.txt"
        await self.ensure_file(artifact)
        artifact.write_text(f"{options.app_name} for {options.target_platform}")
        return [str(artifact.resolve())]


class MakeOnlyMaker(MakerBase[Any]):
    """Maker that forgot is_supported_on_current_platform."""

    name = "make-only"
    default_platforms = ("win32",)

    async def make(self, options: MakerOptions) -> list[str]:
        return []


class SupportOnlyMaker(MakerBase[Any]):
    """Maker that forgot make."""

    name = "support-only"
    default_platforms = ("linux",)

    def is_supported_on_current_platform(self) -> bool:
        return False


@pytest.fixture
def complete_maker_cls() -> type[CompleteMaker]:
    return CompleteMaker


@pytest.fixture
def make_only_maker_cls() -> type[MakeOnlyMaker]:
    return MakeOnlyMaker


@pytest.fixture
def support_only_maker_cls() -> type[SupportOnlyMaker]:
    return SupportOnlyMaker


@pytest.fixture
def tmp_test_dir(tmp_path: Path) -> Path:
    """
    Provide a temporary directory for test artifacts.

    Automatically cleaned up after test completion.
    """
    return tmp_path


@pytest.fixture
def make_options(tmp_test_dir: Path):
    """
    Factory fixture for MakerOptions pointing into the temp directory.

    Usage:
        options = make_options(target_arch="arm64")
    """

    def _create(**overrides: Any) -> MakerOptions:
        app_dir = tmp_test_dir / "packaged" / "Test App-linux-x64"
        app_dir.mkdir(parents=True, exist_ok=True)
        values: dict[str, Any] = {
            "dir": app_dir,
            "make_dir": tmp_test_dir / "out" / "make",
            "app_name": "Test App",
            "target_platform": "linux",
            "target_arch": "x64",
            "forge_config": {},
            "package_json": {"name": "test-app", "version": "1.2.3"},
        }
        values.update(overrides)
        return MakerOptions(**values)

    return _create


@pytest.fixture
def isolated_registry(monkeypatch) -> dict[str, Any]:
    """Replace the global maker registry with an empty one for the test."""
    fresh: dict[str, Any] = {}
    monkeypatch.setattr(registry, "_MAKER_REGISTRY", fresh)
    return fresh


@pytest.fixture
def sample_maker_config() -> dict[str, Any]:
    """
    Provide sample maker configuration data.

    Returns a complete configuration structure for testing.
    """
    return {
        "makers": [
            {
                "name": "complete",
                "platforms": ["linux"],
                "config": {
                    "compression": 9,
                    "extra_files": ["LICENSE"],
                    "options": {"icon": "icon.png", "category": "Utility"},
                },
                "config_by_arch": {
                    "arm64": {"compression": 6, "options": {"icon": "arm.png"}},
                },
            },
            {"name": "complete", "enabled": False},
        ],
    }


@pytest.fixture
def create_yaml_file(tmp_test_dir: Path):
    """
    Factory fixture for creating temporary YAML files.

    Usage:
        yaml_path = create_yaml_file("makers.yaml", {"makers": []})
    """

    def _create(filename: str, data: Any) -> Path:
        path = tmp_test_dir / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.dump(data, f)
        return path

    return _create

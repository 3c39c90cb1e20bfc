"""
Tests for makerkit.maker.base module.

Tests the maker contract including:
- Extension point enforcement (make, is_supported_on_current_platform)
- Required class attributes (name, default_platforms)
- Per-architecture config resolution
- Platform overrides
"""

from __future__ import annotations

import functools
from pathlib import Path
from typing import Any

import pytest

from makerkit.config import Factory, Static
from makerkit.exceptions import ContractViolation
from makerkit.maker import MakerBase

# All tests in this file are unit tests (fast, no external tools)
pytestmark = pytest.mark.unit


class TestContractEnforcement:
    """Tests for detection of unimplemented extension points."""

    @pytest.mark.asyncio
    async def test_complete_maker_never_raises(self, complete_maker_cls, make_options):
        """Test a maker implementing both methods runs without violations."""
        maker = complete_maker_cls()
        maker.prepare_config("x64")

        assert maker.is_supported_on_current_platform() is True
        artifacts = await maker.make(make_options())

        assert len(artifacts) == 1
        artifact = Path(artifacts[0])
        assert artifact.is_absolute()
        assert artifact.read_text() == "Test App for linux"

    @pytest.mark.asyncio
    async def test_missing_make_raises(self, support_only_maker_cls, make_options):
        """Test calling make on a maker without make raises ContractViolation."""
        maker = support_only_maker_cls()

        with pytest.raises(ContractViolation, match="support-only did not implement the make method") as exc_info:
            await maker.make(make_options())

        assert exc_info.value.maker_name == "support-only"
        assert exc_info.value.method == "make"

    def test_missing_make_does_not_affect_other_method(self, support_only_maker_cls):
        """Test the implemented method still works when make is missing."""
        maker = support_only_maker_cls()

        assert maker.is_supported_on_current_platform() is False

    def test_missing_is_supported_raises(self, make_only_maker_cls):
        """Test is_supported_on_current_platform without override raises."""
        maker = make_only_maker_cls()

        with pytest.raises(
            ContractViolation,
            match="make-only did not implement the is_supported_on_current_platform method",
        ) as exc_info:
            maker.is_supported_on_current_platform()

        assert exc_info.value.method == "is_supported_on_current_platform"

    @pytest.mark.asyncio
    async def test_inherited_implementation_counts(self, complete_maker_cls, make_options):
        """Test a subclass inherits the implemented flags of its parent."""

        class Renamed(complete_maker_cls):
            name = "renamed"

        maker = Renamed()

        assert maker.is_supported_on_current_platform() is True
        artifacts = await maker.make(make_options())
        assert "renamed" in artifacts[0]

    @pytest.mark.asyncio
    async def test_super_call_from_override_is_allowed(self, make_options):
        """Test an override calling the base make does not raise."""

        class Delegating(MakerBase[Any]):
            name = "delegating"
            default_platforms = ("linux",)

            def is_supported_on_current_platform(self) -> bool:
                return super().is_supported_on_current_platform()

            async def make(self, options):
                return await super().make(options)

        maker = Delegating()

        assert maker.is_supported_on_current_platform() is True
        assert await maker.make(make_options()) == []

    def test_sync_make_rejected_at_class_creation(self):
        """Test a non-async make is rejected when the class is defined."""
        with pytest.raises(ContractViolation, match="sync-maker must define make as an async method"):

            class SyncMaker(MakerBase[Any]):
                name = "sync-maker"
                default_platforms = ("linux",)

                def make(self, options):
                    return []

    def test_instance_assigned_name_accepted(self):
        """Test a name set on the instance before super().__init__ counts."""

        class PerInstanceName(MakerBase[Any]):
            default_platforms = ("linux",)

            def __init__(self, *args, **kwargs):
                self.name = "per-instance"
                super().__init__(*args, **kwargs)

            def is_supported_on_current_platform(self) -> bool:
                return True

            async def make(self, options):
                return []

        maker = PerInstanceName()

        assert maker.name == "per-instance"
        assert maker.platforms == ["linux"]

    @pytest.mark.asyncio
    async def test_decorated_async_make_accepted(self, make_options):
        """Test an async make wrapped by a functools.wraps decorator is accepted."""
        calls = []

        def traced(func):
            @functools.wraps(func)
            def wrapper(*args, **kwargs):
                calls.append(func.__name__)
                return func(*args, **kwargs)

            return wrapper

        class Traced(MakerBase[Any]):
            name = "traced"
            default_platforms = ("linux",)

            def is_supported_on_current_platform(self) -> bool:
                return True

            @traced
            async def make(self, options):
                return ["/tmp/traced.zip"]

        assert await Traced().make(make_options()) == ["/tmp/traced.zip"]
        assert calls == ["make"]

    def test_missing_name_raises(self):
        """Test instantiating a maker without a name raises."""

        class Nameless(MakerBase[Any]):
            default_platforms = ("linux",)

        with pytest.raises(ContractViolation, match="Nameless did not define name"):
            Nameless()

    def test_missing_default_platforms_raises(self):
        """Test instantiating a maker without default_platforms raises."""

        class Homeless(MakerBase[Any]):
            name = "homeless"

        with pytest.raises(ContractViolation, match="homeless did not define default_platforms"):
            Homeless()


class TestPlatforms:
    """Tests for the platforms accessor."""

    def test_defaults_without_override(self, complete_maker_cls):
        """Test default_platforms is returned when no override is given."""
        maker = complete_maker_cls()

        assert maker.platforms == ["linux", "darwin"]

    def test_override_replaces_defaults(self, complete_maker_cls):
        """Test the override is returned exclusively (never merged)."""
        maker = complete_maker_cls(platforms_to_make_on=["win32"])

        assert maker.platforms == ["win32"]

    def test_empty_override_falls_back_to_defaults(self, complete_maker_cls):
        """Test an empty override counts as no override."""
        maker = complete_maker_cls(platforms_to_make_on=[])

        assert maker.platforms == ["linux", "darwin"]

    def test_platforms_is_a_copy(self, complete_maker_cls):
        """Test mutating the returned list does not change the maker."""
        maker = complete_maker_cls(platforms_to_make_on=["mas"])
        maker.platforms.append("linux")

        assert maker.platforms == ["mas"]


class TestPrepareConfig:
    """Tests for per-architecture config resolution."""

    def test_default_config_is_empty_mapping(self, complete_maker_cls):
        """Test a maker built without a source gets an empty config."""
        maker = complete_maker_cls()
        maker.prepare_config("x64")

        assert maker.config == {}

    def test_static_config_same_object_for_every_arch(self, complete_maker_cls):
        """Test a Static source yields the identical object for all arches."""
        value = {"compression": 9}
        maker = complete_maker_cls(Static(value))

        maker.prepare_config("x64")
        first = maker.config
        maker.prepare_config("arm64")

        assert first is value
        assert maker.config is value

    def test_factory_config_per_arch(self, complete_maker_cls):
        """Test a Factory source is evaluated for each arch."""
        calls = []

        def factory(arch):
            calls.append(arch)
            return {"arch": arch}

        maker = complete_maker_cls(Factory(factory))

        maker.prepare_config("x64")
        assert maker.config == {"arch": "x64"}
        maker.prepare_config("arm64")
        assert maker.config == {"arch": "arm64"}
        assert calls == ["x64", "arm64"]

    def test_factory_error_propagates_unchanged(self, complete_maker_cls):
        """Test errors raised by the factory reach the caller unwrapped."""

        def factory(arch):
            if arch == "ia32":
                raise ValueError("ia32 is not supported by this config")
            return {"arch": arch}

        maker = complete_maker_cls(Factory(factory))
        maker.prepare_config("x64")

        with pytest.raises(ValueError, match="ia32 is not supported"):
            maker.prepare_config("ia32")

        # Previous config remains in place
        assert maker.config == {"arch": "x64"}

    def test_config_before_prepare_raises(self, complete_maker_cls):
        """Test reading config before prepare_config raises."""
        maker = complete_maker_cls()

        with pytest.raises(ContractViolation, match="before prepare_config"):
            _ = maker.config


class TestHelpers:
    """Tests for the convenience helpers exposed on makers."""

    def test_normalize_windows_version(self, complete_maker_cls):
        """Test the instance helper delegates to versioning."""
        maker = complete_maker_cls()

        assert maker.normalize_windows_version("1.2.3-beta.1") == "1.2.3.0"

    def test_is_installed(self, complete_maker_cls):
        """Test the instance helper for module probing."""
        maker = complete_maker_cls()

        assert maker.is_installed("yaml") is True
        assert maker.is_installed("definitely_not_a_real_module_xyz") is False

    def test_repr_mentions_name_and_platforms(self, complete_maker_cls):
        """Test repr output for debugging."""
        maker = complete_maker_cls(platforms_to_make_on=["linux"])

        assert repr(maker) == "<CompleteMaker name='complete' platforms=['linux']>"

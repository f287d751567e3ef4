"""Tests for CapabilityRegistry."""

from pathlib import Path
from typing import Any

import pytest

from snipdeck.host.capabilities import CapabilityRegistry
from snipdeck.lib.errors import ConfigError

CAPABILITY_MODULE = '''\
from os.path import join


def today():
    return "2024-05-01"


def signature():
    return "-- me"


def _helper():
    return "hidden"


VALUE = 3
'''


class TestRegister:
    """Tests for explicit registration."""

    def test_register_and_resolve(self) -> None:
        """Test that a registered callable can be resolved by name."""
        registry = CapabilityRegistry()
        registry.register("ping", lambda: "pong")
        fn = registry.resolve("ping")
        assert fn is not None
        assert fn() == "pong"
        assert "ping" in registry
        assert len(registry) == 1

    def test_resolve_missing(self) -> None:
        """Test that an unknown name resolves to None."""
        assert CapabilityRegistry().resolve("ping") is None

    def test_later_registration_replaces(self) -> None:
        """Test that re-registering a name replaces the callable."""
        registry = CapabilityRegistry({"x": lambda: 1})
        registry.register("x", lambda: 2)
        assert registry.resolve("x")() == 2  # type: ignore[misc]

    def test_not_callable(self) -> None:
        """Test that non-callables are rejected."""
        with pytest.raises(TypeError):
            CapabilityRegistry().register("x", "not callable")  # type: ignore[arg-type]


class TestRegisterModule:
    """Tests for registering a module's functions."""

    @pytest.fixture
    def capability_module(self, temp_dir: Path, monkeypatch: Any) -> str:
        """Write an importable capability module and return its name."""
        (temp_dir / "snipdeck_test_caps.py").write_text(CAPABILITY_MODULE)
        monkeypatch.syspath_prepend(str(temp_dir))
        return "snipdeck_test_caps"

    def test_registers_public_functions(self, capability_module: str) -> None:
        """Test that only functions defined in the module are registered."""
        registry = CapabilityRegistry()
        names = registry.register_module(capability_module)
        assert sorted(names) == ["signature", "today"]
        assert sorted(registry) == ["signature", "today"]
        assert registry.resolve("today")() == "2024-05-01"  # type: ignore[misc]

    def test_register_modules(self, capability_module: str) -> None:
        """Test registering by a list of names."""
        registry = CapabilityRegistry()
        registry.register_modules([capability_module])
        assert "signature" in registry

    def test_import_failure(self) -> None:
        """Test that an unknown module is reported as a config error."""
        with pytest.raises(ConfigError) as exc_info:
            CapabilityRegistry().register_module("snipdeck_no_such_module")
        assert exc_info.value.field == "function_modules"

"""Tests for the process-wide configuration registry."""

import asyncio
from pathlib import Path
from typing import Any

import pytest

from layerconf import registry as registry_module
from layerconf.decoders import DecoderRegistry
from layerconf.exceptions import NotInitializedError, NotReadyError, SourceReadError
from layerconf.registry import ConfigRegistry, RegistryState


class TestConfigRegistry:
    """Test an injected ConfigRegistry."""

    def test_current_before_init(self) -> None:
        """Test current() fails with NotInitializedError before init."""
        registry = ConfigRegistry()
        assert registry.state == RegistryState.UNINITIALIZED
        with pytest.raises(NotInitializedError):
            registry.current()

    @pytest.mark.asyncio
    async def test_init_loads_and_installs(self) -> None:
        """Test init returns a ready Config that current() hands out."""
        registry = ConfigRegistry()
        config = await registry.init({"a": 1}, {"b": 2}, decoders=DecoderRegistry())
        assert config.is_ready
        assert registry.state == RegistryState.READY
        assert registry.current() is config
        assert registry.current().get("b") == 2

    @pytest.mark.asyncio
    async def test_reinit_replaces_instance(self) -> None:
        """Test a second init replaces the installed Config."""
        registry = ConfigRegistry()
        first = await registry.init({"v": 1}, decoders=DecoderRegistry())
        second = await registry.init({"v": 2}, decoders=DecoderRegistry())
        assert second is not first
        assert registry.current() is second
        assert registry.current().get("v") == 2

    @pytest.mark.asyncio
    async def test_current_while_pending(self, tmp_path: Path) -> None:
        """Test current() raises NotReadyError while the first load runs."""

        class BlockingDecoder:
            def __init__(self) -> None:
                self.release = asyncio.Event()

            async def decode(self, text: str, path: str) -> Any:
                await self.release.wait()
                return {"loaded": True}

        decoder = BlockingDecoder()
        registry = ConfigRegistry()
        (tmp_path / "slow.gate").write_text("")
        init = asyncio.create_task(
            registry.init({}, str(tmp_path / "slow.gate"), decoders=DecoderRegistry({"gate": decoder}))
        )
        await asyncio.sleep(0)
        assert registry.state == RegistryState.PENDING
        with pytest.raises(NotReadyError):
            registry.current()

        decoder.release.set()
        config = await init
        assert registry.current() is config
        assert config.get("loaded") is True

    @pytest.mark.asyncio
    async def test_failed_init_stays_pending(self, tmp_path: Path) -> None:
        """Test a failing first load propagates and leaves the registry not ready."""
        registry = ConfigRegistry()
        with pytest.raises(SourceReadError):
            await registry.init({"a": 1}, str(tmp_path / "missing.json"))
        assert registry.state == RegistryState.PENDING
        with pytest.raises(NotReadyError):
            registry.current()

    @pytest.mark.asyncio
    async def test_reset(self) -> None:
        """Test reset forgets the installed Config."""
        registry = ConfigRegistry()
        await registry.init({"a": 1}, decoders=DecoderRegistry())
        registry.reset()
        with pytest.raises(NotInitializedError):
            registry.current()


class TestModuleRegistry:
    """Test the module-level convenience wrapper."""

    @pytest.fixture(autouse=True)
    def fresh_registry(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(registry_module, "_registry", ConfigRegistry())

    def test_current_uninitialized(self) -> None:
        """Test module current() before init."""
        with pytest.raises(NotInitializedError):
            registry_module.current()

    @pytest.mark.asyncio
    async def test_init_and_current(self) -> None:
        """Test module init/current share the process-wide registry."""
        config = await registry_module.init({"name": "app"}, decoders=DecoderRegistry())
        assert registry_module.current() is config
        assert registry_module.get_registry().current() is config
        assert registry_module.current().get("name") == "app"

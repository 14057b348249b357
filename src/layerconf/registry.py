"""Process-wide access to one Config instance.

``ConfigRegistry`` is a plain context object that can be created and
injected where needed (tests typically build their own). The module-level
``init()``/``current()`` functions wrap one shared registry for code that
prefers ambient access.

Lifecycle:
    UNINITIALIZED --init()--> PENDING --first load succeeds--> READY

A later ``init()`` replaces the installed instance.

Example:
    >>> from layerconf import registry
    >>> await registry.init({"log_level": "INFO"}, "app.yaml")
    >>> registry.current().get("log_level")
    'INFO'
"""

from __future__ import annotations

from enum import Enum

from layerconf.accessor import Config
from layerconf.decoders import DecoderRegistry
from layerconf.exceptions import NotInitializedError, NotReadyError
from layerconf.sources import Source
from layerconf.telemetry import REGISTRY_INITIALIZED, get_logger

log = get_logger(__name__)


class RegistryState(str, Enum):
    """Lifecycle of a ConfigRegistry."""

    UNINITIALIZED = "uninitialized"
    PENDING = "pending"
    READY = "ready"


class ConfigRegistry:
    """Holds at most one Config and hands it out once it is ready."""

    def __init__(self) -> None:
        self._config: Config | None = None

    @property
    def state(self) -> RegistryState:
        if self._config is None:
            return RegistryState.UNINITIALIZED
        return RegistryState.READY if self._config.is_ready else RegistryState.PENDING

    async def init(
        self,
        default: Source | None = None,
        *sources: Source,
        decoders: DecoderRegistry | None = None,
    ) -> Config:
        """Create, install and load a new Config.

        The new instance replaces any previous one as soon as it is created,
        so ``current()`` raises NotReadyError until its first load succeeds.

        Args:
            default: Lowest-priority source.
            *sources: Additional sources in ascending priority.
            decoders: Optional decoder registry.

        Returns:
            The installed, ready Config.

        Raises:
            ConfigLoadError: If the first load fails. The new instance stays
                installed but not ready.
        """
        config = Config(default, *sources, decoders=decoders)
        self._config = config
        await config.load_configs()
        log.info(REGISTRY_INITIALIZED, sources=len(config.sources))
        return config

    def current(self) -> Config:
        """Return the installed Config.

        Raises:
            NotInitializedError: If init() was never called.
            NotReadyError: If the installed Config has not finished loading.
        """
        if self._config is None:
            raise NotInitializedError("Configuration registry not initialized. Call init() first.")
        if not self._config.is_ready:
            raise NotReadyError(
                "Configuration registry is initialized but its first load has not completed."
            )
        return self._config

    def reset(self) -> None:
        """Forget the installed Config."""
        self._config = None


_registry = ConfigRegistry()


def get_registry() -> ConfigRegistry:
    """Get the process-wide registry."""
    return _registry


async def init(
    default: Source | None = None,
    *sources: Source,
    decoders: DecoderRegistry | None = None,
) -> Config:
    """Initialize the process-wide registry. See ConfigRegistry.init."""
    return await _registry.init(default, *sources, decoders=decoders)


def current() -> Config:
    """Ready Config of the process-wide registry. See ConfigRegistry.current."""
    return _registry.current()

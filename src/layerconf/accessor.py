"""Layered configuration with on-demand reload and path access.

``Config`` owns an ordered source list, loads it into one immutable merged
tree, and answers path lookups against that tree.

Lifecycle:
    Config(...)           -> not ready, get() raises NotReadyError
    await load_configs()  -> ready on success; stays not ready on failure
    await load_configs()  -> reload; on failure the previous tree is kept
                             and the instance stays ready

Usage:
    >>> config = Config({"server": {"port": 8080}}, "base.yaml", "local.toml")
    >>> await config.load_configs()
    >>> config.get("server.port")
    8080
    >>> config.get("server.endpoints[0].method", "GET")
    'GET'
"""

from __future__ import annotations

import asyncio
from typing import Any

from layerconf.decoders import DecoderRegistry, default_decoders
from layerconf.exceptions import NotReadyError
from layerconf.loader import load_sources
from layerconf.merge import EMPTY_TREE, FrozenTree
from layerconf.paths import get_path
from layerconf.sources import Source, SourceList, source_label
from layerconf.telemetry import (
    CONFIG_LOAD_COMPLETED,
    CONFIG_LOAD_JOINED,
    CONFIG_LOAD_STARTED,
    CONFIG_SOURCE_ADDED,
    CONFIG_SOURCE_REMOVED,
    get_logger,
)

log = get_logger(__name__)


class Config:
    """Merged view over an ordered list of configuration sources.

    Sources later in the list take precedence. At most one load pass runs at
    a time: concurrent ``load_configs()`` calls share the pass in flight.

    Attributes:
        decoders: Registry used to decode file sources.
        encoding: Text encoding for file sources.
        _sources: Ordered source list (ascending priority).
        _merged: Last successfully published tree.
        _ready: Set on the first successful load, never cleared.
        _load_task: The pass in flight, or None.
    """

    def __init__(
        self,
        default: Source | None = None,
        *sources: Source,
        decoders: DecoderRegistry | None = None,
        encoding: str | None = None,
    ):
        """Initialize with a default source and optional overriding sources.

        Args:
            default: Lowest-priority source. Treated like any other source;
                an empty mapping when omitted.
            *sources: Additional sources in ascending priority.
            decoders: Decoder registry. Defaults to the built-in formats.
            encoding: File encoding. Defaults to the ``file_encoding`` setting.
        """
        if encoding is None:
            from layerconf.settings import get_settings  # noqa: PLC0415

            encoding = get_settings().file_encoding
        self.decoders = decoders if decoders is not None else default_decoders()
        self.encoding = encoding
        self._sources = SourceList([{} if default is None else default, *sources])
        self._merged: FrozenTree = EMPTY_TREE
        self._ready = False
        self._load_task: asyncio.Task[None] | None = None

    def __repr__(self) -> str:
        return f"Config(sources={self._sources!r}, ready={self._ready})"

    @property
    def is_ready(self) -> bool:
        """False until the first successful load; True forever after."""
        return self._ready

    @property
    def is_loading(self) -> bool:
        return self._load_task is not None

    @property
    def sources(self) -> SourceList:
        """The live source list. Mutating it directly does not reload."""
        return self._sources

    @property
    def merged(self) -> FrozenTree:
        """The current merged tree (empty before the first load)."""
        return self._merged

    def get(self, path: str, default: Any = None) -> Any:
        """Get a configuration value by path.

        Args:
            path: Dotted and/or indexed path, e.g. ``"server.endpoints[1].method"``.
            default: Returned when the path does not resolve.

        Returns:
            The value at ``path`` (a read-only view for mappings and
            sequences) or ``default``.

        Raises:
            NotReadyError: If no load has succeeded yet.
        """
        if not self._ready:
            raise NotReadyError(
                "Configuration not loaded yet. Call load_configs() and await its completion first."
            )
        return get_path(self._merged, path, default)

    async def load_configs(self) -> None:
        """Load all sources and publish the merged result.

        While a pass is in flight every caller awaits that same pass; the
        next call after it settles starts a fresh one. Cancelling a caller
        does not cancel the pass.

        Raises:
            ConfigLoadError: If any source fails. The previous tree and
                readiness are unchanged.
        """
        task = self._load_task
        if task is None:
            task = asyncio.ensure_future(self._run_load(self._sources.snapshot()))
            self._load_task = task
        else:
            log.debug(CONFIG_LOAD_JOINED, sources=len(self._sources))
        await asyncio.shield(task)

    async def _run_load(self, sources: tuple[Source, ...]) -> None:
        try:
            log.debug(CONFIG_LOAD_STARTED, sources=len(sources))
            merged = await load_sources(sources, self.decoders, self.encoding)
            self._merged = merged
            self._ready = True
            log.debug(CONFIG_LOAD_COMPLETED, sources=len(sources), keys=list(merged))
        finally:
            self._load_task = None

    async def _reload_after_change(self) -> None:
        # A pass already in flight captured the old list; let it settle first
        pending = self._load_task
        if pending is not None:
            await asyncio.wait({pending})
        if self._ready:
            await self.load_configs()

    async def add_source(self, *sources: Source) -> None:
        """Append sources at the highest priority.

        If the configuration is ready, reloads and returns once the reload
        settles; otherwise only the list changes.

        Raises:
            ConfigLoadError: If the automatic reload fails.
        """
        self._sources.append(*sources)
        log.debug(CONFIG_SOURCE_ADDED, sources=[source_label(s) for s in sources])
        await self._reload_after_change()

    async def remove_source(self, source: Source) -> None:
        """Remove a source.

        File sources match by exact string, inline sources by identity.
        Removing a source that is not in the list changes nothing, but a
        ready configuration is still reloaded.

        Raises:
            ConfigLoadError: If the automatic reload fails.
        """
        removed = self._sources.remove(source)
        log.debug(CONFIG_SOURCE_REMOVED, source=source_label(source), removed=removed)
        await self._reload_after_change()

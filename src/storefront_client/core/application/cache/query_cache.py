"""Session-wide query cache with explicit invalidation.

Entries are fetched on first read and kept until invalidated; there is no TTL.
Every invalidation bumps the entry generation, and a fetch only stores its
result if the generation it started under is still current, so a slow fetch
issued before a mutation can never overwrite the value fetched after it.
"""

import asyncio
from collections import defaultdict
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

import structlog

logger = structlog.get_logger()

Fetcher = Callable[[], Awaitable[Any]]


class CacheEvent(StrEnum):
    UPDATED = "updated"
    INVALIDATED = "invalidated"
    CLEARED = "cleared"


Listener = Callable[[str, CacheEvent], None]


@dataclass
class _Entry:
    fetcher: Fetcher
    value: Any = None
    has_value: bool = False
    stale: bool = True
    generation: int = 0
    inflight: asyncio.Task | None = None
    inflight_generation: int = -1


class QueryCache:
    """Shared by every service of one user session; pass the instance explicitly."""

    def __init__(self) -> None:
        self._entries: dict[str, _Entry] = {}
        self._listeners: dict[str, list[Listener]] = defaultdict(list)

    # ── Reads ──

    async def get(self, key: str, fetcher: Fetcher) -> Any:
        """Return the cached value, fetching it if absent or stale.

        Concurrent readers of the same stale key share one fetch. A reader that
        is cancelled stops waiting but does not cancel the shared fetch.
        """
        entry = self._entries.get(key)
        if entry is None:
            entry = _Entry(fetcher=fetcher)
            self._entries[key] = entry
        else:
            entry.fetcher = fetcher
        if entry.has_value and not entry.stale:
            return entry.value
        return await asyncio.shield(self._shared_fetch(key, entry))

    def peek(self, key: str, default: Any = None) -> Any:
        """Last fetched value, stale or not, without triggering a fetch."""
        entry = self._entries.get(key)
        if entry is None or not entry.has_value:
            return default
        return entry.value

    def is_stale(self, key: str) -> bool:
        entry = self._entries.get(key)
        return entry is None or entry.stale

    # ── Invalidation ──

    async def invalidate(self, *keys: str) -> None:
        """Mark ``keys`` stale, then refetch the ones that were read before.

        All keys are marked before the first await, so observers never see one
        invalidated without the others. Returns once every refetch has settled.
        A failed refetch leaves its entry stale for the next reader to retry.
        """
        marked = self._mark_stale(keys)
        for key, _ in marked:
            self._notify(key, CacheEvent.INVALIDATED)
        if not marked:
            return
        results = await asyncio.gather(
            *(asyncio.shield(self._shared_fetch(key, entry)) for key, entry in marked),
            return_exceptions=True,
        )
        for (key, _), result in zip(marked, results, strict=True):
            if isinstance(result, BaseException):
                logger.warning(
                    "Refetch after invalidation failed",
                    cache_key=key,
                    error_type=type(result).__name__,
                    error_details=str(result),
                    error_retryable=True,
                )

    def reset(self) -> None:
        """Drop every entry, e.g. when the signed-in identity changes."""
        keys = list(self._entries)
        self._entries.clear()
        for key in keys:
            self._notify(key, CacheEvent.CLEARED)

    # ── Subscriptions ──

    def subscribe(self, key: str, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` for changes to ``key``. Returns an unsubscribe callable."""
        self._listeners[key].append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners[key]:
                self._listeners[key].remove(listener)

        return _unsubscribe

    # ── Internals ──

    def _mark_stale(self, keys: Iterable[str]) -> list[tuple[str, _Entry]]:
        marked = []
        for key in keys:
            entry = self._entries.get(key)
            if entry is None:
                continue
            entry.stale = True
            entry.generation += 1
            marked.append((key, entry))
        return marked

    def _shared_fetch(self, key: str, entry: _Entry) -> asyncio.Task:
        if entry.inflight is not None and entry.inflight_generation == entry.generation:
            return entry.inflight
        task = asyncio.ensure_future(self._fetch(key, entry, entry.generation))
        task.add_done_callback(_retrieve_exception)
        entry.inflight = task
        entry.inflight_generation = entry.generation
        return task

    async def _fetch(self, key: str, entry: _Entry, generation: int) -> Any:
        try:
            value = await entry.fetcher()
        finally:
            if entry.inflight is asyncio.current_task():
                entry.inflight = None
        if entry.generation != generation:
            logger.debug("Discarding superseded fetch", cache_key=key, generation=generation)
            return value
        entry.value = value
        entry.has_value = True
        entry.stale = False
        self._notify(key, CacheEvent.UPDATED)
        return value

    def _notify(self, key: str, event: CacheEvent) -> None:
        for listener in list(self._listeners.get(key, ())):
            listener(key, event)


def _retrieve_exception(task: asyncio.Task) -> None:
    # Readers may have stopped waiting; mark the failure as observed.
    if not task.cancelled():
        task.exception()

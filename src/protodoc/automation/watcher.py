"""Debounced specification watcher with asyncio queue bridge."""

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path
import threading
from typing import Awaitable, Callable

from watchdog.events import PatternMatchingEventHandler
from watchdog.observers import Observer


LOGGER = logging.getLogger(__name__)


class DebouncedSpecHandler(PatternMatchingEventHandler):
    def __init__(
        self,
        *,
        loop: asyncio.AbstractEventLoop,
        queue: asyncio.Queue[Path],
        patterns: list[str] | None = None,
        debounce_seconds: float = 1.0,
    ) -> None:
        super().__init__(
            patterns=patterns or ["*.spec"],
            ignore_patterns=["*.tmp", "*.swp", ".*", "*~"],
            ignore_directories=True,
            case_sensitive=False,
        )
        self._loop = loop
        self._queue = queue
        self._debounce_seconds = debounce_seconds
        self._timers: dict[str, threading.Timer] = {}
        self._lock = threading.Lock()

    def _emit_path(self, raw_path: str) -> None:
        with self._lock:
            self._timers.pop(raw_path, None)
        self._loop.call_soon_threadsafe(self._queue.put_nowait, Path(raw_path))

    def _schedule(self, raw_path: str) -> None:
        with self._lock:
            existing = self._timers.pop(raw_path, None)
            if existing is not None:
                existing.cancel()

            timer = threading.Timer(self._debounce_seconds, self._emit_path, args=(raw_path,))
            timer.daemon = True
            self._timers[raw_path] = timer
            timer.start()

    def on_created(self, event) -> None:  # type: ignore[override]
        self._schedule(os.fsdecode(event.src_path))

    def on_modified(self, event) -> None:  # type: ignore[override]
        self._schedule(os.fsdecode(event.src_path))

    def on_moved(self, event) -> None:  # type: ignore[override]
        # editors that save through a temporary file end with a move onto the target
        self._schedule(os.fsdecode(event.dest_path))

    def close(self) -> None:
        with self._lock:
            timers = list(self._timers.values())
            self._timers.clear()
        for timer in timers:
            timer.cancel()


class SpecFolderWatcher:
    def __init__(
        self,
        watch_dir: str | Path,
        callback: Callable[[Path], Awaitable[None]],
        *,
        patterns: list[str] | None = None,
        debounce_seconds: float = 1.0,
    ) -> None:
        self._watch_dir = Path(watch_dir)
        self._callback = callback
        self._patterns = patterns
        self._debounce_seconds = debounce_seconds
        self._queue: asyncio.Queue[Path] | None = None
        self._handler: DebouncedSpecHandler | None = None
        self._observer: Observer | None = None
        self._consumer_task: asyncio.Task[None] | None = None

    async def _consume(self) -> None:
        assert self._queue is not None
        while True:
            path = await self._queue.get()
            try:
                await self._callback(path)
            except Exception:  # pragma: no cover
                LOGGER.exception("Watcher callback failed for %s", path)
            finally:
                self._queue.task_done()

    async def start(self) -> None:
        if self._observer is not None:
            return
        if not self._watch_dir.exists() or not self._watch_dir.is_dir():
            raise ValueError(f"Watch directory does not exist or is not a directory: {self._watch_dir}")

        loop = asyncio.get_running_loop()
        self._queue = asyncio.Queue()
        self._handler = DebouncedSpecHandler(
            loop=loop,
            queue=self._queue,
            patterns=self._patterns,
            debounce_seconds=self._debounce_seconds,
        )

        observer = Observer()
        observer.schedule(self._handler, str(self._watch_dir), recursive=False)
        observer.start()
        self._observer = observer
        self._consumer_task = asyncio.create_task(self._consume())

    def stop(self) -> None:
        observer = self._observer
        if observer is not None:
            observer.stop()
            observer.join(timeout=5.0)
            self._observer = None

        if self._handler is not None:
            self._handler.close()
            self._handler = None

        if self._consumer_task is not None:
            self._consumer_task.cancel()
            self._consumer_task = None

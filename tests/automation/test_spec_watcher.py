from __future__ import annotations

import asyncio
from pathlib import Path

from watchdog.events import FileCreatedEvent, FileModifiedEvent, FileMovedEvent

from protodoc.automation.watcher import DebouncedSpecHandler, SpecFolderWatcher


def test_debounced_handler_emits_only_once_for_burst_of_saves() -> None:
    async def _scenario() -> None:
        queue: asyncio.Queue[Path] = asyncio.Queue()
        handler = DebouncedSpecHandler(
            loop=asyncio.get_running_loop(),
            queue=queue,
            debounce_seconds=0.2,
        )

        event = FileModifiedEvent("doc/native_protocol_v5.spec")
        for _ in range(5):
            handler.on_modified(event)
            await asyncio.sleep(0.05)

        emitted = await asyncio.wait_for(queue.get(), timeout=1.0)
        await asyncio.sleep(0.3)

        assert emitted.name == "native_protocol_v5.spec"
        assert queue.empty()
        handler.close()

    asyncio.run(_scenario())


def test_debounced_handler_pattern_filtering() -> None:
    async def _scenario() -> None:
        queue: asyncio.Queue[Path] = asyncio.Queue()
        handler = DebouncedSpecHandler(
            loop=asyncio.get_running_loop(),
            queue=queue,
            debounce_seconds=0.05,
        )

        handler.dispatch(FileCreatedEvent("doc/native_protocol_v5.spec"))
        handler.dispatch(FileModifiedEvent("doc/notes.txt"))
        handler.dispatch(FileModifiedEvent("doc/.native_protocol_v5.spec"))

        emitted = await asyncio.wait_for(queue.get(), timeout=1.0)
        await asyncio.sleep(0.1)

        assert emitted.name == "native_protocol_v5.spec"
        assert queue.empty()
        handler.close()

    asyncio.run(_scenario())


def test_debounced_handler_follows_atomic_save_moves() -> None:
    async def _scenario() -> None:
        queue: asyncio.Queue[Path] = asyncio.Queue()
        handler = DebouncedSpecHandler(
            loop=asyncio.get_running_loop(),
            queue=queue,
            patterns=["protocol.spec"],
            debounce_seconds=0.05,
        )

        handler.on_moved(FileMovedEvent("doc/protocol.spec.tmp", "doc/protocol.spec"))

        emitted = await asyncio.wait_for(queue.get(), timeout=1.0)
        assert emitted == Path("doc/protocol.spec")
        handler.close()

    asyncio.run(_scenario())


def test_spec_folder_watcher_start_stop_lifecycle(tmp_path: Path) -> None:
    async def _scenario() -> None:
        received: list[Path] = []

        async def _callback(path: Path) -> None:
            received.append(path)

        watcher = SpecFolderWatcher(tmp_path, _callback, debounce_seconds=0.05)
        await watcher.start()

        assert watcher._observer is not None
        assert watcher._observer.is_alive()

        watcher.stop()

        assert watcher._observer is None
        assert watcher._consumer_task is None
        assert received == []

    asyncio.run(_scenario())


def test_spec_folder_watcher_rejects_missing_directory(tmp_path: Path) -> None:
    async def _callback(path: Path) -> None:
        return None

    watcher = SpecFolderWatcher(tmp_path / "missing", _callback)

    async def _scenario() -> str | None:
        try:
            await watcher.start()
        except ValueError as exc:
            return str(exc)
        return None

    message = asyncio.run(_scenario())
    assert message is not None and "does not exist" in message

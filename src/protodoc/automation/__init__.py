"""Automation services for re-rendering specifications on change."""

from protodoc.automation.render_service import RenderResult, render_spec_file
from protodoc.automation.watcher import DebouncedSpecHandler, SpecFolderWatcher

__all__ = [
    "DebouncedSpecHandler",
    "RenderResult",
    "SpecFolderWatcher",
    "render_spec_file",
]

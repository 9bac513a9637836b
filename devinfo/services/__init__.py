"""
Host service abstractions used by the overlay.

Each service hides a side-effectful host facility (object enumeration,
clipboard, update loop) behind a small interface so the coordinators stay
pure-Python and test-friendly.
"""

from .clipboard_service import ClipboardService, MemoryClipboard, QtClipboardService
from .host_registry import (
    GcObjectRegistry,
    HostRegistry,
    QtWidgetRegistry,
    StaticRegistry,
    type_name_predicate,
)
from .host_scheduler import HostScheduler, QtFrameScheduler

__all__ = [
    "ClipboardService",
    "GcObjectRegistry",
    "HostRegistry",
    "HostScheduler",
    "MemoryClipboard",
    "QtClipboardService",
    "QtFrameScheduler",
    "StaticRegistry",
    "type_name_predicate",
]

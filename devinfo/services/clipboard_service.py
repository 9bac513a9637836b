"""System clipboard access (write only)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Protocol, runtime_checkable


@runtime_checkable
class ClipboardService(Protocol):
    def set_text(self, text: str) -> None:
        """Overwrite the clipboard content."""


class QtClipboardService:
    """Write to the system clipboard through the running QGuiApplication."""

    def set_text(self, text: str) -> None:
        from PySide6.QtGui import QGuiApplication

        clipboard = QGuiApplication.clipboard()
        if clipboard is None:
            raise RuntimeError("No clipboard available (QGuiApplication not running)")
        clipboard.setText(text)


@dataclass(slots=True)
class MemoryClipboard:
    """In-process clipboard for headless embedding."""

    history: List[str] = field(default_factory=list)

    def set_text(self, text: str) -> None:
        self.history.append(text)

    @property
    def text(self) -> Optional[str]:
        return self.history[-1] if self.history else None

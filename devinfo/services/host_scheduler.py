"""Frame tick source standing in for the host's update loop."""

from __future__ import annotations

import time
from typing import Callable, List, Optional, Protocol, runtime_checkable

from loguru import logger

TickCallback = Callable[[], None]


@runtime_checkable
class HostScheduler(Protocol):
    def subscribe(self, callback: TickCallback) -> None:
        """Invoke ``callback`` on every host update."""

    def unsubscribe(self, callback: TickCallback) -> None:
        """Stop invoking ``callback``."""

    def now(self) -> float:
        """Monotonic clock reading, in seconds."""


class QtFrameScheduler:
    """Drive subscribed callbacks from a repeating QTimer on the GUI thread."""

    def __init__(self, interval_ms: int = 16, parent: Optional[object] = None,
                 clock: Callable[[], float] = time.monotonic) -> None:
        from PySide6.QtCore import QTimer

        self._clock = clock
        self._callbacks: List[TickCallback] = []
        self._timer = QTimer(parent)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._dispatch)

    def now(self) -> float:
        return self._clock()

    @property
    def is_running(self) -> bool:
        return self._timer.isActive()

    def subscribe(self, callback: TickCallback) -> None:
        if callback not in self._callbacks:
            self._callbacks.append(callback)
        if not self._timer.isActive():
            self._timer.start()

    def unsubscribe(self, callback: TickCallback) -> None:
        if callback in self._callbacks:
            self._callbacks.remove(callback)
        if not self._callbacks:
            self._timer.stop()

    def _dispatch(self) -> None:
        for callback in list(self._callbacks):
            try:
                callback()
            except Exception as exc:
                logger.error(f"Erreur callback de rafraîchissement: {exc}")

    def cleanup(self) -> None:
        self._callbacks.clear()
        self._timer.stop()
        self._timer.deleteLater()

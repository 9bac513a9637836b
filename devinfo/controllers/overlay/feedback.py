"""Timed copy feedback: per-value flash and global toast."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Optional

from devinfo.logging.safe_logger import get_safe_logger

from .base import Clock
from .view_models import Snapshot

logger = get_safe_logger(__name__)

__all__ = ["ALL_COPIED_MESSAGE", "CopyInteraction", "FeedbackState"]

ALL_COPIED_MESSAGE = "All Copied!"
VALUE_COPY_LABEL = "Value"


def _fade(expiry: float, duration: float, now: float) -> float:
    if now >= expiry or duration <= 0:
        return 0.0
    return min(1.0, (expiry - now) / duration)


@dataclass(slots=True)
class FeedbackState:
    """
    Presentation-only state read by the renderer on every repaint.

    Expiries are absolute monotonic timestamps, so the fade stays correct
    however irregularly repaints arrive.
    """

    flash_value: Optional[str] = None
    flash_expiry: float = 0.0
    flash_duration: float = 1.0
    toast_message: Optional[str] = None
    toast_expiry: float = 0.0
    toast_duration: float = 1.5

    def arm_flash(self, value: str, now: float, duration: float) -> None:
        self.flash_value = value
        self.flash_duration = duration
        self.flash_expiry = now + duration

    def arm_toast(self, message: str, now: float, duration: float) -> None:
        self.toast_message = message
        self.toast_duration = duration
        self.toast_expiry = now + duration

    def flash_alpha(self, value: str, now: float) -> float:
        """Highlight strength for ``value`` at ``now``; 0 when it is not the flashed value."""
        if self.flash_value is None or value != self.flash_value:
            return 0.0
        return _fade(self.flash_expiry, self.flash_duration, now)

    def toast_alpha(self, now: float) -> float:
        if self.toast_message is None:
            return 0.0
        return _fade(self.toast_expiry, self.toast_duration, now)

    def flash_active(self, now: float) -> bool:
        return self.flash_value is not None and now < self.flash_expiry

    def toast_active(self, now: float) -> bool:
        return self.toast_message is not None and now < self.toast_expiry

    def is_active(self, now: float) -> bool:
        return self.flash_active(now) or self.toast_active(now)


class CopyInteraction:
    """Copy actions of the panel: clipboard write plus feedback arming."""

    def __init__(
        self,
        clipboard: Any,
        clock: Clock = time.monotonic,
        feedback: Optional[FeedbackState] = None,
        *,
        flash_duration: float = 1.0,
        toast_duration: float = 1.5,
    ) -> None:
        self._clipboard = clipboard
        self.clock = clock
        self.feedback = feedback or FeedbackState()
        self._flash_duration = flash_duration
        self._toast_duration = toast_duration

    def copy_label(self, snapshot: Snapshot, label: str) -> Optional[str]:
        """Copy the first value shown under ``label``."""

        value = snapshot.first_value(label)
        if value is None or not self._write(value):
            return None
        self._confirm(value, label)
        return value

    def copy_token(self, token: str) -> bool:
        """Copy a single value token (a whole value or one of its parts)."""

        if not self._write(token):
            return False
        self._confirm(token, VALUE_COPY_LABEL)
        return True

    def copy_all(self, snapshot: Snapshot) -> bool:
        """Copy the whole panel text verbatim."""

        if not self._write(snapshot.text):
            return False
        self.feedback.arm_toast(ALL_COPIED_MESSAGE, self.clock(), self._toast_duration)
        return True

    def _confirm(self, value: str, kind: str) -> None:
        now = self.clock()
        self.feedback.arm_flash(value, now, self._flash_duration)
        self.feedback.arm_toast(f"{kind} copied: {value}", now, self._toast_duration)

    def _write(self, text: str) -> bool:
        try:
            self._clipboard.set_text(text)
        except Exception as exc:
            logger.warning("Clipboard write failed: %s", exc)
            return False
        logger.debug("Copied to clipboard: %s", text)
        return True

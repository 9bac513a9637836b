"""Fingerprint-based gating of snapshot rebuilds."""

from __future__ import annotations

from typing import Any, Optional

from devinfo.logging.safe_logger import get_safe_logger
from devinfo.utils.path_resolver import ABSENT, MemberPath, resolve

from .view_models import DEVICE_SIMULATOR_FINGERPRINT

logger = get_safe_logger(__name__)

_UNSET = object()


class PollGate:
    """Lets an action through at most once per ``interval`` of the monotonic clock."""

    __slots__ = ("interval", "_last")

    def __init__(self, interval: float) -> None:
        self.interval = interval
        self._last: Optional[float] = None

    def due(self, now: float) -> bool:
        return self._last is None or now - self._last >= self.interval

    def mark(self, now: float) -> None:
        self._last = now

    def reset(self) -> None:
        self._last = None


class ChangeDetector:
    """
    Decide whether the host target changed since the last rebuild.

    The fingerprint is the string form of a single volatile member of the
    target. Changes confined to members it does not cover go unnoticed until
    the fingerprint itself moves.
    """

    def __init__(
        self,
        fingerprint_path: MemberPath = DEVICE_SIMULATOR_FINGERPRINT,
        interval: float = 0.5,
    ) -> None:
        self._path = tuple(fingerprint_path)
        self._gate = PollGate(interval)
        self._previous: Any = _UNSET
        self.check_count = 0

    @property
    def interval(self) -> float:
        return self._gate.interval

    def fingerprint(self, target: Any) -> Optional[str]:
        value = resolve(target, self._path)
        if value is ABSENT:
            return None
        return str(value)

    def due(self, now: float) -> bool:
        return self._gate.due(now)

    def poll(self, now: float, target: Any) -> bool:
        """Return True when a rebuild is needed; a no-op between intervals."""

        if not self._gate.due(now):
            return False
        self._gate.mark(now)
        self.check_count += 1

        try:
            current = self.fingerprint(target)
        except Exception as exc:
            # Let the builder surface the fault on its own terms.
            logger.debug("Fingerprint unavailable: %s", exc)
            self._previous = _UNSET
            return True

        if current == self._previous:
            return False
        logger.debug("Fingerprint changed: %s -> %s", self._previous, current)
        self._previous = current
        return True

    def prime(self, target: Any, now: float) -> None:
        """Record the fingerprint matching a snapshot that was just built unconditionally."""

        self._gate.mark(now)
        try:
            self._previous = self.fingerprint(target)
        except Exception as exc:
            logger.debug("Fingerprint unavailable while priming: %s", exc)
            self._previous = _UNSET

    def reset(self) -> None:
        self._previous = _UNSET
        self._gate.reset()

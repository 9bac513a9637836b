"""Discovery & retry coordinator: the overlay's state machine."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Any, Callable, List, Optional, Tuple

from devinfo.logging.safe_logger import get_safe_logger

from .base import Coordinator, SimpleCoordinator
from .change_detector import ChangeDetector, PollGate
from .errors import TargetNotFound
from .snapshot_builder import SnapshotBuilder
from .view_models import EMPTY_SNAPSHOT, TARGET_NOT_FOUND_MESSAGE, Snapshot, StatusKind

logger = get_safe_logger(__name__)

__all__ = ["OverlayCoordinator", "OverlayState", "RetryState", "TransitionListener"]


class OverlayState(enum.Enum):
    SEARCHING = "searching"
    INITIALIZING = "initializing"
    READY = "ready"
    NOT_FOUND = "not_found"


@dataclass(slots=True)
class RetryState:
    attempts: int = 0
    initialized: bool = False


TransitionListener = Callable[[OverlayState, OverlayState], None]


class OverlayCoordinator(SimpleCoordinator, Coordinator):
    """
    Locate the host target, retry while it is not ready, then hand over to the change detector.

    ``SEARCHING`` is the inactive state before :meth:`activate` and after
    :meth:`deactivate`. While ``INITIALIZING`` or ``NOT_FOUND`` every poll
    rebuilds unconditionally; ``attempts`` stops counting at
    ``max_attempts`` but polling never stops. In ``READY`` rebuilds are
    gated by the fingerprint, and losing the target starts over from
    ``INITIALIZING`` with zero attempts.
    """

    def __init__(
        self,
        registry: Any,
        builder: Optional[SnapshotBuilder] = None,
        detector: Optional[ChangeDetector] = None,
        *,
        max_attempts: int = 10,
        poll_interval: float = 0.5,
    ) -> None:
        super().__init__()
        self._registry = registry
        self._builder = builder or SnapshotBuilder()
        self._detector = detector or ChangeDetector(interval=poll_interval)
        self._max_attempts = max_attempts
        self._gate = PollGate(poll_interval)
        self._state = OverlayState.SEARCHING
        self._retry = RetryState()
        self._snapshot: Snapshot = EMPTY_SNAPSHOT
        self._listeners: List[TransitionListener] = []

    # --- Read-only view ------------------------------------------------------
    @property
    def state(self) -> OverlayState:
        return self._state

    @property
    def retry(self) -> RetryState:
        return replace(self._retry)

    @property
    def attempts(self) -> int:
        return self._retry.attempts

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    @property
    def snapshot(self) -> Snapshot:
        return self._snapshot

    @property
    def builder(self) -> SnapshotBuilder:
        return self._builder

    def add_listener(self, listener: TransitionListener) -> None:
        self._listeners.append(listener)

    # --- Lifecycle -----------------------------------------------------------
    def activate(self) -> None:
        """(Re)start discovery; the next tick refreshes immediately."""

        self._retry = RetryState()
        self._gate.reset()
        self._detector.reset()
        self._set_state(OverlayState.INITIALIZING)

    def deactivate(self) -> None:
        self._detector.reset()
        self._gate.reset()
        self._set_state(OverlayState.SEARCHING)

    def teardown(self) -> None:
        self.deactivate()
        self._listeners.clear()
        super().teardown()

    # --- Polling -------------------------------------------------------------
    def tick(self, now: float) -> bool:
        """Advance the state machine; return True when the snapshot may have changed."""

        if self._state is OverlayState.SEARCHING:
            return False
        if self._state is OverlayState.READY:
            return self._ready_tick(now)
        if not self._gate.due(now):
            return False
        self._gate.mark(now)
        return self._retry_tick(now)

    def _retry_tick(self, now: float) -> bool:
        target, snapshot = self._refresh()
        self._snapshot = snapshot

        if snapshot.is_ready:
            self._retry = RetryState(attempts=0, initialized=True)
            self._detector.prime(target, now)
            self._set_state(OverlayState.READY)
            return True

        if self._retry.attempts < self._max_attempts:
            self._retry.attempts += 1
            logger.debug("Host not ready (attempt %d/%d): %s",
                         self._retry.attempts, self._max_attempts, snapshot.status)
        if self._retry.attempts >= self._max_attempts:
            self._set_state(OverlayState.NOT_FOUND)
        return True

    def _ready_tick(self, now: float) -> bool:
        if not self._detector.due(now):
            return False

        try:
            target = self._locate()
        except TargetNotFound as exc:
            self._lose_target(now, self._not_found_snapshot(exc))
            return True

        if not self._detector.poll(now, target):
            return False

        snapshot = self._builder.build(target)
        self._snapshot = snapshot
        if not snapshot.is_ready:
            self._lose_target(now, snapshot)
        return True

    def _lose_target(self, now: float, snapshot: Snapshot) -> None:
        self._snapshot = snapshot
        self._retry = RetryState()
        self._detector.reset()
        self._gate.mark(now)
        self._set_state(OverlayState.INITIALIZING)

    def _discover(self) -> Any:
        try:
            return self._registry.find_target()
        except Exception as exc:
            logger.warning("Host discovery failed: %s", exc)
            return None

    def _locate(self) -> Any:
        target = self._discover()
        if target is None:
            raise TargetNotFound(TARGET_NOT_FOUND_MESSAGE)
        return target

    def _refresh(self) -> Tuple[Any, Snapshot]:
        try:
            target = self._locate()
        except TargetNotFound as exc:
            return None, self._not_found_snapshot(exc)
        return target, self._builder.build(target)

    @staticmethod
    def _not_found_snapshot(exc: TargetNotFound) -> Snapshot:
        return Snapshot.status_only(StatusKind.TARGET_NOT_FOUND, str(exc))

    def _set_state(self, state: OverlayState) -> None:
        previous = self._state
        if previous is state:
            return
        self._state = state
        if state is OverlayState.NOT_FOUND:
            logger.warning("Host target still unavailable after %d attempts; polling continues",
                           self._max_attempts)
        else:
            logger.info("Overlay state %s -> %s", previous.value, state.value)
        for listener in list(self._listeners):
            try:
                listener(previous, state)
            except Exception as exc:  # pragma: no cover
                logger.debug("Transition listener failed: %s", exc)

"""Glue between the host update loop, the coordinator and the renderer."""

from __future__ import annotations

import time
from typing import Any, Callable, Optional

from devinfo.logging.safe_logger import get_safe_logger

from .base import Clock, Coordinator, CoordinatorContext, SimpleCoordinator
from .coordinator import OverlayCoordinator, OverlayState
from .feedback import CopyInteraction, FeedbackState
from .view_models import Snapshot

logger = get_safe_logger(__name__)

RedrawCallback = Callable[[], None]


class OverlayController(SimpleCoordinator, Coordinator):
    """
    Subscribe to the host tick, poll the coordinator and request redraws.

    The renderer only reads :attr:`snapshot` and :attr:`feedback`; it never
    triggers discovery or resolution itself.
    """

    def __init__(
        self,
        coordinator: OverlayCoordinator,
        interaction: CopyInteraction,
        *,
        redraw: Optional[RedrawCallback] = None,
        clock: Clock = time.monotonic,
    ) -> None:
        super().__init__()
        self._coordinator = coordinator
        self._interaction = interaction
        self._redraw = redraw
        self._use_clock(clock)
        self._scheduler: Any = None
        self._feedback_live = False
        self.detach_count = 0

    # --- Read-only view ------------------------------------------------------
    @property
    def snapshot(self) -> Snapshot:
        return self._coordinator.snapshot

    @property
    def feedback(self) -> FeedbackState:
        return self._interaction.feedback

    @property
    def state(self) -> OverlayState:
        return self._coordinator.state

    @property
    def coordinator(self) -> OverlayCoordinator:
        return self._coordinator

    @property
    def is_attached(self) -> bool:
        return self._scheduler is not None

    def now(self) -> float:
        return self._clock()

    def set_redraw_callback(self, redraw: Optional[RedrawCallback]) -> None:
        self._redraw = redraw

    # --- Lifecycle -----------------------------------------------------------
    def bind(self, context: CoordinatorContext) -> None:
        super().bind(context)
        self._coordinator.bind(context)
        self._use_clock(context.clock)

    def _use_clock(self, clock: Clock) -> None:
        # Feedback expiries and render times must come from the same clock.
        self._clock = clock
        self._interaction.clock = clock

    def attach(self, scheduler: Any) -> None:
        """Start mirroring: reset the retry state and subscribe to the host tick."""

        if self._scheduler is not None:
            return
        self._scheduler = scheduler
        self._use_clock(getattr(scheduler, "now", self._clock))
        self._coordinator.activate()
        scheduler.subscribe(self._on_frame)
        logger.info("Overlay attached to host update loop")

    def detach(self) -> bool:
        """Unsubscribe from the host tick; only the first call after an attach does anything."""

        scheduler = self._scheduler
        if scheduler is None:
            return False
        self._scheduler = None
        try:
            scheduler.unsubscribe(self._on_frame)
        except Exception as exc:
            logger.warning("Unsubscribe from host update loop failed: %s", exc)
        self._coordinator.deactivate()
        self.detach_count += 1
        logger.info("Overlay detached from host update loop")
        return True

    def teardown(self) -> None:
        self.detach()
        self._redraw = None
        self._coordinator.teardown()
        super().teardown()

    # --- Host tick -----------------------------------------------------------
    def _on_frame(self) -> None:
        if self._scheduler is None:
            return
        now = self._clock()
        changed = self._coordinator.tick(now)
        live = self.feedback.is_active(now)
        # One extra redraw after expiry clears the last faded frame.
        if changed or live or self._feedback_live:
            self._request_redraw()
        self._feedback_live = live

    def _request_redraw(self) -> None:
        if self._redraw is None:
            return
        try:
            self._redraw()
        except Exception as exc:
            logger.warning("Redraw request failed: %s", exc)

    # --- Copy actions --------------------------------------------------------
    def copy_label(self, label: str) -> Optional[str]:
        value = self._interaction.copy_label(self.snapshot, label)
        self._after_copy()
        return value

    def copy_token(self, token: str) -> bool:
        copied = self._interaction.copy_token(token)
        self._after_copy()
        return copied

    def copy_all(self) -> bool:
        copied = self._interaction.copy_all(self.snapshot)
        self._after_copy()
        return copied

    def _after_copy(self) -> None:
        self._feedback_live = self.feedback.is_active(self._clock())
        self._request_redraw()

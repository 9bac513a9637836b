"""Lifecycle shutdown helpers for the overlay."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Optional

from devinfo.controllers.overlay.base import Coordinator

logger = logging.getLogger(__name__)

__all__ = ["shutdown_overlay"]


def _call_safely(obj: object, method_name: str, *args: Any) -> None:
    """Invoke an optional method on an object, logging errors."""

    method = getattr(obj, method_name, None)
    if not callable(method):
        return
    try:
        method(*args)
    except Exception as exc:  # pragma: no cover
        logger.debug("Error while calling %s on %s: %s", method_name, obj, exc)


def shutdown_overlay(
    coordinators: Iterable[Coordinator],
    *,
    scheduler: Optional[object] = None,
) -> None:
    """Teardown coordinators created during bootstrap, then stop the frame scheduler."""

    for coordinator in coordinators:
        try:
            coordinator.teardown()
        except Exception as exc:  # pragma: no cover
            logger.debug("Coordinator teardown failed for %s: %s", coordinator, exc)

    if scheduler is not None:
        _call_safely(scheduler, "cleanup")
    logger.info("Overlay shut down")

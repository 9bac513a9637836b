"""Overlay bootstrap helpers: wire services and coordinators together."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Optional

from devinfo.config import DEFAULT_OVERLAY_CONFIG, OverlayConfig
from devinfo.controllers.overlay import (
    ChangeDetector,
    CopyInteraction,
    CoordinatorContext,
    OverlayController,
    OverlayCoordinator,
    SnapshotBuilder,
)
from devinfo.controllers.overlay.base import Clock


@dataclass(slots=True)
class BootstrapArtifacts:
    """Container for the coordinators/services created at startup."""

    context: CoordinatorContext
    builder: SnapshotBuilder
    detector: ChangeDetector
    coordinator: OverlayCoordinator
    interaction: CopyInteraction
    controller: OverlayController


def _default_registry(config: OverlayConfig) -> Any:
    from devinfo.services.host_registry import QtWidgetRegistry, type_name_predicate

    return QtWidgetRegistry(type_name_predicate(config.target_type_name))


def _default_clipboard() -> Any:
    from devinfo.services.clipboard_service import QtClipboardService

    return QtClipboardService()


def create_overlay_environment(
    config: Optional[OverlayConfig] = None,
    *,
    registry: Any = None,
    clipboard: Any = None,
    clock: Clock = time.monotonic,
) -> BootstrapArtifacts:
    """
    Create the overlay pipeline and bind the shared context.

    Without an explicit registry/clipboard the Qt implementations are used,
    which require a running QApplication by the time the first tick fires.
    """

    config = config or DEFAULT_OVERLAY_CONFIG
    registry = registry if registry is not None else _default_registry(config)
    clipboard = clipboard if clipboard is not None else _default_clipboard()

    context = CoordinatorContext(clock=clock)

    builder = SnapshotBuilder(unavailable=config.unavailable_text)
    detector = ChangeDetector(interval=config.poll_interval)
    coordinator = OverlayCoordinator(
        registry,
        builder,
        detector,
        max_attempts=config.max_init_attempts,
        poll_interval=config.poll_interval,
    )
    interaction = CopyInteraction(
        clipboard,
        clock,
        flash_duration=config.flash_duration,
        toast_duration=config.toast_duration,
    )
    controller = OverlayController(coordinator, interaction, clock=clock)
    controller.bind(context)

    return BootstrapArtifacts(
        context=context,
        builder=builder,
        detector=detector,
        coordinator=coordinator,
        interaction=interaction,
        controller=controller,
    )

"""Lifecycle helpers for the overlay."""

from __future__ import annotations

from .bootstrap import BootstrapArtifacts, create_overlay_environment
from .shutdown import shutdown_overlay

__all__ = [
    "BootstrapArtifacts",
    "create_overlay_environment",
    "shutdown_overlay",
]

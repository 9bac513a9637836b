"""Failure taxonomy of the overlay pipeline.

These exceptions travel only between the resolver-facing code and the
Snapshot Builder / coordinator boundary, where each one is turned into a
status snapshot. None of them is ever raised to the host.
"""

from __future__ import annotations


class OverlayError(Exception):
    """Base class for overlay pipeline failures."""


class TargetNotFound(OverlayError):
    """No live host object matched the discovery predicate this tick."""


class StageMissing(OverlayError):
    """The target exists but one of its expected nested handles is absent."""

    def __init__(self, stage: str, message: str) -> None:
        super().__init__(message)
        self.stage = stage
        self.message = message


class ResolutionFault(OverlayError):
    """Unexpected exception while building a snapshot."""

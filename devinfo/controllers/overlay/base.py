"""
Core interfaces shared by the overlay coordinators.

Everything in this package is pure-Python so it can be exercised in unit
tests without importing PySide6; host services are handed to the
coordinators at construction. The bound :class:`CoordinatorContext` only
carries the clock shared by every coordinator of a session.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, Protocol, runtime_checkable

Clock = Callable[[], float]


@dataclass(slots=True)
class CoordinatorContext:
    """Session-wide state shared by coordinators."""

    clock: Clock = field(default=time.monotonic)


@runtime_checkable
class Coordinator(Protocol):
    """Minimal lifecycle surface expected from every coordinator."""

    def bind(self, context: CoordinatorContext) -> None:
        """Supply the shared coordinator context."""

    def teardown(self) -> None:
        """Release resources allocated during the session."""


class SimpleCoordinator:
    """Utility mixin implementing the Coordinator protocol."""

    def __init__(self) -> None:
        self._context: CoordinatorContext | None = None

    def bind(self, context: CoordinatorContext) -> None:
        self._context = context

    def teardown(self) -> None:
        self._context = None

    @property
    def context(self) -> CoordinatorContext | None:
        """Expose the currently bound context for subclasses."""

        return self._context

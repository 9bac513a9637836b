"""Discovery of the host target among live host objects."""

from __future__ import annotations

import gc
import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Protocol, runtime_checkable

logger = logging.getLogger(__name__)

Predicate = Callable[[object], bool]

__all__ = [
    "GcObjectRegistry",
    "HostRegistry",
    "QtWidgetRegistry",
    "StaticRegistry",
    "type_name_predicate",
]


@runtime_checkable
class HostRegistry(Protocol):
    """Returns the current host target, or None when it is not open."""

    def find_target(self) -> object | None:
        """Locate the target among the host's live objects."""


def type_name_predicate(type_name: str) -> Predicate:
    """Match objects by the name of their runtime type.

    The host's concrete class is usually not importable, so discovery
    compares names instead of using ``isinstance``.
    """

    def _matches(obj: object) -> bool:
        return type(obj).__name__ == type_name

    _matches.__name__ = f"type_name_is_{type_name}"
    return _matches


def _first_match(candidates: Iterable[object], predicate: Predicate) -> object | None:
    for candidate in candidates:
        try:
            if predicate(candidate):
                return candidate
        except Exception as exc:  # pragma: no cover - host objects may misbehave
            logger.debug("Discovery predicate failed on %s: %s", type(candidate).__name__, exc)
    return None


class QtWidgetRegistry:
    """Search the application's top-level widgets that are currently shown."""

    def __init__(self, predicate: Predicate) -> None:
        self._predicate = predicate

    def find_target(self) -> object | None:
        from PySide6.QtWidgets import QApplication

        app = QApplication.instance()
        if app is None:
            return None
        # Closed windows stay in the top-level list until deleted.
        shown = [widget for widget in app.topLevelWidgets() if widget.isVisible()]
        return _first_match(shown, self._predicate)


class GcObjectRegistry:
    """Search every object tracked by the garbage collector (non-Qt hosts)."""

    def __init__(self, predicate: Predicate) -> None:
        self._predicate = predicate

    def find_target(self) -> object | None:
        return _first_match(gc.get_objects(), self._predicate)


@dataclass(slots=True)
class StaticRegistry:
    """Registry fed explicitly by the embedding environment."""

    objects: List[object] = field(default_factory=list)
    predicate: Optional[Predicate] = None

    def register(self, obj: object) -> None:
        self.objects.append(obj)

    def unregister(self, obj: object) -> None:
        if obj in self.objects:
            self.objects.remove(obj)

    def find_target(self) -> object | None:
        if self.predicate is None:
            return self.objects[0] if self.objects else None
        return _first_match(list(self.objects), self.predicate)

"""
DevInfo Controllers Package
===========================

Package contenant la logique de l'overlay, indépendante de Qt.
"""

from .overlay import OverlayController, OverlayCoordinator, OverlayState, SnapshotBuilder

__all__ = [
    "OverlayController",
    "OverlayCoordinator",
    "OverlayState",
    "SnapshotBuilder",
]

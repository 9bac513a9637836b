"""
DevInfo Views Package
=====================

Package contenant les fenêtres de l'overlay.
"""

from .overlay_window import DeviceInfoWindow, WINDOW_TITLE

__all__ = [
    "DeviceInfoWindow",
    "WINDOW_TITLE",
]

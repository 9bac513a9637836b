"""
Simulateur d'appareil de démonstration
======================================

Fenêtre hôte minimale exposant la même forme d'objets que le simulateur
réel (``main.screen_simulation``), pour lancer le panneau sans hôte externe.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Tuple

from PySide6.QtWidgets import QComboBox, QLabel, QVBoxLayout, QWidget
from loguru import logger


class ScreenOrientation(enum.Enum):
    PORTRAIT = 1
    PORTRAIT_UPSIDE_DOWN = 2
    LANDSCAPE_LEFT = 3
    LANDSCAPE_RIGHT = 4


class FullScreenMode(enum.Enum):
    EXCLUSIVE_FULL_SCREEN = 0
    FULL_SCREEN_WINDOW = 1
    MAXIMIZED_WINDOW = 2
    WINDOWED = 3


@dataclass(frozen=True)
class DeviceInfo:
    friendly_name: str
    width: int
    height: int
    dpi: float
    safe_area: Tuple[float, float, float, float]

    def __str__(self) -> str:
        return self.friendly_name


DEMO_DEVICES: Tuple[DeviceInfo, ...] = (
    DeviceInfo("Apple iPhone 13", 1170, 2532, 460.0, (0.0, 102.0, 1170.0, 2328.0)),
    DeviceInfo("Google Pixel 5", 1080, 2340, 432.0, (0.0, 0.0, 1080.0, 2280.0)),
    DeviceInfo("Samsung Galaxy Tab S7", 1600, 2560, 274.0, (0.0, 0.0, 1600.0, 2560.0)),
)


class ScreenSimulation:
    """Équivalent de la simulation d'écran : l'info appareil reste non publique."""

    def __init__(self, device: DeviceInfo):
        self._device_info = device
        self.orientation = ScreenOrientation.PORTRAIT
        self.auto_rotation = True
        self.full_screen = True
        self.full_screen_mode = FullScreenMode.FULL_SCREEN_WINDOW

    @property
    def width(self) -> int:
        return self._device_info.width

    @property
    def height(self) -> int:
        return self._device_info.height

    @property
    def dpi(self) -> float:
        return self._device_info.dpi

    @property
    def safe_area(self) -> Tuple[float, float, float, float]:
        return self._device_info.safe_area

    def set_device(self, device: DeviceInfo):
        self._device_info = device


class SimulatorMain:
    def __init__(self, device: DeviceInfo):
        self._screen_simulation: Optional[ScreenSimulation] = ScreenSimulation(device)

    @property
    def screen_simulation(self) -> Optional[ScreenSimulation]:
        return self._screen_simulation


class SimulatorWindow(QWidget):
    """Fenêtre hôte de démonstration, reconnue par le nom de son type."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self._main = SimulatorMain(DEMO_DEVICES[0])
        self.setWindowTitle("Device Simulator")
        self._setup_ui()

    @property
    def main(self) -> SimulatorMain:
        return self._main

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.addWidget(QLabel("Appareil simulé :"))

        self.device_combo = QComboBox()
        for device in DEMO_DEVICES:
            self.device_combo.addItem(device.friendly_name)
        self.device_combo.currentIndexChanged.connect(self.select_device)
        layout.addWidget(self.device_combo)

    def select_device(self, index: int):
        device = DEMO_DEVICES[index]
        self._main.screen_simulation.set_device(device)
        logger.info(f"Simulateur : appareil '{device.friendly_name}' sélectionné")

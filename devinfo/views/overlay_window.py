"""
Fenêtre « Device Info »
=======================

Héberge le panneau d'informations et relie la boucle de rafraîchissement
Qt au contrôleur de l'overlay.
"""

from __future__ import annotations

from typing import Optional

from PySide6.QtWidgets import QVBoxLayout, QWidget
from loguru import logger

from ..config import DEFAULT_OVERLAY_CONFIG, OverlayConfig
from ..controllers.overlay import OverlayController, OverlayState
from ..services.host_scheduler import QtFrameScheduler
from ..widgets.info_panel import InfoPanel

WINDOW_TITLE = "Device Info"


class DeviceInfoWindow(QWidget):
    """Fenêtre flottante qui reflète l'état du simulateur d'appareil."""

    def __init__(self, controller: OverlayController, config: Optional[OverlayConfig] = None,
                 scheduler: Optional[QtFrameScheduler] = None, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.config = config or DEFAULT_OVERLAY_CONFIG
        self.controller = controller
        self.scheduler = scheduler or QtFrameScheduler(self.config.frame_interval_ms, parent=self)

        self.setWindowTitle(WINDOW_TITLE)
        self.resize(320, 360)
        self._setup_ui()

        self.controller.set_redraw_callback(self.refresh_view)
        self.controller.coordinator.add_listener(self._on_state_changed)

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.panel = InfoPanel(self)
        self.panel.label_clicked.connect(self.controller.copy_label)
        self.panel.token_clicked.connect(self.controller.copy_token)
        self.panel.copy_all_clicked.connect(self.controller.copy_all)
        layout.addWidget(self.panel)

    # --- Rendu --------------------------------------------------------------
    def refresh_view(self):
        """Redessine à partir du dernier snapshot (aucun accès à l'hôte)."""
        self.panel.render_snapshot(self.controller.snapshot, self.controller.feedback, self.controller.now())

    def _on_state_changed(self, previous: OverlayState, current: OverlayState):
        """Signale dans le titre que le simulateur n'est pas (encore) joignable."""
        if current in (OverlayState.INITIALIZING, OverlayState.NOT_FOUND):
            self.setWindowTitle(f"{WINDOW_TITLE} (en attente)")
        else:
            self.setWindowTitle(WINDOW_TITLE)
        logger.debug(f"État du panneau Device Info : {previous.value} -> {current.value}")

    # --- Cycle de vie -------------------------------------------------------
    def showEvent(self, event):
        super().showEvent(event)
        if not self.controller.is_attached:
            self.controller.attach(self.scheduler)
            self.refresh_view()

    def closeEvent(self, event):
        self.controller.detach()
        super().closeEvent(event)

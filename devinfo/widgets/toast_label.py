"""
Bandeau de notification (toast)
===============================

Message flottant en haut du panneau, dont l'opacité suit le temps restant.
"""

from PySide6.QtWidgets import QLabel, QGraphicsOpacityEffect
from PySide6.QtCore import Qt

from .style_manager import StyleManager


class ToastLabel(QLabel):
    """Bandeau superposé au panneau parent."""

    MARGIN = 5
    HEIGHT = 22

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setStyleSheet(StyleManager.get_toast_style())
        self.setAlignment(Qt.AlignCenter)
        self.setAttribute(Qt.WA_TransparentForMouseEvents)
        self._opacity = QGraphicsOpacityEffect(self)
        self._opacity.setOpacity(0.0)
        self.setGraphicsEffect(self._opacity)
        self.hide()

    def show_message(self, message: str, alpha: float):
        """Affiche ``message`` avec l'opacité ``alpha``; masque le bandeau à 0."""
        if alpha <= 0 or not message:
            self.hide()
            return
        if self.text() != message:
            self.setText(message)
        self._opacity.setOpacity(alpha)
        parent = self.parentWidget()
        if parent is not None:
            self.setGeometry(self.MARGIN, self.MARGIN, parent.width() - 2 * self.MARGIN, self.HEIGHT)
        self.show()
        self.raise_()

    @property
    def opacity(self) -> float:
        return self._opacity.opacity() if self.isVisible() else 0.0

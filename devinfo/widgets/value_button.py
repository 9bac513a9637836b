"""
Bouton de valeur copiable
=========================

Affiche un jeton de valeur et peint par-dessus la surbrillance de copie.
"""

from PySide6.QtWidgets import QPushButton, QSizePolicy
from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QColor, QCursor, QPainter

from .style_manager import StyleManager, apply_value_style


class FlashValueButton(QPushButton):
    """Jeton de valeur cliquable avec surbrillance qui s'estompe."""

    token_clicked = Signal(str)

    def __init__(self, token: str, parent=None):
        super().__init__(token, parent)
        self.token = token
        self._flash_alpha = 0.0
        apply_value_style(self)
        self.setCursor(QCursor(Qt.PointingHandCursor))
        self.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Fixed)
        self.setToolTip("Cliquer pour copier")
        self.clicked.connect(lambda: self.token_clicked.emit(self.token))

    @property
    def flash_alpha(self) -> float:
        return self._flash_alpha

    def set_flash_alpha(self, alpha: float):
        """Met à jour l'intensité de la surbrillance (0 = aucune)."""
        if alpha == self._flash_alpha:
            return
        self._flash_alpha = alpha
        self.update()

    def paintEvent(self, event):
        super().paintEvent(event)
        if self._flash_alpha <= 0:
            return
        painter = QPainter(self)
        try:
            painter.fillRect(self.rect(), QColor(*StyleManager.flash_rgba(self._flash_alpha)))
        finally:
            painter.end()

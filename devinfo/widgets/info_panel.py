"""
Panneau Device Info
===================

Affiche le snapshot courant sous forme de lignes « libellé : valeur ».
Le panneau ne fait que lire le snapshot et l'état de feedback : il ne
déclenche jamais de découverte ni de résolution sur l'hôte.
"""

from __future__ import annotations

from typing import List, Optional

from PySide6.QtWidgets import (
    QFrame, QHBoxLayout, QLabel, QPushButton, QScrollArea, QVBoxLayout, QWidget
)
from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QCursor
from loguru import logger

from ..controllers.overlay.feedback import FeedbackState
from ..controllers.overlay.view_models import Snapshot, SnapshotRow
from ..utils.value_tokens import TokenLayout, ValueParts, split_value
from .style_manager import StyleManager, apply_label_style
from .toast_label import ToastLabel
from .value_button import FlashValueButton


class InfoPanel(QWidget):
    """Panneau de lignes copiables avec barre d'outils et bandeau de notification."""

    label_clicked = Signal(str)   # Libellé cliqué : copie de la première valeur
    token_clicked = Signal(str)   # Jeton de valeur cliqué
    copy_all_clicked = Signal()

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setObjectName("InfoPanel")
        self._snapshot: Optional[Snapshot] = None
        self._value_buttons: List[FlashValueButton] = []
        self._setup_ui()

    # --- UI -----------------------------------------------------------------
    def _setup_ui(self) -> None:
        self.setStyleSheet(StyleManager.get_panel_style())

        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        # Barre d'outils
        self.toolbar = QFrame(self)
        self.toolbar.setStyleSheet(StyleManager.get_toolbar_style())
        toolbar_layout = QHBoxLayout(self.toolbar)
        toolbar_layout.setContentsMargins(2, 2, 2, 2)

        self.copy_all_button = QPushButton("Copy All", self.toolbar)
        self.copy_all_button.setFixedWidth(100)
        self.copy_all_button.clicked.connect(lambda: self.copy_all_clicked.emit())
        toolbar_layout.addWidget(self.copy_all_button)
        toolbar_layout.addStretch()

        self.copied_indicator = QLabel("Copied!", self.toolbar)
        self.copied_indicator.hide()
        toolbar_layout.addWidget(self.copied_indicator)

        layout.addWidget(self.toolbar)

        # Zone défilante des lignes
        self.scroll_area = QScrollArea(self)
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setFrameShape(QFrame.NoFrame)

        self._rows_container = QWidget()
        self._rows_layout = QVBoxLayout(self._rows_container)
        self._rows_layout.setContentsMargins(0, 0, 0, 0)
        self._rows_layout.setSpacing(2)
        self._rows_layout.setAlignment(Qt.AlignTop)
        self.scroll_area.setWidget(self._rows_container)

        layout.addWidget(self.scroll_area)

        # Bandeau dessiné en dernier pour rester au-dessus
        self.toast = ToastLabel(self)

    # --- Rendu --------------------------------------------------------------
    @property
    def value_buttons(self) -> List[FlashValueButton]:
        return list(self._value_buttons)

    def render_snapshot(self, snapshot: Snapshot, feedback: FeedbackState, now: float) -> None:
        """Met à jour l'affichage; les lignes ne sont reconstruites qu'au changement de snapshot."""
        if snapshot is not self._snapshot:
            self._snapshot = snapshot
            self._rebuild_rows(snapshot)

        for button in self._value_buttons:
            button.set_flash_alpha(feedback.flash_alpha(button.token, now))

        self.copied_indicator.setVisible(feedback.flash_active(now))
        self.toast.show_message(feedback.toast_message or "", feedback.toast_alpha(now))

    def _rebuild_rows(self, snapshot: Snapshot) -> None:
        self._clear_rows()

        if not snapshot.is_ready:
            status = QLabel(snapshot.text, self._rows_container)
            status.setWordWrap(True)
            status.setStyleSheet(f"color: {StyleManager.COLORS['text']}; padding: 2px 8px;")
            self._rows_layout.addWidget(status)
            logger.debug(f"Panneau Device Info : statut '{snapshot.text}'")
            return

        for index, section in enumerate(snapshot.sections()):
            if index > 0:
                self._rows_layout.addSpacing(10)
            for row in section:
                self._rows_layout.addWidget(self._create_row(row))

    def _clear_rows(self) -> None:
        self._value_buttons = []
        while self._rows_layout.count():
            item = self._rows_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()

    def _create_row(self, row: SnapshotRow) -> QWidget:
        row_widget = QWidget(self._rows_container)
        row_layout = QHBoxLayout(row_widget)
        row_layout.setContentsMargins(0, 0, 0, 0)
        row_layout.setSpacing(4)

        label_button = QPushButton(f"{row.label}:", row_widget)
        apply_label_style(label_button)
        label_button.setFixedWidth(StyleManager.LABEL_WIDTH)
        label_button.setCursor(QCursor(Qt.PointingHandCursor))
        label_button.clicked.connect(lambda _=False, label=row.label: self.label_clicked.emit(label))
        row_layout.addWidget(label_button, 0, Qt.AlignTop)

        row_layout.addWidget(self._create_value_widget(split_value(row.value), row_widget))
        row_layout.addStretch()
        return row_widget

    def _create_value_widget(self, parts: ValueParts, parent: QWidget) -> QWidget:
        container = QWidget(parent)

        if parts.layout is TokenLayout.TUPLE:
            layout = QVBoxLayout(container)
            layout.setSpacing(2)
            for token in parts.tokens:
                line = QHBoxLayout()
                line.setSpacing(2)
                sub_label = QLabel(f"{token.label}:", container)
                sub_label.setStyleSheet(StyleManager.get_small_label_style())
                sub_label.setFixedWidth(StyleManager.SUB_LABEL_WIDTH)
                line.addWidget(sub_label)
                line.addWidget(self._create_value_button(token.text, container))
                line.addStretch()
                layout.addLayout(line)
        else:
            layout = QHBoxLayout(container)
            layout.setSpacing(2)
            for index, token in enumerate(parts.tokens):
                if index > 0 and parts.layout is TokenLayout.PAIR:
                    separator = QLabel("x", container)
                    separator.setStyleSheet(StyleManager.get_small_label_style())
                    separator.setFixedWidth(StyleManager.SEPARATOR_WIDTH)
                    separator.setAlignment(Qt.AlignCenter)
                    layout.addWidget(separator)
                layout.addWidget(self._create_value_button(token.text, container))

        layout.setContentsMargins(0, 0, 0, 0)
        return container

    def _create_value_button(self, token: str, parent: QWidget) -> FlashValueButton:
        button = FlashValueButton(token, parent)
        button.token_clicked.connect(self.token_clicked.emit)
        self._value_buttons.append(button)
        return button

    def resizeEvent(self, event):
        super().resizeEvent(event)
        if self.toast.isVisible():
            self.toast.setGeometry(ToastLabel.MARGIN, ToastLabel.MARGIN,
                                   self.width() - 2 * ToastLabel.MARGIN, ToastLabel.HEIGHT)

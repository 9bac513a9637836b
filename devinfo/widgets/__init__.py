"""
Package de widgets du panneau Device Info
=========================================

Widgets disponibles:
- InfoPanel: Lignes copiables, barre d'outils et bandeau de notification
- FlashValueButton: Jeton de valeur avec surbrillance de copie
- ToastLabel: Bandeau de notification
- StyleManager: Gestionnaire de styles centralisé
"""

from .style_manager import StyleManager, apply_label_style, apply_value_style
from .value_button import FlashValueButton
from .toast_label import ToastLabel
from .info_panel import InfoPanel

__all__ = [
    'FlashValueButton',
    'InfoPanel',
    'StyleManager',
    'ToastLabel',
    'apply_label_style',
    'apply_value_style',
]

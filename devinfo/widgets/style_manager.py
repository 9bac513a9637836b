"""
Gestionnaire de styles du panneau Device Info
=============================================

Ce module centralise les couleurs et feuilles de style du panneau.
"""

from typing import Tuple


class StyleManager:
    """Gestionnaire centralisé des styles du panneau."""

    # Couleurs principales
    COLORS = {
        'background': '#2d2d2d',
        'toolbar': '#3a3a3a',
        'border': '#555555',
        'text': '#e0e0e0',
        'muted': '#b3b3b3',
        'value_bg': '#3a3a3a',
        'value_hover': '#4a4a4a',
        'focus': '#4db8ff',
        'toast_bg': '#202020',
        'toast_text': '#cccccc',
    }

    # Surbrillance de copie : bleu, opacité maximale 30 %
    FLASH_RGB: Tuple[int, int, int] = (51, 128, 255)
    FLASH_MAX_ALPHA = 0.3

    LABEL_WIDTH = 100
    SUB_LABEL_WIDTH = 25
    SEPARATOR_WIDTH = 15

    @staticmethod
    def get_panel_style() -> str:
        """Retourne le style du conteneur principal."""
        colors = StyleManager.COLORS
        return f"""
            QWidget#InfoPanel {{
                background-color: {colors['background']};
                border: 1px solid {colors['border']};
                border-radius: 4px;
            }}
        """

    @staticmethod
    def get_toolbar_style() -> str:
        colors = StyleManager.COLORS
        return f"""
            QFrame {{
                background-color: {colors['toolbar']};
                border: none;
            }}
            QPushButton {{
                background-color: transparent;
                color: {colors['text']};
                border: 1px solid {colors['border']};
                padding: 2px 8px;
            }}
            QPushButton:hover {{
                background-color: {StyleManager._darken_color(colors['focus'], 0.5)};
            }}
            QLabel {{
                color: {colors['focus']};
                padding: 2px 8px;
            }}
        """

    @staticmethod
    def get_label_style() -> str:
        """Style des libellés cliquables (copie de la valeur de la ligne)."""
        colors = StyleManager.COLORS
        return f"""
            QPushButton {{
                background-color: transparent;
                color: {colors['text']};
                border: none;
                padding: 2px 8px;
                text-align: left;
            }}
            QPushButton:hover {{
                color: {colors['focus']};
            }}
        """

    @staticmethod
    def get_value_style() -> str:
        """Style des valeurs cliquables, façon champ de texte."""
        colors = StyleManager.COLORS
        return f"""
            QPushButton {{
                background-color: {colors['value_bg']};
                color: {colors['text']};
                border: 1px solid {colors['border']};
                border-radius: 2px;
                padding: 2px 8px;
                text-align: left;
            }}
            QPushButton:hover {{
                background-color: {colors['value_hover']};
            }}
        """

    @staticmethod
    def get_small_label_style() -> str:
        return f"color: {StyleManager.COLORS['muted']}; font-size: 10px; padding: 1px 2px;"

    @staticmethod
    def get_toast_style() -> str:
        colors = StyleManager.COLORS
        return f"""
            QLabel {{
                background-color: {colors['toast_bg']};
                color: {colors['toast_text']};
                border: 1px solid {colors['border']};
                border-radius: 4px;
                font-size: 11px;
                padding: 4px 8px;
            }}
        """

    @staticmethod
    def flash_rgba(alpha: float) -> Tuple[int, int, int, int]:
        """Couleur RGBA de la surbrillance pour une intensité ``alpha`` entre 0 et 1."""
        alpha = max(0.0, min(1.0, alpha))
        r, g, b = StyleManager.FLASH_RGB
        return r, g, b, int(round(alpha * StyleManager.FLASH_MAX_ALPHA * 255))

    @staticmethod
    def _darken_color(hex_color: str, factor: float = 0.8) -> str:
        """Assombrit une couleur hexadécimale."""
        hex_color = hex_color.lstrip('#')

        r = int(hex_color[0:2], 16)
        g = int(hex_color[2:4], 16)
        b = int(hex_color[4:6], 16)

        r = int(r * factor)
        g = int(g * factor)
        b = int(b * factor)

        return f"#{r:02x}{g:02x}{b:02x}"


def apply_label_style(button):
    """Fonction utilitaire pour appliquer le style des libellés."""
    button.setStyleSheet(StyleManager.get_label_style())


def apply_value_style(button):
    """Fonction utilitaire pour appliquer le style des valeurs."""
    button.setStyleSheet(StyleManager.get_value_style())

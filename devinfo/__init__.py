"""
DevInfo Overlay Package
=======================

Panneau de diagnostic qui reflète l'état du simulateur d'appareil de l'hôte:
- utils: Résolution dynamique de chemins et formatage des valeurs
- controllers: Découverte, tentatives, détection de changements, feedback
- services: Adaptateurs hôte (registre d'objets, presse-papiers, horloge)
- widgets: Composants UI PySide6 du panneau
- views: Fenêtre "Device Info"
- logging: Logger sécurisé (troncature des valeurs de l'hôte)
- lifecycle: Assemblage et arrêt
"""

from __future__ import annotations

from .config import DEFAULT_OVERLAY_CONFIG, OverlayConfig

__version__ = "1.0.0"

__all__ = ["DEFAULT_OVERLAY_CONFIG", "OverlayConfig", "__version__"]

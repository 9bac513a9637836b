# Configuration de l'overlay DevInfo
from dataclasses import dataclass
import os


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class OverlayConfig:
    """Réglages du panneau d'informations (cadences, délais de feedback, cible)."""

    # Cadence de sondage de l'hôte (secondes)
    poll_interval: float = 0.5

    # Nombre de tentatives comptées avant de passer en état "introuvable"
    max_init_attempts: int = 10

    # Durées des retours visuels (secondes)
    flash_duration: float = 1.0
    toast_duration: float = 1.5

    # Cadence de rafraîchissement de l'affichage (millisecondes)
    frame_interval_ms: int = 16

    # Nom du type de la fenêtre hôte recherchée parmi les objets vivants
    target_type_name: str = "SimulatorWindow"

    # Texte affiché quand un champ n'existe pas sur cette version de l'hôte
    unavailable_text: str = "<unavailable>"

    # Longueur maximale des valeurs dans les logs
    MAX_LOG_CHARS: int = 120

    @classmethod
    def from_env(cls) -> 'OverlayConfig':
        """Crée une configuration à partir des variables d'environnement DEVINFO_*."""
        defaults = cls()
        return cls(
            poll_interval=_env_float("DEVINFO_POLL_INTERVAL", defaults.poll_interval),
            max_init_attempts=_env_int("DEVINFO_MAX_INIT_ATTEMPTS", defaults.max_init_attempts),
            flash_duration=_env_float("DEVINFO_FLASH_DURATION", defaults.flash_duration),
            toast_duration=_env_float("DEVINFO_TOAST_DURATION", defaults.toast_duration),
            frame_interval_ms=_env_int("DEVINFO_FRAME_INTERVAL_MS", defaults.frame_interval_ms),
            target_type_name=os.environ.get("DEVINFO_TARGET_TYPE", defaults.target_type_name),
            MAX_LOG_CHARS=_env_int("DEVINFO_MAX_LOG_CHARS", defaults.MAX_LOG_CHARS),
        )


# Instance globale par défaut
DEFAULT_OVERLAY_CONFIG = OverlayConfig()

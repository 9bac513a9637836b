# Logger sécurisé : les valeurs de l'hôte sont tronquées avant d'atteindre les handlers
import logging
import sys
from typing import Any, Dict

from ..config import DEFAULT_OVERLAY_CONFIG, OverlayConfig
from ..utils.redactor import safe_repr, truncate_for_log


class SafeLoggerAdapter(logging.LoggerAdapter):
    """Adaptateur de logger qui tronque automatiquement les valeurs volumineuses."""

    def __init__(self, logger: logging.Logger, extra: Dict[str, Any] = None, cfg: OverlayConfig = None):
        super().__init__(logger, extra or {})
        self.cfg = cfg or DEFAULT_OVERLAY_CONFIG

    def process(self, msg, kwargs):
        """Assainit les données extra du log."""
        if 'extra' in kwargs and isinstance(kwargs['extra'], dict):
            kwargs['extra'] = {key: self._shorten(value) for key, value in kwargs['extra'].items()}
        return msg, kwargs

    def _shorten(self, value: Any) -> Any:
        if isinstance(value, (int, float, bool)) or value is None:
            return value
        if isinstance(value, str):
            return truncate_for_log(value, self.cfg.MAX_LOG_CHARS)
        return safe_repr(value, self.cfg.MAX_LOG_CHARS)

    def log(self, level, msg, *args, **kwargs):
        """Override pour gérer le format loguru {} et tronquer les arguments."""
        if not self.isEnabledFor(level):
            return
        safe_args = tuple(self._shorten(arg) for arg in args)
        if safe_args and isinstance(msg, str) and '{}' in msg:
            try:
                msg = msg.format(*safe_args)
                safe_args = ()
            except (IndexError, KeyError, ValueError):
                pass
        super().log(level, msg, *safe_args, **kwargs)


def get_safe_logger(name: str, cfg: OverlayConfig = None) -> SafeLoggerAdapter:
    """Crée un logger sécurisé.

    Args:
        name: Nom du logger (généralement __name__)
        cfg: Configuration (utilise la config par défaut si None)

    Returns:
        Logger qui tronque les valeurs de l'hôte
    """
    return SafeLoggerAdapter(logging.getLogger(name), cfg=cfg or DEFAULT_OVERLAY_CONFIG)


def configure_logging(level: int = logging.INFO, format_string: str = None) -> None:
    """Configure le logging standard et loguru au même niveau.

    Args:
        level: Niveau de logging
        format_string: Format des messages (optionnel)
    """
    if format_string is None:
        format_string = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    logging.basicConfig(
        level=level,
        format=format_string,
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    from loguru import logger as loguru_logger

    loguru_logger.remove()
    loguru_logger.add(sys.stderr, level=level)

# Utilitaires de troncature des valeurs de l'hôte pour les logs
from typing import Any


def truncate_for_log(s: str, max_chars: int) -> str:
    """Tronque une chaîne pour les logs en préservant la lisibilité.

    Args:
        s: Chaîne à tronquer
        max_chars: Nombre maximum de caractères

    Returns:
        Chaîne tronquée avec indicateur si nécessaire
    """
    if s is None:
        return s

    # Remplacer les sauts de ligne par un symbole visible
    s = s.replace("\n", "⏎").replace("\r", "")

    if len(s) <= max_chars:
        return s

    # Tronquer en essayant de couper à un espace si possible
    truncated = s[:max_chars]
    if max_chars > 10:
        last_space = truncated.rfind(' ')
        if last_space > max_chars * 0.8:
            truncated = truncated[:last_space]

    return truncated + "…"


def safe_repr(obj: Any, max_chars: int = 100) -> str:
    """Représentation sûre d'un objet de l'hôte pour les logs.

    Les objets de l'hôte peuvent avoir des ``__str__`` coûteux ou défaillants :
    on ne laisse jamais une erreur de formatage remonter jusqu'au logging.
    """
    if obj is None:
        return "None"

    if isinstance(obj, (str, int, float, bool)):
        return truncate_for_log(str(obj), max_chars)

    if isinstance(obj, (list, tuple)):
        if len(obj) == 0:
            return repr(obj)
        return f"{type(obj).__name__}[{len(obj)} items]"

    try:
        text = str(obj)
    except Exception:
        return f"{type(obj).__name__}(...)"
    return truncate_for_log(text, max_chars)

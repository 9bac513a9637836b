"""
DevInfo Utils Package
=====================

Utilitaires sans dépendance Qt : résolution de chemins dynamiques et
formatage des valeurs affichées.
"""

from .path_resolver import ABSENT, resolve
from .value_tokens import TokenLayout, ValueParts, ValueToken, format_value, split_value

__all__ = [
    "ABSENT",
    "TokenLayout",
    "ValueParts",
    "ValueToken",
    "format_value",
    "resolve",
    "split_value",
]

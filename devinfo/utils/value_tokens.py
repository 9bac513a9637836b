"""Formatting of mirrored values and splitting of composite values into copyable tokens."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

__all__ = [
    "PAIR_SEPARATOR",
    "TUPLE_LABELS",
    "TokenLayout",
    "ValueParts",
    "ValueToken",
    "format_rect",
    "format_resolution",
    "format_value",
    "split_value",
]

PAIR_SEPARATOR = " x "
TUPLE_LABELS: Tuple[str, ...] = ("x", "y", "w", "h")

_NUMBER_RE = re.compile(r"[-+]?\d*\.?\d+")
_RECT_ATTRS = ("x", "y", "width", "height")


class TokenLayout(enum.Enum):
    SINGLE = "single"
    PAIR = "pair"
    TUPLE = "tuple"


@dataclass(frozen=True, slots=True)
class ValueToken:
    """A piece of a displayed value that can be copied on its own."""

    text: str
    label: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ValueParts:
    layout: TokenLayout
    tokens: Tuple[ValueToken, ...]


def _format_number(value: float) -> str:
    if value != value or value in (float("inf"), float("-inf")):
        return str(value)
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.4f}".rstrip("0").rstrip(".")


def format_value(value: Any) -> str:
    """Stringify a host value the way the panel displays it."""
    if isinstance(value, enum.Enum):
        return value.name
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, float):
        return _format_number(value)
    if isinstance(value, (tuple, list)):
        return "(" + ", ".join(format_value(item) for item in value) + ")"
    if all(hasattr(value, attr) for attr in _RECT_ATTRS):
        return format_rect(value)
    return str(value)


def format_resolution(width: Any, height: Any) -> str:
    """``"W x H"``"""
    return f"{format_value(width)}{PAIR_SEPARATOR}{format_value(height)}"


def format_rect(value: Any) -> str:
    """``"(x, y, w, h)"`` for rect-like objects and 4-sequences."""
    if isinstance(value, (tuple, list)):
        items = list(value)
    elif all(hasattr(value, attr) for attr in _RECT_ATTRS):
        items = [getattr(value, attr) for attr in _RECT_ATTRS]
    else:
        return str(value)
    return "(" + ", ".join(format_value(item) for item in items) + ")"


def _tuple_label(index: int) -> str:
    if index < len(TUPLE_LABELS):
        return TUPLE_LABELS[index]
    return str(index)


def split_value(value: str) -> ValueParts:
    """Split a displayed value into independently copyable tokens.

    ``"1920 x 1080"`` gives two tokens, ``"(10, 20, 300, 640)"`` gives
    tokens labelled ``x``, ``y``, ``w``, ``h`` (then by index), anything
    else is a single token.
    """
    if PAIR_SEPARATOR in value:
        first, second = value.split(PAIR_SEPARATOR, 1)
        return ValueParts(
            TokenLayout.PAIR,
            (ValueToken(first.strip()), ValueToken(second.strip())),
        )

    inner = value[1:-1] if value.startswith("(") and value.endswith(")") else None
    if inner is not None and inner.strip():
        tokens: List[ValueToken] = []
        for index, part in enumerate(inner.split(",")):
            part = part.strip()
            match = _NUMBER_RE.search(part)
            tokens.append(ValueToken(match.group(0) if match else part, _tuple_label(index)))
        return ValueParts(TokenLayout.TUPLE, tuple(tokens))

    return ValueParts(TokenLayout.SINGLE, (ValueToken(value),))

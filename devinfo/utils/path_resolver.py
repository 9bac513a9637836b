"""
Dynamic member lookup on host-owned object graphs.

The host objects mirrored by the overlay are not ours: their concrete types
vary between host versions and may not even be importable. Every lookup goes
through :func:`resolve`, which walks a chain of member names on the *runtime*
type of each intermediate value and answers :data:`ABSENT` instead of raising
when a member is missing.
"""

from __future__ import annotations

import inspect
import types
from typing import Any, Iterator, Sequence

__all__ = ["ABSENT", "MemberPath", "resolve"]

MemberPath = Sequence[str]

_MISSING = object()

# Members of these kinds are behaviour, not state: never invoked by the resolver.
_METHOD_TYPES = (
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodDescriptorType,
    types.WrapperDescriptorType,
    staticmethod,
    classmethod,
)


class _AbsentType:
    """Sentinel returned when a path cannot be followed to its end."""

    __slots__ = ()
    _instance: "_AbsentType | None" = None

    def __new__(cls) -> "_AbsentType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"

    def __reduce__(self):
        return (_AbsentType, ())


ABSENT = _AbsentType()


def _member_candidates(name: str) -> Iterator[str]:
    # Public member first, then the non-public field backing it.
    yield name
    if not name.startswith("_"):
        yield f"_{name}"


def _lookup_member(obj: Any, name: str) -> Any:
    for candidate in _member_candidates(name):
        static = inspect.getattr_static(obj, candidate, _MISSING)
        if static is _MISSING or isinstance(static, _METHOD_TYPES):
            continue
        try:
            return getattr(obj, candidate)
        except AttributeError:
            # A property whose getter cannot answer counts as a missing member.
            continue
    return ABSENT


def resolve(root: Any, path: MemberPath) -> Any:
    """Follow ``path`` from ``root`` and return the value found, or ``ABSENT``.

    Each step looks up a property or public attribute, then the non-public
    ``_name`` field, on the runtime type of the current value. A ``None``
    anywhere along the way, or a missing member, ends the walk with
    ``ABSENT``. Exceptions other than ``AttributeError`` raised by host
    property getters are left to the caller.
    """
    current = root
    for name in path:
        if current is None or current is ABSENT:
            return ABSENT
        current = _lookup_member(current, name)
    if current is None:
        return ABSENT
    return current

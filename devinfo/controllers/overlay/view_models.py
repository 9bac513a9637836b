"""
Immutable data structures flowing from the builder to the renderer.

A :class:`Snapshot` is never edited in place: every poll that rebuilds
produces a new instance, so the renderer can compare by identity.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence, Tuple

from devinfo.utils.path_resolver import ABSENT, MemberPath, resolve
from devinfo.utils.value_tokens import format_rect, format_resolution, format_value

__all__ = [
    "DEVICE_SIMULATOR_FIELDS",
    "DEVICE_SIMULATOR_FINGERPRINT",
    "DEVICE_SIMULATOR_STAGES",
    "EMPTY_SNAPSHOT",
    "FieldSpec",
    "Snapshot",
    "SnapshotRow",
    "StageSpec",
    "StatusKind",
    "TARGET_NOT_FOUND_MESSAGE",
    "UNAVAILABLE",
]

UNAVAILABLE = "<unavailable>"
TARGET_NOT_FOUND_MESSAGE = "Host panel not open: open the Device Simulator first"

Formatter = Callable[..., str]


class StatusKind(enum.Enum):
    TARGET_NOT_FOUND = "target_not_found"
    STAGE_MISSING = "stage_missing"
    FAULT = "fault"


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """One row of the panel: a label and the member path(s) feeding it.

    ``formatter`` receives one resolved value per path, in order. When any
    path is absent the row shows the unavailable sentinel instead.
    """

    label: str
    paths: Tuple[MemberPath, ...]
    formatter: Optional[Formatter] = None
    section_break: bool = False

    @classmethod
    def single(
        cls,
        label: str,
        *path: str,
        formatter: Optional[Formatter] = None,
        section_break: bool = False,
    ) -> "FieldSpec":
        return cls(label, (tuple(path),), formatter, section_break)

    def extract(self, handle: Any, unavailable: str = UNAVAILABLE) -> str:
        values = [resolve(handle, path) for path in self.paths]
        if any(value is ABSENT for value in values):
            return unavailable
        formatter = self.formatter or format_value
        return formatter(*values)


@dataclass(frozen=True, slots=True)
class StageSpec:
    """A nested handle that must exist before any field can be read."""

    name: str
    member: str
    missing_message: str


@dataclass(frozen=True, slots=True)
class SnapshotRow:
    label: str
    value: str
    section: int = 0


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Ordered label/value rows, or a status message when the host is not reachable."""

    rows: Tuple[SnapshotRow, ...] = ()
    status: Optional[str] = None
    status_kind: Optional[StatusKind] = None

    @classmethod
    def from_rows(cls, rows: Sequence[SnapshotRow]) -> "Snapshot":
        return cls(rows=tuple(rows))

    @classmethod
    def status_only(cls, kind: StatusKind, message: str) -> "Snapshot":
        return cls(status=message, status_kind=kind)

    @property
    def is_ready(self) -> bool:
        return self.status is None

    @property
    def text(self) -> str:
        """Line-oriented ``Label: Value`` rendering, blank line between sections."""
        if self.status is not None:
            return self.status
        lines: List[str] = []
        previous_section = None
        for row in self.rows:
            if previous_section is not None and row.section != previous_section:
                lines.append("")
            lines.append(f"{row.label}: {row.value}")
            previous_section = row.section
        return "\n".join(lines) + "\n" if lines else ""

    def first_value(self, label: str) -> Optional[str]:
        """Value of the first row carrying ``label`` (labels may repeat across sections)."""
        for row in self.rows:
            if row.label == label:
                return row.value
        return None

    def sections(self) -> List[List[SnapshotRow]]:
        grouped: List[List[SnapshotRow]] = []
        previous_section = None
        for row in self.rows:
            if not grouped or row.section != previous_section:
                grouped.append([])
            grouped[-1].append(row)
            previous_section = row.section
        return grouped


EMPTY_SNAPSHOT = Snapshot.status_only(StatusKind.TARGET_NOT_FOUND, TARGET_NOT_FOUND_MESSAGE)


DEVICE_SIMULATOR_STAGES: Tuple[StageSpec, ...] = (
    StageSpec("main", "main", "No simulator main"),
    StageSpec("screen_simulation", "screen_simulation", "No screen simulation"),
)

# Same ordering and sections as the simulator's own info panel.
DEVICE_SIMULATOR_FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec.single("Device", "device_info"),
    FieldSpec("Resolution", (("width",), ("height",)), format_resolution),
    FieldSpec.single("DPI", "dpi"),
    FieldSpec.single("Orientation", "orientation", section_break=True),
    FieldSpec.single("Auto Rotation", "auto_rotation"),
    FieldSpec.single("Safe Area", "safe_area", formatter=format_rect, section_break=True),
    FieldSpec.single("Full Screen", "full_screen", section_break=True),
    FieldSpec.single("Mode", "full_screen_mode"),
)

DEVICE_SIMULATOR_FINGERPRINT: MemberPath = ("main", "screen_simulation", "device_info")

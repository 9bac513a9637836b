"""Snapshot construction from the currently discovered host target."""

from __future__ import annotations

from typing import Any, Iterable, List, Tuple

from devinfo.logging.safe_logger import get_safe_logger
from devinfo.utils.path_resolver import ABSENT, resolve
from devinfo.utils.redactor import safe_repr

from .errors import ResolutionFault, StageMissing
from .view_models import (
    DEVICE_SIMULATOR_FIELDS,
    DEVICE_SIMULATOR_STAGES,
    UNAVAILABLE,
    FieldSpec,
    Snapshot,
    SnapshotRow,
    StageSpec,
    StatusKind,
)

logger = get_safe_logger(__name__)


def _describe(exc: BaseException) -> str:
    # Host exceptions may fail to format themselves.
    try:
        message = str(exc)
    except Exception:
        message = safe_repr(exc)
    return message or type(exc).__name__


class SnapshotBuilder:
    """Turns a host target into a :class:`Snapshot`; never raises."""

    def __init__(
        self,
        fields: Iterable[FieldSpec] = DEVICE_SIMULATOR_FIELDS,
        stages: Iterable[StageSpec] = DEVICE_SIMULATOR_STAGES,
        *,
        unavailable: str = UNAVAILABLE,
    ) -> None:
        self._fields: Tuple[FieldSpec, ...] = tuple(fields)
        self._stages: Tuple[StageSpec, ...] = tuple(stages)
        self._unavailable = unavailable
        self.build_count = 0

    @property
    def fields(self) -> Tuple[FieldSpec, ...]:
        return self._fields

    def stage_handle(self, target: Any) -> Any:
        """Walk the expected nested handles, raising :class:`StageMissing` on the first gap."""

        handle = target
        for stage in self._stages:
            handle = resolve(handle, (stage.member,))
            if handle is ABSENT:
                raise StageMissing(stage.name, stage.missing_message)
        return handle

    def build(self, target: Any) -> Snapshot:
        """Return a full snapshot, or a status snapshot describing why none could be built."""

        self.build_count += 1
        try:
            handle = self.stage_handle(target)
            return Snapshot.from_rows(self._build_rows(handle))
        except StageMissing as exc:
            logger.debug("Stage '%s' missing on host target", exc.stage)
            return Snapshot.status_only(StatusKind.STAGE_MISSING, exc.message)
        except Exception as exc:
            fault = ResolutionFault(_describe(exc))
            logger.warning("Snapshot build failed: %s", fault)
            return Snapshot.status_only(StatusKind.FAULT, f"Error: {fault}")

    def _build_rows(self, handle: Any) -> List[SnapshotRow]:
        rows: List[SnapshotRow] = []
        section = 0
        for index, spec in enumerate(self._fields):
            if spec.section_break and index > 0:
                section += 1
            rows.append(SnapshotRow(spec.label, spec.extract(handle, self._unavailable), section))
        return rows

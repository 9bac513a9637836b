"""
Overlay coordinators.

Pure-Python pipeline mirroring the host target: discovery and retries,
snapshot building, fingerprint gating and copy feedback.
"""

from .base import Coordinator, CoordinatorContext, SimpleCoordinator
from .change_detector import ChangeDetector, PollGate
from .controller import OverlayController
from .coordinator import OverlayCoordinator, OverlayState, RetryState
from .errors import OverlayError, ResolutionFault, StageMissing, TargetNotFound
from .feedback import ALL_COPIED_MESSAGE, CopyInteraction, FeedbackState
from .snapshot_builder import SnapshotBuilder
from .view_models import (
    DEVICE_SIMULATOR_FIELDS,
    DEVICE_SIMULATOR_FINGERPRINT,
    DEVICE_SIMULATOR_STAGES,
    TARGET_NOT_FOUND_MESSAGE,
    UNAVAILABLE,
    FieldSpec,
    Snapshot,
    SnapshotRow,
    StageSpec,
    StatusKind,
)

__all__ = [
    "ALL_COPIED_MESSAGE",
    "ChangeDetector",
    "Coordinator",
    "CoordinatorContext",
    "CopyInteraction",
    "DEVICE_SIMULATOR_FIELDS",
    "DEVICE_SIMULATOR_FINGERPRINT",
    "DEVICE_SIMULATOR_STAGES",
    "FeedbackState",
    "FieldSpec",
    "OverlayController",
    "OverlayCoordinator",
    "OverlayError",
    "OverlayState",
    "PollGate",
    "ResolutionFault",
    "RetryState",
    "SimpleCoordinator",
    "Snapshot",
    "SnapshotBuilder",
    "SnapshotRow",
    "StageMissing",
    "StageSpec",
    "StatusKind",
    "TARGET_NOT_FOUND_MESSAGE",
    "TargetNotFound",
    "UNAVAILABLE",
]

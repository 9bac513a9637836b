"""Tests for the discovery & retry state machine."""
import pytest

from devinfo.controllers.overlay import (
    ChangeDetector,
    OverlayCoordinator,
    OverlayState,
    SnapshotBuilder,
    StatusKind,
    TARGET_NOT_FOUND_MESSAGE,
)

from conftest import FakeSimulatorMain, OtherWindow, SimulatorWindow

MAX_ATTEMPTS = 10
INTERVAL = 0.5


class BrokenRegistry:
    def find_target(self):
        raise RuntimeError("enumeration failed")


@pytest.fixture
def builder():
    return SnapshotBuilder()


@pytest.fixture
def coordinator(registry, builder):
    coordinator = OverlayCoordinator(
        registry,
        builder,
        ChangeDetector(interval=INTERVAL),
        max_attempts=MAX_ATTEMPTS,
        poll_interval=INTERVAL,
    )
    coordinator.activate()
    return coordinator


def run_ticks(coordinator, count, start=0.0):
    """Tick once per poll interval; return the time of the last tick."""
    now = start
    for index in range(count):
        now = start + index * INTERVAL
        coordinator.tick(now)
    return now


def test_inactive_coordinator_does_nothing(registry):
    coordinator = OverlayCoordinator(registry)
    assert coordinator.state is OverlayState.SEARCHING
    assert coordinator.tick(0.0) is False


def test_activation_starts_initializing_with_zero_attempts(coordinator):
    assert coordinator.state is OverlayState.INITIALIZING
    assert coordinator.attempts == 0
    assert coordinator.retry.initialized is False


def test_missing_host_panel_status(coordinator):
    assert coordinator.tick(0.0) is True
    assert coordinator.snapshot.status_kind is StatusKind.TARGET_NOT_FOUND
    assert coordinator.snapshot.status == TARGET_NOT_FOUND_MESSAGE
    assert coordinator.attempts == 1


def test_retry_ticks_follow_poll_cadence(coordinator):
    coordinator.tick(0.0)
    assert coordinator.tick(0.1) is False
    assert coordinator.tick(0.49) is False
    assert coordinator.attempts == 1
    assert coordinator.tick(0.5) is True
    assert coordinator.attempts == 2


def test_attempts_are_monotonic_and_clamped(coordinator):
    transitions = []
    coordinator.add_listener(lambda previous, current: transitions.append(current))

    history = []
    for index in range(MAX_ATTEMPTS + 8):
        coordinator.tick(index * INTERVAL)
        history.append(coordinator.attempts)

    assert history == sorted(history)
    assert max(history) == MAX_ATTEMPTS
    assert history.index(MAX_ATTEMPTS) == MAX_ATTEMPTS - 1
    assert transitions.count(OverlayState.NOT_FOUND) == 1
    assert coordinator.state is OverlayState.NOT_FOUND


def test_polling_continues_after_not_found(coordinator):
    last = run_ticks(coordinator, MAX_ATTEMPTS)
    assert coordinator.state is OverlayState.NOT_FOUND

    before = coordinator.snapshot
    coordinator.tick(last + INTERVAL)
    assert coordinator.attempts == MAX_ATTEMPTS
    assert coordinator.snapshot is not before
    assert coordinator.snapshot.status == TARGET_NOT_FOUND_MESSAGE


def test_late_discovery_recovers_from_not_found(coordinator, registry, simulator_window):
    run_ticks(coordinator, MAX_ATTEMPTS)
    assert coordinator.state is OverlayState.NOT_FOUND
    assert coordinator.snapshot.status == TARGET_NOT_FOUND_MESSAGE

    for index in range(MAX_ATTEMPTS, MAX_ATTEMPTS + 4):
        coordinator.tick(index * INTERVAL)
    assert coordinator.state is OverlayState.NOT_FOUND

    registry.register(simulator_window)
    assert coordinator.tick((MAX_ATTEMPTS + 4) * INTERVAL) is True

    assert coordinator.state is OverlayState.READY
    assert coordinator.attempts == 0
    assert coordinator.retry.initialized is True
    assert coordinator.snapshot.is_ready
    assert coordinator.snapshot.first_value("Device") == "iPhone 13"


def test_success_resets_attempts(coordinator, registry, simulator_window):
    run_ticks(coordinator, 3)
    assert coordinator.attempts == 3
    registry.register(simulator_window)
    coordinator.tick(3 * INTERVAL)
    assert coordinator.state is OverlayState.READY
    assert coordinator.attempts == 0


def test_discovery_matches_by_type_name(coordinator, registry, simulator_window):
    registry.register(OtherWindow())
    coordinator.tick(0.0)
    assert coordinator.snapshot.status_kind is StatusKind.TARGET_NOT_FOUND
    registry.register(simulator_window)
    coordinator.tick(INTERVAL)
    assert coordinator.state is OverlayState.READY


def test_missing_stage_is_retried(coordinator, registry):
    window = SimulatorWindow(None)
    registry.register(window)
    coordinator.tick(0.0)
    assert coordinator.snapshot.status == "No simulator main"
    assert coordinator.attempts == 1

    window._main = FakeSimulatorMain(None)
    coordinator.tick(INTERVAL)
    assert coordinator.snapshot.status == "No screen simulation"
    assert coordinator.attempts == 2
    assert coordinator.state is OverlayState.INITIALIZING


def test_registry_errors_never_escape(builder):
    coordinator = OverlayCoordinator(BrokenRegistry(), builder, max_attempts=2)
    coordinator.activate()
    assert coordinator.tick(0.0) is True
    assert coordinator.snapshot.status_kind is StatusKind.TARGET_NOT_FOUND


def test_ready_rebuilds_only_when_fingerprint_changes(coordinator, registry, builder,
                                                       screen_sim, simulator_window):
    registry.register(simulator_window)
    coordinator.tick(0.0)
    assert coordinator.state is OverlayState.READY
    assert builder.build_count == 1

    first = coordinator.snapshot
    assert coordinator.tick(0.5) is False
    assert coordinator.tick(1.0) is False
    assert builder.build_count == 1
    assert coordinator.snapshot is first

    screen_sim._device_info = "Pixel 5"
    assert coordinator.tick(1.2) is False
    assert coordinator.tick(1.5) is True
    assert builder.build_count == 2
    assert coordinator.snapshot.first_value("Device") == "Pixel 5"


def test_changes_outside_the_fingerprint_are_not_picked_up(coordinator, registry,
                                                          screen_sim, simulator_window):
    registry.register(simulator_window)
    coordinator.tick(0.0)
    screen_sim._width = 2532
    coordinator.tick(0.5)
    assert coordinator.snapshot.first_value("Resolution") == "1170 x 2532"


def test_losing_the_target_starts_over(coordinator, registry, simulator_window):
    registry.register(simulator_window)
    coordinator.tick(0.0)
    assert coordinator.state is OverlayState.READY

    registry.unregister(simulator_window)
    assert coordinator.tick(0.5) is True
    assert coordinator.state is OverlayState.INITIALIZING
    assert coordinator.attempts == 0
    assert coordinator.snapshot.status == TARGET_NOT_FOUND_MESSAGE

    coordinator.tick(1.0)
    assert coordinator.attempts == 1


def test_losing_a_stage_while_ready_starts_over(coordinator, registry, simulator_window):
    registry.register(simulator_window)
    coordinator.tick(0.0)
    simulator_window._main = None
    coordinator.tick(0.5)
    assert coordinator.state is OverlayState.INITIALIZING
    assert coordinator.attempts == 0
    assert coordinator.snapshot.status == "No simulator main"


def test_reactivation_resets_retry_state(coordinator):
    run_ticks(coordinator, 4)
    coordinator.deactivate()
    assert coordinator.state is OverlayState.SEARCHING
    assert coordinator.tick(10.0) is False

    coordinator.activate()
    assert coordinator.state is OverlayState.INITIALIZING
    assert coordinator.attempts == 0
    assert coordinator.tick(10.1) is True


def test_failing_listener_does_not_break_transitions(coordinator, registry, simulator_window):
    def listener(previous, current):
        raise ValueError("listener bug")

    coordinator.add_listener(listener)
    registry.register(simulator_window)
    coordinator.tick(0.0)
    assert coordinator.state is OverlayState.READY


def test_teardown_deactivates(coordinator):
    coordinator.teardown()
    assert coordinator.state is OverlayState.SEARCHING
    assert coordinator.context is None

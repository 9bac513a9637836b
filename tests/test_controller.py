"""Tests for the controller glue between host tick, coordinator and renderer."""
import pytest

from devinfo.controllers.overlay import (
    CoordinatorContext,
    CopyInteraction,
    OverlayController,
    OverlayCoordinator,
    OverlayState,
)

from conftest import FakeClock


class RedrawCounter:
    def __init__(self):
        self.count = 0

    def __call__(self):
        self.count += 1


@pytest.fixture
def redraw():
    return RedrawCounter()


@pytest.fixture
def controller(registry, clipboard, clock, redraw):
    coordinator = OverlayCoordinator(registry, max_attempts=10, poll_interval=0.5)
    interaction = CopyInteraction(clipboard, clock)
    return OverlayController(coordinator, interaction, redraw=redraw, clock=clock)


def fire_at(scheduler, clock, when):
    clock.now = when
    scheduler.fire()


def test_attach_subscribes_once(controller, scheduler):
    controller.attach(scheduler)
    controller.attach(scheduler)
    assert scheduler.subscribe_calls == 1
    assert controller.is_attached
    assert controller.state is OverlayState.INITIALIZING


def test_detach_runs_exactly_once(controller, scheduler):
    controller.attach(scheduler)
    assert controller.detach() is True
    assert controller.detach() is False
    assert scheduler.unsubscribe_calls == 1
    assert scheduler.callbacks == []
    assert controller.detach_count == 1
    assert controller.state is OverlayState.SEARCHING


def test_detach_without_attach_is_a_noop(controller):
    assert controller.detach() is False
    assert controller.detach_count == 0


def test_redraws_follow_changes_and_feedback(controller, scheduler, clock, redraw,
                                            registry, simulator_window):
    registry.register(simulator_window)
    controller.attach(scheduler)

    fire_at(scheduler, clock, 0.0)
    assert controller.state is OverlayState.READY
    assert redraw.count == 1

    fire_at(scheduler, clock, 0.1)
    assert redraw.count == 1

    clock.now = 0.2
    assert controller.copy_token("1170") is True
    assert redraw.count == 2

    fire_at(scheduler, clock, 0.3)
    assert redraw.count == 3

    # Toast expired at 1.7: one last redraw clears it, then the panel goes quiet.
    fire_at(scheduler, clock, 1.8)
    assert redraw.count == 4
    fire_at(scheduler, clock, 1.9)
    assert redraw.count == 4


def test_copy_does_not_rebuild_the_snapshot(controller, scheduler, clock,
                                            registry, simulator_window, clipboard):
    registry.register(simulator_window)
    controller.attach(scheduler)
    fire_at(scheduler, clock, 0.0)

    snapshot = controller.snapshot
    assert controller.copy_label("Resolution") == "1170 x 2532"
    assert controller.copy_all() is True
    assert controller.snapshot is snapshot
    assert clipboard.text == snapshot.text


def test_reattach_restarts_discovery(controller, scheduler, clock):
    controller.attach(scheduler)
    for step in range(4):
        fire_at(scheduler, clock, step * 0.5)
    assert controller.coordinator.attempts == 4

    controller.detach()
    controller.attach(scheduler)
    assert controller.coordinator.attempts == 0
    assert controller.state is OverlayState.INITIALIZING
    assert scheduler.subscribe_calls == 2


def test_failing_redraw_callback_is_contained(registry, clipboard, clock, scheduler,
                                             simulator_window):
    def broken():
        raise RuntimeError("widget already deleted")

    coordinator = OverlayCoordinator(registry)
    controller = OverlayController(coordinator, CopyInteraction(clipboard, clock),
                                   redraw=broken, clock=clock)
    registry.register(simulator_window)
    controller.attach(scheduler)
    scheduler.fire()
    assert controller.state is OverlayState.READY


def test_teardown_detaches(controller, scheduler):
    controller.attach(scheduler)
    controller.teardown()
    assert not controller.is_attached
    assert controller.detach_count == 1
    assert controller.context is None
    controller.teardown()
    assert controller.detach_count == 1


def test_bound_context_supplies_the_clock(registry, clipboard):
    interaction = CopyInteraction(clipboard, FakeClock(100.0))
    controller = OverlayController(OverlayCoordinator(registry), interaction)
    context = CoordinatorContext(clock=FakeClock(7.0))
    controller.bind(context)

    assert controller.context is context
    assert controller.coordinator.context is context
    assert controller.now() == 7.0
    controller.copy_token("460")
    assert controller.feedback.flash_expiry == pytest.approx(8.0)


def test_feedback_follows_the_scheduler_clock(registry, clipboard, clock, scheduler):
    interaction = CopyInteraction(clipboard, FakeClock(100.0))
    controller = OverlayController(OverlayCoordinator(registry), interaction,
                                   clock=FakeClock(50.0))
    controller.attach(scheduler)

    clock.now = 2.0
    controller.copy_token("1170")
    assert controller.now() == 2.0
    assert controller.feedback.toast_expiry == pytest.approx(3.5)
    assert controller.feedback.is_active(controller.now())

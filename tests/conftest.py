"""Pytest configuration and shared fakes of the host object graph."""
import enum
import os

import pytest

# Widget tests run headless.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from devinfo.services.clipboard_service import MemoryClipboard
from devinfo.services.host_registry import StaticRegistry, type_name_predicate


class Orientation(enum.Enum):
    PORTRAIT = 1
    LANDSCAPE_LEFT = 3


class FullScreenMode(enum.Enum):
    FULL_SCREEN_WINDOW = 1
    WINDOWED = 3


class FakeScreenSimulation:
    """Host screen simulation: device info is only reachable as a non-public field."""

    def __init__(self, device_info="iPhone 13", width=1170, height=2532, dpi=460.0,
                 orientation=Orientation.PORTRAIT, auto_rotation=True,
                 safe_area=(0, 102, 1170, 2328), full_screen=True,
                 full_screen_mode=FullScreenMode.FULL_SCREEN_WINDOW):
        self._device_info = device_info
        self._width = width
        self._height = height
        self.dpi = dpi
        self._orientation = orientation
        self.auto_rotation = auto_rotation
        self.safe_area = safe_area
        self.full_screen = full_screen
        self.full_screen_mode = full_screen_mode

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height

    @property
    def orientation(self):
        return self._orientation


class FakeSimulatorMain:
    def __init__(self, screen_simulation):
        self._screen_simulation = screen_simulation

    @property
    def screen_simulation(self):
        return self._screen_simulation


class SimulatorWindow:
    """Named like the real host window so discovery matches it by type name."""

    def __init__(self, main):
        self._main = main

    @property
    def main(self):
        return self._main


class OtherWindow:
    main = None


class FakeClock:
    def __init__(self, start=0.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds
        return self.now


class ManualScheduler:
    """Host update loop driven explicitly by the test."""

    def __init__(self, clock):
        self._clock = clock
        self.callbacks = []
        self.subscribe_calls = 0
        self.unsubscribe_calls = 0

    def now(self):
        return self._clock()

    def subscribe(self, callback):
        self.subscribe_calls += 1
        self.callbacks.append(callback)

    def unsubscribe(self, callback):
        self.unsubscribe_calls += 1
        self.callbacks.remove(callback)

    def fire(self):
        for callback in list(self.callbacks):
            callback()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def screen_sim():
    return FakeScreenSimulation()


@pytest.fixture
def simulator_window(screen_sim):
    return SimulatorWindow(FakeSimulatorMain(screen_sim))


@pytest.fixture
def registry():
    """Empty host: the simulator window is not open yet."""
    return StaticRegistry(predicate=type_name_predicate("SimulatorWindow"))


@pytest.fixture
def clipboard():
    return MemoryClipboard()


@pytest.fixture
def scheduler(clock):
    return ManualScheduler(clock)


@pytest.fixture(scope="session")
def qapp():
    widgets = pytest.importorskip("PySide6.QtWidgets")
    app = widgets.QApplication.instance() or widgets.QApplication([])
    yield app

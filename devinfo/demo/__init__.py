"""Hôte de démonstration pour lancer le panneau sans simulateur externe."""

from .simulator import DEMO_DEVICES, DeviceInfo, ScreenSimulation, SimulatorMain, SimulatorWindow

__all__ = ["DEMO_DEVICES", "DeviceInfo", "ScreenSimulation", "SimulatorMain", "SimulatorWindow"]

#!/usr/bin/env python3
"""
DevInfo Overlay - Point d'entrée
================================

Ouvre le panneau « Device Info » (équivalent du menu Window/Device Resolution)
qui reflète l'état du simulateur d'appareil de l'hôte.
"""

import argparse
import logging
import sys

from PySide6.QtWidgets import QApplication

from devinfo import __version__
from devinfo.config import OverlayConfig
from devinfo.lifecycle import create_overlay_environment, shutdown_overlay
from devinfo.logging.safe_logger import configure_logging, get_safe_logger

logger = get_safe_logger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="DevInfo Overlay - panneau d'informations du simulateur")
    parser.add_argument("--demo", action="store_true",
                        help="Ouvre aussi une fenêtre de simulateur de démonstration")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Niveau de logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    configure_logging(getattr(logging, args.log_level))

    app = QApplication.instance() or QApplication(sys.argv)
    config = OverlayConfig.from_env()
    logger.info("Demarrage DevInfo Overlay %s", __version__)

    # Import après QApplication : les widgets exigent une application Qt
    from devinfo.views import DeviceInfoWindow

    simulator = None
    if args.demo:
        from devinfo.demo import SimulatorWindow

        simulator = SimulatorWindow()
        simulator.show()

    artifacts = create_overlay_environment(config)
    window = DeviceInfoWindow(artifacts.controller, config)
    window.show()

    try:
        return app.exec()
    finally:
        shutdown_overlay([artifacts.controller], scheduler=window.scheduler)
        if simulator is not None:
            simulator.close()


if __name__ == "__main__":
    sys.exit(main())

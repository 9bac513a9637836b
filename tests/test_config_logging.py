"""Tests for environment configuration and the safe logger."""
import logging

from devinfo.config import DEFAULT_OVERLAY_CONFIG, OverlayConfig
from devinfo.logging import get_safe_logger
from devinfo.utils.redactor import safe_repr, truncate_for_log


class BrokenStr:
    def __str__(self):
        raise ValueError("boom")


def test_defaults():
    assert DEFAULT_OVERLAY_CONFIG.poll_interval == 0.5
    assert DEFAULT_OVERLAY_CONFIG.max_init_attempts == 10
    assert DEFAULT_OVERLAY_CONFIG.flash_duration == 1.0
    assert DEFAULT_OVERLAY_CONFIG.toast_duration == 1.5
    assert DEFAULT_OVERLAY_CONFIG.target_type_name == "SimulatorWindow"


def test_from_env_reads_overrides(monkeypatch):
    monkeypatch.setenv("DEVINFO_POLL_INTERVAL", "0.25")
    monkeypatch.setenv("DEVINFO_MAX_INIT_ATTEMPTS", "3")
    monkeypatch.setenv("DEVINFO_TARGET_TYPE", "GameView")
    cfg = OverlayConfig.from_env()
    assert cfg.poll_interval == 0.25
    assert cfg.max_init_attempts == 3
    assert cfg.target_type_name == "GameView"
    assert cfg.toast_duration == 1.5


def test_from_env_ignores_invalid_values(monkeypatch):
    monkeypatch.setenv("DEVINFO_POLL_INTERVAL", "fast")
    monkeypatch.setenv("DEVINFO_FRAME_INTERVAL_MS", "")
    cfg = OverlayConfig.from_env()
    assert cfg.poll_interval == 0.5
    assert cfg.frame_interval_ms == 16


def test_truncate_for_log():
    assert truncate_for_log("short", 10) == "short"
    assert truncate_for_log("a\nb", 10) == "a⏎b"
    assert truncate_for_log("x" * 50, 20) == "x" * 20 + "…"


def test_safe_repr_survives_broken_str():
    assert safe_repr(BrokenStr()) == "BrokenStr(...)"
    assert safe_repr((1, 2, 3)) == "tuple[3 items]"


def test_safe_logger_truncates_arguments(caplog):
    cfg = OverlayConfig(MAX_LOG_CHARS=20)
    log = get_safe_logger("devinfo.tests.safe", cfg)
    with caplog.at_level(logging.INFO, logger="devinfo.tests.safe"):
        log.info("Value: %s (%d)", "y" * 200, 7)
    message = caplog.records[-1].getMessage()
    assert message == "Value: " + "y" * 20 + "… (7)"


def test_safe_logger_accepts_brace_format(caplog):
    log = get_safe_logger("devinfo.tests.braces")
    with caplog.at_level(logging.INFO, logger="devinfo.tests.braces"):
        log.info("State {} -> {}", "ready", "not_found")
    assert caplog.records[-1].getMessage() == "State ready -> not_found"


def test_safe_logger_respects_level(caplog):
    log = get_safe_logger("devinfo.tests.quiet")
    with caplog.at_level(logging.WARNING, logger="devinfo.tests.quiet"):
        log.debug("hidden {}", 1)
    assert caplog.records == []

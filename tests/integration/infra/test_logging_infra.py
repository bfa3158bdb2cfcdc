from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the asynchronous QueueListener architecture, idempotency
of configuration, file rotation and shutdown draining.
"""

import logging
from pathlib import Path

from dirwalk.infra.logging import (
    _CONFIGURED_FLAG_ATTR,
    _HANDLER_TAG_ATTR,
    _QUEUE_LISTENER_ATTR,
    LoggingConfig,
    configure_logging,
    level_for_verbosity,
    shutdown_logging,
)


def _our_handlers():
    return [h for h in logging.getLogger().handlers if getattr(h, _HANDLER_TAG_ATTR, False)]


def test_logging_idempotency() -> None:
    """TC-01: Verify that multiple config calls do not duplicate handlers."""
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    initial = len(_our_handlers())
    configure_logging(cfg)

    assert initial == 1
    assert len(_our_handlers()) == initial, "Handlers were duplicated."


def test_force_reconfigures_level() -> None:
    """TC-02: Verify force replaces our handler and applies the new level."""
    configure_logging(LoggingConfig(level="WARNING"))
    configure_logging(LoggingConfig(level="DEBUG"), force=True)

    assert logging.getLogger().level == logging.DEBUG
    assert len(_our_handlers()) == 1


def test_log_rotation(tmp_path: Path) -> None:
    """TC-03: Verify file rotation when size limit is exceeded."""
    log_file = tmp_path / "test_rotate.log"
    cfg = LoggingConfig(
        level="DEBUG",
        console=False,
        log_file=str(log_file),
        max_bytes=100,
        backup_count=1,
    )

    configure_logging(cfg)
    logger = logging.getLogger("test_rotate")
    for _ in range(10):
        logger.debug("This is a long log message to trigger rotation." * 5)

    # Stopping the listener drains the queue
    shutdown_logging()

    assert log_file.exists()
    assert (tmp_path / "test_rotate.log.1").exists(), "Rotation backup file was not created."


def test_queue_listener_architecture() -> None:
    """TC-04: Verify that the root logger uses a QueueHandler-based architecture."""
    configure_logging(LoggingConfig(level="INFO", console=True))
    root = logging.getLogger()

    assert len(_our_handlers()) > 0
    assert getattr(root, _QUEUE_LISTENER_ATTR) is not None
    assert getattr(root, _CONFIGURED_FLAG_ATTR) is True


def test_shutdown_detaches_handlers() -> None:
    """TC-05: Verify shutdown removes only our handlers and allows reconfiguration."""
    configure_logging(LoggingConfig(level="INFO"))
    shutdown_logging()

    assert _our_handlers() == []
    assert getattr(logging.getLogger(), _QUEUE_LISTENER_ATTR) is None

    configure_logging(LoggingConfig(level="INFO"))
    assert len(_our_handlers()) == 1


def test_unwritable_log_file_keeps_console(tmp_path: Path, capsys) -> None:
    """TC-06: Verify a log file that cannot be opened does not break logging."""
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")

    configure_logging(LoggingConfig(level="INFO", log_file=str(blocker / "sub" / "x.log")))

    assert "Cannot open log file" in capsys.readouterr().err
    assert len(_our_handlers()) == 1


def test_level_for_verbosity() -> None:
    """TC-07: Verify CLI flags map to levels, debug winning over verbose."""
    assert level_for_verbosity(False, False) == "WARNING"
    assert level_for_verbosity(True, False) == "INFO"
    assert level_for_verbosity(True, True) == "DEBUG"

from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the QueueListener architecture, idempotency of configuration and
log file rotation.
"""

import logging
from pathlib import Path

from deeptree.infra.logging import (
    _CONFIGURED_FLAG_ATTR,
    _HANDLER_TAG_ATTR,
    _QUEUE_LISTENER_ATTR,
    LoggingConfig,
    configure_logging,
    shutdown_logging,
)


def _our_handlers():
    return [h for h in logging.getLogger().handlers if getattr(h, _HANDLER_TAG_ATTR, False)]


def test_logging_idempotency() -> None:
    """TC-01: Multiple config calls do not duplicate handlers."""
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    initial = len(_our_handlers())
    configure_logging(cfg)

    assert initial == 1
    assert len(_our_handlers()) == initial


def test_force_reconfigures_level() -> None:
    configure_logging(LoggingConfig(level="INFO"))
    configure_logging(LoggingConfig(level="DEBUG"), force=True)

    assert logging.getLogger().level == logging.DEBUG
    assert len(_our_handlers()) == 1


def test_log_rotation(tmp_path: Path) -> None:
    """TC-02: File rotation happens when the size limit is exceeded."""
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
    assert (tmp_path / "test_rotate.log.1").exists()


def test_shutdown_clears_state() -> None:
    configure_logging(LoggingConfig())
    shutdown_logging()

    root = logging.getLogger()
    assert _our_handlers() == []
    assert getattr(root, _QUEUE_LISTENER_ATTR, None) is None
    assert getattr(root, _CONFIGURED_FLAG_ATTR) is False


def test_unusable_log_file_falls_back_to_console(tmp_path: Path, capsys) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")

    configure_logging(LoggingConfig(log_file=str(blocker / "app.log")))

    assert "Cannot open log file" in capsys.readouterr().err
    assert len(_our_handlers()) == 1


def test_shutdown_drains_console_records(capsys) -> None:
    """TC-03: Queued records reach stderr before the listener stops."""
    configure_logging(LoggingConfig(level="INFO", console=True))
    logging.getLogger("deeptree.test").warning("tree regenerated")

    shutdown_logging()

    assert "WARNING | tree regenerated" in capsys.readouterr().err


def test_level_name_resolution() -> None:
    assert LoggingConfig(level="debug").level_int == logging.DEBUG
    assert LoggingConfig(level=" warning ").level_int == logging.WARNING
    assert LoggingConfig(level="verbose").level_int == logging.INFO
    assert LoggingConfig(level="").level_int == logging.INFO

"""
Logging setup for the visualizer.

Application modules log through ``logging.getLogger(__name__)``; Qt's own
diagnostics (qWarning, qCritical, ...) are forwarded into the ``qt`` logger so
they share the same handlers and format.
"""
import logging
import sys
from typing import Optional, Union

from PyQt5.QtCore import (
    QtCriticalMsg,
    QtDebugMsg,
    QtFatalMsg,
    QtInfoMsg,
    QtWarningMsg,
    qInstallMessageHandler,
)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"

qt_logger = logging.getLogger("qt")

_QT_LEVELS = {
    QtDebugMsg: logging.DEBUG,
    QtInfoMsg: logging.INFO,
    QtWarningMsg: logging.WARNING,
    QtCriticalMsg: logging.ERROR,
    QtFatalMsg: logging.CRITICAL,
}


def resolve_level(level: Union[int, str]) -> int:
    """Accepts ``logging.DEBUG`` or a name such as ``"debug"`` from the CLI."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return value


def qt_message_handler(msg_type, context, message):
    qt_logger.log(_QT_LEVELS.get(msg_type, logging.WARNING), message)


def setup_logging(
    level: Union[int, str] = "INFO",
    log_file: Optional[str] = None,
    capture_qt: bool = True,
) -> None:
    """
    Configures the root logger.

    Args:
        level: level name from ``--log-level`` or a ``logging`` constant
        log_file: optional path that receives the same records
        capture_qt: route Qt's message output through ``logging``
    """
    level = resolve_level(level)
    logger = logging.getLogger()
    logger.setLevel(level)

    # setup may run again (tests, restart); keep a single set of handlers
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if capture_qt:
        qInstallMessageHandler(qt_message_handler)

    logger.debug("Logging initialized at %s", logging.getLevelName(level))

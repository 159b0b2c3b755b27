"""
Logging Configuration
Sets up the package logger and routes Qt's own diagnostics into it.
"""
import logging
import sys
from typing import Dict, Optional

from PySide6.QtCore import QMessageLogContext, QtMsgType, qInstallMessageHandler

LOGGER_NAME = "calcconverter"
QT_LOGGER_NAME = f"{LOGGER_NAME}.qt"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Qt debug chatter only shows up with --debug
QT_LEVELS: Dict[QtMsgType, int] = {
    QtMsgType.QtDebugMsg: logging.DEBUG,
    QtMsgType.QtInfoMsg: logging.INFO,
    QtMsgType.QtWarningMsg: logging.WARNING,
    QtMsgType.QtCriticalMsg: logging.ERROR,
    QtMsgType.QtFatalMsg: logging.CRITICAL,
}


def qt_message_handler(mode: QtMsgType, context: Optional[QMessageLogContext], message: str) -> None:
    logging.getLogger(QT_LOGGER_NAME).log(QT_LEVELS.get(mode, logging.WARNING), message)


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configures the logger of the 'calcconverter' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path that receives a copy of the log.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # setup_logging may run more than once (tests, re-entry)
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    qInstallMessageHandler(qt_message_handler)
    logger.debug(f"Logging initialized at level {logging.getLevelName(level)}.")

"""
Logging configuration for svgify.

Library modules only create loggers with logging.getLogger(__name__); handlers
are attached by the command line tool through configure_logging(). Records
about a single icon carry its file name in ``extra={"icon_file": ...}``, which
the JSON formatter writes out as a separate field.
"""

import json
import logging
import sys
from contextlib import contextmanager
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Iterator, List, Optional

PACKAGE_LOGGER = "svgify"

CONSOLE_FORMAT = "%(levelname)-7s %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
LOG_FILE_BACKUPS = 3


class JsonLineFormatter(logging.Formatter):
    """One JSON object per record, for log files consumed by other tools."""

    def format(self, record):
        entry = {
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        icon_file = getattr(record, "icon_file", None)
        if icon_file is not None:
            entry["icon_file"] = icon_file

        if record.exc_info:
            entry["error"] = self.formatException(record.exc_info)

        return json.dumps(entry, ensure_ascii=False)


def configure_logging(
    verbose: bool = False,
    log_file: Optional[str] = None,
    json_file: bool = False
) -> logging.Logger:
    """
    Attach a console handler, and optionally a rotating file handler, to the
    package logger. Calling it again replaces the handlers of the previous call.

    Args:
        verbose: Emit DEBUG records instead of INFO
        log_file: Also write records to this file
        json_file: Write the log file as JSON lines

    Returns:
        The configured package logger
    """
    level = logging.DEBUG if verbose else logging.INFO

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    package_logger.propagate = False

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    package_logger.addHandler(console)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUPS,
            encoding="utf-8",
        )
        file_handler.setFormatter(JsonLineFormatter() if json_file else logging.Formatter(FILE_FORMAT))
        package_logger.addHandler(file_handler)

    return package_logger


def log_icon_failure(logger: logging.Logger, filename: str, exc: Exception) -> None:
    """
    Report why an icon was skipped.

    The traceback is attached only when the logger is in verbose mode.
    """
    logger.error(
        f"{type(exc).__name__}: {exc}",
        exc_info=exc if logger.isEnabledFor(logging.DEBUG) else None,
        extra={"icon_file": filename},
    )


class RecordingHandler(logging.Handler):
    """Keeps every record it receives in memory."""

    def __init__(self, level: int = logging.NOTSET):
        super().__init__(level)
        self.records: List[logging.LogRecord] = []

    def emit(self, record):
        self.records.append(record)

    @property
    def messages(self) -> List[str]:
        return [record.getMessage() for record in self.records]


@contextmanager
def capture_logs(name: str = PACKAGE_LOGGER, level: int = logging.DEBUG) -> Iterator[RecordingHandler]:
    """
    Collect the records a logger emits inside the block.

    Args:
        name: Logger to listen on
        level: Lowest level to collect

    Yields:
        RecordingHandler holding the collected records
    """
    target = logging.getLogger(name)
    handler = RecordingHandler(level)
    previous_level = target.level

    target.setLevel(level)
    target.addHandler(handler)
    try:
        yield handler
    finally:
        target.removeHandler(handler)
        target.setLevel(previous_level)

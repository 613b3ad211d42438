"""
Logging configuration for the Maintenance Desk application.
Provides structured logging with different levels and formats.

File writes go through a QueueHandler; a QueueListener performs the
file I/O in a separate thread so request handling never blocks on disk.
"""

import atexit
import logging
import logging.handlers
import queue
import sys
from pathlib import Path
from typing import Optional

from pydantic import BaseModel

from core.middleware.correlation import get_correlation_id


# Global queue listener for cleanup
_queue_listener: Optional[logging.handlers.QueueListener] = None


class LogConfig(BaseModel):
    """Logging configuration settings."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"
    enable_file_logging: bool = True
    log_dir: str = "logs"
    max_file_size: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5
    enable_console: bool = True


class ColoredFormatter(logging.Formatter):
    """Custom formatter with colors for console output."""

    grey = "\x1b[38;21m"
    yellow = "\x1b[33;21m"
    red = "\x1b[31;21m"
    bold_red = "\x1b[31;1m"
    blue = "\x1b[34;21m"
    reset = "\x1b[0m"

    COLORS = {
        logging.DEBUG: grey,
        logging.INFO: blue,
        logging.WARNING: yellow,
        logging.ERROR: red,
        logging.CRITICAL: bold_red,
    }

    def format(self, record):
        # Color a copy so the queued file handlers see the plain levelname
        record = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelno, self.grey)
        record.levelname = f"{color}{record.levelname}{self.reset}"
        return f"{super().format(record)}{self.reset}"


def setup_logging(config: Optional[LogConfig] = None) -> None:
    """Setup application logging with configuration.

    - Console handler writes directly to stdout
    - File handlers sit behind a QueueListener thread
    """
    global _queue_listener

    if config is None:
        config = LogConfig()

    level = getattr(logging, config.level.upper())

    # Stop existing listener if running
    if _queue_listener:
        _queue_listener.stop()
        _queue_listener = None

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if config.enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(
            ColoredFormatter(
                fmt="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
                datefmt=config.date_format,
            )
        )
        root_logger.addHandler(console_handler)

    if not config.enable_file_logging:
        return

    log_path = Path(config.log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    file_formatter = logging.Formatter(
        fmt="%(asctime)s | %(name)s | %(levelname)s | %(funcName)s:%(lineno)d | %(message)s",
        datefmt=config.date_format,
    )

    app_handler = logging.handlers.RotatingFileHandler(
        log_path / "app.log",
        maxBytes=config.max_file_size,
        backupCount=config.backup_count,
        encoding="utf-8",
    )
    app_handler.setLevel(level)
    app_handler.setFormatter(file_formatter)

    # Ticket activity gets its own file as well as app.log
    activity_handler = logging.handlers.RotatingFileHandler(
        log_path / "maintenance.log",
        maxBytes=config.max_file_size,
        backupCount=config.backup_count,
        encoding="utf-8",
    )
    activity_handler.setLevel(level)
    activity_handler.setFormatter(file_formatter)
    activity_handler.addFilter(logging.Filter("maintenance"))

    log_queue = queue.Queue(-1)
    root_logger.addHandler(logging.handlers.QueueHandler(log_queue))

    _queue_listener = logging.handlers.QueueListener(
        log_queue,
        app_handler,
        activity_handler,
        respect_handler_level=True,
    )
    _queue_listener.start()

    atexit.register(stop_queue_listener)


def stop_queue_listener() -> None:
    """Stop the queue listener gracefully.

    Called automatically on exit via atexit.
    Can also be called manually during shutdown.
    """
    global _queue_listener

    if _queue_listener:
        _queue_listener.stop()
        _queue_listener = None


class MaintenanceLogger:
    """
    Structured logger for maintenance request activity.

    Lines logged while an HTTP request is handled end with the request's
    correlation ID.
    """

    def __init__(self, name: str = "requests"):
        self.logger = logging.getLogger(f"maintenance.{name}")

    def _log(self, level: int, message: str) -> None:
        correlation_id = get_correlation_id()
        if correlation_id:
            message = f"{message} | Correlation: {correlation_id}"
        self.logger.log(level, message)

    def request_created(
        self, request_id: str, title: str, priority: str, property_name: str
    ) -> None:
        """Log when a maintenance request is submitted."""
        self._log(
            logging.INFO,
            f"Request created | ID: {request_id} | Title: {title} | "
            f"Priority: {priority} | Property: {property_name}",
        )

    def status_updated(
        self, request_id: str, old_status: str, new_status: str, notes: Optional[str] = None
    ) -> None:
        """Log a status transition."""
        notes_str = f" | Notes: {notes}" if notes else ""
        self._log(
            logging.INFO,
            f"Status updated | ID: {request_id} | "
            f"{old_status} -> {new_status}{notes_str}",
        )

    def technician_assigned(
        self,
        request_id: str,
        technician_id: str,
        technician_name: str,
        due_date: Optional[str] = None,
    ) -> None:
        """Log a technician assignment."""
        due_str = f" | Due: {due_date}" if due_date else ""
        self._log(
            logging.INFO,
            f"Technician assigned | ID: {request_id} | "
            f"Technician: {technician_name} ({technician_id}){due_str}",
        )

    def service_scheduled(
        self, request_id: str, scheduled_date: str, timezone: Optional[str] = None
    ) -> None:
        """Log a scheduled service visit."""
        tz_str = f" | Timezone: {timezone}" if timezone else ""
        self._log(
            logging.INFO,
            f"Service scheduled | ID: {request_id} | Date: {scheduled_date}{tz_str}",
        )

    def filters_applied(
        self, total: int, matched: int, active_tab: str, active_filters: int
    ) -> None:
        """Log the outcome of a listing (debug level)."""
        self._log(
            logging.DEBUG,
            f"Filters applied | Tab: {active_tab} | Active filters: {active_filters} | "
            f"Matched: {matched}/{total}",
        )

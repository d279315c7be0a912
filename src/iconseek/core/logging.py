"""
Simple asynchronous logging for iconseek.
"""

import os
import sys
import time
import yaml
from pathlib import Path
from typing import Any, Dict, Optional
from contextlib import contextmanager
from loguru import logger as loguru_logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {extra[component]} | {message}"
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class AsyncLogger:
    """
    Asynchronous logger with a flat format.

    Format: timestamp | level | component | message
    No emojis, no nested JSON, non-blocking writes.
    """

    # Sinks shared by every instance
    _handler_ids: Optional[list] = None

    def __init__(self, component: str, debug_mode: bool = False):
        self.component = component
        self.debug_mode = debug_mode
        self._setup_async_handler()

    def _setup_async_handler(self):
        """
        Install the shared loguru sinks once per process.

        - stderr sink at the configured level
        - optional rotating file sink when ``logging.file`` is set
        - ``enqueue=True`` so callers never block on I/O

        Sinks already installed by the host application are left alone,
        and these sinks only take records bound with a component.
        """
        if AsyncLogger._handler_ids is not None:
            return

        config = _read_logging_config()
        level = "DEBUG" if config["debug_mode"] else str(config["level"]).upper()
        if level not in LOG_LEVELS:
            # Settings rejects the value; keep logging usable until then
            level = "WARNING"

        handler_ids = [
            loguru_logger.add(
                sys.stderr,
                format=LOG_FORMAT,
                level=level,
                filter=_is_iconseek_record,
                enqueue=True,
            )
        ]

        log_file = config.get("file")
        if log_file:
            handler_ids.append(
                loguru_logger.add(
                    log_file,
                    format=LOG_FORMAT,
                    level="DEBUG",
                    filter=_is_iconseek_record,
                    rotation=f"{config['rotation_size_mb']} MB",
                    compression="zip",
                    enqueue=True,
                )
            )

        AsyncLogger._handler_ids = handler_ids

    def log(self, level: str, message: str, **context):
        """Queue a message; the loguru worker writes it in the background."""
        loguru_logger.bind(component=self.component).log(level, message, **context)

    def debug(self, message: str, **context):
        """Log at DEBUG level."""
        self.log("DEBUG", message, **context)

    def info(self, message: str, **context):
        """Log at INFO level."""
        self.log("INFO", message, **context)

    def warning(self, message: str, **context):
        """Log at WARNING level."""
        self.log("WARNING", message, **context)

    def error(self, message: str, include_trace: Optional[bool] = None, **context):
        """
        Log at ERROR level with an optional stack trace.

        Args:
            message: Error message
            include_trace: Whether to attach the stack trace (None = follow debug_mode)
            **context: Additional context
        """
        should_include_trace = include_trace if include_trace is not None else self.debug_mode

        if should_include_trace:
            import traceback

            context["stack_trace"] = traceback.format_exc()

        self.log("ERROR", message, **context)


class PerformanceLogger:
    """
    Logger for timing measurements.

    Records the duration of each measured operation.
    """

    def __init__(self):
        self.logger = AsyncLogger("performance")

    @contextmanager
    def measure(self, operation: str, **context):
        """
        Context manager that times an operation.

        Usage:
        ```
        with perf_logger.measure("search_icons", candidates=len(names)):
            results = search_icons(names, query)
        ```
        """
        start = time.perf_counter()
        try:
            yield
        finally:
            duration = time.perf_counter() - start
            self.logger.debug(
                "Operation completed", operation=operation, duration_ms=duration * 1000, **context
            )


def _is_iconseek_record(record) -> bool:
    return "component" in record["extra"]


def drop_default_sink() -> None:
    """
    Remove loguru's stock stderr sink.

    Only entry points that own the process call this. Importing iconseek
    as a library never touches sinks it did not add.
    """
    try:
        loguru_logger.remove(0)
    except ValueError:
        # Already removed by whoever owns the process
        pass


def _read_logging_config() -> Dict[str, Any]:
    """
    Read the logging section without going through Settings.

    Settings logs through this module, so the ``.iconseek`` file is read
    directly here. Environment variables win over the file.
    """
    config: Dict[str, Any] = {
        "level": "WARNING",
        "file": None,
        "rotation_size_mb": 10,
        "debug_mode": False,
    }

    config_path = Path(".iconseek")
    if config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            section = data.get("logging") if isinstance(data, dict) else None
            if isinstance(section, dict):
                config.update({k: v for k, v in section.items() if k in config})
        except (OSError, yaml.YAMLError):
            # Settings reports a broken file with a proper error later
            pass

    if os.getenv("ICONSEEK_LOG_LEVEL"):
        config["level"] = os.environ["ICONSEEK_LOG_LEVEL"]
    if os.getenv("ICONSEEK_LOG_FILE"):
        config["file"] = os.environ["ICONSEEK_LOG_FILE"]
    if os.getenv("ICONSEEK_DEBUG"):
        config["debug_mode"] = os.environ["ICONSEEK_DEBUG"].lower() == "true"

    return config


def _get_debug_mode() -> bool:
    """Debug mode from the ``.iconseek`` file or ICONSEEK_DEBUG."""
    return bool(_read_logging_config()["debug_mode"])


logger = AsyncLogger("iconseek", debug_mode=_get_debug_mode())

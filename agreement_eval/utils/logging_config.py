"""
Logging configuration for agreement-eval.

This module provides centralized logging configuration with structured logging,
appropriate log levels, and consistent formatting across all modules. Console
output goes to stderr so that reports written to stdout stay machine-readable.
"""

import copy
import json
import logging
import logging.config
import time
from contextlib import contextmanager
from contextvars import ContextVar
from pathlib import Path
from typing import Any, Dict, Generator, Optional

# Context variables for structured logging
operation_id: ContextVar[Optional[str]] = ContextVar("operation_id", default=None)
dataset_name: ContextVar[Optional[str]] = ContextVar("dataset_name", default=None)


class StructuredLogger:
    """Logger that appends the current context as JSON."""

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)
        self.name = name

    def _get_context(self) -> Dict[str, Any]:
        """Get current logging context."""
        context = {}
        if operation_id.get():
            context["operation_id"] = operation_id.get()
        if dataset_name.get():
            context["dataset"] = dataset_name.get()
        return context

    def info(self, message: str, **kwargs: Any) -> None:
        self._log("INFO", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log("ERROR", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log("WARNING", message, **kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log("DEBUG", message, **kwargs)

    def _log(self, level: str, message: str, **kwargs: Any) -> None:
        """Internal logging method."""
        context = self._get_context()
        if kwargs:
            context.update(kwargs)

        if context:
            extra = {"structured_data": context}
            getattr(self.logger, level.lower())(
                f"{message} | {json.dumps(context, default=str)}", extra=extra
            )
        else:
            getattr(self.logger, level.lower())(message)


class PerformanceLogger:
    """Logger for timing metric computations."""

    def __init__(self, name: str = "agreement_eval.performance"):
        self.logger = StructuredLogger(name)

    @contextmanager
    def timer(self, operation: str, **context: Any) -> Generator[None, None, None]:
        """Context manager for timing operations."""
        start_time = time.perf_counter()
        token = operation_id.set(operation)

        try:
            yield
        finally:
            duration = time.perf_counter() - start_time
            self.logger.debug(
                f"Operation completed: {operation}",
                operation=operation,
                duration_ms=round(duration * 1000, 3),
                **context,
            )
            operation_id.reset(token)


class AgreementLogger:
    """Centralized logger configuration for agreement-eval."""

    DEFAULT_CONFIG: Dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "detailed": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "simple": {"format": "%(levelname)s - %(name)s - %(message)s"},
            "json": {
                "format": '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}',
                "datefmt": "%Y-%m-%dT%H:%M:%S%z",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": "DEBUG",
                "formatter": "simple",
                "stream": "ext://sys.stderr",
            },
            "file": {
                "class": "logging.handlers.RotatingFileHandler",
                "level": "DEBUG",
                "formatter": "detailed",
                "filename": "logs/agreement_eval.log",
                "maxBytes": 10 * 1024 * 1024,  # 10MB
                "backupCount": 3,
            },
        },
        "root": {"level": "WARNING", "handlers": ["console"]},
        "loggers": {
            "agreement_eval": {"level": "WARNING", "handlers": ["console"], "propagate": False},
        },
    }

    _configured = False

    @classmethod
    def configure(
        cls,
        level: str = "WARNING",
        log_file: Optional[str] = None,
        json_format: bool = False,
        log_format: Optional[str] = None,
        force: bool = False,
    ) -> None:
        """
        Configure logging for agreement-eval.

        Args:
            level: Package logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_file: Path to log file (if None, only console logging)
            json_format: Whether to use JSON format for logs
            log_format: Custom format string for the console handler
            force: Reconfigure even if logging was already set up
        """
        if cls._configured and not force:
            return

        config = copy.deepcopy(cls.DEFAULT_CONFIG)
        config["loggers"]["agreement_eval"]["level"] = level

        if log_format:
            config["formatters"]["simple"]["format"] = log_format

        if log_file:
            config["handlers"]["file"]["filename"] = log_file
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            config["loggers"]["agreement_eval"]["handlers"].append("file")
        else:
            del config["handlers"]["file"]

        if json_format:
            for handler_config in config["handlers"].values():
                handler_config["formatter"] = "json"

        logging.config.dictConfig(config)
        cls._configured = True

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """
        Get a configured logger for the given name.

        Args:
            name: Logger name (typically __name__)

        Returns:
            Configured logger instance
        """
        if not cls._configured:
            cls.configure()
        return logging.getLogger(name)

    @classmethod
    def get_structured_logger(cls, name: str) -> StructuredLogger:
        if not cls._configured:
            cls.configure()
        return StructuredLogger(name)

    @classmethod
    def get_performance_logger(cls) -> PerformanceLogger:
        if not cls._configured:
            cls.configure()
        return PerformanceLogger()


@contextmanager
def logging_context(**kwargs: Any) -> Generator[None, None, None]:
    """Context manager for setting logging context variables."""
    tokens = {}
    for key, value in kwargs.items():
        context_var = globals().get(key)
        if isinstance(context_var, ContextVar):
            tokens[key] = context_var.set(value)

    try:
        yield
    finally:
        for key, token in tokens.items():
            globals()[key].reset(token)


def get_logger(name: str) -> logging.Logger:
    """Convenience function to get a configured logger."""
    return AgreementLogger.get_logger(name)


def get_structured_logger(name: str) -> StructuredLogger:
    """Convenience function to get a structured logger."""
    return AgreementLogger.get_structured_logger(name)


def get_performance_logger() -> PerformanceLogger:
    """Convenience function to get the performance logger."""
    return AgreementLogger.get_performance_logger()


def setup_logging(
    level: str = "WARNING",
    log_file: Optional[str] = None,
    json_format: bool = False,
    log_format: Optional[str] = None,
) -> None:
    """
    Setup logging configuration.

    Calling it again replaces the previous configuration, so the command line
    can apply the level it was given.

    Args:
        level: Package logging level
        log_file: Path to log file
        json_format: Whether to use JSON format
        log_format: Custom console format string
    """
    AgreementLogger.configure(
        level=level,
        log_file=log_file,
        json_format=json_format,
        log_format=log_format,
        force=True,
    )

"""
Centralized error handling and logging for the field validator.

This module provides a singleton ErrorHandler that normalizes exceptions into
BaseAppError instances, writes them to a rotating log file and re-emits them
as a Qt signal for any UI that wants to show them.
"""

from __future__ import annotations

import logging
import logging.handlers
import traceback
from typing import Any, ClassVar

from PySide6.QtCore import QObject, Signal

from .config import get_app_data_dir
from .errors import BaseAppError, map_exception

SENSITIVE_KEYS = ("password", "token", "secret")


class ErrorHandler(QObject):
    """
    Singleton error handler with logging and signal emission.

    Signals:
        errorOccurred(object): Emitted with the BaseAppError for each handled error
    """

    errorOccurred = Signal(object)

    _instance: ClassVar[ErrorHandler | None] = None
    _logger: ClassVar[logging.Logger | None] = None

    def __new__(cls) -> ErrorHandler:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        if hasattr(self, "_initialized"):
            return

        super().__init__()
        self._initialized = True
        self._setup_logging()

    def capture(self, exception: Exception, context: dict[str, Any] | None = None) -> BaseAppError:
        """
        Normalize an exception into a BaseAppError.

        Args:
            exception: The exception to capture
            context: Optional context information

        Returns:
            BaseAppError with sanitized context and a traceback entry
        """
        app_error = map_exception(exception, self._sanitize_context(context or {}))

        if not app_error.technical_message:
            app_error.technical_message = f"{type(exception).__name__}: {exception}"

        if "traceback" not in app_error.context:
            tb_str = traceback.format_exc()
            if tb_str == "NoneType: None\n":
                tb_str = f"{type(exception).__name__}: {exception}\n"
            app_error.context["traceback"] = tb_str

        return app_error

    def handle(self, exception: Exception, context: dict[str, Any] | None = None) -> BaseAppError:
        """
        Capture, log and broadcast an exception.

        Args:
            exception: The exception to handle
            context: Optional context information

        Returns:
            The normalized BaseAppError
        """
        app_error = self.capture(exception, context)

        if self._logger:
            self._logger.error(
                f"[{app_error.code.value}] {app_error.user_message}",
                extra={
                    "app_code": app_error.code.value,
                    "error_type": app_error.type.value,
                    "severity": app_error.severity.value,
                },
            )

        self.errorOccurred.emit(app_error)
        return app_error

    def _setup_logging(self) -> None:
        """Set up rotating file logging in the app data directory."""
        try:
            logs_dir = get_app_data_dir() / "logs"
            logs_dir.mkdir(parents=True, exist_ok=True)

            ErrorHandler._logger = logging.getLogger("field_validator.errors")
            ErrorHandler._logger.setLevel(logging.DEBUG)
            ErrorHandler._logger.propagate = False

            if not ErrorHandler._logger.handlers:
                file_handler = logging.handlers.RotatingFileHandler(
                    logs_dir / "app.log",
                    maxBytes=5_242_880,  # 5MB
                    backupCount=5,
                    encoding="utf-8",
                )
                formatter = logging.Formatter(
                    "%(asctime)s | %(levelname)s | %(name)s | code=%(app_code)s | %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
                file_handler.setFormatter(formatter)
                ErrorHandler._logger.addHandler(file_handler)

                console_handler = logging.StreamHandler()
                console_handler.setFormatter(formatter)
                console_handler.setLevel(logging.WARNING)
                ErrorHandler._logger.addHandler(console_handler)

        except OSError as e:
            logging.basicConfig(level=logging.ERROR)
            logging.error(f"Failed to setup error logging: {e}")

    def _sanitize_context(self, context: dict[str, Any]) -> dict[str, Any]:
        """Redact sensitive keys and truncate long values."""
        safe_context: dict[str, Any] = {}

        for key, value in context.items():
            if any(sensitive in key.lower() for sensitive in SENSITIVE_KEYS):
                safe_context[key] = "[REDACTED]"
            elif isinstance(value, str):
                safe_context[key] = value if len(value) <= 200 else value[:200] + "..."
            else:
                safe_context[key] = repr(value)[:200]

        return safe_context


def get_error_handler() -> ErrorHandler:
    """Return the singleton ErrorHandler."""
    return ErrorHandler()


def init_logging(level: int = logging.INFO) -> None:
    """
    Initialize logging for the application.

    Sets up the ErrorHandler's file log and a basic console configuration for
    all other module loggers.
    """
    get_error_handler()

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

"""Structured logging for the wiz_model package.

Package modules log through ``get_logger(__name__)``. Structured context is
passed as ``extra={...}`` and lands on the record as ``extra_data``. The
package never attaches handlers or sets levels on its own loggers; an
application that wants the package's JSON or human output calls
``configure_logging`` once, which reads the ``WIZ_LOG_*`` settings.
"""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Mapping, MutableMapping
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from typing_extensions import override

__all__ = [
    "PACKAGE_LOGGER",
    "HumanReadableFormatter",
    "JSONFormatter",
    "WizLogger",
    "configure_logging",
    "get_logger",
]

PACKAGE_LOGGER = "wiz_model"

# Marks handlers installed by configure_logging so a second call replaces them
_OWNED_HANDLER = "_wiz_model_owned"


def _record_context(record: logging.LogRecord) -> dict[str, object]:
    extra_data = getattr(record, "extra_data", None)
    if isinstance(extra_data, Mapping):
        return dict(extra_data)
    return {}


def _record_correlation_id(record: logging.LogRecord) -> str | None:
    # Import here to avoid circular dependency
    from wiz_model.correlation import get_correlation_id  # noqa: PLC0415

    return getattr(record, "correlation_id", None) or get_correlation_id()


class JSONFormatter(logging.Formatter):
    """One JSON object per record, with correlation ID and context."""

    @override
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "message": record.getMessage(),
            "correlation_id": _record_correlation_id(record),
        }
        if context := _record_context(record):
            payload["context"] = context
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class HumanReadableFormatter(logging.Formatter):
    """``timestamp level [module:line] [corr8] > message | key=value``"""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s.%(msecs)03d %(levelname)s [%(module)s:%(lineno)d] %(corr_tag)s > %(message)s",
            datefmt="%m/%d/%y %H:%M:%S",
        )

    @override
    def format(self, record: logging.LogRecord) -> str:
        correlation_id = _record_correlation_id(record)
        record.corr_tag = f"[{correlation_id[:8]}]" if correlation_id else "[--------]"
        text = super().format(record)
        context = _record_context(record)
        if not context:
            return text
        return " | ".join([text, *(f"{key}={value}" for key, value in context.items())])


class WizLogger(logging.LoggerAdapter):
    """Adapter that moves ``extra`` into ``record.extra_data``.

    Level and handlers stay with the wrapped stdlib logger, so whatever the
    application configures for ``wiz_model.*`` applies unchanged.
    """

    def __init__(self, logger: logging.Logger) -> None:
        super().__init__(logger, None)

    @override
    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, MutableMapping[str, Any]]:
        extra = kwargs.pop("extra", None)
        if extra:
            kwargs["extra"] = {"extra_data": dict(extra)}
        return msg, kwargs


def get_logger(name: str) -> WizLogger:
    """Return the package logger adapter for ``name`` (usually ``__name__``)."""
    return WizLogger(logging.getLogger(name))


def _human_handler(human_output: str) -> logging.Handler:
    if human_output == "stdout":
        return logging.StreamHandler(sys.stdout)
    if human_output == "stderr":
        return logging.StreamHandler(sys.stderr)
    path = Path(human_output)
    path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(path, mode="a")


def configure_logging(
    log_format: str | None = None,
    json_file: str | Path | None = None,
    human_output: str | None = None,
    level: int | None = None,
) -> logging.Logger:
    """Install the package formatters on the ``wiz_model`` logger.

    Meant to be called by applications, never by the package itself. Unset
    arguments fall back to ``WIZ_LOG_FORMAT``, ``WIZ_LOG_JSON_FILE``,
    ``WIZ_LOG_HUMAN_OUTPUT`` and ``WIZ_DEBUG``. Calling it again replaces the
    handlers a previous call installed.

    Args:
        log_format: "json", "human", or "both"
        json_file: Path for JSON output (JSON output is skipped without one)
        human_output: "stdout", "stderr", or a file path
        level: Level for the package logger

    Returns:
        The configured ``wiz_model`` logger

    Raises:
        OSError: a log file or its directory could not be created
    """
    from wiz_model import const  # noqa: PLC0415

    log_format = log_format or const.WIZ_LOG_FORMAT
    json_file = json_file or const.WIZ_LOG_JSON_FILE
    human_output = human_output or const.WIZ_LOG_HUMAN_OUTPUT
    if level is None:
        level = logging.DEBUG if const.WIZ_DEBUG else logging.INFO

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        if getattr(handler, _OWNED_HANDLER, False):
            package_logger.removeHandler(handler)
            handler.close()

    handlers: list[logging.Handler] = []
    if log_format in ("json", "both") and json_file:
        json_path = Path(json_file)
        json_path.parent.mkdir(parents=True, exist_ok=True)
        json_handler = logging.FileHandler(json_path, mode="a")
        json_handler.setFormatter(JSONFormatter())
        handlers.append(json_handler)
    if log_format in ("human", "both"):
        human_handler = _human_handler(human_output)
        human_handler.setFormatter(HumanReadableFormatter())
        handlers.append(human_handler)

    for handler in handlers:
        setattr(handler, _OWNED_HANDLER, True)
        package_logger.addHandler(handler)
    package_logger.setLevel(level)
    return package_logger

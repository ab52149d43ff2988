"""Logging helpers for optscan.

Library modules only create loggers with ``logging.getLogger(__name__)``.
Handlers are configured here, by the command-line front end or by a host
application that wants optscan's format.
"""

import atexit
import json
import logging
import re
import sys
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler

from optscan.core.colors import ConsoleColors
from optscan.core.config import LogConfig
from optscan.core.constants import (
    DEFAULT_LOG_LEVEL,
    LOG_FILE_BACKUP_COUNT,
    LOG_FILE_MAX_BYTES,
    VALID_LOG_FORMATS,
    VALID_LOG_LEVELS,
)

_LOG_RECORD_RESERVED_FIELDS = set(logging.makeLogRecord({}).__dict__.keys()) | {"message", "asctime"}
_SENSITIVE_NAME_PARTS = {"password", "passwd", "pwd", "secret", "token", "apikey", "credential"}
_REDACTED_VALUE = "[REDACTED]"


def _normalize_field_name(name: str) -> str:
    separated = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", name.strip())
    return re.sub(r"[^a-z0-9]+", "_", separated.lower()).strip("_")


def _is_sensitive_name(name: str) -> bool:
    parts = [part for part in _normalize_field_name(name).split("_") if part]
    if not parts:
        return False
    if _SENSITIVE_NAME_PARTS.intersection(parts):
        return True
    return parts[-2:] == ["api", "key"] or parts[-2:] == ["private", "key"]


def _safe_record_message(record: logging.LogRecord) -> str:
    try:
        return record.getMessage()
    except Exception:
        return f"{record.msg} [log-message-format-error]"


class SensitiveValueFilter(logging.Filter):
    """Redact values scanned for options whose names look like secrets.

    The scanner attaches ``option_name`` and ``option_value`` to its records;
    for names such as ``password`` or ``api-key`` the value is masked in
    both the message and the extra field.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = getattr(record, "option_name", None)
        value = getattr(record, "option_value", None)
        if isinstance(name, str) and isinstance(value, str) and value and _is_sensitive_name(name):
            record.msg = _safe_record_message(record).replace(repr(value), repr(_REDACTED_VALUE))
            record.args = ()
            record.option_value = _REDACTED_VALUE
        return True


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging output.

    Each log record is a single JSON object on one line.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": _safe_record_message(record),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        # Include custom LogRecord attributes set via logging's `extra`
        for key, value in record.__dict__.items():
            if key in _LOG_RECORD_RESERVED_FIELDS or key.startswith("_"):
                continue
            log_entry.setdefault(key, value)

        return json.dumps(log_entry, default=str)


_atexit_registered = False


def _warn(message: str) -> None:
    print(ConsoleColors.warning(f"Warning: {message}"), file=sys.stderr)


def setup_logging(config: LogConfig | None = None) -> logging.Logger:
    """Setup logging to stderr and, optionally, a rotating file.

    Args:
        config: Logging configuration. Defaults to ``LogConfig.from_env()``.

    Returns:
        The configured ``optscan`` package logger

    Invalid levels or formats fall back to the defaults with a warning on stderr.
    """
    global _atexit_registered

    if config is None:
        config = LogConfig.from_env()

    if not _atexit_registered:
        atexit.register(logging.shutdown)
        _atexit_registered = True

    log_level = config.level.upper()
    if log_level not in VALID_LOG_LEVELS:
        _warn(f"Invalid log level '{config.level}', using {DEFAULT_LOG_LEVEL}")
        log_level = DEFAULT_LOG_LEVEL
    numeric_level = getattr(logging, log_level)

    log_format = config.fmt.lower()
    if log_format not in VALID_LOG_FORMATS:
        _warn(f"Invalid log format '{config.fmt}', using text")
        log_format = "text"

    # Clear any existing handlers from root logger
    for handler in logging.root.handlers[:]:
        handler.close()
        logging.root.removeHandler(handler)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.file:
        try:
            handlers.append(
                RotatingFileHandler(config.file, maxBytes=LOG_FILE_MAX_BYTES, backupCount=LOG_FILE_BACKUP_COUNT)
            )
        except OSError as e:
            _warn(f"Cannot open log file {config.file}: {e}. Logging to console only.")

    if log_format == "json":
        formatter: logging.Formatter = JSONFormatter()
    else:
        formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(numeric_level)
        handler.addFilter(SensitiveValueFilter())
        logging.root.addHandler(handler)

    logging.root.setLevel(numeric_level)

    logger = logging.getLogger("optscan")
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    logger.debug(f"Logging initialized at {log_level} ({log_format})")
    return logger

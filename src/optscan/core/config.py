"""Configuration dataclasses for optscan.

These dataclasses centralize the tunable behavior of the parser and of
logging. They can be created from environment variables or used directly
in code.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from optscan.core.constants import (
    DEFAULT_LOG_LEVEL,
    ENV_LOG_FILE,
    ENV_LOG_FORMAT,
    ENV_LOG_LEVEL,
    ENV_STRICT,
    TRUTHY_VALUES,
)


def _is_truthy(value: str | None) -> bool:
    return value is not None and value.strip().lower() in TRUTHY_VALUES


@dataclass
class LogConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level string (default: "WARNING")
        fmt: Output format, "text" or "json" (default: "text")
        file: Optional path of a rotating log file (default: console only)
    """

    level: str = DEFAULT_LOG_LEVEL
    fmt: str = "text"
    file: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> LogConfig:
        """Build from OPTSCAN_LOG_LEVEL, OPTSCAN_LOG_FORMAT and OPTSCAN_LOG_FILE."""
        env = os.environ if environ is None else environ
        return cls(
            level=env.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL),
            fmt=env.get(ENV_LOG_FORMAT, "text"),
            file=env.get(ENV_LOG_FILE) or None,
        )


@dataclass
class ParserConfig:
    """Configuration for building an option catalog.

    Attributes:
        inject_help: Add the reserved --help/-h flag (default: True)
        strict: Reject duplicate option names (default: False)
    """

    inject_help: bool = True
    strict: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ParserConfig:
        """Build from OPTSCAN_STRICT."""
        env = os.environ if environ is None else environ
        return cls(strict=_is_truthy(env.get(ENV_STRICT)))

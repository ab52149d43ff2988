"""Custom exceptions for optscan.

Configuration errors come from a malformed set of option definitions and
are raised before any scanning starts. Scan errors come from the argument
vector itself; the scanner raises the first one it meets and stops.
"""

from __future__ import annotations

from enum import Enum

from optscan.core.constants import MSG_INVALID, MSG_MISSING, MSG_TOO_MANY
from optscan.core.options import OptionSpec


class OptScanError(Exception):
    """Base exception for all optscan errors."""

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ConfigurationError(OptScanError):
    """Exception raised for malformed option definitions.

    Examples:
        - An option redefines --help or -h
        - An option has an empty help string
        - An option has neither a long nor a short name
        - An option file cannot be read or is not valid JSON
    """

    def __init__(
        self,
        message: str,
        option: OptionSpec | None = None,
        source: str | None = None,
        details: str | None = None,
    ):
        self.option = option
        self.source = source
        if details is None and option is not None and (option.has_long or option.has_short):
            details = option.intro
        super().__init__(message, details)

    def __str__(self) -> str:
        text = super().__str__()
        if self.source:
            return f"{self.source}: {text}"
        return text


class ScanErrorKind(Enum):
    """The three ways scanning an argument can fail."""

    INVALID = MSG_INVALID  # Token does not match any known option
    MISSING = MSG_MISSING  # A required option had no value available
    TOO_MANY = MSG_TOO_MANY  # A flag long option was given an attached value


class ScanError(OptScanError):
    """Exception raised when an argument cannot be scanned.

    Attributes:
        kind: Which of the three scan failures occurred
        option: The offending option. For unknown options this is an
            otherwise-empty OptionSpec carrying just the name that was given.
    """

    def __init__(self, kind: ScanErrorKind, option: OptionSpec):
        self.kind = kind
        self.option = option
        super().__init__(kind.value, option.intro)

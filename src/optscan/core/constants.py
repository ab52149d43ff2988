"""Constants and default values for optscan.

This module centralizes the fixed message strings, reserved names and
environment variable names used throughout the package.
"""

# ==================== SCAN ERROR MESSAGES ====================

MSG_INVALID: str = "invalid option"
MSG_MISSING: str = "option requires an argument"
MSG_TOO_MANY: str = "option takes no arguments"

# ==================== CONFIGURATION ERROR MESSAGES ====================

MSG_HELP_REDEFINED: str = "cannot redefine --help or -h"
MSG_HELP_MISSING: str = "missing help field"
MSG_NAMELESS: str = "option has neither a long nor a short name"
MSG_DUPLICATE: str = "duplicate option"
MSG_FILE_UNREADABLE: str = "cannot read option file"
MSG_FILE_INVALID: str = "invalid option file"

# ==================== RESERVED NAMES ====================

HELP_LONG: str = "help"
HELP_SHORT: str = "h"
HELP_TEXT: str = "Print this help message"

# The end-of-options marker; consumed and never part of the positionals
END_OF_OPTIONS: str = "--"

# ==================== HELP LAYOUT ====================

HELP_COLUMN_WIDTH: int = 50
HELP_SEPARATOR: str = "\t\t"

# ==================== LOGGING ====================

DEFAULT_LOG_LEVEL: str = "WARNING"
VALID_LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
VALID_LOG_FORMATS: tuple[str, ...] = ("text", "json")
LOG_FILE_MAX_BYTES: int = 1 * 1024 * 1024  # 1MB
LOG_FILE_BACKUP_COUNT: int = 3

# ==================== ENVIRONMENT VARIABLES ====================

ENV_LOG_LEVEL: str = "OPTSCAN_LOG_LEVEL"
ENV_LOG_FORMAT: str = "OPTSCAN_LOG_FORMAT"
ENV_LOG_FILE: str = "OPTSCAN_LOG_FILE"
ENV_STRICT: str = "OPTSCAN_STRICT"
ENV_OPTIONS_FILE: str = "OPTSCAN_OPTIONS"

TRUTHY_VALUES: frozenset[str] = frozenset({"1", "true", "yes", "on"})

# ==================== CLI EXIT CODES ====================

EXIT_OK: int = 0
EXIT_SCAN_ERROR: int = 1
EXIT_CONFIG_ERROR: int = 2
EXIT_HELP_SHOWN: int = 3  # Help for the scanned vector went to stderr; the script should stop

"""Core module - the option scanner and its building blocks.

This module provides:
- Version information
- Option definitions and parse results
- Custom exceptions
- The option catalog, scanner and driving loop
- Help rendering
- Configuration dataclasses and logging setup
"""

from optscan.core.version import __version__

from optscan.core.exceptions import (
    OptScanError,
    ConfigurationError,
    ScanError,
    ScanErrorKind,
)

from optscan.core.options import (
    Kind,
    OptionSpec,
    ParsedOption,
    flag_intro,
)

from optscan.core.catalog import HELP_OPTION, OptionCatalog
from optscan.core.scanner import Cursor, Scanner, step
from optscan.core.parse import ParseResult, parse
from optscan.core.help import exit_with_help, print_help, render_help
from optscan.core.specfile import load_option_specs
from optscan.core.config import LogConfig, ParserConfig
from optscan.core.colors import ConsoleColors

__all__ = [
    # Version
    '__version__',
    # Exceptions
    'OptScanError',
    'ConfigurationError',
    'ScanError',
    'ScanErrorKind',
    # Data model
    'Kind',
    'OptionSpec',
    'ParsedOption',
    'flag_intro',
    # Scanning
    'HELP_OPTION',
    'OptionCatalog',
    'Cursor',
    'Scanner',
    'step',
    'ParseResult',
    'parse',
    # Help
    'exit_with_help',
    'print_help',
    'render_help',
    # Configuration
    'load_option_specs',
    'LogConfig',
    'ParserConfig',
    'ConsoleColors',
]

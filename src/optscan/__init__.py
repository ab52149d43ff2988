"""
optscan - getopt_long style command-line argument scanning

Classifies an argument vector into recognized options (with optional
attached values) and trailing positional arguments, without permuting
the input order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from optscan.core import (
    HELP_OPTION,
    ConfigurationError,
    Cursor,
    Kind,
    OptionCatalog,
    OptionSpec,
    OptScanError,
    ParsedOption,
    ParseResult,
    Scanner,
    ScanError,
    ScanErrorKind,
    __version__,
    exit_with_help,
    load_option_specs,
    parse,
    print_help,
    render_help,
    step,
)

__all__ = [
    "HELP_OPTION",
    "ConfigurationError",
    "Cursor",
    "Kind",
    "OptScanError",
    "OptionCatalog",
    "OptionSpec",
    "ParseResult",
    "ParsedOption",
    "ScanError",
    "ScanErrorKind",
    "Scanner",
    "__version__",
    "exit_with_help",
    "load_option_specs",
    "main",
    "parse",
    "print_help",
    "render_help",
    "step",
]

if TYPE_CHECKING:
    from optscan.cli.main import main


def __getattr__(name: str) -> Any:
    if name == "main":
        from optscan.cli.main import main as cli_main

        return cli_main
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

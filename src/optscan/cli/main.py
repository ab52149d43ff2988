"""The ``optscan`` command: getopt(1) style scanning for shell scripts.

Usage::

    optscan --options opts.json [--format text|json] -- "$0" "$@"

The tool's own options are scanned with optscan itself. Everything left
after them is the argument vector to scan, starting with its program
name slot. On success the canonical form of the scanned options is
printed, followed by ``--`` and the positionals, ready for ``eval set --``.
Help for the scanned options is written to stderr with exit code 3.
"""

from __future__ import annotations

import json
import logging
import os
import shlex
import sys
from typing import NoReturn

from dotenv import load_dotenv

from optscan.core.catalog import OptionCatalog
from optscan.core.colors import ConsoleColors
from optscan.core.config import LogConfig, ParserConfig
from optscan.core.constants import (
    END_OF_OPTIONS,
    ENV_OPTIONS_FILE,
    EXIT_CONFIG_ERROR,
    EXIT_HELP_SHOWN,
    EXIT_OK,
    EXIT_SCAN_ERROR,
)
from optscan.core.exceptions import ConfigurationError, ScanError
from optscan.core.help import print_help
from optscan.core.logging import setup_logging
from optscan.core.options import Kind, OptionSpec
from optscan.core.parse import ParseResult, parse
from optscan.core.specfile import load_option_specs
from optscan.core.version import __version__

logger = logging.getLogger(__name__)

OUTPUT_FORMATS: tuple[str, ...] = ("text", "json")

TOOL_OPTIONS: tuple[OptionSpec, ...] = (
    OptionSpec(
        "options",
        "o",
        Kind.REQUIRED,
        "JSON file with the option definitions to scan for.\n"
        f"Defaults to ${ENV_OPTIONS_FILE}.",
    ),
    OptionSpec("format", "f", Kind.REQUIRED, "Output format: text (default) or json"),
    OptionSpec("strict", "", Kind.NONE, "Reject duplicate option names"),
    OptionSpec("log-level", "", Kind.REQUIRED, "DEBUG, INFO, WARNING (default), ERROR or CRITICAL"),
    OptionSpec("log-format", "", Kind.REQUIRED, "Log format: text (default) or json"),
    OptionSpec("no-color", "", Kind.NONE, "Disable colored output"),
    OptionSpec("version", "V", Kind.NONE, "Print the version and exit"),
)


class UsageError(Exception):
    """Raised for invalid use of the optscan command itself."""


def _exit_error(msg: str, code: int) -> NoReturn:
    """Print a coloured error message to stderr and exit with code."""
    print(ConsoleColors.error(f"ERROR: {msg}"), file=sys.stderr)
    sys.exit(code)


def _last_value(result: ParseResult, name: str, default: str | None = None) -> str | None:
    values = result.values(name)
    return values[-1] if values else default


def format_text(result: ParseResult) -> str:
    """Render a parse result as shell words.

    Options use their long name when they have one. Value-taking options
    are always followed by their (possibly empty) value.
    """
    words: list[str] = []
    for parsed in result.results:
        words.append(f"--{parsed.long}" if parsed.long else f"-{parsed.short}")
        if parsed.kind is not Kind.NONE:
            words.append(shlex.quote(parsed.value))
    words.append(END_OF_OPTIONS)
    words.extend(shlex.quote(arg) for arg in result.remaining)
    return " ".join(words)


def format_json(result: ParseResult) -> str:
    """Render a parse result as a JSON document."""
    document = {
        "options": [
            {"long": parsed.long or None, "short": parsed.short or None, "value": parsed.value}
            for parsed in result.results
        ],
        "positionals": result.remaining,
    }
    return json.dumps(document)


def _resolve_settings(tool: ParseResult) -> tuple[str, str, ParserConfig]:
    output_format = (_last_value(tool, "format", "text") or "").lower()
    if output_format not in OUTPUT_FORMATS:
        raise UsageError(f"--format must be one of {', '.join(OUTPUT_FORMATS)}, got '{output_format}'")

    options_file = _last_value(tool, "options") or os.environ.get(ENV_OPTIONS_FILE)
    if not options_file:
        raise UsageError(f"--options is required (or set {ENV_OPTIONS_FILE})")

    parser_config = ParserConfig.from_env()
    if tool.has("strict"):
        parser_config.strict = True
    return output_format, options_file, parser_config


def _configure_logging(tool: ParseResult) -> None:
    log_config = LogConfig.from_env()
    log_config.level = _last_value(tool, "log-level", log_config.level)
    log_config.fmt = _last_value(tool, "log-format", log_config.fmt)
    setup_logging(log_config)


def run(argv: list[str]) -> int:
    """Run the command against argv and return the exit code."""
    tool_catalog = OptionCatalog(TOOL_OPTIONS)
    tool = parse(tool_catalog, argv)
    if tool.error is not None:
        _exit_error(str(tool.error), EXIT_CONFIG_ERROR)
    if tool.help_requested:
        print_help(tool_catalog)
        return EXIT_OK
    if tool.has("version"):
        print(f"optscan {__version__}")
        return EXIT_OK
    if tool.has("no-color"):
        ConsoleColors.set_enabled(False)

    _configure_logging(tool)

    try:
        output_format, options_file, parser_config = _resolve_settings(tool)
    except UsageError as e:
        _exit_error(str(e), EXIT_CONFIG_ERROR)

    target_args = tool.remaining
    if not target_args:
        _exit_error("no arguments to scan (expected the program name first)", EXIT_CONFIG_ERROR)

    try:
        catalog = OptionCatalog(
            load_option_specs(options_file),
            inject_help=parser_config.inject_help,
            strict=parser_config.strict,
        )
    except ConfigurationError as e:
        _exit_error(str(e), EXIT_CONFIG_ERROR)

    result = parse(catalog, target_args)
    if result.help_requested:
        # stdout is reserved for the words passed to `eval set --`
        print_help(catalog, file=sys.stderr)
        return EXIT_HELP_SHOWN
    if result.error is not None:
        return _report_scan_error(result.error, target_args[0])

    logger.info(f"Scanned {len(result.results)} option(s) from {options_file}")
    if output_format == "json":
        print(format_json(result))
    else:
        print(format_text(result))
    return EXIT_OK


def _report_scan_error(error: ScanError, program: str) -> int:
    prefix = f"{program}: " if program else ""
    print(ConsoleColors.error(f"{prefix}{error}"), file=sys.stderr)
    return EXIT_SCAN_ERROR


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the optscan command."""
    load_dotenv()
    return run(list(sys.argv if argv is None else argv))


if __name__ == "__main__":
    sys.exit(main())

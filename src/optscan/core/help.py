"""Help listing for an option catalog.

Rendering is kept apart from parsing: ``parse`` only reports that help
was requested, and the host application decides whether to call
``exit_with_help``.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import NoReturn, TextIO

from optscan.core.catalog import OptionCatalog
from optscan.core.colors import ConsoleColors
from optscan.core.constants import EXIT_OK, HELP_COLUMN_WIDTH, HELP_SEPARATOR
from optscan.core.options import OptionSpec

# Single-form flags are padded so their descriptions line up better
_SINGLE_FORM_PAD = " " * 5


def _help_intro(option: OptionSpec) -> str:
    if option.has_long and option.has_short:
        return option.intro
    return option.intro + _SINGLE_FORM_PAD


def _as_catalog(options: Iterable[OptionSpec] | OptionCatalog) -> OptionCatalog:
    if isinstance(options, OptionCatalog):
        return options
    return OptionCatalog(options)


def render_help(options: Iterable[OptionSpec] | OptionCatalog) -> str:
    """Render the two-column help listing.

    Each option gets a block: the flag introduction and the first line of
    its help text, then any further help lines indented under the first,
    then a blank line. The listing starts with a blank line.

    Args:
        options: A catalog, or option definitions to build one from (the
            --help/-h flag is then added automatically).

    Returns:
        The listing, ending with a newline.
    """
    catalog = _as_catalog(options)
    lines = [""]
    for option in catalog:
        intro = _help_intro(option)
        help_lines = option.help.splitlines() or [""]

        first = ConsoleColors.ljust(help_lines[0], HELP_COLUMN_WIDTH)
        lines.append(f"{ConsoleColors.bold(intro)}{HELP_SEPARATOR}{first}")

        padding = " " * len(intro)
        for text in help_lines[1:]:
            text = ConsoleColors.ljust(text.lstrip(" \t"), HELP_COLUMN_WIDTH)
            lines.append(f"{padding}{HELP_SEPARATOR}{text}")
        lines.append("")
    return "\n".join(lines) + "\n"


def print_help(options: Iterable[OptionSpec] | OptionCatalog, file: TextIO | None = None) -> None:
    """Write the help listing to file (stdout by default)."""
    stream = file if file is not None else sys.stdout
    stream.write(render_help(options))
    stream.flush()


def exit_with_help(options: Iterable[OptionSpec] | OptionCatalog, file: TextIO | None = None) -> NoReturn:
    """Print the help listing and exit successfully."""
    print_help(options, file=file)
    raise SystemExit(EXIT_OK)

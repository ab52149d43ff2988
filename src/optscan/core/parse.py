"""The driving loop: scan every option, then hand back the positionals."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from optscan.core.catalog import OptionCatalog
from optscan.core.exceptions import ScanError
from optscan.core.options import OptionSpec, ParsedOption
from optscan.core.scanner import Cursor, step

logger = logging.getLogger(__name__)


@dataclass
class ParseResult:
    """Outcome of a full parse.

    Attributes:
        results: Recognized options in command-line order, up to the first error
        remaining: Unconsumed arguments. After a successful parse these are
            the positionals; after an error the offending argument comes first.
        error: The first scan error, if any
        help_requested: Whether the injected --help/-h flag was seen
    """

    results: list[ParsedOption] = field(default_factory=list)
    remaining: list[str] = field(default_factory=list)
    error: ScanError | None = None
    help_requested: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None

    def has(self, name: str) -> bool:
        """Check whether an option was given, by long or short name."""
        return any(parsed.matches(name) for parsed in self.results)

    def values(self, name: str) -> list[str]:
        """All values given for an option, by long or short name, in order."""
        return [parsed.value for parsed in self.results if parsed.matches(name)]


def parse(
    options: Iterable[OptionSpec] | OptionCatalog,
    args: Sequence[str],
    *,
    inject_help: bool = True,
    strict: bool = False,
) -> ParseResult:
    """Parse args against options without permuting them.

    ``args[0]`` is the program name and is skipped. Scanning stops at the
    first non-option argument, or after ``--`` (which is not included in
    the remaining arguments), or at the first error.

    Args:
        options: Option definitions, or an already built catalog (in which
            case inject_help and strict are ignored).
        args: The full argument vector.
        inject_help: Recognize --help/-h and reserve those names.
        strict: Reject duplicate option names.

    Returns:
        ParseResult with the options found so far, the remaining arguments
        and the first scan error, if any. Help is never printed here; see
        ``optscan.core.help.exit_with_help``.

    Raises:
        ConfigurationError: If the option definitions are malformed. Raised
            before any argument is scanned.
    """
    if isinstance(options, OptionCatalog):
        catalog = options
    else:
        catalog = OptionCatalog(options, inject_help=inject_help, strict=strict)

    result = ParseResult()
    cursor = Cursor()
    while True:
        try:
            cursor, parsed = step(cursor, catalog, args)
        except ScanError as e:
            result.error = e
            break
        if parsed is None:
            break
        if catalog.is_help(parsed):
            result.help_requested = True
        result.results.append(parsed)

    result.remaining = cursor.remaining(args)
    logger.debug(
        f"Parsed {len(result.results)} option(s), {len(result.remaining)} remaining argument(s)",
        extra={"scan_error": str(result.error) if result.error else None},
    )
    return result

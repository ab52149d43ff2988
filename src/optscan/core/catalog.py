"""Option catalog: validated, read-only option definitions with lookups."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from optscan.core.constants import (
    HELP_LONG,
    HELP_SHORT,
    HELP_TEXT,
    MSG_DUPLICATE,
    MSG_HELP_MISSING,
    MSG_HELP_REDEFINED,
    MSG_NAMELESS,
)
from optscan.core.exceptions import ConfigurationError
from optscan.core.options import Kind, OptionSpec, ParsedOption

logger = logging.getLogger(__name__)

HELP_OPTION = OptionSpec(long=HELP_LONG, short=HELP_SHORT, kind=Kind.NONE, help=HELP_TEXT)


class OptionCatalog:
    """Immutable set of option definitions for a single parse.

    All validation happens here, before any argument is scanned. Lookups
    return the first match in definition order. Duplicate names are only
    rejected when ``strict`` is set; otherwise the earlier definition wins.

    Args:
        options: Caller-supplied option definitions.
        inject_help: Append the reserved ``--help``/``-h`` flag and refuse
            caller options that use either name.
        strict: Reject duplicate long names and duplicate short names.

    Raises:
        ConfigurationError: If any option definition is malformed.
    """

    def __init__(self, options: Iterable[OptionSpec], *, inject_help: bool = True, strict: bool = False):
        user_options = tuple(options)
        for option in user_options:
            self._validate(option, inject_help)
        if strict:
            self._check_duplicates(user_options)

        self.inject_help = inject_help
        self.strict = strict
        self._options = user_options + (HELP_OPTION,) if inject_help else user_options
        logger.debug(f"Option catalog built with {len(self._options)} option(s)")

    @staticmethod
    def _validate(option: OptionSpec, inject_help: bool) -> None:
        if not option.has_long and not option.has_short:
            raise ConfigurationError(MSG_NAMELESS, option=option)
        if inject_help and (option.long == HELP_LONG or option.short == HELP_SHORT):
            raise ConfigurationError(MSG_HELP_REDEFINED, option=option)
        if not option.help:
            raise ConfigurationError(MSG_HELP_MISSING, option=option)

    @staticmethod
    def _check_duplicates(options: tuple[OptionSpec, ...]) -> None:
        seen_long: set[str] = set()
        seen_short: set[str] = set()
        for option in options:
            if option.long in seen_long or option.short in seen_short:
                raise ConfigurationError(MSG_DUPLICATE, option=option)
            if option.long:
                seen_long.add(option.long)
            if option.short:
                seen_short.add(option.short)

    @property
    def options(self) -> tuple[OptionSpec, ...]:
        return self._options

    def __iter__(self) -> Iterator[OptionSpec]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)

    def find_long(self, name: str) -> OptionSpec | None:
        """Return the first option whose long name is exactly name."""
        if not name:
            return None
        for option in self._options:
            if option.long == name:
                return option
        return None

    def find_short(self, code_point: str) -> OptionSpec | None:
        """Return the first option whose short name is exactly code_point."""
        if not code_point:
            return None
        for option in self._options:
            if option.short and option.short == code_point:
                return option
        return None

    def is_help(self, parsed: ParsedOption) -> bool:
        """Check whether parsed is the injected help flag."""
        return self.inject_help and parsed.option == HELP_OPTION

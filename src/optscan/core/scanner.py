"""The scanning state machine.

``step`` examines the argument vector at a cursor and produces exactly
one outcome: a recognized option (with the advanced cursor), "no more
options" (``None``), or a raised ScanError. Arguments are never permuted;
scanning stops at the first argument that does not look like an option,
or right after a ``--`` marker.

Short options may be clustered (``-abc``). Once a value-taking short
option is hit inside a cluster, the rest of that token is its value.
Code points, not bytes, are the unit for short names and cluster offsets.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, replace

from optscan.core.catalog import OptionCatalog
from optscan.core.constants import END_OF_OPTIONS
from optscan.core.exceptions import ScanError, ScanErrorKind
from optscan.core.options import Kind, OptionSpec, ParsedOption

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Cursor:
    """Scan position within an argument vector.

    Attributes:
        index: Index of the argument being examined. 0 means scanning has
            not started; slot 0 holds the program name and is always skipped.
        offset: Code-point offset inside a short-option cluster. Nonzero
            only while a cluster is partially consumed.
    """

    index: int = 0
    offset: int = 0

    @property
    def started(self) -> bool:
        return self.index > 0

    def next_argument(self, count: int = 1) -> Cursor:
        """Move past count whole arguments, leaving any cluster."""
        return Cursor(index=self.index + count, offset=0)

    def remaining(self, args: Sequence[str]) -> list[str]:
        """Arguments not yet consumed (the positionals once scanning ends)."""
        return list(args[max(self.index, 1):])


StepOutcome = tuple[Cursor, ParsedOption | None]


def step(cursor: Cursor, catalog: OptionCatalog, args: Sequence[str]) -> StepOutcome:
    """Scan one option from args at cursor.

    Returns:
        The advanced cursor and the recognized option, or the cursor and
        ``None`` when no more options remain. The cursor is only moved
        past a ``--`` marker in the latter case.

    Raises:
        ScanError: The argument at cursor is not a valid use of an option.
            The caller's cursor is left as it was.
    """
    if not cursor.started:
        cursor = Cursor(index=1)

    if cursor.index >= len(args):
        return cursor, None
    arg = args[cursor.index]

    if cursor.offset > 0:
        return _short(cursor, catalog, args, arg)

    if len(arg) < 2 or not arg.startswith("-"):
        return cursor, None

    if arg == END_OF_OPTIONS:
        return cursor.next_argument(), None

    if arg.startswith("--"):
        return _long(cursor, catalog, args, arg)

    return _short(replace(cursor, offset=1), catalog, args, arg)


def _short(cursor: Cursor, catalog: OptionCatalog, args: Sequence[str], arg: str) -> StepOutcome:
    code_point = arg[cursor.offset]
    option = catalog.find_short(code_point)
    if option is None:
        raise _error(ScanErrorKind.INVALID, OptionSpec(short=code_point))

    if option.kind is Kind.NONE:
        offset = cursor.offset + 1
        if offset == len(arg):
            return _found(cursor.next_argument(), option, "")
        return _found(replace(cursor, offset=offset), option, "")

    value = arg[cursor.offset + 1:]
    after = cursor.next_argument()

    if option.kind is Kind.OPTIONAL or value:
        return _found(after, option, value)

    # Required with nothing left in this token: take the next argument whole
    if after.index >= len(args):
        raise _error(ScanErrorKind.MISSING, option)
    return _found(after.next_argument(), option, args[after.index])


def _long(cursor: Cursor, catalog: OptionCatalog, args: Sequence[str], arg: str) -> StepOutcome:
    name, sep, value = arg[2:].partition("=")
    attached = bool(sep)

    option = catalog.find_long(name)
    if option is None:
        raise _error(ScanErrorKind.INVALID, OptionSpec(long=name))
    after = cursor.next_argument()

    if option.kind is Kind.NONE:
        if attached:
            raise _error(ScanErrorKind.TOO_MANY, option)
        return _found(after, option, "")

    if option.kind is Kind.OPTIONAL or attached:
        return _found(after, option, value)

    if after.index >= len(args):
        raise _error(ScanErrorKind.MISSING, option)
    return _found(after.next_argument(), option, args[after.index])


def _found(cursor: Cursor, option: OptionSpec, value: str) -> StepOutcome:
    logger.debug(
        f"Matched {option.intro} with value {value!r}",
        extra={"option_name": option.long or option.short, "option_value": value},
    )
    return cursor, ParsedOption(option=option, value=value)


def _error(kind: ScanErrorKind, option: OptionSpec) -> ScanError:
    error = ScanError(kind, option)
    logger.debug(f"Scan error: {error}")
    return error


class Scanner:
    """Iterator over the options in an argument vector.

    Holds a Cursor and calls ``step`` on each iteration. A ScanError
    propagates out of ``__next__`` without consuming the offending argument,
    so ``remaining`` still includes it.

    Example:
        >>> scanner = Scanner(catalog, ["prog", "-v", "file.txt"])
        >>> [parsed.short for parsed in scanner]
        ['v']
        >>> scanner.remaining
        ['file.txt']
    """

    def __init__(self, catalog: OptionCatalog, args: Sequence[str], cursor: Cursor | None = None):
        self.catalog = catalog
        self.args = list(args)
        self.cursor = cursor or Cursor()
        self.done = False

    def __iter__(self) -> Scanner:
        return self

    def __next__(self) -> ParsedOption:
        if self.done:
            raise StopIteration
        cursor, parsed = step(self.cursor, self.catalog, self.args)
        self.cursor = cursor
        if parsed is None:
            self.done = True
            raise StopIteration
        return parsed

    @property
    def remaining(self) -> list[str]:
        return self.cursor.remaining(self.args)

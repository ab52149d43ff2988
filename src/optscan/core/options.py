"""Option definitions and parse results.

These are leaf data types with no scanning behavior. An OptionSpec is
supplied by the caller; a ParsedOption is produced by the scanner for
each option it recognizes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Kind(Enum):
    """How an option uses a value."""

    NONE = "none"  # Boolean flag, never takes a value
    REQUIRED = "required"  # Value attached or taken from the next argument
    OPTIONAL = "optional"  # Value only when attached

    @classmethod
    def parse(cls, text: str) -> Kind:
        """Return the member named by text (case-insensitive)."""
        try:
            return cls(text.strip().lower())
        except ValueError:
            valid = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown option kind: {text!r}. Valid kinds: {valid}") from None


def flag_intro(long: str, short: str) -> str:
    """Render the flag introduction used in messages and help output."""
    if long and short:
        return f"--{long} (-{short})"
    if short:
        return f"-{short}"
    return f"--{long}"


@dataclass(frozen=True)
class OptionSpec:
    """A single option definition.

    Attributes:
        long: Long name without the leading ``--`` (empty when absent)
        short: A single code point without the leading ``-`` (empty when absent)
        kind: Whether the option takes no value, a required or an optional one
        help: Human-readable description shown in help output
    """

    long: str = ""
    short: str = ""
    kind: Kind = Kind.NONE
    help: str = ""

    def __post_init__(self) -> None:
        if len(self.short) > 1:
            raise ValueError(f"Short option must be a single character, got {self.short!r}")
        if not isinstance(self.kind, Kind):
            raise ValueError(f"Option kind must be a Kind, got {self.kind!r}")

    @property
    def has_long(self) -> bool:
        return bool(self.long)

    @property
    def has_short(self) -> bool:
        return bool(self.short)

    @property
    def intro(self) -> str:
        return flag_intro(self.long, self.short)


@dataclass(frozen=True)
class ParsedOption:
    """A successfully recognized option plus its extracted value.

    For ``Kind.OPTIONAL`` options an empty value means either that no value
    was attached or that an empty one was; the two cannot be told apart.
    """

    option: OptionSpec
    value: str = ""

    @property
    def long(self) -> str:
        return self.option.long

    @property
    def short(self) -> str:
        return self.option.short

    @property
    def kind(self) -> Kind:
        return self.option.kind

    def matches(self, name: str) -> bool:
        """Check whether name is this option's long or short name."""
        if not name:
            return False
        return name == self.option.long or name == self.option.short

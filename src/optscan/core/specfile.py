"""Load option definitions from a JSON file.

Accepted layouts::

    [{"long": "verbose", "short": "v", "help": "Talk more"}, ...]
    {"options": [{"long": "output", "kind": "required", "help": "..."}]}
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from optscan.core.constants import MSG_FILE_INVALID, MSG_FILE_UNREADABLE
from optscan.core.exceptions import ConfigurationError
from optscan.core.options import Kind, OptionSpec

logger = logging.getLogger(__name__)

OPTION_FIELDS: frozenset[str] = frozenset({"long", "short", "kind", "help"})


def _option_from_entry(entry: Any, position: int, source: str) -> OptionSpec:
    if not isinstance(entry, dict):
        raise ConfigurationError(
            MSG_FILE_INVALID, source=source, details=f"entry {position} is not an object"
        )

    unknown = sorted(set(entry) - OPTION_FIELDS)
    if unknown:
        logger.warning(f"{source}: ignoring unknown field(s) in entry {position}: {', '.join(unknown)}")

    values = {}
    for name in ("long", "short", "kind", "help"):
        value = entry.get(name, "")
        if not isinstance(value, str):
            raise ConfigurationError(
                MSG_FILE_INVALID, source=source, details=f"entry {position}: '{name}' must be a string"
            )
        values[name] = value

    try:
        kind = Kind.parse(values["kind"] or Kind.NONE.value)
        return OptionSpec(long=values["long"], short=values["short"], kind=kind, help=values["help"])
    except ValueError as e:
        raise ConfigurationError(MSG_FILE_INVALID, source=source, details=f"entry {position}: {e}") from e


def load_option_specs(path: str | Path) -> list[OptionSpec]:
    """Read option definitions from a JSON file.

    Args:
        path: Path to the option definition file.

    Returns:
        The options in file order. They are not validated as a set here;
        building an OptionCatalog does that.

    Raises:
        ConfigurationError: If the file cannot be read or is malformed.
    """
    source = str(path)
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigurationError(MSG_FILE_UNREADABLE, source=source, details=str(e)) from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(MSG_FILE_INVALID, source=source, details=f"invalid JSON: {e}") from e

    if isinstance(data, dict):
        data = data.get("options")
    if not isinstance(data, list):
        raise ConfigurationError(
            MSG_FILE_INVALID, source=source, details="expected a list of options or an 'options' list"
        )

    options = [_option_from_entry(entry, position, source) for position, entry in enumerate(data, start=1)]
    logger.debug(f"Loaded {len(options)} option(s) from {source}")
    return options

"""Pytest configuration and fixtures for optscan tests"""
import json
import logging

import pytest

from optscan.core.catalog import OptionCatalog
from optscan.core.colors import ConsoleColors
from optscan.core.options import Kind, OptionSpec


@pytest.fixture(autouse=True)
def plain_console():
    """Disable ANSI colors so output can be compared literally"""
    previous = ConsoleColors.is_enabled()
    ConsoleColors.set_enabled(False)
    yield
    ConsoleColors.set_enabled(previous)


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo handler changes made by setup_logging()"""
    handlers = logging.root.handlers[:]
    level = logging.root.level
    yield
    for handler in logging.root.handlers[:]:
        if handler not in handlers:
            handler.close()
            logging.root.removeHandler(handler)
    for handler in handlers:
        if handler not in logging.root.handlers:
            logging.root.addHandler(handler)
    logging.root.setLevel(level)


@pytest.fixture
def cluster_options():
    """Two flags and a required-value option, all short-only"""
    return [
        OptionSpec(short="a", kind=Kind.NONE, help="Flag a"),
        OptionSpec(short="b", kind=Kind.NONE, help="Flag b"),
        OptionSpec(short="c", kind=Kind.REQUIRED, help="Value for c"),
    ]


@pytest.fixture
def mixed_options():
    """A realistic option set covering every kind in long and short form"""
    return [
        OptionSpec("verbose", "v", Kind.NONE, "Print more output"),
        OptionSpec("output", "o", Kind.REQUIRED, "Write results to FILE"),
        OptionSpec("color", "c", Kind.OPTIONAL, "Colorize output"),
        OptionSpec("dry-run", "", Kind.NONE, "Do nothing"),
        OptionSpec("", "x", Kind.NONE, "Short-only flag"),
        OptionSpec("level", "", Kind.REQUIRED, "Long-only value"),
    ]


@pytest.fixture
def mixed_catalog(mixed_options):
    """Catalog built from mixed_options (with --help/-h injected)"""
    return OptionCatalog(mixed_options)


@pytest.fixture
def option_file(tmp_path, mixed_options):
    """Write mixed_options to a JSON option definition file"""
    entries = [
        {"long": option.long, "short": option.short, "kind": option.kind.value, "help": option.help}
        for option in mixed_options
    ]
    path = tmp_path / "options.json"
    path.write_text(json.dumps({"options": entries}))
    return path

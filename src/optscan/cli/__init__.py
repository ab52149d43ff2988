"""CLI module - the getopt(1) style ``optscan`` command."""

from optscan.cli.main import TOOL_OPTIONS, format_json, format_text, main

__all__ = [
    "TOOL_OPTIONS",
    "format_json",
    "format_text",
    "main",
]

"""Tests for the custom exception hierarchy and error message formats"""
import pytest

from optscan.core.exceptions import ConfigurationError, OptScanError, ScanError, ScanErrorKind
from optscan.core.options import Kind, OptionSpec


class TestOptScanError:
    """Test the base exception"""

    def test_message_only(self):
        error = OptScanError("Something failed")
        assert error.message == "Something failed"
        assert error.details is None
        assert str(error) == "Something failed"

    def test_message_with_details(self):
        assert str(OptScanError("Something failed", details="because")) == "Something failed: because"

    def test_hierarchy(self):
        assert issubclass(ConfigurationError, OptScanError)
        assert issubclass(ScanError, OptScanError)


class TestScanErrorFormat:
    """Test the user-facing scan error messages"""

    @pytest.mark.parametrize(
        "kind,option,expected",
        [
            (ScanErrorKind.INVALID, OptionSpec(long="nope"), "invalid option: --nope"),
            (ScanErrorKind.INVALID, OptionSpec(short="q"), "invalid option: -q"),
            (
                ScanErrorKind.MISSING,
                OptionSpec("out", "o", Kind.REQUIRED, "Output"),
                "option requires an argument: --out (-o)",
            ),
            (
                ScanErrorKind.TOO_MANY,
                OptionSpec("flag", "", Kind.NONE, "Flag"),
                "option takes no arguments: --flag",
            ),
        ],
    )
    def test_format(self, kind, option, expected):
        error = ScanError(kind, option)
        assert str(error) == expected
        assert error.kind is kind
        assert error.option is option

    def test_kind_values_are_messages(self):
        assert [kind.value for kind in ScanErrorKind] == [
            "invalid option",
            "option requires an argument",
            "option takes no arguments",
        ]


class TestConfigurationError:
    """Test configuration error context"""

    def test_option_rendered_as_details(self):
        error = ConfigurationError("missing help field", option=OptionSpec(short="v"))
        assert str(error) == "missing help field: -v"

    def test_source_prefix(self):
        error = ConfigurationError("invalid option file", source="opts.json", details="bad JSON")
        assert error.source == "opts.json"
        assert str(error) == "opts.json: invalid option file: bad JSON"

    def test_nameless_option_has_no_details(self):
        error = ConfigurationError("option has neither a long nor a short name", option=OptionSpec(help="x"))
        assert str(error) == "option has neither a long nor a short name"

    def test_long_only_option_rendered_as_details(self):
        error = ConfigurationError("duplicate option", option=OptionSpec(long="out", help="x"))
        assert str(error) == "duplicate option: --out"

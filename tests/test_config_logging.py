"""Tests for configuration dataclasses and logging setup"""
import json
import logging
from logging.handlers import RotatingFileHandler

import pytest

from optscan.core.colors import ConsoleColors
from optscan.core.config import LogConfig, ParserConfig
from optscan.core.logging import JSONFormatter, SensitiveValueFilter, setup_logging
from optscan.core.options import Kind, OptionSpec
from optscan.core.parse import parse


class TestLogConfig:
    """Test LogConfig defaults and environment loading"""

    def test_defaults(self):
        config = LogConfig()
        assert config.level == "WARNING"
        assert config.fmt == "text"
        assert config.file is None

    def test_from_env(self):
        env = {"OPTSCAN_LOG_LEVEL": "DEBUG", "OPTSCAN_LOG_FORMAT": "json", "OPTSCAN_LOG_FILE": "scan.log"}
        assert LogConfig.from_env(env) == LogConfig(level="DEBUG", fmt="json", file="scan.log")

    def test_from_env_empty_file_ignored(self):
        assert LogConfig.from_env({"OPTSCAN_LOG_FILE": ""}).file is None

    def test_from_os_environ(self, monkeypatch):
        monkeypatch.setenv("OPTSCAN_LOG_LEVEL", "ERROR")
        assert LogConfig.from_env().level == "ERROR"


class TestParserConfig:
    """Test ParserConfig environment loading"""

    @pytest.mark.parametrize("value", ["1", "true", "YES", " on "])
    def test_strict_truthy(self, value):
        assert ParserConfig.from_env({"OPTSCAN_STRICT": value}).strict is True

    @pytest.mark.parametrize("value", ["0", "false", "", "nope"])
    def test_strict_falsy(self, value):
        assert ParserConfig.from_env({"OPTSCAN_STRICT": value}).strict is False

    def test_defaults(self):
        config = ParserConfig.from_env({})
        assert config.inject_help is True
        assert config.strict is False


class TestSetupLogging:
    """Test root logger configuration"""

    def test_level_applied(self):
        setup_logging(LogConfig(level="debug"))
        assert logging.root.level == logging.DEBUG
        assert len(logging.root.handlers) == 1

    def test_invalid_level_falls_back(self, capsys):
        setup_logging(LogConfig(level="LOUD"))
        assert logging.root.level == logging.WARNING
        assert "Invalid log level 'LOUD'" in capsys.readouterr().err

    def test_fallback_warning_is_colored(self, capsys):
        ConsoleColors.set_enabled(True)
        setup_logging(LogConfig(fmt="xml"))
        err = capsys.readouterr().err
        assert err.startswith(f"{ConsoleColors.YELLOW}Warning: Invalid log format 'xml'")
        assert f"{ConsoleColors.RESET}\n" in err

    def test_invalid_format_falls_back(self, capsys):
        setup_logging(LogConfig(fmt="xml"))
        assert "Invalid log format 'xml'" in capsys.readouterr().err
        assert not isinstance(logging.root.handlers[0].formatter, JSONFormatter)

    def test_json_format(self):
        setup_logging(LogConfig(fmt="json"))
        assert isinstance(logging.root.handlers[0].formatter, JSONFormatter)

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "scan.log"
        setup_logging(LogConfig(level="DEBUG", file=str(log_file)))
        assert any(isinstance(h, RotatingFileHandler) for h in logging.root.handlers)
        parse([OptionSpec("verbose", "v", Kind.NONE, "Talk")], ["prog", "-v"])
        for handler in logging.root.handlers:
            handler.flush()
        assert "Matched --verbose (-v)" in log_file.read_text()

    def test_unwritable_log_file(self, tmp_path, capsys):
        setup_logging(LogConfig(file=str(tmp_path / "missing" / "scan.log")))
        assert len(logging.root.handlers) == 1
        assert "Cannot open log file" in capsys.readouterr().err


class TestJSONFormatter:
    """Test structured log output"""

    def test_fields_and_extras(self):
        record = logging.makeLogRecord({
            "name": "optscan.core.scanner",
            "levelname": "DEBUG",
            "levelno": logging.DEBUG,
            "msg": "Matched %s",
            "args": ("--out",),
            "option_name": "out",
        })
        entry = json.loads(JSONFormatter().format(record))
        assert entry["message"] == "Matched --out"
        assert entry["level"] == "DEBUG"
        assert entry["logger"] == "optscan.core.scanner"
        assert entry["option_name"] == "out"
        assert "timestamp" in entry


class TestSensitiveValueFilter:
    """Test redaction of secret-looking option values"""

    def _record(self, name, value):
        return logging.makeLogRecord({
            "msg": f"Matched --{name} with value {value!r}",
            "option_name": name,
            "option_value": value,
        })

    @pytest.mark.parametrize("name", ["password", "api-key", "auth-token", "client_secret"])
    def test_redacts_sensitive_names(self, name):
        record = self._record(name, "hunter2")
        assert SensitiveValueFilter().filter(record) is True
        assert "hunter2" not in record.getMessage()
        assert "[REDACTED]" in record.getMessage()
        assert record.option_value == "[REDACTED]"

    @pytest.mark.parametrize("name", ["output", "verbose", "keyboard"])
    def test_keeps_other_names(self, name):
        record = self._record(name, "visible")
        SensitiveValueFilter().filter(record)
        assert "visible" in record.getMessage()

    def test_redacted_in_scanner_output(self, caplog):
        options = [OptionSpec("password", "p", Kind.REQUIRED, "Secret")]
        with caplog.at_level(logging.DEBUG, logger="optscan"):
            caplog.handler.addFilter(SensitiveValueFilter())
            parse(options, ["prog", "--password=hunter2"])
        assert "hunter2" not in caplog.text

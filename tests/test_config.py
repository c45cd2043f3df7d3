"""
Configuration Tests
-------------------
Tests cover defaults, file precedence, environment overrides and validation.
"""

import json
import logging

import pytest

from cmdmap.config import load_config
from cmdmap.ui import init_logger


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults(self, tmp_path):
        cfg = load_config(tmp_path, environ={})
        assert cfg.commands_package == "plugins"
        assert cfg.log_level == "INFO"
        assert cfg.log_file_path is None
        assert cfg.prompt == "> "
        assert cfg.enable_completion is True
        assert cfg.strict_registration is False

    def test_toml_nested_keys(self, tmp_path):
        (tmp_path / "config.toml").write_text(
            '[log]\nlevel = "debug"\n\n[strict]\nregistration = true\n'
        )
        cfg = load_config(tmp_path, environ={})
        assert cfg.log_level == "DEBUG"
        assert cfg.strict_registration is True

    def test_toml_beats_json_beats_env_file(self, tmp_path):
        (tmp_path / ".env").write_text("PROMPT='env> '\nCOMMANDS_PACKAGE=from_env\n")
        (tmp_path / "config.json").write_text(json.dumps({"prompt": "json> "}))
        (tmp_path / "config.toml").write_text('prompt = "toml> "\n')
        cfg = load_config(tmp_path, environ={})
        assert cfg.prompt == "toml> "
        assert cfg.commands_package == "from_env"

    def test_environment_overrides_files(self, tmp_path):
        (tmp_path / "config.ini").write_text("[log]\nlog_level = WARNING\n")
        cfg = load_config(tmp_path, environ={"LOG_LEVEL": "error", "UNRELATED": "x"})
        assert cfg.log_level == "ERROR"
        assert "UNRELATED" not in cfg.extra

    def test_unknown_file_keys_kept_in_extra(self, tmp_path):
        (tmp_path / "config.toml").write_text('motd = "hi"\n')
        cfg = load_config(tmp_path, environ={})
        assert cfg.extra == {"MOTD": "hi"}

    def test_log_file_path_resolved(self, tmp_path):
        cfg = load_config(tmp_path, environ={"LOG_FILE_PATH": str(tmp_path / "logs" / "x.log")})
        assert cfg.log_file_path == (tmp_path / "logs" / "x.log").resolve()

    @pytest.mark.parametrize("env", [
        {"LOG_LEVEL": "loud"},
        {"ENABLE_COMPLETION": "maybe"},
        {"COMMANDS_PACKAGE": "not a module"},
    ])
    def test_invalid_values_rejected(self, tmp_path, env):
        with pytest.raises(ValueError):
            load_config(tmp_path, environ=env)

    def test_invalid_toml_rejected(self, tmp_path):
        (tmp_path / "config.toml").write_text("prompt = \n")
        with pytest.raises(ValueError):
            load_config(tmp_path, environ={})


class TestInitLogger:
    """Tests for init_logger."""

    def test_file_handler_receives_debug(self, tmp_path):
        logfile = tmp_path / "logs" / "cmdmap.log"
        logger = init_logger("cmdmap", level="INFO", logfile=logfile)
        logging.getLogger("cmdmap.commands").debug("Registered command: \x1b[31mgive\x1b[0m")
        for handler in logger.handlers:
            handler.flush()
        text = logfile.read_text(encoding="utf-8")
        assert "Registered command: give" in text
        assert "\x1b[" not in text

    def test_handlers_added_once(self):
        first = init_logger("cmdmap")
        count = len(first.handlers)
        second = init_logger("cmdmap", level=logging.DEBUG)
        assert second is first
        assert len(second.handlers) == count

from pathlib import Path

import pytest

from malpy import config


def test_defaults(monkeypatch):
    for var in ("MALPY_PROMPT", "MALPY_CONTINUATION_PROMPT", "MALPY_HISTORY_FILE",
                "MALPY_RECURSION_LIMIT", "MALPY_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    assert config.get_prompt() == "user> "
    assert config.get_continuation_prompt() == "...> "
    assert config.get_history_file() == Path.home() / ".malpy_history"
    assert config.get_recursion_limit() is None
    assert config.get_log_level() == "WARNING"


def test_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("MALPY_PROMPT", "> ")
    monkeypatch.setenv("MALPY_HISTORY_FILE", str(tmp_path / "hist"))
    monkeypatch.setenv("MALPY_RECURSION_LIMIT", "5000")
    monkeypatch.setenv("MALPY_LOG_LEVEL", "debug")
    assert config.get_prompt() == "> "
    assert config.get_history_file() == tmp_path / "hist"
    assert config.get_recursion_limit() == 5000
    assert config.get_log_level() == "DEBUG"


def test_empty_history_file_disables_history(monkeypatch):
    monkeypatch.setenv("MALPY_HISTORY_FILE", "  ")
    assert config.get_history_file() is None


def test_bad_recursion_limit(monkeypatch):
    monkeypatch.setenv("MALPY_RECURSION_LIMIT", "lots")
    with pytest.raises(ValueError):
        config.get_recursion_limit()
    monkeypatch.setenv("MALPY_RECURSION_LIMIT", "0")
    assert config.get_recursion_limit() is None

import importlib
import sys
import builtins
import types
import logging
import os
from pathlib import Path

import pytest


def _reload_config():
    sys.modules.pop("wordcrawl.config", None)
    return importlib.import_module("wordcrawl.config")


@pytest.fixture(autouse=True)
def _restore_config_module():
    yield
    sys.modules.pop("wordcrawl.config", None)
    importlib.import_module("wordcrawl.config")


def test_missing_dotenv_logs_warning(monkeypatch, caplog):
    orig_import = builtins.__import__

    def fake_import(name, globals=None, locals=None, fromlist=(), level=0):
        if name == "dotenv" or name.startswith("dotenv."):
            raise ImportError
        return orig_import(name, globals, locals, fromlist, level)

    monkeypatch.setattr(builtins, "__import__", fake_import)
    caplog.set_level(logging.WARNING)
    _reload_config()
    assert "python-dotenv not available" in caplog.text

    # environment fallback works
    monkeypatch.setenv("WORDCRAWL_USER_AGENT", "X-Agent")
    cfg = _reload_config()
    assert cfg.user_agent() == "X-Agent"


def test_dotenv_present_but_fails_to_load(monkeypatch, tmp_path):
    tmp_path.joinpath(".env").write_text("WORDCRAWL_USER_AGENT=FromFile")
    monkeypatch.chdir(tmp_path)

    fake = types.SimpleNamespace(load_dotenv=lambda: False)
    monkeypatch.setitem(sys.modules, "dotenv", fake)
    with pytest.raises(RuntimeError):
        _reload_config()


def test_dotenv_loads_sets_variables(monkeypatch, tmp_path):
    tmp_path.joinpath(".env").write_text("WORDCRAWL_USER_AGENT=DotenvAgent")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("WORDCRAWL_USER_AGENT", raising=False)

    def fake_load():
        # emulate dotenv behavior: read .env and set os.environ
        p = Path(".env")
        for line in p.read_text().splitlines():
            if "=" in line:
                k, v = line.split("=", 1)
                monkeypatch.setenv(k, v)
        return True

    fake = types.SimpleNamespace(load_dotenv=fake_load)
    monkeypatch.setitem(sys.modules, "dotenv", fake)
    cfg = _reload_config()
    assert cfg.user_agent() == "DotenvAgent"


def test_invalid_int_env_falls_back_to_default(monkeypatch, caplog):
    monkeypatch.setenv("WORDCRAWL_PARSE_TIMEOUT", "ten")
    cfg = _reload_config()
    assert cfg.parse_timeout_seconds() == 10
    assert "Invalid WORDCRAWL_PARSE_TIMEOUT" in caplog.text


def test_defaults_when_unset(monkeypatch):
    for name in ("WORDCRAWL_USER_AGENT", "WORDCRAWL_PARSE_TIMEOUT", "WORDCRAWL_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    cfg = _reload_config()
    assert cfg.user_agent() == "wordcrawl/0.1"
    assert cfg.parse_timeout_seconds() == 10
    assert cfg.log_level() == "INFO"

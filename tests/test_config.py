"""
Tests for configuration loading
"""
import pytest

from paintmap.config import load_config, resolve_config


def test_load_config(tmp_path):
    path = tmp_path / "server.yaml"
    path.write_text("port: 8080\ndefault_map_type: pref\n", encoding="utf-8")
    config = load_config(str(path))
    assert config.port == 8080
    assert config.default_map_type == "pref"
    assert config.api_paths == ["/", "/api"]


def test_load_config_empty_file(tmp_path):
    path = tmp_path / "server.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(str(path)).port == 3000


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "missing.yaml"))


def test_resolve_config_env_override(tmp_path, monkeypatch):
    path = tmp_path / "server.yaml"
    path.write_text("log_level: DEBUG\n", encoding="utf-8")
    monkeypatch.setenv("PAINTMAP_CONFIG", str(path))
    assert resolve_config().log_level == "DEBUG"


def test_resolve_config_defaults(tmp_path, monkeypatch):
    """No override and no config file: built-in defaults"""
    monkeypatch.delenv("PAINTMAP_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    assert resolve_config().default_map_type == "city"

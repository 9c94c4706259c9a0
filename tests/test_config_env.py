from __future__ import annotations

import dataclasses

import pytest

from apathy.config import Settings, _env, load_settings


def test_defaults():
    cfg = load_settings()
    assert cfg == Settings()
    assert cfg.log_dir is None
    assert cfg.log_max_size_mb is None
    assert cfg.log_max_files == 5
    assert cfg.api_port == 8000
    assert cfg.api_base_dir is None
    assert cfg.redact_paths is True


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("AP_LOG_DIR", str(tmp_path))
    monkeypatch.setenv("AP_LOG_MAX_SIZE_MB", "2")
    monkeypatch.setenv("AP_LOG_MAX_FILES", "7")
    monkeypatch.setenv("AP_API_PORT", "9123")
    monkeypatch.setenv("AP_API_BASE_DIR", "/srv/data")
    monkeypatch.setenv("AP_REDACT_PATHS", "0")

    cfg = load_settings()
    assert cfg.log_dir == str(tmp_path)
    assert cfg.log_max_size_mb == 2
    assert cfg.log_max_files == 7
    assert cfg.api_port == 9123
    assert cfg.api_base_dir == "/srv/data"
    assert cfg.redact_paths is False


def test_malformed_numbers_fall_back(monkeypatch):
    monkeypatch.setenv("AP_API_PORT", "eighty")
    monkeypatch.setenv("AP_LOG_MAX_FILES", "")
    monkeypatch.setenv("AP_LOG_MAX_SIZE_MB", "big")
    cfg = load_settings()
    assert cfg.api_port == 8000
    assert cfg.log_max_files == 5
    assert cfg.log_max_size_mb is None


def test_ci_defaults(monkeypatch):
    monkeypatch.setenv("CI", "true")
    cfg = load_settings()
    assert cfg.log_max_size_mb == 10
    assert cfg.log_max_files == 3


def test_only_ap_prefix_allowed():
    with pytest.raises(ValueError):
        _env("HOME", "")


def test_settings_frozen():
    cfg = load_settings()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.api_port = 1  # type: ignore[misc]

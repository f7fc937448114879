#!/usr/bin/env python3
"""
Unit tests for config and settings loading
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from data_loader import DEFAULT_CONFIG, load_config, load_settings

def test_load_config_from_repo():
    """Shipped config.json carries the brand and limits"""
    cfg = load_config()
    assert cfg["STORE_NAME"] == "De Jongh’s Panelbeating Centre"
    assert cfg["HISTORY_LIMIT"] == 12
    assert cfg["MAX_ATTACHMENTS"] == 3
    assert set(cfg["WELCOME_MESSAGE"]) == {"en", "af"}

def test_missing_config_uses_defaults(tmp_path):
    """Missing file falls back to the defaults"""
    assert load_config(str(tmp_path / "missing.json")) == DEFAULT_CONFIG

def test_broken_config_uses_defaults(tmp_path):
    """Invalid JSON falls back to the defaults"""
    path = tmp_path / "config.json"
    path.write_text("{not json")
    assert load_config(str(path)) == DEFAULT_CONFIG

def test_partial_config_overrides(tmp_path):
    """Keys in the file override the defaults"""
    path = tmp_path / "config.json"
    path.write_text('{"HISTORY_LIMIT": 6}')
    cfg = load_config(str(path))
    assert cfg["HISTORY_LIMIT"] == 6
    assert cfg["STORE_NAME"] == DEFAULT_CONFIG["STORE_NAME"]

def test_settings_from_environment(monkeypatch):
    """Host and port build the default API URL"""
    monkeypatch.delenv("CHAT_API_URL", raising=False)
    monkeypatch.setenv("CHAT_HOST", "0.0.0.0")
    monkeypatch.setenv("CHAT_PORT", "8000")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = load_settings()
    assert settings["port"] == 8000
    assert settings["api_url"] == "http://0.0.0.0:8000/api/chat"
    assert settings["log_level"] == "DEBUG"

def test_explicit_api_url(monkeypatch):
    monkeypatch.setenv("CHAT_API_URL", "http://shop.example/api/chat")
    assert load_settings()["api_url"] == "http://shop.example/api/chat"

if __name__ == "__main__":
    pytest.main([__file__])

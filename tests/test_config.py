"""
Tests for configuration and startup checks.
"""

import importlib
import sys
from unittest.mock import patch

import pytest

import llm_config
from errors import ConfigurationError


class TestRequireApiKey:

    def test_missing_key_is_fatal(self):
        with patch("llm_config.LLM_API_KEY", None), patch("llm_config.UI_TEST_MODE", False):
            with pytest.raises(ConfigurationError):
                llm_config.require_api_key()

    def test_key_present(self):
        with patch("llm_config.LLM_API_KEY", "abc"), patch("llm_config.UI_TEST_MODE", False):
            llm_config.require_api_key()

    def test_ui_test_mode_needs_no_key(self):
        with patch("llm_config.LLM_API_KEY", None), patch("llm_config.UI_TEST_MODE", True):
            llm_config.require_api_key()


class TestBoolEnv:

    @pytest.mark.parametrize("raw", ["1", "true", "YES", " y "])
    def test_truthy(self, monkeypatch, raw):
        monkeypatch.setenv("HG_FLAG", raw)
        assert llm_config._bool_env("HG_FLAG") is True

    def test_default(self, monkeypatch):
        monkeypatch.delenv("HG_FLAG", raising=False)
        assert llm_config._bool_env("HG_FLAG") is False
        assert llm_config._bool_env("HG_FLAG", "true") is True


class TestAppStartup:

    def test_import_without_key_fails_before_building_ui(self, monkeypatch):
        monkeypatch.setattr(sys, "argv", ["app.py"])
        monkeypatch.delitem(sys.modules, "app", raising=False)
        with patch("llm_config.LLM_API_KEY", None), patch(
            "llm_config.UI_TEST_MODE", False
        ), patch("logging_config.setup_logging"):
            with pytest.raises(ConfigurationError):
                importlib.import_module("app")
        assert "app" not in sys.modules

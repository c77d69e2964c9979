"""Tests for configuration loading."""

import importlib
import json

import pytest

from usergraph.api import settings


class TestEnvFlag:
    @pytest.mark.parametrize("value", ["1", "true", "TRUE", "yes", " on "])
    def test_true_values(self, monkeypatch, value):
        monkeypatch.setenv("USERGRAPH_TEST_FLAG", value)
        assert settings.env_flag("USERGRAPH_TEST_FLAG", False) is True

    @pytest.mark.parametrize("value", ["0", "false", "no", "off", ""])
    def test_false_values(self, monkeypatch, value):
        monkeypatch.setenv("USERGRAPH_TEST_FLAG", value)
        assert settings.env_flag("USERGRAPH_TEST_FLAG", True) is False

    def test_unset_uses_default(self, monkeypatch):
        monkeypatch.delenv("USERGRAPH_TEST_FLAG", raising=False)
        assert settings.env_flag("USERGRAPH_TEST_FLAG", True) is True
        assert settings.env_flag("USERGRAPH_TEST_FLAG", False) is False


class TestSettingsModule:
    def test_defaults_from_config_file(self):
        assert settings.DEFAULT_CONFIG_PATH.endswith("server.json")
        assert settings.config_data == {"DEBUG": False, "INTROSPECTION": True, "LOG_EVENTS": True}

    def test_config_file_and_env_override(self, monkeypatch, tmp_path):
        config = tmp_path / "server.json"
        config.write_text(json.dumps({"DEBUG": True, "INTROSPECTION": False}))
        monkeypatch.setenv("USERGRAPH_CONFIG", str(config))
        monkeypatch.setenv("USERGRAPH_INTROSPECTION", "yes")
        monkeypatch.delenv("USERGRAPH_DEBUG", raising=False)
        monkeypatch.delenv("USERGRAPH_LOG_EVENTS", raising=False)
        try:
            importlib.reload(settings)
            assert settings.DEBUG is True
            assert settings.INTROSPECTION is True
            assert settings.LOG_EVENTS is True
        finally:
            monkeypatch.undo()
            importlib.reload(settings)

"""Tests for api/settings module."""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from api.settings import Settings, get_settings


class TestSettingsDefaults:
    """Defaults suitable for local development."""

    def test_network_defaults(self):
        with patch.dict("os.environ", {}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.max_path_degrees == 6
        assert settings.max_ranked_paths == 10
        assert settings.path_enumeration_budget is None
        assert settings.default_focus_degrees == 3
        assert settings.suggested_intermediaries_limit == 5

    def test_pocketbase_defaults(self):
        with patch.dict("os.environ", {}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.pocketbase_url == "http://127.0.0.1:8090"
        assert settings.skip_pb_auth is False


class TestSettingsFromEnvironment:
    def test_network_overrides(self):
        env = {"MAX_PATH_DEGREES": "4", "PATH_ENUMERATION_BUDGET": "500", "DEFAULT_FOCUS_DEGREES": "2"}
        with patch.dict("os.environ", env, clear=True):
            settings = Settings(_env_file=None)

        assert settings.max_path_degrees == 4
        assert settings.path_enumeration_budget == 500
        assert settings.default_focus_degrees == 2

    @pytest.mark.parametrize("value", ["0", "7"])
    def test_degree_bound_outside_range_is_rejected(self, value):
        with patch.dict("os.environ", {"MAX_PATH_DEGREES": value}, clear=True):
            with pytest.raises(ValidationError):
                Settings(_env_file=None)

    def test_allowed_origins_are_split(self):
        env = {"ALLOWED_ORIGINS": "https://crm.example.com, http://localhost:5173,"}
        with patch.dict("os.environ", env, clear=True):
            settings = Settings(_env_file=None)

        assert settings.allowed_origins == ["https://crm.example.com", "http://localhost:5173"]


class TestAdminPasswordWarning:
    @pytest.mark.parametrize("password", ["", "password", "admin"])
    def test_insecure_password_warns(self, password, caplog):
        with patch.dict("os.environ", {"POCKETBASE_ADMIN_PASSWORD": password}, clear=True):
            with caplog.at_level(logging.WARNING, logger="api.settings"):
                Settings(_env_file=None)

        assert "SECURITY WARNING" in caplog.text

    def test_strong_password_is_quiet(self, caplog):
        with patch.dict("os.environ", {"POCKETBASE_ADMIN_PASSWORD": "c0rrect-h0rse"}, clear=True):
            with caplog.at_level(logging.WARNING, logger="api.settings"):
                Settings(_env_file=None)

        assert "SECURITY WARNING" not in caplog.text


def test_get_settings_is_cached():
    assert get_settings() is get_settings()

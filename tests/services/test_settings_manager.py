"""Unit tests for SettingsManager."""

import os
import tempfile
from pathlib import Path

import pytest

from word_explorer.services import SettingsManager
from word_explorer.services.settings_manager import (
    DEFAULT_API_URL,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_SEARCH_DEBOUNCE_MS,
    DEFAULT_SUGGESTION_DEBOUNCE_MS,
)


SETTING_NAMES = [
    "WORD_EXPLORER_API_URL",
    "WORD_EXPLORER_REQUEST_TIMEOUT",
    "WORD_EXPLORER_SUGGESTION_DEBOUNCE_MS",
    "WORD_EXPLORER_SEARCH_DEBOUNCE_MS",
    "WORD_EXPLORER_LOG_LEVEL",
]


@pytest.fixture
def temp_env_dir():
    """Provide a temporary directory for .env files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def clean_env():
    """Remove WORD_EXPLORER_* variables before and restore them after the test."""
    saved = {name: os.environ.pop(name, None) for name in SETTING_NAMES}
    yield
    for name, value in saved.items():
        if value is not None:
            os.environ[name] = value
        else:
            os.environ.pop(name, None)


def make_settings(env_dir: Path, content: str) -> SettingsManager:
    (env_dir / ".env").write_text(content)
    return SettingsManager(project_root=env_dir)


class TestSettingsDefaults:
    """Defaults apply when .env is missing or empty."""

    def test_missing_env_file_uses_defaults(self, temp_env_dir, clean_env):
        settings = SettingsManager(project_root=temp_env_dir)

        assert settings.get_api_url() == DEFAULT_API_URL
        assert settings.get_request_timeout() == DEFAULT_REQUEST_TIMEOUT
        assert settings.get_suggestion_debounce_ms() == DEFAULT_SUGGESTION_DEBOUNCE_MS == 300
        assert settings.get_search_debounce_ms() == DEFAULT_SEARCH_DEBOUNCE_MS == 600
        assert settings.get_log_level() == "INFO"

    def test_blank_values_use_defaults(self, temp_env_dir, clean_env):
        settings = make_settings(temp_env_dir, "WORD_EXPLORER_API_URL=   \n")
        assert settings.get_api_url() == DEFAULT_API_URL


class TestSettingsFromEnv:
    """Values are read from the .env file."""

    def test_api_url_strips_trailing_slash(self, temp_env_dir, clean_env):
        settings = make_settings(temp_env_dir, "WORD_EXPLORER_API_URL=https://dict.example/api/\n")
        assert settings.get_api_url() == "https://dict.example/api"

    def test_numeric_settings(self, temp_env_dir, clean_env):
        settings = make_settings(
            temp_env_dir,
            "WORD_EXPLORER_REQUEST_TIMEOUT=2.5\n"
            "WORD_EXPLORER_SUGGESTION_DEBOUNCE_MS=150\n"
            "WORD_EXPLORER_SEARCH_DEBOUNCE_MS=900\n",
        )

        assert settings.get_request_timeout() == 2.5
        assert settings.get_suggestion_debounce_ms() == 150
        assert settings.get_search_debounce_ms() == 900

    def test_malformed_numbers_fall_back(self, temp_env_dir, clean_env):
        settings = make_settings(
            temp_env_dir,
            "WORD_EXPLORER_REQUEST_TIMEOUT=soon\n"
            "WORD_EXPLORER_SEARCH_DEBOUNCE_MS=-5\n",
        )

        assert settings.get_request_timeout() == DEFAULT_REQUEST_TIMEOUT
        assert settings.get_search_debounce_ms() == DEFAULT_SEARCH_DEBOUNCE_MS

    def test_log_level_is_upper_cased(self, temp_env_dir, clean_env):
        settings = make_settings(temp_env_dir, "WORD_EXPLORER_LOG_LEVEL=debug\n")
        assert settings.get_log_level() == "DEBUG"

    def test_reload_env_picks_up_changes(self, temp_env_dir, clean_env):
        settings = make_settings(temp_env_dir, "WORD_EXPLORER_API_URL=http://old\n")
        assert settings.get_api_url() == "http://old"

        (temp_env_dir / ".env").write_text("WORD_EXPLORER_API_URL=http://new\n")
        settings.reload_env()
        assert settings.get_api_url() == "http://new"

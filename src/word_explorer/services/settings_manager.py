"""Settings Manager - Handles API endpoint and timing configuration."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


DEFAULT_API_URL = "http://localhost:3000"
DEFAULT_REQUEST_TIMEOUT = 10.0
DEFAULT_SUGGESTION_DEBOUNCE_MS = 300
DEFAULT_SEARCH_DEBOUNCE_MS = 600
DEFAULT_LOG_LEVEL = "INFO"


class SettingsManager:
    """
    Manages application settings.

    Reads WORD_EXPLORER_* variables from the .env file in the project root,
    falling back to defaults for anything missing or malformed.
    """

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    def get_api_url(self) -> str:
        """Base URL of the dictionary API, without trailing slash."""
        value = self._get("WORD_EXPLORER_API_URL")
        return (value or DEFAULT_API_URL).rstrip("/")

    def get_request_timeout(self) -> float:
        value = self._get("WORD_EXPLORER_REQUEST_TIMEOUT")
        try:
            timeout = float(value) if value else DEFAULT_REQUEST_TIMEOUT
        except ValueError:
            return DEFAULT_REQUEST_TIMEOUT
        return timeout if timeout > 0 else DEFAULT_REQUEST_TIMEOUT

    def get_suggestion_debounce_ms(self) -> int:
        return self._get_int("WORD_EXPLORER_SUGGESTION_DEBOUNCE_MS", DEFAULT_SUGGESTION_DEBOUNCE_MS)

    def get_search_debounce_ms(self) -> int:
        return self._get_int("WORD_EXPLORER_SEARCH_DEBOUNCE_MS", DEFAULT_SEARCH_DEBOUNCE_MS)

    def get_log_level(self) -> str:
        value = self._get("WORD_EXPLORER_LOG_LEVEL")
        return value.upper() if value else DEFAULT_LOG_LEVEL

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)

    def _get(self, name: str) -> Optional[str]:
        value = os.getenv(name)
        return value.strip() if value and value.strip() else None

    def _get_int(self, name: str, default: int) -> int:
        value = self._get(name)
        if value is None:
            return default
        try:
            parsed = int(value)
        except ValueError:
            return default
        return parsed if parsed >= 0 else default

"""Services layer - REST access, configuration and background workers."""

from word_explorer.services.api_client import (
	ApiClient,
	ApiError,
	EmptyResultFallbackError,
	UnauthorizedError,
)
from word_explorer.services.words_service import SearchOutcome, WordsService
from word_explorer.services.settings_manager import SettingsManager
from word_explorer.services.api_workers import SearchWorker, SuggestionWorker, WorkerSignals

__all__ = [
	"ApiClient",
	"ApiError",
	"UnauthorizedError",
	"EmptyResultFallbackError",
	"WordsService",
	"SearchOutcome",
	"SettingsManager",
	"SearchWorker",
	"SuggestionWorker",
	"WorkerSignals",
]

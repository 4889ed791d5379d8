"""Search Coordinator - debounced suggestions, paginated search and word selection."""

import logging
from typing import Callable, List, Optional

from PySide6.QtCore import QObject, QRunnable, QThreadPool, QTimer, Signal, Slot

from word_explorer.core import Notification, SearchSession, SuggestionItem, Word
from word_explorer.services import (
    ApiError,
    SearchOutcome,
    SearchWorker,
    SuggestionWorker,
    UnauthorizedError,
    WordsService,
)
from word_explorer.services.settings_manager import (
    DEFAULT_SEARCH_DEBOUNCE_MS,
    DEFAULT_SUGGESTION_DEBOUNCE_MS,
)
from word_explorer.services.words_service import MIN_SUGGESTION_LENGTH


logger = logging.getLogger(__name__)


class SearchCoordinator(QObject):
    """
    Owns the search session and the suggestion dropdown state.

    Responsibilities:
    - Debounce suggestion fetches (short window, 2+ characters)
    - Debounce search-on-type (longer window, page reset to 1)
    - Run API calls on the thread pool and apply only the latest response
    - Auto-select single results and fall back to exact lookup on zero results
    - Report failures as Notification values instead of raising
    """

    suggestions_changed = Signal(list)
    suggestions_visible_changed = Signal(bool)
    suggestions_loading_changed = Signal(bool)
    results_changed = Signal(list, int)
    selected_word_changed = Signal(object)
    loading_changed = Signal(bool)
    page_changed = Signal(int, int)  # page, total pages
    game_cleared = Signal()
    notification = Signal(object)

    def __init__(
        self,
        words_service: WordsService,
        suggestion_debounce_ms: int = DEFAULT_SUGGESTION_DEBOUNCE_MS,
        search_debounce_ms: int = DEFAULT_SEARCH_DEBOUNCE_MS,
        start_worker: Optional[Callable[[QRunnable], None]] = None,
    ):
        super().__init__()

        self.words_service = words_service
        self._start_worker = start_worker or QThreadPool.globalInstance().start

        self.session = SearchSession()

        # Suggestion dropdown state
        self.suggestions: List[SuggestionItem] = []
        self.suggestions_visible = False
        self.suggestions_loading = False

        # Latest issued request per kind; older responses are dropped
        self._suggestion_generation = 0
        self._search_generation = 0

        self._suggestion_timer = QTimer(self)
        self._suggestion_timer.setSingleShot(True)
        self._suggestion_timer.setInterval(suggestion_debounce_ms)
        self._suggestion_timer.timeout.connect(self._on_suggestion_timer)

        self._search_timer = QTimer(self)
        self._search_timer.setSingleShot(True)
        self._search_timer.setInterval(search_debounce_ms)
        self._search_timer.timeout.connect(self._on_search_timer)

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def query(self) -> str:
        return self.session.query

    @property
    def loading(self) -> bool:
        return self.session.loading

    @property
    def results(self) -> List[Word]:
        return self.session.results

    @property
    def total(self) -> int:
        return self.session.total

    @property
    def selected_word(self) -> Optional[Word]:
        return self.session.selected_word

    # ------------------------------------------------------------------
    # Query input
    # ------------------------------------------------------------------

    @Slot(str)
    def set_query(self, text: str):
        """
        Update the query text and restart both debounce windows.

        Args:
            text: Raw text from the search field
        """
        self.session.query = text
        self._suggestion_timer.start()

        if text.strip():
            self._search_timer.start()
            return

        # Cleared query: drop results and forget any in-flight search
        self._search_timer.stop()
        self._search_generation += 1
        self.session.reset()
        self._set_loading(False)
        self.results_changed.emit([], 0)
        self._emit_page()
        self._set_selected_word(None)

    @Slot()
    def clear_query(self):
        self.set_query("")

    @Slot()
    def submit(self):
        """Enter key or search button."""
        if not self.session.trimmed_query:
            return
        self._set_suggestions_visible(False)
        self.search()

    @Slot(object)
    def choose_suggestion(self, item: SuggestionItem):
        """Use a suggestion as the query and search it right away."""
        self._suggestion_timer.stop()
        self._search_timer.stop()
        self._suggestion_generation += 1
        self._set_suggestions_loading(False)
        self._set_suggestions_visible(False)

        self.session.query = item.term
        self.session.page = 1
        self.search(item.term)

    @Slot()
    def dismiss_suggestions(self):
        """Click outside the dropdown."""
        self._set_suggestions_visible(False)

    @Slot()
    def focus_query(self):
        """Re-open the dropdown when the field regains focus."""
        if len(self.session.trimmed_query) >= MIN_SUGGESTION_LENGTH and (
            self.suggestions or self.suggestions_loading
        ):
            self._set_suggestions_visible(True)

    # ------------------------------------------------------------------
    # Suggestions
    # ------------------------------------------------------------------

    @Slot()
    def _on_suggestion_timer(self):
        text = self.session.trimmed_query
        if len(text) >= MIN_SUGGESTION_LENGTH:
            self.fetch_suggestions(text)
            return

        self._suggestion_generation += 1
        self._set_suggestions_loading(False)
        self._set_suggestions([])
        self._set_suggestions_visible(False)

    def fetch_suggestions(self, text: str):
        """
        Fetch suggestions for `text` on the thread pool.

        A later call supersedes this one even if its response arrives first.
        """
        self._suggestion_generation += 1
        generation = self._suggestion_generation
        self._set_suggestions_loading(True)

        worker = SuggestionWorker(self.words_service, text.strip(), generation)
        worker.signals.suggestions_result.connect(self._on_suggestions_result)
        worker.signals.error.connect(self._on_suggestions_error)
        worker.signals.finished.connect(self._on_suggestions_finished)
        self._start_worker(worker)

    @Slot(int, object)
    def _on_suggestions_result(self, generation: int, items: List[SuggestionItem]):
        if generation != self._suggestion_generation:
            logger.debug("Discarding stale suggestions (generation %s)", generation)
            return
        self._set_suggestions(list(items))
        self._set_suggestions_visible(True)

    @Slot(int, object)
    def _on_suggestions_error(self, generation: int, error: Exception):
        if generation != self._suggestion_generation:
            return
        logger.warning("Suggestion fetch failed: %s", error)
        self._set_suggestions([])
        self._set_suggestions_visible(False)

    @Slot(int)
    def _on_suggestions_finished(self, generation: int):
        if generation == self._suggestion_generation:
            self._set_suggestions_loading(False)

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    @Slot()
    def _on_search_timer(self):
        self.session.page = 1
        self._emit_page()
        self.search()

    def search(self, term_override: Optional[str] = None):
        """
        Search the override term, or the current query, at the current page.

        Args:
            term_override: Term to search instead of the query text
        """
        term = (term_override or self.session.query).strip()
        if not term:
            return

        self._search_generation += 1
        generation = self._search_generation

        self._set_loading(True)
        self.game_cleared.emit()
        self._set_selected_word(None)

        worker = SearchWorker(
            self.words_service,
            term,
            self.session.page,
            self.session.limit,
            generation,
        )
        worker.signals.search_result.connect(self._on_search_result)
        worker.signals.error.connect(self._on_search_error)
        worker.signals.finished.connect(self._on_search_finished)
        self._start_worker(worker)

    @Slot(int, object)
    def _on_search_result(self, generation: int, outcome: SearchOutcome):
        if generation != self._search_generation:
            logger.debug("Discarding stale search result (generation %s)", generation)
            return

        self.session.results = list(outcome.results)
        self.session.total = outcome.total
        self.results_changed.emit(self.session.results, self.session.total)
        self._emit_page()

        if outcome.selected_word is not None:
            self._set_selected_word(outcome.selected_word)

    @Slot(int, object)
    def _on_search_error(self, generation: int, error: Exception):
        if generation != self._search_generation:
            return

        logger.error("Search for '%s' failed: %s", self.session.trimmed_query, error)
        self.session.clear_results()
        self.results_changed.emit([], 0)
        self._emit_page()

        if isinstance(error, UnauthorizedError):
            self.notification.emit(Notification.error("Unauthorized", error.message))
        elif isinstance(error, ApiError):
            self.notification.emit(Notification.error("Search failed", error.message))
        else:
            self.notification.emit(
                Notification.error("Search failed", f"Unexpected search error: {error}")
            )

    @Slot(int)
    def _on_search_finished(self, generation: int):
        if generation == self._search_generation:
            self._set_loading(False)

    @Slot(int)
    def change_page(self, new_page: int):
        """
        Re-run the current query at `new_page`.

        Args:
            new_page: 1-based page, already clamped by the caller
        """
        self.session.page = new_page
        self._emit_page()
        self.search()

    @Slot(object)
    def select_word(self, word: Word):
        """Result card clicked."""
        self._set_selected_word(word)
        self.game_cleared.emit()

    # ------------------------------------------------------------------
    # State helpers
    # ------------------------------------------------------------------

    def _set_loading(self, loading: bool):
        if self.session.loading != loading:
            self.session.loading = loading
            self.loading_changed.emit(loading)

    def _set_selected_word(self, word: Optional[Word]):
        self.session.selected_word = word
        self.selected_word_changed.emit(word)

    def _set_suggestions(self, items: List[SuggestionItem]):
        self.suggestions = items
        self.suggestions_changed.emit(items)

    def _set_suggestions_visible(self, visible: bool):
        if self.suggestions_visible != visible:
            self.suggestions_visible = visible
            self.suggestions_visible_changed.emit(visible)

    def _set_suggestions_loading(self, loading: bool):
        if self.suggestions_loading != loading:
            self.suggestions_loading = loading
            self.suggestions_loading_changed.emit(loading)

    def _emit_page(self):
        self.page_changed.emit(self.session.page, self.session.total_pages)

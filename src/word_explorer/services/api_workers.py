"""Async workers for non-blocking API calls using Qt threading."""

from PySide6.QtCore import QObject, QRunnable, Signal, Slot

from word_explorer.services.words_service import WordsService


class WorkerSignals(QObject):
    """
    Signals for communicating results from worker threads.

    QRunnable doesn't inherit from QObject, so we need a separate
    QObject to hold the signals. Every signal carries the generation number
    the worker was started with, so receivers can drop stale responses.
    """
    finished = Signal(int)
    error = Signal(int, object)  # ApiError
    search_result = Signal(int, object)  # SearchOutcome
    suggestions_result = Signal(int, object)  # List[SuggestionItem]


class SearchWorker(QRunnable):
    """
    Worker that runs the paginated search (plus exact-term fallback) in a
    background thread.
    """

    def __init__(
        self,
        words_service: WordsService,
        query: str,
        page: int,
        limit: int,
        generation: int,
    ):
        super().__init__()
        self.words_service = words_service
        self.query = query
        self.page = page
        self.limit = limit
        self.generation = generation
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Execute the search API calls in background thread."""
        try:
            outcome = self.words_service.search_with_fallback(
                self.query, page=self.page, limit=self.limit
            )
            self.signals.search_result.emit(self.generation, outcome)
        except Exception as e:
            # ApiError subclasses and anything unexpected are reported, never raised
            self.signals.error.emit(self.generation, e)
        finally:
            self.signals.finished.emit(self.generation)


class SuggestionWorker(QRunnable):
    """Worker that fetches typeahead suggestions in a background thread."""

    def __init__(self, words_service: WordsService, text: str, generation: int):
        super().__init__()
        self.words_service = words_service
        self.text = text
        self.generation = generation
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Execute the suggestion API call in background thread."""
        try:
            items = self.words_service.get_suggestions(self.text)
            self.signals.suggestions_result.emit(self.generation, items)
        except Exception as e:
            self.signals.error.emit(self.generation, e)
        finally:
            self.signals.finished.emit(self.generation)

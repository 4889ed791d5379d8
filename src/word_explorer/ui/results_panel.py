"""Results Panel - search result cards, pagination and empty states."""

from typing import List, Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from word_explorer.core import Word


MAX_PREVIEW_DEFINITIONS = 2
MAX_PREVIEW_SYNONYMS = 4

WELCOME_MESSAGE = (
    "Welcome to the dictionary\n"
    "Type a word above to explore meanings, examples and synonyms."
)


def format_result_header(total: int, query: str) -> str:
    suffix = "s" if total > 1 else ""
    return f'{total} result{suffix} for "{query}"'


def format_empty_message(query: str) -> str:
    return (
        "No words found\n"
        f'We could not find "{query}". Try another spelling or add it yourself!'
    )


def format_result_summary(word: Word) -> str:
    """Plain-text card for one result: term, phonetic, first definitions, synonyms."""
    lines = [word.term]
    if word.phonetic:
        lines.append(word.phonetic)

    for definition in word.definitions[:MAX_PREVIEW_DEFINITIONS]:
        lines.append(f"[{definition.part_of_speech}] {definition.meaning}")
    hidden = len(word.definitions) - MAX_PREVIEW_DEFINITIONS
    if hidden > 0:
        lines.append(f"+{hidden} definition{'s' if hidden > 1 else ''}")

    synonyms = word.synonym_terms
    if synonyms:
        preview = ", ".join(synonyms[:MAX_PREVIEW_SYNONYMS])
        extra = len(synonyms) - MAX_PREVIEW_SYNONYMS
        lines.append(preview + (f" +{extra}" if extra > 0 else ""))

    return "\n".join(lines)


class ResultsPanel(QWidget):
    """Lists result words; clicking one selects it."""

    word_clicked = Signal(object)  # Word
    page_requested = Signal(int)

    def __init__(self):
        super().__init__()
        self._page = 1
        self._total_pages = 0
        self._setup_ui()
        self.show_welcome()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.header_label = QLabel()
        self.header_label.setStyleSheet("font-size: 18px; font-weight: bold;")
        layout.addWidget(self.header_label)

        self.results_list = QListWidget()
        self.results_list.setWordWrap(True)
        self.results_list.setSpacing(4)
        self.results_list.itemClicked.connect(self._on_item_clicked)
        layout.addWidget(self.results_list, stretch=1)

        self.empty_label = QLabel()
        self.empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.empty_label.setWordWrap(True)
        self.empty_label.setStyleSheet("color: #888888; font-size: 16px;")
        layout.addWidget(self.empty_label)

        # Pagination
        self.pagination_bar = QWidget()
        pagination_layout = QHBoxLayout(self.pagination_bar)
        pagination_layout.setContentsMargins(0, 0, 0, 0)

        self.previous_button = QPushButton("Previous")
        self.previous_button.clicked.connect(self._on_previous)
        pagination_layout.addWidget(self.previous_button)

        self.page_label = QLabel()
        self.page_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        pagination_layout.addWidget(self.page_label, stretch=1)

        self.next_button = QPushButton("Next")
        self.next_button.clicked.connect(self._on_next)
        pagination_layout.addWidget(self.next_button)

        layout.addWidget(self.pagination_bar)

    def display_results(self, words: List[Word], total: int, query: str):
        """Render a page of results, or the empty/welcome state."""
        self.results_list.clear()

        if not words:
            if query:
                self.show_empty(query)
            else:
                self.show_welcome()
            return

        for word in words:
            item = QListWidgetItem(format_result_summary(word))
            item.setData(Qt.ItemDataRole.UserRole, word)
            self.results_list.addItem(item)

        self.header_label.setText(format_result_header(total, query))
        self.header_label.show()
        self.results_list.show()
        self.empty_label.hide()

    def show_empty(self, query: str):
        self._show_message(format_empty_message(query))

    def show_welcome(self):
        self._show_message(WELCOME_MESSAGE)

    def _show_message(self, message: str):
        self.results_list.clear()
        self.header_label.hide()
        self.results_list.hide()
        self.pagination_bar.hide()
        self.empty_label.setText(message)
        self.empty_label.show()

    def set_page(self, page: int, total_pages: int):
        """Pagination is only shown when there is more than one page."""
        self._page = page
        self._total_pages = total_pages
        self.page_label.setText(f"Page {page} of {total_pages}")
        self.previous_button.setEnabled(page > 1)
        self.next_button.setEnabled(page < total_pages)
        self.pagination_bar.setVisible(total_pages > 1)

    def highlight_selected(self, word: Optional[Word]):
        for row in range(self.results_list.count()):
            item = self.results_list.item(row)
            item_word: Word = item.data(Qt.ItemDataRole.UserRole)
            item.setSelected(word is not None and item_word.id == word.id)

    def _on_item_clicked(self, item: QListWidgetItem):
        self.word_clicked.emit(item.data(Qt.ItemDataRole.UserRole))

    def _on_previous(self):
        if self._page > 1:
            self.page_requested.emit(self._page - 1)

    def _on_next(self):
        if self._page < self._total_pages:
            self.page_requested.emit(self._page + 1)

"""Search Bar - query field with search/clear buttons and a suggestion dropdown."""

from typing import List, override

from PySide6.QtCore import QEvent, QObject, QPoint, Qt, Signal
from PySide6.QtWidgets import (
    QApplication,
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from word_explorer.core import SuggestionItem


class SearchBar(QWidget):
    """Text input that forwards keystrokes and shows typeahead suggestions."""

    text_changed = Signal(str)
    submitted = Signal()
    suggestion_chosen = Signal(object)  # SuggestionItem
    focused = Signal()
    dismissed = Signal()

    def __init__(self, placeholder: str = "Search for a word..."):
        super().__init__()
        self._suggestions: List[SuggestionItem] = []
        self._dropdown_requested = False
        self._suggestions_loading = False
        self._loading = False

        self._setup_ui(placeholder)

        # Focus and click-outside detection
        self.input.installEventFilter(self)
        app = QApplication.instance()
        if app is not None:
            app.installEventFilter(self)

    def _setup_ui(self, placeholder: str):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)

        row = QHBoxLayout()
        self.input = QLineEdit()
        self.input.setPlaceholderText(placeholder)
        self.input.setClearButtonEnabled(False)
        self.input.textChanged.connect(self._on_text_changed)
        self.input.returnPressed.connect(self._on_submit)
        row.addWidget(self.input, stretch=1)

        self.clear_button = QPushButton("✕")
        self.clear_button.setFixedWidth(32)
        self.clear_button.setToolTip("Clear")
        self.clear_button.clicked.connect(self._on_clear)
        self.clear_button.hide()
        row.addWidget(self.clear_button)

        self.search_button = QPushButton("Search")
        self.search_button.setEnabled(False)
        self.search_button.clicked.connect(self._on_submit)
        row.addWidget(self.search_button)
        layout.addLayout(row)

        # Dropdown
        self.dropdown = QFrame()
        self.dropdown.setFrameShape(QFrame.Shape.StyledPanel)
        dropdown_layout = QVBoxLayout(self.dropdown)
        dropdown_layout.setContentsMargins(4, 4, 4, 4)

        self.status_label = QLabel()
        self.status_label.setStyleSheet("color: #888888;")
        dropdown_layout.addWidget(self.status_label)

        self.suggestion_list = QListWidget()
        self.suggestion_list.setMaximumHeight(240)
        self.suggestion_list.itemClicked.connect(self._on_item_clicked)
        dropdown_layout.addWidget(self.suggestion_list)

        self.dropdown.hide()
        layout.addWidget(self.dropdown)

    # ------------------------------------------------------------------
    # Public API (driven by SearchCoordinator signals)
    # ------------------------------------------------------------------

    def text(self) -> str:
        return self.input.text()

    def set_text(self, text: str):
        """Replace the field text without emitting text_changed."""
        self.input.blockSignals(True)
        self.input.setText(text)
        self.input.blockSignals(False)
        self._update_buttons()

    def set_suggestions(self, items: List[SuggestionItem]):
        self._suggestions = list(items)
        self.suggestion_list.clear()
        for item in self._suggestions:
            list_item = QListWidgetItem(item.term)
            list_item.setData(Qt.ItemDataRole.UserRole, item)
            list_item.setToolTip(f"ID: {item.id}")
            self.suggestion_list.addItem(list_item)
        self._refresh_dropdown()

    def set_suggestions_visible(self, visible: bool):
        self._dropdown_requested = visible
        self._refresh_dropdown()

    def set_suggestions_loading(self, loading: bool):
        self._suggestions_loading = loading
        self._refresh_dropdown()

    def set_loading(self, loading: bool):
        """Lock the search button while a search is running; the field keeps focus and stays editable."""
        self._loading = loading
        self._update_buttons()

    # ------------------------------------------------------------------
    # Internal handlers
    # ------------------------------------------------------------------

    def _refresh_dropdown(self):
        if self._suggestions_loading:
            self.status_label.setText("Searching suggestions...")
            self.status_label.show()
            self.suggestion_list.hide()
        elif not self._suggestions:
            self.status_label.setText("No suggestions found")
            self.status_label.show()
            self.suggestion_list.hide()
        else:
            self.status_label.hide()
            self.suggestion_list.show()
        self.dropdown.setVisible(self._dropdown_requested)

    def _update_buttons(self):
        self.clear_button.setVisible(bool(self.input.text()))
        self.search_button.setEnabled(bool(self.input.text().strip()) and not self._loading)
        self.search_button.setText("..." if self._loading else "Search")

    def _on_text_changed(self, text: str):
        self._update_buttons()
        self.text_changed.emit(text)

    def _on_submit(self):
        if self.input.text().strip():
            self.submitted.emit()

    def _on_clear(self):
        self.input.clear()
        self.input.setFocus()

    def _on_item_clicked(self, list_item: QListWidgetItem):
        item: SuggestionItem = list_item.data(Qt.ItemDataRole.UserRole)
        self.set_text(item.term)
        self.suggestion_chosen.emit(item)
        self.input.setFocus()

    @staticmethod
    def _contains(widget: QWidget, global_pos: QPoint) -> bool:
        return widget.isVisible() and widget.rect().contains(widget.mapFromGlobal(global_pos))

    @override
    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        if watched is self.input and event.type() == QEvent.Type.FocusIn:
            self.focused.emit()
        elif event.type() == QEvent.Type.MouseButtonPress and self.dropdown.isVisible():
            global_pos = event.globalPosition().toPoint()
            if not (self._contains(self.input, global_pos) or self._contains(self.dropdown, global_pos)):
                self.dismissed.emit()
        return super().eventFilter(watched, event)

"""Main Window - Application shell hosting search, selected word, games and results."""

from typing import Optional, override

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction, QKeyEvent
from PySide6.QtWidgets import (
    QLabel,
    QMainWindow,
    QMessageBox,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from word_explorer.core import Notification, NotificationLevel, Word

from .results_panel import ResultsPanel
from .search_bar import SearchBar
from .word_card import WordCard
from .word_games_panel import WordGamesPanel


STATUS_TIMEOUT_MS = 4000


class MainWindow(QMainWindow):
    """Provides the application shell, menus and notification display."""

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Word Explorer")
        self.setGeometry(100, 100, 1100, 800)

        self._setup_ui()
        self._create_menu_bar()

    def _setup_ui(self):
        """Initialize the main UI layout."""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        self.main_layout = QVBoxLayout(central_widget)
        self.main_layout.setContentsMargins(16, 16, 16, 16)

        title = QLabel("Discover the meaning of words")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        title.setStyleSheet("font-size: 26px; font-weight: bold;")
        self.main_layout.addWidget(title)

        subtitle = QLabel("Full definitions, real examples, synonyms and pronunciation.")
        subtitle.setAlignment(Qt.AlignmentFlag.AlignCenter)
        subtitle.setStyleSheet("color: #888888;")
        self.main_layout.addWidget(subtitle)

        self.search_bar = SearchBar()
        self.main_layout.addWidget(self.search_bar)

        self.loading_label = QLabel("Loading...")
        self.loading_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.loading_label.hide()
        self.main_layout.addWidget(self.loading_label)

        # Scrollable content: selected word + games, then the result list
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        content = QWidget()
        content_layout = QVBoxLayout(content)

        self.word_card = WordCard()
        self.word_card.hide()
        content_layout.addWidget(self.word_card)

        self.games_panel = WordGamesPanel()
        self.games_panel.hide()
        content_layout.addWidget(self.games_panel)

        self.results_panel = ResultsPanel()
        content_layout.addWidget(self.results_panel, stretch=1)

        scroll.setWidget(content)
        self.main_layout.addWidget(scroll, stretch=1)

        self.word_card.notification.connect(self.show_notification)

    def _create_menu_bar(self):
        """Create the application menu bar."""
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("&File")

        focus_action = QAction("&Search", self)
        focus_action.setShortcut("Ctrl+F")
        focus_action.triggered.connect(self.focus_search)
        file_menu.addAction(focus_action)

        file_menu.addSeparator()

        exit_action = QAction("E&xit", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

    def focus_search(self):
        self.search_bar.input.setFocus()
        self.search_bar.input.selectAll()

    def set_loading(self, loading: bool):
        """Hide the result area while a search is in flight."""
        self.loading_label.setVisible(loading)
        self.results_panel.setVisible(not loading)
        self.search_bar.set_loading(loading)

    def show_selected_word(self, word: Optional[Word]):
        """Show the card and games for the selected word, or hide them."""
        if word is None:
            self.word_card.clear()
            self.word_card.hide()
            self.games_panel.hide()
            return
        self.word_card.display_word(word)
        self.word_card.show()
        self.games_panel.show()

    def show_notification(self, notification: Notification):
        """Errors get a dialog; everything else goes to the status bar."""
        if notification.level is NotificationLevel.ERROR:
            self.show_error(notification.title, notification.message)
        else:
            self.statusBar().showMessage(
                f"{notification.title} {notification.message}", STATUS_TIMEOUT_MS
            )

    def show_error(self, title: str, message: str):
        """Display an error message to the user."""
        QMessageBox.critical(self, title, message)

    def show_info(self, title: str, message: str):
        """Display an information message to the user."""
        QMessageBox.information(self, title, message)

    @override
    def keyPressEvent(self, event: QKeyEvent):
        """Escape closes the suggestion dropdown."""
        if event.key() == Qt.Key.Key_Escape:
            self.search_bar.dismissed.emit()
        else:
            super().keyPressEvent(event)

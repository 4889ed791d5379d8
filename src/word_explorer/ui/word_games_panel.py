"""Word Games Panel - game menu plus anagram, synonym and image pages."""

from typing import List, Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from word_explorer.coordinators.word_games_coordinator import GameMode, WordGamesCoordinator
from word_explorer.games import AnagramGame, SynonymGame


CORRECT_STYLE = "background-color: #d4edda; border: 2px solid #28a745; color: #155724;"
WRONG_STYLE = "background-color: #f8d7da; border: 2px solid #dc3545; color: #721c24;"


class WordGamesPanel(QWidget):
    """Renders WordGamesCoordinator state; user actions are emitted as signals."""

    game_requested = Signal(object)  # GameMode
    back_requested = Signal()
    anagram_submitted = Signal(str)
    synonym_selected = Signal(str)
    play_again_requested = Signal()

    def __init__(self):
        super().__init__()
        self.option_buttons: List[QPushButton] = []
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)

        header = QHBoxLayout()
        title = QLabel("Word Games")
        title.setStyleSheet("font-size: 18px; font-weight: bold;")
        header.addWidget(title)
        subtitle = QLabel("1 mistake = game over!")
        subtitle.setStyleSheet("color: #888888;")
        header.addWidget(subtitle, stretch=1)
        self.score_label = QLabel()
        self.score_label.setStyleSheet("font-weight: bold; color: #d39e00;")
        self.score_label.hide()
        header.addWidget(self.score_label)
        layout.addLayout(header)

        self.stack = QStackedWidget()
        layout.addWidget(self.stack)

        self._build_menu_page()
        self._build_anagram_page()
        self._build_synonym_page()
        self._build_image_page()

    def _build_menu_page(self):
        self.menu_page = QWidget()
        row = QHBoxLayout(self.menu_page)

        self.anagram_button = QPushButton("Anagram\nRearrange the letters")
        self.anagram_button.clicked.connect(lambda: self.game_requested.emit(GameMode.ANAGRAM))
        row.addWidget(self.anagram_button)

        self.synonym_button = QPushButton("Synonyms\n1 mistake = the end!")
        self.synonym_button.clicked.connect(lambda: self.game_requested.emit(GameMode.SYNONYM))
        row.addWidget(self.synonym_button)

        self.image_button = QPushButton("Image\nVisualize the word")
        self.image_button.clicked.connect(lambda: self.game_requested.emit(GameMode.IMAGE))
        row.addWidget(self.image_button)

        self.stack.addWidget(self.menu_page)

    def _build_anagram_page(self):
        self.anagram_page = QWidget()
        layout = QVBoxLayout(self.anagram_page)

        layout.addWidget(QLabel("Find the word:"))
        self.scrambled_label = QLabel()
        self.scrambled_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.scrambled_label.setStyleSheet("font-size: 32px; font-family: monospace; letter-spacing: 4px;")
        layout.addWidget(self.scrambled_label)

        self.answer_row = QWidget()
        answer_layout = QHBoxLayout(self.answer_row)
        answer_layout.setContentsMargins(0, 0, 0, 0)
        self.answer_input = QLineEdit()
        self.answer_input.setPlaceholderText("Your answer...")
        self.answer_input.returnPressed.connect(self._on_check_anagram)
        answer_layout.addWidget(self.answer_input, stretch=1)
        self.check_button = QPushButton("Check")
        self.check_button.clicked.connect(self._on_check_anagram)
        answer_layout.addWidget(self.check_button)
        layout.addWidget(self.answer_row)

        self.solved_label = QLabel()
        self.solved_label.setStyleSheet("font-size: 18px; font-weight: bold; color: #28a745;")
        self.solved_label.hide()
        layout.addWidget(self.solved_label)

        back = QPushButton("← Back")
        back.clicked.connect(self.back_requested.emit)
        layout.addWidget(back)

        self.stack.addWidget(self.anagram_page)

    def _build_synonym_page(self):
        self.synonym_page = QWidget()
        layout = QVBoxLayout(self.synonym_page)

        layout.addWidget(QLabel("Find the synonyms of:"))
        self.synonym_word_label = QLabel()
        self.synonym_word_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.synonym_word_label.setStyleSheet("font-size: 28px; font-weight: bold;")
        layout.addWidget(self.synonym_word_label)

        self.options_container = QWidget()
        self.options_layout = QGridLayout(self.options_container)
        layout.addWidget(self.options_container)

        self.result_label = QLabel()
        self.result_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.result_label.hide()
        layout.addWidget(self.result_label)

        buttons = QHBoxLayout()
        menu_button = QPushButton("← Menu")
        menu_button.clicked.connect(self.back_requested.emit)
        buttons.addWidget(menu_button)
        self.play_again_button = QPushButton("Play again")
        self.play_again_button.clicked.connect(self.play_again_requested.emit)
        self.play_again_button.hide()
        buttons.addWidget(self.play_again_button)
        layout.addLayout(buttons)

        self.stack.addWidget(self.synonym_page)

    def _build_image_page(self):
        self.image_page = QWidget()
        layout = QVBoxLayout(self.image_page)

        self.image_label = QLabel()
        self.image_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.image_label.setWordWrap(True)
        layout.addWidget(self.image_label)

        back = QPushButton("← Back")
        back.clicked.connect(self.back_requested.emit)
        layout.addWidget(back)

        self.stack.addWidget(self.image_page)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def refresh(self, games: WordGamesCoordinator):
        """Show the page matching the coordinator's current mode."""
        self.score_label.setText(f"{games.score} pts")
        self.score_label.setVisible(games.score > 0)

        mode = games.mode
        if mode is GameMode.ANAGRAM and games.anagram is not None:
            self._render_anagram(games.anagram)
            self.stack.setCurrentWidget(self.anagram_page)
        elif mode is GameMode.SYNONYM and games.synonym_game.options:
            self._render_synonym(games.synonym_game, games.score)
            self.stack.setCurrentWidget(self.synonym_page)
        elif mode is GameMode.IMAGE and games.word is not None:
            self.image_label.setText(
                f"Image for: {games.word.term}\nComing soon with AI image generation"
            )
            self.stack.setCurrentWidget(self.image_page)
        else:
            self.answer_input.clear()
            self.synonym_button.setVisible(GameMode.SYNONYM in games.available_modes())
            self.stack.setCurrentWidget(self.menu_page)

    def _render_anagram(self, anagram: AnagramGame):
        self.scrambled_label.setText(anagram.scrambled.upper())
        self.answer_row.setVisible(not anagram.solved)
        self.solved_label.setText(f'Congratulations! The word was "{anagram.word}"')
        self.solved_label.setVisible(anagram.solved)

    def _render_synonym(self, game: SynonymGame, score: int):
        self.synonym_word_label.setText(game.word)

        while self.options_layout.count():
            item = self.options_layout.takeAt(0)
            widget: Optional[QWidget] = item.widget()
            if widget is not None:
                widget.deleteLater()

        self.option_buttons = []
        for index, option in enumerate(game.options):
            button = QPushButton(option)
            selected = option in game.selections
            button.setEnabled(not (selected or game.is_over))
            if selected:
                button.setStyleSheet(CORRECT_STYLE if game.is_correct(option) else WRONG_STYLE)
            button.clicked.connect(lambda checked=False, term=option: self.synonym_selected.emit(term))
            self.options_layout.addWidget(button, index // 2, index % 2)
            self.option_buttons.append(button)

        if game.is_over:
            headline = "GAME OVER" if game.wrong_count > 0 else "PERFECT VICTORY!"
            self.result_label.setText(
                f"{headline}\n"
                f"Hits: {game.correct_count} | Misses: {game.wrong_count}\n"
                f"Score: {score} points"
            )
        self.result_label.setVisible(game.is_over)
        self.play_again_button.setVisible(game.is_over)

    def _on_check_anagram(self):
        self.anagram_submitted.emit(self.answer_input.text())

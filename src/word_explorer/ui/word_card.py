"""Word Card - full entry for the selected word with pronunciation, copy, share and favorite."""

from html import escape
from typing import Optional

from PySide6.QtCore import Qt, QUrl, Signal
from PySide6.QtGui import QDesktopServices, QGuiApplication
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPushButton,
    QTextBrowser,
    QVBoxLayout,
    QWidget,
)

from word_explorer.core import Notification, Word


def render_definitions_html(word: Word) -> str:
    """Numbered definitions with their examples and translations."""
    html_parts = []
    for index, definition in enumerate(word.definitions, start=1):
        html_parts.append(
            f'<p><b>{index}. {escape(definition.part_of_speech)}</b> '
            f'{escape(definition.meaning)}</p>'
        )
        for example in definition.examples:
            html_parts.append(
                '<blockquote style="color: #555555;">'
                f'<i>"{escape(example.sentence)}"</i>'
            )
            if example.translation:
                html_parts.append(f'<br/><small>Translation: {escape(example.translation)}</small>')
            html_parts.append('</blockquote>')

    if not html_parts:
        return '<p style="color: #888888;">No definitions available.</p>'
    return "".join(html_parts)


class WordCard(QWidget):
    """
    Displays the selected word.

    Card actions report their outcome through the notification signal.
    """

    notification = Signal(object)  # Notification

    def __init__(self):
        super().__init__()
        self.word: Optional[Word] = None
        self.is_favorited = False
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)

        header = QHBoxLayout()
        title_column = QVBoxLayout()
        self.term_label = QLabel()
        self.term_label.setStyleSheet("font-size: 32px; font-weight: bold;")
        self.term_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        title_column.addWidget(self.term_label)

        self.phonetic_label = QLabel()
        self.phonetic_label.setStyleSheet("font-size: 18px; font-style: italic; color: #888888;")
        title_column.addWidget(self.phonetic_label)
        header.addLayout(title_column, stretch=1)

        self.pronounce_button = QPushButton("Pronounce")
        self.pronounce_button.clicked.connect(self.pronounce)
        header.addWidget(self.pronounce_button)

        self.copy_button = QPushButton("Copy")
        self.copy_button.clicked.connect(self.copy_term)
        header.addWidget(self.copy_button)

        self.favorite_button = QPushButton("Favorite")
        self.favorite_button.setCheckable(True)
        self.favorite_button.clicked.connect(self.toggle_favorite)
        header.addWidget(self.favorite_button)

        self.share_button = QPushButton("Share")
        self.share_button.clicked.connect(self.share)
        header.addWidget(self.share_button)
        layout.addLayout(header)

        self.definitions_view = QTextBrowser()
        self.definitions_view.setOpenExternalLinks(False)
        layout.addWidget(self.definitions_view, stretch=1)

        self.synonyms_label = QLabel()
        self.synonyms_label.setWordWrap(True)
        layout.addWidget(self.synonyms_label)

        self.antonyms_label = QLabel()
        self.antonyms_label.setWordWrap(True)
        layout.addWidget(self.antonyms_label)

    def display_word(self, word: Word):
        self.word = word
        self.is_favorited = False
        self.favorite_button.setChecked(False)

        self.term_label.setText(word.term)
        self.phonetic_label.setText(word.phonetic or "")
        self.phonetic_label.setVisible(bool(word.phonetic))
        self.definitions_view.setHtml(render_definitions_html(word))

        self.synonyms_label.setText(f"Synonyms: {', '.join(word.synonym_terms)}")
        self.synonyms_label.setVisible(bool(word.synonyms))
        self.antonyms_label.setText(f"Antonyms: {', '.join(word.antonym_terms)}")
        self.antonyms_label.setVisible(bool(word.antonyms))

    def clear(self):
        self.word = None
        self.term_label.clear()
        self.phonetic_label.clear()
        self.definitions_view.clear()
        self.synonyms_label.clear()
        self.antonyms_label.clear()

    def pronounce(self):
        """Open the recorded audio, or show the phonetic spelling when there is none."""
        if self.word is None:
            return
        if self.word.audio_url:
            if QDesktopServices.openUrl(QUrl(self.word.audio_url)):
                return
            self.notification.emit(Notification.error("Error", "Audio not available."))
            return

        text = f"{self.word.term} {self.word.phonetic}" if self.word.phonetic else self.word.term
        self.notification.emit(Notification.info("Pronunciation", text))

    def copy_term(self):
        if self.word is None:
            return
        QGuiApplication.clipboard().setText(self.word.term)
        self.notification.emit(
            Notification.success("Copied!", f'"{self.word.term}" was copied to the clipboard.')
        )

    def share(self):
        if self.word is None:
            return
        text = self.word.share_text()
        QGuiApplication.clipboard().setText(text)
        self.notification.emit(Notification.success("Copied to share!", text))

    def toggle_favorite(self):
        if self.word is None:
            return
        self.is_favorited = not self.is_favorited
        self.favorite_button.setChecked(self.is_favorited)
        if self.is_favorited:
            self.notification.emit(
                Notification.success("Added", f'"{self.word.term}" added to favorites!')
            )
        else:
            self.notification.emit(
                Notification.info("Removed", f'"{self.word.term}" removed from favorites!')
            )

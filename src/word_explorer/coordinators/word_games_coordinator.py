"""Word Games Coordinator - game menu, anagram, synonym and image modes for the selected word."""

import random
from enum import Enum
from typing import List, Optional

from PySide6.QtCore import QObject, Signal, Slot

from word_explorer.core import Notification, Word
from word_explorer.games import (
    POINTS_PER_CORRECT,
    POINTS_PER_SOLVE,
    AnagramGame,
    SelectionOutcome,
    SynonymGame,
    SynonymGameState,
)


class GameMode(str, Enum):
    ANAGRAM = "anagram"
    SYNONYM = "synonym"
    IMAGE = "image"


class WordGamesCoordinator(QObject):
    """
    Runs the games offered for the selected word.

    Responsibilities:
    - Track the open game (None means the menu is shown)
    - Build fresh games whenever the selected word changes
    - Keep the running score across games
    - Turn game outcomes into notifications
    """

    mode_changed = Signal(object)  # GameMode or None
    score_changed = Signal(int)
    synonym_state_changed = Signal()
    anagram_state_changed = Signal()
    notification = Signal(object)

    def __init__(self, rng: Optional[random.Random] = None):
        super().__init__()

        self._rng = rng or random.Random()

        self.word: Optional[Word] = None
        self.mode: Optional[GameMode] = None
        self.anagram: Optional[AnagramGame] = None
        self.synonym_game = SynonymGame(rng=self._rng)
        self.score: int = 0

    def available_modes(self) -> List[GameMode]:
        """Synonym mode is only offered when the word has synonyms."""
        if self.word is None:
            return []
        modes = [GameMode.ANAGRAM]
        if self.word.synonym_terms:
            modes.append(GameMode.SYNONYM)
        modes.append(GameMode.IMAGE)
        return modes

    @Slot(object)
    def set_word(self, word: Optional[Word]):
        """Selected word changed: rebuild both games and return to the menu."""
        self.word = word
        self.anagram = AnagramGame(word.term, rng=self._rng) if word is not None else None
        self.synonym_game = SynonymGame(rng=self._rng)
        self._set_mode(None)
        self.anagram_state_changed.emit()
        self.synonym_state_changed.emit()

    @Slot(object)
    def open_game(self, mode: GameMode) -> bool:
        """
        Open a game from the menu.

        Returns:
            False if the mode is not available for the current word.
        """
        mode = GameMode(mode)
        if mode not in self.available_modes():
            return False

        if mode is GameMode.SYNONYM and self.synonym_game.state is SynonymGameState.NOT_STARTED:
            self.synonym_game.start_round(self.word.term, self.word.synonym_terms)
            self.synonym_state_changed.emit()
        elif mode is GameMode.IMAGE:
            self.notification.emit(
                Notification.info(
                    "Image generated!",
                    f'Coming soon with AI for "{self.word.term}"!',
                )
            )

        self._set_mode(mode)
        return True

    @Slot()
    def close_game(self):
        """Back to the menu; the anagram forgets its answer state."""
        if self.mode is GameMode.ANAGRAM and self.anagram is not None:
            self.anagram.reset()
            self.anagram_state_changed.emit()
        self._set_mode(None)

    @Slot()
    def clear(self):
        """A new search or selection started."""
        self._set_mode(None)

    @Slot(str)
    def submit_anagram(self, answer: str) -> bool:
        if self.anagram is None or self.anagram.solved:
            return False

        if not self.anagram.submit(answer):
            self.notification.emit(Notification.error("Oops!", "Try again!"))
            return False

        self._add_points(POINTS_PER_SOLVE)
        self.notification.emit(Notification.success("Congratulations!", "Anagram solved!"))
        self.anagram_state_changed.emit()
        return True

    @Slot(str)
    def select_synonym(self, term: str) -> SelectionOutcome:
        outcome = self.synonym_game.select_option(term)
        if outcome is SelectionOutcome.IGNORED:
            return outcome

        if outcome is SelectionOutcome.LOST:
            self.notification.emit(
                Notification.error("Wrong! Game over!", f'"{term}" is not a synonym!')
            )
        else:
            self._add_points(POINTS_PER_CORRECT)
            self.notification.emit(Notification.success("Correct!", f'"{term}" is a synonym!'))
            if outcome is SelectionOutcome.WON:
                self.notification.emit(
                    Notification.success("Perfect victory!", "All synonyms found!")
                )

        self.synonym_state_changed.emit()
        return outcome

    @Slot()
    def play_synonym_again(self):
        self.synonym_game.reset()
        self.synonym_state_changed.emit()

    def _add_points(self, points: int):
        self.score += points
        self.score_changed.emit(self.score)

    def _set_mode(self, mode: Optional[GameMode]):
        self.mode = mode
        self.mode_changed.emit(mode)

"""Anagram game - unscramble the letters of the selected word."""

import random
from typing import Optional


POINTS_PER_SOLVE = 10


class AnagramGame:
    """Letters are scrambled once per word; wrong answers cost nothing."""

    def __init__(self, word: str, rng: Optional[random.Random] = None):
        self.word = word
        self._rng = rng or random.Random()
        self.scrambled = self._scramble(word)
        self.solved = False
        self.score = 0

    def _scramble(self, word: str) -> str:
        letters = list(word)
        self._rng.shuffle(letters)
        return "".join(letters)

    def submit(self, answer: str) -> bool:
        """Check an answer (case-insensitive). Returns True when solved."""
        if self.solved:
            return True
        if answer.lower() != self.word.lower():
            return False
        self.solved = True
        self.score += POINTS_PER_SOLVE
        return True

    def reset(self) -> None:
        """Leave the game: the scramble is kept, the solved flag is cleared."""
        self.solved = False

"""Synonym game - pick the real synonyms among distractors; one mistake ends the round."""

import random
from enum import Enum
from typing import FrozenSet, Iterable, List, Optional, Sequence, Tuple

from .distractor_words import DISTRACTOR_WORDS


OPTION_COUNT = 4
MAX_REAL_OPTIONS = 2
POINTS_PER_CORRECT = 8


class SynonymGameState(Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


class SelectionOutcome(Enum):
    IGNORED = "ignored"
    CORRECT = "correct"
    WON = "won"
    LOST = "lost"


class SynonymGame:
    """
    State machine for one synonym-matching game.

    NOT_STARTED -> IN_PROGRESS -> WON | LOST, and back to IN_PROGRESS on reset().
    The option list is frozen for a round; selections are validated against it.
    """

    def __init__(
        self,
        distractors: Sequence[str] = DISTRACTOR_WORDS,
        rng: Optional[random.Random] = None,
    ):
        self._distractors: Tuple[str, ...] = tuple(distractors)
        self._rng = rng or random.Random()

        self.word: str = ""
        self.correct_synonyms: FrozenSet[str] = frozenset()
        self._synonym_order: Tuple[str, ...] = ()
        self.options: Tuple[str, ...] = ()
        self.selections: List[str] = []
        self.state = SynonymGameState.NOT_STARTED
        self.score: int = 0

    @property
    def is_over(self) -> bool:
        return self.state in (SynonymGameState.WON, SynonymGameState.LOST)

    @property
    def correct_count(self) -> int:
        return sum(1 for term in self.selections if term in self.correct_synonyms)

    @property
    def wrong_count(self) -> int:
        return sum(1 for term in self.selections if term not in self.correct_synonyms)

    def is_correct(self, term: str) -> bool:
        return term in self.correct_synonyms

    def start_round(self, word: str, correct_synonyms: Iterable[str]) -> bool:
        """
        Start a round for `word`.

        Returns:
            False (and stays NOT_STARTED) when the word has no usable synonyms.
        """
        target = word.strip().lower()
        stripped = (term.strip() for term in correct_synonyms if term)
        # Keep input order so a seeded rng gives reproducible rounds
        ordered = tuple(
            dict.fromkeys(term for term in stripped if term and term.lower() != target)
        )
        if not ordered:
            return False

        self.word = word
        self._synonym_order = ordered
        self.correct_synonyms = frozenset(ordered)
        self.score = 0
        self._new_round()
        return True

    def reset(self) -> None:
        """Play again: clear selections and regenerate the options."""
        if self.state is SynonymGameState.NOT_STARTED:
            return
        self._new_round()

    def select_option(self, term: str) -> SelectionOutcome:
        """Record a pick; a single wrong pick ends the round. Terms not on offer are ignored."""
        if (
            self.state is not SynonymGameState.IN_PROGRESS
            or term not in self.options
            or term in self.selections
        ):
            return SelectionOutcome.IGNORED

        self.selections.append(term)

        if term not in self.correct_synonyms:
            self.state = SynonymGameState.LOST
            return SelectionOutcome.LOST

        self.score += POINTS_PER_CORRECT
        remaining = [
            option for option in self.options
            if option in self.correct_synonyms and option not in self.selections
        ]
        if not remaining:
            self.state = SynonymGameState.WON
            return SelectionOutcome.WON
        return SelectionOutcome.CORRECT

    def _new_round(self) -> None:
        self.selections = []
        self.options = tuple(self._build_options())
        self.state = SynonymGameState.IN_PROGRESS

    def _build_options(self) -> List[str]:
        real = list(self._synonym_order)
        self._rng.shuffle(real)
        real = real[:MAX_REAL_OPTIONS]

        excluded = {term.strip().lower() for term in self.correct_synonyms}
        excluded.add(self.word.strip().lower())
        fakes = list(self._distractors)
        self._rng.shuffle(fakes)
        fakes = [term for term in fakes if term.strip().lower() not in excluded]
        fakes = fakes[: OPTION_COUNT - len(real)]

        options = real + fakes
        self._rng.shuffle(options)
        return options

"""Word games - pure state machines driven by the games coordinator."""

from .anagram_game import POINTS_PER_SOLVE, AnagramGame
from .distractor_words import DISTRACTOR_WORDS
from .synonym_game import (
    OPTION_COUNT,
    POINTS_PER_CORRECT,
    SelectionOutcome,
    SynonymGame,
    SynonymGameState,
)

__all__ = [
    "AnagramGame",
    "SynonymGame",
    "SynonymGameState",
    "SelectionOutcome",
    "DISTRACTOR_WORDS",
    "OPTION_COUNT",
    "POINTS_PER_CORRECT",
    "POINTS_PER_SOLVE",
]

"""Unit tests for WordGamesCoordinator."""

import random

import pytest

from word_explorer.coordinators import GameMode, WordGamesCoordinator
from word_explorer.core import NotificationLevel
from word_explorer.games import SelectionOutcome, SynonymGameState


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def games():
    """Coordinator with a seeded rng."""
    return WordGamesCoordinator(rng=random.Random(7))


@pytest.fixture
def notifications(games):
    received = []
    games.notification.connect(received.append)
    return received


@pytest.fixture
def word_with_synonyms(make_word):
    return make_word(1, "feliz", synonyms=("alegre", "contente", "radiante"))


def correct_options(games):
    return [term for term in games.synonym_game.options if games.synonym_game.is_correct(term)]


def wrong_options(games):
    return [term for term in games.synonym_game.options if not games.synonym_game.is_correct(term)]


# ============================================================================
# Menu
# ============================================================================


class TestMenu:
    def test_no_word_offers_nothing(self, games):
        assert games.available_modes() == []
        assert games.open_game(GameMode.ANAGRAM) is False

    def test_synonym_mode_hidden_without_synonyms(self, games, make_word):
        games.set_word(make_word(1, "casa"))

        assert games.available_modes() == [GameMode.ANAGRAM, GameMode.IMAGE]
        assert games.open_game(GameMode.SYNONYM) is False
        assert games.mode is None

    def test_all_modes_with_synonyms(self, games, word_with_synonyms):
        games.set_word(word_with_synonyms)
        assert games.available_modes() == [GameMode.ANAGRAM, GameMode.SYNONYM, GameMode.IMAGE]

    def test_open_and_close(self, games, word_with_synonyms):
        modes = []
        games.mode_changed.connect(modes.append)
        games.set_word(word_with_synonyms)

        assert games.open_game(GameMode.ANAGRAM) is True
        games.close_game()

        assert modes == [None, GameMode.ANAGRAM, None]

    def test_open_accepts_mode_value(self, games, word_with_synonyms):
        games.set_word(word_with_synonyms)
        assert games.open_game("anagram") is True
        assert games.mode is GameMode.ANAGRAM

    def test_image_mode_announces_placeholder(self, games, make_word, notifications):
        games.set_word(make_word(1, "lua"))

        games.open_game(GameMode.IMAGE)

        assert notifications[-1].level is NotificationLevel.INFO
        assert notifications[-1].title == "Image generated!"
        assert "lua" in notifications[-1].message

    def test_new_word_returns_to_menu(self, games, word_with_synonyms, make_word):
        games.set_word(word_with_synonyms)
        games.open_game(GameMode.SYNONYM)

        games.set_word(make_word(2, "sol"))

        assert games.mode is None
        assert games.anagram.word == "sol"
        assert games.synonym_game.state is SynonymGameState.NOT_STARTED

    def test_clear_closes_game(self, games, word_with_synonyms):
        games.set_word(word_with_synonyms)
        games.open_game(GameMode.ANAGRAM)

        games.clear()

        assert games.mode is None


# ============================================================================
# Anagram
# ============================================================================


class TestAnagram:
    def test_wrong_answer_notifies_without_points(self, games, make_word, notifications):
        games.set_word(make_word(1, "gato"))
        games.open_game(GameMode.ANAGRAM)

        assert games.submit_anagram("toga") is False

        assert games.score == 0
        assert notifications[-1].is_error
        assert notifications[-1].message == "Try again!"

    def test_correct_answer_scores_once(self, games, make_word, notifications):
        games.set_word(make_word(1, "gato"))
        games.open_game(GameMode.ANAGRAM)

        assert games.submit_anagram("GATO") is True
        assert games.submit_anagram("gato") is False

        assert games.score == 10
        assert notifications[-1].level is NotificationLevel.SUCCESS

    def test_leaving_resets_anagram(self, games, make_word):
        games.set_word(make_word(1, "gato"))
        games.open_game(GameMode.ANAGRAM)
        games.submit_anagram("gato")
        scrambled = games.anagram.scrambled

        games.close_game()

        assert games.anagram.solved is False
        assert games.anagram.scrambled == scrambled

    def test_replaying_after_reset_scores_again(self, games, make_word):
        games.set_word(make_word(1, "gato"))
        games.open_game(GameMode.ANAGRAM)
        games.submit_anagram("gato")
        games.close_game()
        games.open_game(GameMode.ANAGRAM)

        games.submit_anagram("gato")

        assert games.score == 20


# ============================================================================
# Synonym
# ============================================================================


class TestSynonym:
    def test_opening_starts_round(self, games, word_with_synonyms):
        games.set_word(word_with_synonyms)

        games.open_game(GameMode.SYNONYM)

        assert games.synonym_game.state is SynonymGameState.IN_PROGRESS
        assert len(games.synonym_game.options) == 4
        assert len(correct_options(games)) == 2

    def test_reopening_keeps_round(self, games, word_with_synonyms):
        games.set_word(word_with_synonyms)
        games.open_game(GameMode.SYNONYM)
        first_pick = correct_options(games)[0]
        games.select_synonym(first_pick)
        games.close_game()

        games.open_game(GameMode.SYNONYM)

        assert games.synonym_game.selections == [first_pick]

    def test_all_correct_wins(self, games, word_with_synonyms, notifications):
        games.set_word(word_with_synonyms)
        games.open_game(GameMode.SYNONYM)
        first, second = correct_options(games)

        assert games.select_synonym(first) is SelectionOutcome.CORRECT
        assert games.select_synonym(second) is SelectionOutcome.WON

        assert games.score == 16
        assert [n.title for n in notifications[-2:]] == ["Correct!", "Perfect victory!"]

    def test_wrong_pick_loses(self, games, word_with_synonyms, notifications):
        games.set_word(word_with_synonyms)
        games.open_game(GameMode.SYNONYM)

        outcome = games.select_synonym(wrong_options(games)[0])

        assert outcome is SelectionOutcome.LOST
        assert games.score == 0
        assert notifications[-1].title == "Wrong! Game over!"

    def test_picks_after_game_over_are_ignored(self, games, word_with_synonyms):
        games.set_word(word_with_synonyms)
        games.open_game(GameMode.SYNONYM)
        games.select_synonym(wrong_options(games)[0])

        assert games.select_synonym(correct_options(games)[0]) is SelectionOutcome.IGNORED
        assert games.score == 0

    def test_play_again_starts_fresh_round(self, games, word_with_synonyms):
        games.set_word(word_with_synonyms)
        games.open_game(GameMode.SYNONYM)
        games.select_synonym(wrong_options(games)[0])

        games.play_synonym_again()

        assert games.synonym_game.state is SynonymGameState.IN_PROGRESS
        assert games.synonym_game.selections == []

    def test_score_carries_across_words(self, games, word_with_synonyms, make_word):
        scores = []
        games.score_changed.connect(scores.append)
        games.set_word(make_word(1, "gato"))
        games.open_game(GameMode.ANAGRAM)
        games.submit_anagram("gato")

        games.set_word(word_with_synonyms)
        games.open_game(GameMode.SYNONYM)
        games.select_synonym(correct_options(games)[0])

        assert scores == [10, 18]

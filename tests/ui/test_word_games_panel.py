"""Tests for WordGamesPanel - page selection and synonym option rendering."""

import random

import pytest

from word_explorer.coordinators import GameMode, WordGamesCoordinator
from word_explorer.ui import WordGamesPanel
from word_explorer.ui.word_games_panel import CORRECT_STYLE, WRONG_STYLE


@pytest.fixture
def games(make_word):
    coordinator = WordGamesCoordinator(rng=random.Random(3))
    coordinator.set_word(make_word(1, "feliz", synonyms=("alegre", "contente")))
    return coordinator


@pytest.fixture
def panel():
    return WordGamesPanel()


def test_menu_by_default(panel, games):
    panel.refresh(games)

    assert panel.stack.currentWidget() is panel.menu_page
    assert not panel.synonym_button.isHidden()


def test_menu_hides_synonyms_without_synonyms(panel, make_word):
    games = WordGamesCoordinator()
    games.set_word(make_word(1, "casa"))

    panel.refresh(games)

    assert panel.synonym_button.isHidden()


def test_menu_buttons_request_games(panel):
    requested = []
    panel.game_requested.connect(requested.append)

    panel.anagram_button.click()
    panel.image_button.click()

    assert requested == [GameMode.ANAGRAM, GameMode.IMAGE]


def test_anagram_page(panel, games):
    games.open_game(GameMode.ANAGRAM)

    panel.refresh(games)

    assert panel.stack.currentWidget() is panel.anagram_page
    assert sorted(panel.scrambled_label.text()) == sorted("FELIZ")
    assert panel.solved_label.isHidden()


def test_anagram_answer_is_submitted(panel):
    answers = []
    panel.anagram_submitted.connect(answers.append)

    panel.answer_input.setText("feliz")
    panel.check_button.click()

    assert answers == ["feliz"]


def test_solved_anagram_hides_answer_row(panel, games):
    games.open_game(GameMode.ANAGRAM)
    games.submit_anagram("feliz")

    panel.refresh(games)

    assert panel.answer_row.isHidden()
    assert not panel.solved_label.isHidden()
    assert panel.score_label.text() == "10 pts"


def test_synonym_options_rendered(panel, games):
    games.open_game(GameMode.SYNONYM)

    panel.refresh(games)

    assert panel.stack.currentWidget() is panel.synonym_page
    assert [button.text() for button in panel.option_buttons] == list(games.synonym_game.options)
    assert all(button.isEnabled() for button in panel.option_buttons)
    assert panel.play_again_button.isHidden()


def test_option_click_emits_term(panel, games):
    games.open_game(GameMode.SYNONYM)
    panel.refresh(games)
    selected = []
    panel.synonym_selected.connect(selected.append)

    panel.option_buttons[0].click()

    assert selected == [games.synonym_game.options[0]]


def test_game_over_marks_options(panel, games):
    games.open_game(GameMode.SYNONYM)
    game = games.synonym_game
    wrong = next(term for term in game.options if not game.is_correct(term))
    games.select_synonym(wrong)

    panel.refresh(games)

    buttons = {button.text(): button for button in panel.option_buttons}
    assert buttons[wrong].styleSheet() == WRONG_STYLE
    assert not any(button.isEnabled() for button in panel.option_buttons)
    assert panel.result_label.text().startswith("GAME OVER")
    assert not panel.play_again_button.isHidden()


def test_perfect_victory(panel, games):
    games.open_game(GameMode.SYNONYM)
    game = games.synonym_game
    for term in [term for term in game.options if game.is_correct(term)]:
        games.select_synonym(term)

    panel.refresh(games)

    assert panel.result_label.text().startswith("PERFECT VICTORY!")
    assert "Hits: 2 | Misses: 0" in panel.result_label.text()
    correct_buttons = [b for b in panel.option_buttons if game.is_correct(b.text())]
    assert all(b.styleSheet() == CORRECT_STYLE for b in correct_buttons)


def test_image_page(panel, games):
    games.open_game(GameMode.IMAGE)

    panel.refresh(games)

    assert panel.stack.currentWidget() is panel.image_page
    assert "feliz" in panel.image_label.text()


def test_returning_to_menu_clears_answer(panel, games):
    games.open_game(GameMode.ANAGRAM)
    panel.refresh(games)
    panel.answer_input.setText("fel")

    games.close_game()
    panel.refresh(games)

    assert panel.answer_input.text() == ""
    assert panel.stack.currentWidget() is panel.menu_page

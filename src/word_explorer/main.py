"""Main entry point for the Word Explorer application."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from word_explorer.coordinators import SearchCoordinator, WordGamesCoordinator
from word_explorer.services import ApiClient, SettingsManager, WordsService
from word_explorer.ui import MainWindow


def connect_signals(
    main_window: MainWindow,
    search: SearchCoordinator,
    games: WordGamesCoordinator,
) -> None:
    """Wire UI signals to coordinator slots and coordinator signals back to the UI."""
    search_bar = main_window.search_bar
    results_panel = main_window.results_panel
    games_panel = main_window.games_panel

    # Search input -> SearchCoordinator
    search_bar.text_changed.connect(search.set_query)
    search_bar.submitted.connect(search.submit)
    search_bar.suggestion_chosen.connect(search.choose_suggestion)
    search_bar.focused.connect(search.focus_query)
    search_bar.dismissed.connect(search.dismiss_suggestions)

    # SearchCoordinator -> views
    search.suggestions_changed.connect(search_bar.set_suggestions)
    search.suggestions_visible_changed.connect(search_bar.set_suggestions_visible)
    search.suggestions_loading_changed.connect(search_bar.set_suggestions_loading)
    search.loading_changed.connect(main_window.set_loading)
    search.results_changed.connect(
        lambda words, total: results_panel.display_results(
            words, total, search.session.trimmed_query
        )
    )
    search.page_changed.connect(results_panel.set_page)
    search.selected_word_changed.connect(main_window.show_selected_word)
    search.selected_word_changed.connect(games.set_word)
    search.selected_word_changed.connect(results_panel.highlight_selected)
    search.game_cleared.connect(games.clear)
    search.notification.connect(main_window.show_notification)

    # Results -> SearchCoordinator
    results_panel.word_clicked.connect(search.select_word)
    results_panel.page_requested.connect(search.change_page)

    # Games
    games_panel.game_requested.connect(games.open_game)
    games_panel.back_requested.connect(games.close_game)
    games_panel.anagram_submitted.connect(games.submit_anagram)
    games_panel.synonym_selected.connect(games.select_synonym)
    games_panel.play_again_requested.connect(games.play_synonym_again)

    refresh_games = lambda *_: games_panel.refresh(games)
    games.mode_changed.connect(refresh_games)
    games.score_changed.connect(refresh_games)
    games.anagram_state_changed.connect(refresh_games)
    games.synonym_state_changed.connect(refresh_games)
    games.notification.connect(main_window.show_notification)


def main():
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    # 1. Configuration and logging
    settings = SettingsManager()
    logging.basicConfig(
        level=settings.get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # 2. Initialize Application
    app = QApplication(sys.argv)
    app.setApplicationName("Word Explorer")
    app.setOrganizationName("WordExplorer")

    # 3. Initialize Infrastructure
    client = ApiClient(settings.get_api_url(), timeout=settings.get_request_timeout())
    words_service = WordsService(client)

    # 4. Construct UI
    main_window = MainWindow()

    # 5. Instantiate Coordinators (Dependency Injection)
    search = SearchCoordinator(
        words_service,
        suggestion_debounce_ms=settings.get_suggestion_debounce_ms(),
        search_debounce_ms=settings.get_search_debounce_ms(),
    )
    games = WordGamesCoordinator()

    # 6. Signal Wiring
    connect_signals(main_window, search, games)

    # 7. Show UI and start event loop
    main_window.show()
    main_window.focus_search()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())

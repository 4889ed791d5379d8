"""UI layer - PySide6 presentation components."""

from .main_window import MainWindow
from .results_panel import ResultsPanel
from .search_bar import SearchBar
from .word_card import WordCard
from .word_games_panel import WordGamesPanel

__all__ = ["MainWindow", "SearchBar", "ResultsPanel", "WordCard", "WordGamesPanel"]

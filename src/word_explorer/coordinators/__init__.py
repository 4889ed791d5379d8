"""Coordinators - Orchestration layer connecting UI with services and games."""

from .search_coordinator import SearchCoordinator
from .word_games_coordinator import GameMode, WordGamesCoordinator

__all__ = [
    "SearchCoordinator",
    "WordGamesCoordinator",
    "GameMode",
]

"""
Word Explorer - A desktop dictionary front-end with word games.

This package provides a desktop application for exploring words with:
- Debounced search with typeahead suggestions
- Definitions, examples, synonyms and antonyms from a REST dictionary API
- Anagram and synonym word games
"""

__version__ = "0.1.0"

# Make key components available at package level
from word_explorer.core import SearchSession, SuggestionItem, Word
from word_explorer.games import AnagramGame, SynonymGame

__all__ = [
    "Word",
    "SuggestionItem",
    "SearchSession",
    "AnagramGame",
    "SynonymGame",
]

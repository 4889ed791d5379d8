"""Domain layer - Pure entities representing dictionary content and view state."""

from .notification import Notification, NotificationLevel
from .search_session import PAGE_SIZE, SearchSession
from .word_entities import (
    CreateWordDto,
    Definition,
    Example,
    PaginatedWords,
    SuggestionItem,
    UpdateWordDto,
    Word,
    WordReference,
)

__all__ = [
    "Word",
    "Definition",
    "Example",
    "WordReference",
    "SuggestionItem",
    "PaginatedWords",
    "CreateWordDto",
    "UpdateWordDto",
    "SearchSession",
    "PAGE_SIZE",
    "Notification",
    "NotificationLevel",
]

"""SearchSession entity - ephemeral state of the dictionary search view."""

import math
from dataclasses import dataclass, field
from typing import List, Optional

from .word_entities import Word


PAGE_SIZE = 10


@dataclass
class SearchSession:
    """Current query, page and results shown by the search view.

    Lives only as long as the view; cleared whenever the query text is emptied.
    """

    query: str = ""
    page: int = 1
    limit: int = PAGE_SIZE
    total: int = 0
    results: List[Word] = field(default_factory=list)
    selected_word: Optional[Word] = None
    loading: bool = False

    @property
    def trimmed_query(self) -> str:
        return self.query.strip()

    @property
    def total_pages(self) -> int:
        """Number of pages for the current total (0 when there are no results)."""
        return math.ceil(self.total / self.limit) if self.total > 0 else 0

    @property
    def has_previous_page(self) -> bool:
        return self.page > 1

    @property
    def has_next_page(self) -> bool:
        return self.page < self.total_pages

    def clear_results(self) -> None:
        """Drop results and total, keeping query and page."""
        self.results = []
        self.total = 0

    def reset(self) -> None:
        """Return to the initial empty state for a cleared query."""
        self.clear_results()
        self.selected_word = None
        self.page = 1

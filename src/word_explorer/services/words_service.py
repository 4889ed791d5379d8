"""Words Service - typed access to the /words and /util endpoints."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional
from urllib.parse import quote

from word_explorer.core import (
    CreateWordDto,
    PAGE_SIZE,
    PaginatedWords,
    SuggestionItem,
    UpdateWordDto,
    Word,
)
from word_explorer.services.api_client import ApiClient, ApiError, EmptyResultFallbackError


logger = logging.getLogger(__name__)

MIN_SUGGESTION_LENGTH = 2
SUGGESTION_LIMIT = 10


@dataclass(frozen=True)
class SearchOutcome:
    """What a completed search should put on screen."""

    results: List[Word]
    total: int
    selected_word: Optional[Word]
    from_fallback: bool = False


class WordsService:
    """Maps REST responses onto core entities. Errors propagate as ApiError."""

    def __init__(self, client: ApiClient):
        self._client = client

    def search_words(self, query: str, page: int = 1, limit: int = PAGE_SIZE) -> PaginatedWords:
        """GET /words?query=&page=&limit="""
        data = self._client.fetch_with_filter(
            "/words", {"query": query, "page": page, "limit": limit}
        )
        return PaginatedWords.from_dict(data)

    def search_with_fallback(self, query: str, page: int = 1, limit: int = PAGE_SIZE) -> "SearchOutcome":
        """
        Paginated search that falls back to an exact-term lookup on zero results.

        A single result is auto-selected; the fallback word becomes the sole,
        selected result.

        Raises:
            ApiError: if the paginated search fails.
            EmptyResultFallbackError: if the exact-term lookup fails.
        """
        page_data = self.search_words(query, page=page, limit=limit)

        if len(page_data.results) == 1:
            return SearchOutcome(page_data.results, page_data.total, page_data.results[0])

        if page_data.results:
            return SearchOutcome(page_data.results, page_data.total, None)

        logger.info("No results for '%s', trying exact lookup", query)
        try:
            exact = self.get_word_by_term(query)
        except ApiError as exc:
            raise EmptyResultFallbackError(exc.message, status_code=exc.status_code) from exc
        return SearchOutcome([exact], 1, exact, from_fallback=True)

    def get_word_by_id(self, word_id: int) -> Word:
        return Word.from_dict(self._client.fetch(f"/words/{word_id}"))

    def get_word_by_term(self, term: str) -> Word:
        """
        Exact lookup by term.

        The API may create the word on its side when it is not stored yet.
        """
        return Word.from_dict(self._client.fetch(f"/words/word/{quote(term, safe='')}"))

    def get_suggestions(self, q: str, limit: int = SUGGESTION_LIMIT) -> List[SuggestionItem]:
        """Typeahead suggestions; too-short queries return [] without a request."""
        text = (q or "").strip()
        if len(text) < MIN_SUGGESTION_LENGTH:
            return []
        data = self._client.fetch_with_filter("/util/suggestions", {"q": text, "limit": limit})
        return [SuggestionItem.from_dict(item) for item in data or []]

    def create_word(self, data: CreateWordDto) -> Word:
        return Word.from_dict(self._client.send("/words", "POST", data.to_payload()))

    def update_word(self, word_id: int, data: UpdateWordDto) -> Word:
        return Word.from_dict(self._client.send(f"/words/{word_id}", "PUT", data.to_payload()))

    def delete_word(self, word_id: int) -> Dict[str, Any]:
        return self._client.delete(f"/words/{word_id}")

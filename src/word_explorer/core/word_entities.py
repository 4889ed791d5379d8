"""Word entities - immutable snapshots of dictionary records served by the API."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


SHARE_FOOTER = "Via Word Explorer"


@dataclass(frozen=True)
class Example:
    """Usage example attached to a definition."""

    id: int
    sentence: str
    translation: Optional[str] = None
    definition_id: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Example":
        return cls(
            id=int(data["id"]),
            sentence=data.get("sentence", ""),
            translation=data.get("translation"),
            definition_id=data.get("definitionId"),
        )


@dataclass(frozen=True)
class Definition:
    """A single meaning of a word with its part of speech."""

    id: int
    meaning: str
    part_of_speech: str
    word_id: Optional[int] = None
    examples: List[Example] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Definition":
        return cls(
            id=int(data["id"]),
            meaning=data.get("meaning", ""),
            part_of_speech=data.get("partOfSpeech") or "",
            word_id=data.get("wordId"),
            examples=[Example.from_dict(item) for item in data.get("examples") or []],
        )


@dataclass(frozen=True)
class WordReference:
    """Synonym or antonym reference owned by a word (display text only)."""

    id: int
    term: str
    word_id: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WordReference":
        return cls(
            id=int(data["id"]),
            term=data.get("term", ""),
            word_id=data.get("wordId"),
        )


@dataclass(frozen=True)
class Word:
    """Dictionary word as returned by the remote API.

    The client never mutates a word; a fresh snapshot replaces it whenever the
    API is queried again.
    """

    id: int
    term: str
    language: str = ""
    phonetic: Optional[str] = None
    audio_url: Optional[str] = None
    image_url: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    definitions: List[Definition] = field(default_factory=list)
    synonyms: List[WordReference] = field(default_factory=list)
    antonyms: List[WordReference] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Word":
        """Build a Word from the API's camelCase JSON payload."""
        return cls(
            id=int(data["id"]),
            term=data.get("term", ""),
            language=data.get("language") or "",
            phonetic=data.get("phonetic"),
            audio_url=data.get("audioUrl"),
            image_url=data.get("imageUrl"),
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
            definitions=[Definition.from_dict(item) for item in data.get("definitions") or []],
            synonyms=[WordReference.from_dict(item) for item in data.get("synonyms") or []],
            antonyms=[WordReference.from_dict(item) for item in data.get("antonyms") or []],
        )

    @property
    def synonym_terms(self) -> List[str]:
        return [ref.term for ref in self.synonyms]

    @property
    def antonym_terms(self) -> List[str]:
        return [ref.term for ref in self.antonyms]

    @property
    def first_meaning(self) -> str:
        return self.definitions[0].meaning if self.definitions else ""

    def share_text(self) -> str:
        """Text copied to the clipboard when the user shares the word."""
        headline = f"{self.term}: {self.first_meaning}" if self.first_meaning else self.term
        return f"{headline}\n\n{SHARE_FOOTER}"


@dataclass(frozen=True)
class SuggestionItem:
    """Typeahead suggestion; discarded once a newer query supersedes it."""

    id: int
    term: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SuggestionItem":
        return cls(id=int(data["id"]), term=data.get("term", ""))


@dataclass(frozen=True)
class PaginatedWords:
    """One page of search results plus the total match count."""

    results: List[Word]
    total: int

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PaginatedWords":
        results = [Word.from_dict(item) for item in data.get("results") or []]
        return cls(results=results, total=int(data.get("total", len(results))))


@dataclass
class CreateWordDto:
    """Payload for POST /words."""

    term: str
    translation: Optional[str] = None
    pronunciation: Optional[str] = None
    examples: Optional[List[str]] = None
    synonyms: Optional[List[str]] = None
    antonyms: Optional[List[str]] = None

    def to_payload(self) -> Dict[str, Any]:
        """Serialize to JSON-ready dict, omitting unset fields."""
        return {key: value for key, value in vars(self).items() if value is not None}


@dataclass
class UpdateWordDto:
    """Payload for PUT /words/:id (every field optional)."""

    term: Optional[str] = None
    translation: Optional[str] = None
    pronunciation: Optional[str] = None
    examples: Optional[List[str]] = None
    synonyms: Optional[List[str]] = None
    antonyms: Optional[List[str]] = None

    def to_payload(self) -> Dict[str, Any]:
        return {key: value for key, value in vars(self).items() if value is not None}

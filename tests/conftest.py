"""Shared fixtures: a QApplication for widget/timer tests and word factories."""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication

from word_explorer.core import Word


@pytest.fixture(scope="session", autouse=True)
def qt_app():
    """Ensure a single QApplication exists for the whole session."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


def build_word_payload(word_id=1, term="casa", synonyms=(), antonyms=(), definitions=None, **extra):
    """API-shaped (camelCase) JSON for a word."""
    if definitions is None:
        definitions = [
            {
                "id": word_id * 10,
                "meaning": f"meaning of {term}",
                "partOfSpeech": "noun",
                "wordId": word_id,
                "examples": [
                    {
                        "id": word_id * 100,
                        "sentence": f"A sentence with {term}.",
                        "translation": None,
                        "definitionId": word_id * 10,
                    }
                ],
            }
        ]
    payload = {
        "id": word_id,
        "term": term,
        "language": "pt",
        "phonetic": None,
        "audioUrl": None,
        "imageUrl": None,
        "createdAt": "2025-01-01T00:00:00.000Z",
        "updatedAt": "2025-01-01T00:00:00.000Z",
        "definitions": definitions,
        "synonyms": [
            {"id": word_id * 1000 + i, "term": s, "wordId": word_id} for i, s in enumerate(synonyms)
        ],
        "antonyms": [
            {"id": word_id * 2000 + i, "term": a, "wordId": word_id} for i, a in enumerate(antonyms)
        ],
    }
    payload.update(extra)
    return payload


@pytest.fixture
def word_payload():
    """Factory for API-shaped word JSON."""
    return build_word_payload


@pytest.fixture
def make_word():
    """Factory for Word entities."""

    def _make(word_id=1, term="casa", synonyms=(), antonyms=(), **extra):
        return Word.from_dict(build_word_payload(word_id, term, synonyms, antonyms, **extra))

    return _make

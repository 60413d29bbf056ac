"""Shared helpers for tests (storage handle, fixture files, sample payloads)."""

from __future__ import annotations

import json
import tempfile
from pathlib import Path

from django.apps import apps

from articles.store import ArticleStore


def app_store() -> ArticleStore:
    """Return the storage handle built by the articles app."""
    return apps.get_app_config("articles").store


def article_payload(**overrides) -> dict:
    """Full set of article fields with sensible defaults."""
    payload = {
        "title": "Refactoring the legacy bus",
        "author": "Test Author",
        "authorUrl": "https://example.com/author",
        "category": "testing",
        "publishedOn": "2017-11-01",
        "body": "<p>Body text.</p>",
    }
    payload.update(overrides)
    return payload


class FixtureDirMixin:
    """Provide a temporary directory and a helper to write fixture files into it."""

    def setUp(self):
        super().setUp()
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.tmp_dir = Path(tmp.name)

    def write_fixture(self, content, name: str = "fixture.json") -> Path:
        """Write ``content`` as JSON (or verbatim when it is a str) and return the path."""
        path = self.tmp_dir / name
        text = content if isinstance(content, str) else json.dumps(content)
        path.write_text(text, encoding="utf-8")
        return path

"""Raw-SQL gateway for the articles table.

Every method issues exactly one parameterized statement. Values are always
bound as parameters, never interpolated into the SQL text.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from django.core.exceptions import ImproperlyConfigured
from django.db import DEFAULT_DB_ALIAS, connections

ARTICLE_FIELDS = ("title", "author", "authorUrl", "category", "publishedOn", "body")

_ID_COLUMNS = {
    "postgresql": "article_id SERIAL PRIMARY KEY",
    "sqlite": "article_id INTEGER PRIMARY KEY AUTOINCREMENT",
}

CREATE_TABLE_SQL = """
    CREATE TABLE IF NOT EXISTS articles (
      {id_column},
      title VARCHAR(255) NOT NULL,
      author VARCHAR(255) NOT NULL,
      "authorUrl" VARCHAR(255),
      category VARCHAR(20),
      "publishedOn" DATE,
      body TEXT NOT NULL);
"""

INSERT_SQL = """
    INSERT INTO
    articles(title, author, "authorUrl", category, "publishedOn", body)
    VALUES (%s, %s, %s, %s, %s, %s);
"""

UPDATE_SQL = """
    UPDATE articles
    SET
      title=%s, author=%s, "authorUrl"=%s, category=%s, "publishedOn"=%s, body=%s
    WHERE article_id=%s;
"""

# Key for pg_advisory_xact_lock serializing bootstrap across worker processes.
BOOTSTRAP_LOCK_KEY = 0x61727469636C6573


def article_params(fields: Mapping[str, Any]) -> list[Any]:
    """Return bind values for the six article columns; missing keys become NULL."""
    return [fields.get(name) for name in ARTICLE_FIELDS]


class ArticleStore:
    """Storage handle shared by the views and the bootstrap routine.

    Django connections are thread-local, so the store keeps the database alias
    and looks the connection up on every call.
    """

    def __init__(self, using: str = DEFAULT_DB_ALIAS):
        self.using = using

    @property
    def connection(self):
        return connections[self.using]

    def create_table(self) -> None:
        vendor = self.connection.vendor
        try:
            id_column = _ID_COLUMNS[vendor]
        except KeyError:
            raise ImproperlyConfigured(f"Unsupported database vendor for articles: {vendor!r}") from None
        with self.connection.cursor() as cursor:
            cursor.execute(CREATE_TABLE_SQL.format(id_column=id_column))

    def lock_for_bootstrap(self) -> None:
        """Block other bootstraps until the current transaction ends.

        PostgreSQL only; SQLite deployments are single-process.
        """
        if self.connection.vendor != "postgresql":
            return
        with self.connection.cursor() as cursor:
            cursor.execute("SELECT pg_advisory_xact_lock(%s)", [BOOTSTRAP_LOCK_KEY])

    def count(self) -> int:
        with self.connection.cursor() as cursor:
            cursor.execute("SELECT COUNT(*) FROM articles")
            return int(cursor.fetchone()[0])

    def list_all(self) -> list[dict[str, Any]]:
        """Return every row as a dict keyed by column name, in engine order."""
        with self.connection.cursor() as cursor:
            cursor.execute("SELECT * FROM articles")
            columns = [col[0] for col in cursor.description]
            return [dict(zip(columns, row)) for row in cursor.fetchall()]

    def insert(self, fields: Mapping[str, Any]) -> None:
        with self.connection.cursor() as cursor:
            cursor.execute(INSERT_SQL, article_params(fields))

    def update(self, article_id: Any, fields: Mapping[str, Any]) -> None:
        with self.connection.cursor() as cursor:
            cursor.execute(UPDATE_SQL, [*article_params(fields), article_id])

    def delete(self, article_id: Any) -> None:
        with self.connection.cursor() as cursor:
            cursor.execute("DELETE FROM articles WHERE article_id=%s;", [article_id])

    def delete_all(self) -> None:
        with self.connection.cursor() as cursor:
            cursor.execute("DELETE FROM articles;")


__all__ = ["ARTICLE_FIELDS", "BOOTSTRAP_LOCK_KEY", "ArticleStore", "article_params"]

"""Tests for the raw-SQL article store."""

from __future__ import annotations

from unittest import mock

from django.core.exceptions import ImproperlyConfigured
from django.db import IntegrityError
from django.test import TestCase

from articles.store import ARTICLE_FIELDS, BOOTSTRAP_LOCK_KEY, ArticleStore, article_params
from tests.utils import app_store, article_payload


class ArticleStoreTests(TestCase):
    """Each store method maps to one statement against the articles table."""

    def setUp(self):
        self.store = app_store()
        self.store.create_table()

    def _rows_by_title(self):
        return {row["title"]: row for row in self.store.list_all()}

    def test_create_table_is_idempotent(self):
        """Creating the table twice keeps existing rows."""
        self.store.insert(article_payload())
        self.store.create_table()
        self.assertEqual(self.store.count(), 1)

    def test_list_all_returns_rows_keyed_by_column(self):
        """Rows come back as dicts with the id and every article column."""
        self.store.insert(article_payload())

        rows = self.store.list_all()

        self.assertEqual(len(rows), 1)
        self.assertEqual(set(rows[0]), {"article_id", *ARTICLE_FIELDS})
        self.assertEqual(rows[0]["authorUrl"], "https://example.com/author")

    def test_insert_assigns_unique_ids(self):
        """Each insert gets its own engine-generated id."""
        self.store.insert(article_payload(title="One"))
        self.store.insert(article_payload(title="Two"))

        ids = [row["article_id"] for row in self.store.list_all()]
        self.assertEqual(len(set(ids)), 2)

    def test_insert_binds_missing_optional_fields_as_null(self):
        """Absent optional keys are stored as NULL."""
        self.store.insert({"title": "T", "author": "A", "body": "B"})

        row = self.store.list_all()[0]
        self.assertIsNone(row["authorUrl"])
        self.assertIsNone(row["category"])
        self.assertIsNone(row["publishedOn"])

    def test_insert_missing_required_field_raises_engine_error(self):
        """NOT NULL columns are enforced by the engine, not pre-checked."""
        with self.assertRaises(IntegrityError):
            self.store.insert({"title": "T", "author": "A"})

    def test_values_are_bound_not_interpolated(self):
        """SQL-looking input is stored verbatim."""
        hostile = "x'); DROP TABLE articles; --"
        self.store.insert(article_payload(title=hostile))

        self.assertIn(hostile, self._rows_by_title())
        self.assertEqual(self.store.count(), 1)

    def test_update_changes_only_target_row(self):
        """Update overwrites every field of one row and leaves others alone."""
        self.store.insert(article_payload(title="Keep"))
        self.store.insert(article_payload(title="Change"))
        target = self._rows_by_title()["Change"]["article_id"]

        self.store.update(target, article_payload(title="Changed", author="New Author", category=None))

        rows = self._rows_by_title()
        self.assertEqual(set(rows), {"Keep", "Changed"})
        self.assertEqual(rows["Changed"]["article_id"], target)
        self.assertEqual(rows["Changed"]["author"], "New Author")
        self.assertIsNone(rows["Changed"]["category"])
        self.assertEqual(rows["Keep"]["author"], "Test Author")

    def test_delete_removes_one_row(self):
        self.store.insert(article_payload(title="Keep"))
        self.store.insert(article_payload(title="Drop"))

        self.store.delete(self._rows_by_title()["Drop"]["article_id"])

        self.assertEqual(set(self._rows_by_title()), {"Keep"})

    def test_delete_all_empties_table(self):
        self.store.insert(article_payload(title="One"))
        self.store.insert(article_payload(title="Two"))

        self.store.delete_all()

        self.assertEqual(self.store.count(), 0)

    def test_unsupported_vendor_is_configuration_error(self):
        """Only PostgreSQL and SQLite DDL is known."""
        store = ArticleStore()
        fake_connection = mock.Mock(vendor="oracle")
        with mock.patch.object(ArticleStore, "connection", new_callable=mock.PropertyMock) as conn:
            conn.return_value = fake_connection
            with self.assertRaises(ImproperlyConfigured):
                store.create_table()
        fake_connection.cursor.assert_not_called()

    def test_article_params_order(self):
        """Bind values follow the column order of the INSERT/UPDATE statements."""
        params = article_params({"body": "B", "title": "T", "ignored": "x"})
        self.assertEqual(params, ["T", None, None, None, None, "B"])

    def test_bootstrap_lock_uses_postgres_advisory_lock(self):
        """On PostgreSQL the lock is a transaction-scoped advisory lock."""
        store = ArticleStore()
        fake_connection = mock.MagicMock(vendor="postgresql")
        cursor = fake_connection.cursor.return_value.__enter__.return_value
        with mock.patch.object(ArticleStore, "connection", new_callable=mock.PropertyMock) as conn:
            conn.return_value = fake_connection
            store.lock_for_bootstrap()

        cursor.execute.assert_called_once_with("SELECT pg_advisory_xact_lock(%s)", [BOOTSTRAP_LOCK_KEY])

    def test_bootstrap_lock_is_noop_on_sqlite(self):
        fake_connection = mock.MagicMock(vendor="sqlite")
        with mock.patch.object(ArticleStore, "connection", new_callable=mock.PropertyMock) as conn:
            conn.return_value = fake_connection
            ArticleStore().lock_for_bootstrap()

        fake_connection.cursor.assert_not_called()

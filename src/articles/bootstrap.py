"""Startup routine: create the articles table if missing and seed it when empty."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from django.db import Error, transaction

from core.logging import get_logger

from .store import ArticleStore

log = get_logger(__name__)


@dataclass(frozen=True)
class BootstrapResult:
    table_ready: bool = False
    seeded: int = 0
    failed: int = 0


def load_fixture(path: Path) -> list[dict]:
    """Read the seed fixture: a JSON array of article objects."""
    records = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(records, list):
        raise ValueError(f"Fixture {path} must contain a JSON array, got {type(records).__name__}")
    return records


def seed_articles(store: ArticleStore, records: list) -> BootstrapResult:
    """Insert each record on its own; a failed insert does not stop the rest.

    A record that is not an object binds every column as NULL and fails on
    the engine's NOT NULL constraints like any other bad record.
    """
    seeded = failed = 0
    for index, record in enumerate(records):
        fields = record if isinstance(record, Mapping) else {}
        try:
            # Savepoint per record so one failure cannot poison the enclosing transaction.
            with transaction.atomic(using=store.using):
                store.insert(fields)
        except Error as exc:
            failed += 1
            log.error("bootstrap.insert_failed", index=index, title=fields.get("title"), error=str(exc))
        else:
            seeded += 1
    return BootstrapResult(table_ready=True, seeded=seeded, failed=failed)


def _seed_if_empty(store: ArticleStore, fixture_path: Path) -> BootstrapResult:
    store.lock_for_bootstrap()
    existing = store.count()
    if existing:
        log.debug("bootstrap.skip_seed", rows=existing)
        return BootstrapResult(table_ready=True)

    try:
        records = load_fixture(fixture_path)
    except (OSError, ValueError) as exc:
        log.error("bootstrap.fixture_unreadable", path=str(fixture_path), error=str(exc))
        return BootstrapResult(table_ready=True)

    result = seed_articles(store, records)
    log.info("bootstrap.seeded", path=str(fixture_path), seeded=result.seeded, failed=result.failed)
    return result


def bootstrap(store: ArticleStore, fixture_path: Path) -> BootstrapResult:
    """Ensure the schema exists, then seed from the fixture if the table is empty.

    Safe to run on every startup and from several processes at once: the
    emptiness check and the seed inserts share one transaction holding the
    store's bootstrap lock, so only the first process seeds. Errors are logged
    and never raised: a failed table creation ends the routine, a non-empty
    table is never re-seeded, and a fixture that cannot be read or parsed
    leaves the table as it is.
    """
    try:
        store.create_table()
    except Error as exc:
        log.error("bootstrap.create_table_failed", error=str(exc))
        return BootstrapResult(table_ready=False)

    try:
        with transaction.atomic(using=store.using):
            return _seed_if_empty(store, fixture_path)
    except Error as exc:
        log.error("bootstrap.seed_check_failed", error=str(exc))
        return BootstrapResult(table_ready=True)


__all__ = ["BootstrapResult", "bootstrap", "load_fixture", "seed_articles"]

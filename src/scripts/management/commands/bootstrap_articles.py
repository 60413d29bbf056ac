"""Create the articles table if missing and seed it from the JSON fixture."""

from pathlib import Path

from django.apps import apps
from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from django.db import Error

from articles.bootstrap import bootstrap


class Command(BaseCommand):
    """Management command running the articles bootstrap on demand."""

    help = (
        "Ensure the articles table exists and seed it from the fixture when empty. "
        "Use --reset to delete every article first so the fixture is reloaded."
    )

    def add_arguments(self, parser):
        parser.add_argument(
            "--reset",
            action="store_true",
            help="Delete every article before bootstrapping.",
        )
        parser.add_argument(
            "--fixture",
            type=Path,
            default=None,
            help="Path to the JSON fixture (defaults to ARTICLES_FIXTURE_PATH).",
        )

    def handle(self, *args, **options):
        """Entrypoint for the management command."""
        store = apps.get_app_config("articles").store
        fixture = options.get("fixture") or settings.ARTICLES_FIXTURE_PATH

        if options.get("reset"):
            self._reset(store)

        self.stdout.write(f"Bootstrapping articles from {fixture}...")
        result = bootstrap(store, fixture)
        if not result.table_ready:
            raise CommandError("Could not create the articles table; see the error log.")

        if result.seeded or result.failed:
            self.stdout.write(
                self.style.SUCCESS(f"Seeded {result.seeded} articles ({result.failed} failed).")
            )
        else:
            self.stdout.write("Nothing seeded.")

    def _reset(self, store) -> None:
        """Remove all rows; a missing table is left for bootstrap to create."""
        self.stdout.write("Deleting existing articles...")
        try:
            store.delete_all()
        except Error as exc:
            self.stdout.write(self.style.WARNING(f"Reset skipped: {exc}"))
            return
        self.stdout.write(self.style.WARNING("Articles cleared."))

"""Bootstrap the articles table, then start the development server on PORT."""

from django.apps import apps
from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand

from articles.bootstrap import bootstrap
from core.logging import get_logger

log = get_logger(__name__)


class Command(BaseCommand):
    help = "Run the articles bootstrap to completion, then serve HTTP on PORT."

    def add_arguments(self, parser):
        parser.add_argument("--port", type=int, default=None, help="Defaults to the PORT setting.")
        parser.add_argument("--noreload", action="store_true", help="Disable the auto-reloader.")

    def handle(self, *args, **options):
        port = options.get("port") or settings.PORT
        bootstrap(apps.get_app_config("articles").store, settings.ARTICLES_FIXTURE_PATH)
        log.info("server.starting", port=port)
        call_command("runserver", f"0.0.0.0:{port}", use_reloader=not options.get("noreload"))

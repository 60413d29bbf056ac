"""WSGI entry point.

Runs the articles bootstrap to completion before the application object is
handed to the server, so the first request never races table creation.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "core.settings")

application = get_wsgi_application()

from django.apps import apps  # noqa: E402
from django.conf import settings  # noqa: E402

from articles.bootstrap import bootstrap  # noqa: E402

bootstrap(apps.get_app_config("articles").store, settings.ARTICLES_FIXTURE_PATH)

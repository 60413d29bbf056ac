"""App configuration for the core project utilities."""

from django.apps import AppConfig
from django.conf import settings


class CoreConfig(AppConfig):
    """Core app holds shared settings, URLs, logging, and error handling."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "core"

    def ready(self) -> None:
        """Configure structlog once Django settings are loaded."""
        from .logging import configure_logging

        configure_logging(settings.LOG_LEVEL)

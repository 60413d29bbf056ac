"""App configuration for operational management commands."""

from django.apps import AppConfig


class ScriptsConfig(AppConfig):
    """Holds the bootstrap and serve management commands."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "scripts"

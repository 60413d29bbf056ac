"""App configuration for the articles resource."""

from django.apps import AppConfig
from django.conf import settings


class ArticlesConfig(AppConfig):
    """Articles app owns the single storage handle used by views and bootstrap."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "articles"

    def ready(self) -> None:
        """Build the storage handle once; no queries run here."""
        from .store import ArticleStore

        self.store = ArticleStore(using=settings.ARTICLES_DATABASE)

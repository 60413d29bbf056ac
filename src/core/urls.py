"""Root URL configuration for the Articles API."""
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView

from .pages import index_page, new_article_page

urlpatterns = [
    path("", index_page, name="index"),
    path("new", new_article_page, name="new-article"),
    path("schema/", SpectacularAPIView.as_view(), name="schema"),
    path("", include("articles.urls")),
]

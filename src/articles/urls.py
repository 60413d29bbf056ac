"""Routing for the article endpoints; a trailing slash is optional."""

from django.apps import apps
from django.urls import re_path

from .views import ArticleDetailView, ArticleListView

store = apps.get_app_config("articles").store

urlpatterns = [
    re_path(r"^articles/?$", ArticleListView.as_view(store=store), name="article-list"),
    re_path(
        r"^articles/(?P<article_id>[^/]+)/?$",
        ArticleDetailView.as_view(store=store),
        name="article-detail",
    ),
]

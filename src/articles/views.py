"""Article endpoints: each handler runs exactly one statement through the store."""

from collections.abc import Mapping

from django.http import HttpResponse
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema, inline_serializer
from rest_framework import serializers
from rest_framework.response import Response
from rest_framework.views import APIView

from .store import ARTICLE_FIELDS, ArticleStore

# Schema documentation only; request bodies are passed to the store unvalidated.
ARTICLE_FIELDS_SCHEMA = inline_serializer(
    name="ArticleFields",
    fields={name: serializers.CharField(required=False, allow_null=True) for name in ARTICLE_FIELDS},
)
ARTICLE_ROWS_SCHEMA = inline_serializer(
    name="ArticleRow",
    fields={
        "article_id": serializers.IntegerField(),
        **{name: serializers.CharField(allow_null=True) for name in ARTICLE_FIELDS},
    },
    many=True,
)
ACK_RESPONSE = {(200, "text/plain"): OpenApiTypes.STR}


def _acknowledge(message: str) -> HttpResponse:
    return HttpResponse(message, content_type="text/plain; charset=utf-8")


def _article_fields(request) -> Mapping:
    """Body fields to bind; a body that is not an object binds every column as NULL."""
    return request.data if isinstance(request.data, Mapping) else {}


class ArticleStoreView(APIView):
    """Base view receiving the shared store through ``as_view(store=...)``."""

    store: ArticleStore | None = None


class ArticleListView(ArticleStoreView):
    """Collection routes: list, create, and delete everything."""

    @extend_schema(responses={200: ARTICLE_ROWS_SCHEMA})
    def get(self, request):
        """Return every article row as a JSON array."""
        return Response(self.store.list_all())

    @extend_schema(request=ARTICLE_FIELDS_SCHEMA, responses=ACK_RESPONSE)
    def post(self, request):
        """Insert one article built from the body fields."""
        self.store.insert(_article_fields(request))
        return _acknowledge("insert complete")

    @extend_schema(responses=ACK_RESPONSE)
    def delete(self, request):
        """Delete every article."""
        self.store.delete_all()
        return _acknowledge("Delete complete")


class ArticleDetailView(ArticleStoreView):
    """Single-article routes keyed by ``article_id``."""

    @extend_schema(request=ARTICLE_FIELDS_SCHEMA, responses=ACK_RESPONSE)
    def put(self, request, article_id):
        """Overwrite every field of one article; unknown ids still acknowledge."""
        self.store.update(article_id, _article_fields(request))
        return _acknowledge("update complete")

    @extend_schema(responses=ACK_RESPONSE)
    def delete(self, request, article_id):
        self.store.delete(article_id)
        return _acknowledge("Delete complete")


__all__ = ["ArticleDetailView", "ArticleListView"]

"""Static HTML pages served from PUBLIC_DIR."""

from django.conf import settings
from django.http import FileResponse, Http404
from django.views.decorators.http import require_GET


def _serve(filename: str) -> FileResponse:
    path = settings.PUBLIC_DIR / filename
    if not path.is_file():
        raise Http404(f"{filename} not found")
    return FileResponse(path.open("rb"), content_type="text/html; charset=utf-8")


@require_GET
def index_page(request):
    return _serve("index.html")


@require_GET
def new_article_page(request):
    return _serve("new.html")


__all__ = ["index_page", "new_article_page"]

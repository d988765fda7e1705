"""
Views for django-blog-cms.

The dashboard API answers JSON in a {"success": ..., "data"/"error": ...}
envelope; the public endpoints expose published articles only.
"""
import json
import logging

from django.contrib.auth.mixins import LoginRequiredMixin
from django.core.paginator import Paginator
from django.http import JsonResponse
from django.views import View

from .conf import blog_settings
from .exceptions import (
    ConfigurationError,
    NotFoundError,
    SlugConflictError,
    ValidationError,
)
from .seo import article_metadata
from .services import ArticleService, MediaLibraryService
from .types import ArticleCreateInput, ArticleUpdateInput

logger = logging.getLogger(__name__)


def json_error(message, status):
    return JsonResponse({"success": False, "error": message}, status=status)


def json_data(data, status=200):
    return JsonResponse({"success": True, "data": data}, status=status)


def parse_id_param(request, name):
    value = request.GET.get(name)
    if not value:
        return None
    if not value.isdigit():
        raise ValidationError(f"{name} must be an integer id")
    return int(value)


def parse_json_body(request):
    try:
        return json.loads(request.body or b"{}")
    except (ValueError, UnicodeDecodeError):
        raise ValidationError("Request body must be valid JSON") from None


class ApiView(LoginRequiredMixin, View):
    """
    Base view for the authenticated dashboard API.

    Unauthenticated requests get a 401 JSON answer instead of a login
    redirect, and service errors are mapped to HTTP statuses.
    """

    def handle_no_permission(self):
        return json_error("Unauthorized - Please sign in", 401)

    def dispatch(self, request, *args, **kwargs):
        try:
            return super().dispatch(request, *args, **kwargs)
        except ValidationError as exc:
            return json_error(str(exc), 400)
        except SlugConflictError:
            return json_error("Slug already exists", 400)
        except NotFoundError as exc:
            return json_error(str(exc), 404)
        except ConfigurationError as exc:
            logger.error("Blog CMS is misconfigured: %s", exc)
            return json_error(str(exc), 500)


class ArticleCollectionView(ApiView):
    """List all articles or create a new one."""

    def get(self, request):
        service = ArticleService.from_settings()
        articles = service.list(
            status=request.GET.get("status") or None,
            author=parse_id_param(request, "authorId"),
        )
        return json_data([article.as_dict() for article in articles])

    def post(self, request):
        data = ArticleCreateInput.from_payload(parse_json_body(request), author=request.user)
        article = ArticleService.from_settings().create(data)
        return json_data(article.as_dict(), status=201)


class ArticleItemView(ApiView):
    """Fetch, update or delete one article."""

    def get(self, request, pk):
        article = ArticleService.from_settings().get(pk)
        return json_data(article.as_dict())

    def put(self, request, pk):
        data = ArticleUpdateInput.from_payload(parse_json_body(request))
        article = ArticleService.from_settings().update(pk, data)
        return json_data(article.as_dict())

    def delete(self, request, pk):
        ArticleService.from_settings().delete(pk)
        return json_data({})


class MediaCollectionView(ApiView):
    """List media items or add one."""

    def get(self, request):
        items = MediaLibraryService().list(
            uploaded_by=parse_id_param(request, "uploadedBy"),
        )
        return json_data([item.as_dict() for item in items])

    def post(self, request):
        payload = parse_json_body(request)
        if not isinstance(payload, dict):
            raise ValidationError("Request body must be a JSON object")
        item = MediaLibraryService().create(
            file_name=payload.get("fileName"),
            url=payload.get("url"),
            alt_text=payload.get("altText"),
            size=payload.get("size"),
            uploaded_by=request.user,
        )
        return json_data(item.as_dict(), status=201)


class MediaItemView(ApiView):
    """Fetch or delete one media item."""

    def get(self, request, pk):
        return json_data(MediaLibraryService().get(pk).as_dict())

    def delete(self, request, pk):
        MediaLibraryService().delete(pk)
        return json_data({})


class PublishedArticleListView(View):
    """List published articles with pagination."""

    def get(self, request):
        articles = ArticleService.from_settings().list_published()
        paginator = Paginator(articles, blog_settings.ARTICLES_PER_PAGE)
        page = paginator.get_page(request.GET.get("page"))
        return json_data({
            "articles": [article.as_dict() for article in page.object_list],
            "page": page.number,
            "num_pages": paginator.num_pages,
            "total": paginator.count,
        })


class PublishedArticleDetailView(View):
    """Display a single published article with SEO metadata."""

    def get(self, request, slug):
        service = ArticleService.from_settings()
        try:
            article = service.get_published(slug)
        except NotFoundError:
            return json_error("Post not found", 404)

        return json_data({
            "article": article.as_dict(),
            "metadata": article_metadata(article),
            "related": [related.as_dict() for related in service.related(article)],
        })

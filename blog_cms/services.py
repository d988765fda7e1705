"""
Article and media services.

ArticleService turns create/update requests into stored articles:

    title -> slug -> canonical URL -> unique row

It keeps no state between calls, so any number of instances may run side
by side; slug uniqueness is left to the database index.
"""
import logging

from .conf import blog_settings
from .exceptions import (
    DuplicateKeyError,
    NotFoundError,
    SlugConflictError,
    ValidationError,
)
from .slugs import (
    CanonicalUrlBuilder,
    derive_slug as derive_title_slug,
    is_valid_canonical_url,
    is_valid_slug,
)
from .models import Article
from .store import ArticleStore, MediaStore
from .types import ArticleRecord, FeaturedImage, MediaRecord

logger = logging.getLogger(__name__)

TEXT_FIELDS = ("title", "slug", "canonical_url", "content", "meta_title", "meta_description")


def _normalize_labels(value, field_name):
    """Strip labels, drop blanks and repeats, keep first-seen order."""
    if value is None:
        return []
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise ValidationError(f"{field_name} must be a list of strings")
    labels = []
    for item in value:
        if not isinstance(item, str):
            raise ValidationError(f"{field_name} must be a list of strings")
        label = item.strip()
        if label and label not in labels:
            labels.append(label)
    return labels


class ArticleService:
    """
    Create, update and look up articles.

    Args:
        base_url: Origin for auto-generated canonical URLs
        store: ArticleStore to persist through (defaults to a new one)
    """

    def __init__(self, base_url=None, store=None):
        self.url_builder = CanonicalUrlBuilder(base_url)
        self.store = store or ArticleStore()

    @classmethod
    def from_settings(cls):
        return cls(base_url=blog_settings.BASE_URL)

    def create(self, data):
        """
        Create an article, deriving slug and canonical URL when not given.

        Raises:
            ValidationError: missing title, empty derived slug, bad field
            SlugConflictError: the slug is taken
            ConfigurationError: a canonical URL is needed but no base URL
        """
        fields = self._coerce_text(data.provided())

        title = fields.get("title", "").strip()
        if not title:
            raise ValidationError("title is required")
        fields["title"] = title

        if not fields.get("slug"):
            fields["slug"] = self.derive_slug(title)

        if not fields.get("canonical_url"):
            fields["canonical_url"] = self.url_builder.build(fields["slug"])
            logger.debug("Built canonical URL %s", fields["canonical_url"])

        cleaned = self._clean(fields)
        article = self._write(self.store.insert, cleaned)
        logger.info("Created article %s (%s)", article.pk, article.slug)
        return ArticleRecord.from_model(article)

    def update(self, pk, data):
        """
        Update an article.

        Slug and canonical URL are regenerated only when they are absent
        from data. An explicit "" is stored as given.

        Raises:
            NotFoundError: no article with pk
            ValidationError: empty title, empty derived slug, bad field
            SlugConflictError: the slug belongs to another article
        """
        fields = self._coerce_text(data.provided())

        if "title" in fields:
            fields["title"] = fields["title"].strip()
            if not fields["title"]:
                raise ValidationError("title cannot be empty")

        if "slug" not in fields and fields.get("title"):
            fields["slug"] = self.derive_slug(fields["title"])

        if "canonical_url" not in fields and fields.get("slug"):
            fields["canonical_url"] = self.url_builder.build(fields["slug"])
            logger.debug("Rebuilt canonical URL %s", fields["canonical_url"])

        cleaned = self._clean(fields)
        article = self._write(lambda patch: self.store.update(pk, patch), cleaned)
        logger.info("Updated article %s (%s)", article.pk, article.slug)
        return ArticleRecord.from_model(article)

    def delete(self, pk):
        self.store.delete(pk)
        logger.info("Deleted article %s", pk)

    def get(self, pk):
        return ArticleRecord.from_model(self.store.get(pk))

    def list(self, status=None, author=None):
        """Return articles newest first, optionally filtered."""
        qs = self.store.all()
        if status:
            qs = qs.filter(status=status)
        if author is not None:
            qs = qs.filter(author=author)
        return [ArticleRecord.from_model(article) for article in qs.order_by("-created_at")]

    def list_published(self):
        return [
            ArticleRecord.from_model(article)
            for article in self.store.published().order_by("-created_at")
        ]

    def get_published(self, slug):
        """
        Return the published article with this slug.

        Raises:
            NotFoundError: no such slug, or the article is a draft
        """
        article = self.store.published().filter(slug=slug).first()
        if article is None:
            raise NotFoundError(f"No published article with slug {slug!r}")
        return ArticleRecord.from_model(article)

    def related(self, record, limit=None):
        """Return published articles sharing at least one category."""
        if limit is None:
            limit = blog_settings.RELATED_ARTICLES_LIMIT
        categories = set(record.categories)
        if not categories or limit <= 0:
            return []

        related = []
        candidates = self.store.published().exclude(pk=record.id).order_by("-created_at")
        for article in candidates.iterator():
            if categories.intersection(article.categories or ()):
                related.append(ArticleRecord.from_model(article))
                if len(related) >= limit:
                    break
        return related

    def derive_slug(self, title):
        """
        Derive the slug for title.

        Raises:
            ValidationError: the title produces an empty slug
        """
        slug = derive_title_slug(title)
        if not slug:
            raise ValidationError("title produces empty slug")
        logger.debug("Derived slug %r from title %r", slug, title)
        return slug

    def _coerce_text(self, fields):
        for name in TEXT_FIELDS:
            if name not in fields:
                continue
            value = fields[name]
            if value is None:
                fields[name] = ""
            elif not isinstance(value, str):
                raise ValidationError(f"{name} must be a string")
        return fields

    def _clean(self, fields):
        """Validate fields and map them onto Article model columns."""
        cleaned = dict(fields)

        title_max_length = Article._meta.get_field("title").max_length
        if len(cleaned.get("title", "")) > title_max_length:
            raise ValidationError(f"title is longer than {title_max_length} characters")

        slug = cleaned.get("slug")
        if slug:
            if len(slug) > blog_settings.SLUG_MAX_LENGTH:
                raise ValidationError(
                    f"slug is longer than {blog_settings.SLUG_MAX_LENGTH} characters"
                )
            if not is_valid_slug(slug):
                raise ValidationError(
                    "slug may only contain lowercase letters, numbers and single hyphens"
                )

        canonical_url = cleaned.get("canonical_url")
        if canonical_url and not is_valid_canonical_url(canonical_url):
            raise ValidationError("canonicalUrl must be an absolute http(s) URL")

        if "status" in cleaned and cleaned["status"] not in blog_settings.status_values:
            raise ValidationError(
                f"status must be one of: {', '.join(blog_settings.status_values)}"
            )

        for name in ("categories", "keywords"):
            if name in cleaned:
                cleaned[name] = _normalize_labels(cleaned[name], name)

        if "featured_image" in cleaned:
            image = FeaturedImage.from_value(cleaned.pop("featured_image"))
            if image and not is_valid_canonical_url(image.url):
                raise ValidationError("featuredImage.url must be an absolute http(s) URL")
            cleaned["featured_image_url"] = image.url if image else ""
            cleaned["featured_image_alt"] = image.alt if image else ""

        return cleaned

    def _write(self, operation, fields):
        try:
            return operation(fields)
        except DuplicateKeyError as exc:
            if exc.field != "slug":
                raise
            logger.warning("Slug conflict on %r", exc.value)
            raise SlugConflictError(exc.value) from exc


class MediaLibraryService:
    """Record and manage media items hosted by an external storage provider."""

    def __init__(self, store=None):
        self.store = store or MediaStore()

    def create(self, file_name, url, alt_text, uploaded_by=None, size=None):
        """
        Add a media item to the library.

        Raises:
            ValidationError: missing field, bad URL, or the file name or URL
                is already in the library
        """
        if not file_name or not url or not alt_text:
            raise ValidationError("fileName, url, and altText are required")
        if not is_valid_canonical_url(url):
            raise ValidationError("url must be an absolute http(s) URL")
        if size is not None and (not isinstance(size, int) or isinstance(size, bool) or size < 0):
            raise ValidationError("size must be a non-negative integer")

        fields = {
            "file_name": file_name,
            "url": url,
            "alt_text": alt_text,
            "size": size,
            "uploaded_by": uploaded_by,
        }
        try:
            item = self.store.insert(fields)
        except DuplicateKeyError as exc:
            logger.warning("Duplicate media %s %r", exc.field, exc.value)
            raise ValidationError("File name or URL already exists") from exc
        logger.info("Created media item %s (%s)", item.pk, item.file_name)
        return MediaRecord.from_model(item)

    def record_upload(self, file_name, url, size, uploaded_by=None, alt_text=""):
        """Store the result of an upload; alt text defaults to the file name."""
        return self.create(
            file_name=file_name,
            url=url,
            alt_text=alt_text or file_name,
            uploaded_by=uploaded_by,
            size=size,
        )

    def get(self, pk):
        return MediaRecord.from_model(self.store.get(pk))

    def delete(self, pk):
        self.store.delete(pk)
        logger.info("Deleted media item %s", pk)

    def list(self, uploaded_by=None):
        qs = self.store.all()
        if uploaded_by is not None:
            qs = qs.filter(uploaded_by=uploaded_by)
        return [MediaRecord.from_model(item) for item in qs.order_by("-uploaded_at")]

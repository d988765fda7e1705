"""
Article model for django-blog-cms.
"""
import math

from django.conf import settings
from django.db import models
from django.urls import reverse
from django.utils.html import strip_tags

from ..conf import blog_settings
from ..slugs import validate_article_slug, validate_canonical_url


def estimate_reading_time(content):
    """Return estimated reading time in whole minutes (minimum 1)."""
    words = len(strip_tags(content or "").split())
    return max(1, math.ceil(words / blog_settings.WORDS_PER_MINUTE))


class Article(models.Model):
    """
    Blog article with SEO fields.

    The slug is unique at the database level; the service layer relies on
    that index rather than checking before writing.
    """

    STATUS_DRAFT = "draft"
    STATUS_PUBLISHED = "published"

    # Content
    title = models.CharField(max_length=255)
    slug = models.SlugField(
        max_length=blog_settings.SLUG_MAX_LENGTH,
        unique=True,
        blank=True,
        validators=[validate_article_slug],
    )
    content = models.TextField(blank=True)

    # Status
    status = models.CharField(
        max_length=20,
        choices=blog_settings.STATUS_CHOICES,
        default=blog_settings.DEFAULT_STATUS,
        db_index=True,
    )

    # Taxonomy
    categories = models.JSONField(
        default=list,
        blank=True,
        help_text="Category labels, in display order",
    )

    # SEO
    canonical_url = models.CharField(
        max_length=500,
        blank=True,
        validators=[validate_canonical_url],
    )
    meta_title = models.CharField(max_length=255, blank=True)
    meta_description = models.TextField(blank=True)
    keywords = models.JSONField(default=list, blank=True)

    # Featured image
    featured_image_url = models.URLField(max_length=500, blank=True)
    featured_image_alt = models.CharField(max_length=255, blank=True)

    # Author - uses Django's AUTH_USER_MODEL
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="blog_articles",
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["status", "-created_at"]),
        ]

    def __str__(self):
        return self.title

    def get_absolute_url(self):
        return reverse("blog_cms:article_detail", kwargs={"slug": self.slug})

    @property
    def is_published(self):
        return self.status == self.STATUS_PUBLISHED

    @property
    def has_featured_image(self):
        return bool(self.featured_image_url)

    @property
    def reading_time(self):
        """Estimated reading time of the content in minutes."""
        return estimate_reading_time(self.content)

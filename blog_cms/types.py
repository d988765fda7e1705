"""
Structured input and output types for the article and media services.

Inputs distinguish an absent field (UNSET) from an explicit empty value:
on update, only absent fields are auto-derived.
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any

from .exceptions import ValidationError


class _Unset:
    """Marker for a field the caller did not send."""

    def __repr__(self):
        return "UNSET"

    def __bool__(self):
        return False


UNSET: Any = _Unset()


@dataclass(frozen=True)
class FeaturedImage:
    url: str
    alt: str = ""

    @classmethod
    def from_value(cls, value):
        """Coerce a FeaturedImage, a {url, alt} mapping or None."""
        if value is None or isinstance(value, cls):
            return value
        if not isinstance(value, dict):
            raise ValidationError("featuredImage must be an object with url and alt")
        url = value.get("url") or ""
        if not url:
            return None
        return cls(url=url, alt=value.get("alt") or "")


# JSON wire key -> input field
_PAYLOAD_KEYS = {
    "title": "title",
    "slug": "slug",
    "canonicalUrl": "canonical_url",
    "status": "status",
    "content": "content",
    "categories": "categories",
    "keywords": "keywords",
    "featuredImage": "featured_image",
    "metaTitle": "meta_title",
    "metaDescription": "meta_description",
}


@dataclass
class _ArticleInput:
    title: Any = UNSET
    slug: Any = UNSET
    canonical_url: Any = UNSET
    status: Any = UNSET
    content: Any = UNSET
    categories: Any = UNSET
    keywords: Any = UNSET
    featured_image: Any = UNSET
    meta_title: Any = UNSET
    meta_description: Any = UNSET
    author: Any = UNSET

    def provided(self) -> dict[str, Any]:
        """Return only the fields the caller actually set."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }

    @classmethod
    def from_payload(cls, payload, author=UNSET):
        """
        Build an input from a decoded JSON request body.

        Keys missing from the payload stay UNSET; unknown keys are ignored.

        Raises:
            ValidationError: if payload is not a JSON object
        """
        if not isinstance(payload, dict):
            raise ValidationError("Request body must be a JSON object")
        values = {
            field_name: payload[key]
            for key, field_name in _PAYLOAD_KEYS.items()
            if key in payload
        }
        return cls(author=author, **values)


class ArticleCreateInput(_ArticleInput):
    """Fields accepted by ArticleService.create. Title is required."""


class ArticleUpdateInput(_ArticleInput):
    """Fields accepted by ArticleService.update. Every field is optional."""


@dataclass(frozen=True)
class ArticleRecord:
    """A stored article as returned by ArticleService."""

    id: int
    title: str
    slug: str
    canonical_url: str
    status: str
    content: str
    categories: tuple[str, ...]
    keywords: tuple[str, ...]
    featured_image: FeaturedImage | None
    meta_title: str
    meta_description: str
    author_id: int | None
    reading_time: int
    created_at: datetime
    updated_at: datetime

    @property
    def is_published(self):
        return self.status == "published"

    @classmethod
    def from_model(cls, article):
        featured_image = None
        if article.featured_image_url:
            featured_image = FeaturedImage(
                url=article.featured_image_url,
                alt=article.featured_image_alt,
            )
        return cls(
            id=article.pk,
            title=article.title,
            slug=article.slug,
            canonical_url=article.canonical_url,
            status=article.status,
            content=article.content,
            categories=tuple(article.categories or ()),
            keywords=tuple(article.keywords or ()),
            featured_image=featured_image,
            meta_title=article.meta_title,
            meta_description=article.meta_description,
            author_id=article.author_id,
            reading_time=article.reading_time,
            created_at=article.created_at,
            updated_at=article.updated_at,
        )

    def as_dict(self):
        """Return the JSON wire representation."""
        featured_image = None
        if self.featured_image:
            featured_image = {"url": self.featured_image.url, "alt": self.featured_image.alt}
        return {
            "id": self.id,
            "title": self.title,
            "slug": self.slug,
            "canonicalUrl": self.canonical_url,
            "status": self.status,
            "content": self.content,
            "categories": list(self.categories),
            "keywords": list(self.keywords),
            "featuredImage": featured_image,
            "metaTitle": self.meta_title,
            "metaDescription": self.meta_description,
            "authorId": self.author_id,
            "readingTime": self.reading_time,
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }


@dataclass(frozen=True)
class MediaRecord:
    """A stored media library item."""

    id: int
    file_name: str
    url: str
    alt_text: str
    size: int | None
    uploaded_by_id: int | None
    uploaded_at: datetime

    @classmethod
    def from_model(cls, item):
        return cls(
            id=item.pk,
            file_name=item.file_name,
            url=item.url,
            alt_text=item.alt_text,
            size=item.size,
            uploaded_by_id=item.uploaded_by_id,
            uploaded_at=item.uploaded_at,
        )

    def as_dict(self):
        return {
            "id": self.id,
            "fileName": self.file_name,
            "url": self.url,
            "altText": self.alt_text,
            "size": self.size,
            "uploadedBy": self.uploaded_by_id,
            "uploadedAt": self.uploaded_at.isoformat(),
        }

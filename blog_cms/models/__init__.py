"""
Models for django-blog-cms.

All models are importable from blog_cms.models:

    from blog_cms.models import Article, MediaItem
"""
from .articles import Article
from .media import MediaItem

__all__ = [
    "Article",
    "MediaItem",
]

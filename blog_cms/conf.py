"""
Configuration settings for django-blog-cms.

Override these in your Django settings.py:

    BLOG_CMS = {
        'BASE_URL': 'https://blog.example.com',
        'RELATED_ARTICLES_LIMIT': 3,
        ...
    }

BASE_URL is only read where a service is constructed; from there it is
passed explicitly into the canonical URL builder.
"""
from django.conf import settings

DEFAULTS = {
    # Origin used for canonical URLs, e.g. "https://blog.example.com"
    "BASE_URL": None,

    # Articles
    "STATUS_CHOICES": [
        ("draft", "Draft"),
        ("published", "Published"),
    ],
    "DEFAULT_STATUS": "draft",
    "SLUG_MAX_LENGTH": 255,

    # Public blog
    "ARTICLES_PER_PAGE": 10,
    "RELATED_ARTICLES_LIMIT": 3,
    "WORDS_PER_MINUTE": 200,
}


class BlogCmsSettings:
    """
    Lazy settings object that reads from Django settings.

    Access via: from blog_cms.conf import blog_settings
    """

    def __getattr__(self, name):
        if name not in DEFAULTS:
            raise AttributeError(f"Invalid blog_cms setting: {name}")

        user_settings = getattr(settings, "BLOG_CMS", {})
        return user_settings.get(name, DEFAULTS[name])

    @property
    def status_values(self):
        """Return the allowed status values (without labels)."""
        return [value for value, _label in self.STATUS_CHOICES]


blog_settings = BlogCmsSettings()

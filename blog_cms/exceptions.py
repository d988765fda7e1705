"""
Error taxonomy for django-blog-cms.

All errors are raised synchronously and never retried by the app; callers
decide how to present them and whether to retry with different input.
"""


class BlogCmsError(Exception):
    """Base class for blog_cms errors."""


class ValidationError(BlogCmsError):
    """Malformed or missing input, e.g. a title that produces an empty slug."""


class SlugConflictError(BlogCmsError):
    """Another article already uses the requested slug."""

    def __init__(self, slug):
        self.slug = slug
        super().__init__(f"Slug already exists: {slug!r}")


class NotFoundError(BlogCmsError):
    """No record with the requested id (or slug)."""


class ConfigurationError(BlogCmsError):
    """No base origin could be resolved for a canonical URL."""


class DuplicateKeyError(BlogCmsError):
    """A unique column rejected the write. Raised by the stores."""

    def __init__(self, field, value):
        self.field = field
        self.value = value
        super().__init__(f"Duplicate value for {field}: {value!r}")

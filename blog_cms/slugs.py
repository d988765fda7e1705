"""
Slug and canonical URL helpers.

    derive_slug("Hello, World! 2024")           -> "hello-world-2024"
    CanonicalUrlBuilder("https://example.com/").build("hello-world")
                                                -> "https://example.com/blog/hello-world"
"""
import re
from urllib.parse import urlsplit

from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import RegexValidator

from .exceptions import ConfigurationError

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")

_DISALLOWED_TITLE_CHARS = re.compile(r"[^a-z0-9\s-]")
_DISALLOWED_SLUG_CHARS = re.compile(r"[^a-z0-9-]")
_WHITESPACE_RUN = re.compile(r"\s+")
_HYPHEN_RUN = re.compile(r"-+")

CANONICAL_URL_SCHEMES = ("http", "https")

validate_article_slug = RegexValidator(
    SLUG_PATTERN,
    "Enter a slug of lowercase letters and numbers separated by single hyphens.",
    "invalid",
)


def derive_slug(title):
    """
    Derive a URL-safe slug from a free-text title.

    Pure and deterministic. Anything that is not an ASCII letter, digit,
    whitespace or hyphen is dropped, so the result is either "" or a valid
    slug. A valid slug passed back in is returned unchanged.

    Args:
        title: Title text (None is treated as "")

    Returns:
        Slug string, possibly empty
    """
    if not title:
        return ""

    slug = title.lower().strip()
    slug = _DISALLOWED_TITLE_CHARS.sub("", slug)
    slug = _WHITESPACE_RUN.sub("-", slug)
    slug = _HYPHEN_RUN.sub("-", slug)
    return slug.strip("-")


def clean_slug_input(text):
    """Normalize a slug typed by hand in the editor."""
    if not text:
        return ""

    slug = _WHITESPACE_RUN.sub("-", text.lower().strip())
    slug = _DISALLOWED_SLUG_CHARS.sub("", slug)
    slug = _HYPHEN_RUN.sub("-", slug)
    return slug.strip("-")


def is_valid_slug(slug):
    """Check that slug is lowercase alphanumerics separated by single hyphens."""
    if not isinstance(slug, str):
        return False
    return SLUG_PATTERN.fullmatch(slug) is not None


def is_valid_canonical_url(url):
    """Check that url is an absolute http(s) URL. Never raises."""
    if not isinstance(url, str) or not url:
        return False
    if any(char.isspace() for char in url):
        return False
    try:
        parts = urlsplit(url)
        # port is parsed lazily and raises on out-of-range values
        parts.port
    except ValueError:
        return False
    return parts.scheme in CANONICAL_URL_SCHEMES and bool(parts.hostname)


def validate_canonical_url(value):
    """Model field validator wrapping is_valid_canonical_url."""
    if not is_valid_canonical_url(value):
        raise DjangoValidationError(
            "Enter an absolute http or https URL.",
            code="invalid",
            params={"value": value},
        )


class CanonicalUrlBuilder:
    """
    Build canonical article URLs of the form {origin}/blog/{slug}.

    The configured base URL is given explicitly; there is no fallback to
    global state or to a request origin.
    """

    path_prefix = "/blog/"

    def __init__(self, base_url=None):
        self.base_url = base_url

    def resolve_origin(self, base_origin=None):
        origin = base_origin or self.base_url
        if not origin:
            raise ConfigurationError(
                "No base URL configured for canonical URLs; "
                "set BLOG_CMS['BASE_URL'] or pass base_origin"
            )
        if origin.endswith("/"):
            origin = origin[:-1]
        return origin

    def build(self, slug, base_origin=None):
        """
        Return the canonical URL for slug.

        An empty slug yields "{origin}/blog/"; reject empty slugs upstream.

        Raises:
            ConfigurationError: if neither base_origin nor a configured
                base URL is available
        """
        return f"{self.resolve_origin(base_origin)}{self.path_prefix}{slug}"

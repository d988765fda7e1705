"""
Shared fixtures for django-blog-cms tests.
"""
import pytest
from django.contrib.auth import get_user_model

from blog_cms.services import ArticleService, MediaLibraryService
from blog_cms.types import ArticleCreateInput

User = get_user_model()

BASE_URL = "https://blog.example.com"


@pytest.fixture
def user(db):
    """Create a test user."""
    return User.objects.create_user(
        username="testuser",
        email="test@example.com",
        password="testpass123",
    )


@pytest.fixture
def service(db):
    """Article service with an explicit base URL."""
    return ArticleService(base_url=BASE_URL)


@pytest.fixture
def media_service(db):
    return MediaLibraryService()


@pytest.fixture
def article(service, user):
    """Create a published test article."""
    return service.create(ArticleCreateInput(
        title="Test Article",
        content="<p>This is a test article body.</p>",
        status="published",
        categories=["django"],
        author=user,
    ))

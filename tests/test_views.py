"""
Tests for the dashboard API and public blog views.
"""
import json

import pytest
from django.urls import reverse

from blog_cms.models import Article, MediaItem
from blog_cms.types import ArticleCreateInput


@pytest.fixture
def api_client(client, user):
    client.force_login(user)
    return client


def post_json(client, url, payload):
    return client.post(url, data=json.dumps(payload), content_type="application/json")


def put_json(client, url, payload):
    return client.put(url, data=json.dumps(payload), content_type="application/json")


class TestArticleApi:
    """Tests for /api/posts/."""

    def test_requires_login(self, client, db):
        response = client.get(reverse("blog_cms:api_article_list"))

        assert response.status_code == 401
        assert response.json() == {"success": False, "error": "Unauthorized - Please sign in"}

    def test_create(self, api_client, user):
        response = post_json(api_client, reverse("blog_cms:api_article_list"), {
            "title": "My First Post",
            "content": "<p>Hello</p>",
            "categories": ["News"],
        })

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["slug"] == "my-first-post"
        assert data["canonicalUrl"] == "https://blog.example.com/blog/my-first-post"
        assert data["authorId"] == user.pk

    def test_create_conflict(self, api_client):
        url = reverse("blog_cms:api_article_list")
        post_json(api_client, url, {"title": "Launch Day"})
        response = post_json(api_client, url, {"title": "Launch Day"})

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Slug already exists"}

    def test_create_empty_slug_title(self, api_client):
        response = post_json(api_client, reverse("blog_cms:api_article_list"), {"title": "---"})

        assert response.status_code == 400
        assert "empty slug" in response.json()["error"]

    def test_create_without_base_url(self, api_client, settings):
        settings.BLOG_CMS = {}
        response = post_json(api_client, reverse("blog_cms:api_article_list"), {"title": "No Base"})

        assert response.status_code == 500
        body = response.json()
        assert body["success"] is False
        assert "BASE_URL" in body["error"]
        assert not Article.objects.exists()

    def test_create_bad_json(self, api_client):
        response = api_client.post(
            reverse("blog_cms:api_article_list"),
            data="{not json",
            content_type="application/json",
        )
        assert response.status_code == 400

    def test_list_filters(self, api_client, service):
        service.create(ArticleCreateInput(title="Draft", status="draft"))
        service.create(ArticleCreateInput(title="Live", status="published"))

        response = api_client.get(reverse("blog_cms:api_article_list"), {"status": "published"})

        assert response.status_code == 200
        assert [a["slug"] for a in response.json()["data"]] == ["live"]

    def test_list_bad_author_id(self, api_client):
        response = api_client.get(reverse("blog_cms:api_article_list"), {"authorId": "abc"})
        assert response.status_code == 400

    def test_get_update_delete(self, api_client, article):
        url = reverse("blog_cms:api_article_item", kwargs={"pk": article.id})

        response = api_client.get(url)
        assert response.status_code == 200
        assert response.json()["data"]["slug"] == "test-article"

        response = put_json(api_client, url, {"title": "Updated Title"})
        assert response.status_code == 200
        assert response.json()["data"]["slug"] == "updated-title"

        response = api_client.delete(url)
        assert response.status_code == 200
        assert response.json() == {"success": True, "data": {}}
        assert not Article.objects.filter(pk=article.id).exists()

        assert api_client.get(url).status_code == 404

    def test_update_explicit_empty_slug(self, api_client, article):
        url = reverse("blog_cms:api_article_item", kwargs={"pk": article.id})
        response = put_json(api_client, url, {"slug": ""})

        assert response.status_code == 200
        assert response.json()["data"]["slug"] == ""

    def test_update_missing(self, api_client):
        url = reverse("blog_cms:api_article_item", kwargs={"pk": 999})
        response = put_json(api_client, url, {"title": "Ghost"})
        assert response.status_code == 404


class TestMediaApi:
    """Tests for /api/media/."""

    def test_create_and_list(self, api_client, user):
        url = reverse("blog_cms:api_media_list")
        response = post_json(api_client, url, {
            "fileName": "photo.jpg",
            "url": "https://cdn.example.com/photo.jpg",
            "altText": "A photo",
            "size": 1024,
        })

        assert response.status_code == 201
        assert response.json()["data"]["uploadedBy"] == user.pk

        response = api_client.get(url, {"uploadedBy": user.pk})
        assert [m["fileName"] for m in response.json()["data"]] == ["photo.jpg"]

    def test_create_missing_fields(self, api_client):
        response = post_json(api_client, reverse("blog_cms:api_media_list"), {"fileName": "a.jpg"})

        assert response.status_code == 400
        assert response.json()["error"] == "fileName, url, and altText are required"

    def test_create_duplicate(self, api_client):
        url = reverse("blog_cms:api_media_list")
        payload = {"fileName": "a.jpg", "url": "https://cdn.example.com/a.jpg", "altText": "A"}
        post_json(api_client, url, payload)
        response = post_json(api_client, url, payload)

        assert response.status_code == 400
        assert response.json()["error"] == "File name or URL already exists"

    def test_get_and_delete(self, api_client, media_service):
        item = media_service.create(
            file_name="a.jpg", url="https://cdn.example.com/a.jpg", alt_text="A",
        )
        url = reverse("blog_cms:api_media_item", kwargs={"pk": item.id})

        assert api_client.get(url).json()["data"]["fileName"] == "a.jpg"
        assert api_client.delete(url).status_code == 200
        assert not MediaItem.objects.exists()
        assert api_client.delete(url).status_code == 404


class TestPublicViews:
    """Tests for the public blog endpoints."""

    def test_detail(self, client, service, article):
        service.create(ArticleCreateInput(
            title="Sibling", status="published", categories=["django"],
        ))

        response = client.get(f"/blog/{article.slug}")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["article"]["id"] == article.id
        assert data["metadata"]["canonical"] == "https://blog.example.com/blog/test-article"
        assert [r["slug"] for r in data["related"]] == ["sibling"]

    def test_draft_not_found(self, client, service):
        draft = service.create(ArticleCreateInput(title="Secret Draft"))

        response = client.get(f"/blog/{draft.slug}")

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Post not found"}

    def test_list_paginates(self, client, service):
        for title in ["One", "Two", "Three"]:
            service.create(ArticleCreateInput(title=title, status="published"))
        service.create(ArticleCreateInput(title="Hidden"))

        response = client.get(reverse("blog_cms:article_list"))
        data = response.json()["data"]

        assert data["total"] == 3
        assert data["num_pages"] == 2
        assert len(data["articles"]) == 2

        data = client.get(reverse("blog_cms:article_list"), {"page": 2}).json()["data"]
        assert len(data["articles"]) == 1

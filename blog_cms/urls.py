"""
URL configuration for django-blog-cms.

Include at the site root so article URLs match their canonical form
({BASE_URL}/blog/<slug>):

    path('', include('blog_cms.urls')),
"""
from django.urls import path

from . import views

app_name = "blog_cms"

urlpatterns = [
    # Public blog
    path("", views.PublishedArticleListView.as_view(), name="article_list"),
    path("blog/<slug:slug>", views.PublishedArticleDetailView.as_view(), name="article_detail"),

    # Dashboard API - articles
    path("api/posts/", views.ArticleCollectionView.as_view(), name="api_article_list"),
    path("api/posts/<int:pk>/", views.ArticleItemView.as_view(), name="api_article_item"),

    # Dashboard API - media
    path("api/media/", views.MediaCollectionView.as_view(), name="api_media_list"),
    path("api/media/<int:pk>/", views.MediaItemView.as_view(), name="api_media_item"),
]

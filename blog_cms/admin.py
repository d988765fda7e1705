"""
Django admin configuration for blog_cms.
"""
from django.contrib import admin
from django.utils import timezone
from django.utils.html import format_html

from .forms import ArticleAdminForm
from .models import Article, MediaItem


@admin.register(Article)
class ArticleAdmin(admin.ModelAdmin):
    form = ArticleAdminForm
    list_display = [
        "title_preview",
        "slug",
        "status",
        "author",
        "reading_time",
        "created_at",
    ]
    list_filter = ["status", "created_at"]
    search_fields = ["title", "slug", "content"]
    raw_id_fields = ["author"]
    date_hierarchy = "created_at"
    readonly_fields = ["created_at", "updated_at"]
    prepopulated_fields = {"slug": ("title",)}

    fieldsets = (
        (None, {
            "fields": ("title", "slug", "content", "status", "author")
        }),
        ("Taxonomy", {
            "fields": ("categories",)
        }),
        ("Featured Image", {
            "fields": ("featured_image_url", "featured_image_alt"),
            "classes": ("collapse",),
        }),
        ("SEO", {
            "fields": ("meta_title", "meta_description", "keywords", "canonical_url"),
            "classes": ("collapse",),
        }),
        ("Metadata", {
            "fields": ("created_at", "updated_at"),
            "classes": ("collapse",),
        }),
    )

    actions = ["publish_articles", "unpublish_articles"]

    def title_preview(self, obj):
        """Truncated title for list display."""
        return obj.title[:60] + "..." if len(obj.title) > 60 else obj.title

    title_preview.short_description = "Title"

    def save_model(self, request, obj, form, change):
        if not change and obj.author_id is None:
            obj.author = request.user
        super().save_model(request, obj, form, change)

    @admin.action(description="Publish selected articles")
    def publish_articles(self, request, queryset):
        count = queryset.update(
            status=Article.STATUS_PUBLISHED, updated_at=timezone.now()
        )
        self.message_user(request, f"{count} articles published.")

    @admin.action(description="Move selected articles to draft")
    def unpublish_articles(self, request, queryset):
        count = queryset.update(
            status=Article.STATUS_DRAFT, updated_at=timezone.now()
        )
        self.message_user(request, f"{count} articles moved to draft.")


@admin.register(MediaItem)
class MediaItemAdmin(admin.ModelAdmin):
    list_display = [
        "thumbnail_preview",
        "file_name",
        "human_file_size",
        "uploaded_by",
        "uploaded_at",
    ]
    list_filter = ["uploaded_at"]
    search_fields = ["file_name", "alt_text", "url"]
    raw_id_fields = ["uploaded_by"]
    readonly_fields = ["size", "uploaded_at"]

    def thumbnail_preview(self, obj):
        return format_html(
            '<img src="{}" alt="{}" style="max-width: 50px; max-height: 50px;" />',
            obj.url,
            obj.alt_text,
        )

    thumbnail_preview.short_description = "Preview"

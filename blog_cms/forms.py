"""
Forms for django-blog-cms.
"""
from django import forms

from .conf import blog_settings
from .exceptions import ValidationError
from .models import Article
from .services import ArticleService


class ArticleAdminForm(forms.ModelForm):
    """
    Admin form that fills in slug and canonical URL the way ArticleService does.

    Deriving in clean() lets ModelForm.validate_unique report a taken slug
    as a field error.
    """

    class Meta:
        model = Article
        fields = "__all__"

    def clean(self):
        cleaned_data = super().clean()
        title = cleaned_data.get("title")
        service = ArticleService.from_settings()

        if title and not cleaned_data.get("slug"):
            try:
                cleaned_data["slug"] = service.derive_slug(title)
            except ValidationError as exc:
                self.add_error("title", str(exc))
                return cleaned_data

        # Without a BASE_URL the canonical URL is left blank
        slug = cleaned_data.get("slug")
        if slug and not cleaned_data.get("canonical_url") and blog_settings.BASE_URL:
            cleaned_data["canonical_url"] = service.url_builder.build(slug)

        return cleaned_data

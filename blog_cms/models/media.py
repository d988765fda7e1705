"""
Media library model for django-blog-cms.

Files live with an external storage provider; only the durable URL and
byte size it returns are recorded here.
"""
import os

from django.conf import settings
from django.db import models
from django.utils import timezone


class MediaItem(models.Model):
    """
    Uploaded media file reference.

    Both the file name and the URL are unique across the library.
    """

    file_name = models.CharField(max_length=255, unique=True)
    url = models.URLField(max_length=500, unique=True)
    alt_text = models.CharField(max_length=500)
    size = models.PositiveIntegerField(
        null=True,
        blank=True,
        help_text="File size in bytes",
    )
    uploaded_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="uploaded_blog_media",
    )
    uploaded_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        ordering = ["-uploaded_at"]
        verbose_name = "Media Item"
        verbose_name_plural = "Media Library"

    def __str__(self):
        return self.file_name

    @property
    def file_extension(self):
        """Return file extension."""
        return os.path.splitext(self.file_name)[1].lower()

    @property
    def human_file_size(self):
        """Return human-readable file size."""
        if self.size is None:
            return ""
        size = self.size
        for unit in ["B", "KB", "MB", "GB"]:
            if size < 1024:
                return f"{size:.1f} {unit}"
            size /= 1024
        return f"{size:.1f} TB"

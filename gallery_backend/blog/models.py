# blog/models.py

"""
BLOG POST

- slug is unique; generated from the title when left blank.
- tags is a list of strings.
- published_at is stamped the first time a post is published and kept after.
"""

import uuid

from django.conf import settings
from django.db import models
from django.utils import timezone

from common.identifiers import unique_slug


class BlogPost(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    title = models.CharField(max_length=200)
    slug = models.SlugField(max_length=220, unique=True, blank=True)
    excerpt = models.TextField(blank=True, default="")
    content = models.TextField(blank=True, default="")
    cover_image = models.CharField(max_length=500, blank=True, default="")
    category = models.CharField(max_length=60, blank=True, default="")
    tags = models.JSONField(default=list, blank=True)

    published = models.BooleanField(default=False)
    published_at = models.DateTimeField(null=True, blank=True)

    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="blog_posts",
    )

    view_count = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-published_at", "-created_at"]
        indexes = [
            models.Index(fields=["published", "published_at"], name="blog_blogpo_publish_3f8a2d_idx"),
        ]

    def __str__(self):
        return self.title

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = unique_slug(BlogPost, self.title, exclude_pk=self.pk, fallback="post")
        if self.published and self.published_at is None:
            self.published_at = timezone.now()
        self.tags = [str(t).strip() for t in (self.tags or []) if str(t).strip()]
        super().save(*args, **kwargs)

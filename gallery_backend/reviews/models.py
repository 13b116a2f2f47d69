# reviews/models.py

"""
REVIEW (moderated)

- New reviews start unapproved; only approved ones are public.
- user_name / user_email are snapshots so a review survives account changes.
"""

import uuid

from django.conf import settings
from django.core.validators import MaxValueValidator, MinLengthValidator, MinValueValidator
from django.db import models

from common.validators import RATING_MAX, RATING_MIN
from paintings.models import Painting

COMMENT_MIN_LENGTH = 10


class Review(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    painting = models.ForeignKey(
        Painting,
        on_delete=models.CASCADE,
        related_name="reviews",
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="reviews",
    )

    user_name = models.CharField(max_length=150)
    user_email = models.EmailField(blank=True, default="")

    rating = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(RATING_MIN), MaxValueValidator(RATING_MAX)]
    )
    comment = models.TextField(validators=[MinLengthValidator(COMMENT_MIN_LENGTH)])

    approved = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["painting", "approved", "created_at"], name="reviews_rev_paintin_7e3b1a_idx"),
        ]

    def __str__(self):
        return f"{self.user_name} | {self.rating} | {self.painting_id}"

    def save(self, *args, **kwargs):
        self.full_clean()
        super().save(*args, **kwargs)

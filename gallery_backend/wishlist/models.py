import uuid

from django.conf import settings
from django.db import models

from paintings.models import Painting


class WishlistItem(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="wishlist_items",
    )
    painting = models.ForeignKey(
        Painting,
        on_delete=models.CASCADE,
        related_name="wishlisted_by",
    )

    added_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-added_at"]
        constraints = [
            models.UniqueConstraint(fields=["user", "painting"], name="unique_wishlist_painting_per_user"),
        ]

    def __str__(self):
        return f"{self.user} | {self.painting_id}"

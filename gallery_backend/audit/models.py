# audit/models.py

"""
ADMIN ACTIVITY LOG (append-only)

Every back-office write (catalog, coupons, orders, reviews, blog, settings,
roles) leaves one row here. Rows are never edited.
"""

import uuid

from django.conf import settings
from django.db import models


class AdminLog(models.Model):
    ACTION_PAINTING_CREATED = "painting_created"
    ACTION_PAINTING_UPDATED = "painting_updated"
    ACTION_PAINTING_DELETED = "painting_deleted"
    ACTION_REVIEW_APPROVED = "review_approved"
    ACTION_REVIEW_REJECTED = "review_rejected"
    ACTION_REVIEW_DELETED = "review_deleted"
    ACTION_COUPON_CREATED = "coupon_created"
    ACTION_COUPON_UPDATED = "coupon_updated"
    ACTION_COUPON_DELETED = "coupon_deleted"
    ACTION_ORDER_STATUS_UPDATED = "order_status_updated"
    ACTION_SHIPPING_STATUS_UPDATED = "shipping_status_updated"
    ACTION_ORDER_DELETED = "order_deleted"
    ACTION_CUSTOM_ORDER_STATUS_UPDATED = "custom_order_status_updated"
    ACTION_CUSTOM_ORDER_DELETED = "custom_order_deleted"
    ACTION_BLOG_POST_CREATED = "blog_post_created"
    ACTION_BLOG_POST_PUBLISHED = "blog_post_published"
    ACTION_BLOG_POST_UPDATED = "blog_post_updated"
    ACTION_BLOG_POST_DELETED = "blog_post_deleted"
    ACTION_GENERAL_SETTINGS_UPDATED = "general_settings_updated"
    ACTION_HOME_SETTINGS_UPDATED = "home_settings_updated"
    ACTION_MUSIC_SETTINGS_UPDATED = "music_settings_updated"
    ACTION_USER_ROLE_UPDATED = "user_role_updated"

    ACTION_CHOICES = [
        (ACTION_PAINTING_CREATED, "Painting created"),
        (ACTION_PAINTING_UPDATED, "Painting updated"),
        (ACTION_PAINTING_DELETED, "Painting deleted"),
        (ACTION_REVIEW_APPROVED, "Review approved"),
        (ACTION_REVIEW_REJECTED, "Review rejected"),
        (ACTION_REVIEW_DELETED, "Review deleted"),
        (ACTION_COUPON_CREATED, "Coupon created"),
        (ACTION_COUPON_UPDATED, "Coupon updated"),
        (ACTION_COUPON_DELETED, "Coupon deleted"),
        (ACTION_ORDER_STATUS_UPDATED, "Order status updated"),
        (ACTION_SHIPPING_STATUS_UPDATED, "Shipping status updated"),
        (ACTION_ORDER_DELETED, "Order deleted"),
        (ACTION_CUSTOM_ORDER_STATUS_UPDATED, "Custom order status updated"),
        (ACTION_CUSTOM_ORDER_DELETED, "Custom order deleted"),
        (ACTION_BLOG_POST_CREATED, "Blog post created"),
        (ACTION_BLOG_POST_PUBLISHED, "Blog post published"),
        (ACTION_BLOG_POST_UPDATED, "Blog post updated"),
        (ACTION_BLOG_POST_DELETED, "Blog post deleted"),
        (ACTION_GENERAL_SETTINGS_UPDATED, "General settings updated"),
        (ACTION_HOME_SETTINGS_UPDATED, "Home settings updated"),
        (ACTION_MUSIC_SETTINGS_UPDATED, "Music settings updated"),
        (ACTION_USER_ROLE_UPDATED, "User role updated"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    action = models.CharField(max_length=64, choices=ACTION_CHOICES)

    admin = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="admin_logs",
    )
    admin_email = models.EmailField(blank=True, default="")

    metadata = models.JSONField(default=dict, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["action"], name="audit_admin_action_9c1f0e_idx"),
            models.Index(fields=["created_at"], name="audit_admin_created_5b2a7d_idx"),
            models.Index(fields=["admin_email", "created_at"], name="audit_admin_admin_e_3e8d41_idx"),
        ]

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise RuntimeError("AdminLog records are immutable")
        super().save(*args, **kwargs)

    @property
    def description(self) -> str:
        return str((self.metadata or {}).get("description") or "")

    def __str__(self):
        return f"{self.action} | {self.admin_email}"

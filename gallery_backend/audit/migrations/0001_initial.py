import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="AdminLog",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                (
                    "action",
                    models.CharField(
                        choices=[
                            ("painting_created", "Painting created"),
                            ("painting_updated", "Painting updated"),
                            ("painting_deleted", "Painting deleted"),
                            ("review_approved", "Review approved"),
                            ("review_rejected", "Review rejected"),
                            ("review_deleted", "Review deleted"),
                            ("coupon_created", "Coupon created"),
                            ("coupon_updated", "Coupon updated"),
                            ("coupon_deleted", "Coupon deleted"),
                            ("order_status_updated", "Order status updated"),
                            ("shipping_status_updated", "Shipping status updated"),
                            ("order_deleted", "Order deleted"),
                            ("custom_order_status_updated", "Custom order status updated"),
                            ("custom_order_deleted", "Custom order deleted"),
                            ("blog_post_created", "Blog post created"),
                            ("blog_post_published", "Blog post published"),
                            ("blog_post_updated", "Blog post updated"),
                            ("blog_post_deleted", "Blog post deleted"),
                            ("general_settings_updated", "General settings updated"),
                            ("home_settings_updated", "Home settings updated"),
                            ("music_settings_updated", "Music settings updated"),
                            ("user_role_updated", "User role updated"),
                        ],
                        max_length=64,
                    ),
                ),
                ("admin_email", models.EmailField(blank=True, default="", max_length=254)),
                ("metadata", models.JSONField(blank=True, default=dict)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "admin",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="admin_logs",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["action"], name="audit_admin_action_9c1f0e_idx"),
                    models.Index(fields=["created_at"], name="audit_admin_created_5b2a7d_idx"),
                    models.Index(fields=["admin_email", "created_at"], name="audit_admin_admin_e_3e8d41_idx"),
                ],
            },
        ),
    ]

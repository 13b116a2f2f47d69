import uuid
from decimal import Decimal

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="CustomOrder",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("customer_name", models.CharField(max_length=120)),
                ("email", models.EmailField(max_length=254)),
                ("phone", models.CharField(max_length=40)),
                ("reference_image", models.FileField(upload_to="custom_orders/%Y/%m/")),
                ("size_name", models.CharField(max_length=20)),
                ("width_cm", models.PositiveIntegerField()),
                ("height_cm", models.PositiveIntegerField()),
                ("price_multiplier", models.DecimalField(decimal_places=2, default=Decimal("1"), max_digits=5)),
                (
                    "orientation",
                    models.CharField(
                        choices=[("vertical", "Vertical"), ("horizontal", "Horizontal")],
                        default="vertical",
                        max_length=12,
                    ),
                ),
                ("total_price", models.DecimalField(decimal_places=2, max_digits=12)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("pending", "Pendiente"),
                            ("in-progress", "En progreso"),
                            ("completed", "Completada"),
                            ("cancelled", "Cancelada"),
                        ],
                        default="pending",
                        max_length=16,
                    ),
                ),
                ("notes", models.TextField(blank=True, default="")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["status", "created_at"], name="custom_orde_status_5c2d8e_idx"),
                ],
            },
        ),
    ]

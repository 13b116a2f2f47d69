import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Painting",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("title", models.CharField(max_length=200)),
                ("slug", models.SlugField(blank=True, max_length=220, unique=True)),
                ("description", models.TextField(blank=True, default="")),
                ("image_url", models.CharField(blank=True, default="", max_length=500)),
                ("images", models.JSONField(blank=True, default=list)),
                ("price", models.DecimalField(decimal_places=2, max_digits=12)),
                ("width_cm", models.DecimalField(decimal_places=2, max_digits=7)),
                ("height_cm", models.DecimalField(decimal_places=2, max_digits=7)),
                (
                    "orientation",
                    models.CharField(
                        choices=[("vertical", "Vertical"), ("horizontal", "Horizontal")],
                        default="vertical",
                        max_length=16,
                    ),
                ),
                (
                    "category",
                    models.CharField(
                        blank=True,
                        choices=[
                            ("abstracto", "Abstracto"),
                            ("paisaje", "Paisaje"),
                            ("retrato", "Retrato"),
                            ("naturaleza-muerta", "Naturaleza muerta"),
                            ("mascotas", "Mascotas"),
                            ("figurativo", "Figurativo"),
                            ("otro", "Otro"),
                        ],
                        default="",
                        max_length=32,
                    ),
                ),
                ("available", models.BooleanField(default=True)),
                ("stock", models.PositiveIntegerField(blank=True, null=True)),
                ("featured", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["available", "created_at"], name="paintings_p_availab_4d1c2e_idx"),
                    models.Index(fields=["category"], name="paintings_p_categor_8a7b3f_idx"),
                    models.Index(fields=["price"], name="paintings_p_price_2f9e61_idx"),
                ],
            },
        ),
    ]

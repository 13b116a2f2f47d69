from django.apps import AppConfig


class PaintingsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "paintings"
    verbose_name = "Catalog"

from django.contrib import admin

from .models import Painting


@admin.register(Painting)
class PaintingAdmin(admin.ModelAdmin):
    list_display = ("title", "category", "price", "available", "stock", "featured", "created_at")
    list_filter = ("available", "featured", "category", "orientation")
    search_fields = ("title", "description", "slug")
    readonly_fields = ("id", "created_at", "updated_at")
    ordering = ("-created_at",)

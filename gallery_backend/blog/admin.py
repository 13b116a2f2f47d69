from django.contrib import admin

from .models import BlogPost


@admin.register(BlogPost)
class BlogPostAdmin(admin.ModelAdmin):
    list_display = ("title", "slug", "published", "published_at", "view_count")
    list_filter = ("published", "category")
    search_fields = ("title", "excerpt")
    prepopulated_fields = {"slug": ("title",)}

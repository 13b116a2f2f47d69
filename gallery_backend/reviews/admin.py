from django.contrib import admin

from .models import Review


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    list_display = ("painting", "user_name", "rating", "approved", "created_at")
    list_filter = ("approved", "rating")
    search_fields = ("user_name", "user_email", "comment", "painting__title")

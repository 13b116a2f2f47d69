from django.contrib import admin

from .models import CustomOrder


@admin.register(CustomOrder)
class CustomOrderAdmin(admin.ModelAdmin):
    list_display = ("customer_name", "email", "size_name", "orientation", "total_price", "status", "created_at")
    list_filter = ("status", "size_name")
    search_fields = ("customer_name", "email")
    readonly_fields = ("total_price", "created_at", "updated_at")

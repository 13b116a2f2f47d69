from django.contrib import admin

from .models import AdminLog


@admin.register(AdminLog)
class AdminLogAdmin(admin.ModelAdmin):
    list_display = ("created_at", "action", "admin_email")
    list_filter = ("action",)
    search_fields = ("admin_email",)
    readonly_fields = ("id", "action", "admin", "admin_email", "metadata", "created_at")
    ordering = ("-created_at",)

    def has_change_permission(self, request, obj=None):
        return False

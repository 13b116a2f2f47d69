from rest_framework import serializers

from .models import AdminLog


class AdminLogSerializer(serializers.ModelSerializer):
    description = serializers.CharField(read_only=True)
    admin_id = serializers.UUIDField(read_only=True, allow_null=True)

    class Meta:
        model = AdminLog
        fields = [
            "id",
            "action",
            "admin_id",
            "admin_email",
            "description",
            "metadata",
            "created_at",
        ]
        read_only_fields = fields

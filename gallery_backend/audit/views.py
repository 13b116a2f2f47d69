# audit/views.py

"""
======================================================
PATH: audit/views.py
======================================================
ADMIN ACTIVITY FEED (read-only)

Filters (query params):
- action        exact action code
- admin_email   case-insensitive contains
- date_from     YYYY-MM-DD (inclusive)
- date_to       YYYY-MM-DD (inclusive)
======================================================
"""

from __future__ import annotations

from datetime import datetime

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import viewsets

from permissions.roles import IsAdmin

from .models import AdminLog
from .serializers import AdminLogSerializer


def _parse_date(s: str):
    try:
        return datetime.strptime(s, "%Y-%m-%d").date()
    except ValueError:
        return None


@extend_schema(
    tags=["Admin"],
    parameters=[
        OpenApiParameter("action", str),
        OpenApiParameter("admin_email", str),
        OpenApiParameter("date_from", str, description="YYYY-MM-DD"),
        OpenApiParameter("date_to", str, description="YYYY-MM-DD"),
    ],
)
class AdminLogViewSet(viewsets.ReadOnlyModelViewSet):
    serializer_class = AdminLogSerializer
    permission_classes = [IsAdmin]

    def get_queryset(self):
        qs = AdminLog.objects.all().order_by("-created_at")
        params = self.request.query_params

        action_val = (params.get("action") or "").strip()
        if action_val:
            qs = qs.filter(action=action_val)

        email = (params.get("admin_email") or "").strip()
        if email:
            qs = qs.filter(admin_email__icontains=email)

        d1 = _parse_date((params.get("date_from") or "").strip())
        if d1:
            qs = qs.filter(created_at__date__gte=d1)

        d2 = _parse_date((params.get("date_to") or "").strip())
        if d2:
            qs = qs.filter(created_at__date__lte=d2)

        return qs

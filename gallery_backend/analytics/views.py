# analytics/views.py

from __future__ import annotations

from drf_spectacular.utils import OpenApiTypes, extend_schema
from rest_framework.response import Response
from rest_framework.views import APIView

from permissions.roles import IsAdmin

from .services import build_overview


class AnalyticsOverviewView(APIView):
    """GET /api/analytics/overview/ (admin)"""

    permission_classes = [IsAdmin]

    @extend_schema(tags=["Admin"], responses={200: OpenApiTypes.OBJECT})
    def get(self, request):
        return Response(build_overview())

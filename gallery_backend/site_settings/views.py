# site_settings/views.py

"""
======================================================
PATH: site_settings/views.py
======================================================
GET /api/settings/<key>/   public; key in general|home|music; defaults when unsaved
PUT /api/settings/<key>/   admin; body {"data": {...}} replaces the stored payload
======================================================
"""

from __future__ import annotations

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from common.responses import error_response
from common.throttles import PublicCatalogThrottle
from permissions.roles import IsAdmin

from .models import SiteSetting
from .serializers import SiteSettingInputSerializer, SiteSettingSerializer
from .services import save_settings


def _payload(key: str) -> dict:
    row = SiteSetting.objects.filter(key=key).first()
    return {
        "key": key,
        "data": SiteSetting.resolved(key),
        "updated_at": row.updated_at if row else None,
    }


class SiteSettingView(APIView):
    def get_permissions(self):
        if self.request.method == "GET":
            return [AllowAny()]
        return [IsAdmin()]

    def get_throttles(self):
        if self.request.method == "GET":
            return [PublicCatalogThrottle()]
        return super().get_throttles()

    def _unknown(self):
        return error_response(
            code="UNKNOWN_SETTINGS_KEY",
            message="Configuración no encontrada",
            http_status=status.HTTP_404_NOT_FOUND,
        )

    @extend_schema(tags=["Settings"], responses={200: SiteSettingSerializer})
    def get(self, request, key):
        if key not in SiteSetting.DEFAULTS:
            return self._unknown()
        return Response(SiteSettingSerializer(_payload(key)).data)

    @extend_schema(tags=["Settings"], request=SiteSettingInputSerializer, responses={200: SiteSettingSerializer})
    def put(self, request, key):
        if key not in SiteSetting.DEFAULTS:
            return self._unknown()

        s = SiteSettingInputSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        save_settings(actor=request.user, key=key, data=s.validated_data["data"])

        return Response(SiteSettingSerializer(_payload(key)).data)

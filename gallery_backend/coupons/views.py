# coupons/views.py

"""
======================================================
PATH: coupons/views.py
======================================================
COUPONS

Public:
- POST /api/coupons/validate/ {code, subtotal} -> summary + discount preview
  (does NOT consume a use; checkout redeems under a row lock)

Admin (role=admin):
- CRUD /api/coupons/ , each write logged
======================================================
"""

from __future__ import annotations

from django.db import transaction
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from audit.services import log_coupon_created, log_coupon_deleted, log_coupon_updated
from common.responses import error_response
from common.throttles import PublicWriteThrottle
from permissions.roles import IsAdmin

from .models import Coupon
from .serializers import (
    CouponSerializer,
    CouponSummarySerializer,
    CouponValidateInputSerializer,
    CouponValidateResponseSerializer,
)
from .services.coupon_service import calculate_discount, find_coupon, validate_coupon
from .services.exceptions import CouponValidationError


@extend_schema(tags=["Coupons"])
class CouponViewSet(viewsets.ModelViewSet):
    serializer_class = CouponSerializer
    permission_classes = [IsAdmin]

    def get_queryset(self):
        qs = Coupon.objects.all().order_by("-created_at")
        active = (self.request.query_params.get("is_active") or "").strip().lower()
        if active in ("true", "1"):
            qs = qs.filter(is_active=True)
        elif active in ("false", "0"):
            qs = qs.filter(is_active=False)
        return qs

    @transaction.atomic
    def perform_create(self, serializer):
        coupon = serializer.save()
        log_coupon_created(self.request.user, coupon.pk, coupon.code)

    @transaction.atomic
    def perform_update(self, serializer):
        coupon = serializer.save()
        log_coupon_updated(self.request.user, coupon.pk, coupon.code)

    @transaction.atomic
    def perform_destroy(self, instance):
        coupon_id, code = instance.pk, instance.code
        instance.delete()
        log_coupon_deleted(self.request.user, coupon_id, code)

    @extend_schema(
        request=CouponValidateInputSerializer,
        responses={200: CouponValidateResponseSerializer, 400: OpenApiResponse(description="Coupon rejected")},
    )
    @action(
        detail=False,
        methods=["post"],
        permission_classes=[AllowAny],
        throttle_classes=[PublicWriteThrottle],
    )
    def validate(self, request):
        s = CouponValidateInputSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        subtotal = s.validated_data["subtotal"]

        try:
            coupon = validate_coupon(find_coupon(s.validated_data["code"]), subtotal)
        except CouponValidationError as exc:
            return error_response(code=exc.code, message=str(exc), http_status=status.HTTP_400_BAD_REQUEST)

        return Response(
            {
                "valid": True,
                "coupon": CouponSummarySerializer(coupon).data,
                "discount": str(calculate_discount(coupon, subtotal)),
            }
        )

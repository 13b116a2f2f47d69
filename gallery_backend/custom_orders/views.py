# custom_orders/views.py

"""
======================================================
PATH: custom_orders/views.py
======================================================
COMMISSIONED WORK

Public:
- GET  /api/custom-orders/sizes/   canvas sizes with prices
- POST /api/custom-orders/         multipart request (throttled)

Admin (role=admin):
- GET    /api/admin/custom-orders/              ?status=&search=
- GET    /api/admin/custom-orders/<id>/
- POST   /api/admin/custom-orders/<id>/status/  {status}  logged
- DELETE /api/admin/custom-orders/<id>/                   logged
======================================================
"""

from __future__ import annotations

from django.db.models import Q
from drf_spectacular.utils import extend_schema
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from common.throttles import PublicCatalogThrottle, PublicWriteThrottle
from permissions.roles import IsAdmin

from .models import CustomOrder
from .serializers import (
    CanvasSizeSerializer,
    CustomOrderCreateSerializer,
    CustomOrderSerializer,
    CustomOrderStatusSerializer,
)
from .services import create_custom_order, delete_custom_order, update_custom_order_status
from .sizes import CANVAS_SIZES


class CanvasSizeListView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_classes = [PublicCatalogThrottle]

    @extend_schema(tags=["Custom orders"], responses={200: CanvasSizeSerializer(many=True)})
    def get(self, request):
        data = [
            {
                "name": size.name,
                "width": size.width,
                "height": size.height,
                "price_multiplier": size.price_multiplier,
                "price": size.price(),
            }
            for size in CANVAS_SIZES
        ]
        return Response(CanvasSizeSerializer(data, many=True).data)


class CustomOrderCreateView(APIView):
    permission_classes = [AllowAny]
    throttle_classes = [PublicWriteThrottle]
    parser_classes = [MultiPartParser, FormParser]

    @extend_schema(
        tags=["Custom orders"],
        request={"multipart/form-data": CustomOrderCreateSerializer},
        responses={201: CustomOrderSerializer},
    )
    def post(self, request):
        s = CustomOrderCreateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        data = dict(s.validated_data)

        order = create_custom_order(
            size=data.pop("size"),
            orientation=data.pop("orientation"),
            reference_image=data.pop("reference_image"),
            customer_name=data["customer_name"],
            email=data["email"].strip().lower(),
            phone=data["phone"],
            notes=(data.get("notes") or "").strip(),
        )
        return Response(
            CustomOrderSerializer(order, context={"request": request}).data,
            status=status.HTTP_201_CREATED,
        )


@extend_schema(tags=["Admin"])
class AdminCustomOrderViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    serializer_class = CustomOrderSerializer
    permission_classes = [IsAdmin]
    filterset_fields = ["status"]

    def get_queryset(self):
        qs = CustomOrder.objects.all().order_by("-created_at")
        q = (self.request.query_params.get("search") or "").strip()
        if q:
            qs = qs.filter(Q(customer_name__icontains=q) | Q(email__icontains=q))
        return qs

    def perform_destroy(self, instance):
        delete_custom_order(actor=self.request.user, order=instance)

    @extend_schema(request=CustomOrderStatusSerializer, responses={200: CustomOrderSerializer})
    @action(detail=True, methods=["post"], url_path="status")
    def set_status(self, request, pk=None):
        s = CustomOrderStatusSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        order = update_custom_order_status(
            actor=request.user,
            order=self.get_object(),
            status=s.validated_data["status"],
        )
        return Response(self.get_serializer(order).data)

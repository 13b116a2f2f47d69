# orders/views/admin.py

"""
======================================================
PATH: orders/views/admin.py
======================================================
ADMIN ORDERS (role=admin)

GET    /api/admin/orders/                       list (filters: orders.filters)
GET    /api/admin/orders/<id>/                  detail
POST   /api/admin/orders/<id>/status/           {status}           emails + logs
POST   /api/admin/orders/<id>/shipping-status/  {shipping_status}  logs
POST   /api/admin/orders/<id>/payment-status/   {payment_status}   paid stamps paid_at
DELETE /api/admin/orders/<id>/                  logs
======================================================
"""

from __future__ import annotations

from drf_spectacular.utils import extend_schema
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from orders.filters import OrderFilter
from orders.models import Order
from orders.serializers import (
    AdminOrderSerializer,
    OrderStatusSerializer,
    PaymentStatusSerializer,
    ShippingStatusSerializer,
)
from orders.services.fulfilment import (
    delete_order,
    update_order_status,
    update_payment_status,
    update_shipping_status,
)
from permissions.roles import IsAdmin


@extend_schema(tags=["Admin"])
class AdminOrderViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    serializer_class = AdminOrderSerializer
    permission_classes = [IsAdmin]
    filterset_class = OrderFilter

    def get_queryset(self):
        return (
            Order.objects.select_related("user")
            .prefetch_related("items")
            .order_by("-created_at")
        )

    def perform_destroy(self, instance):
        delete_order(actor=self.request.user, order=instance)

    def _respond(self, order):
        order = self.get_queryset().get(pk=order.pk)
        return Response(self.get_serializer(order).data, status=status.HTTP_200_OK)

    @extend_schema(request=OrderStatusSerializer, responses={200: AdminOrderSerializer})
    @action(detail=True, methods=["post"], url_path="status")
    def set_status(self, request, pk=None):
        s = OrderStatusSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        order = update_order_status(actor=request.user, order=self.get_object(), status=s.validated_data["status"])
        return self._respond(order)

    @extend_schema(request=ShippingStatusSerializer, responses={200: AdminOrderSerializer})
    @action(detail=True, methods=["post"], url_path="shipping-status")
    def set_shipping_status(self, request, pk=None):
        s = ShippingStatusSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        order = update_shipping_status(
            actor=request.user,
            order=self.get_object(),
            shipping_status=s.validated_data["shipping_status"],
        )
        return self._respond(order)

    @extend_schema(request=PaymentStatusSerializer, responses={200: AdminOrderSerializer})
    @action(detail=True, methods=["post"], url_path="payment-status")
    def set_payment_status(self, request, pk=None):
        s = PaymentStatusSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        order = update_payment_status(
            actor=request.user,
            order=self.get_object(),
            payment_status=s.validated_data["payment_status"],
        )
        return self._respond(order)

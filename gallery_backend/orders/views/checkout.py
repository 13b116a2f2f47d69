# orders/views/checkout.py

"""
======================================================
PATH: orders/views/checkout.py
======================================================
POST /api/orders/checkout/   (anyone, throttled)

Body:
{
  "items": [{"painting_id": "<uuid>", "quantity": 1}],   # optional when logged in
  "shipping": {full_name, email, phone, address, city, region, postal_code},
  "payment_method": "webpay" | "transfer" | "cash",
  "coupon_code": "",
  "notes": ""
}

201 -> {order_id, order_number, access_token, confirmation_path, order}
400 -> EMPTY_ORDER / PAINTING_UNAVAILABLE / COUPON_* / CHECKOUT_FAILED
409 -> INSUFFICIENT_STOCK
======================================================
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from common.responses import error_response
from common.throttles import PublicWriteThrottle
from orders.serializers import CheckoutResponseSerializer, CheckoutSerializer, OrderSerializer
from orders.services.checkout import place_order
from orders.services.exceptions import CheckoutError, InsufficientStockError


class CheckoutView(APIView):
    permission_classes = [AllowAny]
    throttle_classes = [PublicWriteThrottle]

    @extend_schema(
        tags=["Orders"],
        request=CheckoutSerializer,
        responses={
            201: CheckoutResponseSerializer,
            400: OpenApiResponse(description="Checkout rejected"),
            409: OpenApiResponse(description="Insufficient stock"),
        },
    )
    def post(self, request):
        s = CheckoutSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        data = s.validated_data

        try:
            order = place_order(
                user=request.user,
                lines=[
                    {"painting_id": str(line["painting_id"]), "quantity": line["quantity"]}
                    for line in data.get("items") or []
                ],
                shipping=data["shipping"],
                payment_method=data["payment_method"],
                coupon_code=data.get("coupon_code") or "",
                notes=data.get("notes") or "",
            )
        except InsufficientStockError as exc:
            return error_response(code=exc.code, message=str(exc), http_status=status.HTTP_409_CONFLICT)
        except CheckoutError as exc:
            return error_response(code=exc.code, message=str(exc), http_status=status.HTTP_400_BAD_REQUEST)

        return Response(
            {
                "order_id": str(order.pk),
                "order_number": order.order_number,
                "access_token": order.public_access_token,
                "confirmation_path": order.confirmation_path,
                "order": OrderSerializer(order).data,
            },
            status=status.HTTP_201_CREATED,
        )

# orders/views/public.py

"""
======================================================
PATH: orders/views/public.py
======================================================
GUEST ORDER ACCESS (token in query string)

GET  /api/orders/<id>/?token=                 -> order (token never echoed)
POST /api/orders/<id>/transfer-proof/?token=  -> multipart "file"

400 TOKEN_REQUIRED | 404 ORDER_NOT_FOUND | 401 UNAUTHORIZED
======================================================
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from common.responses import error_response
from common.throttles import PublicPollThrottle, PublicWriteThrottle
from orders.serializers import OrderSerializer, TransferProofSerializer
from orders.services.access import attach_transfer_proof, get_order_for_token
from orders.services.exceptions import (
    InvalidTokenError,
    OrderAccessError,
    OrderNotFoundError,
    TransferProofError,
)

TOKEN_PARAM = OpenApiParameter("token", str, OpenApiParameter.QUERY, required=True)


def _access_error(exc: OrderAccessError):
    if isinstance(exc, OrderNotFoundError):
        http_status = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, InvalidTokenError):
        http_status = status.HTTP_401_UNAUTHORIZED
    else:
        http_status = status.HTTP_400_BAD_REQUEST
    return error_response(code=exc.code, message=str(exc), http_status=http_status)


class PublicOrderView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_classes = [PublicPollThrottle]

    @extend_schema(
        tags=["Orders"],
        parameters=[TOKEN_PARAM],
        responses={
            200: OrderSerializer,
            400: OpenApiResponse(description="Token required"),
            401: OpenApiResponse(description="Token mismatch"),
            404: OpenApiResponse(description="Order not found"),
        },
    )
    def get(self, request, order_id):
        try:
            order = get_order_for_token(order_id, request.query_params.get("token"))
        except OrderAccessError as exc:
            return _access_error(exc)

        return Response(OrderSerializer(order).data)


class TransferProofView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_classes = [PublicWriteThrottle]
    parser_classes = [MultiPartParser, FormParser]

    @extend_schema(
        tags=["Orders"],
        parameters=[TOKEN_PARAM],
        request={"multipart/form-data": TransferProofSerializer},
        responses={
            200: OrderSerializer,
            400: OpenApiResponse(description="Invalid file or not a transfer order"),
            401: OpenApiResponse(description="Token mismatch"),
            404: OpenApiResponse(description="Order not found"),
        },
    )
    def post(self, request, order_id):
        token = request.query_params.get("token") or request.data.get("token")
        try:
            order = get_order_for_token(order_id, token)
        except OrderAccessError as exc:
            return _access_error(exc)

        try:
            order = attach_transfer_proof(order, request.FILES.get("file"))
        except TransferProofError as exc:
            return error_response(code=exc.code, message=str(exc), http_status=status.HTTP_400_BAD_REQUEST)

        return Response(OrderSerializer(order).data)

# cart/views.py

"""
CART API VIEWS

- GET    /api/cart/                          current cart (created on first use)
- POST   /api/cart/items/                    add painting (increments existing line)
- PATCH  /api/cart/items/<painting_id>/      set quantity (<= 0 removes)
- DELETE /api/cart/items/<painting_id>/      remove painting
- DELETE /api/cart/clear/                    empty the cart
- POST   /api/cart/merge/                    adopt a guest cart after login
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from common.responses import error_response

from .serializers import (
    AddCartItemInputSerializer,
    CartSerializer,
    MergeCartInputSerializer,
    UpdateCartItemInputSerializer,
)
from .services.cart_service import (
    add_to_cart,
    clear_cart,
    get_cart,
    merge_guest_cart,
    remove_from_cart,
    update_quantity,
)
from .services.exceptions import CartItemNotFoundError, PaintingNotAvailableError


class CartView(APIView):
    permission_classes = [IsAuthenticated]
    serializer_class = CartSerializer

    @extend_schema(tags=["Cart"], responses={200: CartSerializer})
    def get(self, request):
        return Response(CartSerializer(get_cart(request.user)).data)


class CartItemsView(APIView):
    permission_classes = [IsAuthenticated]
    serializer_class = CartSerializer

    @extend_schema(
        tags=["Cart"],
        request=AddCartItemInputSerializer,
        responses={200: CartSerializer, 400: OpenApiResponse(description="Painting not available")},
        description="Add a painting to the cart (increments quantity if already present).",
    )
    def post(self, request):
        s = AddCartItemInputSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        try:
            cart, _, is_new = add_to_cart(
                user=request.user,
                painting_id=s.validated_data["painting_id"],
                quantity=s.validated_data["quantity"],
            )
        except PaintingNotAvailableError as exc:
            return error_response(code=exc.code, message=str(exc), http_status=status.HTTP_400_BAD_REQUEST)

        data = CartSerializer(cart).data
        data["is_new"] = is_new
        return Response(data, status=status.HTTP_200_OK)


class CartItemDetailView(APIView):
    permission_classes = [IsAuthenticated]
    serializer_class = CartSerializer

    @extend_schema(tags=["Cart"], request=UpdateCartItemInputSerializer, responses={200: CartSerializer})
    def patch(self, request, painting_id):
        s = UpdateCartItemInputSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        try:
            cart = update_quantity(user=request.user, painting_id=painting_id, quantity=s.validated_data["quantity"])
        except CartItemNotFoundError as exc:
            return error_response(code=exc.code, message=str(exc), http_status=status.HTTP_404_NOT_FOUND)

        return Response(CartSerializer(cart).data)

    @extend_schema(tags=["Cart"], responses={200: CartSerializer})
    def delete(self, request, painting_id):
        cart = remove_from_cart(user=request.user, painting_id=painting_id)
        return Response(CartSerializer(cart).data)


class ClearCartView(APIView):
    permission_classes = [IsAuthenticated]
    serializer_class = CartSerializer

    @extend_schema(tags=["Cart"], responses={200: CartSerializer})
    def delete(self, request):
        return Response(CartSerializer(clear_cart(user=request.user)).data)


class MergeCartView(APIView):
    permission_classes = [IsAuthenticated]
    serializer_class = CartSerializer

    @extend_schema(
        tags=["Cart"],
        request=MergeCartInputSerializer,
        responses={200: CartSerializer},
        description="Merge a guest (client-side) cart; unavailable paintings are skipped and listed.",
    )
    def post(self, request):
        s = MergeCartInputSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        cart, skipped = merge_guest_cart(user=request.user, lines=s.validated_data["items"])

        data = CartSerializer(cart).data
        data["skipped"] = skipped
        return Response(data)

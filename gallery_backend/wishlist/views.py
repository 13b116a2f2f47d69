# wishlist/views.py

"""
WISHLIST API (authenticated)

- GET    /api/wishlist/                   ids + paintings + count
- POST   /api/wishlist/                   {painting_id} add (idempotent)
- GET    /api/wishlist/<painting_id>/     {"in_wishlist": bool}
- DELETE /api/wishlist/<painting_id>/     remove (idempotent)
"""

from __future__ import annotations

from django.shortcuts import get_object_or_404
from drf_spectacular.utils import extend_schema
from rest_framework import serializers, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from paintings.models import Painting
from paintings.serializers import PaintingSerializer

from .models import WishlistItem


class WishlistAddSerializer(serializers.Serializer):
    painting_id = serializers.UUIDField()


def _wishlist_payload(user) -> dict:
    items = WishlistItem.objects.filter(user=user).select_related("painting")
    paintings = [i.painting for i in items]
    return {
        "painting_ids": [str(p.id) for p in paintings],
        "paintings": PaintingSerializer(paintings, many=True).data,
        "count": len(paintings),
    }


class WishlistView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(tags=["Wishlist"], responses={200: dict})
    def get(self, request):
        return Response(_wishlist_payload(request.user))

    @extend_schema(tags=["Wishlist"], request=WishlistAddSerializer, responses={201: dict, 200: dict})
    def post(self, request):
        s = WishlistAddSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        painting = get_object_or_404(Painting, pk=s.validated_data["painting_id"])
        _, created = WishlistItem.objects.get_or_create(user=request.user, painting=painting)

        return Response(
            _wishlist_payload(request.user),
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        )


class WishlistItemView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(tags=["Wishlist"], responses={200: dict})
    def get(self, request, painting_id):
        exists = WishlistItem.objects.filter(user=request.user, painting_id=painting_id).exists()
        return Response({"painting_id": str(painting_id), "in_wishlist": exists})

    @extend_schema(tags=["Wishlist"], responses={200: dict})
    def delete(self, request, painting_id):
        WishlistItem.objects.filter(user=request.user, painting_id=painting_id).delete()
        return Response(_wishlist_payload(request.user))

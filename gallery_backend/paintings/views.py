# paintings/views.py

"""
======================================================
PATH: paintings/views.py
======================================================
PAINTING VIEWSET

Public (AllowAny, read-only):
- GET /api/paintings/                     available paintings, filtered + paginated
- GET /api/paintings/<id>/                detail + approved review summary
- GET /api/paintings/slug/<slug>/         same, by slug
- GET /api/paintings/categories/          fixed category list

Admin (role=admin):
- POST/PUT/PATCH/DELETE /api/paintings/...   logged to the admin activity feed
- POST /api/paintings/<id>/images/           multipart image upload
- GET  /api/paintings/?include_unavailable=1 full catalog
======================================================
"""

from __future__ import annotations

import logging
import uuid

from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.files.storage import default_storage
from django.db import transaction
from django.shortcuts import get_object_or_404
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from audit.services import log_painting_created, log_painting_deleted, log_painting_updated
from common.pagination import GalleryPagination
from common.responses import error_response
from common.throttles import PublicCatalogThrottle
from common.validators import validate_image, validate_upload_size
from permissions.roles import IsAdmin, IsAdminOrReadOnly, is_admin_user

from .filters import PaintingFilter
from .models import Painting
from .serializers import (
    CategorySerializer,
    ImageUploadSerializer,
    PaintingDetailSerializer,
    PaintingSerializer,
)

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes"}


@extend_schema(tags=["Catalog"])
class PaintingViewSet(viewsets.ModelViewSet):
    serializer_class = PaintingSerializer
    permission_classes = [IsAdminOrReadOnly]
    pagination_class = GalleryPagination
    filterset_class = PaintingFilter
    throttle_classes = [PublicCatalogThrottle]

    def get_queryset(self):
        qs = Painting.objects.all()

        if self.action == "list":
            wants_all = (self.request.query_params.get("include_unavailable") or "").lower() in _TRUTHY
            if not (wants_all and is_admin_user(self.request.user)):
                qs = qs.filter(available=True)

        return qs

    def get_serializer_class(self):
        if self.action in ("retrieve", "by_slug"):
            return PaintingDetailSerializer
        return PaintingSerializer

    @extend_schema(
        parameters=[
            OpenApiParameter("category", str),
            OpenApiParameter("min_price", float),
            OpenApiParameter("max_price", float),
            OpenApiParameter("search", str),
            OpenApiParameter("sort", str, enum=["recent", "price-asc", "price-desc", "title-asc", "title-desc"]),
            OpenApiParameter("include_unavailable", bool, description="Admin only"),
        ]
    )
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    # ----------------------------
    # Admin writes (audited)
    # ----------------------------
    @transaction.atomic
    def perform_create(self, serializer):
        painting = serializer.save()
        log_painting_created(self.request.user, painting.pk, painting.title)
        logger.info("Painting created", extra={"painting_id": str(painting.pk)})

    @transaction.atomic
    def perform_update(self, serializer):
        changes = {
            k: str(v) for k, v in serializer.validated_data.items()
            if k in ("price", "available", "stock", "title", "featured")
        }
        painting = serializer.save()
        log_painting_updated(self.request.user, painting.pk, painting.title, changes)

    @transaction.atomic
    def perform_destroy(self, instance):
        painting_id, title = instance.pk, instance.title
        instance.delete()
        log_painting_deleted(self.request.user, painting_id, title)
        logger.info("Painting deleted", extra={"painting_id": str(painting_id)})

    # ----------------------------
    # Public extras
    # ----------------------------
    @extend_schema(responses={200: PaintingDetailSerializer})
    @action(detail=False, methods=["get"], url_path=r"slug/(?P<slug>[-a-z0-9]+)", permission_classes=[AllowAny])
    def by_slug(self, request, slug=None):
        painting = get_object_or_404(Painting, slug=slug)
        return Response(PaintingDetailSerializer(painting, context={"request": request}).data)

    @extend_schema(responses={200: CategorySerializer(many=True)})
    @action(detail=False, methods=["get"], permission_classes=[AllowAny], pagination_class=None, filterset_class=None)
    def categories(self, request):
        data = [{"value": v, "label": label} for v, label in Painting.CATEGORY_CHOICES]
        return Response(CategorySerializer(data, many=True).data)

    # ----------------------------
    # Admin image upload
    # ----------------------------
    @extend_schema(request=ImageUploadSerializer, responses={201: PaintingSerializer})
    @action(
        detail=True,
        methods=["post"],
        url_path="images",
        permission_classes=[IsAdmin],
        parser_classes=[MultiPartParser, FormParser],
    )
    @transaction.atomic
    def upload_image(self, request, pk=None):
        painting = get_object_or_404(Painting.objects.select_for_update(), pk=pk)

        s = ImageUploadSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        upload = s.validated_data["file"]

        try:
            validate_upload_size(upload)
            validate_image(upload)
        except DjangoValidationError as exc:
            return error_response(code="INVALID_FILE", message=exc.messages[0], http_status=status.HTTP_400_BAD_REQUEST)

        name = default_storage.save(f"paintings/{painting.pk}/{uuid.uuid4().hex}_{upload.name}", upload)
        url = default_storage.url(name)

        painting.images = list(painting.images or []) + [url]
        if not painting.image_url:
            painting.image_url = url
        painting.save()

        log_painting_updated(request.user, painting.pk, painting.title, {"images": "added"})
        return Response(PaintingSerializer(painting).data, status=status.HTTP_201_CREATED)

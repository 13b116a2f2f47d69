# blog/views.py

"""
======================================================
PATH: blog/views.py
======================================================
BLOG

Public:
- GET /api/blog/?tag=&category=   published only, newest published_at first
- GET /api/blog/<slug>/           published only (drafts 404); counts a view

Admin (role=admin):
- CRUD /api/admin/blog/           drafts included; writes logged
======================================================
"""

from __future__ import annotations

from django.db.models import F
from django.shortcuts import get_object_or_404
from drf_spectacular.utils import extend_schema
from rest_framework import viewsets
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from common.pagination import GalleryPagination
from common.throttles import PublicCatalogThrottle
from permissions.roles import IsAdmin

from .filters import BlogPostFilter
from .models import BlogPost
from .serializers import AdminBlogPostSerializer, BlogPostDetailSerializer, BlogPostListSerializer
from .services import create_post, delete_post, update_post


@extend_schema(tags=["Blog"])
class BlogPostViewSet(viewsets.ReadOnlyModelViewSet):
    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_classes = [PublicCatalogThrottle]
    pagination_class = GalleryPagination
    filterset_class = BlogPostFilter
    lookup_field = "slug"

    def get_queryset(self):
        return (
            BlogPost.objects.filter(published=True)
            .select_related("author")
            .order_by("-published_at", "-created_at")
        )

    def get_serializer_class(self):
        if self.action == "retrieve":
            return BlogPostDetailSerializer
        return BlogPostListSerializer

    def retrieve(self, request, *args, **kwargs):
        post = get_object_or_404(self.get_queryset(), slug=kwargs.get("slug"))
        BlogPost.objects.filter(pk=post.pk).update(view_count=F("view_count") + 1)
        post.view_count += 1
        return Response(self.get_serializer(post).data)


@extend_schema(tags=["Admin"])
class AdminBlogPostViewSet(viewsets.ModelViewSet):
    serializer_class = AdminBlogPostSerializer
    permission_classes = [IsAdmin]
    filterset_fields = ["published"]

    def get_queryset(self):
        return BlogPost.objects.select_related("author").order_by("-created_at")

    def perform_create(self, serializer):
        create_post(actor=self.request.user, serializer=serializer)

    def perform_update(self, serializer):
        update_post(actor=self.request.user, serializer=serializer)

    def perform_destroy(self, instance):
        delete_post(actor=self.request.user, post=instance)

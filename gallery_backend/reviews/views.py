# reviews/views.py

"""
======================================================
PATH: reviews/views.py
======================================================
REVIEWS

Public:
- GET  /api/reviews/painting/<painting_id>/  approved only, newest first,
                                             {count, average_rating, results}
Customer (authenticated):
- POST /api/reviews/                         {painting_id, rating, comment}

Admin (role=admin):
- GET    /api/admin/reviews/?approved=true|false
- POST   /api/admin/reviews/<id>/approve/
- POST   /api/admin/reviews/<id>/reject/
- DELETE /api/admin/reviews/<id>/
======================================================
"""

from __future__ import annotations

from django.shortcuts import get_object_or_404
from drf_spectacular.utils import extend_schema
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from common.throttles import PublicCatalogThrottle
from paintings.models import Painting
from permissions.roles import IsAdmin

from .models import Review
from .serializers import (
    AdminReviewSerializer,
    ReviewCreateResponseSerializer,
    ReviewCreateSerializer,
    ReviewListResponseSerializer,
    ReviewSerializer,
)
from .services import MSG_PENDING_APPROVAL, delete_review, rating_summary, set_review_approval, submit_review


class PaintingReviewsView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_classes = [PublicCatalogThrottle]

    @extend_schema(tags=["Reviews"], responses={200: ReviewListResponseSerializer})
    def get(self, request, painting_id):
        painting = get_object_or_404(Painting, pk=painting_id)
        qs = painting.reviews.filter(approved=True).order_by("-created_at")

        return Response({**rating_summary(qs), "results": ReviewSerializer(qs, many=True).data})


class ReviewCreateView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        tags=["Reviews"],
        request=ReviewCreateSerializer,
        responses={201: ReviewCreateResponseSerializer},
    )
    def post(self, request):
        s = ReviewCreateSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        review = submit_review(
            user=request.user,
            painting=s.validated_data["painting_id"],
            rating=s.validated_data["rating"],
            comment=s.validated_data["comment"],
        )
        return Response(
            {"message": MSG_PENDING_APPROVAL, "review": AdminReviewSerializer(review).data},
            status=status.HTTP_201_CREATED,
        )


@extend_schema(tags=["Admin"])
class AdminReviewViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    serializer_class = AdminReviewSerializer
    permission_classes = [IsAdmin]
    filterset_fields = ["approved", "painting"]

    def get_queryset(self):
        return Review.objects.select_related("painting").order_by("-created_at")

    def perform_destroy(self, instance):
        delete_review(actor=self.request.user, review=instance)

    @extend_schema(request=None, responses={200: AdminReviewSerializer})
    @action(detail=True, methods=["post"])
    def approve(self, request, pk=None):
        review = set_review_approval(actor=request.user, review=self.get_object(), approved=True)
        return Response(self.get_serializer(review).data)

    @extend_schema(request=None, responses={200: AdminReviewSerializer})
    @action(detail=True, methods=["post"])
    def reject(self, request, pk=None):
        review = set_review_approval(actor=request.user, review=self.get_object(), approved=False)
        return Response(self.get_serializer(review).data)

# users/views/addresses.py

"""
ADDRESS BOOK (own addresses only)

Default rule:
- the first address a user saves becomes the default
- saving one as default clears the previous default
- deleting the default promotes the most recent remaining address
"""

from __future__ import annotations

from django.db import transaction
from drf_spectacular.utils import extend_schema
from rest_framework import viewsets
from rest_framework.permissions import IsAuthenticated

from users.models import Address
from users.serializers import AddressSerializer


@extend_schema(tags=["Auth"])
class AddressViewSet(viewsets.ModelViewSet):
    serializer_class = AddressSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = None

    def get_queryset(self):
        return Address.objects.filter(user=self.request.user)

    def _clear_default(self, exclude_pk=None):
        qs = Address.objects.select_for_update().filter(user=self.request.user, is_default=True)
        if exclude_pk is not None:
            qs = qs.exclude(pk=exclude_pk)
        qs.update(is_default=False)

    @transaction.atomic
    def perform_create(self, serializer):
        has_any = Address.objects.filter(user=self.request.user).exists()
        make_default = bool(serializer.validated_data.get("is_default")) or not has_any
        if make_default:
            self._clear_default()
        serializer.save(user=self.request.user, is_default=make_default)

    @transaction.atomic
    def perform_update(self, serializer):
        if serializer.validated_data.get("is_default"):
            self._clear_default(exclude_pk=serializer.instance.pk)
        serializer.save()

    @transaction.atomic
    def perform_destroy(self, instance):
        was_default = instance.is_default
        user = instance.user
        instance.delete()

        if was_default:
            nxt = Address.objects.filter(user=user).order_by("-created_at").first()
            if nxt:
                nxt.is_default = True
                nxt.save(update_fields=["is_default", "updated_at"])

# users/views/admin_users.py

"""
======================================================
PATH: users/views/admin_users.py
======================================================
ADMIN USER MANAGEMENT

GET  /api/admin/users/           -> all accounts, newest first
POST /api/admin/users/set-role/  -> {uid, role} promote/demote

Errors:
- 400 UID_REQUIRED / SELF_ROLE_CHANGE
- 404 USER_NOT_FOUND
======================================================
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import generics, status
from rest_framework.response import Response
from rest_framework.views import APIView

from common.responses import error_response
from permissions.roles import IsAdmin
from users.models import User
from users.serializers import AdminUserSerializer, SetRoleResponseSerializer, SetRoleSerializer
from users.services.exceptions import AccountError, UserNotFoundError
from users.services.roles import set_user_role


@extend_schema(tags=["Admin"])
class AdminUserListView(generics.ListAPIView):
    serializer_class = AdminUserSerializer
    permission_classes = [IsAdmin]

    def get_queryset(self):
        qs = User.objects.all().order_by("-created_at")
        q = (self.request.query_params.get("q") or "").strip()
        if q:
            qs = qs.filter(email__icontains=q)
        return qs


class SetRoleView(APIView):
    permission_classes = [IsAdmin]

    @extend_schema(
        tags=["Admin"],
        request=SetRoleSerializer,
        responses={
            200: SetRoleResponseSerializer,
            400: OpenApiResponse(description="Missing uid or own account"),
            404: OpenApiResponse(description="User not found"),
        },
    )
    def post(self, request):
        serializer = SetRoleSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            _, message = set_user_role(actor=request.user, uid=data["uid"], role=data["role"])
        except UserNotFoundError as exc:
            return error_response(code=exc.code, message=str(exc), http_status=status.HTTP_404_NOT_FOUND)
        except AccountError as exc:
            return error_response(code=exc.code, message=str(exc), http_status=status.HTTP_400_BAD_REQUEST)

        return Response({"success": True, "message": message})

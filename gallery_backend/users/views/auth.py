# users/views/auth.py

"""
PUBLIC AUTH ENDPOINTS

- register            -> customer account + verification email
- login               -> JWT pair (email OR username)
- verify-email        -> signed token flips email_verified
- verify-email/resend -> authenticated, only while unverified
"""

from __future__ import annotations

import logging

from django.contrib.auth import authenticate
from django.contrib.auth.models import update_last_login
from django.db import transaction
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.tokens import RefreshToken

from common.responses import error_response
from common.throttles import PublicWriteThrottle
from users.serializers import (
    LoginResponseSerializer,
    LoginSerializer,
    RegisterSerializer,
    UserSerializer,
    VerifyEmailSerializer,
)
from users.services.exceptions import AccountError
from users.services.verification import (
    queue_verification_email,
    resend_verification,
    verify_email_token,
)

logger = logging.getLogger(__name__)


def _token_payload(user) -> dict:
    refresh = RefreshToken.for_user(user)
    return {
        "access": str(refresh.access_token),
        "refresh": str(refresh),
        "user": UserSerializer(user).data,
    }


class RegisterView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_classes = [PublicWriteThrottle]
    serializer_class = RegisterSerializer

    @extend_schema(
        tags=["Auth"],
        request=RegisterSerializer,
        responses={201: LoginResponseSerializer, 400: OpenApiResponse(description="Validation error")},
        description="Register a customer account; a verification email is sent.",
    )
    @transaction.atomic
    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = serializer.save()
        queue_verification_email(user)

        logger.info("User registered", extra={"user_id": str(user.pk)})
        return Response(_token_payload(user), status=status.HTTP_201_CREATED)


class LoginView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_classes = [PublicWriteThrottle]
    serializer_class = LoginSerializer

    @extend_schema(
        tags=["Auth"],
        request=LoginSerializer,
        responses={200: LoginResponseSerializer, 401: OpenApiResponse(description="Invalid credentials")},
        description="Authenticate with email or username and password.",
    )
    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = authenticate(
            request=request,
            username=serializer.validated_data["identifier"],
            password=serializer.validated_data["password"],
        )

        if not user:
            return error_response(
                code="INVALID_CREDENTIALS",
                message="Correo o contraseña incorrectos",
                http_status=status.HTTP_401_UNAUTHORIZED,
            )

        update_last_login(None, user)
        return Response(_token_payload(user))


class VerifyEmailView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_classes = [PublicWriteThrottle]

    @extend_schema(
        tags=["Auth"],
        request=VerifyEmailSerializer,
        responses={200: UserSerializer, 400: OpenApiResponse(description="Invalid or expired token")},
    )
    def post(self, request):
        serializer = VerifyEmailSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            user = verify_email_token(serializer.validated_data["token"])
        except AccountError as exc:
            return error_response(code=exc.code, message=str(exc), http_status=status.HTTP_400_BAD_REQUEST)

        return Response(UserSerializer(user).data)


class ResendVerificationView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        tags=["Auth"],
        request=None,
        responses={202: OpenApiResponse(description="Email queued"), 400: OpenApiResponse(description="Already verified")},
    )
    @transaction.atomic
    def post(self, request):
        try:
            resend_verification(request.user)
        except AccountError as exc:
            return error_response(code=exc.code, message=str(exc), http_status=status.HTTP_400_BAD_REQUEST)

        return Response({"detail": "Correo de verificación enviado"}, status=status.HTTP_202_ACCEPTED)

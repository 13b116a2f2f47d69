# users/urls.py

from django.urls import path
from rest_framework.routers import DefaultRouter

from .views import (
    AddressViewSet,
    LoginView,
    MeView,
    RegisterView,
    ResendVerificationView,
    VerifyEmailView,
)

app_name = "users"

router = DefaultRouter()
router.register(r"addresses", AddressViewSet, basename="addresses")

urlpatterns = [
    # ---------------- PUBLIC AUTH ----------------
    path("register/", RegisterView.as_view(), name="register"),
    path("login/", LoginView.as_view(), name="login"),
    path("verify-email/", VerifyEmailView.as_view(), name="verify-email"),
    # ---------------- AUTHENTICATED ----------------
    path("verify-email/resend/", ResendVerificationView.as_view(), name="verify-email-resend"),
    path("me/", MeView.as_view(), name="me"),
] + router.urls

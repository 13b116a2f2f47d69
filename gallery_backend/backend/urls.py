# backend/urls.py
"""
PROJECT URLS

All API routes live under /api/

Public storefront:
- /api/paintings/ /api/blog/ /api/reviews/ /api/settings/ /api/custom-orders/
- /api/orders/checkout/ and token-guarded guest order lookups

Customer (JWT):
- /api/auth/ /api/cart/ /api/wishlist/ /api/orders/mine/

Admin (role=admin):
- /api/admin/... and /api/analytics/

Operational maturity:
- /api/health/ (AllowAny) checks DB connectivity, 503 when it is down.

Security hardening:
- Django admin path configurable via env var (ADMIN_PATH).
"""

from __future__ import annotations

from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.db import DatabaseError, connections
from django.urls import include, path
from django.views.generic import RedirectView
from drf_spectacular.utils import extend_schema
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView


# ------------------ API ROOT (PUBLIC) ------------------
@extend_schema(
    responses={
        200: {
            "type": "object",
            "properties": {
                "message": {"type": "string"},
                "auth": {"type": "object"},
                "docs": {"type": "object"},
                "modules": {"type": "object"},
            },
        }
    },
)
@api_view(["GET"])
@permission_classes([AllowAny])
def api_root(request):
    return Response(
        {
            "message": f"{settings.SITE_NAME} API is running",
            "auth": {
                "register": "/api/auth/register/",
                "login": "/api/auth/login/",
                "me": "/api/auth/me/",
                "jwt_create": "/api/auth/jwt/create/",
                "jwt_refresh": "/api/auth/jwt/refresh/",
            },
            "docs": {
                "swagger": "/api/docs/",
                "schema": "/api/schema/",
            },
            "modules": {
                "paintings": "/api/paintings/",
                "cart": "/api/cart/",
                "wishlist": "/api/wishlist/",
                "coupons": "/api/coupons/",
                "orders": "/api/orders/",
                "custom_orders": "/api/custom-orders/",
                "reviews": "/api/reviews/",
                "blog": "/api/blog/",
                "settings": "/api/settings/",
                "analytics": "/api/analytics/",
                "admin": "/api/admin/",
            },
        }
    )


# ------------------ HEALTH CHECK (PUBLIC) ------------------
@extend_schema(
    responses={
        200: {
            "type": "object",
            "properties": {
                "status": {"type": "string"},
                "db": {"type": "string"},
            },
        },
        503: {
            "type": "object",
            "properties": {
                "status": {"type": "string"},
                "db": {"type": "string"},
                "error": {"type": "string"},
            },
        },
    },
)
@api_view(["GET"])
@authentication_classes([])
@permission_classes([AllowAny])
def health_check(request):
    """
    Minimal operational endpoint:
    - Confirms app is responding
    - Confirms DB connection + simple query works
    """
    try:
        conn = connections["default"]
        with conn.cursor() as cursor:
            cursor.execute("SELECT 1;")
            cursor.fetchone()
        return Response({"status": "ok", "db": "ok"})
    except DatabaseError as e:
        return Response({"status": "degraded", "db": "down", "error": str(e)}, status=503)


# ------------------ ADMIN PATH (HARDENED) ------------------
# Keep the trailing slash; do not expose the production value in public docs.
ADMIN_PATH = getattr(settings, "ADMIN_PATH", "admin/")
if not ADMIN_PATH.endswith("/"):
    ADMIN_PATH = f"{ADMIN_PATH}/"


# ------------------ ADMIN API (role=admin) ------------------
admin_api_urlpatterns = [
    path("users/", include("users.admin_urls")),
    path("logs/", include("audit.urls")),
    path("orders/", include("orders.admin_urls")),
    path("custom-orders/", include("custom_orders.admin_urls")),
    path("reviews/", include("reviews.admin_urls")),
    path("blog/", include("blog.admin_urls")),
]


# ------------------ API ROUTES (ALL UNDER /api/) ------------------
api_urlpatterns = [
    # Health check / root
    path("", api_root, name="api-root"),
    path("health/", health_check, name="health-check"),
    # OpenAPI / Swagger
    path("schema/", SpectacularAPIView.as_view(), name="schema"),
    path("docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    # JWT (SimpleJWT)
    path("auth/jwt/create/", TokenObtainPairView.as_view(), name="jwt-create"),
    path("auth/jwt/refresh/", TokenRefreshView.as_view(), name="jwt-refresh"),
    # Auth & Users
    path("auth/", include("users.urls")),
    # Storefront
    path("paintings/", include("paintings.urls")),
    path("cart/", include("cart.urls")),
    path("wishlist/", include("wishlist.urls")),
    path("coupons/", include("coupons.urls")),
    path("orders/", include("orders.urls")),
    path("custom-orders/", include("custom_orders.urls")),
    path("reviews/", include("reviews.urls")),
    path("blog/", include("blog.urls")),
    path("settings/", include("site_settings.urls")),
    # Admin
    path("analytics/", include("analytics.urls")),
    path("admin/", include(admin_api_urlpatterns)),
]

urlpatterns = [
    # Hardened admin path
    path(ADMIN_PATH, admin.site.urls),
    # Root convenience: visiting / takes you to Swagger docs
    path("", RedirectView.as_view(url="/api/docs/", permanent=False), name="root"),
    path("api/", include(api_urlpatterns)),
]

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)

# audit/urls.py

from rest_framework.routers import DefaultRouter

from .views import AdminLogViewSet

app_name = "audit"

router = DefaultRouter()
router.register(r"", AdminLogViewSet, basename="admin-logs")

urlpatterns = router.urls

from rest_framework.routers import DefaultRouter

from .views import AdminOrderViewSet

app_name = "orders_admin"

router = DefaultRouter()
router.register("", AdminOrderViewSet, basename="admin-orders")

urlpatterns = router.urls

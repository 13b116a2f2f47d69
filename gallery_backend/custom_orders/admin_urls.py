from rest_framework.routers import DefaultRouter

from .views import AdminCustomOrderViewSet

app_name = "custom_orders_admin"

router = DefaultRouter()
router.register("", AdminCustomOrderViewSet, basename="admin-custom-orders")

urlpatterns = router.urls

from rest_framework.routers import DefaultRouter

from .views import AdminReviewViewSet

app_name = "reviews_admin"

router = DefaultRouter()
router.register("", AdminReviewViewSet, basename="admin-reviews")

urlpatterns = router.urls

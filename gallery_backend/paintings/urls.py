# paintings/urls.py

from rest_framework.routers import DefaultRouter

from .views import PaintingViewSet

app_name = "paintings"

router = DefaultRouter()
router.register(r"", PaintingViewSet, basename="paintings")

urlpatterns = router.urls

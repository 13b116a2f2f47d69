from rest_framework.routers import DefaultRouter

from .views import BlogPostViewSet

app_name = "blog"

router = DefaultRouter()
router.register("", BlogPostViewSet, basename="blog-posts")

urlpatterns = router.urls

from rest_framework.routers import DefaultRouter

from .views import AdminBlogPostViewSet

app_name = "blog_admin"

router = DefaultRouter()
router.register("", AdminBlogPostViewSet, basename="admin-blog-posts")

urlpatterns = router.urls

from django.urls import path

from .views import PaintingReviewsView, ReviewCreateView

app_name = "reviews"

urlpatterns = [
    path("", ReviewCreateView.as_view(), name="create"),
    path("painting/<uuid:painting_id>/", PaintingReviewsView.as_view(), name="painting-reviews"),
]

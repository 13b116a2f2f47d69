from django.urls import path

from .views import WishlistItemView, WishlistView

app_name = "wishlist"

urlpatterns = [
    path("", WishlistView.as_view(), name="wishlist"),
    path("<uuid:painting_id>/", WishlistItemView.as_view(), name="item"),
]

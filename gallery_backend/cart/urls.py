"""
PATH: cart/urls.py
"""

from django.urls import path

from .views import CartItemDetailView, CartItemsView, CartView, ClearCartView, MergeCartView

app_name = "cart"

urlpatterns = [
    path("", CartView.as_view(), name="cart"),
    path("items/", CartItemsView.as_view(), name="items"),
    path("items/<uuid:painting_id>/", CartItemDetailView.as_view(), name="item-detail"),
    path("clear/", ClearCartView.as_view(), name="clear"),
    path("merge/", MergeCartView.as_view(), name="merge"),
]

from django.urls import path

from .views import CanvasSizeListView, CustomOrderCreateView

app_name = "custom_orders"

urlpatterns = [
    path("", CustomOrderCreateView.as_view(), name="create"),
    path("sizes/", CanvasSizeListView.as_view(), name="sizes"),
]

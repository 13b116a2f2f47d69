from django.urls import path

from .views import CheckoutView, MyOrdersView, PublicOrderView, TransferProofView

app_name = "orders"

urlpatterns = [
    path("checkout/", CheckoutView.as_view(), name="checkout"),
    path("mine/", MyOrdersView.as_view(), name="mine"),
    path("<uuid:order_id>/", PublicOrderView.as_view(), name="public-detail"),
    path("<uuid:order_id>/transfer-proof/", TransferProofView.as_view(), name="transfer-proof"),
]

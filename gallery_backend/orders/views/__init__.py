"""
PATH: orders/views/__init__.py
"""

from .admin import AdminOrderViewSet
from .checkout import CheckoutView
from .mine import MyOrdersView
from .public import PublicOrderView, TransferProofView

__all__ = [
    "AdminOrderViewSet",
    "CheckoutView",
    "MyOrdersView",
    "PublicOrderView",
    "TransferProofView",
]

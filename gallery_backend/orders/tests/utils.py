from orders.models import Order
from orders.services.checkout import place_order

SHIPPING = {
    "full_name": "Camila Rojas",
    "email": "camila@example.com",
    "phone": "+56 9 1234 5678",
    "address": "Av. Providencia 1234",
    "city": "Santiago",
    "region": "Metropolitana",
    "postal_code": "7500000",
}


def make_order(*paintings, user=None, payment_method=Order.PAYMENT_TRANSFER, **extra) -> Order:
    return place_order(
        user=user,
        lines=[{"painting_id": str(p.id), "quantity": 1} for p in paintings],
        shipping=dict(SHIPPING),
        payment_method=payment_method,
        **extra,
    )

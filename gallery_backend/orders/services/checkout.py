# orders/services/checkout.py

"""
CHECKOUT (APPLICATION SERVICE)

Purpose:
- Turn a list of (painting, quantity) lines into a persisted Order (atomic).
- Never oversell: tracked stock is validated and decremented on locked rows.
- Redeem the coupon against the authoritative subtotal.

Hard rules:
- Quantities are whole units >= 1.
- Money values are computed server-side from current painting prices; the
  client never sends totals.
- total = subtotal + shipping - discount, never negative.

Notes:
- Everything runs in one DB transaction: stock, coupon usage, order rows and
  the cart clear succeed together or roll back together.
- The confirmation email is queued with transaction.on_commit.
"""

from __future__ import annotations

import logging
import uuid
from typing import Iterable, Optional

from django.conf import settings
from django.db import IntegrityError, transaction

from cart.models import Cart, CartItem
from common.identifiers import generate_access_token, generate_order_number, generate_transaction_id
from common.money import ZERO, money
from coupons.services.coupon_service import redeem_coupon
from coupons.services.exceptions import CouponValidationError
from orders.models import Order, OrderItem
from paintings.models import Painting

from .exceptions import (
    CheckoutError,
    CouponError,
    EmptyOrderError,
    InsufficientStockError,
    PaintingUnavailableError,
)
from .notifications import queue_order_confirmation

logger = logging.getLogger(__name__)

ORDER_NUMBER_ATTEMPTS = 20

SHIPPING_FIELDS = ("full_name", "email", "phone", "address", "city", "region", "postal_code")


def _to_int_qty(value) -> int:
    if isinstance(value, bool):
        raise ValueError("quantity must be a whole integer unit")

    if isinstance(value, int):
        return value

    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())

    raise ValueError("quantity must be a whole integer unit")


def _merge_lines(lines: Iterable[dict]) -> dict[str, int]:
    """
    {painting_id: quantity}; repeated paintings are summed, order preserved.
    """
    merged: dict[str, int] = {}
    for line in lines:
        raw_id = str(line.get("painting_id") or "").strip()
        if not raw_id:
            raise CheckoutError("Cada ítem debe indicar una obra")

        try:
            painting_id = str(uuid.UUID(raw_id))
        except ValueError:
            raise PaintingUnavailableError("Una de las obras ya no está disponible")

        try:
            qty = _to_int_qty(line.get("quantity", 1))
        except ValueError:
            raise CheckoutError("La cantidad debe ser un número entero")

        if qty <= 0:
            raise CheckoutError("La cantidad debe ser al menos 1")

        merged[painting_id] = merged.get(painting_id, 0) + qty
    return merged


def cart_lines(user) -> list[dict]:
    cart = Cart.objects.filter(user=user).first()
    if cart is None:
        return []
    return [
        {"painting_id": str(item.painting_id), "quantity": item.quantity}
        for item in cart.items.all()
    ]


def _create_order_row(**fields) -> Order:
    """
    Order numbers only carry 1000 values per day; retry on collision inside
    a savepoint so the outer checkout transaction survives.
    """
    for _ in range(ORDER_NUMBER_ATTEMPTS):
        number = generate_order_number()
        if Order.objects.filter(order_number=number).exists():
            continue
        try:
            with transaction.atomic():
                return Order.objects.create(order_number=number, **fields)
        except IntegrityError:
            logger.warning("Order number collision", extra={"order_number": number})

    raise CheckoutError("No se pudo generar un número de orden, intenta nuevamente")


@transaction.atomic
def place_order(
    *,
    user,
    lines: Optional[Iterable[dict]],
    shipping: dict,
    payment_method: str,
    coupon_code: str = "",
    notes: str = "",
) -> Order:
    """
    lines: [{painting_id, quantity}]. When empty and the user is authenticated,
    the server cart is used and cleared on success.
    """
    authenticated = bool(user and getattr(user, "is_authenticated", False))
    from_cart = False

    lines = list(lines or [])
    if not lines and authenticated:
        lines = cart_lines(user)
        from_cart = True

    requested = _merge_lines(lines)
    if not requested:
        raise EmptyOrderError("El carrito está vacío")

    if payment_method not in dict(Order.PAYMENT_METHOD_CHOICES):
        raise CheckoutError("Método de pago no válido")

    # Lock in a stable order so concurrent checkouts cannot deadlock.
    locked = {
        str(p.pk): p
        for p in Painting.objects.select_for_update().filter(pk__in=list(requested)).order_by("pk")
    }

    # Validate everything before writing anything.
    for painting_id, qty in requested.items():
        painting = locked.get(painting_id)
        if painting is None:
            raise PaintingUnavailableError("Una de las obras ya no está disponible")

        if not painting.available:
            raise PaintingUnavailableError(f"La obra '{painting.title}' ya no está disponible")

        if painting.stock_tracked and painting.stock < qty:
            raise InsufficientStockError(f"No hay stock suficiente para '{painting.title}'")

    subtotal = ZERO
    for painting_id, qty in requested.items():
        subtotal += money(locked[painting_id].price) * qty
    subtotal = money(subtotal)

    coupon = None
    discount = ZERO
    code = (coupon_code or "").strip()
    if code:
        try:
            coupon, discount = redeem_coupon(code, subtotal)
        except CouponValidationError as exc:
            raise CouponError(exc.code, str(exc))

    shipping_cost = money(getattr(settings, "SHIPPING_COST", 0))
    total = max(ZERO, money(subtotal + shipping_cost - discount))

    order = _create_order_row(
        user=user if authenticated else None,
        subtotal=subtotal,
        shipping_cost=shipping_cost,
        discount=discount,
        total=total,
        coupon=coupon,
        coupon_code=coupon.code if coupon else "",
        shipping_full_name=(shipping.get("full_name") or "").strip(),
        shipping_email=(shipping.get("email") or "").strip().lower(),
        shipping_phone=(shipping.get("phone") or "").strip(),
        shipping_address=(shipping.get("address") or "").strip(),
        shipping_city=(shipping.get("city") or "").strip(),
        shipping_region=(shipping.get("region") or "").strip(),
        shipping_postal_code=(shipping.get("postal_code") or "").strip(),
        payment_method=payment_method,
        payment_status=Order.PAYMENT_PENDING,
        transaction_id=generate_transaction_id(),
        public_access_token=generate_access_token(),
        notes=(notes or "").strip(),
    )

    for painting_id, qty in requested.items():
        painting = locked[painting_id]
        unit_price = money(painting.price)

        OrderItem.objects.create(
            order=order,
            painting=painting,
            title=painting.title,
            image_url=painting.image_url or "",
            unit_price=unit_price,
            quantity=qty,
            total_price=money(unit_price * qty),
        )

        if painting.stock_tracked:
            painting.stock = int(painting.stock) - qty
            painting.save(update_fields=["stock", "updated_at"])

    if from_cart:
        CartItem.objects.filter(cart__user=user).delete()

    queue_order_confirmation(order)

    logger.info(
        "Order placed",
        extra={
            "order_id": str(order.pk),
            "order_number": order.order_number,
            "total": str(order.total),
            "payment_method": order.payment_method,
            "coupon": order.coupon_code or None,
        },
    )
    return order

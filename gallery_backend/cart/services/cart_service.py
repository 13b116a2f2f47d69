# cart/services/cart_service.py

"""
======================================================
PATH: cart/services/cart_service.py
======================================================
CART SERVICE

Rules:
- Money is server-owned: unit_price is snapshotted from Painting on add.
- A painting can be added only while available and (untracked or stock > 0).
- Setting a quantity <= 0 removes the line.
- Merging a guest cart adds its lines one by one; lines that can no longer
  be added are skipped and reported back, never fatal.
======================================================
"""

from __future__ import annotations

import logging
from typing import Iterable

from django.db import transaction

from cart.models import Cart, CartItem
from paintings.models import Painting

from .exceptions import CartItemNotFoundError, PaintingNotAvailableError

logger = logging.getLogger(__name__)

MSG_NOT_AVAILABLE = "Esta obra ya no está disponible"


def get_cart(user) -> Cart:
    cart, _ = Cart.objects.get_or_create(user=user)
    return cart


def _addable_painting(painting_id) -> Painting:
    painting = Painting.objects.filter(pk=painting_id).first()
    if painting is None or not painting.in_stock:
        raise PaintingNotAvailableError(MSG_NOT_AVAILABLE)
    return painting


@transaction.atomic
def add_to_cart(*, user, painting_id, quantity: int = 1) -> tuple[Cart, CartItem, bool]:
    """
    Returns (cart, item, is_new).
    """
    quantity = max(int(quantity or 1), 1)
    painting = _addable_painting(painting_id)
    cart = get_cart(user)

    item = CartItem.objects.select_for_update().filter(cart=cart, painting=painting).first()
    if item is None:
        item = CartItem.objects.create(
            cart=cart,
            painting=painting,
            quantity=quantity,
            unit_price=painting.price,
        )
        is_new = True
    else:
        item.quantity = int(item.quantity or 0) + quantity
        item.unit_price = painting.price
        item.save(update_fields=["quantity", "unit_price"])
        is_new = False

    cart.save(update_fields=["updated_at"])
    return cart, item, is_new


@transaction.atomic
def update_quantity(*, user, painting_id, quantity: int) -> Cart:
    cart = get_cart(user)
    item = CartItem.objects.select_for_update().filter(cart=cart, painting_id=painting_id).first()
    if item is None:
        raise CartItemNotFoundError("La obra no está en el carrito")

    if int(quantity) <= 0:
        item.delete()
    else:
        item.quantity = int(quantity)
        item.save(update_fields=["quantity"])

    cart.save(update_fields=["updated_at"])
    return cart


@transaction.atomic
def remove_from_cart(*, user, painting_id) -> Cart:
    cart = get_cart(user)
    CartItem.objects.filter(cart=cart, painting_id=painting_id).delete()
    cart.save(update_fields=["updated_at"])
    return cart


@transaction.atomic
def clear_cart(*, user) -> Cart:
    cart = get_cart(user)
    cart.items.all().delete()
    cart.save(update_fields=["updated_at"])
    return cart


def merge_guest_cart(*, user, lines: Iterable[dict]) -> tuple[Cart, list[str]]:
    """
    Returns (cart, skipped painting ids).
    """
    skipped: list[str] = []

    for line in lines:
        painting_id = line.get("painting_id")
        try:
            add_to_cart(user=user, painting_id=painting_id, quantity=line.get("quantity") or 1)
        except PaintingNotAvailableError:
            skipped.append(str(painting_id))

    if skipped:
        logger.info(
            "Guest cart merged with skipped lines",
            extra={"user_id": str(user.pk), "skipped": skipped},
        )

    return get_cart(user), skipped

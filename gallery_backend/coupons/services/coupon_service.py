# coupons/services/coupon_service.py

"""
======================================================
PATH: coupons/services/coupon_service.py
======================================================
COUPON RULES

Validation order (first failure wins):
1) exists                       COUPON_NOT_FOUND
2) is_active                    COUPON_INACTIVE
3) now >= valid_from            COUPON_NOT_YET_VALID
4) now <= valid_until           COUPON_EXPIRED
5) usage_count < usage_limit    COUPON_USAGE_LIMIT
6) subtotal >= min_purchase     COUPON_MIN_PURCHASE

Discount:
- fixed       -> discount_value
- percentage  -> subtotal * value / 100, capped by max_discount
- never above the subtotal
======================================================
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional

from django.utils import timezone

from common.formatting import format_price
from common.money import ZERO, money
from coupons.models import Coupon, normalize_code

from .exceptions import (
    COUPON_EXPIRED,
    COUPON_INACTIVE,
    COUPON_MIN_PURCHASE,
    COUPON_NOT_FOUND,
    COUPON_NOT_YET_VALID,
    COUPON_USAGE_LIMIT,
    CouponValidationError,
)

logger = logging.getLogger(__name__)


def find_coupon(code, *, for_update: bool = False) -> Coupon:
    qs = Coupon.objects.all()
    if for_update:
        qs = qs.select_for_update()

    coupon = qs.filter(code=normalize_code(code)).first() if normalize_code(code) else None
    if coupon is None:
        raise CouponValidationError(COUPON_NOT_FOUND, "Cupón no válido")
    return coupon


def validate_coupon(coupon: Optional[Coupon], subtotal, now=None) -> Coupon:
    now = now or timezone.now()
    subtotal = money(subtotal)

    if coupon is None:
        raise CouponValidationError(COUPON_NOT_FOUND, "Cupón no válido")

    if not coupon.is_active:
        raise CouponValidationError(COUPON_INACTIVE, "Este cupón no está activo")

    if now < coupon.valid_from:
        raise CouponValidationError(COUPON_NOT_YET_VALID, "Este cupón aún no es válido")

    if now > coupon.valid_until:
        raise CouponValidationError(COUPON_EXPIRED, "Este cupón ha expirado")

    if coupon.limit_reached:
        raise CouponValidationError(COUPON_USAGE_LIMIT, "Este cupón ha alcanzado su límite de usos")

    if coupon.min_purchase and subtotal < money(coupon.min_purchase):
        raise CouponValidationError(
            COUPON_MIN_PURCHASE,
            f"Compra mínima de {format_price(coupon.min_purchase)} requerida",
        )

    return coupon


def calculate_discount(coupon: Optional[Coupon], subtotal) -> Decimal:
    if coupon is None:
        return ZERO

    subtotal = money(subtotal)
    value = money(coupon.discount_value)

    if coupon.discount_type == Coupon.TYPE_FIXED:
        discount = value
    else:
        discount = money(subtotal * value / Decimal("100"))
        if coupon.max_discount and discount > money(coupon.max_discount):
            discount = money(coupon.max_discount)

    return max(ZERO, min(discount, subtotal))


def redeem_coupon(code, subtotal, now=None) -> tuple[Coupon, Decimal]:
    """
    Checkout-only: must run inside the order transaction. Locks the coupon row,
    re-validates against the authoritative subtotal and consumes one use.
    """
    coupon = find_coupon(code, for_update=True)
    validate_coupon(coupon, subtotal, now)

    discount = calculate_discount(coupon, subtotal)

    coupon.usage_count = int(coupon.usage_count or 0) + 1
    coupon.save(update_fields=["usage_count"])

    logger.info(
        "Coupon redeemed",
        extra={"coupon": coupon.code, "usage_count": coupon.usage_count, "discount": str(discount)},
    )
    return coupon, discount

from datetime import timedelta
from decimal import Decimal

from django.utils import timezone

from coupons.models import Coupon


def make_coupon(code="VERANO10", **extra) -> Coupon:
    now = timezone.now()
    fields = {
        "code": code,
        "discount_type": Coupon.TYPE_PERCENTAGE,
        "discount_value": Decimal("10"),
        "valid_from": now - timedelta(days=1),
        "valid_until": now + timedelta(days=30),
    }
    fields.update(extra)
    return Coupon.objects.create(**fields)

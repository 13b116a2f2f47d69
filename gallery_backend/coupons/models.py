# coupons/models.py

"""
COUPON (discount code)

- code is stored trimmed + uppercased; lookups must normalize the same way
- percentage discounts may be capped by max_discount
- usage_limit NULL = unlimited; usage_count only grows through redeem_coupon()
"""

import uuid
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models


def normalize_code(code) -> str:
    return str(code or "").strip().upper()


class Coupon(models.Model):
    TYPE_PERCENTAGE = "percentage"
    TYPE_FIXED = "fixed"

    TYPE_CHOICES = [
        (TYPE_PERCENTAGE, "Percentage"),
        (TYPE_FIXED, "Fixed amount"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    code = models.CharField(max_length=40, unique=True)
    description = models.CharField(max_length=255, blank=True, default="")

    discount_type = models.CharField(max_length=16, choices=TYPE_CHOICES, default=TYPE_PERCENTAGE)
    discount_value = models.DecimalField(max_digits=12, decimal_places=2)

    min_purchase = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    max_discount = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)

    valid_from = models.DateTimeField()
    valid_until = models.DateTimeField()

    usage_limit = models.PositiveIntegerField(null=True, blank=True)
    usage_count = models.PositiveIntegerField(default=0)

    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]

    def clean(self):
        self.code = normalize_code(self.code)
        if not self.code:
            raise ValidationError({"code": "El código es obligatorio"})

        if self.discount_value is None or Decimal(self.discount_value) <= 0:
            raise ValidationError({"discount_value": "El descuento debe ser mayor a cero"})

        if self.discount_type == self.TYPE_PERCENTAGE and Decimal(self.discount_value) > 100:
            raise ValidationError({"discount_value": "El porcentaje no puede superar 100"})

        if self.valid_from and self.valid_until and self.valid_until < self.valid_from:
            raise ValidationError({"valid_until": "La fecha de término debe ser posterior al inicio"})

    def save(self, *args, **kwargs):
        self.full_clean()
        super().save(*args, **kwargs)

    @property
    def limit_reached(self) -> bool:
        return bool(self.usage_limit) and self.usage_count >= self.usage_limit

    def __str__(self):
        return self.code

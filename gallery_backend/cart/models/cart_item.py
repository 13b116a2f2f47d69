# cart/models/cart_item.py

"""
CART ITEM MODEL

Rules:
- One painting per cart (DB constraint).
- Quantity must be > 0.
- Unit price is a snapshot of Painting.price, refreshed whenever the line is re-added.
"""

import uuid
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models

from paintings.models import Painting

from .cart import Cart


class CartItem(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    cart = models.ForeignKey(
        Cart,
        on_delete=models.CASCADE,
        related_name="items",
    )

    painting = models.ForeignKey(
        Painting,
        on_delete=models.CASCADE,
        related_name="cart_items",
    )

    quantity = models.PositiveIntegerField(default=1)

    unit_price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        help_text="Snapshot price at time of adding to cart (server-controlled)",
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["cart", "painting"],
                name="unique_painting_per_cart",
            )
        ]

    def clean(self):
        if self.quantity is None or int(self.quantity) <= 0:
            raise ValidationError({"quantity": "Quantity must be greater than zero"})

        if self.unit_price is None or self.unit_price <= 0:
            raise ValidationError({"unit_price": "Unit price must be greater than zero"})

    def save(self, *args, **kwargs):
        self.full_clean()
        return super().save(*args, **kwargs)

    @property
    def line_total(self) -> Decimal:
        return (self.unit_price or Decimal("0.00")) * Decimal(int(self.quantity or 0))

    def __str__(self):
        return f"{getattr(self.painting, 'title', 'Painting')} x {self.quantity}"

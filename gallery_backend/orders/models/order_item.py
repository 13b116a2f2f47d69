# orders/models/order_item.py

"""
ORDER ITEM (immutable snapshot)

- title / image_url / unit_price are copied from the painting at checkout
- painting may later be deleted (SET_NULL); the snapshot keeps the order readable
"""

import uuid
from decimal import Decimal

from django.db import models

from paintings.models import Painting

from .order import Order


class OrderItem(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    order = models.ForeignKey(
        Order,
        on_delete=models.CASCADE,
        related_name="items",
    )

    painting = models.ForeignKey(
        Painting,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="order_items",
    )

    title = models.CharField(max_length=200)
    image_url = models.CharField(max_length=500, blank=True, default="")

    unit_price = models.DecimalField(max_digits=12, decimal_places=2)
    quantity = models.PositiveIntegerField()
    total_price = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))

    class Meta:
        ordering = ["title"]

    def __str__(self):
        return f"{self.title} x {self.quantity}"

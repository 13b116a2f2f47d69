# custom_orders/models.py

"""
CUSTOM ORDER (commission request)

- Size fields are a snapshot of custom_orders.sizes at submission time.
- total_price = BASE_CUSTOM_ORDER_PRICE x price_multiplier (server computed).
- status: pending -> in-progress -> completed | cancelled
"""

import uuid
from decimal import Decimal

from django.db import models

from .sizes import ORIENTATION_CHOICES, ORIENTATION_VERTICAL


class CustomOrder(models.Model):
    STATUS_PENDING = "pending"
    STATUS_IN_PROGRESS = "in-progress"
    STATUS_COMPLETED = "completed"
    STATUS_CANCELLED = "cancelled"

    STATUS_CHOICES = [
        (STATUS_PENDING, "Pendiente"),
        (STATUS_IN_PROGRESS, "En progreso"),
        (STATUS_COMPLETED, "Completada"),
        (STATUS_CANCELLED, "Cancelada"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    customer_name = models.CharField(max_length=120)
    email = models.EmailField()
    phone = models.CharField(max_length=40)

    reference_image = models.FileField(upload_to="custom_orders/%Y/%m/")

    size_name = models.CharField(max_length=20)
    width_cm = models.PositiveIntegerField()
    height_cm = models.PositiveIntegerField()
    price_multiplier = models.DecimalField(max_digits=5, decimal_places=2, default=Decimal("1"))
    orientation = models.CharField(max_length=12, choices=ORIENTATION_CHOICES, default=ORIENTATION_VERTICAL)

    total_price = models.DecimalField(max_digits=12, decimal_places=2)

    status = models.CharField(max_length=16, choices=STATUS_CHOICES, default=STATUS_PENDING)
    notes = models.TextField(blank=True, default="")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["status", "created_at"], name="custom_orde_status_5c2d8e_idx"),
        ]

    def __str__(self):
        return f"{self.customer_name} | {self.size_name} | {self.status}"

# orders/models/order.py

"""
ORDER (storefront checkout result)

Lifecycle:
- created by orders.services.checkout.place_order() only
- status:           pending -> confirmed -> processing -> shipped -> delivered | cancelled
- shipping_status:  pending -> processing -> shipped -> delivered | cancelled
- payment_status:   pending -> paid | failed (set by an admin; no gateway)

Public access:
- public_access_token is the only credential for guest lookups; it is never
  serialized back out after the checkout response.
"""

import uuid
from decimal import Decimal

from django.conf import settings
from django.db import models

from coupons.models import Coupon


class Order(models.Model):
    STATUS_PENDING = "pending"
    STATUS_CONFIRMED = "confirmed"
    STATUS_PROCESSING = "processing"
    STATUS_SHIPPED = "shipped"
    STATUS_DELIVERED = "delivered"
    STATUS_CANCELLED = "cancelled"

    STATUS_CHOICES = [
        (STATUS_PENDING, "Pendiente"),
        (STATUS_CONFIRMED, "Confirmada"),
        (STATUS_PROCESSING, "En preparación"),
        (STATUS_SHIPPED, "Enviada"),
        (STATUS_DELIVERED, "Entregada"),
        (STATUS_CANCELLED, "Cancelada"),
    ]

    SHIPPING_PENDING = "pending"
    SHIPPING_PROCESSING = "processing"
    SHIPPING_SHIPPED = "shipped"
    SHIPPING_DELIVERED = "delivered"
    SHIPPING_CANCELLED = "cancelled"

    SHIPPING_STATUS_CHOICES = [
        (SHIPPING_PENDING, "Pendiente"),
        (SHIPPING_PROCESSING, "En preparación"),
        (SHIPPING_SHIPPED, "Enviado"),
        (SHIPPING_DELIVERED, "Entregado"),
        (SHIPPING_CANCELLED, "Cancelado"),
    ]

    PAYMENT_WEBPAY = "webpay"
    PAYMENT_TRANSFER = "transfer"
    PAYMENT_CASH = "cash"

    PAYMENT_METHOD_CHOICES = [
        (PAYMENT_WEBPAY, "Webpay"),
        (PAYMENT_TRANSFER, "Transferencia"),
        (PAYMENT_CASH, "Efectivo"),
    ]

    PAYMENT_PENDING = "pending"
    PAYMENT_PAID = "paid"
    PAYMENT_FAILED = "failed"

    PAYMENT_STATUS_CHOICES = [
        (PAYMENT_PENDING, "Pendiente"),
        (PAYMENT_PAID, "Pagado"),
        (PAYMENT_FAILED, "Fallido"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    order_number = models.CharField(max_length=32, unique=True)

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="orders",
    )

    # Money fields (server authoritative)
    subtotal = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))
    shipping_cost = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))
    discount = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))
    total = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))

    coupon = models.ForeignKey(
        Coupon,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="orders",
    )
    coupon_code = models.CharField(max_length=40, blank=True, default="")

    # Shipping info (snapshot)
    shipping_full_name = models.CharField(max_length=120)
    shipping_email = models.EmailField()
    shipping_phone = models.CharField(max_length=40)
    shipping_address = models.CharField(max_length=255)
    shipping_city = models.CharField(max_length=120)
    shipping_region = models.CharField(max_length=120)
    shipping_postal_code = models.CharField(max_length=20, blank=True, default="")

    # Payment
    payment_method = models.CharField(max_length=16, choices=PAYMENT_METHOD_CHOICES)
    payment_status = models.CharField(max_length=16, choices=PAYMENT_STATUS_CHOICES, default=PAYMENT_PENDING)
    transaction_id = models.CharField(max_length=64, blank=True, default="")
    paid_at = models.DateTimeField(null=True, blank=True)
    transfer_proof = models.FileField(upload_to="transfer_proofs/%Y/%m/", null=True, blank=True)
    transfer_proof_uploaded_at = models.DateTimeField(null=True, blank=True)

    status = models.CharField(max_length=16, choices=STATUS_CHOICES, default=STATUS_PENDING)
    shipping_status = models.CharField(max_length=16, choices=SHIPPING_STATUS_CHOICES, default=SHIPPING_PENDING)

    public_access_token = models.CharField(max_length=64, db_index=True, editable=False)

    notes = models.TextField(blank=True, default="")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["status"], name="orders_orde_status_1b7c3a_idx"),
            models.Index(fields=["created_at"], name="orders_orde_created_6e0d2f_idx"),
            models.Index(fields=["shipping_email"], name="orders_orde_shippin_a41e9c_idx"),
        ]

    @property
    def is_transfer(self) -> bool:
        return self.payment_method == self.PAYMENT_TRANSFER

    @property
    def confirmation_path(self) -> str:
        return f"/order-confirmation/{self.id}?token={self.public_access_token}"

    def __str__(self):
        return f"{self.order_number} | {self.total} | {self.status}"

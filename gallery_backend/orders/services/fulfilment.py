# orders/services/fulfilment.py

"""
ADMIN FULFILMENT

- Each status change is logged to the admin activity log.
- An order status change emails the customer (after commit).
- payment_status "paid" stamps paid_at; leaving "paid" clears it.
- Cancelling does not restock.
"""

from __future__ import annotations

import logging

from django.db import transaction
from django.utils import timezone

from audit.services import log_order_deleted, log_order_status_updated, log_shipping_status_updated
from orders.models import Order

from .exceptions import InvalidStatusError
from .notifications import queue_status_update

logger = logging.getLogger(__name__)


def _check_choice(value: str, choices) -> str:
    value = (value or "").strip()
    if value not in dict(choices):
        raise InvalidStatusError("Estado no válido")
    return value


@transaction.atomic
def update_order_status(*, actor, order: Order, status: str) -> Order:
    status = _check_choice(status, Order.STATUS_CHOICES)
    order = Order.objects.select_for_update().get(pk=order.pk)

    old = order.status
    if old == status:
        return order

    order.status = status
    order.save(update_fields=["status", "updated_at"])

    log_order_status_updated(actor, order.pk, order.order_number, old, status)
    queue_status_update(order)

    logger.info(
        "Order status updated",
        extra={"order_id": str(order.pk), "old": old, "new": status},
    )
    return order


@transaction.atomic
def update_shipping_status(*, actor, order: Order, shipping_status: str) -> Order:
    shipping_status = _check_choice(shipping_status, Order.SHIPPING_STATUS_CHOICES)
    order = Order.objects.select_for_update().get(pk=order.pk)

    old = order.shipping_status
    if old == shipping_status:
        return order

    order.shipping_status = shipping_status
    order.save(update_fields=["shipping_status", "updated_at"])

    log_shipping_status_updated(actor, order.pk, order.order_number, old, shipping_status)
    return order


@transaction.atomic
def update_payment_status(*, actor, order: Order, payment_status: str) -> Order:
    payment_status = _check_choice(payment_status, Order.PAYMENT_STATUS_CHOICES)
    order = Order.objects.select_for_update().get(pk=order.pk)

    if order.payment_status == payment_status:
        return order

    old = order.payment_status
    order.payment_status = payment_status
    if payment_status == Order.PAYMENT_PAID:
        order.paid_at = timezone.now()
    else:
        order.paid_at = None
    order.save(update_fields=["payment_status", "paid_at", "updated_at"])

    logger.info(
        "Order payment status updated",
        extra={"order_id": str(order.pk), "old": old, "new": payment_status, "actor": getattr(actor, "email", None)},
    )
    return order


@transaction.atomic
def delete_order(*, actor, order: Order) -> None:
    order_id, number = order.pk, order.order_number
    order.delete()
    log_order_deleted(actor, order_id, number)
    logger.info("Order deleted", extra={"order_id": str(order_id)})

# custom_orders/services.py

"""
CUSTOM ORDER SERVICE

- Price is always recomputed from the chosen size; the client never sends it.
- Admin status changes and deletes are written to the admin activity log.
- The customer is emailed on submission and on every status change.
"""

from __future__ import annotations

import logging

from django.db import transaction

from audit.services import log_custom_order_deleted, log_custom_order_status_updated

from .models import CustomOrder
from .notifications import queue_custom_order_received, queue_custom_order_status_update
from .sizes import CanvasSize

logger = logging.getLogger(__name__)


@transaction.atomic
def create_custom_order(*, size: CanvasSize, orientation: str, reference_image, **fields) -> CustomOrder:
    width, height = size.dimensions(orientation)
    order = CustomOrder.objects.create(
        size_name=size.name,
        width_cm=width,
        height_cm=height,
        price_multiplier=size.price_multiplier,
        orientation=orientation,
        total_price=size.price(),
        reference_image=reference_image,
        **fields,
    )
    logger.info(
        "Custom order submitted",
        extra={"custom_order_id": str(order.pk), "size": size.name, "total": str(order.total_price)},
    )
    queue_custom_order_received(order)
    return order


@transaction.atomic
def update_custom_order_status(*, actor, order: CustomOrder, status: str) -> CustomOrder:
    old = order.status
    if old == status:
        return order

    order.status = status
    order.save(update_fields=["status", "updated_at"])
    log_custom_order_status_updated(actor, order.pk, order.customer_name, old, status)
    queue_custom_order_status_update(order)
    return order


@transaction.atomic
def delete_custom_order(*, actor, order: CustomOrder) -> None:
    order_id, name = order.pk, order.customer_name
    order.delete()
    log_custom_order_deleted(actor, order_id, name)

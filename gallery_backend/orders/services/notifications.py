# orders/services/notifications.py

"""
ORDER EMAILS

- Confirmation on checkout (bank details included for transfer orders).
- Status update whenever an admin changes the order status.
- Gated by settings.ORDER_EMAILS_ENABLED; sent after commit; delivery
  failures are logged, never raised into the request.
"""

from __future__ import annotations

import logging

from django.conf import settings
from django.core.mail import send_mail
from django.db import transaction
from django.template.loader import render_to_string

from common.formatting import format_date, format_price
from orders.models import Order

logger = logging.getLogger(__name__)


def _enabled() -> bool:
    return bool(getattr(settings, "ORDER_EMAILS_ENABLED", False))


def order_link(order: Order) -> str:
    return f"{settings.FRONTEND_BASE_URL}{order.confirmation_path}"


def _base_context(order: Order) -> dict:
    return {
        "order": order,
        "items": [
            {
                "title": item.title,
                "quantity": item.quantity,
                "total": format_price(item.total_price),
            }
            for item in order.items.all()
        ],
        "subtotal": format_price(order.subtotal),
        "shipping_cost": format_price(order.shipping_cost),
        "discount": format_price(order.discount) if order.discount else "",
        "total": format_price(order.total),
        "created": format_date(order.created_at, with_time=True),
        "site_name": settings.SITE_NAME,
        "link": order_link(order),
    }


def _send(order: Order, *, subject: str, template: str, context: dict) -> bool:
    try:
        send_mail(
            subject=subject,
            message=render_to_string(template, context),
            from_email=settings.DEFAULT_FROM_EMAIL,
            recipient_list=[order.shipping_email],
        )
    except Exception:
        logger.exception(
            "Order email failed",
            extra={"order_id": str(order.pk), "template": template},
        )
        return False

    logger.info("Order email sent", extra={"order_id": str(order.pk), "template": template})
    return True


def send_order_confirmation(order_id) -> bool:
    if not _enabled():
        return False

    order = Order.objects.filter(pk=order_id).first()
    if order is None:
        return False

    context = _base_context(order)
    context["bank"] = settings.BANK_TRANSFER_DETAILS if order.is_transfer else None

    return _send(
        order,
        subject=f"Confirmación de compra {order.order_number} - {settings.SITE_NAME}",
        template="orders/emails/order_confirmation.txt",
        context=context,
    )


def send_status_update(order_id) -> bool:
    if not _enabled():
        return False

    order = Order.objects.filter(pk=order_id).first()
    if order is None:
        return False

    context = _base_context(order)
    context["status_label"] = order.get_status_display()

    return _send(
        order,
        subject=f"Tu pedido {order.order_number} está {order.get_status_display().lower()}",
        template="orders/emails/status_update.txt",
        context=context,
    )


def queue_order_confirmation(order: Order) -> None:
    order_id = order.pk
    transaction.on_commit(lambda: send_order_confirmation(order_id))


def queue_status_update(order: Order) -> None:
    order_id = order.pk
    transaction.on_commit(lambda: send_status_update(order_id))

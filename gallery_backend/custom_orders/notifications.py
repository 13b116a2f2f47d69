# custom_orders/notifications.py

"""
CUSTOM ORDER EMAILS

- "Request received" when a commission is submitted.
- Status update whenever an admin changes the commission status.
- Same gate and delivery rules as the order emails (ORDER_EMAILS_ENABLED,
  sent after commit, failures logged).
"""

from __future__ import annotations

import logging

from django.conf import settings
from django.core.mail import send_mail
from django.db import transaction
from django.template.loader import render_to_string

from common.formatting import format_price

from .models import CustomOrder

logger = logging.getLogger(__name__)

STATUS_MESSAGES = {
    CustomOrder.STATUS_IN_PROGRESS: (
        "Obra en Proceso",
        "¡Buenas noticias! He comenzado a trabajar en tu obra personalizada. "
        "Te mantendré informado del progreso.",
    ),
    CustomOrder.STATUS_COMPLETED: (
        "Obra Completada",
        "¡Tu obra personalizada está lista! Contáctame para coordinar la entrega.",
    ),
    CustomOrder.STATUS_CANCELLED: (
        "Solicitud Cancelada",
        "Tu solicitud de obra personalizada ha sido cancelada. Si tienes preguntas, contáctanos.",
    ),
}
DEFAULT_STATUS_MESSAGE = (
    "Actualización de Solicitud",
    "El estado de tu solicitud ha sido actualizado.",
)


def _enabled() -> bool:
    return bool(getattr(settings, "ORDER_EMAILS_ENABLED", False))


def _context(order: CustomOrder) -> dict:
    return {
        "order": order,
        "orientation": order.get_orientation_display(),
        "total": format_price(order.total_price),
        "site_name": settings.SITE_NAME,
    }


def _send(order: CustomOrder, *, subject: str, template: str, context: dict) -> bool:
    try:
        send_mail(
            subject=subject,
            message=render_to_string(template, context),
            from_email=settings.DEFAULT_FROM_EMAIL,
            recipient_list=[order.email],
        )
    except Exception:
        logger.exception(
            "Custom order email failed",
            extra={"custom_order_id": str(order.pk), "template": template},
        )
        return False

    logger.info("Custom order email sent", extra={"custom_order_id": str(order.pk), "template": template})
    return True


def send_custom_order_received(order_id) -> bool:
    if not _enabled():
        return False

    order = CustomOrder.objects.filter(pk=order_id).first()
    if order is None:
        return False

    return _send(
        order,
        subject="Solicitud de Obra Personalizada Recibida",
        template="custom_orders/emails/request_received.txt",
        context=_context(order),
    )


def send_custom_order_status_update(order_id) -> bool:
    if not _enabled():
        return False

    order = CustomOrder.objects.filter(pk=order_id).first()
    if order is None:
        return False

    title, message = STATUS_MESSAGES.get(order.status, DEFAULT_STATUS_MESSAGE)
    context = _context(order)
    context.update(title=title, message=message, status_label=order.get_status_display())

    return _send(
        order,
        subject=f"{title} - Obra Personalizada",
        template="custom_orders/emails/status_update.txt",
        context=context,
    )


def queue_custom_order_received(order: CustomOrder) -> None:
    order_id = order.pk
    transaction.on_commit(lambda: send_custom_order_received(order_id))


def queue_custom_order_status_update(order: CustomOrder) -> None:
    order_id = order.pk
    transaction.on_commit(lambda: send_custom_order_status_update(order_id))

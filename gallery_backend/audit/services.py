# audit/services.py

"""
ADMIN LOG WRITER

Rules:
- log_admin_action() NEVER raises into the caller: a failed audit write is
  logged and the admin operation still succeeds.
- Each helper builds the Spanish "description" shown in the activity feed.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from django.db import transaction

from audit.models import AdminLog

logger = logging.getLogger(__name__)


def log_admin_action(action: str, actor, metadata: Optional[dict[str, Any]] = None) -> Optional[AdminLog]:
    metadata = dict(metadata or {})
    email = (getattr(actor, "email", "") or "").strip()
    admin = actor if getattr(actor, "is_authenticated", False) else None

    try:
        # savepoint: a failed insert must not doom the caller's transaction
        with transaction.atomic():
            entry = AdminLog.objects.create(
                action=action,
                admin=admin,
                admin_email=email,
                metadata=metadata,
            )
    except Exception:
        logger.exception(
            "Admin log write failed",
            extra={"action": action, "admin_email": email},
        )
        return None

    logger.info(
        "Admin action recorded",
        extra={"action": action, "admin_email": email},
    )
    return entry


# ----- Paintings -----
def log_painting_created(actor, painting_id, title: str):
    return log_admin_action(
        AdminLog.ACTION_PAINTING_CREATED,
        actor,
        {"painting_id": str(painting_id), "title": title, "description": f"Creó la pintura '{title}'"},
    )


def log_painting_updated(actor, painting_id, title: str, changes: Optional[dict] = None):
    return log_admin_action(
        AdminLog.ACTION_PAINTING_UPDATED,
        actor,
        {
            "painting_id": str(painting_id),
            "title": title,
            "changes": changes or {},
            "description": f"Actualizó la pintura '{title}'",
        },
    )


def log_painting_deleted(actor, painting_id, title: str):
    return log_admin_action(
        AdminLog.ACTION_PAINTING_DELETED,
        actor,
        {"painting_id": str(painting_id), "title": title, "description": f"Eliminó la pintura '{title}'"},
    )


# ----- Reviews -----
def log_review_approved(actor, review_id, painting_title: str):
    return log_admin_action(
        AdminLog.ACTION_REVIEW_APPROVED,
        actor,
        {
            "review_id": str(review_id),
            "painting_title": painting_title,
            "description": f"Aprobó una reseña de '{painting_title}'",
        },
    )


def log_review_rejected(actor, review_id, painting_title: str):
    return log_admin_action(
        AdminLog.ACTION_REVIEW_REJECTED,
        actor,
        {
            "review_id": str(review_id),
            "painting_title": painting_title,
            "description": f"Rechazó una reseña de '{painting_title}'",
        },
    )


def log_review_deleted(actor, review_id, painting_title: str):
    return log_admin_action(
        AdminLog.ACTION_REVIEW_DELETED,
        actor,
        {
            "review_id": str(review_id),
            "painting_title": painting_title,
            "description": f"Eliminó una reseña de '{painting_title}'",
        },
    )


# ----- Coupons -----
def log_coupon_created(actor, coupon_id, code: str):
    return log_admin_action(
        AdminLog.ACTION_COUPON_CREATED,
        actor,
        {"coupon_id": str(coupon_id), "code": code, "description": f"Creó el cupón '{code}'"},
    )


def log_coupon_updated(actor, coupon_id, code: str):
    return log_admin_action(
        AdminLog.ACTION_COUPON_UPDATED,
        actor,
        {"coupon_id": str(coupon_id), "code": code, "description": f"Actualizó el cupón '{code}'"},
    )


def log_coupon_deleted(actor, coupon_id, code: str):
    return log_admin_action(
        AdminLog.ACTION_COUPON_DELETED,
        actor,
        {"coupon_id": str(coupon_id), "code": code, "description": f"Eliminó el cupón '{code}'"},
    )


# ----- Orders -----
def log_order_status_updated(actor, order_id, order_number: str, old_status: str, new_status: str):
    return log_admin_action(
        AdminLog.ACTION_ORDER_STATUS_UPDATED,
        actor,
        {
            "order_id": str(order_id),
            "order_number": order_number,
            "old_status": old_status,
            "new_status": new_status,
            "description": f"Cambió el estado de la orden {order_number} de '{old_status}' a '{new_status}'",
        },
    )


def log_shipping_status_updated(actor, order_id, order_number: str, old_status: str, new_status: str):
    return log_admin_action(
        AdminLog.ACTION_SHIPPING_STATUS_UPDATED,
        actor,
        {
            "order_id": str(order_id),
            "order_number": order_number,
            "old_status": old_status,
            "new_status": new_status,
            "description": f"Cambió el estado de envío de la orden {order_number} a '{new_status}'",
        },
    )


def log_order_deleted(actor, order_id, order_number: str):
    return log_admin_action(
        AdminLog.ACTION_ORDER_DELETED,
        actor,
        {"order_id": str(order_id), "order_number": order_number, "description": f"Eliminó la orden {order_number}"},
    )


def log_custom_order_status_updated(actor, custom_order_id, customer_name: str, old_status: str, new_status: str):
    return log_admin_action(
        AdminLog.ACTION_CUSTOM_ORDER_STATUS_UPDATED,
        actor,
        {
            "custom_order_id": str(custom_order_id),
            "customer_name": customer_name,
            "old_status": old_status,
            "new_status": new_status,
            "description": f"Cambió el estado del pedido personalizado de {customer_name} a '{new_status}'",
        },
    )


def log_custom_order_deleted(actor, custom_order_id, customer_name: str):
    return log_admin_action(
        AdminLog.ACTION_CUSTOM_ORDER_DELETED,
        actor,
        {
            "custom_order_id": str(custom_order_id),
            "customer_name": customer_name,
            "description": f"Eliminó el pedido personalizado de {customer_name}",
        },
    )


# ----- Blog -----
def log_blog_post_created(actor, post_id, title: str):
    return log_admin_action(
        AdminLog.ACTION_BLOG_POST_CREATED,
        actor,
        {"post_id": str(post_id), "title": title, "description": f"Creó el artículo '{title}'"},
    )


def log_blog_post_published(actor, post_id, title: str):
    return log_admin_action(
        AdminLog.ACTION_BLOG_POST_PUBLISHED,
        actor,
        {"post_id": str(post_id), "title": title, "description": f"Publicó el artículo '{title}'"},
    )


def log_blog_post_updated(actor, post_id, title: str):
    return log_admin_action(
        AdminLog.ACTION_BLOG_POST_UPDATED,
        actor,
        {"post_id": str(post_id), "title": title, "description": f"Actualizó el artículo '{title}'"},
    )


def log_blog_post_deleted(actor, post_id, title: str):
    return log_admin_action(
        AdminLog.ACTION_BLOG_POST_DELETED,
        actor,
        {"post_id": str(post_id), "title": title, "description": f"Eliminó el artículo '{title}'"},
    )


# ----- Settings -----
SETTINGS_ACTIONS = {
    "general": (AdminLog.ACTION_GENERAL_SETTINGS_UPDATED, "Actualizó la configuración general"),
    "home": (AdminLog.ACTION_HOME_SETTINGS_UPDATED, "Actualizó la configuración de inicio"),
    "music": (AdminLog.ACTION_MUSIC_SETTINGS_UPDATED, "Actualizó la configuración de música"),
}


def log_settings_updated(actor, key: str):
    action, description = SETTINGS_ACTIONS[key]
    return log_admin_action(action, actor, {"key": key, "description": description})


# ----- Users -----
def log_user_role_updated(actor, user_id, email: str, role: str):
    verb = "Promovió a administrador a" if role == "admin" else "Revocó permisos de administrador a"
    return log_admin_action(
        AdminLog.ACTION_USER_ROLE_UPDATED,
        actor,
        {"user_id": str(user_id), "email": email, "role": role, "description": f"{verb} {email}"},
    )

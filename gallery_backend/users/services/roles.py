# users/services/roles.py

"""
======================================================
PATH: users/services/roles.py
======================================================
ROLE CHANGES (admin <-> customer)

Rules:
- uid is required
- an admin can never change their own role
- "admin" promotes (is_staff=True); any other value demotes to customer
- superusers keep is_staff when demoted (Django admin access is separate)
- every change is written to the admin activity log
======================================================
"""

from __future__ import annotations

import logging
import uuid

from django.db import transaction

from audit.services import log_user_role_updated
from permissions.roles import ROLE_ADMIN, ROLE_CUSTOMER
from users.models import User

from .exceptions import MissingUserIdError, SelfRoleChangeError, UserNotFoundError

logger = logging.getLogger(__name__)

MSG_PROMOTED = "Usuario promovido a administrador"
MSG_DEMOTED = "Permisos de administrador revocados"


def _parse_uid(uid) -> uuid.UUID:
    try:
        return uuid.UUID(str(uid))
    except (TypeError, ValueError):
        raise UserNotFoundError("Usuario no encontrado")


def _find_user(uid) -> User:
    pk = _parse_uid(uid)
    user = User.objects.select_for_update().filter(pk=pk).first()
    if user is None:
        raise UserNotFoundError("Usuario no encontrado")
    return user


def apply_role(user: User, role: str) -> User:
    new_role = ROLE_ADMIN if role == ROLE_ADMIN else ROLE_CUSTOMER
    user.role = new_role
    if new_role == ROLE_ADMIN:
        user.is_staff = True
    elif not user.is_superuser:
        user.is_staff = False
    user.save(update_fields=["role", "is_staff", "updated_at"])
    return user


@transaction.atomic
def set_user_role(*, actor, uid, role: str) -> tuple[User, str]:
    """
    Returns (user, confirmation message).
    """
    uid = str(uid or "").strip()
    if not uid:
        raise MissingUserIdError("Se requiere el UID del usuario")

    # compared as UUIDs so case or dashes in the posted id cannot dodge the guard
    pk = _parse_uid(uid)
    if actor is not None and getattr(actor, "pk", None) == pk:
        raise SelfRoleChangeError("No puedes modificar tu propio rol")

    user = _find_user(pk)
    apply_role(user, role)

    log_user_role_updated(actor, user.pk, user.email, user.role)
    logger.info(
        "User role changed",
        extra={"user_id": str(user.pk), "role": user.role, "actor": getattr(actor, "email", "")},
    )

    message = MSG_PROMOTED if user.role == ROLE_ADMIN else MSG_DEMOTED
    return user, message

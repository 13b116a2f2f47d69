# users/services/verification.py

"""
EMAIL VERIFICATION (signed tokens, no extra table)

- Token = django.core.signing payload {uid, email}, salted, valid for 3 days.
- Changing the email invalidates outstanding tokens (email is part of payload).
- Sending happens after commit; delivery failures are logged, never raised.
"""

from __future__ import annotations

import logging
from datetime import timedelta

from django.conf import settings
from django.core import signing
from django.core.mail import send_mail
from django.db import transaction
from django.template.loader import render_to_string

from users.models import User

from .exceptions import AlreadyVerifiedError, InvalidVerificationTokenError

logger = logging.getLogger(__name__)

VERIFY_SALT = "users.verify-email"
VERIFY_MAX_AGE = timedelta(days=3)


def make_verification_token(user: User) -> str:
    return signing.dumps({"uid": str(user.pk), "email": user.email}, salt=VERIFY_SALT)


def verification_link(token: str) -> str:
    return f"{settings.FRONTEND_BASE_URL}/verificar-email?token={token}"


def send_verification_email(user: User) -> None:
    context = {
        "user": user,
        "site_name": settings.SITE_NAME,
        "link": verification_link(make_verification_token(user)),
    }
    try:
        send_mail(
            subject=f"Verifica tu correo - {settings.SITE_NAME}",
            message=render_to_string("users/emails/verify_email.txt", context),
            from_email=settings.DEFAULT_FROM_EMAIL,
            recipient_list=[user.email],
        )
    except Exception:
        logger.exception("Verification email failed", extra={"user_id": str(user.pk)})


def queue_verification_email(user: User) -> None:
    transaction.on_commit(lambda: send_verification_email(user))


def verify_email_token(token: str) -> User:
    try:
        payload = signing.loads(token or "", salt=VERIFY_SALT, max_age=VERIFY_MAX_AGE)
    except signing.SignatureExpired:
        raise InvalidVerificationTokenError("El enlace de verificación ha expirado")
    except signing.BadSignature:
        raise InvalidVerificationTokenError("Enlace de verificación no válido")

    user = User.objects.filter(pk=payload.get("uid"), email__iexact=payload.get("email") or "").first()
    if user is None:
        raise InvalidVerificationTokenError("Enlace de verificación no válido")

    if not user.email_verified:
        user.email_verified = True
        user.save(update_fields=["email_verified", "updated_at"])
        logger.info("Email verified", extra={"user_id": str(user.pk)})

    return user


def resend_verification(user: User) -> None:
    if user.email_verified:
        raise AlreadyVerifiedError("El correo ya está verificado")
    queue_verification_email(user)

# orders/services/access.py

"""
GUEST ORDER ACCESS

- Guests reach their order with (order id, public_access_token).
- 400 no token / 404 unknown order / 401 mismatch; compare is constant time.
- Transfer proofs can be uploaded for transfer orders only.
"""

from __future__ import annotations

import logging
import secrets

from django.core.exceptions import ValidationError as DjangoValidationError
from django.utils import timezone

from common.validators import validate_image_or_pdf, validate_upload_size
from orders.models import Order

from .exceptions import InvalidTokenError, OrderNotFoundError, TokenRequiredError, TransferProofError

logger = logging.getLogger(__name__)


def get_order_for_token(order_id, token) -> Order:
    token = (token or "").strip()
    if not token:
        raise TokenRequiredError("Token requerido")

    order = Order.objects.prefetch_related("items").filter(pk=order_id).first()
    if order is None:
        raise OrderNotFoundError("Orden no encontrada")

    if not secrets.compare_digest(str(order.public_access_token), token):
        logger.warning("Order token mismatch", extra={"order_id": str(order.pk)})
        raise InvalidTokenError("No autorizado")

    return order


def attach_transfer_proof(order: Order, file) -> Order:
    if not order.is_transfer:
        raise TransferProofError("Esta orden no se paga por transferencia")

    if file is None:
        raise TransferProofError("Debes adjuntar el comprobante")

    try:
        validate_upload_size(file)
        validate_image_or_pdf(file)
    except DjangoValidationError as exc:
        raise TransferProofError(" ".join(exc.messages))

    order.transfer_proof = file
    order.transfer_proof_uploaded_at = timezone.now()
    order.save(update_fields=["transfer_proof", "transfer_proof_uploaded_at", "updated_at"])

    logger.info("Transfer proof uploaded", extra={"order_id": str(order.pk)})
    return order

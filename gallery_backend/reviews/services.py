# reviews/services.py

"""
REVIEW MODERATION

- submit_review: any signed-in customer; lands unapproved.
- approve / reject / delete: admin only (enforced by the views), each logged.
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal

from django.db import transaction
from django.db.models import Avg, Count

from audit.services import log_review_approved, log_review_deleted, log_review_rejected

from .models import Review

logger = logging.getLogger(__name__)

MSG_PENDING_APPROVAL = "¡Gracias por tu reseña! Será visible una vez aprobada por el administrador."


def rating_summary(queryset) -> dict:
    """{count, average_rating} over approved reviews; average to 1 decimal."""
    agg = queryset.filter(approved=True).aggregate(count=Count("id"), avg=Avg("rating"))
    avg = agg.get("avg")
    return {
        "count": int(agg.get("count") or 0),
        "average_rating": (
            float(Decimal(str(avg)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)) if avg is not None else 0.0
        ),
    }


def submit_review(*, user, painting, rating: int, comment: str) -> Review:
    review = Review.objects.create(
        painting=painting,
        user=user,
        user_name=user.display_name or "Usuario",
        user_email=user.email,
        rating=rating,
        comment=comment.strip(),
    )
    logger.info(
        "Review submitted",
        extra={"review_id": str(review.pk), "painting_id": str(painting.pk), "rating": rating},
    )
    return review


@transaction.atomic
def set_review_approval(*, actor, review: Review, approved: bool) -> Review:
    if review.approved != approved:
        review.approved = approved
        review.save(update_fields=["approved"])

    if approved:
        log_review_approved(actor, review.pk, review.painting.title)
    else:
        log_review_rejected(actor, review.pk, review.painting.title)
    return review


@transaction.atomic
def delete_review(*, actor, review: Review) -> None:
    review_id, title = review.pk, review.painting.title
    review.delete()
    log_review_deleted(actor, review_id, title)

# common/identifiers.py

"""
IDENTIFIERS

- Order numbers:   ORD-YYYYMMDD-NNN (human friendly, NOT unique by itself)
- Access tokens:   unguessable secret for public order lookups
- Slugs:           accent-free, dash separated
"""

from __future__ import annotations

import re
import secrets
import unicodedata
import uuid

from django.utils import timezone


def generate_order_number(now=None) -> str:
    """
    ORD-<local date>-<3 random digits>.

    Only 1000 values per day: callers that persist it must check uniqueness.
    """
    now = now or timezone.localtime()
    suffix = f"{secrets.randbelow(1000):03d}"
    return f"ORD-{now:%Y%m%d}-{suffix}"


def generate_transaction_id(now=None) -> str:
    now = now or timezone.now()
    return f"TXN-{int(now.timestamp() * 1000)}"


def generate_access_token() -> str:
    return str(uuid.uuid4())


def generate_slug(text: str) -> str:
    normalized = unicodedata.normalize("NFD", (text or "").lower())
    stripped = "".join(ch for ch in normalized if not unicodedata.combining(ch))
    slug = re.sub(r"[^a-z0-9]+", "-", stripped)
    return slug.strip("-")


def unique_slug(model_cls, text: str, *, exclude_pk=None, field: str = "slug", fallback: str = "item") -> str:
    """
    generate_slug(text), suffixed with -2, -3, ... until no other row uses it.
    """
    base = generate_slug(text) or fallback
    candidate = base
    i = 1

    qs = model_cls.objects.all()
    if exclude_pk is not None:
        qs = qs.exclude(pk=exclude_pk)

    while qs.filter(**{field: candidate}).exists():
        i += 1
        candidate = f"{base}-{i}"

    return candidate

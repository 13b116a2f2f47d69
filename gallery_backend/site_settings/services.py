# site_settings/services.py

from __future__ import annotations

import logging

from django.db import transaction

from audit.services import log_settings_updated

from .models import SiteSetting

logger = logging.getLogger(__name__)


@transaction.atomic
def save_settings(*, actor, key: str, data: dict) -> SiteSetting:
    """Replaces the stored payload for `key` and logs the change."""
    row, _ = SiteSetting.objects.select_for_update().get_or_create(key=key)
    row.data = dict(data or {})
    row.updated_by = actor
    row.save()

    log_settings_updated(actor, key)
    logger.info("Site settings updated", extra={"key": key, "fields": sorted(row.data)})
    return row

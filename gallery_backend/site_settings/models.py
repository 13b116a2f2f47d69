# site_settings/models.py

import copy

from django.conf import settings
from django.db import models

from .defaults import GENERAL_DEFAULTS, HOME_DEFAULTS, MUSIC_DEFAULTS


class SiteSetting(models.Model):
    KEY_GENERAL = "general"
    KEY_HOME = "home"
    KEY_MUSIC = "music"

    KEY_CHOICES = [
        (KEY_GENERAL, "General"),
        (KEY_HOME, "Home"),
        (KEY_MUSIC, "Music"),
    ]

    DEFAULTS = {
        KEY_GENERAL: GENERAL_DEFAULTS,
        KEY_HOME: HOME_DEFAULTS,
        KEY_MUSIC: MUSIC_DEFAULTS,
    }

    key = models.CharField(max_length=20, choices=KEY_CHOICES, primary_key=True)
    data = models.JSONField(default=dict, blank=True)

    updated_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+",
    )
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["key"]

    def __str__(self):
        return self.key

    @classmethod
    def resolved(cls, key: str) -> dict:
        """Defaults with the stored data merged over them."""
        merged = copy.deepcopy(cls.DEFAULTS.get(key, {}))
        row = cls.objects.filter(key=key).first()
        if row is not None:
            merged.update(row.data or {})
        return merged

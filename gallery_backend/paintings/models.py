# paintings/models.py

"""
PAINTING (catalog item)

Stock model:
- stock = NULL  -> not tracked (a one-off original: "available" decides)
- stock >= 0    -> tracked; checkout decrements and never oversells
- in_stock      -> available AND (untracked OR stock > 0)

Images:
- images is an ordered list of URLs; image_url is the cover (images[0])
"""

import uuid
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models

from common.identifiers import unique_slug


class Painting(models.Model):
    ORIENTATION_VERTICAL = "vertical"
    ORIENTATION_HORIZONTAL = "horizontal"

    ORIENTATION_CHOICES = [
        (ORIENTATION_VERTICAL, "Vertical"),
        (ORIENTATION_HORIZONTAL, "Horizontal"),
    ]

    CATEGORY_ABSTRACT = "abstracto"
    CATEGORY_LANDSCAPE = "paisaje"
    CATEGORY_PORTRAIT = "retrato"
    CATEGORY_STILL_LIFE = "naturaleza-muerta"
    CATEGORY_PETS = "mascotas"
    CATEGORY_FIGURATIVE = "figurativo"
    CATEGORY_OTHER = "otro"

    CATEGORY_CHOICES = [
        (CATEGORY_ABSTRACT, "Abstracto"),
        (CATEGORY_LANDSCAPE, "Paisaje"),
        (CATEGORY_PORTRAIT, "Retrato"),
        (CATEGORY_STILL_LIFE, "Naturaleza muerta"),
        (CATEGORY_PETS, "Mascotas"),
        (CATEGORY_FIGURATIVE, "Figurativo"),
        (CATEGORY_OTHER, "Otro"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    title = models.CharField(max_length=200)
    slug = models.SlugField(max_length=220, unique=True, blank=True)
    description = models.TextField(blank=True, default="")

    image_url = models.CharField(max_length=500, blank=True, default="")
    images = models.JSONField(default=list, blank=True)

    price = models.DecimalField(max_digits=12, decimal_places=2)

    width_cm = models.DecimalField(max_digits=7, decimal_places=2)
    height_cm = models.DecimalField(max_digits=7, decimal_places=2)
    orientation = models.CharField(
        max_length=16, choices=ORIENTATION_CHOICES, default=ORIENTATION_VERTICAL
    )

    category = models.CharField(max_length=32, choices=CATEGORY_CHOICES, blank=True, default="")

    available = models.BooleanField(default=True)
    stock = models.PositiveIntegerField(null=True, blank=True)
    featured = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["available", "created_at"], name="paintings_p_availab_4d1c2e_idx"),
            models.Index(fields=["category"], name="paintings_p_categor_8a7b3f_idx"),
            models.Index(fields=["price"], name="paintings_p_price_2f9e61_idx"),
        ]

    def __str__(self):
        return self.title

    def clean(self):
        if self.price is None or Decimal(self.price) <= 0:
            raise ValidationError({"price": "El precio debe ser mayor a cero"})

        for field in ("width_cm", "height_cm"):
            value = getattr(self, field)
            if value is None or Decimal(value) <= 0:
                raise ValidationError({field: "Las dimensiones deben ser mayores a cero"})

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = unique_slug(Painting, self.title, exclude_pk=self.pk, fallback="obra")

        images = [u for u in (self.images or []) if u]
        if not images and self.image_url:
            images = [self.image_url]
        if images and not self.image_url:
            self.image_url = images[0]
        self.images = images

        self.full_clean()
        super().save(*args, **kwargs)

    @property
    def stock_tracked(self) -> bool:
        return self.stock is not None

    @property
    def in_stock(self) -> bool:
        if not self.available:
            return False
        return self.stock is None or self.stock > 0

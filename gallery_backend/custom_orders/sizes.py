# custom_orders/sizes.py

"""
CANVAS SIZES for commissioned work

price = BASE_CUSTOM_ORDER_PRICE x multiplier
Sizes are listed portrait (width < height); horizontal swaps the sides.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from django.conf import settings

from common.money import money

ORIENTATION_VERTICAL = "vertical"
ORIENTATION_HORIZONTAL = "horizontal"

ORIENTATION_CHOICES = [
    (ORIENTATION_VERTICAL, "Vertical"),
    (ORIENTATION_HORIZONTAL, "Horizontal"),
]


@dataclass(frozen=True)
class CanvasSize:
    name: str
    width: int
    height: int
    price_multiplier: Decimal

    def dimensions(self, orientation: str = ORIENTATION_VERTICAL) -> tuple[int, int]:
        if orientation == ORIENTATION_HORIZONTAL:
            return self.height, self.width
        return self.width, self.height

    def price(self) -> Decimal:
        return money(Decimal(settings.BASE_CUSTOM_ORDER_PRICE) * self.price_multiplier)


CANVAS_SIZES = [
    CanvasSize("20x30 cm", 20, 30, Decimal("1")),
    CanvasSize("30x40 cm", 30, 40, Decimal("1.5")),
    CanvasSize("40x50 cm", 40, 50, Decimal("2")),
    CanvasSize("50x70 cm", 50, 70, Decimal("3")),
    CanvasSize("70x100 cm", 70, 100, Decimal("4.5")),
]


def get_size(name: str) -> Optional[CanvasSize]:
    """Accepts "30x40 cm" or "30x40"."""
    key = (name or "").strip().lower().replace(" ", "").removesuffix("cm")
    for size in CANVAS_SIZES:
        if size.name.replace(" ", "").removesuffix("cm") == key:
            return size
    return None

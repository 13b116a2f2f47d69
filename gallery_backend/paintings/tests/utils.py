from decimal import Decimal

from paintings.models import Painting


def make_painting(title="Atardecer en Valparaíso", price="150000", **extra) -> Painting:
    fields = {
        "title": title,
        "price": Decimal(price),
        "width_cm": Decimal("50"),
        "height_cm": Decimal("70"),
        "image_url": "https://cdn.example.com/a.jpg",
    }
    fields.update(extra)
    return Painting.objects.create(**fields)

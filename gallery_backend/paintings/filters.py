# paintings/filters.py

"""
CATALOG FILTERS (django-filter)

Query params:
- category                 exact category code ("all" = no filter)
- min_price / max_price    inclusive bounds; a max below the min is ignored
- search                   title / description contains (case-insensitive)
- sort                     recent | price-asc | price-desc | title-asc | title-desc
"""

from __future__ import annotations

import django_filters
from django.db.models import Q

from .models import Painting

SORT_FIELDS = {
    "recent": ("-created_at",),
    "price-asc": ("price", "-created_at"),
    "price-desc": ("-price", "-created_at"),
    "title-asc": ("title",),
    "title-desc": ("-title",),
}


class PaintingFilter(django_filters.FilterSet):
    category = django_filters.CharFilter(method="filter_category")
    min_price = django_filters.NumberFilter(field_name="price", lookup_expr="gte")
    max_price = django_filters.NumberFilter(method="filter_max_price")
    search = django_filters.CharFilter(method="filter_search")
    sort = django_filters.ChoiceFilter(
        choices=[(k, k) for k in SORT_FIELDS],
        method="filter_sort",
        empty_label=None,
    )
    featured = django_filters.BooleanFilter(field_name="featured")

    class Meta:
        model = Painting
        fields = ["category", "min_price", "max_price", "search", "sort", "featured"]

    def filter_category(self, queryset, name, value):
        if not value or value == "all":
            return queryset
        return queryset.filter(category=value)

    def filter_max_price(self, queryset, name, value):
        min_price = self.form.cleaned_data.get("min_price")
        if min_price is not None and value < min_price:
            return queryset
        return queryset.filter(price__lte=value)

    def filter_search(self, queryset, name, value):
        value = (value or "").strip()
        if not value:
            return queryset
        return queryset.filter(Q(title__icontains=value) | Q(description__icontains=value))

    def filter_sort(self, queryset, name, value):
        return queryset.order_by(*SORT_FIELDS.get(value, SORT_FIELDS["recent"]))

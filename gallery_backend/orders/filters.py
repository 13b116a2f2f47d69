# orders/filters.py

"""
ADMIN ORDER FILTERS (django-filter)

Query params:
- status / shipping_status / payment_method / payment_status   exact
- search      order number, shipping email or name (case-insensitive)
- date_from / date_to   created_at date bounds (inclusive)
"""

from __future__ import annotations

import django_filters
from django.db.models import Q

from .models import Order


class OrderFilter(django_filters.FilterSet):
    status = django_filters.ChoiceFilter(choices=Order.STATUS_CHOICES)
    shipping_status = django_filters.ChoiceFilter(choices=Order.SHIPPING_STATUS_CHOICES)
    payment_method = django_filters.ChoiceFilter(choices=Order.PAYMENT_METHOD_CHOICES)
    payment_status = django_filters.ChoiceFilter(choices=Order.PAYMENT_STATUS_CHOICES)
    search = django_filters.CharFilter(method="filter_search")
    date_from = django_filters.DateFilter(field_name="created_at", lookup_expr="date__gte")
    date_to = django_filters.DateFilter(field_name="created_at", lookup_expr="date__lte")

    class Meta:
        model = Order
        fields = ["status", "shipping_status", "payment_method", "payment_status", "search", "date_from", "date_to"]

    def filter_search(self, queryset, name, value):
        value = (value or "").strip()
        if not value:
            return queryset
        return queryset.filter(
            Q(order_number__icontains=value)
            | Q(shipping_email__icontains=value)
            | Q(shipping_full_name__icontains=value)
        )

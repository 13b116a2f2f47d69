# analytics/services.py

"""
======================================================
PATH: analytics/services.py
======================================================
ADMIN DASHBOARD FIGURES (read-only)

Revenue rules:
- every order except cancelled ones counts toward revenue and order totals
- completed = delivered
- months are calendar months in store local time, last 6, zero-filled
======================================================
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from django.db.models import Count, Sum
from django.utils import timezone

from common.formatting import MONTHS_SHORT, STORE_TZ
from common.money import ZERO, money
from custom_orders.models import CustomOrder
from orders.models import Order, OrderItem
from reviews.models import Review
from reviews.services import rating_summary
from wishlist.models import WishlistItem

TOP_LIMIT = 5
MONTHS_BACK = 6


def _month_keys(now: datetime, count: int) -> list[tuple[int, int]]:
    year, month = now.year, now.month
    keys = []
    for _ in range(count):
        keys.append((year, month))
        month -= 1
        if month == 0:
            year, month = year - 1, 12
    return list(reversed(keys))


def revenue_by_month(orders, now=None, months: int = MONTHS_BACK) -> list[dict]:
    now = (now or timezone.now()).astimezone(STORE_TZ)
    keys = _month_keys(now, months)
    first_year, first_month = keys[0]
    start = datetime(first_year, first_month, 1, tzinfo=STORE_TZ)

    buckets = {key: ZERO for key in keys}
    for created_at, total in orders.filter(created_at__gte=start).values_list("created_at", "total"):
        local = created_at.astimezone(STORE_TZ)
        key = (local.year, local.month)
        if key in buckets:
            buckets[key] += money(total)

    return [
        {
            "month": f"{year}-{month:02d}",
            "label": f"{MONTHS_SHORT[month - 1]} {year}",
            "revenue": str(money(buckets[(year, month)])),
        }
        for year, month in keys
    ]


def top_paintings(limit: int = TOP_LIMIT) -> list[dict]:
    rows = (
        OrderItem.objects.exclude(order__status=Order.STATUS_CANCELLED)
        .values("painting_id", "title")
        .annotate(revenue=Sum("total_price"), units=Sum("quantity"))
        .order_by("-revenue", "title")[:limit]
    )
    return [
        {
            "painting_id": str(r["painting_id"]) if r["painting_id"] else None,
            "title": r["title"],
            "units_sold": int(r["units"] or 0),
            "revenue": str(money(r["revenue"])),
        }
        for r in rows
    ]


def wishlist_top(limit: int = TOP_LIMIT) -> list[dict]:
    rows = (
        WishlistItem.objects.values("painting_id", "painting__title")
        .annotate(count=Count("id"))
        .order_by("-count", "painting__title")[:limit]
    )
    return [
        {"painting_id": str(r["painting_id"]), "title": r["painting__title"], "count": int(r["count"])}
        for r in rows
    ]


def build_overview(now=None) -> dict:
    counted = Order.objects.exclude(status=Order.STATUS_CANCELLED)

    agg = counted.aggregate(revenue=Sum("total"), orders=Count("id"))
    total_revenue = money(agg.get("revenue") or ZERO)
    total_orders = int(agg.get("orders") or 0)
    average = money(total_revenue / Decimal(total_orders)) if total_orders else ZERO

    reviews = rating_summary(Review.objects.all())

    return {
        "total_revenue": str(total_revenue),
        "total_orders": total_orders,
        "average_order_value": str(average),
        "pending_orders": Order.objects.filter(status=Order.STATUS_PENDING).count(),
        "completed_orders": Order.objects.filter(status=Order.STATUS_DELIVERED).count(),
        "top_paintings": top_paintings(),
        "revenue_by_month": revenue_by_month(counted, now=now),
        "total_reviews": reviews["count"],
        "pending_reviews": Review.objects.filter(approved=False).count(),
        "average_rating": reviews["average_rating"],
        "custom_orders_pending": CustomOrder.objects.filter(status=CustomOrder.STATUS_PENDING).count(),
        "wishlist_top": wishlist_top(),
    }

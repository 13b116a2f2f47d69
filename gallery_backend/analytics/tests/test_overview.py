from datetime import datetime
from decimal import Decimal

from django.test import TestCase, override_settings
from rest_framework.test import APIClient

from analytics.services import build_overview, revenue_by_month
from common.formatting import STORE_TZ
from orders.models import Order
from orders.tests.utils import make_order
from paintings.tests.utils import make_painting
from users.models import User
from wishlist.models import WishlistItem


@override_settings(SHIPPING_COST=0)
class OverviewTests(TestCase):
    def setUp(self):
        self.a = make_painting(title="Uno", price="100000")
        self.b = make_painting(title="Dos", price="40000")

        self.delivered = make_order(self.a, self.b)
        self.pending = make_order(self.b)
        self.cancelled = make_order(self.a)

        Order.objects.filter(pk=self.delivered.pk).update(status=Order.STATUS_DELIVERED)
        Order.objects.filter(pk=self.cancelled.pk).update(status=Order.STATUS_CANCELLED)

    def test_figures_exclude_cancelled(self):
        data = build_overview()

        self.assertEqual(data["total_revenue"], "180000.00")
        self.assertEqual(data["total_orders"], 2)
        self.assertEqual(data["average_order_value"], "90000.00")
        self.assertEqual(data["pending_orders"], 1)
        self.assertEqual(data["completed_orders"], 1)

        top = data["top_paintings"]
        self.assertEqual(top[0]["title"], "Uno")
        self.assertEqual(top[0]["units_sold"], 1)
        self.assertEqual(top[1], {"painting_id": str(self.b.id), "title": "Dos", "units_sold": 2, "revenue": "80000.00"})

    def test_wishlist_top(self):
        for i in range(2):
            user = User.objects.create_user(email=f"u{i}@example.com", password="pass12345")
            WishlistItem.objects.create(user=user, painting=self.b)

        self.assertEqual(build_overview()["wishlist_top"][0]["count"], 2)

    def test_revenue_by_month_zero_fills(self):
        Order.objects.filter(pk=self.pending.pk).update(created_at=datetime(2024, 9, 15, 12, tzinfo=STORE_TZ))
        Order.objects.filter(pk=self.delivered.pk).update(created_at=datetime(2024, 3, 1, tzinfo=STORE_TZ))

        months = revenue_by_month(
            Order.objects.exclude(status=Order.STATUS_CANCELLED),
            now=datetime(2024, 11, 20, tzinfo=STORE_TZ),
        )

        self.assertEqual([m["month"] for m in months], ["2024-06", "2024-07", "2024-08", "2024-09", "2024-10", "2024-11"])
        self.assertEqual(months[3]["revenue"], "40000.00")
        self.assertEqual(months[0]["label"], "jun 2024")
        self.assertEqual(sum(Decimal(m["revenue"]) for m in months), Decimal("40000.00"))

    def test_endpoint_is_admin_only(self):
        client = APIClient()
        client.force_authenticate(User.objects.create_user(email="c@example.com", password="pass12345"))
        self.assertEqual(client.get("/api/analytics/overview/").status_code, 403)

        client.force_authenticate(User.objects.create_user(email="a@example.com", password="pass12345", role="admin"))
        resp = client.get("/api/analytics/overview/")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(len(resp.data["revenue_by_month"]), 6)

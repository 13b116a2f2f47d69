from decimal import Decimal

from django.core import mail
from django.test import TestCase, override_settings
from rest_framework.test import APIClient

from cart.services.cart_service import add_to_cart, get_cart
from coupons.tests.utils import make_coupon
from orders.models import Order
from orders.services.checkout import place_order
from orders.services.exceptions import (
    CouponError,
    EmptyOrderError,
    InsufficientStockError,
    PaintingUnavailableError,
)
from orders.tests.utils import SHIPPING, make_order
from paintings.tests.utils import make_painting
from users.models import User


@override_settings(SHIPPING_COST=5000, ORDER_EMAILS_ENABLED=True)
class PlaceOrderTests(TestCase):
    def setUp(self):
        self.a = make_painting(title="Uno", price="100000")
        self.b = make_painting(title="Dos", price="50000", stock=2)

    def test_totals_snapshot_and_identifiers(self):
        order = place_order(
            user=None,
            lines=[
                {"painting_id": str(self.a.id), "quantity": 1},
                {"painting_id": str(self.b.id), "quantity": 2},
            ],
            shipping=SHIPPING,
            payment_method=Order.PAYMENT_WEBPAY,
        )

        self.assertEqual(order.subtotal, Decimal("200000.00"))
        self.assertEqual(order.shipping_cost, Decimal("5000.00"))
        self.assertEqual(order.discount, Decimal("0.00"))
        self.assertEqual(order.total, Decimal("205000.00"))
        self.assertRegex(order.order_number, r"^ORD-\d{8}-\d{3}$")
        self.assertTrue(order.transaction_id.startswith("TXN-"))
        self.assertTrue(order.public_access_token)
        self.assertEqual(order.items.count(), 2)

        line = order.items.get(painting=self.b)
        self.assertEqual(line.title, "Dos")
        self.assertEqual(line.total_price, Decimal("100000.00"))

        self.b.refresh_from_db()
        self.assertEqual(self.b.stock, 0)

    def test_duplicate_lines_are_merged(self):
        order = place_order(
            user=None,
            lines=[
                {"painting_id": str(self.b.id), "quantity": 1},
                {"painting_id": str(self.b.id), "quantity": 1},
            ],
            shipping=SHIPPING,
            payment_method=Order.PAYMENT_CASH,
        )
        self.assertEqual(order.items.get().quantity, 2)

    def test_never_oversells_tracked_stock(self):
        with self.assertRaises(InsufficientStockError) as ctx:
            place_order(
                user=None,
                lines=[{"painting_id": str(self.b.id), "quantity": 3}],
                shipping=SHIPPING,
                payment_method=Order.PAYMENT_CASH,
            )

        self.assertIn("No hay stock suficiente", str(ctx.exception))
        self.b.refresh_from_db()
        self.assertEqual(self.b.stock, 2)
        self.assertFalse(Order.objects.exists())

    def test_unavailable_painting_rolls_back_everything(self):
        hidden = make_painting(title="Oculta", available=False)

        with self.assertRaises(PaintingUnavailableError):
            make_order(self.b, hidden)

        self.b.refresh_from_db()
        self.assertEqual(self.b.stock, 2)
        self.assertFalse(Order.objects.exists())

    def test_empty_order_rejected(self):
        with self.assertRaises(EmptyOrderError):
            place_order(user=None, lines=[], shipping=SHIPPING, payment_method=Order.PAYMENT_CASH)

    def test_coupon_redeemed_once(self):
        coupon = make_coupon(code="OTONO20", discount_value=Decimal("20"), usage_limit=1)

        order = make_order(self.a, coupon_code="otono20")
        self.assertEqual(order.discount, Decimal("20000.00"))
        self.assertEqual(order.total, Decimal("85000.00"))
        self.assertEqual(order.coupon_code, "OTONO20")

        coupon.refresh_from_db()
        self.assertEqual(coupon.usage_count, 1)

        with self.assertRaises(CouponError) as ctx:
            make_order(self.a, coupon_code="OTONO20")
        self.assertEqual(ctx.exception.code, "COUPON_USAGE_LIMIT")

    def test_authenticated_checkout_uses_and_clears_cart(self):
        user = User.objects.create_user(email="buyer@example.com", password="pass12345")
        add_to_cart(user=user, painting_id=self.a.id)

        order = place_order(user=user, lines=None, shipping=SHIPPING, payment_method=Order.PAYMENT_CASH)

        self.assertEqual(order.user, user)
        self.assertEqual(order.items.get().painting, self.a)
        self.assertTrue(get_cart(user).is_empty)

    def test_transfer_confirmation_includes_bank_details(self):
        with self.captureOnCommitCallbacks(execute=True):
            order = make_order(self.a, payment_method=Order.PAYMENT_TRANSFER)

        self.assertEqual(len(mail.outbox), 1)
        self.assertEqual(mail.outbox[0].to, ["camila@example.com"])
        self.assertIn(order.order_number, mail.outbox[0].subject)
        self.assertIn("transferencia", mail.outbox[0].body)
        self.assertIn(str(order.public_access_token), mail.outbox[0].body)

    @override_settings(ORDER_EMAILS_ENABLED=False)
    def test_emails_can_be_disabled(self):
        with self.captureOnCommitCallbacks(execute=True):
            make_order(self.a)
        self.assertEqual(len(mail.outbox), 0)


@override_settings(SHIPPING_COST=5000)
class CheckoutApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.painting = make_painting(title="Marina", price="80000", stock=1)

    def _payload(self, **extra):
        payload = {
            "items": [{"painting_id": str(self.painting.id), "quantity": 1}],
            "shipping": dict(SHIPPING),
            "payment_method": "transfer",
        }
        payload.update(extra)
        return payload

    def test_guest_checkout_returns_access_details(self):
        resp = self.client.post("/api/orders/checkout/", self._payload(), format="json")

        self.assertEqual(resp.status_code, 201)
        order = Order.objects.get(pk=resp.data["order_id"])
        self.assertEqual(resp.data["order_number"], order.order_number)
        self.assertEqual(resp.data["access_token"], order.public_access_token)
        self.assertEqual(
            resp.data["confirmation_path"],
            f"/order-confirmation/{order.id}?token={order.public_access_token}",
        )
        self.assertEqual(resp.data["order"]["total"], "85000.00")
        self.assertNotIn("public_access_token", resp.data["order"])

    def test_sold_out_returns_conflict(self):
        self.client.post("/api/orders/checkout/", self._payload(), format="json")
        resp = self.client.post("/api/orders/checkout/", self._payload(), format="json")

        self.assertEqual(resp.status_code, 409)
        self.assertEqual(resp.data["error"]["code"], "INSUFFICIENT_STOCK")

    def test_invalid_shipping_rejected(self):
        shipping = dict(SHIPPING, phone="123", full_name="Al")
        resp = self.client.post("/api/orders/checkout/", self._payload(shipping=shipping), format="json")

        self.assertEqual(resp.status_code, 400)
        self.assertIn("phone", resp.data["shipping"])
        self.assertIn("full_name", resp.data["shipping"])

    def test_bad_coupon_returns_code(self):
        resp = self.client.post("/api/orders/checkout/", self._payload(coupon_code="NOPE"), format="json")

        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.data["error"]["code"], "COUPON_NOT_FOUND")
        self.painting.refresh_from_db()
        self.assertEqual(self.painting.stock, 1)

    def test_guest_without_items_is_empty(self):
        resp = self.client.post("/api/orders/checkout/", self._payload(items=[]), format="json")

        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.data["error"]["code"], "EMPTY_ORDER")

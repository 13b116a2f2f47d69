from django.core import mail
from django.test import TestCase, override_settings
from rest_framework.test import APIClient

from audit.models import AdminLog
from orders.models import Order
from orders.services.exceptions import InvalidStatusError
from orders.services.fulfilment import update_order_status
from orders.tests.utils import make_order
from paintings.tests.utils import make_painting
from permissions.roles import ROLE_ADMIN
from users.models import User


@override_settings(ORDER_EMAILS_ENABLED=True)
class AdminOrderTests(TestCase):
    def setUp(self):
        self.admin = User.objects.create_user(email="admin@example.com", password="pass12345", role=ROLE_ADMIN)
        self.client = APIClient()
        self.client.force_authenticate(self.admin)
        self.order = make_order(make_painting())
        self.base = f"/api/admin/orders/{self.order.id}/"

    def test_customers_are_forbidden(self):
        customer = User.objects.create_user(email="c@example.com", password="pass12345")
        self.client.force_authenticate(customer)
        self.assertEqual(self.client.get("/api/admin/orders/").status_code, 403)

    def test_list_filters_and_search(self):
        other = make_order(make_painting(title="Otra"), payment_method=Order.PAYMENT_CASH)

        resp = self.client.get("/api/admin/orders/", {"payment_method": "cash"})
        self.assertEqual([o["id"] for o in resp.data["results"]], [str(other.id)])

        resp = self.client.get("/api/admin/orders/", {"search": self.order.order_number})
        self.assertIn(str(self.order.id), [o["id"] for o in resp.data["results"]])

    def test_status_change_emails_and_logs(self):
        with self.captureOnCommitCallbacks(execute=True):
            resp = self.client.post(f"{self.base}status/", {"status": "shipped"}, format="json")

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.data["status"], "shipped")
        self.assertEqual(len(mail.outbox), 1)
        self.assertIn("Enviada", mail.outbox[0].body)

        log = AdminLog.objects.get(action=AdminLog.ACTION_ORDER_STATUS_UPDATED)
        self.assertEqual(log.metadata["old_status"], "pending")
        self.assertEqual(log.metadata["new_status"], "shipped")

    def test_same_status_is_a_no_op(self):
        with self.captureOnCommitCallbacks(execute=True):
            self.client.post(f"{self.base}status/", {"status": "pending"}, format="json")

        self.assertEqual(len(mail.outbox), 0)
        self.assertFalse(AdminLog.objects.exists())

    def test_invalid_status_rejected(self):
        resp = self.client.post(f"{self.base}status/", {"status": "lost"}, format="json")
        self.assertEqual(resp.status_code, 400)

    def test_service_rejects_unknown_status(self):
        with self.assertRaises(InvalidStatusError) as ctx:
            update_order_status(actor=self.admin, order=self.order, status="lost")
        self.assertEqual(ctx.exception.code, "INVALID_STATUS")

        self.order.refresh_from_db()
        self.assertEqual(self.order.status, "pending")

    def test_shipping_status_logged(self):
        resp = self.client.post(f"{self.base}shipping-status/", {"shipping_status": "processing"}, format="json")

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.data["shipping_status"], "processing")
        self.assertTrue(AdminLog.objects.filter(action=AdminLog.ACTION_SHIPPING_STATUS_UPDATED).exists())

    def test_payment_paid_stamps_paid_at(self):
        resp = self.client.post(f"{self.base}payment-status/", {"payment_status": "paid"}, format="json")
        self.assertEqual(resp.status_code, 200)
        self.assertIsNotNone(resp.data["payment"]["paid_at"])

        resp = self.client.post(f"{self.base}payment-status/", {"payment_status": "failed"}, format="json")
        self.assertIsNone(resp.data["payment"]["paid_at"])

    def test_delete_logs(self):
        resp = self.client.delete(self.base)

        self.assertEqual(resp.status_code, 204)
        self.assertFalse(Order.objects.filter(pk=self.order.pk).exists())
        log = AdminLog.objects.get(action=AdminLog.ACTION_ORDER_DELETED)
        self.assertEqual(log.metadata["order_number"], self.order.order_number)

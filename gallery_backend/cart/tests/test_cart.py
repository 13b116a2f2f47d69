from decimal import Decimal

from django.test import TestCase
from rest_framework.test import APIClient

from cart.models import CartItem
from cart.services.cart_service import add_to_cart, get_cart
from cart.services.exceptions import PaintingNotAvailableError
from paintings.tests.utils import make_painting
from users.models import User


class CartServiceTests(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(email="buyer@example.com", password="pass12345")
        self.painting = make_painting(price="100000")

    def test_add_new_then_increment(self):
        _, item, is_new = add_to_cart(user=self.user, painting_id=self.painting.id)
        self.assertTrue(is_new)
        self.assertEqual(item.quantity, 1)

        self.painting.price = Decimal("120000")
        self.painting.save()

        cart, item, is_new = add_to_cart(user=self.user, painting_id=self.painting.id, quantity=2)
        self.assertFalse(is_new)
        self.assertEqual(item.quantity, 3)
        self.assertEqual(item.unit_price, Decimal("120000"))
        self.assertEqual(cart.item_count, 3)
        self.assertEqual(cart.total_amount, Decimal("360000"))

    def test_rejects_unavailable_or_sold_out(self):
        sold = make_painting(title="Agotada", stock=0)
        hidden = make_painting(title="Oculta", available=False)

        for painting in (sold, hidden):
            with self.assertRaises(PaintingNotAvailableError):
                add_to_cart(user=self.user, painting_id=painting.id)

        self.assertTrue(get_cart(self.user).is_empty)


class CartApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = User.objects.create_user(email="buyer@example.com", password="pass12345")
        self.client.force_authenticate(self.user)
        self.a = make_painting(title="Uno", price="50000")
        self.b = make_painting(title="Dos", price="75000")

    def test_requires_auth(self):
        self.client.force_authenticate(None)
        self.assertEqual(self.client.get("/api/cart/").status_code, 401)

    def test_add_update_remove_clear(self):
        resp = self.client.post("/api/cart/items/", {"painting_id": str(self.a.id)}, format="json")
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp.data["is_new"])

        self.client.post("/api/cart/items/", {"painting_id": str(self.b.id), "quantity": 2}, format="json")
        resp = self.client.get("/api/cart/")
        self.assertEqual(resp.data["item_count"], 3)
        self.assertEqual(Decimal(resp.data["total"]), Decimal("200000"))

        resp = self.client.patch(f"/api/cart/items/{self.b.id}/", {"quantity": 0}, format="json")
        self.assertEqual(resp.data["item_count"], 1)

        resp = self.client.delete(f"/api/cart/items/{self.a.id}/")
        self.assertEqual(resp.data["item_count"], 0)

        self.client.post("/api/cart/items/", {"painting_id": str(self.a.id)}, format="json")
        resp = self.client.delete("/api/cart/clear/")
        self.assertEqual(resp.data["items"], [])

    def test_unavailable_painting_error_envelope(self):
        sold = make_painting(title="Agotada", stock=0)
        resp = self.client.post("/api/cart/items/", {"painting_id": str(sold.id)}, format="json")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(
            resp.data["error"],
            {"code": "PAINTING_NOT_AVAILABLE", "message": "Esta obra ya no está disponible"},
        )

    def test_update_missing_line_is_404(self):
        resp = self.client.patch(f"/api/cart/items/{self.a.id}/", {"quantity": 2}, format="json")
        self.assertEqual(resp.status_code, 404)

    def test_merge_guest_cart_skips_unavailable(self):
        gone = make_painting(title="Vendida", available=False)
        self.client.post("/api/cart/items/", {"painting_id": str(self.a.id)}, format="json")

        resp = self.client.post(
            "/api/cart/merge/",
            {
                "items": [
                    {"painting_id": str(self.a.id), "quantity": 1},
                    {"painting_id": str(self.b.id), "quantity": 1},
                    {"painting_id": str(gone.id), "quantity": 1},
                ]
            },
            format="json",
        )

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.data["skipped"], [str(gone.id)])
        self.assertEqual(resp.data["item_count"], 3)
        self.assertEqual(CartItem.objects.get(painting=self.a).quantity, 2)

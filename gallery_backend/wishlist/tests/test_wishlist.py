import uuid

from django.test import TestCase
from rest_framework.test import APIClient

from paintings.tests.utils import make_painting
from users.models import User
from wishlist.models import WishlistItem


class WishlistApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = User.objects.create_user(email="buyer@example.com", password="pass12345")
        self.client.force_authenticate(self.user)
        self.painting = make_painting()

    def test_add_is_idempotent(self):
        resp = self.client.post("/api/wishlist/", {"painting_id": str(self.painting.id)}, format="json")
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.data["painting_ids"], [str(self.painting.id)])

        resp = self.client.post("/api/wishlist/", {"painting_id": str(self.painting.id)}, format="json")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.data["count"], 1)

    def test_add_missing_painting_is_404(self):
        resp = self.client.post("/api/wishlist/", {"painting_id": str(uuid.uuid4())}, format="json")
        self.assertEqual(resp.status_code, 404)

    def test_check_and_remove(self):
        WishlistItem.objects.create(user=self.user, painting=self.painting)

        resp = self.client.get(f"/api/wishlist/{self.painting.id}/")
        self.assertTrue(resp.data["in_wishlist"])

        resp = self.client.delete(f"/api/wishlist/{self.painting.id}/")
        self.assertEqual(resp.data["count"], 0)

        resp = self.client.delete(f"/api/wishlist/{self.painting.id}/")
        self.assertEqual(resp.status_code, 200)

        resp = self.client.get(f"/api/wishlist/{self.painting.id}/")
        self.assertFalse(resp.data["in_wishlist"])

    def test_lists_are_per_user(self):
        other = User.objects.create_user(email="other@example.com", password="pass12345")
        WishlistItem.objects.create(user=other, painting=self.painting)

        resp = self.client.get("/api/wishlist/")
        self.assertEqual(resp.data["count"], 0)

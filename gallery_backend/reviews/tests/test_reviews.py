from django.test import TestCase
from rest_framework.test import APIClient

from audit.models import AdminLog
from paintings.tests.utils import make_painting
from reviews.models import Review
from users.models import User


def make_review(painting, rating=5, approved=True, **extra):
    fields = {
        "painting": painting,
        "user_name": "Ana",
        "user_email": "ana@example.com",
        "rating": rating,
        "comment": "Una obra preciosa, llegó perfecta.",
        "approved": approved,
    }
    fields.update(extra)
    return Review.objects.create(**fields)


class PublicReviewTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.painting = make_painting()

    def test_only_approved_with_summary(self):
        make_review(self.painting, rating=5)
        make_review(self.painting, rating=4)
        make_review(self.painting, rating=1, approved=False)

        resp = self.client.get(f"/api/reviews/painting/{self.painting.id}/")

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.data["count"], 2)
        self.assertEqual(resp.data["average_rating"], 4.5)
        self.assertEqual(len(resp.data["results"]), 2)

    def test_painting_detail_carries_summary(self):
        make_review(self.painting, rating=3)

        resp = self.client.get(f"/api/paintings/{self.painting.id}/")
        self.assertEqual(resp.data["reviews_summary"], {"count": 1, "average_rating": 3.0})

    def test_unknown_painting(self):
        resp = self.client.get("/api/reviews/painting/00000000-0000-0000-0000-000000000000/")
        self.assertEqual(resp.status_code, 404)


class SubmitReviewTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = User.objects.create_user(
            email="ana@example.com", password="pass12345", first_name="Ana", last_name="Pérez"
        )
        self.painting = make_painting()

    def test_requires_auth(self):
        resp = self.client.post("/api/reviews/", {}, format="json")
        self.assertEqual(resp.status_code, 401)

    def test_submission_waits_for_moderation(self):
        self.client.force_authenticate(self.user)
        resp = self.client.post(
            "/api/reviews/",
            {"painting_id": str(self.painting.id), "rating": 4, "comment": "  Muy linda obra!  "},
            format="json",
        )

        self.assertEqual(resp.status_code, 201)
        self.assertIn("aprobada por el administrador", resp.data["message"])
        review = Review.objects.get()
        self.assertFalse(review.approved)
        self.assertEqual(review.user_name, "Ana Pérez")
        self.assertEqual(review.comment, "Muy linda obra!")

    def test_validation(self):
        self.client.force_authenticate(self.user)
        resp = self.client.post(
            "/api/reviews/",
            {"painting_id": str(self.painting.id), "rating": 6, "comment": "corto"},
            format="json",
        )

        self.assertEqual(resp.status_code, 400)
        self.assertIn("rating", resp.data)
        self.assertIn("comment", resp.data)


class AdminReviewTests(TestCase):
    def setUp(self):
        self.admin = User.objects.create_user(email="owner@example.com", password="pass12345", role="admin")
        self.client = APIClient()
        self.client.force_authenticate(self.admin)
        self.painting = make_painting(title="Marina")
        self.review = make_review(self.painting, approved=False)

    def test_filter_pending(self):
        make_review(self.painting)
        resp = self.client.get("/api/admin/reviews/", {"approved": "false"})
        self.assertEqual([r["id"] for r in resp.data["results"]], [str(self.review.id)])

    def test_approve_reject_delete_are_logged(self):
        resp = self.client.post(f"/api/admin/reviews/{self.review.id}/approve/")
        self.assertTrue(resp.data["approved"])

        resp = self.client.post(f"/api/admin/reviews/{self.review.id}/reject/")
        self.assertFalse(resp.data["approved"])

        resp = self.client.delete(f"/api/admin/reviews/{self.review.id}/")
        self.assertEqual(resp.status_code, 204)

        actions = set(AdminLog.objects.values_list("action", flat=True))
        self.assertEqual(
            actions,
            {AdminLog.ACTION_REVIEW_APPROVED, AdminLog.ACTION_REVIEW_REJECTED, AdminLog.ACTION_REVIEW_DELETED},
        )
        self.assertIn("Marina", AdminLog.objects.get(action=AdminLog.ACTION_REVIEW_APPROVED).metadata["description"])

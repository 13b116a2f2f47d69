import shutil
import tempfile
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase, override_settings
from rest_framework.test import APIClient

from audit.models import AdminLog
from paintings.models import Painting
from users.models import User

from .utils import make_painting


class PaintingModelTests(TestCase):
    def test_slug_generated_and_unique(self):
        a = make_painting(title="Mar de Chiloé")
        b = make_painting(title="Mar de Chiloé")
        self.assertEqual(a.slug, "mar-de-chiloe")
        self.assertEqual(b.slug, "mar-de-chiloe-2")

    def test_images_and_cover_default_to_each_other(self):
        a = make_painting(image_url="https://cdn.example.com/cover.jpg")
        self.assertEqual(a.images, ["https://cdn.example.com/cover.jpg"])

        b = make_painting(image_url="", images=["https://cdn.example.com/1.jpg", "https://cdn.example.com/2.jpg"])
        self.assertEqual(b.image_url, "https://cdn.example.com/1.jpg")

    def test_price_must_be_positive(self):
        with self.assertRaises(ValidationError):
            make_painting(price="0")

    def test_in_stock(self):
        self.assertTrue(make_painting().in_stock)
        self.assertFalse(make_painting(stock=0).in_stock)
        self.assertTrue(make_painting(stock=2).in_stock)
        self.assertFalse(make_painting(available=False).in_stock)


class PublicCatalogTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.cheap = make_painting(title="Bodegón", price="50000", category="naturaleza-muerta")
        self.mid = make_painting(title="Cordillera", price="120000", category="paisaje", description="Andes nevados")
        self.pricey = make_painting(title="Abstracción", price="300000", category="abstracto")
        self.hidden = make_painting(title="Vendida", price="90000", available=False)

    def _ids(self, resp):
        return [row["id"] for row in resp.data["results"]]

    def test_list_hides_unavailable(self):
        resp = self.client.get("/api/paintings/")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.data["count"], 3)
        self.assertNotIn(str(self.hidden.id), self._ids(resp))
        self.assertIn("in_stock", resp.data["results"][0])

    def test_include_unavailable_only_for_admin(self):
        resp = self.client.get("/api/paintings/", {"include_unavailable": "1"})
        self.assertEqual(resp.data["count"], 3)

        admin = User.objects.create_user(email="owner@example.com", password="pass12345", role="admin")
        self.client.force_authenticate(admin)
        resp = self.client.get("/api/paintings/", {"include_unavailable": "1"})
        self.assertEqual(resp.data["count"], 4)

    def test_filters(self):
        resp = self.client.get("/api/paintings/", {"category": "paisaje"})
        self.assertEqual(self._ids(resp), [str(self.mid.id)])

        resp = self.client.get("/api/paintings/", {"min_price": "60000", "max_price": "200000"})
        self.assertEqual(self._ids(resp), [str(self.mid.id)])

        resp = self.client.get("/api/paintings/", {"search": "andes"})
        self.assertEqual(self._ids(resp), [str(self.mid.id)])

    def test_max_below_min_is_ignored(self):
        resp = self.client.get("/api/paintings/", {"min_price": "100000", "max_price": "10"})
        self.assertEqual(set(self._ids(resp)), {str(self.mid.id), str(self.pricey.id)})

    def test_sorting(self):
        resp = self.client.get("/api/paintings/", {"sort": "price-asc"})
        self.assertEqual(self._ids(resp), [str(self.cheap.id), str(self.mid.id), str(self.pricey.id)])

        resp = self.client.get("/api/paintings/", {"sort": "title-desc"})
        self.assertEqual(self._ids(resp)[0], str(self.mid.id))

    def test_page_size_is_twelve(self):
        for i in range(12):
            make_painting(title=f"Serie {i}")
        resp = self.client.get("/api/paintings/")
        self.assertEqual(len(resp.data["results"]), 12)
        self.assertIsNotNone(resp.data["next"])

    def test_detail_by_id_and_slug(self):
        resp = self.client.get(f"/api/paintings/{self.mid.id}/")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.data["reviews_summary"], {"count": 0, "average_rating": 0})

        resp = self.client.get("/api/paintings/slug/cordillera/")
        self.assertEqual(resp.data["id"], str(self.mid.id))

        self.assertEqual(self.client.get("/api/paintings/slug/nope/").status_code, 404)

    def test_categories(self):
        resp = self.client.get("/api/paintings/categories/")
        self.assertEqual(resp.status_code, 200)
        self.assertIn({"value": "paisaje", "label": "Paisaje"}, resp.data)

    def test_anonymous_cannot_write(self):
        resp = self.client.post("/api/paintings/", {"title": "X"}, format="json")
        self.assertEqual(resp.status_code, 401)


class AdminPaintingTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.admin = User.objects.create_user(email="owner@example.com", password="pass12345", role="admin")
        self.client.force_authenticate(self.admin)

    def test_create_update_delete_are_logged(self):
        resp = self.client.post(
            "/api/paintings/",
            {
                "title": "Nocturno",
                "price": "200000",
                "width_cm": "40",
                "height_cm": "50",
                "image_url": "https://cdn.example.com/n.jpg",
                "category": "abstracto",
            },
            format="json",
        )
        self.assertEqual(resp.status_code, 201, resp.data)
        self.assertEqual(resp.data["images"], ["https://cdn.example.com/n.jpg"])
        painting_id = resp.data["id"]

        resp = self.client.patch(f"/api/paintings/{painting_id}/", {"price": "210000"}, format="json")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(Decimal(resp.data["price"]), Decimal("210000"))

        resp = self.client.delete(f"/api/paintings/{painting_id}/")
        self.assertEqual(resp.status_code, 204)

        actions = list(AdminLog.objects.order_by("created_at").values_list("action", flat=True))
        self.assertEqual(actions, ["painting_created", "painting_updated", "painting_deleted"])

    def test_rejects_non_positive_dimensions(self):
        resp = self.client.post(
            "/api/paintings/",
            {"title": "X", "price": "1000", "width_cm": "0", "height_cm": "10"},
            format="json",
        )
        self.assertEqual(resp.status_code, 400)
        self.assertIn("width_cm", resp.data)

    def test_customer_cannot_write(self):
        customer = User.objects.create_user(email="c@example.com", password="pass12345")
        self.client.force_authenticate(customer)
        resp = self.client.post("/api/paintings/", {"title": "X"}, format="json")
        self.assertEqual(resp.status_code, 403)


class PaintingImageUploadTests(TestCase):
    def setUp(self):
        self.media = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, self.media, ignore_errors=True)
        self.client = APIClient()
        self.admin = User.objects.create_user(email="owner@example.com", password="pass12345", role="admin")
        self.client.force_authenticate(self.admin)
        self.painting = make_painting(image_url="")

    def test_upload_appends_image_and_sets_cover(self):
        upload = SimpleUploadedFile("obra.jpg", b"\xff\xd8\xff" + b"0" * 100, content_type="image/jpeg")
        with override_settings(MEDIA_ROOT=self.media):
            resp = self.client.post(f"/api/paintings/{self.painting.id}/images/", {"file": upload}, format="multipart")

        self.assertEqual(resp.status_code, 201, resp.data)
        self.assertEqual(len(resp.data["images"]), 1)
        self.assertEqual(resp.data["image_url"], resp.data["images"][0])

    def test_upload_rejects_non_image(self):
        upload = SimpleUploadedFile("doc.txt", b"hello", content_type="text/plain")
        with override_settings(MEDIA_ROOT=self.media):
            resp = self.client.post(f"/api/paintings/{self.painting.id}/images/", {"file": upload}, format="multipart")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.data["error"]["code"], "INVALID_FILE")

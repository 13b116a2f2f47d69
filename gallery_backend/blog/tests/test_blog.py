from datetime import timedelta

from django.test import TestCase
from django.utils import timezone
from rest_framework.test import APIClient

from audit.models import AdminLog
from blog.models import BlogPost
from users.models import User


def make_post(title, published=True, **extra):
    return BlogPost.objects.create(title=title, excerpt="e", content="<p>c</p>", published=published, **extra)


class PublicBlogTests(TestCase):
    def setUp(self):
        self.client = APIClient()

    def test_list_published_newest_first(self):
        old = make_post("Antiguo", published_at=timezone.now() - timedelta(days=3))
        new = make_post("Reciente")
        make_post("Borrador", published=False)

        resp = self.client.get("/api/blog/")

        self.assertEqual(resp.status_code, 200)
        self.assertEqual([p["slug"] for p in resp.data["results"]], [new.slug, old.slug])

    def test_tag_filter(self):
        make_post("Óleo", tags=["Técnica", "óleo"])
        make_post("Acuarela", tags=["acuarela"])

        resp = self.client.get("/api/blog/", {"tag": "técnica"})
        self.assertEqual([p["title"] for p in resp.data["results"]], ["Óleo"])

    def test_detail_by_slug_hides_drafts(self):
        post = make_post("Cómo cuidar tu cuadro")
        draft = make_post("Secreto", published=False)

        resp = self.client.get(f"/api/blog/{post.slug}/")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.data["content"], "<p>c</p>")
        self.assertEqual(resp.data["view_count"], 1)

        self.assertEqual(self.client.get(f"/api/blog/{draft.slug}/").status_code, 404)


class AdminBlogTests(TestCase):
    def setUp(self):
        self.admin = User.objects.create_user(email="owner@example.com", password="pass12345", role="admin")
        self.client = APIClient()
        self.client.force_authenticate(self.admin)

    def test_create_generates_unique_slug_and_parses_tags(self):
        make_post("Arte y Café")

        resp = self.client.post(
            "/api/admin/blog/",
            {"title": "Arte y Café", "content": "x", "tags": "pintura, café , "},
            format="json",
        )

        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.data["slug"], "arte-y-cafe-2")
        self.assertEqual(resp.data["tags"], ["pintura", "café"])
        self.assertIsNone(resp.data["published_at"])
        self.assertEqual(AdminLog.objects.get().action, AdminLog.ACTION_BLOG_POST_CREATED)

    def test_first_publish_stamps_and_logs(self):
        post = make_post("Nuevo", published=False)

        resp = self.client.patch(f"/api/admin/blog/{post.id}/", {"published": True}, format="json")
        self.assertIsNotNone(resp.data["published_at"])
        stamped = resp.data["published_at"]

        resp = self.client.patch(f"/api/admin/blog/{post.id}/", {"excerpt": "otro"}, format="json")
        self.assertEqual(resp.data["published_at"], stamped)

        actions = list(AdminLog.objects.order_by("created_at").values_list("action", flat=True))
        self.assertEqual(actions, [AdminLog.ACTION_BLOG_POST_PUBLISHED, AdminLog.ACTION_BLOG_POST_UPDATED])

    def test_delete_logged(self):
        post = make_post("Adiós")
        self.assertEqual(self.client.delete(f"/api/admin/blog/{post.id}/").status_code, 204)
        self.assertEqual(AdminLog.objects.get().action, AdminLog.ACTION_BLOG_POST_DELETED)

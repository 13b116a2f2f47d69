from django.test import TestCase
from rest_framework.test import APIClient

from audit.models import AdminLog
from site_settings.defaults import MUSIC_DEFAULTS
from users.models import User


class SiteSettingTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.admin = User.objects.create_user(email="owner@example.com", password="pass12345", role="admin")

    def test_defaults_when_never_saved(self):
        resp = self.client.get("/api/settings/music/")

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.data["data"], MUSIC_DEFAULTS)
        self.assertIsNone(resp.data["updated_at"])

    def test_unknown_key(self):
        resp = self.client.get("/api/settings/colors/")
        self.assertEqual(resp.status_code, 404)

    def test_only_admins_write(self):
        resp = self.client.put("/api/settings/home/", {"data": {}}, format="json")
        self.assertEqual(resp.status_code, 401)

        self.client.force_authenticate(User.objects.create_user(email="c@example.com", password="pass12345"))
        resp = self.client.put("/api/settings/home/", {"data": {}}, format="json")
        self.assertEqual(resp.status_code, 403)

    def test_update_replaces_data_and_logs(self):
        self.client.force_authenticate(self.admin)

        self.client.put("/api/settings/home/", {"data": {"hero_title": "Hola", "hero_subtitle": "x"}}, format="json")
        resp = self.client.put("/api/settings/home/", {"data": {"hero_title": "Bienvenidos"}}, format="json")

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.data["data"]["hero_title"], "Bienvenidos")
        self.assertEqual(resp.data["data"]["hero_subtitle"], "")
        self.assertEqual(resp.data["data"]["video_size"], "medium")

        self.client.force_authenticate(None)
        self.assertEqual(self.client.get("/api/settings/home/").data["data"]["hero_title"], "Bienvenidos")

        self.assertEqual(
            AdminLog.objects.filter(action=AdminLog.ACTION_HOME_SETTINGS_UPDATED).count(),
            2,
        )

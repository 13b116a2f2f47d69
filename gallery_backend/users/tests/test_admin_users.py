from io import StringIO

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import TestCase
from rest_framework.test import APIClient

from audit.models import AdminLog
from users.models import User


class AdminUserEndpointsTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.admin = User.objects.create_user(email="owner@example.com", password="pass12345", role="admin")
        self.customer = User.objects.create_user(email="buyer@example.com", password="pass12345")

    def test_list_requires_admin(self):
        self.client.force_authenticate(self.customer)
        self.assertEqual(self.client.get("/api/admin/users/").status_code, 403)

        self.client.force_authenticate(None)
        self.assertEqual(self.client.get("/api/admin/users/").status_code, 401)

    def test_list_users_payload(self):
        self.client.force_authenticate(self.admin)
        resp = self.client.get("/api/admin/users/")

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.data["count"], 2)
        first = next(row for row in resp.data["results"] if row["email"] == "buyer@example.com")
        self.assertEqual(
            set(first.keys()),
            {"uid", "email", "display_name", "email_verified", "created_at", "last_sign_in", "is_admin"},
        )
        self.assertFalse(first["is_admin"])

    def test_promote_user(self):
        self.client.force_authenticate(self.admin)
        resp = self.client.post(
            "/api/admin/users/set-role/", {"uid": str(self.customer.pk), "role": "admin"}, format="json"
        )

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.data, {"success": True, "message": "Usuario promovido a administrador"})
        self.customer.refresh_from_db()
        self.assertEqual(self.customer.role, "admin")
        self.assertTrue(self.customer.is_staff)
        self.assertTrue(AdminLog.objects.filter(action=AdminLog.ACTION_USER_ROLE_UPDATED).exists())

    def test_any_other_role_demotes(self):
        other = User.objects.create_user(email="other@example.com", password="pass12345", role="admin")
        self.client.force_authenticate(self.admin)
        resp = self.client.post("/api/admin/users/set-role/", {"uid": str(other.pk), "role": "editor"}, format="json")

        self.assertEqual(resp.data["message"], "Permisos de administrador revocados")
        other.refresh_from_db()
        self.assertEqual(other.role, "customer")
        self.assertFalse(other.is_staff)

    def test_uid_required(self):
        self.client.force_authenticate(self.admin)
        resp = self.client.post("/api/admin/users/set-role/", {"role": "admin"}, format="json")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.data["error"]["message"], "Se requiere el UID del usuario")

    def test_cannot_change_own_role(self):
        self.client.force_authenticate(self.admin)
        resp = self.client.post(
            "/api/admin/users/set-role/", {"uid": str(self.admin.pk), "role": "customer"}, format="json"
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.data["error"]["message"], "No puedes modificar tu propio rol")

    def test_cannot_change_own_role_with_reformatted_uid(self):
        self.client.force_authenticate(self.admin)
        for uid in (str(self.admin.pk).upper(), self.admin.pk.hex):
            resp = self.client.post("/api/admin/users/set-role/", {"uid": uid, "role": "customer"}, format="json")
            self.assertEqual(resp.status_code, 400)
            self.assertEqual(resp.data["error"]["message"], "No puedes modificar tu propio rol")

        self.admin.refresh_from_db()
        self.assertEqual(self.admin.role, "admin")

    def test_unknown_user(self):
        self.client.force_authenticate(self.admin)
        resp = self.client.post(
            "/api/admin/users/set-role/",
            {"uid": "00000000-0000-0000-0000-000000000000", "role": "admin"},
            format="json",
        )
        self.assertEqual(resp.status_code, 404)

        resp = self.client.post("/api/admin/users/set-role/", {"uid": "not-a-uuid", "role": "admin"}, format="json")
        self.assertEqual(resp.status_code, 404)


class RoleCommandTests(TestCase):
    def test_set_admin_role_command(self):
        user = User.objects.create_user(email="owner@example.com", password="pass12345")
        out = StringIO()
        call_command("set_admin_role", "OWNER@example.com", stdout=out)

        user.refresh_from_db()
        self.assertEqual(user.role, "admin")
        self.assertIn("Usuario promovido a administrador", out.getvalue())

        call_command("set_admin_role", "owner@example.com", "--revoke", stdout=StringIO())
        user.refresh_from_db()
        self.assertEqual(user.role, "customer")

    def test_set_admin_role_unknown_email(self):
        with self.assertRaises(CommandError):
            call_command("set_admin_role", "ghost@example.com", stdout=StringIO())

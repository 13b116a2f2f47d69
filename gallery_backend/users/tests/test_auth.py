from django.core import mail
from django.test import TestCase
from rest_framework.test import APIClient

from users.models import User
from users.services.verification import make_verification_token


class RegisterAndLoginTests(TestCase):
    def setUp(self):
        self.client = APIClient()

    def test_register_creates_customer_and_sends_verification(self):
        payload = {
            "email": "ana@example.com",
            "password": "Lienzo-Azul-2024",
            "first_name": "Ana",
            "last_name": "Rojas",
            "role": "admin",
        }
        with self.captureOnCommitCallbacks(execute=True):
            resp = self.client.post("/api/auth/register/", payload, format="json")

        self.assertEqual(resp.status_code, 201)
        self.assertIn("access", resp.data)
        self.assertEqual(resp.data["user"]["role"], "customer")
        self.assertFalse(resp.data["user"]["email_verified"])

        user = User.objects.get(email="ana@example.com")
        self.assertFalse(user.is_staff)
        self.assertEqual(user.username, "ana")

        self.assertEqual(len(mail.outbox), 1)
        self.assertIn("verificar-email?token=", mail.outbox[0].body)

    def test_register_rejects_duplicate_email(self):
        User.objects.create_user(email="ana@example.com", password="x-Secret-99")
        resp = self.client.post(
            "/api/auth/register/",
            {"email": "ANA@example.com", "password": "Lienzo-Azul-2024"},
            format="json",
        )
        self.assertEqual(resp.status_code, 400)
        self.assertIn("email", resp.data)

    def test_register_rejects_weak_password(self):
        resp = self.client.post(
            "/api/auth/register/",
            {"email": "ana@example.com", "password": "123"},
            format="json",
        )
        self.assertEqual(resp.status_code, 400)
        self.assertIn("password", resp.data)

    def test_login_with_email_or_username(self):
        User.objects.create_user(email="ana@example.com", username="anita", password="Lienzo-Azul-2024")

        resp = self.client.post(
            "/api/auth/login/", {"identifier": "ana@example.com", "password": "Lienzo-Azul-2024"}, format="json"
        )
        self.assertEqual(resp.status_code, 200)
        self.assertIn("refresh", resp.data)

        resp = self.client.post(
            "/api/auth/login/", {"identifier": "ANITA", "password": "Lienzo-Azul-2024"}, format="json"
        )
        self.assertEqual(resp.status_code, 200)
        self.assertIsNotNone(User.objects.get(email="ana@example.com").last_login)

    def test_login_bad_credentials(self):
        User.objects.create_user(email="ana@example.com", password="Lienzo-Azul-2024")
        resp = self.client.post(
            "/api/auth/login/", {"identifier": "ana@example.com", "password": "wrong"}, format="json"
        )
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.data["error"]["code"], "INVALID_CREDENTIALS")

    def test_inactive_user_cannot_login(self):
        User.objects.create_user(email="ana@example.com", password="Lienzo-Azul-2024", is_active=False)
        resp = self.client.post(
            "/api/auth/login/", {"identifier": "ana@example.com", "password": "Lienzo-Azul-2024"}, format="json"
        )
        self.assertEqual(resp.status_code, 401)


class VerifyEmailTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = User.objects.create_user(email="ana@example.com", password="Lienzo-Azul-2024")

    def test_valid_token_marks_email_verified(self):
        token = make_verification_token(self.user)
        resp = self.client.post("/api/auth/verify-email/", {"token": token}, format="json")

        self.assertEqual(resp.status_code, 200)
        self.user.refresh_from_db()
        self.assertTrue(self.user.email_verified)

    def test_tampered_token_rejected(self):
        token = make_verification_token(self.user) + "x"
        resp = self.client.post("/api/auth/verify-email/", {"token": token}, format="json")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.data["error"]["code"], "INVALID_TOKEN")

    def test_token_invalid_after_email_change(self):
        token = make_verification_token(self.user)
        self.user.email = "other@example.com"
        self.user.save()

        resp = self.client.post("/api/auth/verify-email/", {"token": token}, format="json")
        self.assertEqual(resp.status_code, 400)

    def test_resend_only_while_unverified(self):
        self.client.force_authenticate(self.user)
        with self.captureOnCommitCallbacks(execute=True):
            resp = self.client.post("/api/auth/verify-email/resend/")
        self.assertEqual(resp.status_code, 202)
        self.assertEqual(len(mail.outbox), 1)

        self.user.email_verified = True
        self.user.save()
        resp = self.client.post("/api/auth/verify-email/resend/")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.data["error"]["code"], "ALREADY_VERIFIED")


class MeAndAddressTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = User.objects.create_user(email="ana@example.com", password="Lienzo-Azul-2024")
        self.client.force_authenticate(self.user)

    def test_me_patch_cannot_change_role_or_email(self):
        resp = self.client.patch(
            "/api/auth/me/",
            {"first_name": "Ana", "role": "admin", "email": "x@example.com", "phone": "+56 9 1234 5678"},
            format="json",
        )
        self.assertEqual(resp.status_code, 200)
        self.user.refresh_from_db()
        self.assertEqual(self.user.first_name, "Ana")
        self.assertEqual(self.user.role, "customer")
        self.assertEqual(self.user.email, "ana@example.com")

    def test_me_patch_rejects_short_phone(self):
        resp = self.client.patch("/api/auth/me/", {"phone": "1234"}, format="json")
        self.assertEqual(resp.status_code, 400)

    def _address(self, **extra):
        data = {
            "full_name": "Ana Rojas",
            "phone": "+56912345678",
            "address": "Av. Siempre Viva 742",
            "city": "Santiago",
            "region": "RM",
        }
        data.update(extra)
        return self.client.post("/api/auth/addresses/", data, format="json")

    def test_first_address_becomes_default_and_default_moves(self):
        first = self._address()
        self.assertEqual(first.status_code, 201)
        self.assertTrue(first.data["is_default"])

        second = self._address(label="Taller", is_default=True)
        self.assertTrue(second.data["is_default"])

        resp = self.client.get("/api/auth/addresses/")
        defaults = [a for a in resp.data if a["is_default"]]
        self.assertEqual(len(defaults), 1)
        self.assertEqual(defaults[0]["id"], second.data["id"])

    def test_deleting_default_promotes_remaining(self):
        first = self._address()
        second = self._address(is_default=True)

        self.client.delete(f"/api/auth/addresses/{second.data['id']}/")
        resp = self.client.get("/api/auth/addresses/")
        self.assertEqual(len(resp.data), 1)
        self.assertEqual(resp.data[0]["id"], first.data["id"])
        self.assertTrue(resp.data[0]["is_default"])

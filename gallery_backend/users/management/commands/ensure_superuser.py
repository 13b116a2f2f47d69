# gallery_backend/users/management/commands/ensure_superuser.py

"""
PATH: users/management/commands/ensure_superuser.py

Production-safe superuser bootstrap.

- Reads AUTO_ADMIN_EMAIL + AUTO_ADMIN_PASSWORD from env (django-environ).
- Idempotent: creates the superuser if missing; otherwise re-asserts
  admin role, staff/superuser flags and resets the password.
- Does NOT print the password.
"""

from __future__ import annotations

import environ
from django.core.management.base import BaseCommand
from django.db import transaction

from permissions.roles import ROLE_ADMIN
from users.models import User

env = environ.Env()


class Command(BaseCommand):
    help = "Create/update an initial superuser from env vars (idempotent)."

    def handle(self, *args, **options):
        email = (env("AUTO_ADMIN_EMAIL", default="") or "").strip()
        password = (env("AUTO_ADMIN_PASSWORD", default="") or "").strip()

        if not email or not password:
            self.stdout.write(self.style.WARNING("AUTO_ADMIN_* env vars not set. Skipping."))
            return

        with transaction.atomic():
            user = User.objects.filter(email__iexact=email).first()

            if user:
                user.role = ROLE_ADMIN
                user.is_active = True
                user.is_staff = True
                user.is_superuser = True
                user.email_verified = True
                user.set_password(password)
                user.save()
                self.stdout.write(self.style.SUCCESS(f"Superuser ensured: {email} (updated)"))
                return

            User.objects.create_superuser(email=email, password=password)
            self.stdout.write(self.style.SUCCESS(f"Superuser ensured: {email} (created)"))

# gallery_backend/users/management/commands/set_admin_role.py

"""
PATH: users/management/commands/set_admin_role.py

CLI equivalent of POST /api/admin/users/set-role/ for bootstrapping the
first admin (no acting admin exists yet).

Usage:
    python manage.py set_admin_role owner@example.com
    python manage.py set_admin_role owner@example.com --revoke
"""

from __future__ import annotations

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from permissions.roles import ROLE_ADMIN, ROLE_CUSTOMER
from users.models import User
from users.services.roles import MSG_DEMOTED, MSG_PROMOTED, apply_role


class Command(BaseCommand):
    help = "Grant (or revoke with --revoke) the admin role for a user by email."

    def add_arguments(self, parser):
        parser.add_argument("email")
        parser.add_argument("--revoke", action="store_true", help="Demote the user to customer")

    @transaction.atomic
    def handle(self, *args, **options):
        email = (options["email"] or "").strip()
        user = User.objects.select_for_update().filter(email__iexact=email).first()
        if user is None:
            raise CommandError(f"No user with email {email}")

        role = ROLE_CUSTOMER if options["revoke"] else ROLE_ADMIN
        apply_role(user, role)

        message = MSG_DEMOTED if options["revoke"] else MSG_PROMOTED
        self.stdout.write(self.style.SUCCESS(f"{message}: {user.email}"))

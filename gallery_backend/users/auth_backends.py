"""
PATH: users/auth_backends.py

AUTH BACKEND: Email OR Username login

Rules:
- identifier containing "@" is looked up by email, otherwise by username
- both matched case-insensitively
- inactive accounts never authenticate
"""

from __future__ import annotations

from django.contrib.auth import get_user_model
from django.contrib.auth.backends import ModelBackend

User = get_user_model()


class EmailOrUsernameBackend(ModelBackend):
    def authenticate(self, request, username=None, password=None, **kwargs):
        identifier = (username or kwargs.get("email") or "").strip()
        if not identifier or password is None:
            return None

        lookup = {"email__iexact": identifier} if "@" in identifier else {"username__iexact": identifier}
        user = User.objects.filter(**lookup).first()

        if user is None:
            # Equalize timing with the found-user path.
            User().set_password(password)
            return None

        if user.check_password(password) and self.user_can_authenticate(user):
            return user
        return None

# permissions/roles.py

from __future__ import annotations

from typing import Optional

from rest_framework.permissions import SAFE_METHODS, BasePermission


# =========================================================
# ROLE CONSTANTS
# =========================================================
# Two account kinds only: the gallery owner(s) and shoppers.
ROLE_ADMIN = "admin"
ROLE_CUSTOMER = "customer"

ROLES = {
    ROLE_ADMIN,
    ROLE_CUSTOMER,
}

ROLE_CHOICES = (
    (ROLE_ADMIN, "Admin"),
    (ROLE_CUSTOMER, "Customer"),
)


# =========================================================
# Helpers
# =========================================================
def get_user_role(user) -> Optional[str]:
    return getattr(user, "role", None)


def is_admin_user(user) -> bool:
    if not user or not getattr(user, "is_authenticated", False):
        return False
    return get_user_role(user) == ROLE_ADMIN


# =========================================================
# Base Role Permission (Internal Use)
# =========================================================
class BaseRolePermission(BasePermission):
    """
    Base permission for role-based access control.

    Subclasses must define:
    - allowed_roles (set)
    """

    allowed_roles: set[str] = set()

    def has_permission(self, request, view):
        user = request.user

        if not user or not user.is_authenticated:
            return False

        user_role = get_user_role(user)
        if not user_role:
            return False

        return user_role in self.allowed_roles


# =========================================================
# Role Permissions
# =========================================================
class IsAdmin(BaseRolePermission):
    allowed_roles = {ROLE_ADMIN}


class IsCustomer(BaseRolePermission):
    allowed_roles = {ROLE_CUSTOMER}


class IsAdminOrReadOnly(BasePermission):
    """
    Reads are open (catalog, blog); writes require the admin role.
    """

    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return True
        return is_admin_user(request.user)

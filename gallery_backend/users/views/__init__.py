from .addresses import AddressViewSet
from .admin_users import AdminUserListView, SetRoleView
from .auth import LoginView, RegisterView, ResendVerificationView, VerifyEmailView
from .me import MeView

__all__ = [
    "AddressViewSet",
    "AdminUserListView",
    "SetRoleView",
    "RegisterView",
    "LoginView",
    "VerifyEmailView",
    "ResendVerificationView",
    "MeView",
]

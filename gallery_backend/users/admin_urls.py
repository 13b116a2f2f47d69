# users/admin_urls.py

from django.urls import path

from .views import AdminUserListView, SetRoleView

app_name = "users_admin"

urlpatterns = [
    path("", AdminUserListView.as_view(), name="list"),
    path("set-role/", SetRoleView.as_view(), name="set-role"),
]

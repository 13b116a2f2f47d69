from django.urls import path

from .views import SiteSettingView

app_name = "site_settings"

urlpatterns = [
    path("<str:key>/", SiteSettingView.as_view(), name="detail"),
]

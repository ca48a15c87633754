from django.urls import path

from . import views_admin as views

app_name = "tenants"

urlpatterns = [
    path("settings", views.settings_page, name="settings"),
]

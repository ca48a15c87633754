from django.contrib import admin
from django.http import HttpResponse
from django.urls import include, path

from apps.dashboard import views as dashboard_views
from apps.media import views as media_views

urlpatterns = [
    # Django's model admin; /admin is the store back office
    path("django-admin/", admin.site.urls),
    path("", dashboard_views.landing, name="landing"),
    path("healthz", lambda _request: HttpResponse("ok")),
    # Public storefront
    path("r/", include("apps.catalog.urls_public")),
    path("r/", include("apps.orders.urls_public")),
    path("track/", include("apps.viewer.urls")),
    path("media/p/<path:path>", media_views.image_public, name="image_public"),
    # Back office
    path("admin", include("apps.dashboard.urls")),
    path("admin/", include("apps.accounts.urls")),
    path("admin/", include("apps.orders.urls")),
    path("admin/", include("apps.catalog.urls")),
    path("admin/", include("apps.tenants.urls")),
    path("admin/", include("apps.media.urls")),
    path("admin/", include("apps.whatsapp.urls")),
]

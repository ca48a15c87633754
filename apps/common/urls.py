from django.conf import settings
from django.urls import reverse


def tracking_url(code: str) -> str:
    """Return an absolute URL for the public order tracking page."""
    base = (getattr(settings, "PUBLIC_BASE_URL", "") or "").rstrip("/")
    path = reverse("viewer:track_order", args=[code])
    return f"{base}{path}" if base else path

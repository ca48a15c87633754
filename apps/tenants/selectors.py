from django.http import Http404

from .models import Tenant


def get_public_tenant(slug: str) -> Tenant:
    """Resolve a storefront tenant by slug.

    Unknown and inactive slugs raise the same Http404 so the public surface
    does not reveal which slugs exist.
    """
    normalized = (slug or "").strip().lower()
    tenant = Tenant.objects.filter(slug=normalized, is_active=True).first() if normalized else None
    if tenant is None:
        raise Http404()
    return tenant

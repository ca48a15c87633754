from functools import wraps

from django.contrib.auth.decorators import login_required
from django.http import HttpResponseForbidden


def tenant_staff_required(view_func):
    """Require a signed-in user linked to a tenant and expose it as request.tenant."""

    @login_required
    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        tenant = getattr(request.user, "tenant", None)
        if tenant is None or not tenant.is_active:
            return HttpResponseForbidden("Usuário sem loja vinculada")
        request.tenant = tenant
        return view_func(request, *args, **kwargs)

    return _wrapped

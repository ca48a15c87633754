import logging

from django.db import transaction

from django.http import JsonResponse
from django.views.decorators.http import require_http_methods

from apps.accounts.decorators import tenant_staff_required
from apps.common.http import flash, form_errors

from .forms import StoreSettingsForm, TenantForm
from .models import StoreSettings
from .serializers import serialize_settings, serialize_tenant

logger = logging.getLogger(__name__)


@tenant_staff_required
@require_http_methods(["GET", "POST"])
def settings_page(request):
    tenant = request.tenant
    store = StoreSettings.for_tenant(tenant)
    if request.method == "POST":
        tenant_form = TenantForm(request.POST, instance=tenant)
        settings_form = StoreSettingsForm(request.POST, instance=store)
        if not (tenant_form.is_valid() and settings_form.is_valid()):
            errors = {**form_errors(tenant_form), **form_errors(settings_form)}
            return flash("Não foi possível salvar", "Revise os campos destacados.", errors=errors)
        with transaction.atomic():
            tenant = tenant_form.save()
            store = settings_form.save()
        logger.info("Store settings updated tenant_id=%s user_id=%s", tenant.id, request.user.id)
        return JsonResponse({
            "tenant": serialize_tenant(tenant),
            "settings": serialize_settings(store),
            "flash": {"type": "success", "title": "Feito!", "message": "Configurações salvas."},
        })
    return JsonResponse({"tenant": serialize_tenant(tenant), "settings": serialize_settings(store)})

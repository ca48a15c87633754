from django.http import JsonResponse
from django.views.decorators.http import require_GET, require_POST

from apps.accounts.decorators import tenant_staff_required
from apps.common.http import flash

from . import services
from .models import WhatsAppConnection


def _serialize(conn: WhatsAppConnection) -> dict:
    return {
        "status": conn.status,
        "status_label": conn.get_status_display(),
        "qr_code": conn.qr_code or None,
        "connected_at": conn.connected_at.isoformat() if conn.connected_at else None,
        "last_activity": conn.last_activity.isoformat() if conn.last_activity else None,
    }


@tenant_staff_required
@require_GET
def status(request):
    return JsonResponse({"connection": _serialize(services.get_connection(request.tenant))})


@tenant_staff_required
@require_POST
def qr(request):
    try:
        conn = services.generate_qr(request.tenant)
    except services.ConnectionStateError:
        return flash("Já conectado", "Reinicie a conexão para gerar um novo QR.", status=409)
    return JsonResponse({"connection": _serialize(conn)})


@tenant_staff_required
@require_POST
def confirm(request):
    try:
        conn = services.confirm_connection(request.tenant)
    except services.ConnectionStateError:
        return flash("Ops", "Gere um QR Code antes de confirmar.", status=409)
    return JsonResponse({
        "connection": _serialize(conn),
        "flash": {"type": "success", "title": "Conectado!", "message": "WhatsApp conectado."},
    })


@tenant_staff_required
@require_POST
def restart(request):
    conn = services.restart(request.tenant)
    return JsonResponse({"connection": _serialize(conn)})

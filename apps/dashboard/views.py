from django.conf import settings
from django.http import JsonResponse
from django.urls import reverse
from django.views.decorators.http import require_GET

from apps.accounts.decorators import tenant_staff_required
from apps.common.money import money_payload
from apps.orders.selectors import dashboard_summary
from apps.orders.serializers import serialize_order
from apps.tenants.serializers import serialize_tenant


@tenant_staff_required
@require_GET
def index(request):
    tenant = request.tenant
    summary = dashboard_summary(tenant)
    return JsonResponse({
        "tenant": serialize_tenant(tenant),
        "user": {"name": request.user.name or request.user.email, "role": request.user.role},
        "counts": summary["counts"],
        "total_orders": summary["total_orders"],
        "revenue": money_payload(summary["revenue"]),
        "recent_orders": [serialize_order(o) for o in summary["recent"]],
        "revenue_by_day": [
            {"date": day.isoformat(), "revenue": money_payload(amount)} for day, amount in summary["revenue_by_day"]
        ],
        "storefront_url": reverse("catalog:storefront", args=[tenant.slug]),
    })


@require_GET
def landing(request):
    demo_slug = (getattr(settings, "DEMO_STORE_SLUG", "") or "").strip().lower()
    return JsonResponse({
        "name": "Pedidos Online",
        "tagline": "Cardápio digital e pedidos para o seu restaurante.",
        "links": {
            "admin_login": reverse("accounts:login"),
            "demo_store": reverse("catalog:storefront", args=[demo_slug]) if demo_slug else None,
        },
    })

import logging

from django.http import HttpResponseBadRequest, JsonResponse
from django.shortcuts import get_object_or_404
from django.views.decorators.http import require_GET, require_POST

from apps.accounts.decorators import tenant_staff_required
from apps.common.http import flash

from .models import Order
from .selectors import customers_for_tenant, filter_orders, orders_for_tenant
from .serializers import serialize_customer, serialize_order
from .transitions import InvalidTransition, StatusConflict, transition_order

logger = logging.getLogger(__name__)

_STATUSES = {value for value, _label in Order.STATUS_CHOICES}


@tenant_staff_required
@require_GET
def orders_list(request):
    search = (request.GET.get("q") or "").strip()
    status = (request.GET.get("status") or "ALL").strip().upper()
    qs = filter_orders(orders_for_tenant(request.tenant), search, status)
    return JsonResponse({
        "orders": [serialize_order(o) for o in qs],
        "filters": {"q": search, "status": status},
        "statuses": [{"value": v, "label": label} for v, label in Order.STATUS_CHOICES],
    })


@tenant_staff_required
@require_GET
def order_detail(request, order_id):
    order = get_object_or_404(
        Order.objects.select_related("customer").prefetch_related("items", "history"),
        pk=order_id,
        tenant=request.tenant,
    )
    return JsonResponse({"order": serialize_order(order, detail=True)})


@tenant_staff_required
@require_POST
def order_status(request, order_id):
    order = get_object_or_404(Order, pk=order_id, tenant=request.tenant)
    target = (request.POST.get("status") or "").strip().upper()
    expected = (request.POST.get("expected_status") or "").strip().upper() or order.status
    if target not in _STATUSES or expected not in _STATUSES:
        return HttpResponseBadRequest("invalid status")
    try:
        order = transition_order(order, to_status=target, expected_status=expected, source="admin")
    except InvalidTransition:
        return flash("Ops", "Transição de status não permitida.", status=400)
    except StatusConflict as e:
        logger.info("Status conflict on order %s: expected %s, found %s", order.code, e.expected, e.actual)
        return flash(
            "Pedido atualizado por outra pessoa",
            "Recarregue para ver o status atual.",
            status=409,
            current_status=e.actual,
        )
    return JsonResponse({
        "order": serialize_order(order, detail=True),
        "flash": {"type": "success", "title": "Feito!", "message": f"Pedido #{order.code}: {order.status_label}."},
    })


@tenant_staff_required
@require_GET
def customers_list(request):
    search = (request.GET.get("q") or "").strip()
    qs = customers_for_tenant(request.tenant, search)
    return JsonResponse({"customers": [serialize_customer(c) for c in qs], "filters": {"q": search}})


@tenant_staff_required
@require_GET
def customer_detail(request, customer_id):
    customer = get_object_or_404(customers_for_tenant(request.tenant), pk=customer_id)
    orders = customer.orders.select_related("customer").order_by("-created_at")
    return JsonResponse({
        "customer": serialize_customer(customer),
        "orders": [serialize_order(o) for o in orders],
    })

from __future__ import annotations

from django.http import Http404, JsonResponse
from django.views.decorators.http import require_GET

from apps.orders.models import Order
from apps.orders.selectors import get_order_by_code
from apps.orders.serializers import serialize_history, serialize_item
from apps.orders.transitions import is_terminal
from apps.common.money import money_payload
from apps.tenants.serializers import serialize_tenant

POLL_INTERVAL_SECONDS = 5

TRACK_FLOW: list[tuple[str, str]] = [
    (Order.STATUS_PENDING, "Pedido recebido"),
    (Order.STATUS_PREPARING, "Em preparo"),
    (Order.STATUS_DONE, "Pedido concluído"),
]
TRACK_EXTRA_LABELS: dict[str, str] = {
    Order.STATUS_CANCELED: "Pedido cancelado",
}
TRACK_INDEX = {status: idx for idx, (status, _label) in enumerate(TRACK_FLOW)}


def _status_label(status: str) -> str:
    for value, label in TRACK_FLOW:
        if value == status:
            return label
    return TRACK_EXTRA_LABELS.get(status, status)


def _steps(order: Order) -> list[dict]:
    reached = {entry.status: entry.created_at for entry in order.history.all()}
    current = TRACK_INDEX.get(order.status)
    steps = []
    for idx, (status, label) in enumerate(TRACK_FLOW):
        at = reached.get(status)
        steps.append({
            "status": status,
            "label": label,
            "done": current is not None and idx <= current,
            "current": idx == current,
            "at": at.isoformat() if at else None,
        })
    return steps


@require_GET
def track_order(request, code: str):
    order = get_order_by_code(code, tenant__is_active=True)
    if order is None:
        raise Http404()
    terminal = is_terminal(order.status)
    return JsonResponse({
        "tenant": serialize_tenant(order.tenant),
        "order": {
            "code": order.code,
            "status": order.status,
            "status_label": _status_label(order.status),
            "terminal": terminal,
            "canceled": order.status == Order.STATUS_CANCELED,
            "created_at": order.created_at.isoformat(),
            "items": [serialize_item(i) for i in order.items.all()],
            "subtotal": money_payload(order.subtotal),
            "delivery_fee": money_payload(order.delivery_fee),
            "total": money_payload(order.total),
            "history": [serialize_history(h) for h in order.history.all()],
            "steps": _steps(order),
        },
        "poll": not terminal,
        "poll_interval_seconds": POLL_INTERVAL_SECONDS,
    })

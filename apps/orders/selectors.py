from __future__ import annotations

from datetime import timedelta
from decimal import Decimal

from django.db.models import Count, DecimalField, Q, QuerySet, Sum, Value
from django.db.models.functions import Coalesce
from django.utils import timezone

from apps.common.codes import normalize_code

from .models import Customer, Order

RECENT_LIMIT = 5
REVENUE_DAYS = 7
STATUS_ALL = "ALL"

_ZERO = Value(Decimal("0.00"), output_field=DecimalField(max_digits=12, decimal_places=2))


def orders_for_tenant(tenant) -> QuerySet:
    return Order.objects.filter(tenant=tenant).select_related("customer").order_by("-created_at")


def filter_orders(qs: QuerySet, search: str = "", status: str = "") -> QuerySet:
    """Narrow orders by code/customer-name substring and an exact status (ALL or empty means any)."""
    needle = (search or "").strip()
    if needle:
        code_needle = normalize_code(needle)
        qs = qs.filter(Q(code__icontains=code_needle) | Q(customer__name__icontains=needle))
    status = (status or "").strip().upper()
    if status and status != STATUS_ALL:
        qs = qs.filter(status=status)
    return qs


def get_order_by_code(code: str, **filters) -> Order | None:
    normalized = normalize_code(code)
    if not normalized:
        return None
    return (
        Order.objects.filter(code=normalized, **filters)
        .select_related("tenant", "customer")
        .first()
    )


def dashboard_summary(tenant) -> dict:
    orders = Order.objects.filter(tenant=tenant)
    counts = {value: 0 for value, _label in Order.STATUS_CHOICES}
    for row in orders.values("status").annotate(n=Count("id")):
        counts[row["status"]] = row["n"]
    done = orders.filter(status=Order.STATUS_DONE)
    revenue = done.aggregate(total=Coalesce(Sum("total"), _ZERO))["total"]

    today = timezone.localdate()
    start = today - timedelta(days=REVENUE_DAYS - 1)
    by_day = {start + timedelta(days=i): Decimal("0.00") for i in range(REVENUE_DAYS)}
    since = timezone.now() - timedelta(days=REVENUE_DAYS + 1)
    for created_at, total in done.filter(created_at__gte=since).values_list("created_at", "total"):
        day = timezone.localtime(created_at).date()
        if day in by_day:
            by_day[day] += total

    return {
        "counts": counts,
        "total_orders": sum(counts.values()),
        "revenue": revenue,
        "recent": list(orders_for_tenant(tenant)[:RECENT_LIMIT]),
        "revenue_by_day": sorted(by_day.items()),
    }


def customers_for_tenant(tenant, search: str = "") -> QuerySet:
    qs = Customer.objects.filter(tenant=tenant)
    needle = (search or "").strip()
    if needle:
        qs = qs.filter(Q(name__icontains=needle) | Q(phone__icontains=needle))
    return qs.annotate(
        order_count=Count("orders"),
        total_spent=Coalesce(Sum("orders__total", filter=Q(orders__status=Order.STATUS_DONE)), _ZERO),
    ).order_by("-created_at")

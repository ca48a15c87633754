from __future__ import annotations

import logging

from django.db import transaction
from django.utils import timezone

from .models import Order, OrderStatusHistory

logger = logging.getLogger(__name__)

ALLOWED_TRANSITIONS: dict[str, frozenset[str]] = {
    Order.STATUS_PENDING: frozenset({Order.STATUS_PREPARING, Order.STATUS_CANCELED}),
    Order.STATUS_PREPARING: frozenset({Order.STATUS_DONE, Order.STATUS_CANCELED}),
    Order.STATUS_DONE: frozenset(),
    Order.STATUS_CANCELED: frozenset(),
}

# Order used when presenting the next actions to staff
_ACTION_ORDER = [Order.STATUS_PREPARING, Order.STATUS_DONE, Order.STATUS_CANCELED]


class InvalidTransition(Exception):
    def __init__(self, current: str, target: str):
        super().__init__(f"{current} -> {target} not allowed")
        self.current = current
        self.target = target


class StatusConflict(Exception):
    def __init__(self, expected: str, actual: str | None):
        super().__init__(f"expected {expected}, found {actual}")
        self.expected = expected
        self.actual = actual


def available_transitions(status: str) -> list[str]:
    allowed = ALLOWED_TRANSITIONS.get(status, frozenset())
    return [s for s in _ACTION_ORDER if s in allowed]


def is_terminal(status: str) -> bool:
    return not ALLOWED_TRANSITIONS.get(status)


def transition_order(order: Order, *, to_status: str, expected_status: str, source: str = "admin") -> Order:
    """Move an order along the lifecycle with a compare-and-swap write.

    The update only applies while the stored status still equals
    `expected_status`; a concurrent change raises StatusConflict and leaves
    the row untouched.
    """
    if to_status not in ALLOWED_TRANSITIONS.get(expected_status, frozenset()):
        logger.warning(
            "Rejected transition order_id=%s %s -> %s", order.id, expected_status, to_status
        )
        raise InvalidTransition(expected_status, to_status)

    with transaction.atomic():
        updated = Order.objects.filter(pk=order.pk, status=expected_status).update(
            status=to_status, updated_at=timezone.now()
        )
        if updated != 1:
            actual = Order.objects.filter(pk=order.pk).values_list("status", flat=True).first()
            logger.warning(
                "Status conflict order_id=%s expected=%s actual=%s target=%s",
                order.id, expected_status, actual, to_status,
            )
            raise StatusConflict(expected_status, actual)
        OrderStatusHistory.objects.create(order=order, status=to_status, source=source)

    order.refresh_from_db()
    logger.info("Order status changed order_id=%s %s -> %s source=%s", order.id, expected_status, to_status, source)
    return order

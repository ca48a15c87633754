from __future__ import annotations

from typing import Any

from apps.common.money import money_payload

from .cart import Cart, CartLine
from .models import Customer, Order, OrderItem, OrderStatusHistory
from .transitions import available_transitions, is_terminal


def serialize_cart_line(line: CartLine) -> dict[str, Any]:
    return {
        "product_id": line.product_id,
        "name": line.name,
        "price": money_payload(line.price),
        "image_url": line.image_url or None,
        "quantity": line.quantity,
        "line_total": money_payload(line.line_total),
    }


def serialize_cart(cart: Cart) -> dict[str, Any]:
    return {
        "items": [serialize_cart_line(line) for line in cart.items],
        "item_count": cart.item_count,
        "total": money_payload(cart.total),
    }


def serialize_item(item: OrderItem) -> dict[str, Any]:
    return {
        "product_id": str(item.product_id) if item.product_id else None,
        "name": item.product_name,
        "qty": item.qty,
        "unit_price": money_payload(item.unit_price),
        "total": money_payload(item.total),
    }


def serialize_history(entry: OrderStatusHistory) -> dict[str, Any]:
    return {
        "status": entry.status,
        "label": entry.get_status_display(),
        "source": entry.source,
        "at": entry.created_at.isoformat(),
    }


def serialize_customer(customer: Customer) -> dict[str, Any]:
    data = {
        "id": str(customer.id),
        "name": customer.name,
        "phone": customer.phone,
        "address": customer.address,
        "created_at": customer.created_at.isoformat(),
    }
    if hasattr(customer, "order_count"):
        data["order_count"] = customer.order_count
        data["total_spent"] = money_payload(customer.total_spent)
    return data


def serialize_order(order: Order, *, detail: bool = False) -> dict[str, Any]:
    data = {
        "id": str(order.id),
        "code": order.code,
        "status": order.status,
        "status_label": order.status_label,
        "terminal": is_terminal(order.status),
        "channel": order.channel,
        "customer_name": order.customer.name if order.customer else None,
        "subtotal": money_payload(order.subtotal),
        "delivery_fee": money_payload(order.delivery_fee),
        "total": money_payload(order.total),
        "created_at": order.created_at.isoformat(),
    }
    if detail:
        data.update({
            "notes": order.notes,
            "customer": serialize_customer(order.customer) if order.customer else None,
            "items": [serialize_item(i) for i in order.items.all()],
            "history": [serialize_history(h) for h in order.history.all()],
            "available_transitions": available_transitions(order.status),
        })
    return data

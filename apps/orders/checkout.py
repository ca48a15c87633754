from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from django import forms
from django.core.exceptions import ValidationError
from django.db import transaction

from apps.catalog.models import Product
from apps.common.money import to_money
from apps.common.phone import to_e164
from apps.tenants.models import StoreSettings, Tenant

from .cart import Cart
from .models import Customer, Order, OrderItem

logger = logging.getLogger(__name__)


class EmptyCartError(Exception):
    pass


class CheckoutForm(forms.Form):
    name = forms.CharField(max_length=160)
    phone = forms.CharField(max_length=40)
    address = forms.CharField(max_length=255)
    notes = forms.CharField(required=False, max_length=1000)

    def _required_text(self, field: str, message: str) -> str:
        value = (self.cleaned_data.get(field) or "").strip()
        if not value:
            raise ValidationError(message)
        return value

    def clean_name(self):
        return self._required_text("name", "Informe seu nome.")

    def clean_address(self):
        return self._required_text("address", "Informe o endereço de entrega.")

    def clean_phone(self):
        raw = self._required_text("phone", "Informe seu telefone.")
        try:
            return to_e164(raw)
        except ValueError:
            raise ValidationError("Telefone inválido. Use o formato (11) 99999-9999.")

    def clean_notes(self):
        return (self.cleaned_data.get("notes") or "").strip()


@dataclass
class CheckoutSummary:
    lines: list
    subtotal: Decimal
    delivery_fee: Decimal
    total: Decimal


def summarize(tenant: Tenant, cart: Cart) -> CheckoutSummary:
    fee = to_money(StoreSettings.for_tenant(tenant).delivery_fee)
    subtotal = cart.total
    return CheckoutSummary(lines=cart.items, subtotal=subtotal, delivery_fee=fee, total=to_money(subtotal + fee))


def place_order(*, tenant: Tenant, cart: Cart, details: dict) -> Order:
    """Turn the cart into a persisted order.

    Customer, Order and OrderItems are written in one transaction; the cart is
    cleared only after the transaction commits, so any failure leaves both the
    database and the cart untouched.
    """
    summary = summarize(tenant, cart)
    if not summary.lines:
        raise EmptyCartError()

    product_ids = [line.product_id for line in summary.lines]
    existing = {
        str(pk) for pk in Product.objects.filter(tenant=tenant, pk__in=product_ids).values_list("pk", flat=True)
    }

    with transaction.atomic():
        customer = Customer.objects.create(
            tenant=tenant,
            name=details["name"],
            phone=details["phone"],
            address=details["address"],
        )
        order = Order(
            tenant=tenant,
            customer=customer,
            channel="WEB",
            status=Order.STATUS_PENDING,
            subtotal=summary.subtotal,
            delivery_fee=summary.delivery_fee,
            total=summary.total,
            notes=details.get("notes", ""),
        )
        order._status_change_source = "checkout"
        order.save()
        for line in summary.lines:
            OrderItem.objects.create(
                order=order,
                product_id=line.product_id if line.product_id in existing else None,
                product_name=line.name,
                qty=line.quantity,
                unit_price=line.price,
                total=line.line_total,
            )

    cart.clear()
    logger.info(
        "Order placed tenant_id=%s order_id=%s code=%s items=%s total=%s",
        tenant.id, order.id, order.code, len(summary.lines), order.total,
    )
    return order

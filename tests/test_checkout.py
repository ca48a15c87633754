from decimal import Decimal

import pytest
from django.db import DatabaseError
from django.test import Client
from django.urls import reverse

from apps.orders.cart import Cart, cart_key
from apps.orders.checkout import EmptyCartError, place_order
from apps.orders.models import Customer, Order, OrderItem, OrderStatusHistory

CHECKOUT_DATA = {
    "name": "Ana Souza",
    "phone": "(11) 98765-1234",
    "address": "Rua das Flores, 100",
    "notes": "Sem cebola",
}


def _add(client, tenant, product, times=1):
    for _ in range(times):
        r = client.post(f"/r/{tenant.slug}/cart/add", {"product_id": str(product.id)})
        assert r.status_code == 200


@pytest.mark.django_db
def test_checkout_happy_path(client, tenant, make_product):
    burger = make_product("X-Burger", "10.00")
    juice = make_product("Suco", "5.50")
    _add(client, tenant, burger, 2)
    _add(client, tenant, juice)

    summary = client.get(f"/r/{tenant.slug}/checkout").json()
    assert summary["empty"] is False
    assert summary["subtotal"]["amount"] == "25.50"
    assert summary["total"]["amount"] == "30.50"

    r = client.post(f"/r/{tenant.slug}/checkout", CHECKOUT_DATA)
    assert r.status_code == 201
    data = r.json()
    order = Order.objects.get(code=data["order"]["code"])
    assert order.status == Order.STATUS_PENDING
    assert order.channel == "WEB"
    assert order.subtotal == Decimal("25.50")
    assert order.delivery_fee == Decimal("5.00")
    assert order.total == Decimal("30.50")
    assert order.notes == "Sem cebola"
    assert order.customer.phone == "+5511987651234"
    assert data["confirmation_url"] == reverse("orders_public:confirmation", args=[tenant.slug, order.code])
    assert data["tracking_url"] == f"https://pedidos.example.com/track/{order.code}"

    items = {i.product_name: i for i in order.items.all()}
    assert items["X-Burger"].qty == 2
    assert items["X-Burger"].total == Decimal("20.00")
    assert items["Suco"].unit_price == Decimal("5.50")
    assert list(order.history.values_list("status", flat=True)) == ["PENDING"]

    assert cart_key(tenant.slug) not in client.session


@pytest.mark.django_db
def test_checkout_empty_cart_writes_nothing(client, tenant):
    assert client.get(f"/r/{tenant.slug}/checkout").json()["empty"] is True
    r = client.post(f"/r/{tenant.slug}/checkout", CHECKOUT_DATA)
    assert r.status_code == 422
    assert r.json()["flash"]["title"] == "Carrinho vazio"
    assert Order.objects.count() == 0
    assert Customer.objects.count() == 0


@pytest.mark.django_db
@pytest.mark.parametrize("field", ["name", "phone", "address"])
def test_checkout_requires_fields(client, tenant, make_product, field):
    _add(client, tenant, make_product())
    payload = dict(CHECKOUT_DATA, **{field: "   "})
    r = client.post(f"/r/{tenant.slug}/checkout", payload)
    assert r.status_code == 422
    assert field in r.json()["errors"]
    assert Order.objects.count() == 0
    assert Cart(client.session, tenant.slug).item_count == 1


@pytest.mark.django_db
def test_checkout_rejects_invalid_phone(client, tenant, make_product):
    _add(client, tenant, make_product())
    r = client.post(f"/r/{tenant.slug}/checkout", dict(CHECKOUT_DATA, phone="123"))
    assert r.status_code == 422
    assert Customer.objects.count() == 0


@pytest.mark.django_db
def test_snapshot_survives_catalog_changes(client, tenant, make_product):
    product = make_product("X-Burger", "10.00")
    _add(client, tenant, product)
    product.price = Decimal("99.00")
    product.active = False
    product.save()

    r = client.post(f"/r/{tenant.slug}/checkout", CHECKOUT_DATA)
    assert r.status_code == 201
    item = OrderItem.objects.get()
    assert item.unit_price == Decimal("10.00")
    assert item.product_id == product.id

    product.price = Decimal("1.00")
    product.save()
    item.refresh_from_db()
    assert item.unit_price == Decimal("10.00")


@pytest.mark.django_db
def test_hidden_product_cannot_be_added(client, tenant, make_product):
    hidden = make_product(published=False)
    r = client.post(f"/r/{tenant.slug}/cart/add", {"product_id": str(hidden.id)})
    assert r.status_code == 404
    assert Cart(client.session, tenant.slug).is_empty()


@pytest.mark.django_db
def test_cart_add_rejects_garbage_id(client, tenant):
    assert client.post(f"/r/{tenant.slug}/cart/add", {"product_id": "nope"}).status_code == 400


@pytest.mark.django_db
def test_cart_endpoints(client, tenant, make_product):
    product = make_product("X-Burger", "10.00")
    _add(client, tenant, product)
    r = client.post(f"/r/{tenant.slug}/cart/update", {"product_id": str(product.id), "quantity": "3"})
    assert r.json()["cart"]["total"]["amount"] == "30.00"
    r = client.post(f"/r/{tenant.slug}/cart/update", {"product_id": str(product.id), "quantity": "0"})
    assert r.json()["cart"]["items"] == []
    _add(client, tenant, product)
    r = client.post(f"/r/{tenant.slug}/cart/remove", {"product_id": str(product.id)})
    assert r.json()["cart"]["item_count"] == 0
    _add(client, tenant, product)
    r = client.post(f"/r/{tenant.slug}/cart/clear")
    assert r.json()["cart"]["item_count"] == 0
    assert client.post(f"/r/{tenant.slug}/cart/update", {"product_id": str(product.id)}).status_code == 400


@pytest.mark.django_db
def test_failure_mid_checkout_rolls_back(tenant, make_product, monkeypatch):
    store = {}
    cart = Cart(store, tenant.slug)
    cart.add(make_product("X-Burger", "10.00"))
    cart.add(make_product("Suco", "5.50"))

    def boom(*args, **kwargs):
        raise RuntimeError("db down")

    monkeypatch.setattr(OrderItem.objects, "create", boom)
    details = {"name": "Ana", "phone": "+5511987651234", "address": "Rua A", "notes": ""}
    with pytest.raises(RuntimeError):
        place_order(tenant=tenant, cart=cart, details=details)

    assert Customer.objects.count() == 0
    assert Order.objects.count() == 0
    assert OrderStatusHistory.objects.count() == 0
    assert cart.item_count == 2


@pytest.mark.django_db
def test_checkout_write_failure_returns_error_and_keeps_cart(client, tenant, make_product, monkeypatch):
    _add(client, tenant, make_product("X-Burger", "10.00"), 2)

    def boom(*args, **kwargs):
        raise DatabaseError("db down")

    monkeypatch.setattr(OrderItem.objects, "create", boom)
    r = client.post(f"/r/{tenant.slug}/checkout", CHECKOUT_DATA)
    assert r.status_code == 503
    assert r.json()["flash"]["title"] == "Não foi possível enviar o pedido"
    assert Order.objects.count() == 0
    assert Customer.objects.count() == 0
    assert client.get(f"/r/{tenant.slug}/cart").json()["cart"]["item_count"] == 2

    monkeypatch.undo()
    assert client.post(f"/r/{tenant.slug}/checkout", CHECKOUT_DATA).status_code == 201


@pytest.mark.django_db
def test_oversized_quantity_is_rejected_and_checkout_still_works(client, tenant, make_product):
    burger = make_product("X-Burger", "10.00")
    _add(client, tenant, burger)

    r = client.post(f"/r/{tenant.slug}/cart/update", {"product_id": str(burger.id), "quantity": str(10**20)})
    assert r.status_code == 422
    assert r.json()["flash"]["title"] == "Limite do carrinho"
    assert client.get(f"/r/{tenant.slug}/cart").json()["cart"]["item_count"] == 1

    r = client.post(f"/r/{tenant.slug}/cart/update", {"product_id": str(burger.id), "quantity": "99"})
    assert r.status_code == 200
    assert client.post(f"/r/{tenant.slug}/cart/add", {"product_id": str(burger.id)}).status_code == 422

    r = client.post(f"/r/{tenant.slug}/checkout", CHECKOUT_DATA)
    assert r.status_code == 201
    assert Order.objects.get().items.get().qty == 99


@pytest.mark.django_db
def test_place_order_on_empty_cart_raises(tenant):
    with pytest.raises(EmptyCartError):
        place_order(tenant=tenant, cart=Cart({}, tenant.slug), details={})


@pytest.mark.django_db
def test_fee_defaults_to_zero_without_settings(other_tenant, make_product):
    cart = Cart({}, other_tenant.slug)
    cart.add(make_product("Pizza", "40.00", owner=other_tenant))
    order = place_order(
        tenant=other_tenant,
        cart=cart,
        details={"name": "Ana", "phone": "+5511987651234", "address": "Rua A", "notes": ""},
    )
    assert order.delivery_fee == Decimal("0.00")
    assert order.total == Decimal("40.00")


@pytest.mark.django_db
def test_confirmation_is_scoped_to_tenant(client, tenant, other_tenant, make_order):
    order = make_order()
    r = client.get(f"/r/{tenant.slug}/confirmation/{order.code.lower()}")
    assert r.status_code == 200
    assert r.json()["order"]["items"][0]["name"] == "X-Burger"
    assert client.get(f"/r/{other_tenant.slug}/confirmation/{order.code}").status_code == 404


@pytest.mark.django_db
def test_order_totals_match_items(client, tenant, make_product):
    burger = make_product("X-Burger", "10.00")
    combo = make_product("Combo Família", "25.00")
    _add(client, tenant, burger, 2)
    _add(client, tenant, combo)
    assert client.get(f"/r/{tenant.slug}/cart").json()["cart"]["total"]["amount"] == "45.00"

    r = client.post(f"/r/{tenant.slug}/checkout", CHECKOUT_DATA)
    order = Order.objects.get(code=r.json()["order"]["code"])
    assert (order.subtotal, order.delivery_fee, order.total) == (Decimal("45.00"), Decimal("5.00"), Decimal("50.00"))
    items = list(order.items.all())
    assert len(items) == 2
    assert all(i.total == i.unit_price * i.qty for i in items)
    assert sum(i.total for i in items) == order.subtotal


@pytest.mark.django_db
def test_deactivated_product_keeps_cart_line(client, user, tenant, make_product):
    product = make_product("X-Burger", "10.00")
    _add(client, tenant, product)
    staff_client = Client()
    staff_client.force_login(user)
    staff_client.post(f"/admin/menu/products/{product.id}/toggle")

    cart = client.get(f"/r/{tenant.slug}/cart").json()["cart"]
    assert cart["items"][0]["name"] == "X-Burger"
    assert cart["items"][0]["price"]["amount"] == "10.00"
    assert client.get(f"/r/{tenant.slug}").json()["products"] == []

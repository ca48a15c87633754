from decimal import Decimal

import pytest
from django.contrib.auth import get_user_model
from django.core.cache import cache
from django.utils import timezone

from apps.catalog.models import Category, Product
from apps.orders.models import Customer, Order, OrderItem
from apps.tenants.models import StoreSettings, Tenant

User = get_user_model()


@pytest.fixture(autouse=True)
def _clear_cache():
    # rate-limit counters live in the cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def tenant(db):
    t = Tenant.objects.create(slug="cantina-da-praca", name="Cantina da Praça", phone="+5511987651234")
    StoreSettings.objects.create(tenant=t, delivery_fee=Decimal("5.00"))
    return t


@pytest.fixture
def other_tenant(db):
    return Tenant.objects.create(slug="pizzaria-bella", name="Pizzaria Bella")


@pytest.fixture
def user(tenant):
    return User.objects.create_user(
        username="u_owner", email="dono@example.com", password="pwd123", name="Dona Maria", role="OWNER", tenant=tenant
    )


@pytest.fixture
def staff_client(client, user):
    client.force_login(user)
    return client


@pytest.fixture
def category(tenant):
    return Category.objects.create(tenant=tenant, name="Lanches", sort_order=0)


@pytest.fixture
def make_product(tenant):
    def _make_product(name="X-Burger", price="10.00", *, category=None, active=True, published=True, featured=False, owner=None):
        return Product.objects.create(
            tenant=owner or tenant,
            category=category,
            name=name,
            price=Decimal(price),
            active=active,
            featured=featured,
            published_at=timezone.now() if published else None,
        )

    return _make_product


@pytest.fixture
def make_order(tenant):
    def _make_order(*, status=Order.STATUS_PENDING, total="30.00", customer_name="João Cliente", owner=None):
        owner = owner or tenant
        customer = Customer.objects.create(
            tenant=owner, name=customer_name, phone="+5511987651234", address="Rua das Flores, 100"
        )
        order = Order.objects.create(
            tenant=owner,
            customer=customer,
            status=status,
            subtotal=Decimal(total) - Decimal("5.00"),
            delivery_fee=Decimal("5.00"),
            total=Decimal(total),
        )
        OrderItem.objects.create(
            order=order,
            product=None,
            product_name="X-Burger",
            qty=1,
            unit_price=Decimal(total) - Decimal("5.00"),
            total=Decimal(total) - Decimal("5.00"),
        )
        return order

    return _make_order

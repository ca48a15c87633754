from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from django.http import Http404

from apps.tenants.models import StoreSettings, Tenant
from apps.tenants.selectors import get_public_tenant

from .models import Banner, Category, Partnership, Product

RELATED_LIMIT = 4


@dataclass
class Storefront:
    tenant: Tenant
    settings: StoreSettings
    categories: list[Category]
    products: list[Product]
    banners: list[Banner]
    partnerships: list[Partnership]


def visible_products(tenant: Tenant):
    return Product.objects.visible().filter(tenant=tenant).select_related("category")


def load_storefront(slug: str) -> Storefront:
    """Everything a public storefront renders, already filtered for visibility."""
    tenant = get_public_tenant(slug)
    return Storefront(
        tenant=tenant,
        settings=StoreSettings.for_tenant(tenant),
        categories=list(Category.objects.filter(tenant=tenant, published=True).order_by("sort_order", "created_at")),
        products=list(visible_products(tenant).order_by("-featured", "name")),
        banners=list(Banner.objects.filter(tenant=tenant, published=True).order_by("sort_order", "created_at")),
        partnerships=list(Partnership.objects.filter(tenant=tenant, published=True).order_by("sort_order", "created_at")),
    )


def filter_products(products: Iterable[Product], search: str = "", category_id=None) -> list[Product]:
    """Name substring match (case-insensitive) combined with an optional category."""
    needle = (search or "").strip().lower()
    wanted = str(category_id) if category_id else None
    out = []
    for product in products:
        if needle and needle not in product.name.lower():
            continue
        if wanted and str(product.category_id) != wanted:
            continue
        out.append(product)
    return out


def get_visible_product(tenant: Tenant, product_id) -> Product:
    product = visible_products(tenant).filter(pk=product_id).first()
    if product is None:
        raise Http404()
    return product


def related_products(product: Product, limit: int = RELATED_LIMIT) -> list[Product]:
    if product.category_id is None:
        return []
    qs = (
        visible_products(product.tenant)
        .filter(category_id=product.category_id)
        .exclude(pk=product.pk)
        .order_by("-featured", "name")
    )
    return list(qs[:limit])

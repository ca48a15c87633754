from __future__ import annotations

from typing import Any

from apps.common.money import money_payload

from .models import Banner, Category, Partnership, Product


def serialize_category(category: Category) -> dict[str, Any]:
    return {
        "id": str(category.id),
        "name": category.name,
        "published": category.published,
        "sort_order": category.sort_order,
    }


def serialize_product(product: Product, *, admin: bool = False) -> dict[str, Any]:
    data = {
        "id": str(product.id),
        "name": product.name,
        "description": product.description,
        "price": money_payload(product.price),
        "image_url": product.image_url or None,
        "category_id": str(product.category_id) if product.category_id else None,
        "featured": product.featured,
        "stock": product.stock,
    }
    if admin:
        data.update({
            "active": product.active,
            "published_at": product.published_at.isoformat() if product.published_at else None,
            "visible": product.is_visible,
        })
    return data


def serialize_banner(banner: Banner) -> dict[str, Any]:
    return {
        "id": str(banner.id),
        "title": banner.title,
        "image_url": banner.image_url,
        "link": banner.link or None,
        "published": banner.published,
        "sort_order": banner.sort_order,
    }


def serialize_partnership(partnership: Partnership) -> dict[str, Any]:
    return {
        "id": str(partnership.id),
        "name": partnership.name,
        "logo_url": partnership.logo_url or None,
        "external_link": partnership.external_link or None,
        "published": partnership.published,
        "sort_order": partnership.sort_order,
    }

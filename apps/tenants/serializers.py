from __future__ import annotations

from typing import Any

from apps.common.money import money_payload

from .models import StoreSettings, Tenant, WEEKDAYS


def serialize_tenant(tenant: Tenant) -> dict[str, Any]:
    return {
        "id": str(tenant.id),
        "slug": tenant.slug,
        "name": tenant.name,
        "phone": tenant.phone,
        "address": tenant.address,
        "logo_url": tenant.logo_url or None,
    }


def serialize_settings(settings_obj: StoreSettings) -> dict[str, Any]:
    hours = settings_obj.opening_hours or {}
    return {
        "is_open": settings_obj.is_open,
        "delivery_fee": money_payload(settings_obj.delivery_fee),
        "pickup_enabled": settings_obj.pickup_enabled,
        "opening_hours": {key: hours[key] for key, _label in WEEKDAYS if key in hours},
        "theme_primary": settings_obj.theme_primary or None,
        "theme_secondary": settings_obj.theme_secondary or None,
    }

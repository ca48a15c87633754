from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.db.models.functions import Lower

from apps.common.models import BaseModel


class Tenant(BaseModel):
    PLAN_CHOICES = [
        ("FREE", "Free"),
        ("PRO", "Pro"),
        ("ENTERPRISE", "Enterprise"),
    ]

    slug = models.SlugField(max_length=64)
    name = models.CharField(max_length=160)
    phone = models.CharField(max_length=40, blank=True)
    address = models.CharField(max_length=255, blank=True)
    logo_url = models.URLField(max_length=500, blank=True)
    plan = models.CharField(max_length=12, choices=PLAN_CHOICES, default="FREE")
    is_active = models.BooleanField(default=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(Lower("slug"), name="uniq_tenant_slug_lower"),
        ]

    def __str__(self) -> str:
        return self.name

    def save(self, *args, **kwargs):
        if self.slug:
            self.slug = self.slug.strip().lower()
        super().save(*args, **kwargs)


WEEKDAYS: list[tuple[str, str]] = [
    ("monday", "Segunda"),
    ("tuesday", "Terça"),
    ("wednesday", "Quarta"),
    ("thursday", "Quinta"),
    ("friday", "Sexta"),
    ("saturday", "Sábado"),
    ("sunday", "Domingo"),
]


class StoreSettings(BaseModel):
    tenant = models.OneToOneField(Tenant, on_delete=models.CASCADE, related_name="settings")
    is_open = models.BooleanField(default=True)
    delivery_fee = models.DecimalField(
        max_digits=10, decimal_places=2, default=Decimal("0.00"), validators=[MinValueValidator(Decimal("0.00"))]
    )
    pickup_enabled = models.BooleanField(default=True)
    opening_hours = models.JSONField(default=dict, blank=True)
    theme_primary = models.CharField(max_length=20, blank=True)
    theme_secondary = models.CharField(max_length=20, blank=True)

    class Meta:
        verbose_name_plural = "store settings"

    @classmethod
    def for_tenant(cls, tenant: Tenant) -> "StoreSettings":
        """Return the stored settings, or unsaved defaults when the tenant has none yet."""
        found = cls.objects.filter(tenant=tenant).first()
        return found or cls(tenant=tenant)

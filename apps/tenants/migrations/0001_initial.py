import uuid
from decimal import Decimal

import django.core.validators
import django.db.models.deletion
import django.db.models.functions.text
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Tenant",
            fields=[
                ("id", models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("slug", models.SlugField(max_length=64)),
                ("name", models.CharField(max_length=160)),
                ("phone", models.CharField(blank=True, max_length=40)),
                ("address", models.CharField(blank=True, max_length=255)),
                ("logo_url", models.URLField(blank=True, max_length=500)),
                ("plan", models.CharField(choices=[("FREE", "Free"), ("PRO", "Pro"), ("ENTERPRISE", "Enterprise")], default="FREE", max_length=12)),
                ("is_active", models.BooleanField(default=True)),
            ],
        ),
        migrations.AddConstraint(
            model_name="tenant",
            constraint=models.UniqueConstraint(django.db.models.functions.text.Lower("slug"), name="uniq_tenant_slug_lower"),
        ),
        migrations.CreateModel(
            name="StoreSettings",
            fields=[
                ("id", models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("is_open", models.BooleanField(default=True)),
                ("delivery_fee", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal("0.00"))])),
                ("pickup_enabled", models.BooleanField(default=True)),
                ("opening_hours", models.JSONField(blank=True, default=dict)),
                ("theme_primary", models.CharField(blank=True, max_length=20)),
                ("theme_secondary", models.CharField(blank=True, max_length=20)),
                ("tenant", models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name="settings", to="tenants.tenant")),
            ],
            options={
                "verbose_name_plural": "store settings",
            },
        ),
    ]

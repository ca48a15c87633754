import uuid
from decimal import Decimal

import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("tenants", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Category",
            fields=[
                ("id", models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=120)),
                ("published", models.BooleanField(default=True)),
                ("sort_order", models.IntegerField(default=0)),
                ("tenant", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="categories", to="tenants.tenant")),
            ],
            options={
                "ordering": ["sort_order", "created_at"],
                "verbose_name_plural": "categories",
                "indexes": [models.Index(fields=["tenant", "published", "sort_order"], name="catalog_cat_pub_idx")],
            },
        ),
        migrations.CreateModel(
            name="Product",
            fields=[
                ("id", models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=160)),
                ("description", models.TextField(blank=True)),
                ("price", models.DecimalField(decimal_places=2, max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal("0.00"))])),
                ("image_url", models.URLField(blank=True, max_length=500)),
                ("stock", models.IntegerField(blank=True, null=True)),
                ("active", models.BooleanField(default=True)),
                ("featured", models.BooleanField(default=False)),
                ("published_at", models.DateTimeField(blank=True, null=True)),
                ("category", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="products", to="catalog.category")),
                ("tenant", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="products", to="tenants.tenant")),
            ],
            options={
                "ordering": ["name"],
                "indexes": [models.Index(fields=["tenant", "active", "published_at"], name="catalog_prod_vis_idx")],
            },
        ),
        migrations.CreateModel(
            name="Banner",
            fields=[
                ("id", models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("title", models.CharField(max_length=160)),
                ("image_url", models.URLField(max_length=500)),
                ("link", models.CharField(blank=True, max_length=500)),
                ("published", models.BooleanField(default=True)),
                ("sort_order", models.IntegerField(default=0)),
                ("tenant", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="banners", to="tenants.tenant")),
            ],
            options={
                "ordering": ["sort_order", "created_at"],
                "indexes": [models.Index(fields=["tenant", "published", "sort_order"], name="catalog_banner_pub_idx")],
            },
        ),
        migrations.CreateModel(
            name="Partnership",
            fields=[
                ("id", models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=160)),
                ("logo_url", models.URLField(blank=True, max_length=500)),
                ("external_link", models.CharField(blank=True, max_length=500)),
                ("published", models.BooleanField(default=True)),
                ("sort_order", models.IntegerField(default=0)),
                ("tenant", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="partnerships", to="tenants.tenant")),
            ],
            options={
                "ordering": ["sort_order", "created_at"],
                "indexes": [models.Index(fields=["tenant", "published", "sort_order"], name="catalog_partner_pub_idx")],
            },
        ),
    ]

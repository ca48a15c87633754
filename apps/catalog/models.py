from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone

from apps.common.models import BaseModel


class Category(BaseModel):
    tenant = models.ForeignKey("tenants.Tenant", on_delete=models.CASCADE, related_name="categories")
    name = models.CharField(max_length=120)
    published = models.BooleanField(default=True)
    sort_order = models.IntegerField(default=0)

    class Meta:
        ordering = ["sort_order", "created_at"]
        indexes = [models.Index(fields=["tenant", "published", "sort_order"], name="catalog_cat_pub_idx")]
        verbose_name_plural = "categories"

    def __str__(self) -> str:
        return self.name


class ProductQuerySet(models.QuerySet):
    def visible(self):
        """Products a storefront may show: active and already published."""
        return self.filter(active=True, published_at__isnull=False)


class Product(BaseModel):
    tenant = models.ForeignKey("tenants.Tenant", on_delete=models.CASCADE, related_name="products")
    category = models.ForeignKey(Category, on_delete=models.SET_NULL, null=True, blank=True, related_name="products")
    name = models.CharField(max_length=160)
    description = models.TextField(blank=True)
    price = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(Decimal("0.00"))])
    image_url = models.URLField(max_length=500, blank=True)
    stock = models.IntegerField(null=True, blank=True)
    active = models.BooleanField(default=True)
    featured = models.BooleanField(default=False)
    published_at = models.DateTimeField(null=True, blank=True)

    objects = ProductQuerySet.as_manager()

    class Meta:
        ordering = ["name"]
        indexes = [models.Index(fields=["tenant", "active", "published_at"], name="catalog_prod_vis_idx")]

    def __str__(self) -> str:
        return self.name

    @property
    def is_visible(self) -> bool:
        return self.active and self.published_at is not None

    def set_published(self, publish: bool) -> None:
        # keep the original timestamp when re-publishing an already published product
        if publish and self.published_at is None:
            self.published_at = timezone.now()
        elif not publish:
            self.published_at = None


class Banner(BaseModel):
    tenant = models.ForeignKey("tenants.Tenant", on_delete=models.CASCADE, related_name="banners")
    title = models.CharField(max_length=160)
    image_url = models.URLField(max_length=500)
    link = models.CharField(max_length=500, blank=True)
    published = models.BooleanField(default=True)
    sort_order = models.IntegerField(default=0)

    class Meta:
        ordering = ["sort_order", "created_at"]
        indexes = [models.Index(fields=["tenant", "published", "sort_order"], name="catalog_banner_pub_idx")]


class Partnership(BaseModel):
    tenant = models.ForeignKey("tenants.Tenant", on_delete=models.CASCADE, related_name="partnerships")
    name = models.CharField(max_length=160)
    logo_url = models.URLField(max_length=500, blank=True)
    external_link = models.CharField(max_length=500, blank=True)
    published = models.BooleanField(default=True)
    sort_order = models.IntegerField(default=0)

    class Meta:
        ordering = ["sort_order", "created_at"]
        indexes = [models.Index(fields=["tenant", "published", "sort_order"], name="catalog_partner_pub_idx")]

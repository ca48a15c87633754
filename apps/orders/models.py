from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from apps.common.codes import generate_unique_code
from apps.common.models import BaseModel

ORDER_CODE_LENGTH = 6


class Customer(BaseModel):
    tenant = models.ForeignKey("tenants.Tenant", on_delete=models.CASCADE, related_name="customers")
    name = models.CharField(max_length=160)
    phone = models.CharField(max_length=40)
    address = models.CharField(max_length=255)

    class Meta:
        indexes = [models.Index(fields=["tenant", "created_at"], name="orders_cust_tenant_idx")]

    def __str__(self) -> str:
        return self.name


class Order(BaseModel):
    STATUS_PENDING = "PENDING"
    STATUS_PREPARING = "PREPARING"
    STATUS_DONE = "DONE"
    STATUS_CANCELED = "CANCELED"
    STATUS_CHOICES = [
        (STATUS_PENDING, "Pendente"),
        (STATUS_PREPARING, "Preparando"),
        (STATUS_DONE, "Concluído"),
        (STATUS_CANCELED, "Cancelado"),
    ]
    CHANNEL_CHOICES = [("WEB", "Web"), ("MANUAL", "Manual")]

    tenant = models.ForeignKey("tenants.Tenant", on_delete=models.CASCADE, related_name="orders")
    customer = models.ForeignKey(Customer, on_delete=models.SET_NULL, null=True, blank=True, related_name="orders")
    code = models.CharField(max_length=12, unique=True)
    channel = models.CharField(max_length=8, choices=CHANNEL_CHOICES, default="WEB")
    status = models.CharField(max_length=12, choices=STATUS_CHOICES, default=STATUS_PENDING)
    subtotal = models.DecimalField(max_digits=12, decimal_places=2, validators=[MinValueValidator(Decimal("0.00"))])
    delivery_fee = models.DecimalField(
        max_digits=10, decimal_places=2, default=Decimal("0.00"), validators=[MinValueValidator(Decimal("0.00"))]
    )
    total = models.DecimalField(max_digits=12, decimal_places=2, validators=[MinValueValidator(Decimal("0.00"))])
    notes = models.TextField(blank=True)

    class Meta:
        indexes = [models.Index(fields=["tenant", "status", "created_at"], name="orders_tenant_status_idx")]

    def __str__(self) -> str:
        return f"#{self.code}"

    def save(self, *args, **kwargs):
        is_new = self._state.adding
        source = getattr(self, "_status_change_source", None)
        if not self.code:
            def _exists(code: str) -> bool:
                return type(self).objects.filter(code=code).exists()

            self.code = generate_unique_code(length=ORDER_CODE_LENGTH, exists=_exists)
        super().save(*args, **kwargs)
        if hasattr(self, "_status_change_source"):
            delattr(self, "_status_change_source")
        if is_new:
            OrderStatusHistory.objects.create(order=self, status=self.status, source=source or "initial")

    @property
    def status_label(self) -> str:
        return self.get_status_display()


class OrderItem(BaseModel):
    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name="items")
    product = models.ForeignKey("catalog.Product", on_delete=models.SET_NULL, null=True, blank=True)
    product_name = models.CharField(max_length=160)
    qty = models.PositiveIntegerField(default=1, validators=[MinValueValidator(1)])
    unit_price = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(Decimal("0.00"))])
    total = models.DecimalField(max_digits=12, decimal_places=2, validators=[MinValueValidator(Decimal("0.00"))])

    class Meta:
        ordering = ["created_at"]


class OrderStatusHistory(BaseModel):
    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name="history")
    status = models.CharField(max_length=12, choices=Order.STATUS_CHOICES)
    source = models.CharField(max_length=32, blank=True)

    class Meta:
        indexes = [models.Index(fields=["order", "created_at"], name="orders_history_idx")]
        ordering = ["created_at"]
        verbose_name_plural = "order status history"

from django.contrib import admin

from .models import Customer, Order, OrderItem, OrderStatusHistory


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0
    readonly_fields = ("product", "product_name", "qty", "unit_price", "total")


class OrderStatusHistoryInline(admin.TabularInline):
    model = OrderStatusHistory
    extra = 0
    can_delete = False
    readonly_fields = ("status", "source", "created_at")


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ("code", "tenant", "status", "total", "channel", "created_at")
    list_filter = ("status", "channel")
    search_fields = ("code", "customer__name", "tenant__slug")
    readonly_fields = ("code", "status", "subtotal", "delivery_fee", "total", "created_at", "updated_at")
    inlines = [OrderItemInline, OrderStatusHistoryInline]


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    list_display = ("name", "phone", "tenant", "created_at")
    search_fields = ("name", "phone")

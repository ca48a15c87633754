from django.contrib import admin

from .models import Banner, Category, Partnership, Product


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ("name", "tenant", "published", "sort_order")
    list_filter = ("published",)
    search_fields = ("name", "tenant__name")


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ("name", "tenant", "category", "price", "active", "featured", "published_at")
    list_filter = ("active", "featured")
    search_fields = ("name", "tenant__name", "tenant__slug")
    readonly_fields = ("created_at", "updated_at")


@admin.register(Banner)
class BannerAdmin(admin.ModelAdmin):
    list_display = ("title", "tenant", "published", "sort_order")
    list_filter = ("published",)


@admin.register(Partnership)
class PartnershipAdmin(admin.ModelAdmin):
    list_display = ("name", "tenant", "published", "sort_order")
    list_filter = ("published",)

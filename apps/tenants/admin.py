from django.contrib import admin

from .models import StoreSettings, Tenant


class StoreSettingsInline(admin.StackedInline):
    model = StoreSettings
    can_delete = False
    extra = 0


@admin.register(Tenant)
class TenantAdmin(admin.ModelAdmin):
    list_display = ("name", "slug", "plan", "is_active", "created_at")
    list_filter = ("plan", "is_active")
    search_fields = ("name", "slug", "phone")
    readonly_fields = ("created_at", "updated_at")
    inlines = [StoreSettingsInline]

from django.contrib import admin

from .models import WhatsAppConnection


@admin.register(WhatsAppConnection)
class WhatsAppConnectionAdmin(admin.ModelAdmin):
    list_display = ("tenant", "status", "connected_at", "last_activity")
    list_filter = ("status",)

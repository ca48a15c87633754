from django.db import models

from apps.common.models import BaseModel


class WhatsAppConnection(BaseModel):
    STATUS_DISCONNECTED = "disconnected"
    STATUS_CONNECTING = "connecting"
    STATUS_CONNECTED = "connected"
    STATUS_ERROR = "error"
    STATUS_CHOICES = [
        (STATUS_DISCONNECTED, "Desconectado"),
        (STATUS_CONNECTING, "Conectando"),
        (STATUS_CONNECTED, "Conectado"),
        (STATUS_ERROR, "Erro"),
    ]

    tenant = models.OneToOneField("tenants.Tenant", on_delete=models.CASCADE, related_name="whatsapp")
    status = models.CharField(max_length=16, choices=STATUS_CHOICES, default=STATUS_DISCONNECTED)
    qr_code = models.TextField(blank=True)
    connected_at = models.DateTimeField(null=True, blank=True)
    last_activity = models.DateTimeField(null=True, blank=True)

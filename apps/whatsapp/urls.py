from django.urls import path

from . import views

app_name = "whatsapp"

urlpatterns = [
    path("whatsapp", views.status, name="status"),
    path("whatsapp/qr", views.qr, name="qr"),
    path("whatsapp/confirm", views.confirm, name="confirm"),
    path("whatsapp/restart", views.restart, name="restart"),
]

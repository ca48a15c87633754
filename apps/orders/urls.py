from django.urls import path

from . import views_admin as views

app_name = "orders"

urlpatterns = [
    path("orders", views.orders_list, name="list"),
    path("orders/<uuid:order_id>", views.order_detail, name="detail"),
    path("orders/<uuid:order_id>/status", views.order_status, name="status"),
    path("customers", views.customers_list, name="customers"),
    path("customers/<uuid:customer_id>", views.customer_detail, name="customer_detail"),
]

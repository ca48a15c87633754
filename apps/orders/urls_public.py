from django.urls import path

from . import views_public as views

app_name = "orders_public"

urlpatterns = [
    path("<slug:slug>/cart", views.cart_detail, name="cart"),
    path("<slug:slug>/cart/add", views.cart_add, name="cart_add"),
    path("<slug:slug>/cart/update", views.cart_update, name="cart_update"),
    path("<slug:slug>/cart/remove", views.cart_remove, name="cart_remove"),
    path("<slug:slug>/cart/clear", views.cart_clear, name="cart_clear"),
    path("<slug:slug>/checkout", views.checkout, name="checkout"),
    path("<slug:slug>/confirmation/<str:code>", views.confirmation, name="confirmation"),
]

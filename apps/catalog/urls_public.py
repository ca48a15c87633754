from django.urls import path

from . import views_public as views

app_name = "catalog"

urlpatterns = [
    path("<slug:slug>", views.storefront, name="storefront"),
    path("<slug:slug>/product/<uuid:product_id>", views.product_detail, name="product_detail"),
]

from django.urls import path

from . import views_admin as views

app_name = "catalog_admin"

urlpatterns = [
    path("menu", views.menu, name="menu"),
    path("menu/categories", views.category_create, name="category_create"),
    path("menu/categories/<uuid:category_id>", views.category_update, name="category_update"),
    path("menu/categories/<uuid:category_id>/delete", views.category_delete, name="category_delete"),
    path("menu/categories/<uuid:category_id>/toggle", views.category_toggle, name="category_toggle"),
    path("menu/products", views.product_create, name="product_create"),
    path("menu/products/<uuid:product_id>", views.product_update, name="product_update"),
    path("menu/products/<uuid:product_id>/delete", views.product_delete, name="product_delete"),
    path("menu/products/<uuid:product_id>/toggle", views.product_toggle, name="product_toggle"),
    path("banners", views.banners, name="banners"),
    path("banners/new", views.banner_create, name="banner_create"),
    path("banners/<uuid:banner_id>", views.banner_update, name="banner_update"),
    path("banners/<uuid:banner_id>/delete", views.banner_delete, name="banner_delete"),
    path("banners/<uuid:banner_id>/toggle", views.banner_toggle, name="banner_toggle"),
    path("partnerships", views.partnerships, name="partnerships"),
    path("partnerships/new", views.partnership_create, name="partnership_create"),
    path("partnerships/<uuid:partnership_id>", views.partnership_update, name="partnership_update"),
    path("partnerships/<uuid:partnership_id>/delete", views.partnership_delete, name="partnership_delete"),
    path("partnerships/<uuid:partnership_id>/toggle", views.partnership_toggle, name="partnership_toggle"),
]

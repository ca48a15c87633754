from django.urls import path

from . import views

app_name = "media"

urlpatterns = [
    path("uploads", views.upload, name="upload"),
    path("uploads/delete", views.delete, name="delete"),
]

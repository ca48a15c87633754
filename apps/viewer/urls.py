from django.urls import path

from . import views

app_name = "viewer"

urlpatterns = [
    path("<str:code>", views.track_order, name="track_order"),
]

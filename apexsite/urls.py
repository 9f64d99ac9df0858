# apexsite/urls.py
from django.urls import path

from apex import views as apex

urlpatterns = [
    path("", apex.home, name="home"),
    path("healthz", apex.healthz, name="healthz"),
]

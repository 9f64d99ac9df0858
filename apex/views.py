# apex/views.py
from django.http import HttpResponse


def home(_request):
    return HttpResponse("Hello from the www side.", content_type="text/plain")


def healthz(_request):
    return HttpResponse("ok", content_type="text/plain")

from django.apps import AppConfig


class ApexConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apex"
    verbose_name = "Apex redirect"

from django.apps import AppConfig


class CreativesConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.creatives"
    label = "creatives"

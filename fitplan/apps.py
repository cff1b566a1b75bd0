from django.apps import AppConfig


class FitplanConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "fitplan"
    verbose_name = "Fitness plan generation"

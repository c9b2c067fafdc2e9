from django.apps import AppConfig


class TachesConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "taches"
    verbose_name = "Gestion des tâches"

from django.apps import AppConfig


class MenuManagerConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "menu_manager"
    verbose_name = "Menu manager"

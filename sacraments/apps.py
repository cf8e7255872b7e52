from django.apps import AppConfig


class SacramentsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'sacraments'
    verbose_name = 'Sacramental Records'

from django.apps import AppConfig


class MinistriesConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'ministries'
    verbose_name = 'Ministries & Committees'

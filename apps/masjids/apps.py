from django.apps import AppConfig


class MasjidsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.masjids'
    verbose_name = 'Masjids'

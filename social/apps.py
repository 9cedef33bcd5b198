from django.apps import AppConfig

class SocialConfig(AppConfig):
    """Django app config for social; loads signal handlers on ready."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'social'

    def ready(self):
        """Import signal modules to register handlers."""
        import social.signals

from django.apps import AppConfig


class RevalidationAppConfig(AppConfig):
    name = "revalidation"
    verbose_name = "Frontend Revalidation"

    def ready(self):
        """Subscribe to lifecycle signals of every tracked catalog model."""
        from . import signals
        signals.connect()

from django.apps import AppConfig


class MarketplaceAppConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "marketplace"
    verbose_name = "Experience marketplace"

    def ready(self) -> None:
        from marketplace import signals  # noqa: F401

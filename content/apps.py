from django.apps import AppConfig


class ContentConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "content"

    def ready(self):
        from django.db.models.signals import post_migrate

        def _seed_defaults(sender, **kwargs):
            from django.conf import settings
            if not getattr(settings, "CONTENT_SEED_ON_MIGRATE", True):
                return
            from .seed import seed_all

            seed_all()

        # Seeding is idempotent: kinds that already hold records are skipped
        post_migrate.connect(_seed_defaults, sender=self, dispatch_uid="content_seed_defaults")

from django.core.management.base import BaseCommand

from content.seed import seed_all


class Command(BaseCommand):
    help = "Seed default portfolio content for every kind that has no records (idempotent)."

    def handle(self, *args, **options):
        for slug, count in seed_all().items():
            if count:
                self.stdout.write(f"{slug}: inserted {count}")
            else:
                self.stdout.write(f"{slug}: already populated, skipped")
        self.stdout.write(self.style.SUCCESS("Seed complete."))

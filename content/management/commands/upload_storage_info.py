from django.conf import settings
from django.core.files.base import ContentFile
from django.core.management.base import BaseCommand, CommandError

from content.storage import UPLOADS_ALIAS, upload_storage


class Command(BaseCommand):
    help = "Print the effective upload storage configuration and run a tiny write/delete test."

    def add_arguments(self, parser):
        parser.add_argument(
            "--skip-write",
            action="store_true",
            help="Only print the configuration.",
        )

    def handle(self, *args, **options):
        storage = upload_storage()
        self.stdout.write("== Upload storage ==")
        self.stdout.write(f"UPLOAD_BACKEND: {settings.UPLOAD_BACKEND}")
        self.stdout.write(f"UPLOAD_URL: {settings.UPLOAD_URL}")
        self.stdout.write(f"UPLOAD_MAX_BYTES: {settings.UPLOAD_MAX_BYTES}")
        self.stdout.write(f"STORAGES.{UPLOADS_ALIAS}: {settings.STORAGES.get(UPLOADS_ALIAS)}")
        self.stdout.write(f"storage class: {type(storage).__name__}")
        if options["skip_write"]:
            return

        self.stdout.write("\n== Write test ==")
        try:
            name = storage.save("storage-check.txt", ContentFile(b"hello from upload_storage_info"))
        except Exception as exc:  # noqa: BLE001
            raise CommandError(f"Write failed: {exc}") from exc
        self.stdout.write(f"Saved as: {name}")
        self.stdout.write(f"URL: {storage.url(name)}")
        storage.delete(name)
        self.stdout.write(self.style.SUCCESS("Deleted test file."))

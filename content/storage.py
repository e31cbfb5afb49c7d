import mimetypes
from typing import List, Tuple

from django.conf import settings
from django.core.files.base import ContentFile, File
from django.core.files.storage import Storage, storages
from django.utils import timezone
from django.utils.deconstruct import deconstructible

try:
    from supabase import create_client  # type: ignore
except ImportError:  # pragma: no cover
    create_client = None  # type: ignore

UPLOADS_ALIAS = "uploads"

_supabase_client = None


def upload_storage() -> Storage:
    return storages[UPLOADS_ALIAS]


def _item_name(item) -> str:
    # storage3 returns plain dicts, older clients returned objects
    if isinstance(item, dict):
        return item.get("name", "")
    return getattr(item, "name", "")


def _get_client():
    global _supabase_client  # noqa: PLW0603
    if _supabase_client is None:
        if create_client is None:
            raise RuntimeError("supabase package not installed")
        url = settings.SUPABASE_PROJECT_URL
        key = settings.SUPABASE_SERVICE_ROLE_KEY or settings.SUPABASE_ANON_KEY
        if not url or not key:
            raise RuntimeError("SUPABASE_PROJECT_URL and service/anon key must be set")
        _supabase_client = create_client(url, key)
    return _supabase_client


@deconstructible
class SupabaseUploadStorage(Storage):
    """Uploaded images kept in a public Supabase Storage bucket.

    Names are flat (``<epoch-ms>-<uuid>.png``); records keep referencing
    ``/uploads/<name>`` and the upload view redirects to :meth:`url`.
    """

    def __init__(self, bucket: str = "") -> None:
        self.bucket: str = bucket or settings.SUPABASE_BUCKET
        if not self.bucket:
            raise RuntimeError("SUPABASE_BUCKET must be set")
        base = settings.SUPABASE_PROJECT_URL
        if not base:
            raise RuntimeError("SUPABASE_PROJECT_URL must be set to the project API URL")
        self.public_base = f"{base.rstrip('/')}/storage/v1/object/public/{self.bucket}"

    def _bucket(self):
        return _get_client().storage.from_(self.bucket)

    def _open(self, name: str, mode: str = "rb") -> File:
        return ContentFile(self._bucket().download(name), name=name)

    def _save(self, name: str, content: File) -> str:
        if hasattr(content, "seek"):
            content.seek(0)
        data = content.read()
        ctype = getattr(content, "content_type", None) or mimetypes.guess_type(name)[0] or "application/octet-stream"
        self._bucket().upload(name, data, {"content-type": ctype})
        return name

    def exists(self, name: str) -> bool:
        return any(_item_name(item) == name for item in self._bucket().list())

    def url(self, name: str) -> str:
        return f"{self.public_base}/{name.lstrip('/')}"

    def delete(self, name: str) -> None:
        self._bucket().remove([name])

    def size(self, name: str) -> int:
        return 0

    def path(self, name: str) -> str:
        raise NotImplementedError("Supabase storage has no local path")

    def listdir(self, path: str) -> Tuple[List[str], List[str]]:
        files: List[str] = [_item_name(item) for item in self._bucket().list(path or None)]
        return [], files

    def get_modified_time(self, name: str):
        return timezone.now()

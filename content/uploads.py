"""Image upload gatekeeping for project and design entries.

Checks are limited to the file extension, the declared content type and
the size. Accepted files are stored under a generated name and referenced
by records as ``/uploads/<name>``.
"""

import logging
import os
import time
import uuid

from django.conf import settings

from .exceptions import UploadRejected, UploadTooLarge
from .storage import upload_storage

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {".jpg", ".jpeg", ".png"}
ALLOWED_CONTENT_TYPES = {"image/jpeg", "image/jpg", "image/pjpeg", "image/png", "image/x-png"}


def validate_image(upload) -> None:
    ext = os.path.splitext(upload.name or "")[1].lower()
    content_type = (getattr(upload, "content_type", None) or "").split(";")[0].strip().lower()
    if ext not in ALLOWED_EXTENSIONS or content_type not in ALLOWED_CONTENT_TYPES:
        logger.warning("Rejected upload %r (%s)", upload.name, content_type or "no content type")
        raise UploadRejected()
    limit = settings.UPLOAD_MAX_BYTES
    if upload.size > limit:
        logger.warning("Rejected upload %r: %d bytes exceeds %d", upload.name, upload.size, limit)
        raise UploadTooLarge(f"File too large: images are limited to {limit // (1024 * 1024)} MB")


def generate_name(original_name: str) -> str:
    ext = os.path.splitext(original_name)[1]
    return f"{int(time.time() * 1000)}-{uuid.uuid4()}{ext}"


def store_image(upload) -> str:
    """Save ``upload`` and return the reference kept in the record."""
    name = upload_storage().save(generate_name(upload.name), upload)
    return f"{settings.UPLOAD_URL}{name}"


def discard_image(reference: str) -> None:
    name = reference[len(settings.UPLOAD_URL):] if reference.startswith(settings.UPLOAD_URL) else reference
    upload_storage().delete(name)

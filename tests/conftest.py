import io

import pytest
from django.contrib.auth import get_user_model
from django.core.files.uploadedfile import SimpleUploadedFile
from PIL import Image
from rest_framework.test import APIClient


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture(autouse=True)
def upload_root(settings, tmp_path):
    root = tmp_path / "uploads"
    root.mkdir()
    settings.STORAGES = {
        **settings.STORAGES,
        "uploads": {
            "BACKEND": "django.core.files.storage.FileSystemStorage",
            "OPTIONS": {"location": root, "base_url": "/uploads/"},
        },
    }
    return root


def _image_bytes(fmt: str) -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (16, 12), (30, 120, 180)).save(buf, format=fmt)
    return buf.getvalue()


@pytest.fixture
def png_file():
    def make(name="cover.png", content_type="image/png"):
        return SimpleUploadedFile(name, _image_bytes("PNG"), content_type=content_type)

    return make


@pytest.fixture
def jpeg_file():
    def make(name="cover.jpg", content_type="image/jpeg"):
        return SimpleUploadedFile(name, _image_bytes("JPEG"), content_type=content_type)

    return make


@pytest.fixture
def gif_file():
    def make(name="anim.gif", content_type="image/gif"):
        return SimpleUploadedFile(name, _image_bytes("GIF"), content_type=content_type)

    return make


@pytest.fixture
def staff_user(db):
    return get_user_model().objects.create_user(
        username="editor", password="s3cret-pass", is_staff=True
    )


@pytest.fixture
def project_form():
    return {
        "title": "Packet Sniffer",
        "description": "Passive network capture and protocol decoding.",
        "technologies": "Python, Scapy",
        "category": "security",
    }

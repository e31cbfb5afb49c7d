import pytest
from django.core.cache import cache
from django.db import DatabaseError
from rest_framework.throttling import ScopedRateThrottle

from content import sequences
from content.models import Design, Project, Skill, SkillCategory
from content.serializers import SkillSerializer


pytestmark = pytest.mark.django_db


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


class TestSkills:
    def test_create_then_list(self, api_client):
        response = api_client.post("/skills", {"name": "Rust", "category": "primary"}, format="json")
        assert response.status_code == 200
        assert response["Content-Type"].startswith("text/html")
        assert 'Skill "Rust" added successfully!' in response.content.decode()

        listing = api_client.get("/skills")
        assert listing.status_code == 200
        assert listing.json() == [{"id": 1, "name": "Rust", "category": "primary"}]

    def test_form_encoded_create(self, api_client):
        response = api_client.post("/skills", {"name": "Go", "category": "accent"}, format="multipart")
        assert response.status_code == 200
        assert Skill.objects.get().name == "Go"

    def test_missing_field_page(self, api_client):
        response = api_client.post("/skills", {"name": "Rust"}, format="json")
        assert response.status_code == 400
        body = response.content.decode()
        assert "All required fields (name, category) must be provided." in body
        assert 'href="/real/admin"' in body

    def test_invalid_tone(self, api_client):
        response = api_client.post("/skills", {"name": "Rust", "category": "neon"}, format="json")
        assert response.status_code == 400
        assert "Invalid category." in response.content.decode()
        assert Skill.objects.count() == 0

    def test_list_failure_is_500(self, api_client, monkeypatch):
        Skill.objects.create(seq=1, name="Rust", category="primary")

        def broken(self, instance):
            raise DatabaseError("no such table")

        monkeypatch.setattr(SkillSerializer, "to_representation", broken)
        response = api_client.get("/skills")
        assert response.status_code == 500
        assert response.json() == {"error": "Error fetching skills"}


class TestProjects:
    def test_multipart_create(self, api_client, project_form, png_file, upload_root):
        form = {
            **project_form,
            "technologies": "React, Node.js,  MongoDB",
            "demoUrl": "",
            "featured": "on",
            "image": png_file(),
        }
        response = api_client.post("/projects", form, format="multipart")
        assert response.status_code == 200, response.content
        assert 'Project "Packet Sniffer" added successfully!' in response.content.decode()

        (item,) = api_client.get("/projects").json()
        assert item["id"] == 1
        assert item["technologies"] == ["React", "Node.js", "MongoDB"]
        assert item["demoUrl"] is None
        assert item["githubUrl"] is None
        assert item["featured"] is True
        assert item["image"].startswith("/uploads/")
        assert (upload_root / item["image"][len("/uploads/"):]).is_file()

    def test_featured_defaults_to_false(self, api_client, project_form, jpeg_file):
        response = api_client.post("/projects", {**project_form, "image": jpeg_file()}, format="multipart")
        assert response.status_code == 200
        assert Project.objects.get().featured is False

    def test_gif_is_rejected(self, api_client, project_form, gif_file, upload_root):
        response = api_client.post("/projects", {**project_form, "image": gif_file()}, format="multipart")
        assert response.status_code == 400
        assert "Only JPEG and PNG images are allowed" in response.content.decode()
        assert Project.objects.count() == 0
        assert list(upload_root.iterdir()) == []

    def test_oversized_image(self, api_client, settings, project_form, png_file):
        settings.UPLOAD_MAX_BYTES = 16
        response = api_client.post("/projects", {**project_form, "image": png_file()}, format="multipart")
        assert response.status_code == 400
        assert "File too large" in response.content.decode()
        assert Project.objects.count() == 0

    def test_missing_image(self, api_client, project_form):
        response = api_client.post("/projects", project_form, format="multipart")
        assert response.status_code == 400
        assert "must be provided" in response.content.decode()

    def test_failed_insert_leaves_no_file(self, api_client, monkeypatch, project_form, png_file, upload_root):
        def broken(model):
            raise DatabaseError("database is locked")

        monkeypatch.setattr(sequences, "allocate", broken)
        response = api_client.post("/projects", {**project_form, "image": png_file()}, format="multipart")
        assert response.status_code == 500
        assert "Error saving project: database is locked" in response.content.decode()
        assert list(upload_root.iterdir()) == []

    def test_category_filter(self, api_client):
        for seq, category in enumerate(["ai", "security", "ai"], start=1):
            Project.objects.create(
                seq=seq, title=f"p{seq}", description="d", technologies=["Go"], category=category, image="x"
            )
        assert [p["id"] for p in api_client.get("/projects", {"category": "ai"}).json()] == [1, 3]
        assert len(api_client.get("/projects", {"category": "all"}).json()) == 3
        assert len(api_client.get("/projects", {"category": "All"}).json()) == 3

    @pytest.mark.parametrize("category", ["bogus", " ai", "ai "])
    def test_unknown_category(self, api_client, category):
        response = api_client.get("/projects", {"category": category})
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid category"}


def test_design_create_and_filter(api_client, png_file):
    form = {
        "title": "Festival Poster",
        "description": "Poster series",
        "category": "Brand Identity",
        "tags": "Print, Typography",
        "behanceUrl": "https://behance.net/gallery/9",
        "image": png_file(),
    }
    response = api_client.post("/designs", form, format="multipart")
    assert response.status_code == 200
    (item,) = api_client.get("/designs", {"category": "Brand Identity"}).json()
    assert item["tags"] == ["Print", "Typography"]
    assert item["behanceUrl"] == "https://behance.net/gallery/9"
    assert api_client.get("/designs", {"category": "Web Design"}).json() == []
    assert Design.objects.get().seq == 1


def test_blog_create(api_client):
    form = {
        "title": "Heap Exploitation Notes",
        "excerpt": "tcache basics",
        "content": "Long form text",
        "date": "2024-03-02",
        "readTime": "8 min read",
        "category": "CTF",
        "tags": "pwn, heap",
    }
    response = api_client.post("/blogs", form, format="multipart")
    assert response.status_code == 200
    assert 'Blog post "Heap Exploitation Notes" added successfully!' in response.content.decode()
    (item,) = api_client.get("/blogs").json()
    assert item["date"] == "2024-03-02"
    assert item["readTime"] == "8 min read"


def test_blog_with_unparseable_date(api_client):
    form = {
        "title": "t",
        "excerpt": "e",
        "content": "c",
        "date": "yesterday",
        "readTime": "1 min read",
        "category": "Security",
        "tags": "x",
    }
    assert api_client.post("/blogs", form, format="multipart").status_code == 400


class TestSkillCategories:
    def test_create_from_lines(self, api_client):
        form = {"title": "Languages", "icon": "Code", "color": "primary", "skills": "Python,90\r\nRust, 60\r\n"}
        response = api_client.post("/skill-categories", form, format="multipart")
        assert response.status_code == 200
        (item,) = api_client.get("/skill-categories").json()
        assert item["skills"] == [{"name": "Python", "level": 90}, {"name": "Rust", "level": 60}]

    def test_out_of_range_level(self, api_client):
        form = {"title": "Languages", "icon": "Code", "color": "primary", "skills": "Python,90\nJavaScript,150"}
        response = api_client.post("/skill-categories", form, format="multipart")
        assert response.status_code == 400
        assert "Invalid skill format: JavaScript,150" in response.content.decode()
        assert SkillCategory.objects.count() == 0

    def test_bad_color(self, api_client):
        form = {"title": "Languages", "icon": "Code", "color": "teal", "skills": "Python,90"}
        response = api_client.post("/skill-categories", form, format="multipart")
        assert response.status_code == 400
        assert "Invalid icon or color." in response.content.decode()


def test_highlight_and_learning(api_client):
    assert api_client.post(
        "/highlights", {"title": "CTF", "description": "Weekly", "icon": "Shield"}, format="json"
    ).status_code == 200
    assert api_client.post(
        "/learnings", {"title": "Rust", "description": "Ownership", "category": "secondary"}, format="json"
    ).status_code == 200
    assert api_client.get("/highlights").json()[0]["icon"] == "Shield"
    assert api_client.get("/learnings").json()[0]["id"] == 1
    response = api_client.post("/highlights", {"title": "x", "description": "y", "icon": "Star"}, format="json")
    assert "Invalid icon." in response.content.decode()


def test_entry_form(client):
    response = client.get("/real/admin")
    assert response.status_code == 200
    body = response.content.decode()
    for slug in ("projects", "designs", "blogs", "skills", "learnings", "skill-categories", "highlights"):
        assert f'action="/{slug}"' in body
    assert 'value="UI/UX Design"' in body


class TestWriteGate:
    @pytest.fixture(autouse=True)
    def closed(self, settings):
        settings.CONTENT_OPEN_WRITES = False

    def test_anonymous_create_is_refused(self, api_client):
        response = api_client.post("/skills", {"name": "Rust", "category": "primary"}, format="json")
        assert response.status_code == 403
        assert response["Content-Type"].startswith("text/html")
        assert Skill.objects.count() == 0

    def test_reads_stay_public(self, api_client):
        assert api_client.get("/skills").status_code == 200

    def test_non_staff_is_refused(self, api_client, django_user_model):
        user = django_user_model.objects.create_user(username="visitor", password="pw-123456")
        api_client.force_authenticate(user)
        response = api_client.post("/skills", {"name": "Rust", "category": "primary"}, format="json")
        assert response.status_code == 403

    def test_staff_session(self, api_client, staff_user):
        api_client.force_login(staff_user)
        response = api_client.post("/skills", {"name": "Rust", "category": "primary"}, format="json")
        assert response.status_code == 200

    def test_staff_jwt(self, api_client, staff_user):
        tokens = api_client.post(
            "/auth/jwt/create", {"username": "editor", "password": "s3cret-pass"}, format="json"
        ).json()
        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {tokens['access']}")
        response = api_client.post("/skills", {"name": "Rust", "category": "primary"}, format="json")
        assert response.status_code == 200
        assert Skill.objects.get().seq == 1


def test_writes_are_throttled(api_client, monkeypatch):
    cache.clear()
    monkeypatch.setattr(ScopedRateThrottle, "THROTTLE_RATES", {"content_write": "2/min"})
    for name in ("a", "b"):
        assert api_client.post("/skills", {"name": name, "category": "primary"}, format="json").status_code == 200
    response = api_client.post("/skills", {"name": "c", "category": "primary"}, format="json")
    assert response.status_code == 429
    assert api_client.get("/skills").status_code == 200
    cache.clear()

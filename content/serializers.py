from rest_framework import serializers
from rest_framework.fields import empty

from .fields import CommaSeparatedListField, SkillLinesField
from .models import Blog, Design, Highlight, Learning, Project, Skill, SkillCategory


class SequencedSerializer(serializers.ModelSerializer):
    """Exposes the sequential id as ``id``; the table key stays private."""

    id = serializers.IntegerField(source="seq", read_only=True)


class OptionalUrlField(serializers.CharField):
    """Blank or missing link → null."""

    def __init__(self, **kwargs):
        kwargs.setdefault("required", False)
        kwargs.setdefault("allow_null", True)
        kwargs.setdefault("max_length", 500)
        kwargs.setdefault("default", None)
        super().__init__(**kwargs)

    def run_validation(self, data=empty):
        if isinstance(data, str) and not data.strip():
            data = None
        return super().run_validation(data)


class ProjectSerializer(SequencedSerializer):
    technologies = CommaSeparatedListField()
    demoUrl = OptionalUrlField(source="demo_url")
    githubUrl = OptionalUrlField(source="github_url")
    featured = serializers.BooleanField(required=False, default=False)

    class Meta:
        model = Project
        fields = [
            "id",
            "title",
            "description",
            "technologies",
            "category",
            "demoUrl",
            "githubUrl",
            "image",
            "featured",
        ]
        read_only_fields = ["image"]


class DesignSerializer(SequencedSerializer):
    tags = CommaSeparatedListField()
    behanceUrl = OptionalUrlField(source="behance_url")

    class Meta:
        model = Design
        fields = ["id", "title", "description", "category", "tags", "behanceUrl", "image"]
        read_only_fields = ["image"]


class BlogSerializer(SequencedSerializer):
    readTime = serializers.CharField(source="read_time", max_length=40)
    tags = CommaSeparatedListField()

    class Meta:
        model = Blog
        fields = ["id", "title", "excerpt", "content", "date", "readTime", "category", "tags"]


class SkillSerializer(SequencedSerializer):
    class Meta:
        model = Skill
        fields = ["id", "name", "category"]


class LearningSerializer(SequencedSerializer):
    class Meta:
        model = Learning
        fields = ["id", "title", "description", "category"]


class SkillCategorySerializer(SequencedSerializer):
    skills = SkillLinesField()

    class Meta:
        model = SkillCategory
        fields = ["id", "title", "icon", "color", "skills"]


class HighlightSerializer(SequencedSerializer):
    class Meta:
        model = Highlight
        fields = ["id", "title", "description", "icon"]

from django.db import models

from .choices import (
    BlogCategory,
    DesignCategory,
    HighlightIcon,
    ProjectCategory,
    SkillCategoryIcon,
    Tone,
)


class SequencedRecord(models.Model):
    """Base for every content kind.

    ``seq`` is the application-assigned sequential id, unique within the
    kind and exposed as ``id`` by the API. The table primary key is the
    store's own identifier and never leaves the backend.
    """

    seq = models.PositiveIntegerField(unique=True, editable=False)

    class Meta:
        abstract = True
        ordering = ["seq"]


class Project(SequencedRecord):
    title = models.CharField(max_length=200)
    description = models.TextField()
    technologies = models.JSONField(default=list)
    category = models.CharField(max_length=20, choices=ProjectCategory.choices)
    demo_url = models.CharField(max_length=500, null=True, blank=True)
    github_url = models.CharField(max_length=500, null=True, blank=True)
    # Emoji placeholder or /uploads/<name>
    image = models.CharField(max_length=500)
    featured = models.BooleanField(default=False)

    class Meta(SequencedRecord.Meta):
        pass

    def __str__(self):
        return self.title


class Design(SequencedRecord):
    title = models.CharField(max_length=200)
    description = models.TextField()
    category = models.CharField(max_length=40, choices=DesignCategory.choices)
    tags = models.JSONField(default=list)
    behance_url = models.CharField(max_length=500, null=True, blank=True)
    image = models.CharField(max_length=500)

    class Meta(SequencedRecord.Meta):
        pass

    def __str__(self):
        return self.title


class Blog(SequencedRecord):
    title = models.CharField(max_length=200)
    excerpt = models.TextField()
    content = models.TextField()
    date = models.DateField(help_text="ISO date (YYYY-MM-DD); other formats are rejected")
    read_time = models.CharField(max_length=40, help_text="e.g. 5 min read")
    category = models.CharField(max_length=40, choices=BlogCategory.choices)
    tags = models.JSONField(default=list)

    class Meta(SequencedRecord.Meta):
        pass

    def __str__(self):
        return self.title


class Skill(SequencedRecord):
    name = models.CharField(max_length=120)
    category = models.CharField(max_length=20, choices=Tone.choices)

    class Meta(SequencedRecord.Meta):
        pass

    def __str__(self):
        return self.name


class Learning(SequencedRecord):
    title = models.CharField(max_length=200)
    description = models.TextField()
    category = models.CharField(max_length=20, choices=Tone.choices)

    class Meta(SequencedRecord.Meta):
        pass

    def __str__(self):
        return self.title


class SkillCategory(SequencedRecord):
    title = models.CharField(max_length=200)
    icon = models.CharField(max_length=20, choices=SkillCategoryIcon.choices)
    color = models.CharField(max_length=20, choices=Tone.choices)
    # [{"name": "Python", "level": 90}, ...]
    skills = models.JSONField(default=list)

    class Meta(SequencedRecord.Meta):
        verbose_name_plural = "skill categories"

    def __str__(self):
        return self.title


class Highlight(SequencedRecord):
    title = models.CharField(max_length=200)
    description = models.TextField()
    icon = models.CharField(max_length=20, choices=HighlightIcon.choices)

    class Meta(SequencedRecord.Meta):
        pass

    def __str__(self):
        return self.title


class SequenceCounter(models.Model):
    """Last sequential id handed out per kind (keyed by model label)."""

    kind = models.CharField(max_length=100, unique=True)
    value = models.PositiveIntegerField(default=0)

    def __str__(self):
        return f"{self.kind}={self.value}"

from dataclasses import dataclass
from typing import Optional, Tuple, Type

from django_filters import FilterSet
from rest_framework.serializers import ModelSerializer

from . import filters, models, serializers


@dataclass(frozen=True)
class ResourceKind:
    """Everything the generic list/create code needs to know about a kind."""

    slug: str  # URL path segment
    model: Type
    serializer_class: Type[ModelSerializer]
    label: str  # singular, used in messages: 'Error saving <label>'
    plural: str
    required: Tuple[str, ...]
    enum_error: str = "Invalid category."
    filterset_class: Optional[Type[FilterSet]] = None
    upload_field: Optional[str] = None
    title_field: str = "title"

    @property
    def display_label(self) -> str:
        return self.label[:1].upper() + self.label[1:]


PROJECTS = ResourceKind(
    slug="projects",
    model=models.Project,
    serializer_class=serializers.ProjectSerializer,
    label="project",
    plural="projects",
    required=("title", "description", "technologies", "category", "image"),
    filterset_class=filters.ProjectFilter,
    upload_field="image",
)

DESIGNS = ResourceKind(
    slug="designs",
    model=models.Design,
    serializer_class=serializers.DesignSerializer,
    label="design",
    plural="designs",
    required=("title", "description", "tags", "category", "image"),
    filterset_class=filters.DesignFilter,
    upload_field="image",
)

BLOGS = ResourceKind(
    slug="blogs",
    model=models.Blog,
    serializer_class=serializers.BlogSerializer,
    label="blog post",
    plural="blogs",
    required=("title", "excerpt", "content", "date", "readTime", "category", "tags"),
)

SKILLS = ResourceKind(
    slug="skills",
    model=models.Skill,
    serializer_class=serializers.SkillSerializer,
    label="skill",
    plural="skills",
    required=("name", "category"),
    title_field="name",
)

LEARNINGS = ResourceKind(
    slug="learnings",
    model=models.Learning,
    serializer_class=serializers.LearningSerializer,
    label="learning focus",
    plural="learnings",
    required=("title", "description", "category"),
)

SKILL_CATEGORIES = ResourceKind(
    slug="skill-categories",
    model=models.SkillCategory,
    serializer_class=serializers.SkillCategorySerializer,
    label="skill category",
    plural="skill categories",
    required=("title", "icon", "color", "skills"),
    enum_error="Invalid icon or color.",
)

HIGHLIGHTS = ResourceKind(
    slug="highlights",
    model=models.Highlight,
    serializer_class=serializers.HighlightSerializer,
    label="highlight",
    plural="highlights",
    required=("title", "description", "icon"),
    enum_error="Invalid icon.",
)

KINDS = (PROJECTS, DESIGNS, BLOGS, SKILLS, LEARNINGS, SKILL_CATEGORIES, HIGHLIGHTS)

import django_filters

from .choices import DesignCategory, ProjectCategory
from .models import Design, Project


class ProjectFilter(django_filters.FilterSet):
    category = django_filters.ChoiceFilter(choices=ProjectCategory.choices)

    class Meta:
        model = Project
        fields = ["category"]


class DesignFilter(django_filters.FilterSet):
    category = django_filters.ChoiceFilter(choices=DesignCategory.choices)

    class Meta:
        model = Design
        fields = ["category"]

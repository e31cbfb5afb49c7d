from django.contrib import admin

from .models import Blog, Design, Highlight, Learning, Project, SequenceCounter, Skill, SkillCategory


class ReadOnlyAdmin(admin.ModelAdmin):
    """Records are created through the entry form only and never changed."""

    ordering = ("seq",)

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(Project)
class ProjectAdmin(ReadOnlyAdmin):
    list_display = ("seq", "title", "category", "featured", "image")
    list_filter = ("category", "featured")
    search_fields = ("title", "description")


@admin.register(Design)
class DesignAdmin(ReadOnlyAdmin):
    list_display = ("seq", "title", "category", "image")
    list_filter = ("category",)
    search_fields = ("title", "description")


@admin.register(Blog)
class BlogAdmin(ReadOnlyAdmin):
    list_display = ("seq", "title", "category", "date", "read_time")
    list_filter = ("category",)
    search_fields = ("title", "excerpt", "content")


@admin.register(Skill)
class SkillAdmin(ReadOnlyAdmin):
    list_display = ("seq", "name", "category")
    list_filter = ("category",)


@admin.register(Learning)
class LearningAdmin(ReadOnlyAdmin):
    list_display = ("seq", "title", "category")
    list_filter = ("category",)


@admin.register(SkillCategory)
class SkillCategoryAdmin(ReadOnlyAdmin):
    list_display = ("seq", "title", "icon", "color")


@admin.register(Highlight)
class HighlightAdmin(ReadOnlyAdmin):
    list_display = ("seq", "title", "icon")


@admin.register(SequenceCounter)
class SequenceCounterAdmin(admin.ModelAdmin):
    list_display = ("kind", "value")
    readonly_fields = ("kind", "value")

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False

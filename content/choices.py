from django.db import models


class ProjectCategory(models.TextChoices):
    SECURITY = "security", "Security"
    AI = "ai", "AI/ML"
    FULLSTACK = "fullstack", "Full-Stack"
    DESIGN = "design", "Design"


class DesignCategory(models.TextChoices):
    BRAND_IDENTITY = "Brand Identity", "Brand Identity"
    UI_UX = "UI/UX Design", "UI/UX Design"
    WEB = "Web Design", "Web Design"
    MOBILE = "Mobile Design", "Mobile Design"


class BlogCategory(models.TextChoices):
    SECURITY = "Security", "Security"
    AI_ML = "AI/ML", "AI/ML"
    CTF = "CTF", "CTF"
    TECH_INSIGHTS = "Tech Insights", "Tech Insights"


class Tone(models.TextChoices):
    """Theme accent used by skills, learnings and skill category cards."""

    PRIMARY = "primary", "Primary"
    SECONDARY = "secondary", "Secondary"
    ACCENT = "accent", "Accent"


class SkillCategoryIcon(models.TextChoices):
    CODE = "Code", "Code"
    DATABASE = "Database", "Database"
    SHIELD = "Shield", "Shield"
    PALETTE = "Palette", "Palette"
    BRAIN = "Brain", "Brain"
    TERMINAL = "Terminal", "Terminal"


class HighlightIcon(models.TextChoices):
    SHIELD = "Shield", "Shield"
    CODE = "Code", "Code"
    BRAIN = "Brain", "Brain"
    PALETTE = "Palette", "Palette"


# Listing with this value (any casing) means "no category filter"
ALL_CATEGORIES = "all"

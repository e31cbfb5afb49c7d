from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Project",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("seq", models.PositiveIntegerField(editable=False, unique=True)),
                ("title", models.CharField(max_length=200)),
                ("description", models.TextField()),
                ("technologies", models.JSONField(default=list)),
                (
                    "category",
                    models.CharField(
                        choices=[("security", "Security"), ("ai", "AI/ML"), ("fullstack", "Full-Stack"), ("design", "Design")],
                        max_length=20,
                    ),
                ),
                ("demo_url", models.CharField(blank=True, max_length=500, null=True)),
                ("github_url", models.CharField(blank=True, max_length=500, null=True)),
                ("image", models.CharField(max_length=500)),
                ("featured", models.BooleanField(default=False)),
            ],
            options={
                "ordering": ["seq"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="Design",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("seq", models.PositiveIntegerField(editable=False, unique=True)),
                ("title", models.CharField(max_length=200)),
                ("description", models.TextField()),
                (
                    "category",
                    models.CharField(
                        choices=[
                            ("Brand Identity", "Brand Identity"),
                            ("UI/UX Design", "UI/UX Design"),
                            ("Web Design", "Web Design"),
                            ("Mobile Design", "Mobile Design"),
                        ],
                        max_length=40,
                    ),
                ),
                ("tags", models.JSONField(default=list)),
                ("behance_url", models.CharField(blank=True, max_length=500, null=True)),
                ("image", models.CharField(max_length=500)),
            ],
            options={
                "ordering": ["seq"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="Blog",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("seq", models.PositiveIntegerField(editable=False, unique=True)),
                ("title", models.CharField(max_length=200)),
                ("excerpt", models.TextField()),
                ("content", models.TextField()),
                ("date", models.DateField(help_text="ISO date (YYYY-MM-DD); other formats are rejected")),
                ("read_time", models.CharField(help_text="e.g. 5 min read", max_length=40)),
                (
                    "category",
                    models.CharField(
                        choices=[("Security", "Security"), ("AI/ML", "AI/ML"), ("CTF", "CTF"), ("Tech Insights", "Tech Insights")],
                        max_length=40,
                    ),
                ),
                ("tags", models.JSONField(default=list)),
            ],
            options={
                "ordering": ["seq"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="Skill",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("seq", models.PositiveIntegerField(editable=False, unique=True)),
                ("name", models.CharField(max_length=120)),
                (
                    "category",
                    models.CharField(
                        choices=[("primary", "Primary"), ("secondary", "Secondary"), ("accent", "Accent")],
                        max_length=20,
                    ),
                ),
            ],
            options={
                "ordering": ["seq"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="Learning",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("seq", models.PositiveIntegerField(editable=False, unique=True)),
                ("title", models.CharField(max_length=200)),
                ("description", models.TextField()),
                (
                    "category",
                    models.CharField(
                        choices=[("primary", "Primary"), ("secondary", "Secondary"), ("accent", "Accent")],
                        max_length=20,
                    ),
                ),
            ],
            options={
                "ordering": ["seq"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="SkillCategory",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("seq", models.PositiveIntegerField(editable=False, unique=True)),
                ("title", models.CharField(max_length=200)),
                (
                    "icon",
                    models.CharField(
                        choices=[
                            ("Code", "Code"),
                            ("Database", "Database"),
                            ("Shield", "Shield"),
                            ("Palette", "Palette"),
                            ("Brain", "Brain"),
                            ("Terminal", "Terminal"),
                        ],
                        max_length=20,
                    ),
                ),
                (
                    "color",
                    models.CharField(
                        choices=[("primary", "Primary"), ("secondary", "Secondary"), ("accent", "Accent")],
                        max_length=20,
                    ),
                ),
                ("skills", models.JSONField(default=list)),
            ],
            options={
                "verbose_name_plural": "skill categories",
                "ordering": ["seq"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="Highlight",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("seq", models.PositiveIntegerField(editable=False, unique=True)),
                ("title", models.CharField(max_length=200)),
                ("description", models.TextField()),
                (
                    "icon",
                    models.CharField(
                        choices=[("Shield", "Shield"), ("Code", "Code"), ("Brain", "Brain"), ("Palette", "Palette")],
                        max_length=20,
                    ),
                ),
            ],
            options={
                "ordering": ["seq"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="SequenceCounter",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("kind", models.CharField(max_length=100, unique=True)),
                ("value", models.PositiveIntegerField(default=0)),
            ],
        ),
    ]

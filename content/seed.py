"""Default records shown by a fresh site.

Each kind is seeded only while its table is empty, so running the seed
again (every ``migrate`` runs it) never duplicates or overwrites content.
"""

import datetime
import logging

from django.db import transaction

from . import kinds

logger = logging.getLogger(__name__)

DEFAULT_RECORDS = {
    kinds.PROJECTS.slug: [
        {
            "seq": 1,
            "title": "SecureScholars",
            "description": "Intelligent vulnerability assessment tool that uses machine learning to identify potential security threats in web applications.",
            "technologies": ["Python", "TensorFlow", "Flask", "PostgreSQL"],
            "category": "security",
            "demo_url": "https://demo.example.com",
            "github_url": "https://github.com/chrisszlycoen/securescholars",
            "image": "🛡️",
            "featured": True,
        },
    ],
    kinds.DESIGNS.slug: [
        {
            "seq": 1,
            "title": "Tech Startup Branding",
            "category": "Brand Identity",
            "description": "Complete brand identity for a fintech startup including logo, color palette, and brand guidelines.",
            "image": "🎨",
            "tags": ["Branding", "Logo Design", "Fintech"],
            "behance_url": "https://behance.net/gallery/1",
        },
        {
            "seq": 2,
            "title": "E-commerce Mobile App UI",
            "category": "UI/UX Design",
            "description": "Modern mobile app interface design with focus on user experience and conversion optimization.",
            "image": "📱",
            "tags": ["Mobile UI", "E-commerce", "UX"],
            "behance_url": "https://behance.net/gallery/2",
        },
    ],
    kinds.BLOGS.slug: [
        {
            "seq": 1,
            "title": "My Journey into Ethical Hacking: From Code to Cybersecurity",
            "excerpt": "How I transitioned from web development to cybersecurity...",
            "content": "In this post, I share my journey from being a web developer...",
            "date": datetime.date(2024, 1, 15),
            "read_time": "5 min read",
            "category": "Security",
            "tags": ["Ethical Hacking", "Career", "Cybersecurity"],
        },
    ],
    kinds.SKILLS.slug: [
        {"seq": 1, "name": "Penetration Testing", "category": "primary"},
        {"seq": 2, "name": "Cloud Security", "category": "secondary"},
        {"seq": 3, "name": "Machine Learning", "category": "accent"},
    ],
    kinds.LEARNINGS.slug: [
        {
            "seq": 1,
            "title": "Security Certifications",
            "description": "Working towards CEH and OSCP certifications",
            "category": "primary",
        },
        {
            "seq": 2,
            "title": "Cloud Technologies",
            "description": "Deepening knowledge in AWS and Azure security",
            "category": "secondary",
        },
        {
            "seq": 3,
            "title": "Advanced AI",
            "description": "Exploring LangChain and custom AI model development",
            "category": "accent",
        },
    ],
    kinds.SKILL_CATEGORIES.slug: [
        {
            "seq": 1,
            "title": "Programming Languages",
            "icon": "Code",
            "color": "primary",
            "skills": [
                {"name": "Python", "level": 90},
                {"name": "JavaScript/TypeScript", "level": 85},
                {"name": "Java", "level": 75},
                {"name": "C++", "level": 70},
                {"name": "SQL", "level": 80},
                {"name": "Bash", "level": 85},
            ],
        },
        {
            "seq": 2,
            "title": "Frameworks & Libraries",
            "icon": "Database",
            "color": "secondary",
            "skills": [
                {"name": "React/Next.js", "level": 85},
                {"name": "Node.js/Express", "level": 80},
                {"name": "Django/Flask", "level": 85},
                {"name": "TensorFlow/PyTorch", "level": 75},
                {"name": "MongoDB/PostgreSQL", "level": 80},
                {"name": "Docker/Kubernetes", "level": 70},
            ],
        },
        {
            "seq": 3,
            "title": "Security & Ethical Hacking",
            "icon": "Shield",
            "color": "accent",
            "skills": [
                {"name": "Penetration Testing", "level": 75},
                {"name": "Kali Linux", "level": 85},
                {"name": "Metasploit", "level": 70},
                {"name": "Wireshark", "level": 80},
                {"name": "Burp Suite", "level": 75},
                {"name": "OWASP Top 10", "level": 85},
            ],
        },
        {
            "seq": 4,
            "title": "AI & Automation",
            "icon": "Brain",
            "color": "primary",
            "skills": [
                {"name": "Machine Learning", "level": 80},
                {"name": "Natural Language Processing", "level": 75},
                {"name": "OpenAI API Integration", "level": 85},
                {"name": "Automation Scripts", "level": 90},
                {"name": "Voice Assistants", "level": 70},
                {"name": "Data Analysis", "level": 85},
            ],
        },
        {
            "seq": 5,
            "title": "Design & Creative",
            "icon": "Palette",
            "color": "secondary",
            "skills": [
                {"name": "Adobe Photoshop", "level": 85},
                {"name": "Adobe Illustrator", "level": 80},
                {"name": "Figma", "level": 90},
                {"name": "UI/UX Design", "level": 85},
                {"name": "Brand Identity", "level": 80},
                {"name": "Web Design", "level": 90},
            ],
        },
        {
            "seq": 6,
            "title": "Tools & Operating Systems",
            "icon": "Terminal",
            "color": "accent",
            "skills": [
                {"name": "Git/GitHub", "level": 90},
                {"name": "Linux (Ubuntu/Kali)", "level": 85},
                {"name": "VS Code", "level": 95},
                {"name": "AWS/Cloud Platforms", "level": 70},
                {"name": "Vim/Nano", "level": 80},
                {"name": "Virtual Machines", "level": 85},
            ],
        },
    ],
    kinds.HIGHLIGHTS.slug: [
        {
            "seq": 1,
            "title": "Ethical Hacking",
            "description": "Passionate about cybersecurity and protecting digital infrastructure",
            "icon": "Shield",
        },
        {
            "seq": 2,
            "title": "Full-Stack Development",
            "description": "Building modern web applications with cutting-edge technologies",
            "icon": "Code",
        },
        {
            "seq": 3,
            "title": "AI Integration",
            "description": "Leveraging AI for productivity, automation, and intelligent solutions",
            "icon": "Brain",
        },
        {
            "seq": 4,
            "title": "Graphic Design",
            "description": "Creating visually stunning and user-friendly digital experiences",
            "icon": "Palette",
        },
    ],
}


def seed_kind(kind) -> int:
    """Insert the defaults for ``kind`` if it has no records; return how many were added."""
    model = kind.model
    with transaction.atomic():
        if model.objects.exists():
            return 0
        created = model.objects.bulk_create(model(**row) for row in DEFAULT_RECORDS[kind.slug])
    logger.info("Initial %s inserted (%d)", kind.plural, len(created))
    return len(created)


def seed_all() -> dict:
    return {kind.slug: seed_kind(kind) for kind in kinds.KINDS}

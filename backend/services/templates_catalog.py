"""Built-in resume templates offered in the template selector."""

from models.resume import (
    ResumeTemplate,
    TemplateCategory,
    TemplateTheme,
    ThemeColors,
    ThemeFonts,
)


def _theme(primary: str, secondary: str, heading: str, body: str) -> TemplateTheme:
    return TemplateTheme(
        colors=ThemeColors(primary=primary, secondary=secondary),
        fonts=ThemeFonts(heading=heading, body=body),
    )


TEMPLATES: tuple[ResumeTemplate, ...] = (
    ResumeTemplate(
        id="modern-professional",
        name="Modern Professional",
        description="Clean and contemporary design perfect for any industry",
        category=TemplateCategory.MODERN,
        layout="single-column",
        is_premium=False,
        theme=_theme("#2563eb", "#64748b", "Inter", "Inter"),
    ),
    ResumeTemplate(
        id="executive-classic",
        name="Executive Classic",
        description="Traditional format ideal for senior-level positions",
        category=TemplateCategory.EXECUTIVE,
        layout="two-column",
        is_premium=True,
        theme=_theme("#1f2937", "#6b7280", "Georgia", "Georgia"),
    ),
    ResumeTemplate(
        id="creative-designer",
        name="Creative Designer",
        description="Eye-catching design for creative professionals",
        category=TemplateCategory.CREATIVE,
        layout="creative",
        is_premium=True,
        theme=_theme("#7c3aed", "#a855f7", "Poppins", "Open Sans"),
    ),
    ResumeTemplate(
        id="tech-minimalist",
        name="Tech Minimalist",
        description="Clean, minimal design perfect for tech roles",
        category=TemplateCategory.MINIMAL,
        layout="minimal",
        is_premium=True,
        theme=_theme("#059669", "#10b981", "JetBrains Mono", "Inter"),
    ),
    ResumeTemplate(
        id="corporate-professional",
        name="Corporate Professional",
        description="Professional design for corporate environments",
        category=TemplateCategory.CLASSIC,
        layout="traditional",
        is_premium=True,
        theme=_theme("#dc2626", "#ef4444", "Times New Roman", "Arial"),
    ),
)

DEFAULT_TEMPLATE = TEMPLATES[0]
_BY_ID = {t.id: t for t in TEMPLATES}


def list_templates() -> list[ResumeTemplate]:
    return list(TEMPLATES)


def get_template(template_id: str | None) -> ResumeTemplate:
    """Look up a template by id; unknown or missing ids get the default."""
    if template_id is None:
        return DEFAULT_TEMPLATE
    return _BY_ID.get(template_id, DEFAULT_TEMPLATE)

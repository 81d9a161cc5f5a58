"""Styled HTML rendering of parsed resumes for on-screen preview and PDF export."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from models.resume import ParsedResume, TemplateCategory, TemplateTheme
from services.section_parser import parse_resume

_TEMPLATE_DIR = Path(__file__).parent / "templates"
env = Environment(
    loader=FileSystemLoader(_TEMPLATE_DIR),
    autoescape=True,
    trim_blocks=True,
    lstrip_blocks=True,
)

FOOTER_TEXT = "Resume optimized with ResumeAI for ATS compatibility"


def _css(styles: dict[str, str]) -> str:
    return "; ".join(f"{k}: {v}" for k, v in styles.items())


def page_styles(category: TemplateCategory, theme: TemplateTheme) -> dict[str, str]:
    """Page-level styles; the category picks the background treatment."""
    styles = {
        "font-family": theme.fonts.body,
        "line-height": "1.5",
        "color": "#374151",
    }
    if category == TemplateCategory.MODERN:
        styles["background"] = "linear-gradient(135deg, #f8fafc 0%, #f1f5f9 100%)"
    elif category == TemplateCategory.EXECUTIVE:
        styles["background"] = "#ffffff"
        styles["border-left"] = f"4px solid {theme.colors.primary}"
    elif category == TemplateCategory.CREATIVE:
        styles["background"] = (
            f"linear-gradient(45deg, {theme.colors.primary}10, {theme.colors.secondary}10)"
        )
    elif category == TemplateCategory.MINIMAL:
        styles["background"] = "#ffffff"
    return styles


def name_styles(category: TemplateCategory, theme: TemplateTheme) -> dict[str, str]:
    return {
        "font-family": theme.fonts.heading,
        "font-size": "32px" if category == TemplateCategory.EXECUTIVE else "28px",
        "font-weight": "700",
        "color": theme.colors.primary,
        "margin-bottom": "8px",
        "text-align": "center" if category == TemplateCategory.CREATIVE else "left",
    }


def section_header_styles(theme: TemplateTheme) -> dict[str, str]:
    return {
        "font-family": theme.fonts.heading,
        "font-size": "18px",
        "font-weight": "600",
        "color": theme.colors.primary,
        "border-bottom": f"2px solid {theme.colors.primary}",
        "padding-bottom": "4px",
        "margin-bottom": "12px",
        "margin-top": "24px",
    }


def render_document(
    resume: ParsedResume,
    theme: TemplateTheme | None = None,
    category: TemplateCategory = TemplateCategory.MODERN,
) -> str:
    """Render a ParsedResume to a standalone HTML document."""
    theme = theme or TemplateTheme()
    category = TemplateCategory(category)
    contact = resume.contact
    contact_items = [
        v for v in (
            contact.email, contact.phone, contact.location,
            contact.linkedin, contact.github, contact.website,
        ) if v
    ]
    return env.get_template("resume.html").render(
        r=resume,
        theme=theme,
        category=category.value,
        contact_items=contact_items,
        page_style=_css(page_styles(category, theme)),
        name_style=_css(name_styles(category, theme)),
        header_style=_css(section_header_styles(theme)),
        contact_justify="center" if category == TemplateCategory.CREATIVE else "flex-start",
        footer_text=FOOTER_TEXT,
    )


def render_document_from_text(
    resume_text: str,
    theme: TemplateTheme | None = None,
    category: TemplateCategory = TemplateCategory.MODERN,
) -> str:
    return render_document(parse_resume(resume_text), theme, category)

"""Structured resume record produced by the section parser and consumed by the renderers."""

from enum import Enum

from pydantic import BaseModel, Field


class Contact(BaseModel):
    """Contact details found in the resume text. None means the regex found nothing."""
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    linkedin: str | None = None
    github: str | None = None
    website: str | None = None


class ExperienceEntry(BaseModel):
    title: str = ""
    company: str = ""
    duration: str = ""
    description: str = ""


class EducationEntry(BaseModel):
    degree: str = ""
    institution: str = ""
    year: str = ""


class ExtraSection(BaseModel):
    """A section whose header matched no known category (projects, awards, ...)."""
    title: str = ""
    content: str = ""


class ParsedResume(BaseModel):
    """Best-effort structure of a plain-text resume.

    Every field may be empty: the parser degrades instead of raising.
    """
    name: str = ""
    contact: Contact = Contact()
    summary: str = ""
    experience: list[ExperienceEntry] = []
    education: list[EducationEntry] = []
    skills: list[str] = []
    sections: list[ExtraSection] = []


class TemplateCategory(str, Enum):
    MODERN = "modern"
    EXECUTIVE = "executive"
    CREATIVE = "creative"
    MINIMAL = "minimal"
    CLASSIC = "classic"


# Theme values end up in inline style attributes: hex colours and plain font names only
HEX_COLOR_PATTERN = r"^#[0-9a-fA-F]{6}$"
FONT_NAME_PATTERN = r"^[A-Za-z0-9 -]{1,64}$"


class ThemeColors(BaseModel):
    primary: str = Field("#2563eb", pattern=HEX_COLOR_PATTERN)
    secondary: str = Field("#64748b", pattern=HEX_COLOR_PATTERN)


class ThemeFonts(BaseModel):
    heading: str = Field("Inter", pattern=FONT_NAME_PATTERN)
    body: str = Field("Inter", pattern=FONT_NAME_PATTERN)


class TemplateTheme(BaseModel):
    colors: ThemeColors = ThemeColors()
    fonts: ThemeFonts = ThemeFonts()


class ResumeTemplate(BaseModel):
    """A selectable resume template."""
    id: str
    name: str
    description: str = ""
    category: TemplateCategory = TemplateCategory.MODERN
    layout: str = "single-column"
    is_premium: bool = False
    theme: TemplateTheme = TemplateTheme()

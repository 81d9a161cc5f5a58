from typing import Literal

from pydantic import BaseModel, Field

from models.resume import ParsedResume, TemplateCategory, TemplateTheme


class QuickAnalyzeRequest(BaseModel):
    resume_text: str = Field(..., min_length=1, max_length=50000, description="Plain text resume content")
    job_description: str = Field(..., min_length=1, max_length=10000, description="Job description text")
    template_id: str | None = Field(None, description="Template used for the rendered document")


class ParseRequest(BaseModel):
    resume_text: str = Field(..., max_length=50000)


class RenderRequest(BaseModel):
    """Render either raw text or an already parsed resume.

    category/theme override the ones of template_id when given.
    """
    resume_text: str | None = Field(None, max_length=50000)
    resume: ParsedResume | None = None
    template_id: str | None = None
    category: TemplateCategory | None = None
    theme: TemplateTheme | None = None
    keywords: list[str] = Field(default_factory=list, max_length=50)
    format: Literal["markdown", "html"] = "markdown"

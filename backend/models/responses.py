from pydantic import BaseModel

from models.resume import ParsedResume


class AnalysisData(BaseModel):
    keywords_added: list[str] = []
    sections_optimized: list[str] = []
    improvement_areas: list[str] = []
    matched_requirements: list[str] = []
    missing_elements: list[str] = []
    strength_areas: list[str] = []


class AnalysisResponse(BaseModel):
    tailored_resume: str = ""
    suggestions: list[str] = []
    ats_score: int = 0
    analysis_data: AnalysisData = AnalysisData()
    template_id: str = ""
    parsed_resume: ParsedResume = ParsedResume()
    document_html: str = ""
    content_warnings: list[str] = []
    resume_preview: str = ""
    resume_language: str = ""
    degraded: bool = False
    scoring_method: str = "llm"


class RenderResponse(BaseModel):
    format: str = "markdown"
    markdown: str | None = None
    html: str | None = None

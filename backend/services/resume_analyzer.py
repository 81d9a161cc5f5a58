"""Orchestrator: tailor a resume to a job description and score it.

Pipeline:
1. Local keyword extraction from JD and resume (also a hint for the LLM)
2. Gemini analysis: tailored Markdown resume, suggestions, ATS score
3. Deterministic local fallback when Gemini is unavailable or fails
4. Parse the tailored resume and render it with the selected template
"""

import logging
import math

from models.responses import AnalysisData, AnalysisResponse
from services import gemini_client, keyword_extractor, prompt_builder
from services.document_renderer import render_document
from services.file_processing import detect_language, generate_preview, validate_resume_content
from services.markdown_renderer import markdown_to_text, tailor_resume_markdown
from services.section_parser import detected_sections, parse_resume
from services.similarity import content_quality_score
from services.templates_catalog import get_template

logger = logging.getLogger(__name__)

# Weights of the local ATS estimate
W_KEYWORDS = 0.6
W_CONTENT = 0.4
LOCAL_SCORE_MIN = 72
LOCAL_SCORE_MAX = 96

DEFAULT_LLM_SCORE = 75

GENERAL_SUGGESTIONS = [
    "Enhanced professional summary to align with specific job requirements",
    "Optimized resume formatting and structure for improved ATS compatibility and readability",
    "Strengthened action verbs and quantified achievements to demonstrate measurable impact",
    "Reorganized skills section to prioritize job-relevant technologies and competencies",
    "Improved keyword density and placement throughout the document for better ATS scoring",
]
CLOSING_SUGGESTIONS = [
    "Enhanced experience descriptions with specific examples and quantifiable results",
    "Optimized section headers and bullet point structure for ATS parsing",
]
IMPROVEMENT_AREAS = [
    "Quantify achievements with specific numbers and percentages",
    "Add relevant industry keywords and technical terminology",
    "Improve formatting consistency and ATS compatibility",
    "Strengthen impact statements with measurable results",
]


def compute_local_ats_score(resume_text: str, job_description: str) -> int:
    """Deterministic ATS estimate from keyword coverage and lexical similarity."""
    job_keywords = keyword_extractor.extract_keywords(job_description)
    resume_keywords = keyword_extractor.extract_keywords(resume_text)
    keyword_pct = keyword_extractor.compute_keyword_match_percentage(resume_keywords, job_keywords)
    content = content_quality_score(resume_text, job_description)
    raw = math.floor(W_KEYWORDS * keyword_pct + W_CONTENT * content)
    return min(max(raw, LOCAL_SCORE_MIN), LOCAL_SCORE_MAX)


def _fallback_suggestions(missing_keywords: list[str]) -> list[str]:
    suggestions = list(GENERAL_SUGGESTIONS)
    if missing_keywords:
        shown = ", ".join(missing_keywords[:3])
        more = " and others" if len(missing_keywords) > 3 else ""
        suggestions.append(
            f"Integrated {len(missing_keywords)} critical keywords: {shown}{more}"
        )
        suggestions.append(
            "Added industry-specific terminology and technical skills mentioned in the job posting"
        )
    return suggestions + CLOSING_SUGGESTIONS


def fallback_analysis(resume_text: str, job_description: str) -> AnalysisResponse:
    """Local analysis used when no LLM result is available."""
    job_keywords = keyword_extractor.extract_keywords(job_description)
    resume_keywords = keyword_extractor.extract_keywords(resume_text)
    missing = keyword_extractor.find_missing_keywords(job_keywords, resume_keywords)

    tailored = tailor_resume_markdown(resume_text, job_description, missing)
    sections = detected_sections(parse_resume(markdown_to_text(tailored)))

    return AnalysisResponse(
        tailored_resume=tailored,
        suggestions=_fallback_suggestions(missing),
        ats_score=compute_local_ats_score(resume_text, job_description),
        analysis_data=AnalysisData(
            keywords_added=missing,
            sections_optimized=sections,
            improvement_areas=list(IMPROVEMENT_AREAS),
            matched_requirements=keyword_extractor.extract_matched_requirements(
                resume_text, job_description
            ),
            missing_elements=missing[:3],
            strength_areas=keyword_extractor.extract_strength_areas(resume_text),
        ),
        degraded=True,
        scoring_method="local_only",
    )


def _str_list(value) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(v) for v in value if v]


def _score(value) -> int:
    try:
        return min(100, max(0, round(float(value))))
    except (TypeError, ValueError):
        return DEFAULT_LLM_SCORE


def from_llm_result(data: dict, resume_text: str) -> AnalysisResponse:
    """Map Gemini's camelCase JSON onto the response model, filling gaps with defaults."""
    raw = data.get("analysisData")
    raw = raw if isinstance(raw, dict) else {}
    tailored = data.get("tailoredResume")
    return AnalysisResponse(
        tailored_resume=tailored if isinstance(tailored, str) and tailored.strip() else resume_text,
        suggestions=_str_list(data.get("suggestions")),
        ats_score=_score(data.get("atsScore", DEFAULT_LLM_SCORE)),
        analysis_data=AnalysisData(
            keywords_added=_str_list(raw.get("keywordsAdded")),
            sections_optimized=_str_list(raw.get("sectionsOptimized")),
            improvement_areas=_str_list(raw.get("improvementAreas")),
            matched_requirements=_str_list(raw.get("matchedRequirements")),
            missing_elements=_str_list(raw.get("missingElements")),
            strength_areas=_str_list(raw.get("strengthAreas")),
        ),
        scoring_method="llm",
    )


async def analyze(
    resume_text: str,
    job_description: str,
    template_id: str | None = None,
    content_warnings: list[str] | None = None,
) -> AnalysisResponse:
    """Run the full analysis and render the result with the chosen template.

    content_warnings are the resume content checks when the caller already ran
    them (uploads do, during file processing); otherwise they are computed here.
    """
    job_keywords = keyword_extractor.extract_keywords(job_description)
    resume_keywords = keyword_extractor.extract_keywords(resume_text)
    missing = keyword_extractor.find_missing_keywords(job_keywords, resume_keywords)

    prompt = prompt_builder.build_analysis_prompt(resume_text, job_description, missing)
    data = await gemini_client.generate_json(prompt)

    if data:
        result = from_llm_result(data, resume_text)
    else:
        logger.warning("Gemini analysis unavailable, using local fallback")
        result = fallback_analysis(resume_text, job_description)

    template = get_template(template_id)
    parsed = parse_resume(markdown_to_text(result.tailored_resume))
    if content_warnings is None:
        _, content_warnings = validate_resume_content(resume_text)

    result.template_id = template.id
    result.parsed_resume = parsed
    result.document_html = render_document(parsed, template.theme, template.category)
    result.content_warnings = content_warnings
    result.resume_preview = generate_preview(resume_text)
    result.resume_language = detect_language(resume_text)
    return result

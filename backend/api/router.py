import logging

from fastapi import APIRouter, File, Form, HTTPException, Request, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import ParseRequest, QuickAnalyzeRequest, RenderRequest
from models.responses import AnalysisResponse, RenderResponse
from models.resume import ParsedResume, ResumeTemplate
from services import file_processing, gemini_client, resume_analyzer
from services.document_renderer import render_document
from services.markdown_renderer import render_markdown
from services.section_parser import parse_resume
from services.templates_catalog import get_template, list_templates

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "gemini_configured": gemini_client.is_configured(),
    }


@router.get("/templates", response_model=list[ResumeTemplate])
async def templates():
    return list_templates()


@router.post("/analyze", response_model=AnalysisResponse)
@limiter.limit(settings.rate_limit)
async def analyze(
    request: Request,
    resume_file: UploadFile = File(...),
    job_description: str = Form(...),
    template_id: str | None = Form(None),
):
    if len(job_description) > settings.max_job_description_chars:
        raise HTTPException(
            status_code=400,
            detail=f"Job description too long (max {settings.max_job_description_chars} chars)",
        )

    content = await resume_file.read()
    try:
        processed = file_processing.process_file(
            content,
            resume_file.filename or "",
            max_bytes=settings.max_upload_size_mb * 1024 * 1024,
            content_type=resume_file.content_type,
        )
    except file_processing.FileValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except file_processing.FileProcessingError as e:
        raise HTTPException(status_code=400, detail=str(e))

    logger.info(
        "Extracted %d words from %s via %s",
        processed.metadata.word_count,
        processed.metadata.file_name,
        processed.metadata.extraction_method,
    )
    return await resume_analyzer.analyze(
        processed.text, job_description, template_id, content_warnings=processed.warnings
    )


@router.post("/analyze/quick", response_model=AnalysisResponse)
@limiter.limit(settings.rate_limit)
async def analyze_quick(request: Request, body: QuickAnalyzeRequest):
    return await resume_analyzer.analyze(body.resume_text, body.job_description, body.template_id)


@router.post("/parse", response_model=ParsedResume)
async def parse(body: ParseRequest):
    return parse_resume(body.resume_text)


@router.post("/render", response_model=RenderResponse)
async def render(body: RenderRequest):
    if body.resume is not None:
        resume = body.resume
    elif body.resume_text is not None:
        resume = parse_resume(body.resume_text)
    else:
        raise HTTPException(status_code=400, detail="Provide resume_text or resume")

    if body.format == "markdown":
        return RenderResponse(format="markdown", markdown=render_markdown(resume, body.keywords))

    template = get_template(body.template_id)
    html = render_document(
        resume,
        theme=body.theme or template.theme,
        category=body.category or template.category,
    )
    return RenderResponse(format="html", html=html)

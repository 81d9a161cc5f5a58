"""Resume file handling: validation, PDF/DOCX text extraction and content checks."""

import io
import logging
import re
from dataclasses import dataclass, field

import pdfplumber
from docx import Document

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"
DOCX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
ALLOWED_CONTENT_TYPES: dict[str, str] = {
    PDF_CONTENT_TYPE: ".pdf",
    DOCX_CONTENT_TYPE: ".docx",
}

MIN_FILE_BYTES = 100
MIN_TEXT_CHARS = 50
MIN_RESUME_WORDS = 100
MAX_RESUME_WORDS = 1000

_CONTROL_CHARS_RE = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F-\x9F]")
_INLINE_SPACE_RE = re.compile(r"[ \t\f\v]+")
_EXTRA_NEWLINES_RE = re.compile(r"\n{3,}")

# Cues for the sections a resume is expected to have
_CONTENT_CUES: dict[str, re.Pattern] = {
    "contact": re.compile(r"email|phone|address|linkedin|github", re.IGNORECASE),
    "experience": re.compile(r"experience|work|employment|job|position", re.IGNORECASE),
    "education": re.compile(r"education|degree|university|college|school", re.IGNORECASE),
    "skills": re.compile(r"skills|technologies|proficient|expertise", re.IGNORECASE),
}

_ENGLISH_WORDS = frozenset({"the", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with", "by"})
LANGUAGE_SAMPLE_WORDS = 100


class FileValidationError(ValueError):
    """The upload is rejected before any parsing happens."""


class FileProcessingError(RuntimeError):
    """The file was accepted but no usable text came out of it."""


@dataclass
class FileMetadata:
    file_name: str
    file_size: int
    file_type: str
    word_count: int
    extraction_method: str
    page_count: int | None = None


@dataclass
class FileProcessingResult:
    text: str
    metadata: FileMetadata
    warnings: list[str] = field(default_factory=list)


def detect_content_type(filename: str, content_type: str | None = None) -> str | None:
    """Resolve the content type, falling back to the file extension."""
    if content_type in ALLOWED_CONTENT_TYPES:
        return content_type
    lower = filename.lower()
    for ctype, ext in ALLOWED_CONTENT_TYPES.items():
        if lower.endswith(ext):
            return ctype
    return None


def validate_file(filename: str, size: int, max_bytes: int, content_type: str | None = None) -> str:
    """Check size, type and name of an upload. Returns the resolved content type."""
    if size > max_bytes:
        raise FileValidationError(f"File size must be less than {max_bytes // (1024 * 1024)}MB")

    resolved = detect_content_type(filename, content_type)
    if resolved is None:
        raise FileValidationError("Only PDF and DOCX files are allowed")

    lower = filename.lower()
    if ".." in lower or "/" in lower or "\\" in lower:
        raise FileValidationError("Invalid file name")

    if size < MIN_FILE_BYTES:
        raise FileValidationError("File appears to be empty or corrupted")

    return resolved


def extract_text(pdf_bytes: bytes) -> tuple[str, int]:
    """Extract all text from a PDF file. Returns (text, page_count)."""
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(pages).strip(), len(pages)


def extract_text_docx(docx_bytes: bytes) -> str:
    """Extract all text from a DOCX file."""
    doc = Document(io.BytesIO(docx_bytes))
    return "\n".join(p.text for p in doc.paragraphs).strip()


def clean_extracted_text(text: str) -> str:
    """Normalise extracted text while keeping its line structure."""
    text = _CONTROL_CHARS_RE.sub("", text.replace("\r\n", "\n").replace("\r", "\n"))
    lines = [_INLINE_SPACE_RE.sub(" ", line).strip() for line in text.split("\n")]
    return _EXTRA_NEWLINES_RE.sub("\n\n", "\n".join(lines)).strip()


def count_words(text: str) -> int:
    return len(text.split())


def process_file(
    content: bytes, filename: str, max_bytes: int, content_type: str | None = None
) -> FileProcessingResult:
    """Validate an upload and turn it into clean resume text."""
    resolved = validate_file(filename, len(content), max_bytes, content_type)

    page_count = None
    try:
        if resolved == PDF_CONTENT_TYPE:
            raw, page_count = extract_text(content)
            method = "pdfplumber"
        else:
            raw = extract_text_docx(content)
            method = "python-docx"
    except Exception as e:
        logger.error("Text extraction failed for %s: %s", filename, e)
        raise FileProcessingError(
            "Failed to extract text. The file may be corrupted or contain only images."
        ) from e

    text = clean_extracted_text(raw)
    if len(text) < MIN_TEXT_CHARS:
        raise FileProcessingError(
            "Insufficient text content extracted. Please ensure your resume contains readable text."
        )

    _, warnings = validate_resume_content(text)
    return FileProcessingResult(
        text=text,
        metadata=FileMetadata(
            file_name=filename,
            file_size=len(content),
            file_type=resolved,
            word_count=count_words(text),
            extraction_method=method,
            page_count=page_count,
        ),
        warnings=warnings,
    )


def validate_resume_content(text: str) -> tuple[bool, list[str]]:
    """Check a resume for missing sections and size problems.

    Returns (is_valid, suggestions). Only a too-short resume is invalid;
    everything else is advice.
    """
    suggestions = [
        f"Consider adding a {section} section to your resume"
        for section, cue in _CONTENT_CUES.items()
        if not cue.search(text)
    ]

    is_valid = True
    words = count_words(text)
    if words < MIN_RESUME_WORDS:
        is_valid = False
        suggestions.append(
            "Resume appears too short. Consider adding more details about your experience and skills."
        )
    elif words > MAX_RESUME_WORDS:
        suggestions.append(
            "Resume is quite long. Consider condensing to 1-2 pages for better readability."
        )

    if not re.search(r"\b\d{4}\b", text):
        suggestions.append("Consider adding dates to your experience and education sections.")
    if not re.search(r"@|email", text, re.IGNORECASE):
        suggestions.append("Make sure to include your email address for contact purposes.")

    return is_valid, suggestions


def generate_preview(text: str, max_length: int = 500) -> str:
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


def detect_language(text: str) -> str:
    """Rough English check from function-word frequency in the first 100 words."""
    words = text.lower().split()[:LANGUAGE_SAMPLE_WORDS]
    if not words:
        return "unknown"
    english = sum(1 for w in words if w in _ENGLISH_WORDS)
    ratio = english / len(words)
    return "en" if ratio > 0.1 else "unknown"

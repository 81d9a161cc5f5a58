import io

import pytest
from docx import Document

from services.file_processing import (
    DOCX_CONTENT_TYPE,
    PDF_CONTENT_TYPE,
    FileProcessingError,
    FileValidationError,
    clean_extracted_text,
    count_words,
    detect_content_type,
    detect_language,
    generate_preview,
    process_file,
    validate_file,
    validate_resume_content,
)

MAX_BYTES = 10 * 1024 * 1024


def _make_docx(text: str) -> bytes:
    doc = Document()
    for line in text.split("\n"):
        doc.add_paragraph(line)
    buf = io.BytesIO()
    doc.save(buf)
    return buf.getvalue()


# --- Validation ---

def test_detect_content_type():
    assert detect_content_type("cv.pdf", PDF_CONTENT_TYPE) == PDF_CONTENT_TYPE
    assert detect_content_type("cv.PDF", "application/octet-stream") == PDF_CONTENT_TYPE
    assert detect_content_type("cv.docx") == DOCX_CONTENT_TYPE
    assert detect_content_type("cv.txt", "text/plain") is None


def test_validate_file_ok():
    assert validate_file("resume.pdf", 2048, MAX_BYTES) == PDF_CONTENT_TYPE


def test_validate_file_too_large():
    with pytest.raises(FileValidationError, match="less than 10MB"):
        validate_file("resume.pdf", MAX_BYTES + 1, MAX_BYTES)


def test_validate_file_wrong_type():
    with pytest.raises(FileValidationError, match="Only PDF and DOCX"):
        validate_file("resume.txt", 2048, MAX_BYTES, "text/plain")


def test_validate_file_bad_name():
    for name in ("../resume.pdf", "dir/resume.pdf", "dir\\resume.pdf"):
        with pytest.raises(FileValidationError, match="Invalid file name"):
            validate_file(name, 2048, MAX_BYTES)


def test_validate_file_too_small():
    with pytest.raises(FileValidationError, match="empty or corrupted"):
        validate_file("resume.pdf", 10, MAX_BYTES)


def test_validate_file_size_checked_before_type():
    with pytest.raises(FileValidationError, match="less than"):
        validate_file("resume.txt", MAX_BYTES + 1, MAX_BYTES)


# --- Extraction ---

def test_process_file_docx(sample_resume):
    content = _make_docx(sample_resume)
    result = process_file(content, "resume.docx", MAX_BYTES, DOCX_CONTENT_TYPE)
    assert result.text.startswith("Jane Smith")
    assert "Senior Software Engineer" in result.text
    assert result.metadata.extraction_method == "python-docx"
    assert result.metadata.file_type == DOCX_CONTENT_TYPE
    assert result.metadata.file_size == len(content)
    assert result.metadata.word_count == count_words(result.text)
    assert result.metadata.page_count is None
    # The sample is well under the word minimum
    assert any("too short" in w for w in result.warnings)


def test_process_file_docx_insufficient_text():
    content = _make_docx("Jane")
    with pytest.raises(FileProcessingError, match="Insufficient text"):
        process_file(content, "resume.docx", MAX_BYTES)


def test_process_file_corrupt_pdf():
    with pytest.raises(FileProcessingError, match="Failed to extract text"):
        process_file(b"not really a pdf " * 20, "resume.pdf", MAX_BYTES, PDF_CONTENT_TYPE)


def test_process_file_rejects_before_extraction():
    with pytest.raises(FileValidationError):
        process_file(b"x" * 500, "resume.txt", MAX_BYTES, "text/plain")


def test_clean_extracted_text():
    raw = "Jane\r\n  Smith\t\tjr \x00\n\n\n\n\nSkills  \x07"
    assert clean_extracted_text(raw) == "Jane\nSmith jr\n\nSkills"


# --- Content checks ---

def test_validate_resume_content_complete():
    words = " ".join(["word"] * 120)
    text = f"email jane@example.com experience education skills 2020 {words}"
    is_valid, suggestions = validate_resume_content(text)
    assert is_valid
    assert suggestions == []


def test_validate_resume_content_missing_everything():
    is_valid, suggestions = validate_resume_content("hello there")
    assert not is_valid
    assert "Consider adding a contact section to your resume" in suggestions
    assert "Consider adding a skills section to your resume" in suggestions
    assert any("too short" in s for s in suggestions)
    assert any("dates" in s for s in suggestions)
    assert any("email address" in s for s in suggestions)


def test_validate_resume_content_too_long():
    text = "email experience education skills 2020 " + " ".join(["word"] * 1200)
    is_valid, suggestions = validate_resume_content(text)
    assert is_valid
    assert any("quite long" in s for s in suggestions)


def test_generate_preview():
    assert generate_preview("short") == "short"
    assert generate_preview("x" * 600) == "x" * 500 + "..."


def test_detect_language():
    assert detect_language("I worked on the team and led the migration of services") == "en"
    assert detect_language("") == "unknown"
    assert detect_language("Python Django PostgreSQL Docker") == "unknown"


def test_detect_language_samples_first_100_words():
    # Function words only after the first 100 words are not looked at
    assert detect_language("Python " * 100 + "the " * 50) == "unknown"
    assert detect_language("the " * 50 + "Python " * 100) == "en"

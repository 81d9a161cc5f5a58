import io

from docx import Document
from fastapi.testclient import TestClient

from main import app
from services.file_processing import DOCX_CONTENT_TYPE

client = TestClient(app)


def _docx_bytes(text: str) -> bytes:
    doc = Document()
    for line in text.split("\n"):
        doc.add_paragraph(line)
    buf = io.BytesIO()
    doc.save(buf)
    return buf.getvalue()


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["gemini_configured"] is False


def test_templates():
    response = client.get("/templates")
    assert response.status_code == 200
    data = response.json()
    assert [t["id"] for t in data] == [
        "modern-professional", "executive-classic", "creative-designer",
        "tech-minimalist", "corporate-professional",
    ]
    assert data[0]["is_premium"] is False
    assert data[0]["theme"]["colors"]["primary"] == "#2563eb"


def test_parse(sample_resume):
    response = client.post("/parse", json={"resume_text": sample_resume})
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Jane Smith"
    assert data["contact"]["email"] == "jane.smith@example.com"
    assert data["experience"][0]["duration"] == "Jan 2021 - Present"
    assert data["skills"][:2] == ["Python", "Django"]


def test_parse_empty_text():
    response = client.post("/parse", json={"resume_text": ""})
    assert response.status_code == 200
    assert response.json()["name"] == ""


def test_render_markdown_with_keywords():
    response = client.post(
        "/render",
        json={"resume_text": "Jane\nSkills\nPython", "keywords": ["Kubernetes"]},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["format"] == "markdown"
    assert data["markdown"] == "# Jane\n\n## Skills\n\n- Python\n- Kubernetes"
    assert data["html"] is None


def test_render_html_from_parsed_resume():
    response = client.post(
        "/render",
        json={
            "resume": {"name": "Jane", "skills": ["Go"]},
            "template_id": "creative-designer",
            "format": "html",
        },
    )
    assert response.status_code == 200
    html = response.json()["html"]
    assert "template-creative" in html
    assert "#7c3aed" in html


def test_render_html_category_override():
    response = client.post(
        "/render",
        json={
            "resume_text": "Jane",
            "template_id": "modern-professional",
            "category": "executive",
            "format": "html",
        },
    )
    assert response.status_code == 200
    assert "template-executive" in response.json()["html"]


def test_render_rejects_css_in_theme():
    response = client.post(
        "/render",
        json={
            "resume_text": "Jane",
            "format": "html",
            "theme": {"colors": {"primary": "red; background:url(http://evil)"}},
        },
    )
    assert response.status_code == 422


def test_render_html_custom_theme():
    response = client.post(
        "/render",
        json={
            "resume_text": "Jane",
            "format": "html",
            "theme": {"colors": {"primary": "#112233"}, "fonts": {"heading": "Fira Sans"}},
        },
    )
    assert response.status_code == 200
    html = response.json()["html"]
    assert "color: #112233" in html
    assert "Fira Sans" in html


def test_render_requires_input():
    response = client.post("/render", json={"format": "markdown"})
    assert response.status_code == 400


def test_render_rejects_unknown_format():
    response = client.post("/render", json={"resume_text": "Jane", "format": "pdf"})
    assert response.status_code == 422


def test_analyze_quick(sample_resume, sample_jd):
    response = client.post(
        "/analyze/quick",
        json={
            "resume_text": sample_resume,
            "job_description": sample_jd,
            "template_id": "tech-minimalist",
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["degraded"] is True
    assert data["scoring_method"] == "local_only"
    assert 72 <= data["ats_score"] <= 96
    assert data["template_id"] == "tech-minimalist"
    assert data["parsed_resume"]["name"] == "Jane Smith"
    assert "template-minimal" in data["document_html"]
    assert "Terraform" in data["analysis_data"]["keywords_added"]


def test_analyze_quick_validation():
    response = client.post("/analyze/quick", json={"resume_text": "", "job_description": "x"})
    assert response.status_code == 422


def test_analyze_rejects_text_file(sample_jd):
    response = client.post(
        "/analyze",
        files={"resume_file": ("resume.txt", b"plain text resume " * 20, "text/plain")},
        data={"job_description": sample_jd},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Only PDF and DOCX files are allowed"


def test_analyze_docx(sample_resume, sample_jd):
    response = client.post(
        "/analyze",
        files={"resume_file": ("resume.docx", _docx_bytes(sample_resume), DOCX_CONTENT_TYPE)},
        data={"job_description": sample_jd, "template_id": "executive-classic"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["template_id"] == "executive-classic"
    assert data["parsed_resume"]["experience"][0]["company"] == "Acme Inc"
    assert data["tailored_resume"].startswith("# Jane Smith")
    assert any("too short" in w for w in data["content_warnings"])
    assert data["resume_preview"].startswith("Jane Smith")


def test_analyze_job_description_too_long(sample_resume):
    response = client.post(
        "/analyze",
        files={"resume_file": ("resume.docx", _docx_bytes(sample_resume), DOCX_CONTENT_TYPE)},
        data={"job_description": "x" * 10001},
    )
    assert response.status_code == 400
    assert "too long" in response.json()["detail"]

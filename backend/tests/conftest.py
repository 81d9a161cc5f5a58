"""Shared test configuration, fixtures and pytest markers."""

import pytest

from config import settings

SAMPLE_RESUME = """Jane Smith
jane.smith@example.com | (555) 123-4567 | Austin, TX
linkedin.com/in/janesmith | github.com/janesmith | https://janesmith.dev

Summary
Backend engineer with 6 years building Python services.

Experience
Senior Software Engineer
Acme Inc
Jan 2021 - Present
Led migration of billing services to Kubernetes
Reduced API latency by 40%

Software Engineer
Globex Corporation
2017 - 2020
Built REST APIs with Django

Education
B.S. Computer Science
University of Texas
2017

Skills
Python, Django, PostgreSQL, Docker | AWS
• Redis

Projects
Open-source contributor to FastAPI
"""

SAMPLE_JD = """Senior Python Developer

Requirements:
- 5+ years of experience with Python and Django
- Experience with PostgreSQL, Redis and Kubernetes
- Familiarity with Terraform and GraphQL
- Strong communication and mentoring skills
"""


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: calls the real Gemini API (needs GEMINI_API_KEY)"
    )


@pytest.fixture(autouse=True)
def _offline_gemini(monkeypatch):
    """Keep tests off the network: no API key means the local fallback runs."""
    monkeypatch.setattr(settings, "gemini_api_key", "")


@pytest.fixture
def sample_resume() -> str:
    return SAMPLE_RESUME


@pytest.fixture
def sample_jd() -> str:
    return SAMPLE_JD

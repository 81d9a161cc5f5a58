"""Keyword extraction and comparison for resume-JD analysis.

Matching is deliberately loose: a keyword counts as present when it and a
word of the text contain one another, so "AI" is found inside "air". The
tables are static and the output order is the order of first match.
"""

import logging
import re

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Static keyword tables
# ---------------------------------------------------------------------------
TECHNICAL_KEYWORDS: tuple[str, ...] = (
    "JavaScript", "TypeScript", "React", "Node.js", "Python", "Java", "C++", "C#", "PHP", "Ruby",
    "AWS", "Azure", "GCP", "Docker", "Kubernetes", "Jenkins", "Git", "GitHub", "GitLab",
    "SQL", "MongoDB", "PostgreSQL", "MySQL", "Redis", "Elasticsearch",
    "REST API", "GraphQL", "Microservices", "Serverless", "CI/CD", "DevOps",
    "Machine Learning", "AI", "Data Science", "Analytics", "Big Data", "TensorFlow", "PyTorch",
    "Agile", "Scrum", "Kanban", "JIRA", "Confluence", "Slack", "Teams",
)

SOFT_SKILL_KEYWORDS: tuple[str, ...] = (
    "Leadership", "Management", "Communication", "Problem Solving", "Critical Thinking",
    "Team Collaboration", "Strategic Planning", "Project Management", "Budget Management",
    "Stakeholder Management", "Cross-functional", "Mentoring", "Training", "Coaching",
)

BUSINESS_KEYWORDS: tuple[str, ...] = (
    "Revenue", "Growth", "ROI", "KPI", "Metrics", "Performance", "Optimization",
    "Strategy", "Innovation", "Digital Transformation", "Process Improvement",
    "Customer Experience", "User Experience", "Product Development", "Market Research",
)

ALL_KEYWORDS: tuple[str, ...] = TECHNICAL_KEYWORDS + SOFT_SKILL_KEYWORDS + BUSINESS_KEYWORDS

# Capitalized words that are never worth reporting as skills
CAPITALIZED_STOPWORDS: frozenset[str] = frozenset({
    "The", "And", "Or", "But", "In", "On", "At", "To", "For", "Of", "With", "By", "From", "About",
})

CAPITALIZED_RE = re.compile(r"\b[A-Z][a-z]+(?:[ \t]+[A-Z][a-z]+)*\b")
_TOKEN_SPLIT_RE = re.compile(r"\W+")

# Shorter tokens ("a", "in", "for") would match inside nearly every keyword
MIN_REVERSE_TOKEN_LENGTH = 4

MAX_MISSING_KEYWORDS = 8
MAX_MATCHED_REQUIREMENTS = 5
MAX_STRENGTH_AREAS = 3


def _tokenize(text: str) -> list[str]:
    """Lowercase word tokens, empties removed."""
    return [t for t in _TOKEN_SPLIT_RE.split(text.lower()) if t]


def _keyword_in_text(keyword: str, text_lower: str, tokens: list[str]) -> bool:
    kw = keyword.lower()
    if kw in text_lower:
        return True
    for token in tokens:
        if kw in token:
            return True
        if len(token) >= MIN_REVERSE_TOKEN_LENGTH and token in kw:
            return True
    return False


def extract_table_keywords(text: str) -> list[str]:
    """Keywords from the static tables found in text, in table order."""
    text_lower = text.lower()
    tokens = _tokenize(text)
    return [kw for kw in ALL_KEYWORDS if _keyword_in_text(kw, text_lower, tokens)]


def extract_capitalized_terms(text: str) -> list[str]:
    """Capitalized word runs ("Product Owner", "Terraform") in text order."""
    return [
        term for term in CAPITALIZED_RE.findall(text)
        if len(term) > 2 and term not in CAPITALIZED_STOPWORDS
    ]


def extract_keywords(text: str) -> list[str]:
    """Extract keywords from free text.

    Table hits come first, then capitalized terms; duplicates keep their
    first position.
    """
    found = extract_table_keywords(text) + extract_capitalized_terms(text)
    return list(dict.fromkeys(found))


def find_missing_keywords(
    job_keywords: list[str],
    resume_keywords: list[str],
    limit: int = MAX_MISSING_KEYWORDS,
) -> list[str]:
    """Job keywords that no resume keyword contains."""
    resume_lower = [kw.lower() for kw in resume_keywords]
    missing = [
        kw for kw in job_keywords
        if not any(kw.lower() in r for r in resume_lower)
    ]
    return missing[:limit]


def extract_matched_requirements(
    resume_text: str,
    job_description: str,
    limit: int = MAX_MATCHED_REQUIREMENTS,
) -> list[str]:
    """Job keywords that overlap (in either direction) with a resume keyword."""
    resume_lower = [kw.lower() for kw in extract_keywords(resume_text)]
    matched = []
    for kw in extract_keywords(job_description):
        kw_lower = kw.lower()
        if any(kw_lower in r or r in kw_lower for r in resume_lower):
            matched.append(kw)
    return matched[:limit]


_STRENGTH_CUES: list[tuple[re.Pattern, str]] = [
    (re.compile(r"lead|manage", re.IGNORECASE), "Leadership and management experience"),
    (
        re.compile(r"\d+%|\d+\s*(?:years?|months?)", re.IGNORECASE),
        "Quantified achievements and experience metrics",
    ),
    (re.compile(r"team|collaborate", re.IGNORECASE), "Strong collaboration and teamwork skills"),
    (re.compile(r"project|deliver", re.IGNORECASE), "Project delivery and execution capabilities"),
]


def extract_strength_areas(resume_text: str, limit: int = MAX_STRENGTH_AREAS) -> list[str]:
    """Canned strength statements triggered by cues in the resume text."""
    strengths = [label for pattern, label in _STRENGTH_CUES if pattern.search(resume_text)]
    return strengths[:limit]


def compute_keyword_match_percentage(
    resume_keywords: list[str], job_keywords: list[str], cap: float = 90.0
) -> float:
    """Resume keyword count relative to the job's, as a capped percentage."""
    ratio = len(resume_keywords) / max(len(job_keywords), 1)
    return min(ratio * 100, cap)

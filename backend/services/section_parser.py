"""Resume section segmentation, block parsing and contact extraction.

Everything here is heuristic: malformed input produces empty fields, never
an exception.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass

from models.resume import (
    Contact,
    EducationEntry,
    ExperienceEntry,
    ExtraSection,
    ParsedResume,
)

# Phrases that mark a line as a section header (case-insensitive containment)
SECTION_HEADERS: tuple[str, ...] = (
    "summary", "objective", "profile",
    "experience", "work experience", "employment", "professional experience",
    "education", "academic background",
    "skills", "technical skills", "core competencies",
    "projects", "certifications", "achievements", "awards",
)

# Lines this long are prose, even when they mention "experience"
HEADER_MAX_LENGTH = 50


def _contains_any(*needles: str) -> Callable[[str], bool]:
    return lambda header: any(n in header for n in needles)


# Evaluated in order; the first matching rule classifies the header.
# "Skills & Experience" is therefore experience, "Profile Summary" is summary.
SECTION_RULES: list[tuple[str, Callable[[str], bool]]] = [
    ("summary", _contains_any("summary", "objective", "profile")),
    ("experience", _contains_any("experience", "employment")),
    ("education", _contains_any("education")),
    ("skills", _contains_any("skill")),
]

# Contact info patterns
EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
PHONE_RE = re.compile(r"(?:\+?1[-.\s]?)?\(?[0-9]{3}\)?[-.\s]?[0-9]{3}[-.\s]?[0-9]{4}")
LINKEDIN_RE = re.compile(r"linkedin\.com/(?:in|pub)/[A-Za-z0-9-]+", re.IGNORECASE)
GITHUB_RE = re.compile(r"github\.com/[A-Za-z0-9-]+", re.IGNORECASE)
URL_RE = re.compile(r"\b(?:https?://|www\.)[^\s|,;]+", re.IGNORECASE)
LOCATION_RE = re.compile(r"\b[A-Z][a-zA-Z]+(?: [A-Z][a-zA-Z]+)*, [A-Z]{2}\b")

# Location is only trusted near the top, where the contact block lives
LOCATION_SEARCH_LINES = 5

# Date ranges: "2019 - 2021", "2020-Present", "Jan 2019 – Mar 2021"
_MONTHS = r"(?:jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)[a-z]*"
YEAR_RANGE_RE = re.compile(r"\b\d{4}\s*[-–—]\s*(?:\d{4}|present|current)\b", re.IGNORECASE)
MONTH_RANGE_RE = re.compile(
    rf"\b{_MONTHS}\s+\d{{4}}\s*[-–—]\s*(?:{_MONTHS}\s+\d{{4}}|present|current)\b",
    re.IGNORECASE,
)
YEAR_RE = re.compile(r"\b\d{4}\b")

SKILL_SPLIT_RE = re.compile(r"[,•\n\-|]")
SKILL_MIN_LENGTH = 1  # exclusive
SKILL_MAX_LENGTH = 30  # exclusive

_PARAGRAPH_SPLIT_RE = re.compile(r"\n\s*\n")
_TITLE_WORD_RE = re.compile(r"\w\S*")


@dataclass(frozen=True)
class SectionBlock:
    """Raw lines between one header and the next."""
    header: str
    content: str


def is_section_header(line: str) -> bool:
    """A short line containing one of the known header phrases."""
    lower = line.lower()
    return len(line) < HEADER_MAX_LENGTH and any(h in lower for h in SECTION_HEADERS)


def classify_header(header: str) -> str | None:
    """Canonical section for a header line, or None for the catch-all."""
    lower = header.lower()
    for section, predicate in SECTION_RULES:
        if predicate(lower):
            return section
    return None


def segment_sections(lines: list[str]) -> list[SectionBlock]:
    """Split trimmed lines (name line excluded) into header blocks.

    Lines before the first header are dropped, and so are headers with no
    content. Blank lines inside a block are kept as paragraph separators.
    """
    blocks: list[SectionBlock] = []
    header: str | None = None
    current: list[str] = []

    def flush():
        content = "\n".join(current).strip()
        if header is not None and content:
            blocks.append(SectionBlock(header=header, content=content))

    for line in lines:
        if line and is_section_header(line):
            flush()
            header = line
            current = []
        elif header is not None:
            current.append(line)

    flush()
    return blocks


def _paragraphs(content: str) -> list[list[str]]:
    paragraphs = []
    for block in _PARAGRAPH_SPLIT_RE.split(content):
        if block.strip():
            paragraphs.append([line.strip() for line in block.strip().split("\n")])
    return paragraphs


def extract_duration(text: str) -> str:
    """First month-year range, else first year range, else ''.

    Month ranges go first: the year pattern alone would cut "Jan 2021 - Present"
    down to "2021 - Present".
    """
    match = MONTH_RANGE_RE.search(text) or YEAR_RANGE_RE.search(text)
    return match.group() if match else ""


def extract_year(text: str) -> str:
    match = YEAR_RE.search(text)
    return match.group() if match else ""


def parse_experience(content: str) -> list[ExperienceEntry]:
    """One entry per paragraph: title, company, then description lines."""
    entries = []
    for lines in _paragraphs(content):
        if len(lines) < 2:
            continue
        block = "\n".join(lines)
        duration = extract_duration(block)
        description = [ln for ln in lines[2:] if not duration or ln != duration]
        entries.append(ExperienceEntry(
            title=lines[0],
            company=lines[1],
            duration=duration,
            description="\n".join(description),
        ))
    return entries


def parse_education(content: str) -> list[EducationEntry]:
    entries = []
    for lines in _paragraphs(content):
        block = "\n".join(lines)
        entries.append(EducationEntry(
            degree=lines[0],
            institution=lines[1] if len(lines) > 1 else "",
            year=extract_year(block),
        ))
    return entries


def parse_skills(content: str) -> list[str]:
    """Tokenize a skills block on commas, bullets, hyphens, pipes and newlines."""
    skills: list[str] = []
    seen: set[str] = set()
    for token in SKILL_SPLIT_RE.split(content):
        skill = token.strip()
        if not SKILL_MIN_LENGTH < len(skill) < SKILL_MAX_LENGTH:
            continue
        key = skill.lower()
        if key not in seen:
            seen.add(key)
            skills.append(skill)
    return skills


def title_case(text: str) -> str:
    """'KEY PROJECTS' -> 'Key Projects'."""
    return _TITLE_WORD_RE.sub(lambda m: m.group()[0].upper() + m.group()[1:].lower(), text)


def extract_contact_info(text: str) -> Contact:
    """Find contact fields anywhere in the text; each field is independent."""
    email = EMAIL_RE.search(text)
    phone = PHONE_RE.search(text)
    linkedin = LINKEDIN_RE.search(text)
    github = GITHUB_RE.search(text)

    website = None
    for match in URL_RE.finditer(text):
        url = match.group().rstrip(".")
        lower = url.lower()
        if "linkedin.com" not in lower and "github.com" not in lower:
            website = url
            break

    header_text = "\n".join(text.strip().split("\n")[:LOCATION_SEARCH_LINES])
    location = LOCATION_RE.search(header_text)

    return Contact(
        email=email.group() if email else None,
        phone=phone.group() if phone else None,
        location=location.group() if location else None,
        linkedin=linkedin.group() if linkedin else None,
        github=github.group() if github else None,
        website=website,
    )


def _apply_block(resume: ParsedResume, block: SectionBlock) -> None:
    section = classify_header(block.header)
    if section == "summary":
        if not resume.summary:
            resume.summary = block.content
    elif section == "experience":
        resume.experience.extend(parse_experience(block.content))
    elif section == "education":
        resume.education.extend(parse_education(block.content))
    elif section == "skills":
        for skill in parse_skills(block.content):
            if skill.lower() not in {s.lower() for s in resume.skills}:
                resume.skills.append(skill)
    else:
        resume.sections.append(
            ExtraSection(title=title_case(block.header), content=block.content)
        )


def parse_resume(text: str) -> ParsedResume:
    """Parse plain resume text into a ParsedResume.

    The first non-empty line is the name. Later blank lines are kept so
    that experience and education entries can be split into paragraphs.
    """
    lines = [line.strip() for line in text.split("\n")]
    start = next((i for i, line in enumerate(lines) if line), None)
    resume = ParsedResume(contact=extract_contact_info(text))
    if start is None:
        return resume

    resume.name = lines[start]
    for block in segment_sections(lines[start + 1:]):
        _apply_block(resume, block)
    return resume


def detected_sections(resume: ParsedResume) -> list[str]:
    """Names of the sections that ended up with content."""
    present = []
    if resume.summary:
        present.append("summary")
    if resume.experience:
        present.append("experience")
    if resume.education:
        present.append("education")
    if resume.skills:
        present.append("skills")
    present.extend(s.title for s in resume.sections)
    return present


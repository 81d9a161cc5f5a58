"""Markdown rendering of parsed resumes, with missing-keyword injection."""

import re
from collections.abc import Iterable

from models.resume import ParsedResume
from services.keyword_extractor import extract_keywords
from services.section_parser import parse_resume

MAX_INJECTED_KEYWORDS = 5
SUMMARY_HIGHLIGHTS = 3

SKILLS_HEADING = "## Skills"
OPTIMIZATION_FOOTER = (
    "*Resume optimized with ResumeAI for enhanced ATS compatibility and job-specific targeting*"
)

# A level-2 section runs until the next level-1/2 heading or the end of the document
SKILLS_SECTION_RE = re.compile(
    r"^## (?:Skills|Technical Skills|Core Competencies)[ \t]*$[\s\S]*?(?=\n## |\n# |\Z)",
    re.IGNORECASE | re.MULTILINE,
)
SUMMARY_SECTION_RE = re.compile(
    r"^## (?:Summary|Objective|Professional Summary|Profile)[ \t]*$[\s\S]*?(?=\n## |\n# |\Z)",
    re.IGNORECASE | re.MULTILINE,
)
_BULLET_PREFIX_RE = re.compile(r"^[•\-*–]\s*")
_HEADING_PREFIX_RE = re.compile(r"^#{1,6}\s+")
_EMPHASIS_RE = re.compile(r"\*\*(.+?)\*\*|\*(.+?)\*")
_RULE_RE = re.compile(r"^(?:-{3,}|\*{3,}|_{3,})$")
_SKILL_ITEM_SPLIT_RE = re.compile(r"[,|•]")


def _bullet(line: str) -> str:
    return f"- {_BULLET_PREFIX_RE.sub('', line)}"


def _unemphasize(text: str) -> str:
    return _EMPHASIS_RE.sub(lambda m: m.group(1) or m.group(2), text)


def _listed_skills(section: str) -> set[str]:
    """Lowercased skill items of a skills section, heading line excluded."""
    items = set()
    for line in section.split("\n")[1:]:
        line = _BULLET_PREFIX_RE.sub("", _unemphasize(line.strip()))
        for item in _SKILL_ITEM_SPLIT_RE.split(line):
            item = item.strip()
            if item:
                items.add(item.lower())
    return items


def _contact_line(resume: ParsedResume) -> str:
    c = resume.contact
    parts = [c.email, c.phone, c.location, c.linkedin, c.github, c.website]
    return " | ".join(p for p in parts if p)


def _render_parts(resume: ParsedResume) -> list[str]:
    parts: list[str] = []
    if resume.name:
        parts.append(f"# {resume.name}")
    contact = _contact_line(resume)
    if contact:
        parts.append(contact)

    if resume.summary:
        parts.append(f"## Professional Summary\n\n{resume.summary}")

    if resume.experience:
        entries = []
        for exp in resume.experience:
            lines = [f"### {exp.title}", f"**{exp.company}**"]
            if exp.duration:
                lines.append(f"*{exp.duration}*")
            # Bullets stay attached so the entry survives a re-parse as one paragraph
            lines.extend(_bullet(ln) for ln in exp.description.split("\n") if ln.strip())
            entries.append("\n".join(lines))
        parts.append("## Professional Experience\n\n" + "\n\n".join(entries))

    if resume.education:
        entries = []
        for edu in resume.education:
            lines = [f"**{edu.degree}**"]
            if edu.institution:
                lines.append(edu.institution)
            if edu.year:
                lines.append(f"*{edu.year}*")
            entries.append("\n".join(lines))
        parts.append("## Education\n\n" + "\n\n".join(entries))

    if resume.skills:
        parts.append(f"{SKILLS_HEADING}\n\n" + "\n".join(f"- {s}" for s in resume.skills))

    for section in resume.sections:
        parts.append(f"## {section.title}\n\n{section.content}")
    return parts


def inject_keywords(
    markdown: str, keywords: Iterable[str], limit: int = MAX_INJECTED_KEYWORDS
) -> str:
    """Add keywords to the skills section, creating one if there is none.

    A keyword is skipped only when it equals (case-insensitively) an item
    already listed there, so "Java" is still added next to "JavaScript".
    """
    keywords = [kw for kw in dict.fromkeys(keywords) if kw.strip()]
    if not keywords:
        return markdown

    match = SKILLS_SECTION_RE.search(markdown)
    if match:
        existing = match.group().rstrip()
        listed = _listed_skills(existing)
        new = [kw for kw in keywords if kw.strip().lower() not in listed][:limit]
        if not new:
            return markdown
        enhanced = existing + "\n" + "\n".join(f"- {kw}" for kw in new)
        return markdown[:match.start()] + enhanced + markdown[match.start() + len(existing):]

    section = f"{SKILLS_HEADING}\n\n" + "\n".join(f"- {kw}" for kw in keywords[:limit])
    if not markdown.strip():
        return section
    return f"{markdown.rstrip()}\n\n{section}"


def enhance_summary(markdown: str, highlights: list[str]) -> str:
    """Append a key-strengths sentence to the summary section, if there is one."""
    if not highlights:
        return markdown
    match = SUMMARY_SECTION_RE.search(markdown)
    if not match:
        return markdown
    existing = match.group().rstrip()
    sentence = (
        f"Key strengths include {', '.join(highlights)} with a proven track record "
        "of delivering results in dynamic environments."
    )
    return (
        markdown[:match.start()] + f"{existing}\n\n{sentence}"
        + markdown[match.start() + len(existing):]
    )


def render_markdown(
    resume: ParsedResume,
    keywords: Iterable[str] = (),
    max_keywords: int = MAX_INJECTED_KEYWORDS,
) -> str:
    """Render a ParsedResume as Markdown and inject any missing keywords."""
    markdown = "\n\n".join(_render_parts(resume))
    return inject_keywords(markdown, keywords, limit=max_keywords)


def markdown_to_text(markdown: str) -> str:
    """Strip heading markers, emphasis, rules and the footer so the text parses again."""
    lines = []
    for line in markdown.split("\n"):
        stripped = line.strip()
        if _RULE_RE.match(stripped) or stripped == OPTIMIZATION_FOOTER:
            continue
        stripped = _HEADING_PREFIX_RE.sub("", stripped)
        lines.append(_unemphasize(stripped))
    return "\n".join(lines).strip()


def tailor_resume_markdown(
    resume_text: str, job_description: str, missing_keywords: list[str]
) -> str:
    """Local tailoring: re-render the resume, add missing keywords and job highlights."""
    markdown = render_markdown(parse_resume(resume_text), missing_keywords)
    markdown = enhance_summary(markdown, extract_keywords(job_description)[:SUMMARY_HIGHLIGHTS])
    return f"{markdown}\n\n---\n\n{OPTIMIZATION_FOOTER}"

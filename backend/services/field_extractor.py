"""Field extraction: turn (possibly run-on) resume text into a ResumeRecord.

Pipeline:
1. Layout recovery (re-insert line breaks lost by PDF extraction)
2. Section segmentation (header, summary, education, skills, ...)
3. Per-section entity extraction
4. Contact fields from the whole raw text
5. Parse warnings for anything that could not be detected
"""

import logging
import re
from dataclasses import dataclass, field

from models.schemas.resume_record import (
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
    ResumeRecord,
)
from services.section_parser import (
    DATE_RANGE_RE,
    DEGREE_RE,
    YEAR_RANGE_RE,
    detect_name,
    extract_contact_info,
    is_bullet_line,
    parse_sections,
    strip_bullet,
)
from services.text_normalizer import normalize

logger = logging.getLogger(__name__)

SUMMARY_MAX_CHARS = 500
SKILL_MAX_LENGTH = 60
MIN_SECTION_SKILLS = 3
CONTINUATION_MIN_LENGTH = 10

# Scanned over the whole text when the skills section yields fewer than
# MIN_SECTION_SKILLS entries.
SKILL_VOCABULARY: tuple[str, ...] = (
    "javascript", "typescript", "python", "java", "c++", "c#", "ruby", "php", "swift", "kotlin",
    "react", "angular", "vue", "next.js", "node.js", "express", "django", "flask", "spring", "fastapi",
    "html", "css", "sass", "tailwind", "bootstrap",
    "sql", "mongodb", "postgresql", "mysql", "redis", "firebase", "supabase",
    "aws", "azure", "gcp", "docker", "kubernetes", "terraform",
    "git", "ci/cd", "jenkins", "github actions", "linux",
    "machine learning", "deep learning", "nlp", "computer vision", "data science",
    "pandas", "numpy", "tensorflow", "pytorch", "scikit-learn", "matplotlib", "seaborn",
    "power bi", "tableau", "jupyter",
    "figma", "sketch", "photoshop",
    "agile", "scrum", "jira",
    "rest api", "graphql", "microservices",
)

# Whole-word match that also works for terms ending in symbols ("c++", "c#")
_VOCABULARY_RES: tuple[tuple[str, re.Pattern], ...] = tuple(
    (term, re.compile(rf"(?<!\w){re.escape(term)}(?!\w)", re.IGNORECASE))
    for term in SKILL_VOCABULARY
)

_SKILL_SPLIT_RE = re.compile(r"[,|•·]")
_DASH_TRIM = " \t-–—"
_ENTRY_SPLIT_RE = re.compile(r"\s{2,}|\|")
_DATE_SEPARATOR_RE = re.compile(r"[-–—]+")
_TRAILING_SEPARATORS = " \t|,-–—"

MISSING_NAME_WARNING = "Could not detect candidate name."
MISSING_EMAIL_WARNING = "Could not detect email address."
MISSING_SKILLS_WARNING = "Could not detect skills - consider listing them clearly."
MISSING_EXPERIENCE_WARNING = "Could not detect work experience sections."


def _dedupe(items: list[str]) -> list[str]:
    """Drop case-insensitive duplicates, keeping the first spelling."""
    seen: set[str] = set()
    deduped: list[str] = []
    for item in items:
        key = item.lower()
        if key not in seen:
            seen.add(key)
            deduped.append(item)
    return deduped


def _split_date_range(date_text: str) -> tuple[str, str]:
    parts = [p.strip() for p in _DATE_SEPARATOR_RE.split(date_text)]
    return parts[0], parts[-1]


# ---------------------------------------------------------------------------
# Skills
# ---------------------------------------------------------------------------

def extract_skills(section: str, full_text: str) -> list[str]:
    """Parse the skills section, topping up from the vocabulary if sparse.

    Category labels ("Languages: Python, Go") are dropped by keeping only
    what follows the first colon on each line.
    """
    skills: list[str] = []
    for line in section.split("\n"):
        if ":" in line:
            line = line.split(":", 1)[1]
        for fragment in _SKILL_SPLIT_RE.split(line):
            skill = fragment.strip(_DASH_TRIM).strip()
            if skill and len(skill) < SKILL_MAX_LENGTH:
                skills.append(skill)

    if len(skills) < MIN_SECTION_SKILLS:
        skills.extend(term for term, pattern in _VOCABULARY_RES if pattern.search(full_text))

    return _dedupe(skills)


# ---------------------------------------------------------------------------
# Experience: explicit fold over the section's lines
# ---------------------------------------------------------------------------

@dataclass
class _EntryBuilder:
    """An experience entry that is still collecting lines."""
    title: str
    company: str
    start_date: str = ""
    end_date: str = ""
    location: str = ""
    bullets: list[str] = field(default_factory=list)

    def build(self) -> ExperienceEntry:
        return ExperienceEntry(
            company=self.company,
            title=self.title,
            start_date=self.start_date,
            end_date=self.end_date,
            location=self.location,
            bullets=list(self.bullets),
        )


def _open_dated_entry(line: str, date_match: re.Match) -> _EntryBuilder:
    """Open an entry from a line carrying a date range.

    The non-date text is split on double spaces, pipes or commas into
    title / company / location, in that order.
    """
    start_date, end_date = _split_date_range(date_match.group())
    remaining = DATE_RANGE_RE.sub("", line, count=1).strip(_TRAILING_SEPARATORS)
    # ", " becomes a double space, so comma-separated headers split too
    remaining = remaining.replace(",", " ")
    parts = [p.strip() for p in _ENTRY_SPLIT_RE.split(remaining) if p.strip()]
    return _EntryBuilder(
        title=parts[0] if parts else remaining,
        company=parts[1] if len(parts) > 1 else remaining,
        location=parts[2] if len(parts) > 2 else "",
        start_date=start_date,
        end_date=end_date,
    )


def _step(
    current: _EntryBuilder | None, line: str
) -> tuple[ExperienceEntry | None, _EntryBuilder | None]:
    """Fold one line into the open entry.

    Returns (finished entry or None, entry still open afterwards).
    """
    bullet = is_bullet_line(line)
    date_match = None if bullet else DATE_RANGE_RE.search(line)

    if date_match:
        finished = current.build() if current else None
        return finished, _open_dated_entry(line, date_match)

    if current is None:
        if not bullet and len(line) > 5:
            return None, _EntryBuilder(title=line, company=line)
        return None, None

    if bullet:
        text = strip_bullet(line)
        if text:
            current.bullets.append(text)
    elif len(line) > CONTINUATION_MIN_LENGTH:
        current.bullets.append(line)
    return None, current


def extract_experience(section: str) -> list[ExperienceEntry]:
    """Split an experience section into entries, preserving document order."""
    entries: list[ExperienceEntry] = []
    current: _EntryBuilder | None = None
    for raw_line in section.split("\n"):
        line = raw_line.strip()
        if not line:
            continue
        finished, current = _step(current, line)
        if finished:
            entries.append(finished)
    if current:
        entries.append(current.build())
    return entries


# ---------------------------------------------------------------------------
# Education, projects, list sections
# ---------------------------------------------------------------------------

def extract_education(section: str) -> list[EducationEntry]:
    """One entry per degree-bearing line.

    The first usable line always becomes an entry, so a section without
    recognisable degree keywords still yields something.
    """
    entries: list[EducationEntry] = []
    for raw_line in section.split("\n"):
        if len(raw_line.strip()) <= 3:
            continue
        line = strip_bullet(raw_line)
        if len(line) < 5:
            continue
        if entries and not DEGREE_RE.search(line):
            continue

        start_date = end_date = ""
        year_match = YEAR_RANGE_RE.search(line)
        if year_match:
            start_date, end_date = year_match.group(1), year_match.group(2)
            line = YEAR_RANGE_RE.sub("", line, count=1)
        text = line.strip().strip(_TRAILING_SEPARATORS).strip()

        entries.append(EducationEntry(
            institution=text,
            degree=text,
            start_date=start_date,
            end_date=end_date,
        ))
    return entries


def extract_projects(section: str) -> list[ProjectEntry]:
    """Non-bullet lines open projects; bullets extend the open description."""
    projects: list[ProjectEntry] = []
    name: str | None = None
    description: list[str] = []

    for raw_line in section.split("\n"):
        line = raw_line.strip()
        if len(line) <= 3:
            continue
        if not is_bullet_line(line):
            if name is not None:
                projects.append(ProjectEntry(name=name, description=" ".join(description)))
            name = DATE_RANGE_RE.sub("", line).strip().strip(_TRAILING_SEPARATORS).strip()
            description = []
        elif name is not None:
            description.append(strip_bullet(line))

    if name is not None:
        projects.append(ProjectEntry(name=name, description=" ".join(description)))
    return projects


def extract_list_section(section: str) -> list[str]:
    """One item per non-trivial line, bullet glyph removed."""
    items = [strip_bullet(line) for line in section.split("\n")]
    return [item for item in items if len(item) > 3]


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def extract_fields(text: str) -> ResumeRecord:
    """Extract a structured record from raw or already normalized text.

    Never raises: anything that cannot be detected is left empty and
    reported in ``parse_warnings``.
    """
    sections = parse_sections(normalize(text))
    contact = extract_contact_info(text)

    name = detect_name(sections.get("header", ""))
    skills = extract_skills(sections.get("skills", ""), text)
    experience = extract_experience(sections.get("experience", ""))
    summary = sections.get("summary", "")[:SUMMARY_MAX_CHARS] or None

    warnings: list[str] = []
    if not name:
        warnings.append(MISSING_NAME_WARNING)
    if not contact["email"]:
        warnings.append(MISSING_EMAIL_WARNING)
    if not skills:
        warnings.append(MISSING_SKILLS_WARNING)
    if not experience:
        warnings.append(MISSING_EXPERIENCE_WARNING)

    record = ResumeRecord(
        name=name,
        email=contact["email"],
        phone=contact["phone"],
        linkedin_url=contact["linkedin"],
        website_url=contact["website"],
        summary=summary,
        skills=skills,
        experience=experience,
        education=extract_education(sections.get("education", "")),
        projects=extract_projects(sections.get("projects", "")),
        certifications=extract_list_section(sections.get("certifications", "")),
        achievements=extract_list_section(sections.get("achievements", "")),
        raw_text=text,
        parse_warnings=warnings,
    )
    logger.debug(
        "Extracted sections=%s skills=%d experience=%d warnings=%d",
        sorted(sections.keys()), len(record.skills), len(record.experience), len(warnings),
    )
    return record

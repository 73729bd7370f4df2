"""Structured output of field extraction: one record per uploaded resume."""

from pydantic import BaseModel, ConfigDict


class ExperienceEntry(BaseModel):
    """A single work experience entry."""
    model_config = ConfigDict(frozen=True)

    company: str = ""
    title: str = ""
    start_date: str = ""
    end_date: str = ""
    location: str = ""
    bullets: list[str] = []


class EducationEntry(BaseModel):
    """A single education entry.

    ``institution`` and ``degree`` both hold the source line minus its
    year range; the heuristic does not split them.
    """
    model_config = ConfigDict(frozen=True)

    institution: str = ""
    degree: str = ""
    start_date: str = ""
    end_date: str = ""


class ProjectEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    description: str = ""
    stack: list[str] = []


class ResumeRecord(BaseModel):
    """Everything the extractor could recover from a resume's text.

    Fields that could not be detected are ``None`` or empty, and a
    human-readable note is appended to ``parse_warnings``.
    """
    model_config = ConfigDict(frozen=True)

    name: str | None = None
    email: str | None = None
    phone: str | None = None
    linkedin_url: str | None = None
    website_url: str | None = None
    summary: str | None = None
    skills: list[str] = []
    experience: list[ExperienceEntry] = []
    education: list[EducationEntry] = []
    projects: list[ProjectEntry] = []
    certifications: list[str] = []
    achievements: list[str] = []
    raw_text: str = ""
    parse_warnings: list[str] = []

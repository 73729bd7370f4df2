"""Pydantic contracts shared by the extractor, the scorer and the API."""

from models.schemas.job_profile import JobProfile
from models.schemas.resume_record import (
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
    ResumeRecord,
)
from models.schemas.score_report import (
    ActionItem,
    BulletRewrite,
    ChecklistItem,
    Explainability,
    ScoreReport,
    SectionScores,
    SkillMatch,
)

__all__ = [
    "ActionItem",
    "BulletRewrite",
    "ChecklistItem",
    "EducationEntry",
    "ExperienceEntry",
    "Explainability",
    "JobProfile",
    "ProjectEntry",
    "ResumeRecord",
    "ScoreReport",
    "SectionScores",
    "SkillMatch",
]

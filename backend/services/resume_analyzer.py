"""Orchestrator: resume text in, structured record and score report out.

Pipeline:
1. Layout recovery + section segmentation + field extraction
2. Rule-based scoring against the target job profile
"""

import logging

from models.responses import AnalysisResponse
from models.schemas.job_profile import JobProfile
from models.schemas.resume_record import ResumeRecord
from services.fallback_scorer import score_fallback
from services.field_extractor import extract_fields

logger = logging.getLogger(__name__)


def extract(resume_text: str) -> ResumeRecord:
    """Extract a ResumeRecord, logging anything the parser could not find."""
    record = extract_fields(resume_text)
    if record.parse_warnings:
        logger.info("Resume parsed with warnings: %s", "; ".join(record.parse_warnings))
    return record


def analyze(
    resume_text: str, job: JobProfile, read_warnings: list[str] | None = None
) -> AnalysisResponse:
    """Run the full extraction + scoring pipeline."""
    record = extract(resume_text)
    report = score_fallback(record, job)
    logger.info(
        "Scored resume for %r (%s): %d/100",
        job.job_title, job.seniority, report.overall_score,
    )
    return AnalysisResponse(
        resume=record,
        report=report,
        read_warnings=read_warnings or [],
    )

"""Deterministic rule-based scoring of a resume against a job profile.

This is the guaranteed-available scoring path: no network, no models,
and no failure modes for well-formed inputs. Every category score is
clamped to 0-100 before it is combined.

Weights for the overall score:
    skills 50% | experience 25% | ATS readability 10% |
    education 10% | achievement quality 5%
"""

import logging
import math
import re

from models.schemas.job_profile import JobProfile
from models.schemas.resume_record import ResumeRecord
from models.schemas.score_report import (
    ActionItem,
    ChecklistItem,
    Explainability,
    ScoreReport,
    SectionScores,
    SkillMatch,
)
from services.keyword_extractor import (
    detect_job_domain,
    detect_resume_domains,
    extract_job_keywords,
    is_domain_mismatch,
    match_keywords,
)

logger = logging.getLogger(__name__)

W_SKILLS = 0.5
W_EXPERIENCE = 0.25
W_ATS = 0.1
W_ACHIEVEMENT = 0.05
W_EDUCATION = 0.1

DOMAIN_MISMATCH_PENALTY = 50
NO_KEYWORDS_SKILLS_SCORE = 50

# Severe gap: fewer than 3 matches while 8+ keywords were expected
SEVERE_GAP_MIN_MATCHED = 3
SEVERE_GAP_MIN_EXPECTED = 8
SEVERE_GAP_CAP = 25

# Experience bullets mentioning fewer than 2 keywords cap the experience score
EXPERIENCE_MIN_KEYWORD_HITS = 2
EXPERIENCE_KEYWORD_CAP = 40

MAX_ACTIONS = 7

# Percentages, dollar amounts, multipliers, or a bare number followed by a space
_METRICS_RE = re.compile(r"\d+%|\$[\d,]+|\d+x|\d+ ")


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _clamp(value: float) -> int:
    return min(100, max(0, _round_half_up(value)))


def _count_numeric_bullets(resume: ResumeRecord) -> int:
    return sum(
        1 for entry in resume.experience for bullet in entry.bullets
        if _METRICS_RE.search(bullet)
    )


def _skills_score(
    resume: ResumeRecord, job: JobProfile, keywords: list[str], matched: list[str]
) -> int:
    if keywords:
        score = _round_half_up(len(matched) / len(keywords) * 100)
    else:
        score = NO_KEYWORDS_SKILLS_SCORE

    job_domain = detect_job_domain(job.job_title)
    resume_domains = detect_resume_domains(resume.raw_text, resume.skills)
    if is_domain_mismatch(job_domain, resume_domains):
        logger.debug(
            "Domain mismatch: job=%s resume=%s", job_domain, resume_domains
        )
        score = max(0, score - DOMAIN_MISMATCH_PENALTY)

    if len(matched) < SEVERE_GAP_MIN_MATCHED and len(keywords) >= SEVERE_GAP_MIN_EXPECTED:
        score = min(score, SEVERE_GAP_CAP)

    return _clamp(score)


def _experience_score(resume: ResumeRecord, keywords: list[str]) -> int:
    entries = resume.experience
    total_bullets = sum(len(e.bullets) for e in entries)
    score = min(100, (
        (40 if entries else 0)
        + min(total_bullets * 5, 40)
        + (20 if len(entries) >= 2 else 0)
    ))

    bullets_text = " ".join(" ".join(e.bullets) for e in entries).lower()
    hits = sum(1 for kw in keywords if kw in bullets_text)
    if hits < EXPERIENCE_MIN_KEYWORD_HITS:
        score = min(score, EXPERIENCE_KEYWORD_CAP)

    return _clamp(score)


def _education_score(resume: ResumeRecord) -> int:
    return _clamp(
        (70 if resume.education else 0) + (30 if resume.certifications else 0)
    )


def _ats_score(resume: ResumeRecord) -> int:
    return _clamp(
        (25 if resume.email else 0)
        + (15 if resume.phone else 0)
        + (20 if resume.name else 0)
        + (25 if resume.skills else 0)
        + (15 if resume.experience else 0)
    )


def _achievement_score(numeric_bullets: int) -> int:
    return _clamp(min(100, 20 + 20 * numeric_bullets))


def _score_label(score: int) -> str:
    if score >= 85:
        return "Strong"
    if score >= 70:
        return "Good"
    if score >= 50:
        return "Moderate"
    return "Low"


def build_summary(
    resume: ResumeRecord,
    job: JobProfile,
    score: int,
    matched: list[str],
    missing: list[str],
) -> str:
    """Templated multi-sentence summary of the match."""
    name = resume.name or "The candidate"
    parts = [f"{_score_label(score)} match ({score}/100) for the {job.job_title} role."]

    if matched:
        parts.append(f"{name} shows relevant skills including {', '.join(matched[:3])}.")
    if missing:
        parts.append(f"Key areas to strengthen: add experience with {', '.join(missing[:3])}.")

    if score < 70:
        parts.append(
            "Consider tailoring bullet points with metrics and impact statements "
            "to better demonstrate fit."
        )
    else:
        parts.append("A few focused edits will make this application stand out even more.")

    return " ".join(parts)


def build_actions(
    resume: ResumeRecord, missing: list[str], numeric_bullets: int
) -> list[ActionItem]:
    """Rank-ordered improvement actions, checked in a fixed order."""
    candidates: list[tuple[str, str]] = []

    if missing:
        candidates.append((
            f"Add missing skills: {', '.join(missing[:4])}",
            "These keywords are expected for this role but not found in your resume.",
        ))
    if numeric_bullets < 3:
        candidates.append((
            "Add quantifiable metrics to your experience bullets",
            "Most bullets lack numbers. Use percentages, dollar amounts, or user counts.",
        ))
    if not resume.summary:
        candidates.append((
            "Add a professional summary at the top of your resume",
            "A concise summary helps recruiters quickly understand your fit.",
        ))
    if any(not e.bullets for e in resume.experience):
        candidates.append((
            "Add bullet points for all experience entries",
            "Some positions have no bullets. Describe your responsibilities and achievements.",
        ))
    if not resume.projects:
        candidates.append((
            "Add a projects section to showcase relevant work",
            "Projects demonstrate hands-on skills and initiative.",
        ))
    if not resume.linkedin_url:
        candidates.append((
            "Include your LinkedIn profile URL",
            "LinkedIn adds credibility and lets recruiters learn more about you.",
        ))
    candidates.append((
        "Tailor resume language to mirror the job description",
        "Using the same terminology as the job posting improves ATS matching.",
    ))

    return [
        ActionItem(priority=i, text=text, why=why)
        for i, (text, why) in enumerate(candidates[:MAX_ACTIONS], start=1)
    ]


def build_ats_checklist(resume: ResumeRecord, skills_score: int) -> list[ChecklistItem]:
    """Seven fixed pass/fail checks approximating what ATS software looks at."""
    has_contact = bool(resume.email and resume.phone and resume.name)
    has_dated_roles = any(e.company and e.start_date for e in resume.experience)
    return [
        ChecklistItem(item="Contact information (name, email, phone) is clearly listed", passed=has_contact),
        ChecklistItem(item="Skills section is present and populated", passed=bool(resume.skills)),
        ChecklistItem(item="Work experience includes company names and dates", passed=has_dated_roles),
        ChecklistItem(item="Education section is present", passed=bool(resume.education)),
        ChecklistItem(item="Resume uses standard section headings", passed=True),
        ChecklistItem(item="No complex formatting (tables, columns) detected", passed=True),
        ChecklistItem(item="Includes relevant keywords for the target role", passed=skills_score >= 50),
    ]


def _skill_evidence(skill: str, resume: ResumeRecord) -> list[str]:
    evidence = []
    if any(skill in s.lower() for s in resume.skills):
        evidence.append("Listed in skills")
    if skill in resume.raw_text.lower():
        evidence.append("Mentioned in resume text")
    return evidence


def score_fallback(resume: ResumeRecord, job: JobProfile) -> ScoreReport:
    """Score a resume against a job profile without any external service."""
    keywords = extract_job_keywords(job.job_title, job.industry)
    matched, missing = match_keywords(keywords, resume.raw_text, resume.skills)
    numeric_bullets = _count_numeric_bullets(resume)

    skills = _skills_score(resume, job, keywords, matched)
    experience = _experience_score(resume, keywords)
    education = _education_score(resume)
    ats = _ats_score(resume)
    achievement = _achievement_score(numeric_bullets)

    overall = _clamp(
        skills * W_SKILLS
        + experience * W_EXPERIENCE
        + ats * W_ATS
        + achievement * W_ACHIEVEMENT
        + education * W_EDUCATION
    )
    logger.debug(
        "Rule-based score for %r: overall=%d skills=%d experience=%d",
        job.job_title, overall, skills, experience,
    )

    return ScoreReport(
        overall_score=overall,
        summary=build_summary(resume, job, overall, matched, missing),
        section_scores=SectionScores(
            skills_match=skills,
            experience_match=experience,
            education=education,
            ats_readability=ats,
            achievement_quality=achievement,
        ),
        top_actions=build_actions(resume, missing, numeric_bullets),
        rewrites=[],
        keywords_to_add=missing,
        ats_checklist=build_ats_checklist(resume, skills),
        explainability=Explainability(
            skill_matches=[
                SkillMatch(skill=kw, evidence=_skill_evidence(kw, resume)) for kw in matched
            ],
            score_breakdown=(
                f"Skills (50%): {skills} | Experience (25%): {experience} | "
                f"ATS (10%): {ats} | Achievement (5%): {achievement} | "
                f"Education (10%): {education}"
            ),
        ),
    )

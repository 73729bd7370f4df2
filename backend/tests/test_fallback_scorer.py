import pytest
from pydantic import ValidationError

from models.schemas.job_profile import JobProfile
from models.schemas.resume_record import EducationEntry, ExperienceEntry, ResumeRecord
from services.fallback_scorer import (
    MAX_ACTIONS,
    _clamp,
    _score_label,
    build_ats_checklist,
    score_fallback,
)
from services.field_extractor import extract_fields

from resume_samples import SAMPLE_RESUME

CASHIER_RESUME = """John Smith
john@example.org

Experience
Cashier | Corner Market | 2019 - 2021
• Handled customer orders
• Kept the shelves stocked
"""

ML_RESUME = """Alex Kim
alex@example.com

Skills
Python, TensorFlow, PyTorch, Pandas, NumPy

Experience
ML Engineer | Vision Labs | 2020 - Present
• Built machine learning and deep learning models for computer vision
• Led software development and programming of NLP services
• Strong communication, writing and presentation of results
"""


def _all_scores(report):
    s = report.section_scores
    return [
        report.overall_score, s.skills_match, s.experience_match,
        s.education, s.ats_readability, s.achievement_quality,
    ]


# --- Sample resume ---

def test_score_sample_resume_sections():
    report = score_fallback(extract_fields(SAMPLE_RESUME), JobProfile(job_title="Senior Software Engineer"))
    scores = report.section_scores
    assert scores.skills_match == 27  # 3 of 11 keywords
    assert scores.experience_match == 40  # only one keyword in the bullets
    assert scores.education == 100
    assert scores.ats_readability == 100
    assert scores.achievement_quality == 60
    assert report.overall_score == 47  # 46.5 rounds half up
    assert report.summary.startswith("Low match (47/100)")
    assert [m.skill for m in report.explainability.skill_matches] == ["senior", "software", "engineer"]
    assert report.explainability.skill_matches[0].evidence == ["Mentioned in resume text"]
    assert "Skills (50%): 27" in report.explainability.score_breakdown
    assert report.rewrites == []


def test_score_sample_resume_actions():
    report = score_fallback(extract_fields(SAMPLE_RESUME), JobProfile(job_title="Senior Software Engineer"))
    texts = [a.text for a in report.top_actions]
    assert texts[0].startswith("Add missing skills: programming, coding")
    assert texts[1] == "Add quantifiable metrics to your experience bullets"
    assert texts[-1] == "Tailor resume language to mirror the job description"
    assert len(texts) == 3
    assert [a.priority for a in report.top_actions] == [1, 2, 3]


# --- End to end: unrelated experience ---

def test_unrelated_resume_scores_low():
    report = score_fallback(extract_fields(CASHIER_RESUME), JobProfile(job_title="Data Scientist"))
    assert report.section_scores.skills_match == 0
    assert report.overall_score < 40
    for keyword in ("data", "sql", "python"):
        assert keyword in report.keywords_to_add
    assert report.explainability.skill_matches == []
    assert report.summary.startswith("Low match")


# --- Domain mismatch ---

def test_domain_mismatch_penalty():
    resume = extract_fields(ML_RESUME)
    mismatched = score_fallback(resume, JobProfile(job_title="BPM Workflow Engineer"))
    assert mismatched.section_scores.skills_match == 8  # 58 before the penalty

    matching = score_fallback(resume, JobProfile(job_title="Machine Learning Engineer"))
    assert matching.section_scores.skills_match == 75


def test_skills_evidence_from_skills_list():
    resume = extract_fields(ML_RESUME)
    report = score_fallback(resume, JobProfile(job_title="Python Developer"))
    python_match = next(m for m in report.explainability.skill_matches if m.skill == "python")
    assert python_match.evidence == ["Listed in skills", "Mentioned in resume text"]


# --- Bounds and caps ---

@pytest.mark.parametrize("resume_text", ["", SAMPLE_RESUME, CASHIER_RESUME, ML_RESUME])
@pytest.mark.parametrize("job_title", ["Senior Software Engineer", "Data Scientist", "x"])
def test_scores_are_bounded(resume_text, job_title):
    report = score_fallback(extract_fields(resume_text), JobProfile(job_title=job_title))
    assert all(0 <= score <= 100 for score in _all_scores(report))
    assert len(report.top_actions) <= MAX_ACTIONS
    assert len(report.ats_checklist) == 7


def test_actions_capped_at_seven():
    resume = ResumeRecord(experience=[ExperienceEntry(company="Acme")])
    report = score_fallback(resume, JobProfile(job_title="Engineer"))
    assert len(report.top_actions) == 7
    assert [a.priority for a in report.top_actions] == list(range(1, 8))


def test_empty_record_scores():
    report = score_fallback(ResumeRecord(), JobProfile(job_title="Engineer"))
    scores = report.section_scores
    assert scores.skills_match == 0
    assert scores.experience_match == 0
    assert scores.education == 0
    assert scores.ats_readability == 0
    assert scores.achievement_quality == 20


def test_education_score():
    job = JobProfile(job_title="Engineer")
    edu = [EducationEntry(institution="State University")]
    assert score_fallback(ResumeRecord(education=edu), job).section_scores.education == 70
    assert score_fallback(ResumeRecord(certifications=["CKA exam"]), job).section_scores.education == 30
    both = ResumeRecord(education=edu, certifications=["CKA exam"])
    assert score_fallback(both, job).section_scores.education == 100


def test_achievement_counts_metric_bullets():
    entry = ExperienceEntry(
        company="Acme",
        bullets=["Grew revenue by $1,200", "Made builds 3x faster", "Wrote docs"],
    )
    report = score_fallback(ResumeRecord(experience=[entry]), JobProfile(job_title="Engineer"))
    assert report.section_scores.achievement_quality == 60


# --- Checklist and labels ---

def test_ats_checklist_items():
    resume = ResumeRecord(
        name="Jane Doe",
        email="jane@example.com",
        phone="555-123-4567",
        experience=[ExperienceEntry(company="Acme")],
    )
    checklist = build_ats_checklist(resume, skills_score=60)
    passed = [c.passed for c in checklist]
    assert passed == [True, False, False, False, True, True, True]


@pytest.mark.parametrize("score,label", [
    (100, "Strong"), (85, "Strong"), (84, "Good"), (70, "Good"),
    (69, "Moderate"), (50, "Moderate"), (49, "Low"), (0, "Low"),
])
def test_score_label(score, label):
    assert _score_label(score) == label


# --- Job profile validation ---

def test_job_profile_defaults():
    job = JobProfile(job_title="Engineer")
    assert job.seniority == "mid"
    assert job.industry == ""


def test_job_profile_rejects_bad_seniority():
    with pytest.raises(ValidationError):
        JobProfile(job_title="Engineer", seniority="principal")


def test_job_profile_rejects_long_title():
    with pytest.raises(ValidationError):
        JobProfile(job_title="x" * 201)


@pytest.mark.parametrize("raw,expected", [
    (46.5, 47), (84.5, 85), (0.5, 1), (27.27, 27), (-3, 0), (120.5, 100),
])
def test_scores_round_half_up(raw, expected):
    assert _clamp(raw) == expected


def test_half_point_tie_reaches_next_label():
    assert _score_label(_clamp(84.5)) == "Strong"

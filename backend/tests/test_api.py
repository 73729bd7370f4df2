import inspect

import pytest
from fastapi.testclient import TestClient

from api.router import analyze_quick, extract_text
from main import app

from resume_samples import RUN_ON_RESUME, SAMPLE_RESUME

client = TestClient(app)

pytestmark = pytest.mark.api


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_extract_text():
    response = client.post("/extract/text", json={"resume_text": SAMPLE_RESUME})
    assert response.status_code == 200
    data = response.json()
    assert data["resume"]["name"] == "Jane Doe"
    assert data["resume"]["email"] == "jane.doe@email.com"
    assert len(data["resume"]["experience"]) == 2
    assert data["resume"]["parse_warnings"] == []
    assert data["read_warnings"] == []


def test_extract_text_run_on():
    response = client.post("/extract/text", json={"resume_text": RUN_ON_RESUME})
    assert response.status_code == 200
    assert response.json()["resume"]["skills"] == ["Python", "Go", "Kafka"]


def test_extract_text_too_long():
    response = client.post("/extract/text", json={"resume_text": "a" * 50001})
    assert response.status_code == 422


def test_analyze_quick():
    response = client.post(
        "/analyze/quick",
        json={
            "resume_text": SAMPLE_RESUME,
            "job": {"job_title": "Senior Software Engineer", "seniority": "senior"},
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["scoring_method"] == "rule_based"
    report = data["report"]
    assert 0 <= report["overall_score"] <= 100
    assert set(report["section_scores"]) == {
        "skills_match", "experience_match", "education",
        "ats_readability", "achievement_quality",
    }
    assert len(report["ats_checklist"]) == 7
    assert len(report["top_actions"]) <= 7
    assert report["rewrites"] == []


def test_analyze_quick_rejects_bad_seniority():
    response = client.post(
        "/analyze/quick",
        json={"resume_text": SAMPLE_RESUME, "job": {"job_title": "Engineer", "seniority": "staff"}},
    )
    assert response.status_code == 422


def test_extract_upload_txt():
    response = client.post(
        "/extract",
        files={"resume_file": ("resume.txt", SAMPLE_RESUME.encode("utf-8"), "text/plain")},
    )
    assert response.status_code == 200
    assert response.json()["resume"]["name"] == "Jane Doe"


def test_analyze_upload_txt():
    response = client.post(
        "/analyze",
        files={"resume_file": ("resume.txt", SAMPLE_RESUME.encode("utf-8"), "text/plain")},
        data={"job_title": "Senior Software Engineer", "industry": "Software"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["resume"]["email"] == "jane.doe@email.com"
    assert data["report"]["section_scores"]["education"] == 100


def test_analyze_upload_short_file_warns():
    response = client.post(
        "/analyze",
        files={"resume_file": ("resume.txt", b"Jane Doe", "text/plain")},
        data={"job_title": "Engineer"},
    )
    assert response.status_code == 200
    assert len(response.json()["read_warnings"]) == 1


def test_analyze_rejects_unsupported_extension():
    response = client.post(
        "/analyze",
        files={"resume_file": ("resume.png", b"\x89PNG", "image/png")},
        data={"job_title": "Engineer"},
    )
    assert response.status_code == 400


def test_analyze_rejects_corrupt_pdf():
    response = client.post(
        "/analyze",
        files={"resume_file": ("resume.pdf", b"not a pdf", "application/pdf")},
        data={"job_title": "Engineer"},
    )
    assert response.status_code == 400


def test_analyze_rejects_empty_file():
    response = client.post(
        "/analyze",
        files={"resume_file": ("resume.txt", b"   ", "text/plain")},
        data={"job_title": "Engineer"},
    )
    assert response.status_code == 400


def test_json_routes_are_sync_so_they_run_in_the_threadpool():
    assert not inspect.iscoroutinefunction(extract_text)
    assert not inspect.iscoroutinefunction(analyze_quick)

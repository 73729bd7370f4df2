import asyncio
import logging
from typing import Literal

from fastapi import APIRouter, File, Form, HTTPException, Request, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import ExtractRequest, QuickAnalyzeRequest
from models.responses import AnalysisResponse, ExtractResponse
from models.schemas.job_profile import JobProfile
from services import document_reader, resume_analyzer

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


async def _read_upload(resume_file: UploadFile) -> tuple[str, list[str]]:
    """Validate an uploaded resume and return its text plus reader warnings."""
    filename = resume_file.filename or ""
    if document_reader.file_extension(filename) not in document_reader.SUPPORTED_EXTENSIONS:
        raise HTTPException(status_code=400, detail="Only PDF, DOCX or TXT files are accepted")

    # Read and validate size
    content = await resume_file.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Max size: {settings.max_upload_size_mb}MB",
        )

    try:
        text, warnings = await asyncio.to_thread(
            document_reader.read_resume_file, filename, content
        )
    except Exception as e:
        logger.warning("Could not read %s: %s", filename, e)
        raise HTTPException(status_code=400, detail="Could not parse resume file")

    if not text.strip():
        raise HTTPException(status_code=400, detail="No text could be extracted from the file")

    return text, warnings


@router.get("/health")
async def health():
    return {"status": "ok"}


@router.post("/extract", response_model=ExtractResponse)
@limiter.limit(settings.rate_limit)
async def extract(request: Request, resume_file: UploadFile = File(...)):
    text, warnings = await _read_upload(resume_file)
    record = await asyncio.to_thread(resume_analyzer.extract, text)
    return ExtractResponse(resume=record, read_warnings=warnings)


@router.post("/extract/text", response_model=ExtractResponse)
@limiter.limit(settings.rate_limit)
def extract_text(request: Request, body: ExtractRequest):
    return ExtractResponse(resume=resume_analyzer.extract(body.resume_text))


@router.post("/analyze", response_model=AnalysisResponse)
@limiter.limit(settings.rate_limit)
async def analyze(
    request: Request,
    resume_file: UploadFile = File(...),
    job_title: str = Form(..., max_length=200),
    seniority: Literal["junior", "mid", "senior"] = Form("mid"),
    industry: str = Form("", max_length=100),
):
    text, warnings = await _read_upload(resume_file)
    job = JobProfile(job_title=job_title, seniority=seniority, industry=industry)
    return await asyncio.to_thread(resume_analyzer.analyze, text, job, warnings)


@router.post("/analyze/quick", response_model=AnalysisResponse)
@limiter.limit(settings.rate_limit)
def analyze_quick(request: Request, body: QuickAnalyzeRequest):
    return resume_analyzer.analyze(body.resume_text, body.job)

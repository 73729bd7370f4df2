from pydantic import BaseModel, Field

from models.schemas.job_profile import JobProfile


class ExtractRequest(BaseModel):
    resume_text: str = Field(..., max_length=50000, description="Plain text resume content")


class QuickAnalyzeRequest(BaseModel):
    resume_text: str = Field(..., max_length=50000, description="Plain text resume content")
    job: JobProfile

"""Target role a resume is scored against."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class JobProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    job_title: str = Field(..., max_length=200)
    seniority: Literal["junior", "mid", "senior"] = "mid"
    industry: str = Field("", max_length=100)

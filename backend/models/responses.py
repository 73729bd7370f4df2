from pydantic import BaseModel

from models.schemas.resume_record import ResumeRecord
from models.schemas.score_report import ScoreReport


class ExtractResponse(BaseModel):
    resume: ResumeRecord
    read_warnings: list[str] = []


class AnalysisResponse(BaseModel):
    resume: ResumeRecord
    report: ScoreReport
    read_warnings: list[str] = []
    scoring_method: str = "rule_based"

"""Output of the rule-based scorer."""

from pydantic import BaseModel, ConfigDict


class SectionScores(BaseModel):
    """Per-category scores, each 0-100."""
    model_config = ConfigDict(frozen=True)

    skills_match: int = 0
    experience_match: int = 0
    education: int = 0
    ats_readability: int = 0
    achievement_quality: int = 0


class ActionItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    priority: int
    text: str
    why: str


class BulletRewrite(BaseModel):
    model_config = ConfigDict(frozen=True)

    original: str
    improved: str


class ChecklistItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    item: str
    passed: bool


class SkillMatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    skill: str
    evidence: list[str] = []


class Explainability(BaseModel):
    model_config = ConfigDict(frozen=True)

    skill_matches: list[SkillMatch] = []
    score_breakdown: str = ""


class ScoreReport(BaseModel):
    """Complete score report for one resume against one job profile.

    ``rewrites`` is always empty when produced by the rule-based scorer.
    """
    model_config = ConfigDict(frozen=True)

    overall_score: int = 0
    summary: str = ""
    section_scores: SectionScores = SectionScores()
    top_actions: list[ActionItem] = []
    rewrites: list[BulletRewrite] = []
    keywords_to_add: list[str] = []
    ats_checklist: list[ChecklistItem] = []
    explainability: Explainability = Explainability()

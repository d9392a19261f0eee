"""Scorer output: a candidate plus its relevance explanation."""

from enum import Enum

from pydantic import BaseModel, model_validator

from models.schemas.candidate import Candidate


class Category(str, Enum):
    ROLE = "Role"
    RESPONSIBILITY = "Responsibility"
    EXPERIENCE = "Experience"
    SKILLS = "Skills"
    LOCATION = "Location"
    EDUCATION = "Education"


class CategoryScore(BaseModel):
    """Earned vs. available points for one category."""
    earned: float = 0.0
    max: float = 0.0
    percentage: int = 0  # 0-100, fraction of the category that matched


class MatchDetail(BaseModel):
    """Human-readable verdict for one category."""
    category: Category
    status: str = "miss"  # match, partial, miss
    score: float = 0.0  # 0.0-1.0
    message: str = ""


class ScoredCandidate(BaseModel):
    """A candidate augmented with relevance score and explanation.

    match_percentage is always round(relevance_score * 100).
    """
    candidate: Candidate
    relevance_score: float = 0.0  # 0.0-1.0
    match_percentage: int = 0
    score_breakdown: dict[Category, CategoryScore] = {}
    matching_keywords: list[str] = []
    missing_keywords: list[str] = []
    match_details: list[MatchDetail] = []
    gap_analysis: list[str] = []
    primary_match_area: str | None = None
    match_summary: str | None = None

    @model_validator(mode="after")
    def _sync_percentage(self) -> "ScoredCandidate":
        self.relevance_score = min(1.0, max(0.0, self.relevance_score))
        self.match_percentage = round(self.relevance_score * 100)
        return self

    def category_fraction(self, category: Category) -> float | None:
        """Matched fraction of a category, or None when it was not scored."""
        entry = self.score_breakdown.get(category)
        if entry is None or entry.max <= 0:
            return None
        return entry.earned / entry.max

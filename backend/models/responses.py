from pydantic import BaseModel

from models.schemas.requirement import Requirement
from models.schemas.scored_candidate import ScoredCandidate


class SearchResponse(BaseModel):
    items: list[ScoredCandidate] = []
    total: int = 0
    page: int = 1
    per_page: int = 0
    total_pages: int = 0
    requirement: Requirement = Requirement()
    parse_method: str = "empty"  # ai, fallback, manual, empty
    degraded: bool = False


class SummaryResponse(BaseModel):
    candidate_id: str = ""
    summary: str = ""
    relevance_score: float = 0.0
    match_percentage: int = 0

from enum import Enum

from pydantic import BaseModel, Field

from models.schemas.candidate import Candidate
from models.schemas.requirement import Requirement


class SearchType(str, Enum):
    SMART = "smart"  # free-text query through the parser
    JD = "jd"  # job description through the parser
    MANUAL = "manual"  # comma-separated skills plus explicit filters, no parser


class SearchRequest(BaseModel):
    type: SearchType = SearchType.SMART
    query: str = Field("", description="Search query or comma-separated skills")
    job_description: str | None = Field(None, description="Job description text for jd searches")
    candidates: list[Candidate] = Field(default_factory=list, description="Candidate pool to rank")

    page: int = 1
    per_page: int | None = Field(None, description="Page size, capped at max_page_size")
    include_summary: bool = False

    # Explicit filters override whatever the parser inferred
    location: str | None = None
    education: str | None = None
    min_experience: float | None = Field(None, ge=0)
    max_experience: float | None = Field(None, ge=0)
    skills: list[str] | None = None
    min_relevance: float | None = Field(None, ge=0.0, le=1.0)


class SummaryRequest(BaseModel):
    candidate: Candidate
    query: str = ""
    requirement: Requirement | None = Field(
        None, description="Already-parsed requirement; the query is parsed when omitted"
    )

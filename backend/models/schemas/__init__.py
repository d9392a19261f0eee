"""Pydantic contracts shared by the parser, scorer, ranker and paginator."""

from models.schemas.candidate import Candidate, WorkExperience
from models.schemas.requirement import ExperienceRange, Requirement
from models.schemas.scored_candidate import (
    Category,
    CategoryScore,
    MatchDetail,
    ScoredCandidate,
)

__all__ = [
    "Candidate",
    "WorkExperience",
    "ExperienceRange",
    "Requirement",
    "Category",
    "CategoryScore",
    "MatchDetail",
    "ScoredCandidate",
]

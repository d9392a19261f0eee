"""Rank scored candidates and drop weak matches."""

import logging

from config import settings
from models.schemas.requirement import Requirement
from models.schemas.scored_candidate import Category, ScoredCandidate

logger = logging.getLogger(__name__)


def _sort_key(item: ScoredCandidate) -> tuple[float, str, str]:
    return (-item.relevance_score, item.candidate.id, item.candidate.name)


def rank(scored: list[ScoredCandidate]) -> list[ScoredCandidate]:
    """Sort by relevance descending; ties by candidate id for stable output."""
    return sorted(scored, key=_sort_key)


def rank_and_filter(
    requirement: Requirement,
    scored: list[ScoredCandidate],
    min_relevance: float | None = None,
    min_role_match: float | None = None,
) -> list[ScoredCandidate]:
    """Sort, then drop candidates below the relevance threshold.

    When the requirement names a role, candidates whose Role sub-score is
    below ``min_role_match`` are dropped too, so that skill overlap alone
    cannot carry a candidate with an unrelated title. An empty result is
    returned as-is; broadening the search is the caller's decision.
    """
    if min_relevance is None:
        min_relevance = settings.min_relevance
    if min_role_match is None:
        min_role_match = settings.min_role_match

    kept: list[ScoredCandidate] = []
    for item in rank(scored):
        if item.relevance_score < min_relevance:
            continue
        if requirement.role:
            role = item.category_fraction(Category.ROLE)
            if role is not None and role < min_role_match:
                logger.debug(
                    "Dropping %s: role match %.2f below %.2f",
                    item.candidate.name or item.candidate.id,
                    role,
                    min_role_match,
                )
                continue
        kept.append(item)

    logger.info(
        "Filtered %d results to %d (threshold %.2f, role threshold %.2f)",
        len(scored), len(kept), min_relevance, min_role_match,
    )
    return kept

"""Orchestrator: search text -> ranked, paginated candidates.

Pipeline:
1. Pick the search text for the request type (query or job description)
2. Parse it into a Requirement (manual searches skip the parser)
3. Apply explicit filters on top of the parsed requirement
4. Score every candidate in the pool
5. Rank and drop weak matches
6. Paginate, then optionally attach per-item summaries
"""

import logging

from config import settings
from models.requests import SearchRequest, SearchType, SummaryRequest
from models.responses import SearchResponse, SummaryResponse
from models.schemas.requirement import Requirement
from services import ranker, scorer, summarizer
from services.paginator import paginate
from services.requirement_parser import ParseSource, RequirementParser

logger = logging.getLogger(__name__)


def search_text(request: SearchRequest) -> str:
    if request.type == SearchType.JD:
        return request.job_description or ""
    return request.query


def page_size(requested: int | None) -> int:
    size = requested if requested is not None else settings.default_page_size
    return min(max(1, size), settings.max_page_size)


async def build_requirement(
    request: SearchRequest, parser: RequirementParser | None = None
) -> tuple[Requirement, ParseSource]:
    """Parse the request text and merge explicit filters into the result."""
    if request.type == SearchType.MANUAL:
        requirement = Requirement(skills=request.query)
        source = ParseSource.MANUAL
    else:
        parser = parser or RequirementParser()
        requirement, source = await parser.parse_with_source(search_text(request))

    requirement = requirement.with_overrides(
        location=request.location,
        education=request.education,
        min_experience=request.min_experience,
        max_experience=request.max_experience,
        skills=request.skills,
    )
    return requirement, source


async def search(
    request: SearchRequest,
    parser: RequirementParser | None = None,
    summarize: summarizer.Summarizer | None = None,
) -> SearchResponse:
    """Run the full search pipeline over the request's candidate pool."""
    requirement, source = await build_requirement(request, parser)

    scored = scorer.score_all(requirement, request.candidates)
    ranked = ranker.rank_and_filter(requirement, scored, min_relevance=request.min_relevance)
    result = paginate(ranked, request.page, page_size(request.per_page))

    items = result.items
    if request.include_summary and items:
        items = await summarizer.attach_summaries(items, requirement, summarize)

    logger.info(
        "%s search: %d candidates, %d matched, page %d/%d (%s)",
        request.type.value,
        len(request.candidates),
        result.total,
        result.page,
        result.total_pages,
        source.value,
    )

    return SearchResponse(
        items=items,
        total=result.total,
        page=result.page,
        per_page=result.page_size,
        total_pages=result.total_pages,
        requirement=requirement,
        parse_method=source.value,
        degraded=source == ParseSource.FALLBACK,
    )


async def summarize_candidate(
    request: SummaryRequest,
    parser: RequirementParser | None = None,
    summarize: summarizer.Summarizer | None = None,
) -> SummaryResponse:
    """Score a single candidate and explain the match in a sentence or two."""
    requirement = request.requirement
    if requirement is None:
        parser = parser or RequirementParser()
        requirement = await parser.parse(request.query)

    scored = scorer.score(requirement, request.candidate)
    summarize = summarize or summarizer.summarize
    text = await summarize(scored, requirement)

    return SummaryResponse(
        candidate_id=request.candidate.id,
        summary=text,
        relevance_score=scored.relevance_score,
        match_percentage=scored.match_percentage,
    )

from fastapi import APIRouter, Depends, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_requirement_parser, get_summarizer
from config import settings
from models.requests import SearchRequest, SearchType, SummaryRequest
from models.responses import SearchResponse, SummaryResponse
from services import candidate_search
from services.requirement_parser import RequirementParser
from services.summarizer import Summarizer

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "gemini_configured": bool(settings.gemini_api_key),
    }


@router.post("/search", response_model=SearchResponse)
@limiter.limit("30/minute")
async def search(
    request: Request,
    body: SearchRequest,
    parser: RequirementParser = Depends(get_requirement_parser),
    summarize: Summarizer = Depends(get_summarizer),
):
    if body.type == SearchType.JD and not (body.job_description or "").strip():
        raise HTTPException(status_code=400, detail="Job description is required for jd searches")

    text = candidate_search.search_text(body)
    if len(text) > settings.max_query_chars:
        raise HTTPException(
            status_code=400,
            detail=f"Search text too long (max {settings.max_query_chars} chars)",
        )

    return await candidate_search.search(body, parser=parser, summarize=summarize)


@router.post("/search/summary", response_model=SummaryResponse)
@limiter.limit("10/minute")
async def search_summary(
    request: Request,
    body: SummaryRequest,
    parser: RequirementParser = Depends(get_requirement_parser),
    summarize: Summarizer = Depends(get_summarizer),
):
    if body.requirement is None and not body.query.strip():
        raise HTTPException(status_code=400, detail="Either query or requirement is required")
    if len(body.query) > settings.max_query_chars:
        raise HTTPException(
            status_code=400,
            detail=f"Query too long (max {settings.max_query_chars} chars)",
        )

    return await candidate_search.summarize_candidate(body, parser=parser, summarize=summarize)

"""Tests for optional match summaries (Gemini replaced by fakes)."""

import pytest

from config import settings
from services import scorer, summarizer


async def _reply(prompt: str):
    assert "Why this candidate?" in prompt
    return "  Strong fleet manager match in Delhi.  "


async def _empty(prompt: str):
    return None


async def _boom(prompt: str):
    raise RuntimeError("429 resource exhausted")


class TestSummarize:
    @pytest.mark.asyncio
    async def test_returns_generated_text(self, fleet_requirement, fleet_manager):
        scored = scorer.score(fleet_requirement, fleet_manager)
        text = await summarizer.summarize(scored, fleet_requirement, generate=_reply)
        assert text == "Strong fleet manager match in Delhi."

    @pytest.mark.asyncio
    async def test_empty_reply_is_failure(self, fleet_requirement, fleet_manager):
        scored = scorer.score(fleet_requirement, fleet_manager)
        text = await summarizer.summarize(scored, fleet_requirement, generate=_empty)
        assert text == summarizer.SUMMARY_FAILED

    @pytest.mark.asyncio
    async def test_error_is_failure(self, fleet_requirement, fleet_manager):
        scored = scorer.score(fleet_requirement, fleet_manager)
        text = await summarizer.summarize(scored, fleet_requirement, generate=_boom)
        assert text == summarizer.SUMMARY_FAILED

    @pytest.mark.asyncio
    async def test_without_api_key(self, monkeypatch, fleet_requirement, fleet_manager):
        monkeypatch.setattr(settings, "gemini_api_key", "")
        scored = scorer.score(fleet_requirement, fleet_manager)
        text = await summarizer.summarize(scored, fleet_requirement)
        assert text == summarizer.SUMMARY_UNAVAILABLE


@pytest.mark.asyncio
async def test_attach_summaries_returns_copies_in_order(fleet_requirement, candidate_pool):
    items = scorer.score_all(fleet_requirement, candidate_pool)

    async def by_id(scored, requirement):
        return f"summary for {scored.candidate.id}"

    summarized = await summarizer.attach_summaries(items, fleet_requirement, by_id)
    assert [s.match_summary for s in summarized] == ["summary for c3", "summary for c2", "summary for c1"]
    assert all(i.match_summary is None for i in items)
    assert [s.relevance_score for s in summarized] == [i.relevance_score for i in items]

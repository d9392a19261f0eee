import pytest

from models.schemas.candidate import Candidate
from models.schemas.requirement import Requirement
from models.schemas.scored_candidate import Category, CategoryScore, ScoredCandidate
from services import scorer
from services.ranker import rank, rank_and_filter


def _scored(cid: str, relevance: float, role_fraction: float | None = None) -> ScoredCandidate:
    breakdown = {}
    if role_fraction is not None:
        breakdown[Category.ROLE] = CategoryScore(
            earned=role_fraction * 30, max=30, percentage=round(role_fraction * 100)
        )
    return ScoredCandidate(
        candidate=Candidate(id=cid, name=cid.upper()),
        relevance_score=relevance,
        score_breakdown=breakdown,
    )


def test_rank_sorts_descending_with_id_tiebreak():
    items = [_scored("b", 0.7), _scored("c", 0.9), _scored("a", 0.7)]
    assert [i.candidate.id for i in rank(items)] == ["c", "a", "b"]


def test_rank_does_not_modify_input():
    items = [_scored("b", 0.2), _scored("a", 0.9)]
    rank(items)
    assert [i.candidate.id for i in items] == ["b", "a"]


def test_filter_drops_below_threshold():
    items = [_scored("a", 0.49), _scored("b", 0.5), _scored("c", 0.95)]
    kept = rank_and_filter(Requirement(skills=["forklift"]), items)
    assert [i.candidate.id for i in kept] == ["c", "b"]


def test_sorted_and_above_threshold_invariant():
    items = [_scored(str(i), (i * 37 % 100) / 100) for i in range(40)]
    kept = rank_and_filter(Requirement(skills=["forklift"]), items, min_relevance=0.3)
    scores = [i.relevance_score for i in kept]
    assert scores == sorted(scores, reverse=True)
    assert all(s >= 0.3 for s in scores)


def test_role_sub_threshold_applies_when_role_given():
    items = [_scored("weak-role", 0.8, role_fraction=0.2), _scored("good-role", 0.7, role_fraction=0.8)]
    kept = rank_and_filter(Requirement(role="fleet manager"), items)
    assert [i.candidate.id for i in kept] == ["good-role"]


def test_role_sub_threshold_ignored_without_role():
    items = [_scored("weak-role", 0.8, role_fraction=0.2)]
    kept = rank_and_filter(Requirement(skills=["gps tracking"]), items)
    assert [i.candidate.id for i in kept] == ["weak-role"]


def test_custom_thresholds():
    items = [_scored("a", 0.3, role_fraction=0.1)]
    kept = rank_and_filter(Requirement(role="driver"), items, min_relevance=0.25, min_role_match=0.05)
    assert len(kept) == 1


def test_everything_filtered_returns_empty():
    items = [_scored("a", 0.1), _scored("b", 0.2)]
    assert rank_and_filter(Requirement(skills=["forklift"]), items) == []
    assert rank_and_filter(Requirement(), []) == []


@pytest.mark.scenario
def test_scenario_pool(fleet_requirement, candidate_pool):
    kept = rank_and_filter(fleet_requirement, scorer.score_all(fleet_requirement, candidate_pool))
    assert [i.candidate.id for i in kept] == ["c1", "c2"]


@pytest.mark.scenario
def test_generic_manager_is_filtered(fleet_requirement, fleet_manager):
    generic = Candidate(
        id="c4",
        current_role="Manager",
        soft_skills=["Management"],
        location="Delhi",
        total_experience="1 year",
    )
    scored = scorer.score_all(fleet_requirement, [generic, fleet_manager])
    assert scored[0].relevance_score == pytest.approx(0.2)
    assert scored[0].score_breakdown[Category.ROLE].earned == 0
    kept = rank_and_filter(fleet_requirement, scored)
    assert [i.candidate.id for i in kept] == ["c1"]

"""Shared test configuration, pytest markers and candidate fixtures."""

import pytest

from models.schemas.candidate import Candidate
from models.schemas.requirement import Requirement


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "scenario: end-to-end ranking scenarios over a small candidate pool"
    )


_FLEET_PAYLOAD = {
    "role": "Fleet Manager",
    "experience": {"min": 3, "max": None, "exact": None},
    "location": "Delhi",
    "skills": ["GPS tracking", "fleet management"],
    "education": None,
    "certifications": [],
    "industry": "logistics",
    "specificRequirements": [],
    "impliedResponsibilities": [],
}


def _make_extractor(payload, calls: list | None = None):
    """Async NLU stand-in that returns ``payload`` and records prompts."""
    async def extractor(prompt: str):
        if calls is not None:
            calls.append(prompt)
        return payload
    return extractor


@pytest.fixture
def fleet_payload() -> dict:
    return dict(_FLEET_PAYLOAD)


@pytest.fixture
def make_extractor():
    return _make_extractor


@pytest.fixture
def fleet_requirement() -> Requirement:
    return Requirement(
        skills=["GPS tracking", "fleet management"],
        role="fleet manager",
        location="Delhi",
        experience={"min": 3, "max": None},
    )


@pytest.fixture
def fleet_manager() -> Candidate:
    return Candidate(
        id="c1",
        name="Ravi Kumar",
        technical_skills=["GPS Tracking", "Route Optimization"],
        current_role="Fleet Manager",
        location="Delhi NCR",
        total_experience="5 years",
    )


@pytest.fixture
def logistics_manager() -> Candidate:
    return Candidate(
        id="c2",
        name="Anita Sharma",
        technical_skills=["GPS Tracking", "Fleet Management"],
        current_role="Logistics Manager",
        location="Gurgaon",
        total_experience="7 years",
    )


@pytest.fixture
def accountant() -> Candidate:
    return Candidate(
        id="c3",
        name="Suresh Iyer",
        technical_skills=["Tally", "GST Filing"],
        current_role="Accountant",
        location="Chennai",
        total_experience="5 years",
    )


@pytest.fixture
def candidate_pool(fleet_manager, logistics_manager, accountant) -> list[Candidate]:
    return [accountant, logistics_manager, fleet_manager]

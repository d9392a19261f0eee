"""Candidate scorer: weighted multi-category relevance against a Requirement.

Each category the requirement specifies yields a matched fraction in
[0, 1]; earned points are fraction * weight and the relevance score is
sum(earned) / sum(weight) over active categories only. Categories the
requirement leaves unspecified are excluded rather than counted as misses.

Category rules:
    Skills          matched / required; technical skills, soft skills and tags
                    (with synonyms), then role, company, summary and resume
                    text (phrase or all-token presence)
    Role            1.0 title contains / is contained by the required role,
                    0.8 known synonym title, 0.6 fuzzy title similarity,
                    0.4 two or more role-related skills, else 0
    Location        1.0 substring either way, 0.85 same regional cluster, else 0
    Experience      1.0 inside [min, max], 0.5 within the tolerance outside
                    the window, else 0 (unparseable counts as 0)
    Education       1.0 text match or level >= required, 0.4 lower level,
                    else 0
    Responsibility  implied-responsibility phrase/keyword coverage

The scorer is pure: no I/O and identical output for identical input.
"""

import logging
from collections import Counter

from config import ScoringWeights, settings
from models.schemas.candidate import Candidate
from models.schemas.requirement import ExperienceRange, Requirement
from models.schemas.scored_candidate import (
    Category,
    CategoryScore,
    MatchDetail,
    ScoredCandidate,
)
from services import keyword_extractor as kw
from services.profile_parser import education_level, parse_experience_years

logger = logging.getLogger(__name__)

# Reporting order for "where did this skill match"
SKILL_AREAS = (
    "technical_skills",
    "soft_skills",
    "current_role",
    "company",
    "summary",
    "resume_text",
)

ROLE_EXACT = 1.0
ROLE_SYNONYM = 0.8
ROLE_FUZZY = 0.6
ROLE_SKILLS_ONLY = 0.4

LOCATION_CLUSTER = 0.85
EXPERIENCE_NEAR_MISS = 0.5
EDUCATION_BELOW = 0.4

# Words too generic to count toward responsibility keyword coverage
_RESPONSIBILITY_FILLER = {"with", "that", "this", "from", "into", "manage", "handle"}


# ---------------------------------------------------------------------------
# Category scorers
# ---------------------------------------------------------------------------

def _skill_areas(candidate: Candidate) -> list[tuple[str, list[str] | str]]:
    return [
        ("technical_skills", candidate.technical_skills),
        ("soft_skills", candidate.soft_skills + candidate.tags),
        ("current_role", candidate.current_role),
        ("company", candidate.current_company),
        ("summary", candidate.summary),
        ("resume_text", candidate.resume_text),
    ]


def match_skill(skill: str, candidate: Candidate) -> str | None:
    """Return the first area (in SKILL_AREAS order) where ``skill`` matches."""
    for area, value in _skill_areas(candidate):
        if isinstance(value, list):
            if any(kw.skill_matches(skill, entry) for entry in value):
                return area
        elif value and kw.text_matches(value, skill):
            return area
    return None


def skills_score(
    skills: list[str], candidate: Candidate
) -> tuple[float, dict[str, str], list[str]]:
    """Fraction of required skills found, plus skill->area and missing skills."""
    if not skills:
        return 0.0, {}, []
    matched: dict[str, str] = {}
    missing: list[str] = []
    for skill in skills:
        area = match_skill(skill, candidate)
        if area:
            matched[skill] = area
        else:
            missing.append(skill)
    return len(matched) / len(skills), matched, missing


def _synonyms_for(role: str) -> list[str]:
    if role in kw.ROLE_SYNONYMS:
        return kw.ROLE_SYNONYMS[role]
    singular = kw.singularize(role)
    for key, synonyms in kw.ROLE_SYNONYMS.items():
        if kw.singularize(key) == singular:
            return synonyms
    return []


def _title_score(required: str, title: str, fuzzy_threshold: float) -> float:
    req = kw.singularize(kw.normalize(required))
    cand = kw.singularize(kw.normalize(title))
    if not req or not cand:
        return 0.0
    # A bare "Manager" title is not contained credit for "Fleet Manager"
    reverse = not kw.is_generic(cand)
    if kw.contains_phrase(cand, req) or (reverse and kw.contains_phrase(req, cand)):
        return ROLE_EXACT
    for synonym in _synonyms_for(kw.normalize(required)):
        syn = kw.singularize(synonym)
        if kw.contains_phrase(cand, syn) or (reverse and kw.contains_phrase(syn, cand)):
            return ROLE_SYNONYM
    if kw.role_similarity(required, title) >= fuzzy_threshold:
        return ROLE_FUZZY
    return 0.0


def _role_skill_hits(required: str, candidate: Candidate) -> int:
    hints = kw.ROLE_SKILL_HINTS.get(kw.normalize(required), [])
    if not hints:
        return 0
    skills = [
        kw.normalize(s)
        for s in candidate.technical_skills + candidate.soft_skills + candidate.tags
    ]
    return sum(1 for s in skills if any(hint in s for hint in hints))


def role_score(
    required_role: str, candidate: Candidate, fuzzy_threshold: float | None = None
) -> float:
    """Graded match between the required role and the candidate's titles."""
    if fuzzy_threshold is None:
        fuzzy_threshold = settings.role_fuzzy_threshold
    best = 0.0
    for title in (candidate.current_role, candidate.desired_role):
        if title.strip():
            best = max(best, _title_score(required_role, title, fuzzy_threshold))
    if best < ROLE_SKILLS_ONLY and _role_skill_hits(required_role, candidate) >= 2:
        best = ROLE_SKILLS_ONLY
    return best


def location_score(required_location: str, candidate_location: str) -> float:
    required = kw.normalize(required_location)
    candidate = kw.normalize(candidate_location)
    if not required or not candidate:
        return 0.0
    if kw.contains_phrase(candidate, required) or kw.contains_phrase(required, candidate):
        return 1.0
    cluster = kw.location_cluster(required)
    if cluster is not None and cluster == kw.location_cluster(candidate):
        return LOCATION_CLUSTER
    return 0.0


def experience_score(
    required: ExperienceRange,
    candidate_experience: str,
    tolerance: float | None = None,
) -> float:
    """1.0 inside the window, partial credit for a near miss, else 0."""
    if tolerance is None:
        tolerance = settings.experience_tolerance_years
    years = parse_experience_years(candidate_experience)
    if years is None:
        return 0.0
    low = required.min if required.min is not None else float("-inf")
    high = required.max if required.max is not None else float("inf")
    if low <= years <= high:
        return 1.0
    gap = low - years if years < low else years - high
    return EXPERIENCE_NEAR_MISS if gap <= tolerance else 0.0


def education_score(required_education: str, candidate: Candidate) -> float:
    candidate_text = " ".join(
        t for t in (candidate.highest_qualification, candidate.degree) if t.strip()
    )
    required = kw.normalize(required_education)
    cand = kw.normalize(candidate_text)
    if not required or not cand:
        return 0.0
    if kw.contains_phrase(cand, required):
        return 1.0
    # Levels outrank reverse containment: "Graduate" sits inside "Post Graduate"
    required_level = education_level(required_education)
    candidate_level = education_level(candidate_text)
    if required_level is not None and candidate_level is not None:
        return 1.0 if candidate_level >= required_level else EDUCATION_BELOW
    if kw.contains_phrase(required, cand):
        return 1.0
    return 0.0


def responsibility_score(responsibilities: list[str], candidate: Candidate) -> float:
    """Coverage of implied responsibilities in the candidate's free text.

    An exact phrase counts 1.5; otherwise the share of significant words
    present counts when it reaches 60%. Full marks at 70% of the list.
    """
    text = candidate.searchable_text()
    if not text.strip() or not responsibilities:
        return 0.0
    words = set(kw.normalize(text).split())
    total = 0.0
    for resp in responsibilities:
        if kw.contains_phrase(text, resp):
            total += 1.5
            continue
        keywords = [
            w for w in kw.normalize(resp).split()
            if len(w) > 3 and w not in _RESPONSIBILITY_FILLER
        ]
        if keywords:
            ratio = sum(1 for k in keywords if k in words) / len(keywords)
            if ratio >= 0.6:
                total += ratio
    return min(1.0, total / max(1.0, len(responsibilities) * 0.7))


# ---------------------------------------------------------------------------
# Explanation helpers
# ---------------------------------------------------------------------------

def matching_keywords(
    requirement: Requirement, candidate: Candidate, matched_skills: dict[str, str]
) -> list[str]:
    """Requirement tokens found anywhere in the candidate profile."""
    text = candidate.searchable_text()
    found: set[str] = {s.lower() for s in matched_skills}
    tokens = list(requirement.skills) + list(requirement.certifications)
    tokens += [t for t in (requirement.role, requirement.location) if t]
    for token in tokens:
        if kw.text_matches(text, token):
            found.add(token.lower())
    return sorted(found)


def _primary_area(matched_skills: dict[str, str]) -> str | None:
    if not matched_skills:
        return None
    counts = Counter(matched_skills.values())
    return min(counts, key=lambda area: (-counts[area], SKILL_AREAS.index(area)))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def score(
    requirement: Requirement,
    candidate: Candidate,
    weights: ScoringWeights | None = None,
) -> ScoredCandidate:
    """Score one candidate against a requirement."""
    weights = weights or settings.weights

    fractions: dict[Category, float] = {}
    details: list[MatchDetail] = []
    gaps: list[str] = []
    matched_skills: dict[str, str] = {}
    missing_skills: list[str] = []

    if requirement.role and weights.role > 0:
        frac = role_score(requirement.role, candidate)
        fractions[Category.ROLE] = frac
        status = "match" if frac > 0.8 else "partial" if frac >= 0.3 else "miss"
        if status == "match":
            message = f'Role matches "{requirement.role}"'
        elif status == "partial":
            message = f'Related role "{candidate.current_role or candidate.desired_role}"'
        else:
            message = f"Role mismatch ({candidate.current_role or 'Not specified'})"
            gaps.append(f"Role: {requirement.role}")
        details.append(MatchDetail(category=Category.ROLE, status=status, score=frac, message=message))

    if requirement.implied_responsibilities and weights.responsibility > 0:
        frac = responsibility_score(requirement.implied_responsibilities, candidate)
        fractions[Category.RESPONSIBILITY] = frac
        status = "match" if frac > 0.6 else "partial" if frac > 0.2 else "miss"
        details.append(MatchDetail(
            category=Category.RESPONSIBILITY,
            status=status,
            score=frac,
            message=f"{round(frac * 100)}% match on key tasks",
        ))

    if requirement.experience and weights.experience > 0:
        frac = experience_score(requirement.experience, candidate.total_experience)
        fractions[Category.EXPERIENCE] = frac
        status = "match" if frac > 0.8 else "partial" if frac > 0.2 else "miss"
        shown = candidate.total_experience or "Not specified"
        if status == "match":
            message = f"Meets experience ({shown})"
        elif status == "partial":
            message = f"Partial experience ({shown})"
        else:
            message = f"Experience mismatch ({shown})"
            gaps.append("Experience")
        details.append(MatchDetail(category=Category.EXPERIENCE, status=status, score=frac, message=message))

    if requirement.location and weights.location > 0:
        frac = location_score(requirement.location, candidate.location)
        fractions[Category.LOCATION] = frac
        status = "match" if frac > 0.8 else "partial" if frac > 0.2 else "miss"
        if status == "miss":
            gaps.append("Location")
        message = {
            "match": "Matches location",
            "partial": f"Nearby ({candidate.location})",
            "miss": "Location mismatch",
        }[status]
        details.append(MatchDetail(category=Category.LOCATION, status=status, score=frac, message=message))

    if requirement.skills and weights.skills > 0:
        frac, matched_skills, missing_skills = skills_score(requirement.skills, candidate)
        fractions[Category.SKILLS] = frac
        status = "match" if frac > 0.6 else "partial" if frac > 0.1 else "miss"
        if status == "miss":
            gaps.append("Skills")
        details.append(MatchDetail(
            category=Category.SKILLS,
            status=status,
            score=frac,
            message=f"{len(matched_skills)} of {len(requirement.skills)} skills matched",
        ))

    if requirement.education and weights.education > 0:
        frac = education_score(requirement.education, candidate)
        fractions[Category.EDUCATION] = frac
        status = "match" if frac > 0.8 else "partial" if frac > 0.2 else "miss"
        details.append(MatchDetail(
            category=Category.EDUCATION,
            status=status,
            score=frac,
            message=candidate.highest_qualification or candidate.degree or "Not specified",
        ))

    category_weights = {
        Category.ROLE: weights.role,
        Category.RESPONSIBILITY: weights.responsibility,
        Category.EXPERIENCE: weights.experience,
        Category.SKILLS: weights.skills,
        Category.LOCATION: weights.location,
        Category.EDUCATION: weights.education,
    }
    breakdown: dict[Category, CategoryScore] = {}
    earned_total = 0.0
    max_total = 0.0
    for category, frac in fractions.items():
        weight = category_weights[category]
        earned = frac * weight
        earned_total += earned
        max_total += weight
        breakdown[category] = CategoryScore(
            earned=round(earned, 2), max=weight, percentage=round(frac * 100)
        )

    if max_total > 0:
        relevance = earned_total / max_total
    else:
        # Nothing to compare against: every candidate is a weak match
        relevance = settings.empty_requirement_score

    logger.debug(
        "Scored %s (%s): %.1f/%.1f -> %.3f",
        candidate.id or "?", candidate.name, earned_total, max_total, relevance,
    )

    return ScoredCandidate(
        candidate=candidate,
        relevance_score=relevance,
        score_breakdown=breakdown,
        matching_keywords=matching_keywords(requirement, candidate, matched_skills),
        missing_keywords=missing_skills,
        match_details=details,
        gap_analysis=gaps,
        primary_match_area=_primary_area(matched_skills),
    )


def score_all(
    requirement: Requirement,
    candidates: list[Candidate],
    weights: ScoringWeights | None = None,
) -> list[ScoredCandidate]:
    """Score every candidate in the pool (order preserved)."""
    return [score(requirement, c, weights) for c in candidates]

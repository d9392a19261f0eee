"""Loose parsing of experience and education text.

Candidate profiles store experience as free text ("5 years", "2 yrs 6 months",
"18 months") and job descriptions state it as ranges ("3-5 years", "5+ years",
"minimum 3 years"). Education is reduced to an ordinal level so that a
requirement like "graduate" can match a "Master of Business Administration".
"""

import re

from models.schemas.requirement import ExperienceRange

# ---------------------------------------------------------------------------
# Experience duration extraction
# ---------------------------------------------------------------------------

_YEARS = r"(?:years?|yrs?)"

# "2 years 6 months", "2 yrs and 3 months"
YEARS_MONTHS_RE = re.compile(
    rf"(\d+(?:\.\d+)?)\s*\+?\s*{_YEARS}\s*(?:and\s+|,\s*)?(\d+)\s*(?:months?|mos?)\b",
    re.IGNORECASE,
)
# "5 years", "3.5 yrs", "5+ years"
YEARS_RE = re.compile(rf"(\d+(?:\.\d+)?)\s*\+?\s*{_YEARS}\b", re.IGNORECASE)
# "18 months"
MONTHS_RE = re.compile(r"(\d+(?:\.\d+)?)\s*(?:months?|mos?)\b", re.IGNORECASE)
# bare number: "5", "4.5"
BARE_NUMBER_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*\+?\s*$")

# Requirement-side patterns, most specific first
RANGE_RE = re.compile(
    rf"(\d+(?:\.\d+)?)\s*(?:-|–|—|to)\s*(\d+(?:\.\d+)?)\s*\+?\s*{_YEARS}",
    re.IGNORECASE,
)
MIN_RE = re.compile(
    rf"(?:minimum(?:\s+of)?|min\.?|at\s+least|atleast|more\s+than|over)\s*(\d+(?:\.\d+)?)\s*\+?\s*{_YEARS}",
    re.IGNORECASE,
)
MAX_RE = re.compile(
    rf"(?:up\s*to|upto|maximum(?:\s+of)?|max\.?|less\s+than|under)\s*(\d+(?:\.\d+)?)\s*{_YEARS}",
    re.IGNORECASE,
)
PLUS_RE = re.compile(rf"(\d+(?:\.\d+)?)\s*\+\s*{_YEARS}", re.IGNORECASE)

# Sanity bound for parsed careers
_MAX_YEARS = 60.0


def parse_experience_years(text: str | None) -> float | None:
    """Parse a candidate's total experience into years.

    Returns None when no duration can be found, so callers can tell
    "unknown" apart from "0 years".
    """
    if not text:
        return None
    text = text.strip()

    m = YEARS_MONTHS_RE.search(text)
    if m:
        years = float(m.group(1)) + float(m.group(2)) / 12
        return round(years, 2) if years <= _MAX_YEARS else None

    m = YEARS_RE.search(text)
    if m:
        years = float(m.group(1))
        return years if years <= _MAX_YEARS else None

    m = MONTHS_RE.search(text)
    if m:
        return round(float(m.group(1)) / 12, 2)

    m = BARE_NUMBER_RE.match(text)
    if m:
        years = float(m.group(1))
        return years if years <= _MAX_YEARS else None

    return None


def parse_experience_range(text: str | None) -> ExperienceRange | None:
    """Extract a required-experience window from query or JD text."""
    if not text:
        return None

    m = RANGE_RE.search(text)
    if m:
        low, high = float(m.group(1)), float(m.group(2))
        return ExperienceRange(min=min(low, high), max=max(low, high))

    m = MIN_RE.search(text) or PLUS_RE.search(text)
    if m:
        return ExperienceRange(min=float(m.group(1)))

    m = MAX_RE.search(text)
    if m:
        return ExperienceRange(max=float(m.group(1)))

    m = YEARS_RE.search(text)
    if m:
        # A bare "3 years" in a requirement reads as a minimum
        return ExperienceRange(min=float(m.group(1)))

    return None


# ---------------------------------------------------------------------------
# Education level detection
# ---------------------------------------------------------------------------

EDUCATION_LEVELS = ["high school", "diploma", "bachelor", "master", "phd"]

DEGREE_PATTERNS: dict[str, list[str]] = {
    "phd": [
        r"ph\.?\s?d", r"doctorate", r"doctoral", r"doctor of philosophy",
    ],
    "master": [
        r"post\s*-?\s*graduat\w*", r"master(?:'?s)?", r"mba", r"m\.?\s?tech",
        r"m\.?\s?sc", r"m\.?\s?com", r"mca", r"pgdm", r"m\.?\s?e\.?", r"m\.?\s?a\.?",
        r"m\.?\s?s\.?",
    ],
    "bachelor": [
        r"graduat\w*", r"bachelor(?:'?s)?", r"degree", r"b\.?\s?tech", r"b\.?\s?sc",
        r"b\.?\s?com", r"bca", r"bba", r"b\.?\s?e\.?", r"b\.?\s?a\.?", r"b\.?\s?s\.?",
        r"b\.?\s?eng", r"under\s*-?\s*graduat\w*",
    ],
    "diploma": [
        r"diploma", r"polytechnic", r"iti", r"associate(?:'?s)?",
    ],
    "high school": [
        r"high\s*school", r"higher\s*secondary", r"secondary", r"12th", r"10th",
        r"hsc", r"ssc", r"intermediate", r"matriculat\w*",
    ],
}

_DEGREE_COMPILED: dict[str, re.Pattern] = {}
for _level, _patterns in DEGREE_PATTERNS.items():
    _combined = "|".join(_patterns)
    _DEGREE_COMPILED[_level] = re.compile(
        rf"(?<![a-z])(?:{_combined})(?![a-z])", re.IGNORECASE
    )

# Order matters: "post graduate" must resolve before "graduate"
_DEGREE_PRIORITY = ["phd", "master", "bachelor", "diploma", "high school"]


def education_level(text: str | None) -> int | None:
    """Return the highest education level mentioned as an ordinal.

    0=high school, 1=diploma, 2=bachelor, 3=master, 4=phd; None if unknown.
    """
    if not text:
        return None
    for level in _DEGREE_PRIORITY:
        if _DEGREE_COMPILED[level].search(text):
            return EDUCATION_LEVELS.index(level)
    return None

"""Structured representation of what a search query or JD is asking for."""

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

_NUMBER_RE = re.compile(r"\d+(?:\.\d+)?")


def _to_number(value: Any) -> float | None:
    """Loosely coerce NLU output ("5", "5+", 5, None) to a float."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    match = _NUMBER_RE.search(str(value))
    return float(match.group()) if match else None


def _dedupe(values: list[str]) -> list[str]:
    """Strip and de-duplicate case-insensitively, keeping first-seen order."""
    seen: set[str] = set()
    out: list[str] = []
    for v in values:
        v = v.strip()
        if v and v.lower() not in seen:
            seen.add(v.lower())
            out.append(v)
    return out


class ExperienceRange(BaseModel):
    """Years of experience window; either bound may be open (None).

    An exact requirement ("exactly 4 years") is stored as min == max.
    """
    model_config = ConfigDict(frozen=True)

    min: float | None = None
    max: float | None = None

    @model_validator(mode="before")
    @classmethod
    def _fold_exact(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        exact = _to_number(data.pop("exact", None))
        low = _to_number(data.get("min"))
        high = _to_number(data.get("max"))
        if exact is not None and low is None and high is None:
            low = high = exact
        if low is not None and high is not None and low > high:
            low, high = high, low
        return {"min": low, "max": high}

    @property
    def is_empty(self) -> bool:
        return self.min is None and self.max is None


class Requirement(BaseModel):
    """Parsed search requirement.

    Unknown scalar fields stay None (not "") so that "not stated" is
    distinguishable from an explicit value. Produced once per search and
    never mutated; use ``with_overrides`` to derive a variant.
    """
    model_config = ConfigDict(frozen=True, extra="ignore")

    skills: list[str] = []
    role: str | None = None
    location: str | None = None
    education: str | None = None
    experience: ExperienceRange | None = None

    certifications: list[str] = []
    industry: str | None = None
    specific_requirements: list[str] = []
    implied_responsibilities: list[str] = []

    @model_validator(mode="before")
    @classmethod
    def _accept_camel_case(cls, data: Any) -> Any:
        if isinstance(data, dict):
            aliases = {
                "specificRequirements": "specific_requirements",
                "impliedResponsibilities": "implied_responsibilities",
            }
            data = {aliases.get(k, k): v for k, v in data.items()}
        return data

    @field_validator("role", "location", "education", "industry", mode="before")
    @classmethod
    def _blank_to_none(cls, v: Any) -> Any:
        if v is None:
            return None
        if isinstance(v, list):
            v = ", ".join(str(x) for x in v if x)
        v = str(v).strip()
        return v or None

    @field_validator(
        "skills",
        "certifications",
        "specific_requirements",
        "implied_responsibilities",
        mode="before",
    )
    @classmethod
    def _clean_list(cls, v: Any) -> list[str]:
        if v is None:
            return []
        if isinstance(v, str):
            v = v.split(",")
        if not isinstance(v, (list, tuple, set)):
            return []
        return _dedupe([str(x) for x in v if x is not None])

    @field_validator("experience", mode="after")
    @classmethod
    def _drop_empty_range(cls, v: ExperienceRange | None) -> ExperienceRange | None:
        if v is not None and v.is_empty:
            return None
        return v

    def is_empty(self) -> bool:
        """True when no scoring category would be active."""
        return not (
            self.skills
            or self.role
            or self.location
            or self.education
            or self.experience
            or self.implied_responsibilities
        )

    def with_overrides(
        self,
        location: str | None = None,
        education: str | None = None,
        min_experience: float | None = None,
        max_experience: float | None = None,
        skills: list[str] | None = None,
    ) -> "Requirement":
        """Return a copy with explicit filter values taking precedence."""
        data = self.model_dump()
        if location:
            data["location"] = location
        if education:
            data["education"] = education
        if min_experience is not None or max_experience is not None:
            current = self.experience or ExperienceRange()
            data["experience"] = {
                "min": min_experience if min_experience is not None else current.min,
                "max": max_experience if max_experience is not None else current.max,
            }
        if skills:
            data["skills"] = skills
        return Requirement.model_validate(data)

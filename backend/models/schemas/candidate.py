"""Flattened candidate profile used as scoring input."""

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")

# Stored rows use a few names that differ from the profile view
_FIELD_ALIASES = {
    "_id": "id",
    "company": "current_company",
    "role": "current_role",
}


def _snake(key: str) -> str:
    return _CAMEL_RE.sub("_", key).lower()


def _normalize_keys(data: dict[str, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key, value in data.items():
        name = _snake(key) if key != "_id" else key
        name = _FIELD_ALIASES.get(name, name)
        # first spelling wins ("id" over "_id")
        out.setdefault(name, value)
    return out


def _as_text(v: Any) -> str:
    if v is None:
        return ""
    if isinstance(v, (list, tuple)):
        return ", ".join(str(x) for x in v if x is not None)
    return str(v)


def _as_str_list(v: Any) -> list[str]:
    if v is None:
        return []
    if isinstance(v, str):
        return [s.strip() for s in v.split(",") if s.strip()]
    if not isinstance(v, (list, tuple, set)):
        return []
    return [str(x).strip() for x in v if x is not None and str(x).strip()]


class WorkExperience(BaseModel):
    """A single work experience entry."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    company: str = ""
    role: str = ""
    duration: str = ""
    description: str = ""

    @field_validator("company", "role", "duration", "description", mode="before")
    @classmethod
    def _text(cls, v: Any) -> str:
        return _as_text(v)


class Candidate(BaseModel):
    """Read-only view of a stored applicant profile.

    Every field defaults to empty and malformed values coerce to empty, so
    any record within this shape can be scored. Accepts both snake_case and
    the camelCase keys used by the stored profiles.
    """
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = ""
    name: str = ""
    current_role: str = ""
    desired_role: str = ""
    current_company: str = ""
    location: str = ""
    preferred_location: str = ""
    total_experience: str = ""
    technical_skills: list[str] = []
    soft_skills: list[str] = []
    tags: list[str] = []
    certifications: list[str] = []
    highest_qualification: str = ""
    degree: str = ""
    specialization: str = ""
    summary: str = ""
    resume_text: str = ""
    key_achievements: list[str] = []
    work_experience: list[WorkExperience] = []
    embedding: list[float] | None = None

    @model_validator(mode="before")
    @classmethod
    def _normalize(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return _normalize_keys(data)
        return data

    @field_validator(
        "id", "name", "current_role", "desired_role", "current_company",
        "location", "preferred_location", "total_experience",
        "highest_qualification", "degree", "specialization", "summary",
        "resume_text",
        mode="before",
    )
    @classmethod
    def _text(cls, v: Any) -> str:
        return _as_text(v)

    @field_validator(
        "technical_skills", "soft_skills", "tags", "certifications",
        "key_achievements",
        mode="before",
    )
    @classmethod
    def _str_list(cls, v: Any) -> list[str]:
        return _as_str_list(v)

    @field_validator("work_experience", mode="before")
    @classmethod
    def _work(cls, v: Any) -> list[Any]:
        if not isinstance(v, (list, tuple)):
            return []
        return [w for w in v if isinstance(w, (dict, WorkExperience))]

    @field_validator("embedding", mode="before")
    @classmethod
    def _vector(cls, v: Any) -> list[float] | None:
        if not isinstance(v, (list, tuple)):
            return None
        try:
            return [float(x) for x in v]
        except (TypeError, ValueError):
            return None

    def searchable_text(self) -> str:
        """All free text fields joined and lower-cased."""
        parts = [
            self.current_role,
            self.desired_role,
            self.current_company,
            self.location,
            self.summary,
            self.resume_text,
            " ".join(self.technical_skills),
            " ".join(self.soft_skills),
            " ".join(self.tags),
            " ".join(self.certifications),
            " ".join(self.key_achievements),
        ]
        parts.extend(f"{w.role} {w.description}" for w in self.work_experience)
        return " ".join(p for p in parts if p).lower()

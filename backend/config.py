import json
from typing import Annotated

from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings, NoDecode


class ScoringWeights(BaseModel):
    """Points available per scoring category (only active categories count)."""
    role: float = 30
    responsibility: float = 20
    experience: float = 15
    skills: float = 15
    location: float = 15
    education: float = 5


class Settings(BaseSettings):
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.0-flash"
    cors_origins: Annotated[list[str], NoDecode] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]
    debug: bool = False

    # Requirement parsing
    parse_timeout_seconds: float = 8.0
    max_query_chars: int = 10000

    # Scoring / filtering (product-tuning constants)
    weights: ScoringWeights = ScoringWeights()
    min_relevance: float = 0.50
    min_role_match: float = 0.30
    empty_requirement_score: float = 0.1
    experience_tolerance_years: float = 1.0
    role_fuzzy_threshold: int = 85

    # Pagination
    default_page_size: int = 25
    max_page_size: int = 100

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_nested_delimiter": "__",
    }

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _parse_cors_origins(cls, v):
        """Accept CORS_ORIGINS as a comma-separated string or JSON list."""
        if isinstance(v, str):
            if v.strip().startswith("["):
                return json.loads(v)
            return [o.strip() for o in v.split(",") if o.strip()]
        return v


settings = Settings()

"""All prompt templates for Gemini API calls."""

import json

from models.schemas.requirement import Requirement
from models.schemas.scored_candidate import ScoredCandidate


def build_requirement_prompt(query: str) -> str:
    """Call A: parse a search query or job description into a Requirement."""
    return f"""You are an expert HR recruiter for the logistics and transportation industry.
Parse this job requirement and extract structured information.

Analyze the role to understand what this person actually DOES. Generate
"impliedResponsibilities" that are standard for the role, even if the text
does not mention them.

REQUIREMENT TEXT:
---
{query}
---

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "role": "<job title, e.g. 'Fleet Manager', or null>",
  "experience": {{"min": <number or null>, "max": <number or null>, "exact": <number or null>}},
  "location": "<city/region or null>",
  "skills": ["<required technical and soft skills>"],
  "education": "<education requirement or null>",
  "certifications": ["<required certifications>"],
  "industry": "<logistics, transportation, warehousing, supply chain, ... or null>",
  "specificRequirements": ["<other requirements, including salary>"],
  "impliedResponsibilities": ["<5-7 daily tasks or KPIs for this role>"]
}}

Parsing rules:
- "5+ years" means min: 5; "2-5 years" means min: 2, max: 5; "Minimum 3 years" means min: 3
- "Lodhwal, Ludhiana" means location: "Ludhiana"
- "proficiency in X", "strong knowledge of X", "excellent X" add X to skills
- "CDL" means certifications: ["Commercial Driver License"]
- "Hazmat" means certifications: ["Hazmat Certification"]
- "LIFO and FEFO" means skills: ["inventory management", "LIFO", "FEFO"]
- Use null for anything not stated; never invent a location or experience range
- Include both hard skills and soft skills"""


def build_summary_prompt(scored: ScoredCandidate, requirement: Requirement) -> str:
    """Call B: short "why this candidate?" insight for one ranked result."""
    candidate = scored.candidate
    requirement_json = json.dumps(requirement.model_dump(exclude_none=True))
    skills = ", ".join(candidate.technical_skills[:10])
    gaps = ", ".join(scored.gap_analysis) or "none"

    return f"""Act as an expert recruiter.
Provide a "Why this candidate?" insight (max 40 words).

Requirements:
{requirement_json}

Candidate:
Role: {candidate.current_role}
Exp: {candidate.total_experience}
Loc: {candidate.location}
Skills: {skills}
Match score: {scored.match_percentage}%
Known gaps: {gaps}

Task:
- Explain the match logic clearly.
- Highlight KEY matches (Role, Location, Skills).
- Mention CRITICAL gaps if any.
- Style: professional, insightful, direct. Plain text only.
- Example: "Strong match for Fleet Manager role in Hyderabad. Has required GPS tracking skills and relevant experience. Good fit."
- Example: "Role matches but location mismatch (Mumbai vs Delhi). Good backup candidate if location is flexible."
"""

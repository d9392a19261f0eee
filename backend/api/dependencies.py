"""Shared dependencies for API routes."""

from services import summarizer
from services.requirement_parser import RequirementParser


def get_requirement_parser() -> RequirementParser:
    return RequirementParser()


def get_summarizer() -> summarizer.Summarizer:
    return summarizer.summarize

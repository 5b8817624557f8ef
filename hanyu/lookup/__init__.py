"""Lookup over the text-generation service: word search and character analysis."""

from hanyu.lookup.errors import (
    LookupFailure,
    CharacterAnalysisFailure,
)
from hanyu.lookup.gateway import (
    MAX_CANDIDATES,
    LookupGateway,
    parse_search_response,
    search_prompts,
    analysis_prompts,
)

__all__ = [
    # errors
    "LookupFailure",
    "CharacterAnalysisFailure",
    # gateway
    "MAX_CANDIDATES",
    "LookupGateway",
    "parse_search_response",
    "search_prompts",
    "analysis_prompts",
]

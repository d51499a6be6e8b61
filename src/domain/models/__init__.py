"""Domain models package."""

from .identifiers import ContestListingQuery, NormalizedQuery, Platform
from .suggestion import Suggestion

ContestMap = dict[str, str]

__all__ = [
    "ContestListingQuery",
    "ContestMap",
    "NormalizedQuery",
    "Platform",
    "Suggestion",
]

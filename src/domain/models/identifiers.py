"""Value objects for problem and contest identification."""

from dataclasses import dataclass
from enum import Enum


class Platform(str, Enum):
    """Judge platform tag."""

    CF = "CF"
    ATC = "ATC"

    @property
    def cache_prefix(self) -> str:
        return "cf" if self is Platform.CF else "atc"


@dataclass(frozen=True)
class NormalizedQuery:
    """Canonical form of a single-problem query."""

    platform: Platform
    normalized: str
    url: str
    contest_id: str
    problem_index: str

    def __str__(self) -> str:
        """String representation."""
        return f"{self.platform.value}:{self.normalized}"


@dataclass(frozen=True)
class ContestListingQuery:
    """A query naming a whole contest, without a problem index."""

    platform: Platform
    contest_id: str

    def __str__(self) -> str:
        """String representation."""
        return f"{self.platform.value}:{self.contest_id}"

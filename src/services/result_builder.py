"""Builds inline suggestions for single problems and contest listings."""

import re
from functools import cmp_to_key

from loguru import logger

from domain.models import ContestListingQuery, ContestMap, NormalizedQuery, Platform, Suggestion
from domain.parsers import QueryParser, build_result_id
from services.title_resolver import TitleResolver

MAX_RESULTS = 50
CODEFORCES_PLACEHOLDER_TITLE = "Problem"

_CF_INDEX_PATTERN = re.compile(r"^([A-Z])([0-9]*)$")


def compare_codeforces_indexes(a: str, b: str) -> int:
    """Order by letter, then numeric suffix (missing suffix counts as 0)."""
    match_a = _CF_INDEX_PATTERN.match(a.upper())
    match_b = _CF_INDEX_PATTERN.match(b.upper())
    if not match_a or not match_b:
        return (a > b) - (a < b)

    if match_a.group(1) != match_b.group(1):
        return (match_a.group(1) > match_b.group(1)) - (match_a.group(1) < match_b.group(1))

    num_a = int(match_a.group(2) or 0)
    num_b = int(match_b.group(2) or 0)
    return num_a - num_b


def order_indexes(platform: Platform, contest_map: ContestMap) -> list[str]:
    if platform is Platform.CF:
        return sorted(contest_map, key=cmp_to_key(compare_codeforces_indexes))
    return sorted(contest_map)


def compose_display_title(descriptor: NormalizedQuery, title: str | None) -> str:
    """
    Link text for a problem.

    Codeforces always gets a title, falling back to a placeholder; AtCoder
    shows the bare token when the title is unknown.
    """
    if descriptor.platform is Platform.CF:
        return f"{descriptor.normalized.upper()} - {title or CODEFORCES_PLACEHOLDER_TITLE}"
    if title:
        return f"{descriptor.normalized} - {title}"
    return descriptor.normalized


def make_suggestion(descriptor: NormalizedQuery, title: str | None) -> Suggestion:
    return Suggestion(
        id=build_result_id(descriptor.platform, descriptor.normalized),
        display_title=compose_display_title(descriptor, title),
        url=descriptor.url,
        platform=descriptor.platform,
    )


class ResultBuilder:
    """Assembles the ordered answer set for a parsed query."""

    def __init__(self, resolver: TitleResolver, max_results: int = MAX_RESULTS):
        self.resolver = resolver
        self.max_results = max_results

    async def build_problem_suggestion(self, descriptor: NormalizedQuery) -> Suggestion:
        title = await self.resolver.resolve_title(descriptor)
        return make_suggestion(descriptor, title)

    async def build_contest_listing(self, listing: ContestListingQuery) -> list[Suggestion]:
        """One suggestion per problem in the contest, ordered and capped."""
        contest_map = await self.resolver.resolve_contest_map(listing.platform, listing.contest_id)
        if not contest_map:
            logger.debug(f"No problems known for {listing}")
            return []

        indexes = order_indexes(listing.platform, contest_map)[: self.max_results]
        suggestions = []
        for index in indexes:
            if listing.platform is Platform.CF:
                descriptor = QueryParser.codeforces_problem(listing.contest_id, index)
            else:
                descriptor = QueryParser.atcoder_problem(listing.contest_id, index)
            suggestions.append(make_suggestion(descriptor, contest_map[index]))
        return suggestions

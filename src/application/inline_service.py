"""Async service answering inline queries end to end."""

from typing import Optional

from loguru import logger

from domain.models import ContestListingQuery, NormalizedQuery, Suggestion
from domain.parsers import QueryParser
from services.result_builder import ResultBuilder


class InlineQueryService:
    """Parses raw inline text and builds the suggestion list."""

    def __init__(self, result_builder: ResultBuilder, parser: type[QueryParser] = QueryParser):
        self.result_builder = result_builder
        self.parser = parser

    async def answer(self, raw_query: str) -> list[Suggestion]:
        """
        Answer a raw inline query.

        Returns:
            Empty list when the text matches no rule, one suggestion for a
            single problem, up to the listing cap for a contest.
        """
        parsed = self.parser.parse(raw_query)
        if parsed is None:
            return []

        if isinstance(parsed, ContestListingQuery):
            suggestions = await self.result_builder.build_contest_listing(parsed)
        else:
            suggestions = [await self.result_builder.build_problem_suggestion(parsed)]

        logger.info(f"Answered {raw_query!r} with {len(suggestions)} suggestion(s)")
        return suggestions

    def resolve_chosen(self, result_id: str, query: str) -> Optional[NormalizedQuery]:
        return self.parser.resolve_chosen(result_id, query)

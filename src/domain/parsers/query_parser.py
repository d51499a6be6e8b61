"""Parser for inline problem and contest queries."""

import re
from typing import Callable, Optional, Union

from loguru import logger

from domain.models import ContestListingQuery, NormalizedQuery, Platform

ParsedQuery = Union[NormalizedQuery, ContestListingQuery]

ATCODER_PREFIXES = "abc|arc|agc|ahc|apc"


def normalize_atcoder_contest(prefix: str, number: str) -> str:
    """Lowercase the prefix and left-pad the contest number to three digits."""
    return f"{prefix.lower()}{number.zfill(3)}"


def build_result_id(platform: Platform, normalized: str) -> str:
    return f"{platform.value}:{normalized}"


class QueryParser:
    """Parser for the short tokens users type into the inline query box."""

    CF_CONTEST_PATTERN = re.compile(r"^([0-9]+)$")
    ATC_CONTEST_PATTERN = re.compile(
        rf"^({ATCODER_PREFIXES})([0-9]{{1,3}})$", re.IGNORECASE | re.ASCII
    )
    CF_PROBLEM_PATTERN = re.compile(r"^([0-9]+)([a-z][0-9]*)$", re.IGNORECASE | re.ASCII)
    ATC_CANONICAL_PATTERN = re.compile(
        rf"^({ATCODER_PREFIXES})([0-9]{{1,3}})_([a-z])$", re.IGNORECASE | re.ASCII
    )
    ATC_COMPACT_PATTERN = re.compile(
        rf"^({ATCODER_PREFIXES})([0-9]{{1,3}})([a-z])$", re.IGNORECASE | re.ASCII
    )
    RESULT_ID_PATTERN = re.compile(r"^(CF|ATC):(.+)$")

    @classmethod
    def parse(cls, raw: str) -> Optional[ParsedQuery]:
        """
        Parse raw inline text into a contest listing or a single problem.

        Rules are tried in a fixed order, first match wins. Returns None when
        nothing matches.
        """
        matchers: list[Callable[[str], Optional[ParsedQuery]]] = [
            cls.parse_codeforces_contest,
            cls.parse_atcoder_contest,
            cls.parse_problem,
        ]
        for matcher in matchers:
            parsed = matcher(raw)
            if parsed is not None:
                logger.debug(f"Parsed query {raw!r} to {parsed}")
                return parsed

        logger.debug(f"Query did not match any rule: {raw!r}")
        return None

    @classmethod
    def parse_codeforces_contest(cls, raw: str) -> Optional[ContestListingQuery]:
        match = cls.CF_CONTEST_PATTERN.match(raw.strip())
        if not match:
            return None
        return ContestListingQuery(platform=Platform.CF, contest_id=match.group(1))

    @classmethod
    def parse_atcoder_contest(cls, raw: str) -> Optional[ContestListingQuery]:
        match = cls.ATC_CONTEST_PATTERN.match(raw.strip())
        if not match:
            return None
        prefix, number = match.groups()
        return ContestListingQuery(
            platform=Platform.ATC,
            contest_id=normalize_atcoder_contest(prefix, number),
        )

    @classmethod
    def parse_problem(cls, raw: str) -> Optional[NormalizedQuery]:
        """Parse a single-problem token (CF, AtCoder canonical, AtCoder compact)."""
        query = raw.strip()

        match = cls.CF_PROBLEM_PATTERN.match(query)
        if match:
            contest_id, problem_index = match.groups()
            return cls.codeforces_problem(contest_id, problem_index.upper())

        match = cls.ATC_CANONICAL_PATTERN.match(query) or cls.ATC_COMPACT_PATTERN.match(query)
        if match:
            prefix, number, letter = match.groups()
            return cls.atcoder_problem(normalize_atcoder_contest(prefix, number), letter.lower())

        return None

    @classmethod
    def decode_result_id(cls, result_id: str) -> Optional[NormalizedQuery]:
        """Recover the descriptor from a "{PLATFORM}:{normalized}" result id."""
        match = cls.RESULT_ID_PATTERN.match(result_id)
        if not match:
            return None
        return cls.parse_problem(match.group(2))

    @classmethod
    def resolve_chosen(cls, result_id: str, query: str) -> Optional[NormalizedQuery]:
        """
        Re-derive the descriptor for a chosen inline result.

        The original query text wins; the result id is the fallback when the
        text was a contest listing or no longer parses.
        """
        return cls.parse_problem(query) or cls.decode_result_id(result_id)

    @classmethod
    def codeforces_problem(cls, contest_id: str, problem_index: str) -> NormalizedQuery:
        """Build the CF descriptor; index is expected uppercased already."""
        return NormalizedQuery(
            platform=Platform.CF,
            normalized=f"{contest_id}{problem_index}",
            url=cls.build_codeforces_url(contest_id, problem_index),
            contest_id=contest_id,
            problem_index=problem_index,
        )

    @classmethod
    def atcoder_problem(cls, contest_id: str, letter: str) -> NormalizedQuery:
        """Build the AtCoder descriptor from a normalized contest id and lowercase letter."""
        normalized = f"{contest_id}_{letter}"
        return NormalizedQuery(
            platform=Platform.ATC,
            normalized=normalized,
            url=cls.build_atcoder_url(contest_id, normalized),
            contest_id=contest_id,
            problem_index=letter,
        )

    @classmethod
    def build_codeforces_url(cls, contest_id: str, problem_index: str) -> str:
        return f"https://codeforces.com/contest/{contest_id}/problem/{problem_index}"

    @classmethod
    def build_atcoder_url(cls, contest_id: str, task_id: str) -> str:
        return f"https://atcoder.jp/contests/{contest_id}/tasks/{task_id}"


def parse_query(raw: str) -> Optional[ParsedQuery]:
    """Convenience wrapper around QueryParser.parse."""
    return QueryParser.parse(raw)

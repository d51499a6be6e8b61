"""Pure parsers for inline query text."""

from .query_parser import (
    ParsedQuery,
    QueryParser,
    build_result_id,
    normalize_atcoder_contest,
    parse_query,
)

__all__ = [
    "ParsedQuery",
    "QueryParser",
    "build_result_id",
    "normalize_atcoder_contest",
    "parse_query",
]

"""Offline bulk preload of contest maps from full upstream dumps."""

import json
import re
from collections.abc import Iterable
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Optional

from loguru import logger

from domain.contest_map import (
    atcoder_problem_entry,
    codeforces_problem_entry,
    serialize_contest_map,
)
from domain.exceptions import PreloadSourceError
from domain.models import ContestMap, Platform
from infrastructure.interfaces import HTTPClientProtocol
from services.contest_cache import contest_cache_key


@dataclass(frozen=True)
class BulkEntry:
    key: str
    value: str


@dataclass
class BulkEntries:
    entries: list[BulkEntry] = field(default_factory=list)
    contest_count: int = 0


def _group_entries(
    platform: Platform, grouped: dict[str, ContestMap], sort_key: Any = None
) -> BulkEntries:
    contests = sorted(grouped, key=sort_key)
    entries = [
        BulkEntry(
            key=contest_cache_key(platform, contest_id),
            value=serialize_contest_map(grouped[contest_id]),
        )
        for contest_id in contests
    ]
    return BulkEntries(entries=entries, contest_count=len(contests))


def codeforces_problem_rows(source: Any) -> list[Any]:
    """Accept a bare problem array or a problemset.problems API response."""
    if isinstance(source, list):
        return source

    if (
        isinstance(source, dict)
        and source.get("status") == "OK"
        and isinstance(source.get("result"), dict)
        and isinstance(source["result"].get("problems"), list)
    ):
        return source["result"]["problems"]

    raise PreloadSourceError(
        "Unsupported Codeforces source format. Expected array or API response with result.problems."
    )


def codeforces_bulk_entries(source: Any) -> BulkEntries:
    """Group Codeforces problem rows by contest into cache entries."""
    grouped: dict[str, ContestMap] = {}
    for row in codeforces_problem_rows(source):
        if not isinstance(row, dict):
            continue
        contest_id = row.get("contestId")
        # bool is an int subclass
        if not isinstance(contest_id, int) or isinstance(contest_id, bool):
            continue
        entry = codeforces_problem_entry(row)
        if entry is None:
            continue
        index, name = entry
        grouped.setdefault(str(contest_id), {}).setdefault(index, name)

    return _group_entries(Platform.CF, grouped, sort_key=int)


def atcoder_bulk_entries(source: Any) -> BulkEntries:
    """Group kenkoooo problem rows by contest into cache entries."""
    if not isinstance(source, list):
        raise PreloadSourceError("Input JSON must be an array.")

    grouped: dict[str, ContestMap] = {}
    for row in source:
        if not isinstance(row, dict):
            continue
        contest_id = row.get("contest_id")
        if not isinstance(contest_id, str) or not contest_id:
            continue
        entry = atcoder_problem_entry(row)
        if entry is None:
            continue
        index, title = entry
        grouped.setdefault(contest_id, {}).setdefault(index, title)

    return _group_entries(Platform.ATC, grouped)


def select_new_entries(
    entries: Iterable[BulkEntry], existing_keys: set[str], limit: Optional[int] = None
) -> list[BulkEntry]:
    """Drop entries whose key already exists, then cap to limit."""
    fresh = [entry for entry in entries if entry.key not in existing_keys]
    if limit is not None:
        fresh = fresh[:limit]
    return fresh


async def load_source(source: str, http_client: HTTPClientProtocol) -> Any:
    """Load a JSON dump from an http(s) URL or a local file path."""
    if re.match(r"^https?://", source, re.IGNORECASE):
        logger.info(f"Downloading source: {source}")
        return await http_client.get_json(source)

    path = Path(source).resolve()
    logger.info(f"Reading source file: {path}")
    return json.loads(path.read_text(encoding="utf-8"))


def write_bulk_file(entries: list[BulkEntry], output: Path) -> Path:
    """Write entries as a JSON array of {key, value} objects."""
    output = output.resolve()
    output.write_text(
        json.dumps([asdict(entry) for entry in entries], ensure_ascii=False), encoding="utf-8"
    )
    return output

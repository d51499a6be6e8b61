"""Filter and format rules for contest maps.

Both the lazy resolver and the bulk preload go through these functions, so an
entry built from the same upstream rows is byte-identical whichever path wrote
it.
"""

import json
import re
from collections.abc import Iterable
from typing import Any, Optional

from domain.models import ContestMap

ATCODER_INDEX_PATTERN = re.compile(r"^[a-z]$")


def codeforces_problem_entry(row: Any) -> Optional[tuple[str, str]]:
    """Return (INDEX, name) for a Codeforces problem row, or None if unusable."""
    if not isinstance(row, dict):
        return None

    index = row.get("index")
    name = row.get("name")
    if not isinstance(index, str) or not isinstance(name, str):
        return None

    index = index.upper()
    name = name.strip()
    if not index or not index[0].isalpha() or not name:
        return None
    return index, name


def atcoder_problem_entry(row: Any) -> Optional[tuple[str, str]]:
    """Return (letter, title) for a kenkoooo problem row, or None if unusable."""
    if not isinstance(row, dict):
        return None

    index = row.get("problem_index")
    if not isinstance(index, str):
        return None
    index = index.lower()
    if not ATCODER_INDEX_PATTERN.match(index):
        return None

    name = row.get("name")
    title = row.get("title")
    if isinstance(name, str) and name.strip():
        text = name.strip()
    elif isinstance(title, str):
        text = title.strip()
    else:
        text = ""

    if not text:
        return None
    return index, text


def _collect(entries: Iterable[Optional[tuple[str, str]]]) -> ContestMap:
    contest_map: ContestMap = {}
    for entry in entries:
        if entry is None:
            continue
        index, title = entry
        # first occurrence wins
        contest_map.setdefault(index, title)
    return contest_map


def codeforces_contest_map(rows: Iterable[Any]) -> ContestMap:
    """Build a contest map from the problems of one Codeforces contest."""
    return _collect(codeforces_problem_entry(row) for row in rows)


def atcoder_contest_map(rows: Iterable[Any], contest_id: str) -> ContestMap:
    """Build a contest map for one AtCoder contest out of the full problem list."""
    return _collect(
        atcoder_problem_entry(row)
        for row in rows
        if isinstance(row, dict) and row.get("contest_id") == contest_id
    )


def serialize_contest_map(contest_map: ContestMap) -> str:
    """Compact JSON, insertion order kept, non-ASCII titles left as-is."""
    return json.dumps(contest_map, ensure_ascii=False, separators=(",", ":"))


def deserialize_contest_map(raw: str) -> Optional[ContestMap]:
    """Parse a stored value; None when it is not a JSON object of strings."""
    try:
        data = json.loads(raw)
    except (TypeError, ValueError):
        return None

    if not isinstance(data, dict):
        return None
    if not all(isinstance(k, str) and isinstance(v, str) for k, v in data.items()):
        return None
    return data

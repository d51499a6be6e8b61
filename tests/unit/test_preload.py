"""Unit tests for bulk preload entry building."""

import json
from unittest.mock import AsyncMock

import pytest

from domain.contest_map import atcoder_contest_map, codeforces_contest_map, serialize_contest_map
from domain.exceptions import PreloadSourceError
from services.preload import (
    BulkEntry,
    atcoder_bulk_entries,
    codeforces_bulk_entries,
    load_source,
    select_new_entries,
    write_bulk_file,
)

CF_ROWS = [
    {"contestId": 1000, "index": "b", "name": " Light It Up "},
    {"contestId": 150, "index": "D", "name": "Mission Impassable"},
    {"contestId": 150, "index": "A", "name": "Win or Freeze"},
    {"contestId": 150, "index": "A", "name": "Duplicate"},
    {"contestId": "150", "index": "C", "name": "String contest id"},
    {"contestId": 20, "index": "A", "name": "   "},
]


def test_codeforces_bulk_groups_and_sorts_numerically():
    bulk = codeforces_bulk_entries(CF_ROWS)

    assert bulk.contest_count == 2
    assert [entry.key for entry in bulk.entries] == ["cf:150", "cf:1000"]
    assert json.loads(bulk.entries[0].value) == {"D": "Mission Impassable", "A": "Win or Freeze"}
    assert bulk.entries[1].value == '{"B":"Light It Up"}'


def test_codeforces_bulk_accepts_api_wrapper():
    wrapper = {"status": "OK", "result": {"problems": CF_ROWS, "problemStatistics": []}}

    assert codeforces_bulk_entries(wrapper) == codeforces_bulk_entries(CF_ROWS)


@pytest.mark.parametrize("source", [{"status": "FAILED"}, {"status": "OK", "result": {}}, "text", None])
def test_codeforces_bulk_rejects_unknown_shapes(source):
    with pytest.raises(PreloadSourceError):
        codeforces_bulk_entries(source)


def test_atcoder_bulk_groups_and_sorts():
    rows = [
        {"contest_id": "arc100", "problem_index": "C", "name": "Linear Approximation"},
        {"contest_id": "abc150", "problem_index": "D", "name": "Semi Common Multiple"},
        {"contest_id": "abc150", "problem_index": "Ex", "name": "Dropped"},
        {"contest_id": "", "problem_index": "A", "name": "No contest"},
    ]

    bulk = atcoder_bulk_entries(rows)

    assert [entry.key for entry in bulk.entries] == ["atc:abc150", "atc:arc100"]
    assert bulk.entries[0].value == '{"d":"Semi Common Multiple"}'


def test_atcoder_bulk_requires_array():
    with pytest.raises(PreloadSourceError):
        atcoder_bulk_entries({"problems": []})


def test_bulk_and_lazy_entries_are_byte_identical():
    atc_rows = [
        {"contest_id": "abc150", "problem_index": "B", "name": "Count ABC"},
        {"contest_id": "abc150", "problem_index": "a", "title": "500 Yen Coins"},
    ]
    cf_rows = [row for row in CF_ROWS if row["contestId"] == 150]

    assert atcoder_bulk_entries(atc_rows).entries[0].value == serialize_contest_map(
        atcoder_contest_map(atc_rows, "abc150")
    )
    assert codeforces_bulk_entries(cf_rows).entries[0].value == serialize_contest_map(
        codeforces_contest_map(cf_rows)
    )


def test_select_new_entries_skips_existing_and_caps():
    entries = [BulkEntry("cf:1", "{}"), BulkEntry("cf:2", "{}"), BulkEntry("cf:3", "{}")]

    assert select_new_entries(entries, {"cf:1"}) == entries[1:]
    assert select_new_entries(entries, {"cf:1"}, limit=1) == [entries[1]]
    assert select_new_entries(entries, set(), limit=0) == []


@pytest.mark.asyncio
async def test_load_source_from_file(tmp_path):
    path = tmp_path / "problems.json"
    path.write_text('[{"contest_id": "abc150"}]', encoding="utf-8")
    http_client = AsyncMock()

    data = await load_source(str(path), http_client)

    assert data == [{"contest_id": "abc150"}]
    http_client.get_json.assert_not_awaited()


@pytest.mark.asyncio
async def test_load_source_from_url():
    http_client = AsyncMock()
    http_client.get_json.return_value = []

    await load_source("HTTPS://kenkoooo.com/atcoder/resources/problems.json", http_client)

    http_client.get_json.assert_awaited_once()


def test_write_bulk_file(tmp_path):
    output = write_bulk_file([BulkEntry("atc:abc150", '{"a":"A"}')], tmp_path / "bulk.json")

    assert json.loads(output.read_text(encoding="utf-8")) == [
        {"key": "atc:abc150", "value": '{"a":"A"}'}
    ]

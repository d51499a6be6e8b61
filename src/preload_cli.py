"""Command-line tools that bulk-fill the contest cache from upstream dumps."""

import argparse
import asyncio
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

from loguru import logger

from config import Settings, setup_logging
from domain.exceptions import ProbLinkError
from domain.models import Platform
from infrastructure import AsyncHTTPClient, AsyncRedisCache
from services.preload import (
    BulkEntries,
    atcoder_bulk_entries,
    codeforces_bulk_entries,
    load_source,
    select_new_entries,
    write_bulk_file,
)

CODEFORCES_SOURCE = "https://codeforces.com/api/problemset.problems"
ATCODER_SOURCE = "https://kenkoooo.com/atcoder/resources/problems.json"


def non_negative_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError:
        parsed = -1
    if parsed < 0:
        raise argparse.ArgumentTypeError(f"Invalid --limit value: {value}")
    return parsed


def build_parser(platform_name: str, default_source: str, default_output: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=f"Fill {platform_name} contest cache keys.")
    parser.add_argument("--source", default=default_source, help="Input JSON source (URL or file)")
    parser.add_argument("--output", default=default_output, help="Bulk JSON output file")
    parser.add_argument("--redis-url", default=None, help="Redis URL (default: REDIS_URL)")
    parser.add_argument(
        "--limit", type=non_negative_int, default=None, help="Max number of new contest keys to upload"
    )
    parser.add_argument(
        "--skip-list", action="store_true", help="Upload without checking for existing keys"
    )
    parser.add_argument(
        "--dry-run", action="store_true", help="Only generate output file; do not upload"
    )
    return parser


async def run_preload(
    args: argparse.Namespace,
    settings: Settings,
    platform: Platform,
    build_entries: Callable[[Any], BulkEntries],
) -> None:
    http_client = AsyncHTTPClient(user_agent="ProbLinkCacheFiller/1.0", timeout=settings.http_timeout)
    source = await load_source(args.source, http_client)
    bulk = build_entries(source)

    store = AsyncRedisCache(args.redis_url or settings.redis_url)
    needs_store = not args.dry_run or not args.skip_list
    if needs_store:
        await store.connect()

    try:
        existing: set[str] = set()
        if not args.skip_list:
            existing = await store.keys(f"{platform.cache_prefix}:")
        entries = select_new_entries(bulk.entries, existing, args.limit)
        output = write_bulk_file(entries, Path(args.output))

        logger.info(f"Found {bulk.contest_count} contests in source.")
        logger.info(f"Existing {platform.cache_prefix}:* keys: {len(existing)}")
        logger.info(f"Prepared {len(entries)} new cache entries.")
        logger.info(f"Bulk file: {output}")

        if args.dry_run:
            logger.info("Dry run: upload skipped.")
            return
        if not entries:
            logger.info("No new keys to upload.")
            return

        await store.put_many((entry.key, entry.value) for entry in entries)
        logger.info(f"{platform.name} cache upload complete.")
    finally:
        await store.close()


def _main(
    platform: Platform,
    platform_name: str,
    default_source: str,
    default_output: str,
    build_entries: Callable[[Any], BulkEntries],
) -> None:
    args = build_parser(platform_name, default_source, default_output).parse_args()
    settings = Settings.from_env()
    setup_logging(settings.log_level)

    try:
        asyncio.run(run_preload(args, settings, platform, build_entries))
    except (ProbLinkError, OSError, ValueError) as e:
        logger.error(str(e))
        sys.exit(1)


def fill_codeforces_cache() -> None:
    _main(Platform.CF, "Codeforces", CODEFORCES_SOURCE, "/tmp/cf-bulk.json", codeforces_bulk_entries)


def fill_atcoder_cache() -> None:
    _main(Platform.ATC, "AtCoder", ATCODER_SOURCE, "/tmp/atc-bulk.json", atcoder_bulk_entries)

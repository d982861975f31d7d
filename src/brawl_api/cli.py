"""Command line interface for the Brawl Stars API client."""
from __future__ import annotations

import argparse
import asyncio
import dataclasses
import enum
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional, Sequence, Tuple, Type

from .config import ClientConfig, CredentialLoaderError, load_credentials
from .errors import FetchError
from .fetch import PropFetchable
from .http.client import Client
from .logging_config import setup_logging
from .models import (
    BattleLog,
    Brawler,
    BrawlerLeaderboard,
    BrawlerList,
    Club,
    ClubLeaderboard,
    ClubMembers,
    Player,
    PlayerLeaderboard,
)


logger = logging.getLogger(__name__)


def _fetch_target(args: argparse.Namespace) -> Tuple[Type[PropFetchable], tuple]:
    command = args.command
    if command == "player":
        return Player, (args.tag,)
    if command == "battlelog":
        return BattleLog, (args.tag,)
    if command == "club":
        return Club, (args.tag,)
    if command == "members":
        return ClubMembers, (args.tag,)
    if command == "brawlers":
        return BrawlerList, ()
    if command == "brawler":
        return Brawler, (args.brawler_id,)
    if command == "rankings":
        if args.board == "players":
            return PlayerLeaderboard, (args.country, args.limit)
        if args.board == "clubs":
            return ClubLeaderboard, (args.country, args.limit)
        return BrawlerLeaderboard, (args.country, args.brawler_id, args.limit)
    raise ValueError(f"Unknown command: {command}")


def _to_jsonable(value: Any) -> Any:
    if isinstance(value, enum.Enum):
        return value.value
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def render(model: Any) -> str:
    return json.dumps(dataclasses.asdict(model), default=_to_jsonable, indent=2, ensure_ascii=False)


def _run_sync(client: Client, model: Type[PropFetchable], prop: tuple) -> Any:
    with client:
        return model.fetch(client, *prop)


async def _run_async(client: Client, model: Type[PropFetchable], prop: tuple) -> Any:
    async with client:
        return await model.a_fetch(client, *prop)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="brawl-api", description="Fetch data from the Brawl Stars API")
    parser.add_argument(
        "--credentials",
        default=Path("credentials.json"),
        type=Path,
        help="Path to credentials JSON file (needs a 'key' entry)",
    )
    parser.add_argument("--async", dest="use_async", action="store_true", help="Use the async transport")
    parser.add_argument(
        "--no-auto-hashtag",
        dest="auto_hashtag",
        action="store_false",
        help="Do not insert a missing leading '#' in tags",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log requests")

    sub = parser.add_subparsers(dest="command", required=True)
    for name, help_text in (
        ("player", "Player profile"),
        ("battlelog", "Recent battles of a player"),
        ("club", "Club with its members"),
        ("members", "Member list of a club"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("tag", help="Player or club tag, e.g. '#2PP'")

    sub.add_parser("brawlers", help="All brawlers")
    brawler = sub.add_parser("brawler", help="One brawler")
    brawler.add_argument("brawler_id", type=int)

    rankings = sub.add_parser("rankings", help="Leaderboards")
    boards = rankings.add_subparsers(dest="board", required=True)
    for name in ("players", "clubs", "brawler"):
        board = boards.add_parser(name)
        if name == "brawler":
            board.add_argument("brawler_id", type=int)
        board.add_argument("--country", default="global", help="Country code or 'global'")
        board.add_argument("--limit", type=int, default=200)

    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        credentials = load_credentials(args.credentials)
    except CredentialLoaderError as exc:
        print(exc, file=sys.stderr)
        return 2

    config = ClientConfig(auto_hashtag=args.auto_hashtag, enable_async=args.use_async)
    client = Client(credentials.key, config=config)
    model, prop = _fetch_target(args)

    try:
        if args.use_async:
            result = asyncio.run(_run_async(client, model, prop))
        else:
            result = _run_sync(client, model, prop)
    except FetchError as exc:
        logger.debug("Fetching %s failed", model.__name__, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(render(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())

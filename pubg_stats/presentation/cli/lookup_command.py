from __future__ import annotations

import argparse
import json
from datetime import datetime
from typing import Any, Callable, List, Optional

import httpx

from pubg_stats.core.logging import StructuredLogger, get_logger
from pubg_stats.domain import ApiError, ConfigurationError, InvalidArgumentError, Match, Player, PlayerSelector
from pubg_stats.infrastructure import PubgClient

EXIT_OK = 0
EXIT_API_ERROR = 1
EXIT_USAGE_ERROR = 2


def _parse_created_at(value: str) -> datetime:
    text = value[:-1] + "+00:00" if value.endswith("Z") else value
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an ISO-8601 timestamp: {value!r}")


def _lookup_options() -> argparse.ArgumentParser:
    # SUPPRESS keeps a subcommand from resetting values given before it
    options = argparse.ArgumentParser(add_help=False)
    options.add_argument("--json", dest="json_out", action="store_true", default=argparse.SUPPRESS, help="Print raw entity JSON")
    options.add_argument("--shard", default=argparse.SUPPRESS, help="Shard to query (defaults to PUBG_DEFAULT_SHARD)")
    return options


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pubg-stats", description="Query the PUBG developer API.")
    parser.add_argument("--json", dest="json_out", action="store_true", help="Print raw entity JSON")
    parser.add_argument("--shard", default=None, help="Shard to query (defaults to PUBG_DEFAULT_SHARD)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)
    options = [_lookup_options()]

    sub.add_parser("status", parents=options, help="Show API status")

    player = sub.add_parser("player", parents=options, help="Look up players by id or name")
    group = player.add_mutually_exclusive_group(required=True)
    group.add_argument("--id", dest="ids", action="append", help="Account id (repeatable)")
    group.add_argument("--name", dest="names", action="append", help="Player name (repeatable)")

    match = sub.add_parser("match", parents=options, help="Show a match")
    match.add_argument("match_id")

    samples = sub.add_parser("samples", parents=options, help="List sample match ids")
    samples.add_argument("--created-at", type=_parse_created_at, default=None, help="ISO-8601 start time")

    telemetry = sub.add_parser("telemetry", parents=options, help="Download telemetry for a match or URL")
    telemetry.add_argument("target", help="Telemetry URL, or a match id to resolve it from")
    telemetry.add_argument("--output", "-o", default=None, help="Write telemetry to this file")
    return parser


class LookupCommand:
    """Runs one parsed CLI command against the API and prints the result."""

    def __init__(self, client: PubgClient, *, json_out: bool = False, echo: Callable[[str], None] = print) -> None:
        self.client = client
        self.json_out = json_out
        self.echo = echo
        self.logger: StructuredLogger = get_logger(__name__, service="cli")

    async def run(self, args: argparse.Namespace) -> int:
        handler = getattr(self, f"_cmd_{args.command}")
        try:
            async with self.client:
                await handler(args)
            return EXIT_OK
        except (InvalidArgumentError, ConfigurationError) as e:
            self.logger.error(lambda: f"invalid arguments: {e}")
            return EXIT_USAGE_ERROR
        except ApiError as e:
            self.logger.error(lambda: f"API rejected the request: {e.errors}", extra={"status": e.status_code})
            return EXIT_API_ERROR
        except httpx.HTTPError as e:
            self.logger.error(lambda: f"request failed: {e}")
            return EXIT_API_ERROR
        except ValueError as e:
            self.logger.error(lambda: f"unreadable API response: {e}")
            return EXIT_API_ERROR

    async def _cmd_status(self, args: argparse.Namespace) -> None:
        status = await self.client.get_status()
        if self.json_out:
            self._dump(status.to_dict())
            return
        self.echo(f"{status.id}: version {status.version or '?'} released {status.released_at or '?'}")

    async def _cmd_player(self, args: argparse.Namespace) -> None:
        if args.ids:
            selector = PlayerSelector.by_id(args.ids[0]) if len(args.ids) == 1 else PlayerSelector.by_ids(args.ids)
        else:
            selector = PlayerSelector.by_names(args.names)
        result = await self.client.get_player(selector, args.shard)
        players: List[Player] = result if isinstance(result, list) else [result]
        if self.json_out:
            self._dump([p.to_dict() for p in players])
            return
        for p in players:
            self.echo(f"{p.name:<20} {p.id}  shard={p.shard_id}  matches={len(p.match_ids)}")

    async def _cmd_match(self, args: argparse.Namespace) -> None:
        match = await self.client.get_match(args.match_id, args.shard)
        if self.json_out:
            self._dump(match.to_dict())
            return
        self._print_match(match)

    async def _cmd_samples(self, args: argparse.Namespace) -> None:
        matches = await self.client.get_samples(args.created_at, args.shard)
        if self.json_out:
            self._dump([m.id for m in matches])
            return
        self.echo(f"{len(matches)} sample matches")
        for m in matches:
            self.echo(f"  {m.id}")

    async def _cmd_telemetry(self, args: argparse.Namespace) -> None:
        url: Optional[str] = args.target
        if not url.startswith(("http://", "https://")):
            match = await self.client.get_match(args.target, args.shard)
            url = match.telemetry_url
            if url is None:
                raise InvalidArgumentError(f"match {match.id} lists no telemetry asset")
        telemetry = await self.client.get_telemetry(url)
        if args.output:
            with open(args.output, "w", encoding="utf-8") as f:
                json.dump(telemetry, f)
            count = len(telemetry) if isinstance(telemetry, list) else 1
            self.echo(f"wrote {count} telemetry events to {args.output}")
        else:
            self._dump(telemetry)

    def _print_match(self, match: Match) -> None:
        self.echo(f"Match {match.id}")
        self.echo(f"  {match.game_mode} on {match.map_name}, {match.duration_minutes:.1f} min, shard {match.shard_id}")
        winner = match.winning_roster
        if winner:
            names = ", ".join(p.name for p in winner.participants)
            self.echo(f"  Winner: team {winner.team_id} ({names}) with {winner.total_kills} kills")
        self.echo(f"  {len(match.rosters)} rosters, {len(match.participants)} participants")
        if match.telemetry_url:
            self.echo(f"  Telemetry: {match.telemetry_url}")

    def _dump(self, payload: Any) -> None:
        self.echo(json.dumps(payload, indent=2, default=str))

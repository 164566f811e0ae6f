"""Main CLI entry-point."""
from __future__ import annotations

import asyncio
import sys
from typing import Optional

from pubg_stats.config import settings
from pubg_stats.core.logging import bootstrap_logging, get_logger, shutdown_logging
from pubg_stats.domain import ConfigurationError
from pubg_stats.infrastructure import PubgClient
from pubg_stats.presentation.cli import LookupCommand, build_parser
from pubg_stats.presentation.cli.lookup_command import EXIT_USAGE_ERROR


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(sys.argv[1:] if argv is None else argv)
    bootstrap_logging(
        level="DEBUG" if args.verbose else settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR,
    )
    try:
        try:
            client = PubgClient.from_env()
        except ConfigurationError as e:
            get_logger(__name__, service="cli").error(lambda: str(e))
            return EXIT_USAGE_ERROR
        return asyncio.run(LookupCommand(client, json_out=args.json_out).run(args))
    finally:
        shutdown_logging()


if __name__ == "__main__":
    raise SystemExit(main())

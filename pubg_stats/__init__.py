"""
PUBG Stats
==========

Async client for the PUBG developer API.

Features:
- Shard-scoped URL construction
- Player lookups by id or name, single or batched
- Matches with rosters, participants and telemetry assets resolved
- API errors surfaced as structured exceptions
"""

__version__ = "1.0.0"
__homepage__ = "https://github.com/pubg-stats/pubg-stats"

from .domain import (
    Match, Player, Status, Roster, Participant, Asset,
    Shard, PlayerSelector,
    PubgError, ConfigurationError, InvalidArgumentError, ApiError,
)

from .infrastructure import PubgClient, HttpGateway, ResourceMapper, build_url

__all__ = [
    # Version info
    '__version__',
    '__homepage__',

    # Domain
    'Match',
    'Player',
    'Status',
    'Roster',
    'Participant',
    'Asset',
    'Shard',
    'PlayerSelector',

    # Errors
    'PubgError',
    'ConfigurationError',
    'InvalidArgumentError',
    'ApiError',

    # Infrastructure
    'PubgClient',
    'HttpGateway',
    'ResourceMapper',
    'build_url',
]

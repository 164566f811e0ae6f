"""Domain layer - Entities, enums, selectors and errors."""
from .entities import Match, Player, Status, Roster, Participant, Asset
from .enums import Shard
from .errors import PubgError, ConfigurationError, InvalidArgumentError, ApiError
from .selectors import PlayerSelector, SelectorKind

__all__ = [
    # Entities
    'Match',
    'Player',
    'Status',
    'Roster',
    'Participant',
    'Asset',
    # Enums
    'Shard',
    # Selectors
    'PlayerSelector',
    'SelectorKind',
    # Errors
    'PubgError',
    'ConfigurationError',
    'InvalidArgumentError',
    'ApiError',
]

"""Domain entities."""
from .participant import Participant
from .roster import Roster
from .asset import Asset
from .match import Match
from .player import Player
from .status import Status

__all__ = [
    'Participant',
    'Roster',
    'Asset',
    'Match',
    'Player',
    'Status',
]

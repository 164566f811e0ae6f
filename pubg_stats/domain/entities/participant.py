"""Participant entity representing a player in a match."""
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class Participant:
    """Represents one player's performance in a match."""

    # Identity
    id: str
    player_id: str = ""
    name: str = ""
    shard_id: Optional[str] = None

    # Combat
    kills: int = 0
    assists: int = 0
    dbnos: int = 0
    headshot_kills: int = 0
    damage_dealt: float = 0.0

    # Outcome
    win_place: int = 0
    time_survived: float = 0.0
    death_type: str = ""

    # Full stats object as sent by the API
    stats: dict[str, Any] = field(default_factory=dict, repr=False)

    @property
    def is_bot(self) -> bool:
        """AI players carry an "ai." prefixed account id."""
        return self.player_id.startswith("ai.")

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'player_id': self.player_id,
            'name': self.name,
            'shard_id': self.shard_id,
            'kills': self.kills,
            'assists': self.assists,
            'dbnos': self.dbnos,
            'headshot_kills': self.headshot_kills,
            'damage_dealt': self.damage_dealt,
            'win_place': self.win_place,
            'time_survived': self.time_survived,
            'death_type': self.death_type,
        }

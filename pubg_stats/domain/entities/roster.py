"""Roster entity representing a team within a match."""
from dataclasses import dataclass, field
from typing import Optional
from .participant import Participant


@dataclass
class Roster:
    """Represents a team (squad, duo or solo) in a match."""

    id: str
    team_id: int = 0
    rank: int = 0
    won: bool = False
    shard_id: Optional[str] = None

    participants: list[Participant] = field(default_factory=list)

    @property
    def total_kills(self) -> int:
        """Get the kills of all roster members combined."""
        return sum(p.kills for p in self.participants)

    @property
    def total_damage(self) -> float:
        """Get the damage dealt by all roster members combined."""
        return sum(p.damage_dealt for p in self.participants)

    def to_dict(self) -> dict:
        """Includes the derived ``total_kills``."""
        return {
            'id': self.id,
            'team_id': self.team_id,
            'rank': self.rank,
            'won': self.won,
            'shard_id': self.shard_id,
            'total_kills': self.total_kills,
            'participants': [p.to_dict() for p in self.participants],
        }

"""Match entity representing a single PUBG game."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any, Optional

from ..errors import PubgError
from ..timestamps import parse_timestamp
from .asset import Asset
from .participant import Participant
from .roster import Roster

if TYPE_CHECKING:
    from pubg_stats.infrastructure.api.pubg_client import PubgClient


@dataclass
class Match:
    """
    Represents a PUBG match.

    A match built from a sample listing or a player's match list is a stub:
    it only knows its id. ``await match.fetch()`` returns the full match.
    """

    # Match identity
    id: str
    client: PubgClient = field(repr=False, compare=False)

    # Match metadata
    created_at: str = ""
    duration: int = 0  # Seconds
    game_mode: str = ""
    map_name: str = ""
    is_custom_match: bool = False
    season_state: str = ""
    shard_id: Optional[str] = None
    title_id: str = ""

    # Resolved from the included side-table
    rosters: list[Roster] = field(default_factory=list)
    participants: list[Participant] = field(default_factory=list)
    assets: list[Asset] = field(default_factory=list)

    is_stub: bool = False

    @classmethod
    def stub(cls, match_id: str, client: PubgClient, shard_id: Optional[str] = None) -> "Match":
        return cls(id=match_id, client=client, shard_id=shard_id, is_stub=True)

    @property
    def created(self) -> Optional[datetime]:
        """Get creation time as datetime object."""
        return parse_timestamp(self.created_at)

    @property
    def duration_minutes(self) -> float:
        return self.duration / 60.0

    @property
    def telemetry_url(self) -> Optional[str]:
        """URL of the telemetry file, if the match lists one."""
        for asset in self.assets:
            if asset.url:
                return asset.url
        return None

    @property
    def winning_roster(self) -> Optional[Roster]:
        winners = [r for r in self.rosters if r.won]
        if winners:
            return winners[0]
        ranked = [r for r in self.rosters if r.rank]
        return min(ranked, key=lambda r: r.rank) if ranked else None

    def get_participant(self, player_id: str) -> Optional[Participant]:
        """Find a participant by account id or by in-game name."""
        return next(
            (p for p in self.participants if p.player_id == player_id or p.name == player_id),
            None,
        )

    async def fetch(self) -> "Match":
        """Fetch the full match from the API."""
        return await self.client.get_match(self.id, self.shard_id or self.client.default_shard)

    async def fetch_telemetry(self) -> Any:
        """Download this match's raw telemetry."""
        url = self.telemetry_url
        if url is None:
            raise PubgError(f"Match {self.id} has no telemetry asset")
        return await self.client.get_telemetry(url)

    def to_dict(self) -> dict:
        """JSON-ready view; participants appear only nested under their rosters."""
        return {
            'id': self.id,
            'created_at': self.created_at,
            'duration': self.duration,
            'game_mode': self.game_mode,
            'map_name': self.map_name,
            'is_custom_match': self.is_custom_match,
            'season_state': self.season_state,
            'shard_id': self.shard_id,
            'title_id': self.title_id,
            'telemetry_url': self.telemetry_url,
            'rosters': [r.to_dict() for r in self.rosters],
            'assets': [a.to_dict() for a in self.assets],
            'is_stub': self.is_stub,
        }

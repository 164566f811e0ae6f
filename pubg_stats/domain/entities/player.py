"""Player entity representing a PUBG account."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Optional

from ..timestamps import parse_timestamp
from .match import Match

if TYPE_CHECKING:
    from pubg_stats.infrastructure.api.pubg_client import PubgClient


@dataclass
class Player:
    """Represents a PUBG player account."""

    # Identity
    id: str
    client: PubgClient = field(repr=False, compare=False)
    name: str = ""

    # Account metadata
    shard_id: Optional[str] = None
    title_id: str = ""
    patch_version: str = ""
    created_at: str = ""
    updated_at: str = ""

    # Recent matches, newest first as listed by the API
    match_ids: list[str] = field(default_factory=list)

    @property
    def created(self) -> Optional[datetime]:
        return parse_timestamp(self.created_at)

    @property
    def matches(self) -> list[Match]:
        """Recent matches as stubs; ``await m.fetch()`` loads one."""
        return [Match.stub(mid, self.client, self.shard_id) for mid in self.match_ids]

    def to_dict(self) -> dict:
        """Plain-data copy; the client back-reference is not included."""
        return {
            'id': self.id,
            'name': self.name,
            'shard_id': self.shard_id,
            'title_id': self.title_id,
            'patch_version': self.patch_version,
            'created_at': self.created_at,
            'updated_at': self.updated_at,
            'match_ids': list(self.match_ids),
        }

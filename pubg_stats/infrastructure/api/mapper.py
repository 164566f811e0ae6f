"""Mapping of raw API resources onto domain entities."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional, Tuple

from pubg_stats.domain.entities import Asset, Match, Participant, Player, Roster, Status

if TYPE_CHECKING:
    from .pubg_client import PubgClient


def _related_ids(resource: dict, relation: str) -> List[str]:
    """Ids listed under ``relationships.<relation>.data``."""
    rel = (resource.get('relationships') or {}).get(relation) or {}
    data = rel.get('data') or []
    if isinstance(data, dict):
        data = [data]
    return [ref['id'] for ref in data if isinstance(ref, dict) and ref.get('id')]


class ResourceMapper:
    """Turns JSON:API resources into entities that point back at ``client``. No I/O."""

    def __init__(self, client: PubgClient):
        self.client = client

    def map_player(self, raw: dict) -> Player:
        attrs = raw.get('attributes') or {}
        return Player(
            id=raw.get('id', ''),
            client=self.client,
            name=attrs.get('name', ''),
            shard_id=attrs.get('shardId'),
            title_id=attrs.get('titleId', ''),
            patch_version=attrs.get('patchVersion', ''),
            created_at=attrs.get('createdAt', ''),
            updated_at=attrs.get('updatedAt', ''),
            match_ids=_related_ids(raw, 'matches'),
        )

    def map_players(self, raws: Iterable[dict]) -> List[Player]:
        return [self.map_player(raw) for raw in raws]

    def map_match(self, raw: dict, included: Optional[Iterable[dict]] = None) -> Match:
        """
        Build a full match. Rosters, participants and assets are looked up in
        ``included``; when it is missing the match keeps empty collections.
        """
        attrs = raw.get('attributes') or {}
        index = self._index_included(included)

        participants: Dict[str, Participant] = {
            rid: self._parse_participant(res)
            for (rtype, rid), res in index.items()
            if rtype == 'participant'
        }
        rosters = [
            self._parse_roster(index[('roster', rid)], participants)
            for rid in _related_ids(raw, 'rosters')
            if ('roster', rid) in index
        ]
        assets = [
            self._parse_asset(index[('asset', aid)])
            for aid in _related_ids(raw, 'assets')
            if ('asset', aid) in index
        ]

        return Match(
            id=raw.get('id', ''),
            client=self.client,
            created_at=attrs.get('createdAt', ''),
            duration=attrs.get('duration', 0),
            game_mode=attrs.get('gameMode', ''),
            map_name=attrs.get('mapName', ''),
            is_custom_match=bool(attrs.get('isCustomMatch', False)),
            season_state=attrs.get('seasonState', ''),
            shard_id=attrs.get('shardId'),
            title_id=attrs.get('titleId', ''),
            rosters=rosters,
            participants=list(participants.values()),
            assets=assets,
        )

    def map_sample_matches(self, raw: dict, shard: Optional[str] = None) -> List[Match]:
        """A samples resource lists match ids only; each becomes a stub."""
        return [Match.stub(mid, self.client, shard) for mid in _related_ids(raw, 'matches')]

    def map_status(self, raw: dict) -> Status:
        attrs = raw.get('attributes') or {}
        return Status(
            id=raw.get('id', ''),
            released_at=attrs.get('releasedAt', ''),
            version=attrs.get('version', ''),
        )

    @staticmethod
    def _index_included(included: Optional[Iterable[dict]]) -> Dict[Tuple[str, str], dict]:
        if not included:
            return {}
        return {
            (res.get('type', ''), res.get('id', '')): res
            for res in included
            if isinstance(res, dict)
        }

    @staticmethod
    def _parse_participant(res: dict) -> Participant:
        attrs = res.get('attributes') or {}
        stats = attrs.get('stats') or {}
        return Participant(
            id=res.get('id', ''),
            player_id=stats.get('playerId', ''),
            name=stats.get('name', ''),
            shard_id=attrs.get('shardId'),
            kills=stats.get('kills', 0),
            assists=stats.get('assists', 0),
            dbnos=stats.get('DBNOs', 0),
            headshot_kills=stats.get('headshotKills', 0),
            damage_dealt=stats.get('damageDealt', 0.0),
            win_place=stats.get('winPlace', 0),
            time_survived=stats.get('timeSurvived', 0.0),
            death_type=stats.get('deathType', ''),
            stats=stats,
        )

    @staticmethod
    def _parse_roster(res: dict, participants: Dict[str, Participant]) -> Roster:
        attrs = res.get('attributes') or {}
        stats = attrs.get('stats') or {}
        won = attrs.get('won', False)
        return Roster(
            id=res.get('id', ''),
            team_id=stats.get('teamId', 0),
            rank=stats.get('rank', 0),
            # The API sends "true"/"false" strings here
            won=won.lower() == 'true' if isinstance(won, str) else bool(won),
            shard_id=attrs.get('shardId'),
            participants=[
                participants[pid] for pid in _related_ids(res, 'participants') if pid in participants
            ],
        )

    @staticmethod
    def _parse_asset(res: dict) -> Asset:
        attrs = res.get('attributes') or {}
        return Asset(
            id=res.get('id', ''),
            url=attrs.get('URL', ''),
            name=attrs.get('name', ''),
            description=attrs.get('description', ''),
            created_at=attrs.get('createdAt', ''),
        )

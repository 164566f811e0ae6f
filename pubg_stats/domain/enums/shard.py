"""Shard enumeration for PUBG API servers."""
from enum import Enum
from typing import Optional


class Shard(str, Enum):
    """Known PUBG API shards.

    Provides:
    - platform: platform part of the shard (e.g., pc, xbox, steam)
    - region: region part for legacy platform-region shards (e.g., oc)

    The client accepts any string as a shard; these are the values the API
    documents.
    """

    # Platform shards
    STEAM = "steam"
    KAKAO = "kakao"
    PSN = "psn"
    XBOX = "xbox"
    CONSOLE = "console"
    STADIA = "stadia"
    TOURNAMENT = "tournament"

    # PC region shards
    PC_AS = "pc-as"
    PC_EU = "pc-eu"
    PC_JP = "pc-jp"
    PC_KAKAO = "pc-kakao"
    PC_KRJP = "pc-krjp"
    PC_NA = "pc-na"
    PC_OC = "pc-oc"
    PC_RU = "pc-ru"
    PC_SA = "pc-sa"
    PC_SEA = "pc-sea"
    PC_TOURNAMENT = "pc-tournament"

    # Xbox region shards
    XBOX_AS = "xbox-as"
    XBOX_EU = "xbox-eu"
    XBOX_NA = "xbox-na"
    XBOX_OC = "xbox-oc"
    XBOX_SA = "xbox-sa"

    def __str__(self) -> str:
        return self.value

    @property
    def platform(self) -> str:
        """Get the platform this shard belongs to."""
        return self.value.split("-", 1)[0]

    @property
    def region(self) -> Optional[str]:
        """Get the region of a platform-region shard, None for platform shards."""
        parts = self.value.split("-", 1)
        return parts[1] if len(parts) == 2 else None

    @classmethod
    def for_platform(cls, platform: str) -> list['Shard']:
        """Get all shards of a platform."""
        return [s for s in cls if s.platform == platform.lower()]

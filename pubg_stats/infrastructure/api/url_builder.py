"""Endpoint URL construction."""
from typing import Optional

from pubg_stats.config import settings


def build_url(resource_path: str, shard: Optional[str] = None, base_url: Optional[str] = None) -> str:
    """
    Map a resource path to a full endpoint URL.

    ``build_url("players/abc", "pc-eu")`` -> ``https://api.pubg.com/shards/pc-eu/players/abc``.
    Without a shard the path hangs off the API root; only ``status`` is served there.
    """
    base = (base_url or settings.BASE_URL).rstrip("/")
    if shard:
        return f"{base}/shards/{str(shard)}/{resource_path}"
    return f"{base}/{resource_path}"

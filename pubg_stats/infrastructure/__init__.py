"""Infrastructure layer - HTTP access to the PUBG API."""
from .api import PubgClient, HttpGateway, ResourceMapper, build_url, DEFAULT_SHARD

__all__ = [
    'PubgClient',
    'HttpGateway',
    'ResourceMapper',
    'build_url',
    'DEFAULT_SHARD',
]

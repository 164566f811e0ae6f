"""Infrastructure API module."""
from .url_builder import build_url
from .gateway import HttpGateway
from .mapper import ResourceMapper
from .pubg_client import PubgClient, DEFAULT_SHARD

__all__ = [
    'build_url',
    'HttpGateway',
    'ResourceMapper',
    'PubgClient',
    'DEFAULT_SHARD',
]

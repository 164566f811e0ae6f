"""PUBG API client."""
from __future__ import annotations

from datetime import date
from typing import Any, Awaitable, Dict, List, Mapping, Optional, Union

import httpx

from pubg_stats.config import settings
from pubg_stats.core.logging import get_logger, log_context
from pubg_stats.domain.entities import Match, Player, Status
from pubg_stats.domain.errors import ConfigurationError, InvalidArgumentError
from pubg_stats.domain.selectors import PlayerSelector, SelectorKind
from pubg_stats.domain.timestamps import to_api_timestamp
from .gateway import HttpGateway
from .mapper import ResourceMapper
from .url_builder import build_url

logger = get_logger(__name__, service="pubg")

DEFAULT_SHARD = "pc-oc"

PlayerLookup = Union[PlayerSelector, Mapping[str, Any]]


class PubgClient:
    """
    Entry point to the PUBG API.

    Every public method checks its arguments straight away, raising
    ``InvalidArgumentError`` before anything is sent, and returns an awaitable
    that performs exactly one request::

        client = PubgClient(api_key)
        players = await client.get_player(PlayerSelector.by_name("shroud"), "steam")
        match = await client.get_match(players[0].match_ids[0], "steam")

    Used as ``async with PubgClient(key) as client:`` the requests share one
    connection pool, closed on exit. The API key and default shard never
    change after construction, so calls may run concurrently on one instance.
    """

    def __init__(
        self,
        api_key: str,
        default_shard: str = DEFAULT_SHARD,
        *,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
        session: Optional[httpx.AsyncClient] = None,
    ):
        if not api_key or not isinstance(api_key, str):
            raise ConfigurationError("No API key passed.")
        if not default_shard or not isinstance(default_shard, str):
            raise ConfigurationError(f"Default shard must be a non-empty string, got {default_shard!r}")

        self._api_key = api_key
        self._default_shard = str(default_shard)
        self.base_url = (base_url or settings.BASE_URL).rstrip("/")
        self.gateway = HttpGateway(
            api_key,
            user_agent=user_agent or settings.USER_AGENT,
            timeout=settings.REQUEST_TIMEOUT if timeout is None else timeout,
            session=session,
        )
        self.mapper = ResourceMapper(self)
        self._owns_session = False

    @classmethod
    def from_env(cls, **kwargs: Any) -> "PubgClient":
        """Create client from PUBG_API_KEY / PUBG_DEFAULT_SHARD settings."""
        settings.validate()
        return cls(settings.PUBG_API_KEY, settings.DEFAULT_SHARD, **kwargs)

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def default_shard(self) -> str:
        return self._default_shard

    def __repr__(self) -> str:
        return f"PubgClient(default_shard={self._default_shard!r}, base_url={self.base_url!r})"

    async def __aenter__(self) -> "PubgClient":
        if self.gateway.session is None:
            self.gateway.session = self.gateway.open_session()
            self._owns_session = True
        return self

    async def __aexit__(self, *_) -> None:
        if self._owns_session and self.gateway.session is not None:
            await self.gateway.session.aclose()
            self.gateway.session = None
            self._owns_session = False

    # ── Players ────────────────────────────────────────────────────────────

    def get_player(
        self, selector: PlayerLookup, shard: Optional[str] = None
    ) -> Awaitable[Union[Player, List[Player]]]:
        """
        Get players by id or name.

        ``selector`` is a :class:`PlayerSelector` or the shorthand mapping
        ``{"id": "account.x"}``, ``{"id": [...]}``, ``{"name": "x"}`` or
        ``{"name": [...]}``. A single id resolves to one ``Player``; every
        other lookup, including a single name, resolves to a list in the
        order the server returned it.
        """
        shard = self._resolve_shard(shard)
        selector = PlayerSelector.coerce(selector)

        params: Dict[str, str] = {}
        if selector.kind is SelectorKind.ID:
            path = f"players/{selector.values[0]}"
        elif selector.kind is SelectorKind.IDS:
            path = "players"
            params["filter[playerIds]"] = selector.joined
        elif selector.kind in (SelectorKind.NAME, SelectorKind.NAMES):
            path = "players"
            params["filter[playerNames]"] = selector.joined
        else:
            raise InvalidArgumentError(f"Unsupported player selector kind: {selector.kind!r}")

        return self._fetch_players(build_url(path, shard, self.base_url), params, selector.returns_many, shard)

    async def _fetch_players(
        self, url: str, params: Dict[str, str], many: bool, shard: str
    ) -> Union[Player, List[Player]]:
        body = await self._request(url, params, shard=shard, resource="players")
        if many:
            return self.mapper.map_players(body["data"])
        return self.mapper.map_player(body["data"])

    # ── Matches ────────────────────────────────────────────────────────────

    def get_match(self, match_id: str, shard: Optional[str] = None) -> Awaitable[Match]:
        """Get a match, with rosters, participants and assets resolved."""
        if not isinstance(match_id, str) or not match_id:
            raise InvalidArgumentError(f"Match id must be a non-empty string, got {match_id!r}")
        shard = self._resolve_shard(shard)
        return self._fetch_match(build_url(f"matches/{match_id}", shard, self.base_url), shard)

    async def _fetch_match(self, url: str, shard: str) -> Match:
        body = await self._request(url, shard=shard, resource="matches")
        return self.mapper.map_match(body["data"], body.get("included"))

    def get_samples(self, created_at: Optional[date] = None, shard: Optional[str] = None) -> Awaitable[List[Match]]:
        """
        Get a sample of recent match ids as stub matches.

        ``created_at`` (a datetime or date) sets the sample's start time; any
        other value is ignored and the API picks its default window.
        """
        shard = self._resolve_shard(shard)
        params: Dict[str, str] = {}
        if isinstance(created_at, date):
            params["filter[createdAt]"] = to_api_timestamp(created_at)
        return self._fetch_samples(build_url("samples", shard, self.base_url), params, shard)

    async def _fetch_samples(self, url: str, params: Dict[str, str], shard: str) -> List[Match]:
        body = await self._request(url, params, shard=shard, resource="samples")
        return self.mapper.map_sample_matches(body["data"], shard)

    # ── Status & telemetry ─────────────────────────────────────────────────

    def get_status(self) -> Awaitable[Status]:
        """Get the API status. Status is not shard-scoped."""
        return self._fetch_status(build_url("status", None, self.base_url))

    async def _fetch_status(self, url: str) -> Status:
        body = await self._request(url, resource="status")
        return self.mapper.map_status(body["data"])

    def get_telemetry(self, url: str) -> Awaitable[Any]:
        """Fetch a telemetry file by its absolute URL and return the raw JSON."""
        if not url or not isinstance(url, str):
            raise InvalidArgumentError(f"Telemetry url must be a non-empty string, got {url!r}")
        return self._request(url, resource="telemetry")

    # ── Internals ──────────────────────────────────────────────────────────

    def _resolve_shard(self, shard: Optional[str]) -> str:
        if shard is None:
            return self._default_shard
        if not isinstance(shard, str) or not shard:
            raise InvalidArgumentError(f"Shard must be a non-empty string, got {shard!r}")
        return str(shard)

    async def _request(
        self, url: str, params: Optional[Dict[str, str]] = None, **context: Any
    ) -> Any:
        with log_context(**context):
            logger.trace(lambda: f"request {context.get('resource')}")
            return await self.gateway.get(url, params)

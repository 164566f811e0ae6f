"""HTTP gateway for the PUBG API."""
from __future__ import annotations

import time
from typing import Any, Dict, Mapping, Optional

import httpx

from pubg_stats.config import settings
from pubg_stats.core.logging import get_logger
from pubg_stats.domain.errors import ApiError

logger = get_logger(__name__, service="pubg")

_MISSING = object()


class HttpGateway:
    """
    Issues single authenticated GET requests and decodes the JSON reply.

    There is no retry, caching or rate limiting here: one call, one request.
    Pass ``session`` to reuse an ``httpx.AsyncClient`` (connection pooling,
    or a mock transport in tests); otherwise each request opens its own.
    """

    def __init__(
        self,
        api_key: str,
        *,
        user_agent: str = settings.USER_AGENT,
        timeout: float = settings.REQUEST_TIMEOUT,
        session: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._api_key = api_key
        self.user_agent = user_agent
        self.timeout = timeout
        self.session = session

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "User-Agent": self.user_agent,
            "Accept": "application/json",
            "Authorization": f"Bearer {self._api_key}",
        }

    def open_session(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, follow_redirects=True)

    async def get(self, url: str, params: Optional[Mapping[str, str]] = None) -> Any:
        """
        GET ``url`` and return the decoded JSON body.

        Raises:
            ApiError: non-2xx reply whose body has an ``errors`` field.
            httpx.HTTPStatusError: non-2xx reply without one.
            httpx.TransportError: network failures, unchanged.
        """
        query = dict(params or {})
        start = time.perf_counter()
        logger.debug(lambda: f"GET {url}", extra={"params": query})
        if self.session is not None:
            response = await self.session.get(url, params=query or None, headers=self.headers)
        else:
            async with self.open_session() as client:
                response = await client.get(url, params=query or None, headers=self.headers)
        dur_ms = round((time.perf_counter() - start) * 1000.0, 2)
        logger.debug(
            lambda: f"HTTP {response.status_code} for {url}",
            extra={"status": response.status_code, "execution_time_ms": dur_ms},
        )

        if not response.is_success:
            errors = self._api_errors(response)
            if errors is not _MISSING:
                logger.warning(
                    lambda: f"API error {response.status_code} for {url}",
                    extra={"status": response.status_code, "errors": errors},
                )
                raise ApiError(errors, status_code=response.status_code)
            response.raise_for_status()
        return response.json()

    @staticmethod
    def _api_errors(response: httpx.Response) -> Any:
        """The ``errors`` field of a failure body, or ``_MISSING`` when there is none."""
        try:
            body = response.json()
        except ValueError:
            return _MISSING
        if isinstance(body, dict) and "errors" in body:
            return body["errors"]
        return _MISSING

"""
Pytest configuration for pubg_stats tests.

HTTP is served by ``httpx.MockTransport`` backed by :class:`FakeApi`, which
records every request it receives.
"""

from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest
import pytest_asyncio

from pubg_stats.infrastructure import PubgClient

BASE_URL = "https://api.test"
API_KEY = "test-key"


class FakeApi:
    """Routes requests by URL path to canned responses."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.routes: Dict[str, Callable[[httpx.Request], httpx.Response]] = {}

    def add(self, path: str, json: Any = None, *, status: int = 200, content: Optional[bytes] = None) -> None:
        def _respond(request: httpx.Request) -> httpx.Response:
            if content is not None:
                return httpx.Response(status, content=content)
            return httpx.Response(status, json=json)
        self.routes[path] = _respond

    def fail(self, path: str, exc: Exception) -> None:
        def _raise(request: httpx.Request) -> httpx.Response:
            raise exc
        self.routes[path] = _raise

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"errors": [{"title": "Not Found", "detail": request.url.path}]})
        return route(request)


def player_resource(player_id: str, name: str, match_ids: Optional[List[str]] = None) -> Dict[str, Any]:
    return {
        "type": "player",
        "id": player_id,
        "attributes": {
            "name": name,
            "shardId": "pc-eu",
            "titleId": "bluehole-pubg",
            "patchVersion": "",
            "createdAt": "2018-04-01T08:35:06Z",
            "updatedAt": "2018-04-01T08:35:06Z",
        },
        "relationships": {
            "matches": {"data": [{"type": "match", "id": mid} for mid in (match_ids or [])]},
            "assets": {"data": []},
        },
        "links": {"self": f"https://api.pubg.com/shards/pc-eu/players/{player_id}"},
    }


def match_resource(match_id: str = "m-1") -> Dict[str, Any]:
    return {
        "type": "match",
        "id": match_id,
        "attributes": {
            "createdAt": "2018-04-01T08:35:06Z",
            "duration": 1800,
            "gameMode": "squad-fpp",
            "mapName": "Erangel_Main",
            "isCustomMatch": False,
            "seasonState": "progress",
            "shardId": "pc-eu",
            "titleId": "bluehole-pubg",
        },
        "relationships": {
            "rosters": {"data": [{"type": "roster", "id": "r-1"}, {"type": "roster", "id": "r-2"}]},
            "assets": {"data": [{"type": "asset", "id": "a-1"}]},
        },
    }


def match_included() -> List[Dict[str, Any]]:
    def participant(pid: str, name: str, kills: int, win_place: int) -> Dict[str, Any]:
        return {
            "type": "participant",
            "id": pid,
            "attributes": {
                "actor": "",
                "shardId": "pc-eu",
                "stats": {
                    "name": name,
                    "playerId": f"account.{name}",
                    "kills": kills,
                    "assists": 1,
                    "DBNOs": 2,
                    "headshotKills": 0,
                    "damageDealt": 100.5 * kills,
                    "winPlace": win_place,
                    "timeSurvived": 1500.0,
                    "deathType": "alive" if win_place == 1 else "byplayer",
                },
            },
        }

    def roster(rid: str, team_id: int, rank: int, won: str, members: List[str]) -> Dict[str, Any]:
        return {
            "type": "roster",
            "id": rid,
            "attributes": {"shardId": "pc-eu", "won": won, "stats": {"rank": rank, "teamId": team_id}},
            "relationships": {
                "participants": {"data": [{"type": "participant", "id": m} for m in members]},
                "team": {"data": None},
            },
        }

    return [
        participant("p-1", "alpha", 5, 1),
        participant("p-2", "bravo", 3, 1),
        participant("p-3", "charlie", 0, 2),
        roster("r-1", 4, 1, "true", ["p-1", "p-2"]),
        roster("r-2", 7, 2, "false", ["p-3"]),
        {
            "type": "asset",
            "id": "a-1",
            "attributes": {
                "URL": "https://telemetry-cdn.pubg.com/bluehole-pubg/pc-eu/2018/04/01/m-1-telemetry.json",
                "createdAt": "2018-04-01T09:05:06Z",
                "description": "",
                "name": "telemetry",
            },
        },
    ]


@pytest.fixture
def fake_api() -> FakeApi:
    return FakeApi()


@pytest_asyncio.fixture
async def client(fake_api):
    async with httpx.AsyncClient(transport=httpx.MockTransport(fake_api.handler)) as session:
        yield PubgClient(API_KEY, "pc-eu", base_url=BASE_URL, session=session)

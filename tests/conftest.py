"""Shared fixtures: sample service payloads and a client on a mock transport."""

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from fightcade_api import ClientConfig, FightcadeClient


@pytest.fixture
def user_data() -> dict[str, Any]:
    return {
        "name": "biggs",
        "gravatar": "https://www.gravatar.com/avatar/0000",
        "ranked": True,
        "last_online": 1658032210798,
        "date": 1600000000000,
        "gameinfo": {
            "umk3": {"rank": 6, "num_matches": 812, "last_match": 1658030000000, "time_played": 9000000},
            "sfiii3nr1": {"time_played": 120000},
        },
    }


@pytest.fixture
def player_data() -> dict[str, Any]:
    return {
        "name": "biggs",
        "country": {"iso_code": "US", "full_name": "United States"},
        "rank": 5,
        "score": 3,
    }


@pytest.fixture
def replay_data(player_data: dict[str, Any]) -> dict[str, Any]:
    return {
        "quarkid": "1638725293444-1085",
        "channelname": "Ultimate Mortal Kombat 3",
        "date": 1638725293444,
        "duration": 754.2,
        "emulator": "fbneo",
        "gameid": "umk3",
        "num_matches": 5,
        "players": [
            player_data,
            {"name": "rival", "country": "Brazil", "rank": None, "score": 2},
        ],
        "ranked": 3,
        "replay_file": "umk3-1638725293444-1085.fs",
        "realtime_views": 12,
        "saved_views": 40,
    }


@pytest.fixture
def game_data() -> dict[str, Any]:
    return {
        "gameid": "umk3",
        "romof": "umk3r10",
        "name": "Ultimate Mortal Kombat 3",
        "year": "1995",
        "publisher": "Midway",
        "emulator": "fbneo",
        "available_for": 2,
        "system": "Arcade",
        "ranked": True,
        "training": False,
        "genres": ["fighting", "versus"],
    }


@pytest.fixture
def event_data() -> dict[str, Any]:
    return {
        "name": "Garou Weekly",
        "author": "biggs",
        "date": 1658030000000,
        "gameid": "garou",
        "link": "https://example.com/garou-weekly",
        "region": "NA",
    }


class RecordingHandler:
    """MockTransport handler that replays canned JSON and records request bodies."""

    def __init__(self, *responses: Any) -> None:
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    @property
    def payloads(self) -> list[Any]:
        return [json.loads(request.content) for request in self.requests]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.responses.pop(0)
        if isinstance(response, httpx.Response):
            return response
        return httpx.Response(200, json=response)


@pytest.fixture
def make_client() -> Callable[..., tuple[FightcadeClient, RecordingHandler]]:
    """Build a client whose requests are answered by the given responses, in order."""

    def factory(*responses: Any, config: ClientConfig | None = None) -> tuple[FightcadeClient, RecordingHandler]:
        handler = RecordingHandler(*responses)
        client = FightcadeClient(config or ClientConfig(), transport=httpx.MockTransport(handler))
        return client, handler

    return factory

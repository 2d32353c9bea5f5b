"""One-shot operations.

Each function opens a client, performs a single request and closes the
client again. Use ``FightcadeClient`` directly to reuse one connection
across several calls.
"""

from collections.abc import Iterable
from typing import Any

from .models import (
    ClientConfig,
    Event,
    EventSearchOptions,
    Game,
    Player,
    RankingOptions,
    Replay,
    ReplaySearchOptions,
    User,
    UserReplaySearchOptions,
)
from .services.client import FightcadeClient


async def get_user(username: str, *, config: ClientConfig | None = None) -> User:
    async with FightcadeClient(config) as client:
        return await client.get_user(username)


async def get_replay(quarkid: str, *, config: ClientConfig | None = None) -> Replay:
    async with FightcadeClient(config) as client:
        return await client.get_replay(quarkid)


async def get_replays(
    options: ReplaySearchOptions | None = None,
    *,
    config: ClientConfig | None = None,
    **kwargs: Any,
) -> list[Replay]:
    async with FightcadeClient(config) as client:
        return await client.get_replays(options, **kwargs)


async def get_user_replays(
    username: str,
    options: UserReplaySearchOptions | None = None,
    *,
    config: ClientConfig | None = None,
    **kwargs: Any,
) -> list[Replay]:
    async with FightcadeClient(config) as client:
        return await client.get_user_replays(username, options, **kwargs)


async def get_rankings(
    gameid: str,
    options: RankingOptions | None = None,
    *,
    config: ClientConfig | None = None,
    **kwargs: Any,
) -> list[Player]:
    async with FightcadeClient(config) as client:
        return await client.get_rankings(gameid, options, **kwargs)


async def get_game(gameid: str, *, config: ClientConfig | None = None) -> Game:
    async with FightcadeClient(config) as client:
        return await client.get_game(gameid)


async def get_events(
    options: EventSearchOptions | None = None,
    *,
    config: ClientConfig | None = None,
    **kwargs: Any,
) -> list[Event]:
    async with FightcadeClient(config) as client:
        return await client.get_events(options, **kwargs)


async def get_video_url(replay: Replay | str, *, config: ClientConfig | None = None) -> str:
    """Deprecated: FightcadeVids is abandoned."""
    async with FightcadeClient(config) as client:
        return await client.get_video_url(replay)


async def get_video_urls(
    replays: Iterable[Replay | str],
    *,
    config: ClientConfig | None = None,
) -> dict[str, str]:
    """Deprecated: FightcadeVids is abandoned."""
    async with FightcadeClient(config) as client:
        return await client.get_video_urls(replays)

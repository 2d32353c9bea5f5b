"""Fightcade API client service."""

import warnings
from collections.abc import Iterable
from typing import Any

import httpx
import structlog

from ..models import (
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
from .config import ConfigurationService
from .errors import NotFoundError
from .http_client import HttpClientService
from .requests import ApiRequest, RequestBuilder, challenge_id
from .urls import replay_url, video_url
from .validation import extract_object, extract_results, extract_video_urls

log = structlog.stdlib.get_logger()

VIDS_DEPRECATION = "FightcadeVids (https://fightcadevids.com) is abandoned; video lookups are deprecated"


def _options(options: Any, cls: type, overrides: dict[str, Any]) -> Any:
    if options is not None and overrides:
        raise TypeError("Pass either an options object or keyword arguments, not both")
    if options is None:
        return cls(**overrides)
    return options


class FightcadeClient:
    """Async client for the Fightcade API.

    Each operation sends exactly one request and either returns validated
    models or raises a ``FightcadeError``. No state is kept between calls.

    Example:
        async with FightcadeClient() as client:
            user = await client.get_user("biggs")
    """

    replay_url = staticmethod(replay_url)
    video_url = staticmethod(video_url)

    def __init__(
        self,
        config: ClientConfig | None = None,
        http_client: HttpClientService | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Client settings; defaults to the environment-aware configuration
            http_client: Transport service to use instead of creating one
            transport: httpx transport for a created HTTP client (tests, proxies)
        """
        configuration = ConfigurationService()
        if config is None:
            config = configuration.load_config()
        else:
            configuration.ensure_valid(config)

        self.config: ClientConfig = config
        self.requests: RequestBuilder = RequestBuilder(config)
        self.http_client: HttpClientService = http_client or HttpClientService.from_config(config, transport)

    async def _send(self, request: ApiRequest) -> Any:
        log.debug("Sending request", operation=request.operation, url=request.url)
        return await self.http_client.post_json(request.url, request.payload)

    async def get_user(self, username: str) -> User:
        """Get a user profile by username.

        Raises:
            RemoteError: ``is_user_not_found`` is set when the user does not exist
        """
        request = self.requests.get_user(username)
        user = extract_object(await self._send(request), "user", User, request.operation)
        log.info("Fetched user", username=user.name)
        return user

    async def get_replay(self, quarkid: str) -> Replay:
        """Get a single replay by challenge id.

        Raises:
            NotFoundError: If no replay has this challenge id
        """
        request = self.requests.get_replay(quarkid)
        replays = await self._results(request, Replay)
        if not replays:
            raise NotFoundError("Replay", request.payload["quarkid"])
        return replays[0]

    async def get_replays(self, options: ReplaySearchOptions | None = None, **kwargs: Any) -> list[Replay]:
        """Search the newest replays, optionally for one game."""
        options = _options(options, ReplaySearchOptions, kwargs)
        return await self._results(self.requests.get_replays(options), Replay)

    async def get_user_replays(
        self,
        username: str,
        options: UserReplaySearchOptions | None = None,
        **kwargs: Any,
    ) -> list[Replay]:
        """Search the newest replays a user took part in."""
        options = _options(options, UserReplaySearchOptions, kwargs)
        return await self._results(self.requests.get_user_replays(username, options), Replay)

    async def get_rankings(self, gameid: str, options: RankingOptions | None = None, **kwargs: Any) -> list[Player]:
        """Get a game's top ranked players."""
        options = _options(options, RankingOptions, kwargs)
        return await self._results(self.requests.get_rankings(gameid, options), Player)

    async def get_game(self, gameid: str) -> Game:
        """Get game metadata by ROM name."""
        request = self.requests.get_game(gameid)
        return extract_object(await self._send(request), "game", Game, request.operation)

    async def get_events(self, options: EventSearchOptions | None = None, **kwargs: Any) -> list[Event]:
        """Get active events, for all games or for one."""
        options = _options(options, EventSearchOptions, kwargs)
        return await self._results(self.requests.get_events(options), Event)

    async def get_video_urls(self, replays: Iterable[Replay | str]) -> dict[str, str]:
        """Look up FightcadeVids URLs. Ids without a video are absent from the result.

        .. deprecated:: FightcadeVids is abandoned.
        """
        warnings.warn(VIDS_DEPRECATION, DeprecationWarning, stacklevel=2)
        return await self._video_urls(replays)

    async def get_video_url(self, replay: Replay | str) -> str:
        """Look up the FightcadeVids URL of one replay.

        .. deprecated:: FightcadeVids is abandoned.

        Raises:
            NotFoundError: If the service has no video for the replay
        """
        warnings.warn(VIDS_DEPRECATION, DeprecationWarning, stacklevel=2)
        quarkid = challenge_id(replay)
        urls = await self._video_urls([quarkid])
        url = urls.get(quarkid)
        if not url:
            raise NotFoundError("Video", quarkid)
        return url

    async def _video_urls(self, replays: Iterable[Replay | str]) -> dict[str, str]:
        request = self.requests.get_video_urls(replays)
        urls = extract_video_urls(await self._send(request))
        log.info("Fetched video URLs", requested=len(request.payload["ids"]), found=len(urls))
        return urls

    async def _results(self, request: ApiRequest, model: type) -> list[Any]:
        results = extract_results(
            await self._send(request),
            model,
            request.operation,
            self.config.results_count_check,
        )
        log.info("Fetched results", operation=request.operation, count=len(results))
        return results

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self.http_client.close()

    async def __aenter__(self) -> "FightcadeClient":
        return self

    async def __aexit__(self, exc_type: type[Exception] | None, exc_val: Exception | None, exc_tb: Any) -> None:
        await self.close()

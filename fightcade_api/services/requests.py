"""Request payloads for the Fightcade API and the FightcadeVids service."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from ..models import (
    ClientConfig,
    EventSearchOptions,
    RankingOptions,
    Replay,
    ReplaySearchOptions,
    UserReplaySearchOptions,
)
from ..models.options import _ReplayFilters
from .errors import InvalidArgumentError


class Operation(str, Enum):
    """Server-side operation selected by the ``req`` field."""
    GET_USER = "getuser"
    SEARCH_QUARKS = "searchquarks"
    SEARCH_RANKINGS = "searchrankings"
    GAME_INFO = "gameinfo"
    SEARCH_EVENTS = "searchevents"


@dataclass(frozen=True)
class ApiRequest:
    """A ready-to-send POST: endpoint plus JSON body."""
    url: str
    payload: dict[str, Any]

    @property
    def operation(self) -> str | None:
        return self.payload.get("req")


def challenge_id(replay: Replay | str) -> str:
    """Return the challenge id of a replay or pass a bare id through."""
    quarkid = replay.quarkid if isinstance(replay, Replay) else replay
    if not isinstance(quarkid, str) or not quarkid:
        raise InvalidArgumentError("Challenge id must be a non-empty string", "quarkid", quarkid)
    return quarkid


def _require_text(value: Any, argument: str) -> str:
    if not isinstance(value, str) or not value:
        raise InvalidArgumentError(f"{argument} must be a non-empty string", argument, value)
    return value


def _require_count(value: Any, argument: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidArgumentError(f"{argument} must be a non-negative integer", argument, value)
    return value


def _since_millis(since: int | datetime) -> int:
    if isinstance(since, datetime):
        if since.tzinfo is None:
            since = since.replace(tzinfo=timezone.utc)
        return round(since.timestamp() * 1000)
    return _require_count(since, "since")


class RequestBuilder:
    """Builds the request for each operation. Performs no I/O."""

    def __init__(self, config: ClientConfig | None = None) -> None:
        self.config = config or ClientConfig()

    def _api(self, operation: Operation, **fields: Any) -> ApiRequest:
        return ApiRequest(self.config.api_url, {"req": operation.value, **fields})

    def get_user(self, username: str) -> ApiRequest:
        return self._api(Operation.GET_USER, username=_require_text(username, "username"))

    def get_replay(self, quarkid: str) -> ApiRequest:
        return self._api(Operation.SEARCH_QUARKS, quarkid=challenge_id(quarkid))

    def get_replays(self, options: ReplaySearchOptions | None = None) -> ApiRequest:
        options = options or ReplaySearchOptions()
        fields = self._replay_search_fields(options)
        gameid = getattr(options, "gameid", None)
        if gameid is not None:
            fields["gameid"] = _require_text(gameid, "gameid")
        return self._api(Operation.SEARCH_QUARKS, **fields)

    def get_user_replays(
        self,
        username: str,
        options: UserReplaySearchOptions | None = None,
    ) -> ApiRequest:
        options = options or UserReplaySearchOptions()
        gameid = getattr(options, "gameid", None)
        if gameid is not None:
            raise InvalidArgumentError("A user's replay search cannot filter by game", "gameid", gameid)
        return self._api(
            Operation.SEARCH_QUARKS,
            username=_require_text(username, "username"),
            **self._replay_search_fields(options),
        )

    def get_rankings(self, gameid: str, options: RankingOptions | None = None) -> ApiRequest:
        options = options or RankingOptions()
        return self._api(
            Operation.SEARCH_RANKINGS,
            gameid=_require_text(gameid, "gameid"),
            limit=_require_count(options.limit, "limit"),
            offset=_require_count(options.offset, "offset"),
            byElo=options.by_elo,
            recent=options.recent,
        )

    def get_game(self, gameid: str) -> ApiRequest:
        return self._api(Operation.GAME_INFO, gameid=_require_text(gameid, "gameid"))

    def get_events(self, options: EventSearchOptions | None = None) -> ApiRequest:
        options = options or EventSearchOptions()
        fields: dict[str, Any] = {
            "limit": _require_count(options.limit, "limit"),
            "offset": _require_count(options.offset, "offset"),
        }
        if options.gameid is not None:
            fields["gameid"] = _require_text(options.gameid, "gameid")
        return self._api(Operation.SEARCH_EVENTS, **fields)

    def get_video_urls(self, replays: Iterable[Replay | str]) -> ApiRequest:
        if isinstance(replays, (str, Replay)):
            replays = [replays]
        return ApiRequest(
            self.config.video_api_url,
            {"ids": [challenge_id(replay) for replay in replays]},
        )

    @staticmethod
    def _replay_search_fields(options: _ReplayFilters) -> dict[str, Any]:
        return {
            "limit": _require_count(options.limit, "limit"),
            "offset": _require_count(options.offset, "offset"),
            "best": options.best,
            "since": _since_millis(options.since),
            "ranked": options.ranked,
        }

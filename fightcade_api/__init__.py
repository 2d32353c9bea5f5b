"""Async client for the Fightcade API."""

from .api import (
    get_events,
    get_game,
    get_rankings,
    get_replay,
    get_replays,
    get_user,
    get_user_replays,
    get_video_url,
    get_video_urls,
)
from .models import (
    RANK_LABELS,
    ClientConfig,
    Country,
    Event,
    EventSearchOptions,
    Game,
    GameStats,
    Player,
    Rank,
    RankingOptions,
    Replay,
    ReplaySearchOptions,
    ResultsCountCheck,
    User,
    UserReplaySearchOptions,
    VideoURLs,
    country_name,
)
from .services import (
    ConfigurationError,
    FightcadeClient,
    FightcadeError,
    InvalidArgumentError,
    NotFoundError,
    RemoteError,
    SchemaValidationError,
    TransportError,
    replay_url,
    setup_logging,
    video_url,
)

__all__ = [
    "ClientConfig",
    "ConfigurationError",
    "Country",
    "Event",
    "EventSearchOptions",
    "FightcadeClient",
    "FightcadeError",
    "Game",
    "GameStats",
    "InvalidArgumentError",
    "NotFoundError",
    "Player",
    "RANK_LABELS",
    "Rank",
    "RankingOptions",
    "RemoteError",
    "Replay",
    "ReplaySearchOptions",
    "ResultsCountCheck",
    "SchemaValidationError",
    "TransportError",
    "User",
    "UserReplaySearchOptions",
    "VideoURLs",
    "country_name",
    "get_events",
    "get_game",
    "get_rankings",
    "get_replay",
    "get_replays",
    "get_user",
    "get_user_replays",
    "get_video_url",
    "get_video_urls",
    "replay_url",
    "setup_logging",
    "video_url",
]

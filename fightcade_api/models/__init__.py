"""Data models for the Fightcade API client."""

from .config import (
    API_URL,
    REPLAY_BASE_URL,
    VIDEO_API_URL,
    VIDEO_BASE_URL,
    ClientConfig,
    ResultsCountCheck,
)
from .game import Event, Game
from .options import (
    DEFAULT_LIMIT,
    EventSearchOptions,
    RankingOptions,
    ReplaySearchOptions,
    UserReplaySearchOptions,
)
from .replay import CANCELLED, Country, Player, Replay, country_name
from .user import RANK_LABELS, GameStats, Rank, User

VideoURLs = dict[str, str]

__all__ = [
    "API_URL",
    "CANCELLED",
    "ClientConfig",
    "Country",
    "DEFAULT_LIMIT",
    "Event",
    "EventSearchOptions",
    "Game",
    "GameStats",
    "Player",
    "RANK_LABELS",
    "Rank",
    "RankingOptions",
    "Replay",
    "REPLAY_BASE_URL",
    "ReplaySearchOptions",
    "ResultsCountCheck",
    "User",
    "UserReplaySearchOptions",
    "VIDEO_API_URL",
    "VIDEO_BASE_URL",
    "VideoURLs",
    "country_name",
]

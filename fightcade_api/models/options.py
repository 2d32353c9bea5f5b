"""Search option data models.

Every field is optional; the defaults are the values the Fightcade service
applies itself and are always sent explicitly.
"""

from dataclasses import dataclass
from datetime import datetime

DEFAULT_LIMIT = 15


@dataclass(frozen=True)
class _ReplayFilters:
    limit: int = DEFAULT_LIMIT
    offset: int = 0
    best: bool = False  # sort by player Elo
    since: int | datetime = 0  # ms epoch or datetime; naive datetimes are UTC
    ranked: bool = False


@dataclass(frozen=True)
class UserReplaySearchOptions(_ReplayFilters):
    """Options for a user's replay search."""


@dataclass(frozen=True)
class ReplaySearchOptions(_ReplayFilters):
    """Options for a global replay search."""
    gameid: str | None = None


@dataclass(frozen=True)
class RankingOptions:
    """Options for a game's ranking search."""
    limit: int = DEFAULT_LIMIT
    offset: int = 0
    by_elo: bool = True
    recent: bool = True  # only recently active players


@dataclass(frozen=True)
class EventSearchOptions:
    """Options for an event search."""
    gameid: str | None = None
    limit: int = DEFAULT_LIMIT
    offset: int = 0

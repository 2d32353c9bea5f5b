"""Replay and player data models."""

from typing import Literal

from .user import FightcadeModel, GameStats, Number, RankField

CANCELLED = "cancelled"


class Country(FightcadeModel):
    """Country as reported for a player."""
    iso_code: str  # ISO 3166-1 alpha-2
    full_name: str


def country_name(country: Country | str) -> str:
    """Return a display string for either country shape."""
    if isinstance(country, Country):
        return country.full_name
    return country


class Player(FightcadeModel):
    """Participant of a replay or entry of a ranking."""
    name: str
    country: Country | str
    rank: RankField = None
    score: Number | None = None
    gameinfo: dict[str, GameStats] | None = None

    @property
    def country_name(self) -> str:
        return country_name(self.country)


class Replay(FightcadeModel):
    """Recorded match, identified by its challenge id (quarkid)."""
    quarkid: str
    channelname: str
    date: Number  # ms epoch
    duration: Number  # seconds
    emulator: str
    gameid: str
    num_matches: Number | None = None
    players: list[Player]
    ranked: Number | Literal["cancelled"] | None = None  # FT# of a ranked set
    replay_file: str | None = None
    realtime_views: Number | None = None
    saved_views: Number | None = None

    @property
    def is_cancelled(self) -> bool:
        return self.ranked == CANCELLED

    @property
    def first_to(self) -> Number | None:
        """Length of the ranked set, or None for unranked and cancelled replays."""
        if self.ranked is None or self.is_cancelled:
            return None
        return self.ranked

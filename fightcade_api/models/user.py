"""User-related data models."""

from enum import IntEnum
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict

# The service emits numbers as either ints or floats; keep whichever it sent.
Number = int | float

RANK_LABELS = ("Unranked", "E", "D", "C", "B", "A", "S")


class Rank(IntEnum):
    """Fightcade rank ordinal."""
    UNRANKED = 0
    E = 1
    D = 2
    C = 3
    B = 4
    A = 5
    S = 6

    @property
    def label(self) -> str:
        return RANK_LABELS[self.value]


def _to_rank(value: object) -> object:
    # JSON numbers may arrive as 6 or 6.0; bools, fractions and unknown ordinals are left to fail.
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, int) and not isinstance(value, bool) and 0 <= value < len(RANK_LABELS):
        return Rank(value)
    return value


RankField = Annotated[Rank | None, BeforeValidator(_to_rank)]


class FightcadeModel(BaseModel):
    """Base for all response models: immutable, strict and lossless."""
    model_config = ConfigDict(frozen=True, strict=True, extra="allow")


class GameStats(FightcadeModel):
    """Per-game statistics of a user or player."""
    rank: RankField = None
    num_matches: Number | None = None
    last_match: Number | None = None  # ms epoch
    time_played: Number  # ms


class User(FightcadeModel):
    """Fightcade user profile."""
    name: str
    gravatar: str | None = None
    ranked: bool
    last_online: Number | None = None  # ms epoch
    date: Number  # account creation, ms epoch
    gameinfo: dict[str, GameStats] | None = None

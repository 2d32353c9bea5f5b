"""Game and event data models."""

from .user import FightcadeModel, Number


class Game(FightcadeModel):
    """Game metadata for a Fightcade ROM."""
    gameid: str
    romof: str | None = None  # opaque, passed through
    name: str
    year: str | None = None
    publisher: str | None = None
    emulator: str
    available_for: Number  # opaque, passed through
    system: str
    ranked: bool
    training: bool | None = None
    genres: list[str] | None = None


class Event(FightcadeModel):
    """Community event announced for a game."""
    name: str
    author: str  # Fightcade username
    date: Number  # ms epoch
    gameid: str
    link: str
    region: str
    stream: str | None = None

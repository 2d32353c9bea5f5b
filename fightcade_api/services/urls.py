"""Derived URLs. Pure string templates, no network access."""

from ..models import REPLAY_BASE_URL, VIDEO_BASE_URL, Replay
from .requests import challenge_id


def replay_url(replay: Replay) -> str:
    """URL that opens the replay in Fightcade."""
    return f"{REPLAY_BASE_URL}{replay.emulator}/{replay.gameid}/{replay.quarkid}"


def video_url(replay: Replay | str) -> str:
    """URL the replay would have on FightcadeVids. Existence is not checked."""
    return f"{VIDEO_BASE_URL}{challenge_id(replay)}"

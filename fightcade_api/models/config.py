"""Configuration data models."""

from dataclasses import dataclass
from enum import Enum

API_URL = "https://www.fightcade.com/api/"
REPLAY_BASE_URL = "https://replay.fightcade.com/"
VIDEO_BASE_URL = "https://fightcadevids.com/video/"
VIDEO_API_URL = "https://fightcadevids.com/api/videolinks"

DEFAULT_USER_AGENT = "fightcade-api-python/0.1"


class ResultsCountCheck(Enum):
    """How the ``count`` of a list response is checked against its results."""
    EXACT = "exact"
    LEGACY_OFF_BY_ONE = "legacy_off_by_one"  # count == len(results) + 1
    IGNORE = "ignore"


@dataclass(frozen=True)
class ClientConfig:
    """Client configuration settings."""
    api_url: str = API_URL
    video_api_url: str = VIDEO_API_URL
    timeout: float = 30.0  # seconds, passed through to httpx
    user_agent: str = DEFAULT_USER_AGENT
    verify_ssl: bool = True
    results_count_check: ResultsCountCheck = ResultsCountCheck.EXACT

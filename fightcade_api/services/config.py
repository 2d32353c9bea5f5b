"""Configuration service for client settings."""

import os
from collections.abc import Mapping
from dataclasses import replace
from urllib.parse import urlparse

import structlog

from ..models import ClientConfig, ResultsCountCheck
from .errors import ConfigurationError

log = structlog.stdlib.get_logger()

ENV_API_URL = "FIGHTCADE_API_URL"
ENV_VIDEO_API_URL = "FIGHTCADE_VIDEO_API_URL"
ENV_TIMEOUT = "FIGHTCADE_TIMEOUT"
ENV_VERIFY_SSL = "FIGHTCADE_VERIFY_SSL"
ENV_COUNT_CHECK = "FIGHTCADE_COUNT_CHECK"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


class ValidationResult:
    """Result of configuration validation."""

    def __init__(self, is_valid: bool, errors: list[str] | None = None) -> None:
        self.is_valid: bool = is_valid
        self.errors: list[str] = errors or []


class ConfigurationService:
    """Builds and validates client configuration.

    There are no configuration files; the defaults can be overridden through
    ``FIGHTCADE_*`` environment variables.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self.environ: Mapping[str, str] = os.environ if environ is None else environ

    def load_config(self) -> ClientConfig:
        """Return the default configuration with environment overrides applied."""
        default = ClientConfig()
        try:
            config = self._apply_environment(default)
        except (TypeError, ValueError) as e:
            log.warning("Failed to read configuration from environment, using defaults", error=str(e))
            return default

        validation_result = self.validate_config(config)
        if not validation_result.is_valid:
            log.warning("Invalid configuration in environment, using defaults", errors=validation_result.errors)
            return default

        if config != default:
            log.debug("Configuration loaded from environment", api_url=config.api_url, timeout=config.timeout)
        return config

    def validate_config(self, config: ClientConfig) -> ValidationResult:
        """Validate configuration settings."""
        errors = []

        for name in ("api_url", "video_api_url"):
            value = getattr(config, name)
            parsed = urlparse(value) if isinstance(value, str) else None
            if parsed is None or parsed.scheme not in ("http", "https") or not parsed.netloc:
                errors.append(f"{name} must be an absolute http(s) URL")

        if isinstance(config.timeout, bool) or not isinstance(config.timeout, (int, float)) or config.timeout <= 0:
            errors.append("timeout must be a positive number")

        if not isinstance(config.user_agent, str) or not config.user_agent:
            errors.append("user_agent must be a non-empty string")

        if not isinstance(config.verify_ssl, bool):
            errors.append("verify_ssl must be a boolean")

        if not isinstance(config.results_count_check, ResultsCountCheck):
            errors.append("results_count_check must be a ResultsCountCheck")

        return ValidationResult(len(errors) == 0, errors)

    def ensure_valid(self, config: ClientConfig) -> None:
        """Raise ConfigurationError for an invalid configuration."""
        validation_result = self.validate_config(config)
        if not validation_result.is_valid:
            raise ConfigurationError(
                f"Invalid configuration: {', '.join(validation_result.errors)}",
                current_value=config,
            )

    def _apply_environment(self, config: ClientConfig) -> ClientConfig:
        changes: dict[str, object] = {}

        if self.environ.get(ENV_API_URL):
            changes["api_url"] = self.environ[ENV_API_URL]
        if self.environ.get(ENV_VIDEO_API_URL):
            changes["video_api_url"] = self.environ[ENV_VIDEO_API_URL]
        if self.environ.get(ENV_TIMEOUT):
            changes["timeout"] = float(self.environ[ENV_TIMEOUT])
        if self.environ.get(ENV_VERIFY_SSL):
            changes["verify_ssl"] = _parse_bool(self.environ[ENV_VERIFY_SSL], ENV_VERIFY_SSL)
        if self.environ.get(ENV_COUNT_CHECK):
            changes["results_count_check"] = ResultsCountCheck(self.environ[ENV_COUNT_CHECK].lower())

        return replace(config, **changes)


def _parse_bool(raw: str, setting: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{setting} must be a boolean, got {raw!r}")

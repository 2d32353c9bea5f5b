"""Logging configuration for applications using the Fightcade API client.

The library itself only emits structlog events; nothing is configured on
import. Applications call ``setup_logging`` once at startup.
"""

import logging
import os
import sys
from typing import Any

import structlog


class LoggingService:
    """Routes the client's structlog events through the standard library root logger.

    Set ``ENVIRONMENT=production`` for one JSON object per line; anything else
    gets human-readable console output.
    """

    def __init__(self, log_level: str = "INFO") -> None:
        """Initialize the logging service.

        Args:
            log_level: Minimum level of client events to emit
        """
        self.log_level = log_level.upper()
        self.is_development = os.getenv("ENVIRONMENT", "development") == "development"

    def configure(self) -> None:
        """Install the processors and the root handler. Replaces any earlier setup."""
        self._configure_stdlib_logging()

        structlog.configure(
            processors=self._get_processors(),
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

    def _configure_stdlib_logging(self) -> None:
        """Point the root logger at stdout."""
        root_logger = logging.getLogger()
        root_logger.handlers.clear()

        numeric_level = getattr(logging, self.log_level, logging.INFO)
        root_logger.setLevel(numeric_level)

        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(numeric_level)
        # structlog renders the whole line
        handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(handler)

        # httpx logs every request at INFO
        logging.getLogger("httpx").setLevel(max(numeric_level, logging.WARNING))

    def _get_processors(self) -> list[Any]:
        """Processors shared by both renderers, then the renderer itself."""
        common_processors = [
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
        ]

        if self.is_development:
            return common_processors + [structlog.dev.ConsoleRenderer(colors=True)]
        return common_processors + [structlog.processors.JSONRenderer()]

    def get_logger(self, name: str | None = None) -> structlog.stdlib.BoundLogger:
        """Return a logger bound to ``name``, e.g. ``"fightcade_api"``."""
        return structlog.stdlib.get_logger(name)


def setup_logging(log_level: str = "INFO", environment: str | None = None) -> LoggingService:
    """Configure logging for an application that uses the client.

    Args:
        log_level: Minimum level of client events to emit
        environment: "development" or "production"; exported as ``ENVIRONMENT``

    Returns:
        The configured LoggingService
    """
    if environment:
        os.environ["ENVIRONMENT"] = environment

    service = LoggingService(log_level=log_level)
    service.configure()
    return service

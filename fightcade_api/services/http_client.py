"""HTTP client service issuing single JSON POST requests."""

import json
from typing import Any

import httpx
import structlog

from ..models import ClientConfig
from .errors import TransportError, transport_error_from

log = structlog.stdlib.get_logger()


class HttpClientService:
    """Async JSON-over-POST transport. One call is one request; nothing is retried."""

    def __init__(
        self,
        timeout: float = 30.0,
        user_agent: str = "fightcade-api-python",
        verify_ssl: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the HTTP client service.

        Args:
            timeout: Request timeout in seconds
            user_agent: User-Agent header sent with every request
            verify_ssl: Whether to verify SSL certificates
            transport: Optional httpx transport, e.g. a MockTransport in tests
        """
        self.timeout = timeout

        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            headers={
                "User-Agent": user_agent,
                "Content-Type": "application/json",
            },
            follow_redirects=True,
            verify=verify_ssl,
            transport=transport,
        )

        log.debug(
            "HTTP client service initialized",
            timeout=timeout,
            verify_ssl=verify_ssl,
        )

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "HttpClientService":
        return cls(
            timeout=config.timeout,
            user_agent=config.user_agent,
            verify_ssl=config.verify_ssl,
            transport=transport,
        )

    async def post_json(self, url: str, payload: dict[str, Any]) -> Any:
        """POST a JSON payload and return the decoded JSON response.

        Args:
            url: The endpoint to post to
            payload: JSON-serializable request body

        Returns:
            The decoded response body

        Raises:
            TransportError: On network failure, non-2xx status or a non-JSON body
        """
        log.debug("Making HTTP POST request", url=url, payload=payload)

        try:
            response = await self._client.post(url, json=payload)
            response.raise_for_status()
        except httpx.HTTPError as e:
            log.warning(
                "HTTP POST request failed",
                url=url,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise transport_error_from(e, url) from e

        try:
            data = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            log.warning(
                "Response body is not JSON",
                url=url,
                status_code=response.status_code,
                content_length=len(response.content),
            )
            raise TransportError(
                "The server returned a body that is not valid JSON.",
                original_error=e,
                url=url,
                status_code=response.status_code,
            ) from e

        log.debug(
            "HTTP POST request successful",
            url=url,
            status_code=response.status_code,
            content_length=len(response.content),
        )
        return data

    async def close(self) -> None:
        """Close the HTTP client and clean up resources."""
        await self._client.aclose()
        log.debug("HTTP client closed")

    async def __aenter__(self) -> "HttpClientService":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: type[Exception] | None, exc_val: Exception | None, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()

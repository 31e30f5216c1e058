"""Base classes and utilities.

This module provides base classes and common utilities used throughout
the application.
"""

from abc import ABC
from typing import Any, Dict, Optional

import httpx
import structlog

from .exceptions import ExternalServiceError, UpstreamStatusError
from .monitoring import ExternalCallTimer


class BaseClient(ABC):
    """Base HTTP client class.

    Provides common functionality for HTTP clients with error handling
    and monitoring. Query parameters are never logged, since upstream
    credentials travel there.
    """

    def __init__(
        self,
        name: str,
        base_url: str,
        timeout: int = 30,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize the client.

        Args:
            name: Client name for logging and metrics.
            base_url: Base URL for the service.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport, e.g. ``httpx.MockTransport``.
        """
        self.name = name
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport
        self.logger = structlog.get_logger(f"{name}Client")

    def _build_url(self, path: str) -> str:
        """Build full URL from path.

        Args:
            path: URL path.

        Returns:
            str: Full URL.
        """
        path = path.lstrip("/")
        return f"{self.base_url}/{path}"

    def _log_request(self, method: str, url: str) -> None:
        self.logger.info(
            "Outgoing request",
            method=method,
            url=url,
            timeout=self.timeout,
        )

    def _log_response(self, method: str, url: str, status_code: int, duration: float) -> None:
        self.logger.info(
            "Response received",
            method=method,
            url=url,
            status_code=status_code,
            duration=f"{duration:.4f}s",
        )

    async def _get_json(self, path: str, params: Dict[str, Any]) -> Any:
        """Perform a GET request and decode the JSON body.

        Args:
            path: URL path relative to the base URL.
            params: Query parameters, credentials included.

        Returns:
            Any: Decoded JSON body.

        Raises:
            UpstreamStatusError: If the service answers with a non-2xx status.
            ExternalServiceError: On timeouts, transport errors or an undecodable body.
        """
        url = self._build_url(path)

        self._log_request("GET", url)

        with ExternalCallTimer(self.name) as timer:
            try:
                async with httpx.AsyncClient(
                    transport=self.transport,
                    timeout=self.timeout,
                    follow_redirects=True,
                ) as client:
                    response = await client.get(url, params=params)
            except httpx.TimeoutException as e:
                raise ExternalServiceError(
                    f"{self.name} request timed out",
                    service=self.name,
                    details={"url": url},
                    cause=e,
                )
            except httpx.RequestError as e:
                raise ExternalServiceError(
                    f"{self.name} request failed: {type(e).__name__}",
                    service=self.name,
                    details={"url": url},
                    cause=e,
                )
            timer.status_code = response.status_code

        self._log_response("GET", url, response.status_code, timer.duration)

        # Redirects are followed; only the final status counts
        if not response.is_success:
            raise UpstreamStatusError(
                f"{self.name} API Error: {response.reason_phrase}",
                service=self.name,
                status_code=response.status_code,
                reason=response.reason_phrase,
                path=url,
            )

        try:
            return response.json()
        except ValueError as e:
            raise ExternalServiceError(
                f"{self.name} returned a non-JSON body",
                service=self.name,
                status_code=response.status_code,
                details={"url": url},
                cause=e,
            )

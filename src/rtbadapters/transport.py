"""
HTTP transport for outbound exchange calls.

Executes the calls adapters describe. Owns connection pooling and
per-call timeouts; never retries.
"""

from typing import Optional

import requests

from .exceptions import TransportError, TransportTimeoutError
from .logging import http_logger
from .models.bidder import HttpRequest, HttpResponse


class HttpTransport:
    """Blocking transport backed by a pooled ``requests.Session``."""

    def __init__(self, session: Optional[requests.Session] = None):
        self._session = session or requests.Session()
        self._logger = http_logger()

    def execute(self, request: HttpRequest, timeout_ms: int) -> HttpResponse:
        """
        Send one outbound call.

        Args:
            request: Call description built by an adapter
            timeout_ms: Deadline for the whole call

        Returns:
            The exchange's status code, body and headers

        Raises:
            TransportTimeoutError: If the deadline passes
            TransportError: On any other network failure
        """
        try:
            response = self._session.request(
                request.method,
                request.uri,
                data=request.body.encode("utf-8"),
                headers=request.headers,
                timeout=timeout_ms / 1000.0,
            )
        except requests.Timeout as e:
            self._logger.warning("Call timed out", uri=request.uri, timeout_ms=timeout_ms)
            raise TransportTimeoutError(
                f"Timeout of {timeout_ms}ms exceeded calling {request.uri}"
            ) from e
        except requests.RequestException as e:
            self._logger.warning("Call failed", uri=request.uri, error=str(e))
            raise TransportError(f"Request to {request.uri} failed: {e}") from e

        self._logger.debug("Call completed", uri=request.uri, status_code=response.status_code)
        return HttpResponse(
            status_code=response.status_code,
            body=response.text,
            headers=dict(response.headers),
        )

    def close(self) -> None:
        self._session.close()

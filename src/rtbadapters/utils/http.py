"""HTTP helpers shared by adapters."""

from urllib.parse import urlparse

from ..exceptions import InvalidAdapterConfigError
from .constants import APPLICATION_JSON_CONTENT_TYPE


def validate_url(url: str) -> str:
    """
    Check that an endpoint URL is well formed.

    Called when an adapter is constructed so a bad endpoint fails at
    startup instead of on every auction.

    Returns:
        The URL unchanged

    Raises:
        InvalidAdapterConfigError: If the URL is empty or malformed
    """
    if not url or any(c.isspace() for c in url):
        raise InvalidAdapterConfigError(f"URL supplied is not valid: {url}")

    try:
        parsed = urlparse(url)
        # Accessing the port validates it
        parsed.port
    except ValueError as e:
        raise InvalidAdapterConfigError(f"URL supplied is not valid: {url}") from e

    if parsed.scheme not in ("http", "https") or not parsed.hostname:
        raise InvalidAdapterConfigError(f"URL supplied is not valid: {url}")

    return url


def json_headers() -> dict[str, str]:
    """Headers sent with every OpenRTB call."""
    return {
        "Content-Type": APPLICATION_JSON_CONTENT_TYPE,
        "Accept": "application/json",
    }

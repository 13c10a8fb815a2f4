"""
Bidder Registry - builds exchange adapters from configuration.

Every configured exchange gets one adapter instance at startup. Disabled
exchanges get a DisabledBidder so they stay in the configuration and
report why they produced no bids.
"""

from collections.abc import Callable
from pathlib import Path
from typing import Optional

from ..config.settings import AdapterSettings, AdaptersConfig, load_adapters_config
from ..exceptions import InvalidAdapterConfigError
from ..logging import config_logger
from ..utils.constants import DEFAULT_DISABLED_MESSAGE
from ..utils.json_mapper import JsonMapper
from .adoppler import BIDDER_CODE as ADOPPLER, AdopplerBidder
from .base import Bidder
from .disabled import DisabledBidder

# Factories taking (endpoint_url, mapper)
BIDDER_FACTORIES: dict[str, Callable[[str, JsonMapper], Bidder]] = {
    ADOPPLER: AdopplerBidder,
}

logger = config_logger()


class BidderRegistry:
    """Lookup of ready-to-use adapters by bidder code."""

    def __init__(self, config: AdaptersConfig, mapper: Optional[JsonMapper] = None):
        """
        Build every configured adapter.

        Args:
            config: Adapter settings
            mapper: JSON mapper shared by all adapters

        Raises:
            InvalidAdapterConfigError: On an unknown bidder, a missing or
                malformed endpoint
        """
        self._mapper = mapper or JsonMapper()
        self._settings = dict(config.adapters)
        self._bidders: dict[str, Bidder] = {
            code: self._create_bidder(settings) for code, settings in self._settings.items()
        }

    @classmethod
    def from_file(cls, path: str | Path | None = None) -> "BidderRegistry":
        """Build a registry from a YAML config file."""
        return cls(load_adapters_config(path))

    def _create_bidder(self, settings: AdapterSettings) -> Bidder:
        code = settings.bidder_code
        factory = BIDDER_FACTORIES.get(code)
        if factory is None:
            raise InvalidAdapterConfigError(f"Unknown bidder: {code}")

        if not settings.enabled:
            message = settings.disabled_message or DEFAULT_DISABLED_MESSAGE.format(bidder=code)
            logger.info("Bidder disabled", bidder=code)
            return DisabledBidder(message)

        if not settings.endpoint:
            raise InvalidAdapterConfigError(f"adapters.{code}.endpoint is required")
        return factory(settings.endpoint, self._mapper)

    def get(self, bidder_code: str) -> Optional[Bidder]:
        return self._bidders.get(bidder_code)

    def settings(self, bidder_code: str) -> Optional[AdapterSettings]:
        return self._settings.get(bidder_code)

    def is_enabled(self, bidder_code: str) -> bool:
        settings = self._settings.get(bidder_code)
        return settings is not None and settings.enabled

    def bidder_codes(self) -> list[str]:
        return sorted(self._bidders)

    def enabled_bidder_codes(self) -> list[str]:
        return [code for code in self.bidder_codes() if self.is_enabled(code)]


_registry: Optional[BidderRegistry] = None


def get_bidder_registry() -> BidderRegistry:
    """Get the global bidder registry, loading it on first use."""
    global _registry
    if _registry is None:
        _registry = BidderRegistry.from_file()
    return _registry

"""
OpenRTB Bidder Adapters

Each adapter implements the Bidder protocol for one exchange:

- base.py: The Bidder protocol
- imp_ext.py: Decoding of imp.ext.bidder parameters
- media_types.py: Impression media type resolution
- response_status.py: Exchange status code classification
- adoppler.py: The Adoppler exchange
- disabled.py: Stand-in for exchanges switched off in configuration
- registry.py: Builds adapters from configuration

Usage:
    from rtbadapters.bidders import get_bidder_registry

    registry = get_bidder_registry()
    bidder = registry.get("adoppler")
    result = bidder.make_http_requests(bid_request)
"""

from .adoppler import AdopplerBidder, ExtImpAdoppler
from .base import Bidder
from .disabled import DisabledBidder
from .imp_ext import parse_imp_ext
from .media_types import resolve_imp_types
from .registry import BIDDER_FACTORIES, BidderRegistry, get_bidder_registry
from .response_status import ResponseStatus, classify_status, status_result

__all__ = [
    "Bidder",
    "AdopplerBidder",
    "ExtImpAdoppler",
    "DisabledBidder",
    "BIDDER_FACTORIES",
    "BidderRegistry",
    "get_bidder_registry",
    "parse_imp_ext",
    "resolve_imp_types",
    "ResponseStatus",
    "classify_status",
    "status_result",
]

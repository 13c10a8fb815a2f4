"""
Bidder contract.

A bidder translates one normalized bid request into the calls an
exchange expects and translates the exchange's answers back into bids.
Bidders hold only immutable configuration, so one instance may serve
any number of concurrent auctions.
"""

from typing import Any, Protocol

from ..models.bidder import BidderBid, HttpCall, HttpRequest, Result
from ..models.openrtb import BidRequest


class Bidder(Protocol):
    """Protocol implemented by every exchange adapter."""

    def make_http_requests(self, request: BidRequest) -> Result[list[HttpRequest]]:
        """
        Build the outbound calls for a bid request.

        Errors for individual impressions are collected in the result and
        never stop the remaining impressions from being processed.
        """
        ...

    def make_bids(self, http_call: HttpCall, bid_request: BidRequest) -> Result[list[BidderBid]]:
        """Parse one exchange response into normalized bids."""
        ...

    def extract_targeting(self, ext: dict[str, Any]) -> dict[str, str]:
        """Return exchange-specific targeting keywords for a bid extension."""
        ...

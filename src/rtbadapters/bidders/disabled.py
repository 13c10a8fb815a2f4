"""Stand-in bidder for exchanges that are configured but switched off."""

from typing import Any

from ..exceptions import UnsupportedOperationError
from ..models.bidder import BidderBid, BidderError, HttpCall, HttpRequest, Result
from ..models.openrtb import BidRequest


class DisabledBidder:
    """
    Bidder that never bids.

    Every request-building call returns no calls and one error carrying
    the configured message. Since no calls are built, an orchestrator must
    never ask it to parse a response.
    """

    def __init__(self, error_message: str):
        if error_message is None:
            raise ValueError("error_message is required")
        self._error_message = error_message

    @property
    def error_message(self) -> str:
        return self._error_message

    def make_http_requests(self, request: BidRequest) -> Result[list[HttpRequest]]:
        return Result.of([], [BidderError.bad_input(self._error_message)])

    def make_bids(self, http_call: HttpCall, bid_request: BidRequest) -> Result[list[BidderBid]]:
        raise UnsupportedOperationError("disabled bidder never issues requests")

    def extract_targeting(self, ext: dict[str, Any]) -> dict[str, str]:
        raise UnsupportedOperationError("disabled bidder never produces bids")

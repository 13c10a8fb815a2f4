"""
Bidder Requester - runs one exchange adapter for one auction.

Builds the adapter's calls, sends them concurrently, and parses every
response that came back. Transport failures become errors alongside the
adapter's own; the adapter never sees calls that failed to complete.
"""

import contextvars
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Optional, Protocol

from .bidders.base import Bidder
from .exceptions import TransportError, TransportTimeoutError
from .logging import auction_context, bidder_logger
from .models.bidder import BidderBid, BidderError, HttpCall, HttpRequest, HttpResponse
from .models.openrtb import BidRequest
from .utils.constants import DEFAULT_TIMEOUT_MS


class Transport(Protocol):
    """Protocol for executing outbound calls."""

    def execute(self, request: HttpRequest, timeout_ms: int) -> HttpResponse:
        ...


@dataclass
class BidderSeatBid:
    """Everything one exchange produced for one auction."""

    bidder_code: str
    bids: list[BidderBid] = field(default_factory=list)
    errors: list[BidderError] = field(default_factory=list)
    http_calls: list[HttpCall] = field(default_factory=list)


@dataclass
class _CallOutcome:
    request: HttpRequest
    response: Optional[HttpResponse] = None
    error: Optional[BidderError] = None


class BidderRequester:
    """Drives a single bidder through build, send and parse."""

    def __init__(
        self,
        bidder_code: str,
        bidder: Bidder,
        transport: Transport,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        max_workers: int = 8,
    ):
        self.bidder_code = bidder_code
        self._bidder = bidder
        self._transport = transport
        self._timeout_ms = timeout_ms
        self._max_workers = max_workers
        self._logger = bidder_logger(bidder_code)

    def request_bids(self, bid_request: BidRequest) -> BidderSeatBid:
        """
        Collect bids from the exchange for a bid request.

        Args:
            bid_request: Normalized auction request

        Returns:
            Bids, errors and the completed calls, in call order
        """
        with auction_context(bid_request.id, self.bidder_code):
            built = self._bidder.make_http_requests(bid_request)
            seat_bid = BidderSeatBid(self.bidder_code, errors=list(built.errors))

            if not built.value:
                self._logger.info("No calls built", errors=len(seat_bid.errors))
                return seat_bid

            for outcome in self._execute_all(built.value):
                if outcome.error is not None:
                    seat_bid.errors.append(outcome.error)
                    continue

                http_call = HttpCall(outcome.request, outcome.response)
                seat_bid.http_calls.append(http_call)
                result = self._bidder.make_bids(http_call, bid_request)
                seat_bid.bids.extend(result.value)
                seat_bid.errors.extend(result.errors)

            self._logger.info(
                "Bidder finished",
                calls=len(built.value),
                bids=len(seat_bid.bids),
                errors=len(seat_bid.errors),
            )
            return seat_bid

    def _execute_all(self, requests: list[HttpRequest]) -> list[_CallOutcome]:
        if len(requests) == 1:
            return [self._execute(requests[0])]
        workers = min(len(requests), self._max_workers)
        with ThreadPoolExecutor(max_workers=workers) as executor:
            # Workers log under the caller's auction context
            futures = [
                executor.submit(contextvars.copy_context().run, self._execute, request)
                for request in requests
            ]
            return [future.result() for future in futures]

    def _execute(self, request: HttpRequest) -> _CallOutcome:
        try:
            response = self._transport.execute(request, self._timeout_ms)
        except TransportTimeoutError as e:
            return _CallOutcome(request, error=BidderError.timeout(str(e)))
        except TransportError as e:
            return _CallOutcome(request, error=BidderError.generic(str(e)))
        return _CallOutcome(request, response=response)

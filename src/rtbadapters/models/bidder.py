"""
Adapter contract values.

These are the types exchanged between an adapter and the auction
orchestrator: outbound call descriptions, the responses to them,
normalized bids, and collected errors.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

from .openrtb import Bid, BidRequest

T = TypeVar("T")


class BidType(str, Enum):
    """Media type of an impression or bid."""

    BANNER = "banner"
    VIDEO = "video"
    AUDIO = "audio"
    NATIVE = "native"


class ErrorType(str, Enum):
    """Classification of a collected bidder error."""

    BAD_INPUT = "bad_input"  # Fault in the auction request or imp config
    BAD_SERVER_RESPONSE = "bad_server_response"  # Fault in what the exchange returned
    TIMEOUT = "timeout"  # Reported by the transport, never by an adapter
    GENERIC = "generic"  # Reported by the transport, never by an adapter


@dataclass(frozen=True)
class BidderError:
    """An error collected while building requests or parsing responses."""

    message: str
    type: ErrorType

    @classmethod
    def bad_input(cls, message: str) -> "BidderError":
        return cls(message, ErrorType.BAD_INPUT)

    @classmethod
    def bad_server_response(cls, message: str) -> "BidderError":
        return cls(message, ErrorType.BAD_SERVER_RESPONSE)

    @classmethod
    def timeout(cls, message: str) -> "BidderError":
        return cls(message, ErrorType.TIMEOUT)

    @classmethod
    def generic(cls, message: str) -> "BidderError":
        return cls(message, ErrorType.GENERIC)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"message": self.message, "type": self.type.value}


@dataclass(frozen=True)
class HttpRequest:
    """
    Description of one outbound call to an exchange.

    Attributes:
        method: HTTP method (always POST for OpenRTB)
        uri: Exchange endpoint URL
        headers: Request headers, including the OpenRTB version header
        body: Serialized request body
        payload: The per-call bid request the body was encoded from
    """

    method: str
    uri: str
    headers: dict[str, str]
    body: str
    payload: Optional[BidRequest] = None


@dataclass(frozen=True)
class HttpResponse:
    """Status code and raw body returned for one outbound call."""

    status_code: int
    body: str = ""
    headers: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class HttpCall:
    """An outbound call paired with the response it produced."""

    request: HttpRequest
    response: HttpResponse


@dataclass(frozen=True)
class ExtBidPrebidVideo:
    """Video metadata extracted from a bid."""

    duration: int
    primary_category: str

    def to_dict(self) -> dict[str, Any]:
        return {"duration": self.duration, "primary_category": self.primary_category}


@dataclass(frozen=True)
class BidderBid:
    """
    A bid normalized for the outer auction.

    Attributes:
        bid: The bid as returned by the exchange
        type: Media type resolved from the matching impression
        bid_currency: ISO 4217 currency of the bid price
        video_info: Duration and primary category for video bids
    """

    bid: Bid
    type: BidType
    bid_currency: str
    video_info: Optional[ExtBidPrebidVideo] = None


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of an adapter call.

    Always carries both a value and the errors collected while producing
    it; errors do not imply an empty value.
    """

    value: T
    errors: list[BidderError] = field(default_factory=list)

    @classmethod
    def of(cls, value: T, errors: list[BidderError]) -> "Result[T]":
        return cls(value, list(errors))

    @classmethod
    def empty(cls) -> "Result[list]":
        return cls([], [])

    @classmethod
    def empty_with_error(cls, error: BidderError) -> "Result[list]":
        return cls([], [error])

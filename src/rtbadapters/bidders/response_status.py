"""Classification of exchange HTTP status codes."""

from enum import Enum
from typing import Optional

from ..models.bidder import BidderBid, BidderError, Result

HTTP_NO_CONTENT = 204
HTTP_BAD_REQUEST = 400


class ResponseStatus(str, Enum):
    """What an exchange response status means for bid parsing."""

    NO_BID = "no_bid"
    BAD_INPUT = "bad_input"
    BAD_SERVER_RESPONSE = "bad_server_response"
    SUCCESS = "success"


def classify_status(status_code: int) -> ResponseStatus:
    """Classify an exchange response by its status code."""
    if status_code == HTTP_NO_CONTENT:
        return ResponseStatus.NO_BID
    if status_code == HTTP_BAD_REQUEST:
        return ResponseStatus.BAD_INPUT
    if not 200 <= status_code < 300:
        return ResponseStatus.BAD_SERVER_RESPONSE
    return ResponseStatus.SUCCESS


def status_result(status_code: int) -> Optional[Result[list[BidderBid]]]:
    """
    Return the final result for a status that leaves no body to parse.

    Returns None when the status is a success and the body should be parsed.
    """
    status = classify_status(status_code)
    if status == ResponseStatus.NO_BID:
        return Result.empty()
    if status == ResponseStatus.BAD_INPUT:
        return Result.empty_with_error(BidderError.bad_input("bad request"))
    if status == ResponseStatus.BAD_SERVER_RESPONSE:
        return Result.empty_with_error(
            BidderError.bad_server_response(f"Unexpected HTTP status {status_code}.")
        )
    return None

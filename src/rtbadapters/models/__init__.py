"""Data models for the adapter layer."""

from .bidder import (
    BidderBid,
    BidderError,
    BidType,
    ErrorType,
    ExtBidPrebidVideo,
    HttpCall,
    HttpRequest,
    HttpResponse,
    Result,
)
from .openrtb import Bid, BidRequest, BidResponse, Imp, SeatBid

__all__ = [
    'Bid',
    'BidRequest',
    'BidResponse',
    'Imp',
    'SeatBid',
    'BidderBid',
    'BidderError',
    'BidType',
    'ErrorType',
    'ExtBidPrebidVideo',
    'HttpCall',
    'HttpRequest',
    'HttpResponse',
    'Result',
]

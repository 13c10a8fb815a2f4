"""
RTB bid adapters.

Translates normalized OpenRTB auction requests into the calls each
downstream exchange expects, and the exchanges' responses back into
normalized bids, collecting per-impression and per-response errors
without aborting the auction.
"""

from .bidders import AdopplerBidder, Bidder, BidderRegistry, DisabledBidder
from .models import (
    BidderBid,
    BidderError,
    BidRequest,
    BidResponse,
    BidType,
    ErrorType,
    HttpCall,
    HttpRequest,
    HttpResponse,
    Imp,
    Result,
)
from .requester import BidderRequester, BidderSeatBid
from .transport import HttpTransport
from .utils import JsonMapper

__version__ = '1.0.0'

__all__ = [
    'Bidder',
    'AdopplerBidder',
    'DisabledBidder',
    'BidderRegistry',
    'BidderRequester',
    'BidderSeatBid',
    'HttpTransport',
    'JsonMapper',
    'BidRequest',
    'BidResponse',
    'Imp',
    'BidderBid',
    'BidderError',
    'BidType',
    'ErrorType',
    'HttpCall',
    'HttpRequest',
    'HttpResponse',
    'Result',
]

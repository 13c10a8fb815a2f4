"""
Adoppler adapter.

Adoppler takes one OpenRTB request per ad unit, so every impression is
sent in its own call with the request id suffixed by the ad unit name.
Video bids carry their duration in ``bid.ext.ads.video``.
"""

from dataclasses import dataclass, replace
from typing import Any, Optional

from ..exceptions import DecodeError, InvalidRequestError, InvalidResponseError
from ..logging import bidder_logger
from ..models.bidder import (
    BidderBid,
    BidderError,
    BidType,
    ExtBidPrebidVideo,
    HttpCall,
    HttpRequest,
    Result,
)
from ..models.fields import optional_field, require_object
from ..models.openrtb import Bid, BidRequest, BidResponse, Imp
from ..utils.constants import DEFAULT_BID_CURRENCY, OPENRTB_VERSION, OPENRTB_VERSION_HEADER
from ..utils.http import json_headers, validate_url
from ..utils.json_mapper import JsonMapper
from .imp_ext import parse_imp_ext
from .media_types import resolve_imp_types
from .response_status import status_result

BIDDER_CODE = "adoppler"


@dataclass(frozen=True)
class ExtImpAdoppler:
    """Adoppler parameters from ``imp.ext.bidder``."""

    adunit: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "ExtImpAdoppler":
        data = require_object(data, "$.imp.ext.adoppler")
        return cls(adunit=optional_field(data, "adunit", str, "$.imp.ext.adoppler") or "")


@dataclass(frozen=True)
class AdopplerResponseVideoExt:
    duration: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Any) -> "AdopplerResponseVideoExt":
        path = "$.seatbid.bid.ext.ads.video"
        data = require_object(data, path)
        return cls(duration=optional_field(data, "duration", int, path))


@dataclass(frozen=True)
class AdopplerResponseAdsExt:
    video: Optional[AdopplerResponseVideoExt] = None

    @classmethod
    def from_dict(cls, data: Any) -> "AdopplerResponseAdsExt":
        data = require_object(data, "$.seatbid.bid.ext.ads")
        video = data.get("video")
        return cls(video=None if video is None else AdopplerResponseVideoExt.from_dict(video))


@dataclass(frozen=True)
class AdopplerResponseExt:
    """Adoppler's ``bid.ext``."""

    ads: Optional[AdopplerResponseAdsExt] = None

    @classmethod
    def from_dict(cls, data: Any) -> "AdopplerResponseExt":
        data = require_object(data, "$.seatbid.bid.ext")
        ads = data.get("ads")
        return cls(ads=None if ads is None else AdopplerResponseAdsExt.from_dict(ads))


class AdopplerBidder:
    """
    Bidder for the Adoppler exchange.

    Holds only the validated endpoint and the shared JSON mapper.
    """

    def __init__(self, endpoint_url: str, mapper: JsonMapper):
        """
        Initialize the bidder.

        Args:
            endpoint_url: Adoppler OpenRTB endpoint
            mapper: JSON mapper used for request and response bodies

        Raises:
            InvalidAdapterConfigError: If the endpoint URL is malformed
        """
        self._endpoint_url = validate_url(endpoint_url)
        self._mapper = mapper
        self._logger = bidder_logger(BIDDER_CODE)

    @property
    def endpoint_url(self) -> str:
        return self._endpoint_url

    def make_http_requests(self, request: BidRequest) -> Result[list[HttpRequest]]:
        """Build one call per impression; bad impressions are reported and skipped."""
        http_requests: list[HttpRequest] = []
        errors: list[BidderError] = []
        used_ids: set[str] = set()

        for imp in request.imp:
            try:
                ext_imp = self._parse_and_validate_imp_ext(imp)
            except InvalidRequestError as e:
                errors.append(BidderError.bad_input(str(e)))
                continue

            # Ad units shared by several impressions also get the imp id
            outgoing_id = f"{request.id}-{ext_imp.adunit}"
            if outgoing_id in used_ids:
                outgoing_id = f"{outgoing_id}-{imp.id}"
            used_ids.add(outgoing_id)

            outgoing_request = replace(request, id=outgoing_id, imp=(imp,))
            headers = json_headers()
            headers[OPENRTB_VERSION_HEADER] = OPENRTB_VERSION
            http_requests.append(
                HttpRequest(
                    method="POST",
                    uri=self._endpoint_url,
                    headers=headers,
                    body=self._mapper.encode(outgoing_request),
                    payload=outgoing_request,
                )
            )

        self._logger.debug(
            "Built outbound requests",
            auction_id=request.id,
            calls=len(http_requests),
            errors=len(errors),
        )
        return Result.of(http_requests, errors)

    def _parse_and_validate_imp_ext(self, imp: Imp) -> ExtImpAdoppler:
        ext_imp = parse_imp_ext(imp, ExtImpAdoppler, self._mapper)
        if not ext_imp.adunit.strip():
            raise InvalidRequestError("$.imp.ext.adoppler.adunit required")
        return ext_imp

    def make_bids(self, http_call: HttpCall, bid_request: BidRequest) -> Result[list[BidderBid]]:
        """
        Parse an Adoppler response.

        Any bid that cannot be matched to an impression, or a video bid
        without its video extension, discards the whole response.
        """
        early_result = status_result(http_call.response.status_code)
        if early_result is not None:
            return early_result

        try:
            bid_response = self._mapper.decode_value(http_call.response.body, BidResponse)
        except DecodeError as e:
            return self._discard(BidderError.bad_server_response(f"invalid body: {e}"))

        try:
            imp_types = resolve_imp_types(bid_request.imp)
        except InvalidRequestError as e:
            return self._discard(BidderError.bad_input(str(e)))

        currency = bid_response.cur or DEFAULT_BID_CURRENCY
        bidder_bids: list[BidderBid] = []
        try:
            for seat_bid in bid_response.seatbid:
                for bid in seat_bid.bid:
                    bidder_bids.append(self._make_bidder_bid(bid, imp_types, currency))
        except InvalidResponseError as e:
            return self._discard(BidderError.bad_server_response(str(e)))

        return Result.of(bidder_bids, [])

    def _make_bidder_bid(
        self,
        bid: Bid,
        imp_types: dict[str, BidType],
        currency: str,
    ) -> BidderBid:
        bid_type = imp_types.get(bid.impid)
        if bid_type is None:
            raise InvalidResponseError(f"unknown impid: {bid.impid}")

        video_info = None
        if bid_type == BidType.VIDEO:
            video_info = self._video_info(bid)

        return BidderBid(bid=bid, type=bid_type, bid_currency=currency, video_info=video_info)

    def _video_info(self, bid: Bid) -> ExtBidPrebidVideo:
        try:
            response_ext = self._mapper.convert_value(bid.ext or {}, AdopplerResponseExt)
        except DecodeError as e:
            raise InvalidResponseError(str(e)) from e

        if response_ext.ads is None or response_ext.ads.video is None:
            raise InvalidResponseError("$.seatbid.bid.ext.ads.video required")

        return ExtBidPrebidVideo(
            duration=response_ext.ads.video.duration or 0,
            primary_category=bid.cat[0] if bid.cat else "",
        )

    def _discard(self, error: BidderError) -> Result[list[BidderBid]]:
        self._logger.warning("Discarding response", error=error.message, error_type=error.type.value)
        return Result.empty_with_error(error)

    def extract_targeting(self, ext: dict[str, Any]) -> dict[str, str]:
        return {}

"""
Tests for the shared adapter building blocks.

- Media type resolution
- Status code classification
- imp.ext decoding
- URL validation
"""

import pytest

from rtbadapters.bidders.adoppler import ExtImpAdoppler
from rtbadapters.bidders.imp_ext import parse_imp_ext
from rtbadapters.bidders.media_types import imp_media_types, resolve_imp_types
from rtbadapters.bidders.response_status import ResponseStatus, classify_status, status_result
from rtbadapters.exceptions import InvalidAdapterConfigError, InvalidRequestError
from rtbadapters.models.bidder import BidType, ErrorType
from rtbadapters.models.openrtb import Imp
from rtbadapters.utils.http import json_headers, validate_url
from rtbadapters.utils.json_mapper import JsonMapper


class TestMediaTypes:
    """Test suite for impression media type resolution."""

    @pytest.mark.parametrize(
        "field,expected",
        [
            ("banner", BidType.BANNER),
            ("video", BidType.VIDEO),
            ("audio", BidType.AUDIO),
            ("native", BidType.NATIVE),
        ],
    )
    def test_single_descriptor(self, field, expected):
        """Test that the populated descriptor decides the type."""
        imp = Imp(id="imp-1", **{field: {}})

        assert resolve_imp_types([imp]) == {"imp-1": expected}

    def test_multiple_impressions(self):
        """Test resolving several impressions at once."""
        imps = [Imp(id="a", banner={}), Imp(id="b", video={})]

        assert resolve_imp_types(imps) == {"a": BidType.BANNER, "b": BidType.VIDEO}

    def test_no_descriptor(self):
        """Test that an impression without a descriptor is rejected."""
        with pytest.raises(InvalidRequestError) as exc_info:
            resolve_imp_types([Imp(id="imp-9")])

        message = str(exc_info.value)
        assert "imp-9" in message
        for field in ("$.imp.banner", "$.imp.video", "$.imp.audio", "$.imp.native"):
            assert field in message

    def test_ambiguous_descriptor(self):
        """Test that an impression with two descriptors is rejected."""
        with pytest.raises(InvalidRequestError, match="imp-1"):
            resolve_imp_types([Imp(id="imp-1", banner={}, video={})])

    def test_priority_order(self):
        """Test that descriptors are listed banner, video, audio, native."""
        imp = Imp(id="x", native={}, audio={}, video={}, banner={})

        assert imp_media_types(imp) == [
            BidType.BANNER, BidType.VIDEO, BidType.AUDIO, BidType.NATIVE,
        ]

    def test_duplicate_ids(self):
        """Test that duplicate impression ids are rejected."""
        with pytest.raises(InvalidRequestError, match=r"duplicate \$\.imp\.id a"):
            resolve_imp_types([Imp(id="a", banner={}), Imp(id="a", banner={})])

    def test_empty(self):
        assert resolve_imp_types([]) == {}


class TestResponseStatus:
    """Test suite for status code classification."""

    @pytest.mark.parametrize(
        "status_code,expected",
        [
            (200, ResponseStatus.SUCCESS),
            (201, ResponseStatus.SUCCESS),
            (204, ResponseStatus.NO_BID),
            (400, ResponseStatus.BAD_INPUT),
            (301, ResponseStatus.BAD_SERVER_RESPONSE),
            (404, ResponseStatus.BAD_SERVER_RESPONSE),
            (500, ResponseStatus.BAD_SERVER_RESPONSE),
            (503, ResponseStatus.BAD_SERVER_RESPONSE),
        ],
    )
    def test_classify(self, status_code, expected):
        assert classify_status(status_code) == expected

    def test_success_has_no_early_result(self):
        """Test that success leaves the body to be parsed."""
        assert status_result(200) is None

    def test_no_bid_result(self):
        result = status_result(204)

        assert result.value == []
        assert result.errors == []

    def test_server_error_result(self):
        """Test that the server error names the status code."""
        result = status_result(503)

        assert result.errors[0].type == ErrorType.BAD_SERVER_RESPONSE
        assert result.errors[0].message == "Unexpected HTTP status 503."


class TestImpExt:
    """Test suite for imp.ext.bidder decoding."""

    @pytest.fixture
    def mapper(self):
        return JsonMapper()

    def test_decode(self, mapper):
        imp = Imp(id="1", banner={}, ext={"bidder": {"adunit": "top", "other": 1}})

        assert parse_imp_ext(imp, ExtImpAdoppler, mapper) == ExtImpAdoppler(adunit="top")

    def test_missing_bidder(self, mapper):
        """Test that a missing bidder object decodes as empty params."""
        imp = Imp(id="1", banner={}, ext={"prebid": {}})

        assert parse_imp_ext(imp, ExtImpAdoppler, mapper) == ExtImpAdoppler(adunit="")

    def test_wrong_shape(self, mapper):
        """Test that decode failures become InvalidRequestError."""
        imp = Imp(id="1", banner={}, ext={"bidder": ["top"]})

        with pytest.raises(InvalidRequestError, match="expected object"):
            parse_imp_ext(imp, ExtImpAdoppler, mapper)


class TestHttpUtils:
    """Test suite for HTTP helpers."""

    @pytest.mark.parametrize(
        "url",
        [
            "http://adoppler.example.com/processHeaderBid",
            "https://bid.example.com:8443/openrtb?x=1",
            "http://localhost:8080/bid",
        ],
    )
    def test_valid_urls(self, url):
        assert validate_url(url) == url

    @pytest.mark.parametrize(
        "url",
        ["", "example.com/bid", "ftp://example.com", "http://", "http://host:port/", "http://a b.com"],
    )
    def test_invalid_urls(self, url):
        with pytest.raises(InvalidAdapterConfigError, match="URL supplied is not valid"):
            validate_url(url)

    def test_json_headers(self):
        headers = json_headers()

        assert headers["Content-Type"] == "application/json;charset=utf-8"
        assert headers["Accept"] == "application/json"

    def test_json_headers_fresh_copy(self):
        """Test that callers can add headers without affecting others."""
        json_headers()["x-extra"] = "1"

        assert "x-extra" not in json_headers()

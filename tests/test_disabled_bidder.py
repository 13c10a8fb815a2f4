"""Tests for the disabled bidder."""

import pytest

from rtbadapters.bidders.disabled import DisabledBidder
from rtbadapters.exceptions import UnsupportedOperationError
from rtbadapters.models.bidder import ErrorType, HttpCall, HttpRequest, HttpResponse
from rtbadapters.models.openrtb import BidRequest, Imp


class TestDisabledBidder:
    """Test suite for DisabledBidder."""

    @pytest.fixture
    def bidder(self):
        return DisabledBidder("adoppler is paused")

    @pytest.fixture
    def bid_request(self):
        return BidRequest(id="req-1", imp=(Imp(id="imp-1", banner={}),))

    def test_make_http_requests(self, bidder, bid_request):
        """Test that no calls are built and the message is reported once."""
        result = bidder.make_http_requests(bid_request)

        assert result.value == []
        assert len(result.errors) == 1
        assert result.errors[0].message == "adoppler is paused"
        assert result.errors[0].type == ErrorType.BAD_INPUT

    def test_empty_request(self, bidder):
        """Test that any input gets the same answer."""
        result = bidder.make_http_requests(BidRequest(id="empty"))

        assert result.value == []
        assert [e.message for e in result.errors] == ["adoppler is paused"]

    def test_make_bids_is_contract_violation(self, bidder, bid_request):
        """Test that parsing a response is never allowed."""
        call = HttpCall(
            HttpRequest(method="POST", uri="http://x.example.com", headers={}, body=""),
            HttpResponse(status_code=200, body="{}"),
        )

        with pytest.raises(UnsupportedOperationError):
            bidder.make_bids(call, bid_request)

    def test_extract_targeting_is_contract_violation(self, bidder):
        with pytest.raises(UnsupportedOperationError):
            bidder.extract_targeting({})

    def test_message_required(self):
        with pytest.raises(ValueError):
            DisabledBidder(None)

"""Adapter constants."""

# Currency assumed when an exchange does not report one
DEFAULT_BID_CURRENCY = "USD"

APPLICATION_JSON_CONTENT_TYPE = "application/json;charset=utf-8"

# Header advertising the OpenRTB protocol version of the request body
OPENRTB_VERSION_HEADER = "x-openrtb-version"
OPENRTB_VERSION = "2.5"

DEFAULT_TIMEOUT_MS = 200

# Used when a disabled adapter has no message of its own
DEFAULT_DISABLED_MESSAGE = (
    "Bidder {bidder} has been disabled on this server. "
    "Its bids are excluded from the auction."
)

# Environment variable overriding the adapter config file location
CONFIG_PATH_ENV = "RTB_ADAPTERS_CONFIG"

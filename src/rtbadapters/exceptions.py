"""Exceptions raised inside the adapter layer."""


class AdapterError(Exception):
    """Base exception for adapter layer errors."""
    pass


class InvalidRequestError(AdapterError):
    """Raised when an impression or request cannot be sent to an exchange."""
    pass


class DecodeError(AdapterError):
    """Raised by the JSON mapper when a payload does not match its model."""
    pass


class InvalidAdapterConfigError(AdapterError):
    """Raised at startup when adapter configuration is invalid."""
    pass


class UnsupportedOperationError(AdapterError):
    """Raised when an adapter method is called that must never be reached."""
    pass


class TransportError(AdapterError):
    """Raised when an outbound call fails before a response is received."""
    pass


class TransportTimeoutError(TransportError):
    """Raised when an outbound call exceeds its timeout."""
    pass


class InvalidResponseError(AdapterError):
    """Raised when an exchange response cannot be trusted."""
    pass

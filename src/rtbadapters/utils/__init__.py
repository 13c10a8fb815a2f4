"""Adapter utilities."""

from .constants import DEFAULT_BID_CURRENCY, OPENRTB_VERSION, OPENRTB_VERSION_HEADER
from .http import json_headers, validate_url
from .json_mapper import JsonMapper

__all__ = [
    'DEFAULT_BID_CURRENCY',
    'OPENRTB_VERSION',
    'OPENRTB_VERSION_HEADER',
    'JsonMapper',
    'json_headers',
    'validate_url',
]

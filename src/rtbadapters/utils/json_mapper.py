"""
JSON encode/decode for OpenRTB models.

Adapters never see the underlying ``json`` errors: every failure to read
a payload into a model surfaces as ``DecodeError``.
"""

import json
from typing import Any, TypeVar

from ..exceptions import DecodeError

T = TypeVar("T")


class JsonMapper:
    """Serializer shared by all adapters. Holds no state."""

    def encode(self, value: Any) -> str:
        """Encode a model (anything with ``to_dict``) or plain value to JSON."""
        if hasattr(value, "to_dict"):
            value = value.to_dict()
        return json.dumps(value, separators=(",", ":"))

    def decode_value(self, text: str | bytes | None, model: type[T]) -> T:
        """
        Decode a raw JSON body into ``model``.

        Raises:
            DecodeError: If the body is not JSON or does not fit the model
        """
        if text is None:
            raise DecodeError("body is empty")
        try:
            data = json.loads(text)
        except (ValueError, RecursionError) as e:
            raise DecodeError(str(e)) from e
        return self.convert_value(data, model)

    def convert_value(self, data: Any, model: type[T]) -> T:
        """
        Convert an already-parsed JSON value into ``model``.

        Raises:
            DecodeError: If the value does not fit the model
        """
        try:
            return model.from_dict(data)
        except (TypeError, ValueError, OverflowError, RecursionError) as e:
            raise DecodeError(str(e)) from e

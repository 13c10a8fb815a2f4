"""Decoding of the exchange-specific parameters carried in ``imp.ext``."""

from typing import TypeVar

from ..exceptions import DecodeError, InvalidRequestError
from ..models.openrtb import Imp
from ..utils.json_mapper import JsonMapper

T = TypeVar("T")


def parse_imp_ext(imp: Imp, model: type[T], mapper: JsonMapper) -> T:
    """
    Decode ``imp.ext.bidder`` into the adapter's parameter model.

    A missing ``bidder`` object decodes as an empty one so that the
    adapter's own required-field checks report what is missing.

    Raises:
        InvalidRequestError: If the parameters have the wrong shape
    """
    bidder_params = (imp.ext or {}).get("bidder")
    try:
        return mapper.convert_value({} if bidder_params is None else bidder_params, model)
    except DecodeError as e:
        raise InvalidRequestError(str(e)) from e

"""Resolution of impression media types."""

from collections.abc import Iterable

from ..exceptions import InvalidRequestError
from ..models.bidder import BidType
from ..models.openrtb import Imp


def imp_media_types(imp: Imp) -> list[BidType]:
    """List the media descriptors populated on an impression, in priority order."""
    descriptors = (
        (BidType.BANNER, imp.banner),
        (BidType.VIDEO, imp.video),
        (BidType.AUDIO, imp.audio),
        (BidType.NATIVE, imp.native),
    )
    return [bid_type for bid_type, descriptor in descriptors if descriptor is not None]


def resolve_imp_types(imps: Iterable[Imp]) -> dict[str, BidType]:
    """
    Map each impression id to its media type.

    Args:
        imps: Impressions of the original bid request

    Returns:
        Mapping of impression id to media type

    Raises:
        InvalidRequestError: On a duplicate impression id, or an impression
            with no media descriptor or more than one
    """
    imp_types: dict[str, BidType] = {}
    for imp in imps:
        if imp.id in imp_types:
            raise InvalidRequestError(f"duplicate $.imp.id {imp.id}")

        media_types = imp_media_types(imp)
        if not media_types:
            raise InvalidRequestError(
                "one of $.imp.banner, $.imp.video, $.imp.audio and $.imp.native "
                f"field required (imp {imp.id})"
            )
        if len(media_types) > 1:
            names = ", ".join(f"$.imp.{t.value}" for t in media_types)
            raise InvalidRequestError(
                f"only one of {names} allowed (imp {imp.id})"
            )

        imp_types[imp.id] = media_types[0]
    return imp_types

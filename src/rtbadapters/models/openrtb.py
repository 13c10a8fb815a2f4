"""
OpenRTB 2.5 wire objects used by the bid adapters.

Only the fields the adapters read are modelled explicitly; every other
field of the wire object is carried through ``extra`` so that a request
rewritten for one exchange keeps everything the publisher sent.

Reference: https://github.com/InteractiveAdvertisingBureau/openrtb2.x
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from .fields import compact, optional_field, require_object, required_field, string_list


@dataclass(frozen=True)
class Imp:
    """
    One impression (inventory slot) of a bid request.

    Attributes:
        id: Impression identifier, unique within the request
        banner: Banner descriptor, if the slot accepts banners
        video: Video descriptor
        audio: Audio descriptor
        native: Native descriptor
        ext: Opaque extension object keyed by exchange ("bidder" holds
            the adapter-specific parameters)
    """

    id: str
    banner: Optional[dict[str, Any]] = None
    video: Optional[dict[str, Any]] = None
    audio: Optional[dict[str, Any]] = None
    native: Optional[dict[str, Any]] = None
    tagid: Optional[str] = None
    bidfloor: Optional[float] = None
    bidfloorcur: Optional[str] = None
    ext: Optional[dict[str, Any]] = None
    extra: dict[str, Any] = field(default_factory=dict)

    _KNOWN = frozenset(
        {"id", "banner", "video", "audio", "native", "tagid", "bidfloor", "bidfloorcur", "ext"}
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the OpenRTB wire dictionary."""
        return compact(
            {
                "id": self.id,
                "banner": self.banner,
                "video": self.video,
                "audio": self.audio,
                "native": self.native,
                "tagid": self.tagid,
                "bidfloor": self.bidfloor,
                "bidfloorcur": self.bidfloorcur,
                "ext": self.ext,
            },
            self.extra,
        )

    @classmethod
    def from_dict(cls, data: Any, path: str = "$.imp") -> "Imp":
        """Create from an OpenRTB wire dictionary."""
        data = require_object(data, path)
        return cls(
            id=required_field(data, "id", str, path),
            banner=optional_field(data, "banner", dict, path),
            video=optional_field(data, "video", dict, path),
            audio=optional_field(data, "audio", dict, path),
            native=optional_field(data, "native", dict, path),
            tagid=optional_field(data, "tagid", str, path),
            bidfloor=optional_field(data, "bidfloor", (int, float), path),
            bidfloorcur=optional_field(data, "bidfloorcur", str, path),
            ext=optional_field(data, "ext", dict, path),
            extra={k: v for k, v in data.items() if k not in cls._KNOWN},
        )


@dataclass(frozen=True)
class BidRequest:
    """
    Top-level OpenRTB bid request.

    Instances are immutable; adapters derive per-call requests with
    ``dataclasses.replace``.
    """

    id: str
    imp: tuple[Imp, ...] = ()
    site: Optional[dict[str, Any]] = None
    app: Optional[dict[str, Any]] = None
    device: Optional[dict[str, Any]] = None
    user: Optional[dict[str, Any]] = None
    regs: Optional[dict[str, Any]] = None
    source: Optional[dict[str, Any]] = None
    cur: tuple[str, ...] = ()
    tmax: Optional[int] = None
    at: Optional[int] = None
    test: Optional[int] = None
    ext: Optional[dict[str, Any]] = None
    extra: dict[str, Any] = field(default_factory=dict)

    _KNOWN = frozenset(
        {
            "id", "imp", "site", "app", "device", "user", "regs",
            "source", "cur", "tmax", "at", "test", "ext",
        }
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the OpenRTB wire dictionary."""
        return compact(
            {
                "id": self.id,
                "imp": [imp.to_dict() for imp in self.imp],
                "site": self.site,
                "app": self.app,
                "device": self.device,
                "user": self.user,
                "regs": self.regs,
                "source": self.source,
                "cur": self.cur or None,
                "tmax": self.tmax,
                "at": self.at,
                "test": self.test,
                "ext": self.ext,
            },
            self.extra,
        )

    @classmethod
    def from_dict(cls, data: Any, path: str = "$") -> "BidRequest":
        """Create from an OpenRTB wire dictionary."""
        data = require_object(data, path)
        imps = optional_field(data, "imp", list, path) or []
        return cls(
            id=required_field(data, "id", str, path),
            imp=tuple(Imp.from_dict(imp, f"{path}.imp") for imp in imps),
            site=optional_field(data, "site", dict, path),
            app=optional_field(data, "app", dict, path),
            device=optional_field(data, "device", dict, path),
            user=optional_field(data, "user", dict, path),
            regs=optional_field(data, "regs", dict, path),
            source=optional_field(data, "source", dict, path),
            cur=string_list(data, "cur", path),
            tmax=optional_field(data, "tmax", int, path),
            at=optional_field(data, "at", int, path),
            test=optional_field(data, "test", int, path),
            ext=optional_field(data, "ext", dict, path),
            extra={k: v for k, v in data.items() if k not in cls._KNOWN},
        )


@dataclass(frozen=True)
class Bid:
    """A single bid returned by an exchange."""

    id: str
    impid: str
    price: float
    adm: Optional[str] = None
    nurl: Optional[str] = None
    adomain: tuple[str, ...] = ()
    cid: Optional[str] = None
    crid: Optional[str] = None
    cat: tuple[str, ...] = ()
    dealid: Optional[str] = None
    w: Optional[int] = None
    h: Optional[int] = None
    ext: Optional[dict[str, Any]] = None
    extra: dict[str, Any] = field(default_factory=dict)

    _KNOWN = frozenset(
        {
            "id", "impid", "price", "adm", "nurl", "adomain", "cid",
            "crid", "cat", "dealid", "w", "h", "ext",
        }
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the OpenRTB wire dictionary."""
        return compact(
            {
                "id": self.id,
                "impid": self.impid,
                "price": self.price,
                "adm": self.adm,
                "nurl": self.nurl,
                "adomain": self.adomain or None,
                "cid": self.cid,
                "crid": self.crid,
                "cat": self.cat or None,
                "dealid": self.dealid,
                "w": self.w,
                "h": self.h,
                "ext": self.ext,
            },
            self.extra,
        )

    @classmethod
    def from_dict(cls, data: Any, path: str = "$.seatbid.bid") -> "Bid":
        """Create from an OpenRTB wire dictionary."""
        data = require_object(data, path)
        return cls(
            id=required_field(data, "id", str, path),
            impid=required_field(data, "impid", str, path),
            price=float(required_field(data, "price", (int, float), path)),
            adm=optional_field(data, "adm", str, path),
            nurl=optional_field(data, "nurl", str, path),
            adomain=string_list(data, "adomain", path),
            cid=optional_field(data, "cid", str, path),
            crid=optional_field(data, "crid", str, path),
            cat=string_list(data, "cat", path),
            dealid=optional_field(data, "dealid", str, path),
            w=optional_field(data, "w", int, path),
            h=optional_field(data, "h", int, path),
            ext=optional_field(data, "ext", dict, path),
            extra={k: v for k, v in data.items() if k not in cls._KNOWN},
        )


@dataclass(frozen=True)
class SeatBid:
    """A group of bids attributed to one bidding seat."""

    bid: tuple[Bid, ...] = ()
    seat: Optional[str] = None
    group: Optional[int] = None
    ext: Optional[dict[str, Any]] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the OpenRTB wire dictionary."""
        return compact(
            {
                "bid": [bid.to_dict() for bid in self.bid],
                "seat": self.seat,
                "group": self.group,
                "ext": self.ext,
            },
            {},
        )

    @classmethod
    def from_dict(cls, data: Any, path: str = "$.seatbid") -> "SeatBid":
        """Create from an OpenRTB wire dictionary."""
        data = require_object(data, path)
        bids = optional_field(data, "bid", list, path) or []
        return cls(
            bid=tuple(Bid.from_dict(bid, f"{path}.bid") for bid in bids),
            seat=optional_field(data, "seat", str, path),
            group=optional_field(data, "group", int, path),
            ext=optional_field(data, "ext", dict, path),
        )


@dataclass(frozen=True)
class BidResponse:
    """Top-level OpenRTB bid response."""

    id: str = ""
    seatbid: tuple[SeatBid, ...] = ()
    bidid: Optional[str] = None
    cur: Optional[str] = None
    nbr: Optional[int] = None
    ext: Optional[dict[str, Any]] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the OpenRTB wire dictionary."""
        return compact(
            {
                "id": self.id,
                "seatbid": [seatbid.to_dict() for seatbid in self.seatbid],
                "bidid": self.bidid,
                "cur": self.cur,
                "nbr": self.nbr,
                "ext": self.ext,
            },
            {},
        )

    @classmethod
    def from_dict(cls, data: Any, path: str = "$") -> "BidResponse":
        """Create from an OpenRTB wire dictionary."""
        data = require_object(data, path)
        seatbids = optional_field(data, "seatbid", list, path) or []
        return cls(
            id=optional_field(data, "id", str, path) or "",
            seatbid=tuple(SeatBid.from_dict(sb, f"{path}.seatbid") for sb in seatbids),
            bidid=optional_field(data, "bidid", str, path),
            cur=optional_field(data, "cur", str, path),
            nbr=optional_field(data, "nbr", int, path),
            ext=optional_field(data, "ext", dict, path),
        )

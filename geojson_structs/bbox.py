import enum
import re
from typing import List, Optional

from .position import Position

__all__ = ("BoundingBox", "BoundingBoxType", "CoordinatesFormat")


def __dir__():
    return __all__


class BoundingBoxType(enum.Enum):
    """Which diagonal the two corners of a `BoundingBox` describe."""

    #: ``from_`` is the north-west corner, ``to`` the south-east corner.
    TOP_LEFT_BOTTOM_RIGHT = "TopLeftBottomRight"
    #: ``from_`` is the south-west corner, ``to`` the north-east corner.
    BOTTOM_LEFT_TOP_RIGHT = "BottomLeftTopRight"


class CoordinatesFormat(enum.Enum):
    """The order of each coordinate pair in a textual bounding box."""

    LATITUDE_LONGITUDE = "LatitudeLongitude"
    LONGITUDE_LATITUDE = "LongitudeLatitude"


# Invariant-culture decimal number, optional sign and exponent
_NUMBER_RE = re.compile(r"\s*[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?\s*\Z")

_EXAMPLE = "37.283478,55.660739,37.936821,55.847952"


def _split(text: Optional[str]) -> Optional[List[str]]:
    if not text:
        return None
    tokens = [t for t in text.split(",") if t]
    if len(tokens) != 4:
        return None
    return tokens


def _try_parse_numbers(text: Optional[str]) -> Optional[List[float]]:
    tokens = _split(text)
    if tokens is None:
        return None
    if not all(_NUMBER_RE.match(t) for t in tokens):
        return None
    return [float(t) for t in tokens]


def _parse_numbers(text: Optional[str]) -> List[float]:
    if not text:
        raise ValueError("Bounding box string is empty or None")
    tokens = _split(text)
    if tokens is None:
        raise ValueError(
            f"Invalid bounding box string {text!r}, expected 4 comma separated "
            f"numbers (e.g. {_EXAMPLE!r})"
        )
    for token in tokens:
        if not _NUMBER_RE.match(token):
            raise ValueError(f"Invalid number {token.strip()!r} in bounding box string")
    return [float(t) for t in tokens]


class BoundingBox:
    """An axis-aligned rectangle described by two corner positions.

    Parameters
    ----------
    kind : BoundingBoxType
        Which diagonal ``from_`` and ``to`` represent.
    from_ : Position
        The first corner.
    to : Position
        The second corner.

    Notes
    -----
    Two bounding boxes are equal only if their ``kind`` and both corners are
    equal; the same rectangle described by the other diagonal compares unequal
    until converted with `BoundingBox.convert_to`.

    On the wire a bounding box is always ``[fromLon, fromLat, toLon, toLat]``,
    whatever its ``kind``. Decoding always produces a
    ``BoundingBoxType.BOTTOM_LEFT_TOP_RIGHT`` box.

    Bounding boxes are hashable but `BoundingBox.convert_to` changes them in
    place, which changes their hash. Don't convert a box while it, or a
    `GenericCluster` holding it, is stored in a set or used as a dict key.
    """

    __slots__ = ("kind", "from_", "to")

    def __init__(self, kind: BoundingBoxType, from_: Position, to: Position):
        if not isinstance(kind, BoundingBoxType):
            raise TypeError(f"kind must be a BoundingBoxType, got {kind!r}")
        if from_ is None or to is None:
            raise TypeError("BoundingBox corners must not be None")
        self.kind = kind
        self.from_ = from_
        self.to = to

    @classmethod
    def parse(
        cls, kind: BoundingBoxType, coordinates_format: CoordinatesFormat, text: str
    ) -> "BoundingBox":
        """Parse a bounding box from a ``"a,b,c,d"`` string.

        Parameters
        ----------
        kind : BoundingBoxType
            The diagonal the two corners in ``text`` describe.
        coordinates_format : CoordinatesFormat
            The order of the values in each corner.
        text : str
            Four comma separated numbers.

        Returns
        -------
        bbox : BoundingBox

        Raises
        ------
        ValueError
            If ``text`` is empty, doesn't hold exactly 4 values, or any value
            isn't a number.

        See Also
        --------
        BoundingBox.try_parse
        """
        return cls._build(kind, coordinates_format, _parse_numbers(text))

    @classmethod
    def try_parse(
        cls, kind: BoundingBoxType, coordinates_format: CoordinatesFormat, text: str
    ) -> Optional["BoundingBox"]:
        """Like `BoundingBox.parse`, but returns ``None`` on malformed input."""
        values = _try_parse_numbers(text)
        if values is None:
            return None
        return cls._build(kind, coordinates_format, values)

    @classmethod
    def _build(cls, kind, coordinates_format, values):
        if coordinates_format is CoordinatesFormat.LATITUDE_LONGITUDE:
            first = Position(latitude=values[0], longitude=values[1])
            second = Position(latitude=values[2], longitude=values[3])
        elif coordinates_format is CoordinatesFormat.LONGITUDE_LATITUDE:
            first = Position(longitude=values[0], latitude=values[1])
            second = Position(longitude=values[2], latitude=values[3])
        else:
            raise TypeError(
                f"coordinates_format must be a CoordinatesFormat, got {coordinates_format!r}"
            )

        if kind is BoundingBoxType.TOP_LEFT_BOTTOM_RIGHT:
            return cls(kind, first, second)
        elif kind is BoundingBoxType.BOTTOM_LEFT_TOP_RIGHT:
            from_ = Position(longitude=first.longitude, latitude=second.latitude)
            to = Position(longitude=second.longitude, latitude=first.latitude)
            return cls(kind, from_, to)
        raise TypeError(f"kind must be a BoundingBoxType, got {kind!r}")

    def convert_to(self, kind: BoundingBoxType) -> None:
        """Switch the diagonal described by this box, in place.

        The latitudes of ``from_`` and ``to`` are swapped; longitudes are left
        alone. Converting to the current ``kind`` does nothing.
        """
        if not isinstance(kind, BoundingBoxType):
            raise TypeError(f"kind must be a BoundingBoxType, got {kind!r}")
        if kind is self.kind:
            return
        from_, to = self.from_, self.to
        self.from_ = Position(from_.longitude, to.latitude, from_.altitude)
        self.to = Position(to.longitude, from_.latitude, to.altitude)
        self.kind = kind

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return (
            self.kind is other.kind
            and self.from_ == other.from_
            and self.to == other.to
        )

    def __hash__(self):
        return hash((self.kind, self.from_, self.to))

    def __repr__(self):
        return f"BoundingBox({self.kind}, from_={self.from_!r}, to={self.to!r})"

    def __str__(self):
        return (
            f"BBOX ({self.from_.latitude}, {self.from_.longitude}, "
            f"{self.to.latitude}, {self.to.longitude})"
        )

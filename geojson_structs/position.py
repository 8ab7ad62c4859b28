from typing import Iterator, Optional

__all__ = ("Position", "PRECISION")


def __dir__():
    return __all__


#: Number of decimal places used when comparing coordinate components.
PRECISION = 10


def _round(value: Optional[float]) -> Optional[float]:
    if value is None:
        return None
    return round(value, PRECISION)


class Position:
    """A geographic position.

    Parameters
    ----------
    longitude : float
        The longitude (``x``) in decimal degrees.
    latitude : float
        The latitude (``y``) in decimal degrees.
    altitude : float, optional
        The altitude, if known.

    Notes
    -----
    Positions are immutable. Two positions compare equal if every component
    is equal after rounding to `PRECISION` decimal places, so values that only
    differ by floating point noise are considered the same position.

    When encoded a position is always written longitude first, as
    ``[longitude, latitude]`` or ``[longitude, latitude, altitude]``.
    """

    __slots__ = ("longitude", "latitude", "altitude")

    def __init__(
        self, longitude: float, latitude: float, altitude: Optional[float] = None
    ):
        object.__setattr__(self, "longitude", float(longitude))
        object.__setattr__(self, "latitude", float(latitude))
        object.__setattr__(
            self, "altitude", None if altitude is None else float(altitude)
        )

    def __setattr__(self, name, value):
        raise AttributeError(f"immutable type: {type(self).__name__!r}")

    def __delattr__(self, name):
        raise AttributeError(f"immutable type: {type(self).__name__!r}")

    def __iter__(self) -> Iterator[float]:
        yield self.longitude
        yield self.latitude
        if self.altitude is not None:
            yield self.altitude

    def __len__(self) -> int:
        return 2 if self.altitude is None else 3

    def _key(self):
        return (_round(self.longitude), _round(self.latitude), _round(self.altitude))

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        if self.altitude is None:
            return f"Position(longitude={self.longitude!r}, latitude={self.latitude!r})"
        return (
            f"Position(longitude={self.longitude!r}, latitude={self.latitude!r}, "
            f"altitude={self.altitude!r})"
        )

    def __reduce__(self):
        return (type(self), (self.longitude, self.latitude, self.altitude))

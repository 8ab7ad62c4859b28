from __future__ import annotations

from typing import Tuple, Union

import msgspec

from ._base import GeoJSONObject
from .position import Position

__all__ = (
    "Point",
    "MultiPoint",
    "LineString",
    "MultiLineString",
    "Polygon",
    "MultiPolygon",
    "GeometryCollection",
    "Circle",
    "Geometry",
)


def __dir__():
    return __all__


def _set(obj, name, value):
    msgspec.structs.force_setattr(obj, name, value)


def _require(obj, name):
    value = getattr(obj, name)
    if value is None:
        raise TypeError(f"{type(obj).__name__}.{name} must not be None")
    return value


def _position(value) -> Position:
    if isinstance(value, Position):
        return value
    if isinstance(value, Point):
        return value.coordinates
    if isinstance(value, (tuple, list)):
        if len(value) not in (2, 3):
            raise ValueError(
                f"A position requires 2 or 3 values, got {len(value)}"
            )
        return Position(*value)
    raise TypeError(f"Expected a Position or Point, got {type(value).__name__}")


def _line(value) -> Tuple[Position, ...]:
    if isinstance(value, LineString):
        return value.coordinates
    if value is None:
        raise TypeError("LineString coordinates must not be None")
    coords = tuple(_position(p) for p in value)
    if len(coords) < 2:
        raise ValueError(
            f"A LineString requires at least 2 positions, got {len(coords)}"
        )
    return coords


def _rings(value) -> Tuple[Tuple[Position, ...], ...]:
    if isinstance(value, Polygon):
        return value.coordinates
    if value is None:
        raise TypeError("Polygon coordinates must not be None")
    return tuple(_line(r) for r in value)


class Point(GeoJSONObject, tag="Point"):
    """A single position."""

    coordinates: Position

    def __post_init__(self):
        super().__post_init__()
        _set(self, "coordinates", _position(_require(self, "coordinates")))


class MultiPoint(GeoJSONObject, tag="MultiPoint"):
    """A collection of points.

    ``coordinates`` may be given as `Position` or `Point` objects.
    """

    coordinates: Tuple[Position, ...]

    def __post_init__(self):
        super().__post_init__()
        coords = _require(self, "coordinates")
        _set(self, "coordinates", tuple(_position(p) for p in coords))

    @property
    def points(self) -> Tuple[Point, ...]:
        return tuple(Point(p) for p in self.coordinates)


class LineString(GeoJSONObject, tag="LineString"):
    """A curve through two or more positions.

    Raises ``ValueError`` if fewer than 2 positions are given, and
    ``TypeError`` if ``coordinates`` is ``None``.
    """

    coordinates: Tuple[Position, ...]

    def __post_init__(self):
        super().__post_init__()
        _set(self, "coordinates", _line(self.coordinates))

    def is_closed(self) -> bool:
        """Whether the first and last positions are the same."""
        return self.coordinates[0] == self.coordinates[-1]


class MultiLineString(GeoJSONObject, tag="MultiLineString"):
    """A collection of line strings.

    Each item of ``coordinates`` may be a `LineString` or a sequence of
    positions.
    """

    coordinates: Tuple[Tuple[Position, ...], ...]

    def __post_init__(self):
        super().__post_init__()
        coords = _require(self, "coordinates")
        _set(self, "coordinates", tuple(_line(line) for line in coords))

    @property
    def lines(self) -> Tuple[LineString, ...]:
        return tuple(LineString(c) for c in self.coordinates)


class Polygon(GeoJSONObject, tag="Polygon"):
    """A surface bounded by one or more rings.

    The first ring is the exterior boundary, any others are holes. Each ring
    may be a `LineString` or a sequence of positions.
    """

    coordinates: Tuple[Tuple[Position, ...], ...]

    def __post_init__(self):
        super().__post_init__()
        _set(self, "coordinates", _rings(self.coordinates))

    @property
    def rings(self) -> Tuple[LineString, ...]:
        return tuple(LineString(c) for c in self.coordinates)


class MultiPolygon(GeoJSONObject, tag="MultiPolygon"):
    """A collection of polygons."""

    coordinates: Tuple[Tuple[Tuple[Position, ...], ...], ...]

    def __post_init__(self):
        super().__post_init__()
        coords = _require(self, "coordinates")
        _set(self, "coordinates", tuple(_rings(p) for p in coords))

    @property
    def polygons(self) -> Tuple[Polygon, ...]:
        return tuple(Polygon(c) for c in self.coordinates)


class GeometryCollection(GeoJSONObject, tag="GeometryCollection"):
    """A heterogeneous collection of geometries."""

    geometries: Tuple[Geometry, ...]

    def __post_init__(self):
        super().__post_init__()
        geometries = tuple(_require(self, "geometries"))
        for geom in geometries:
            if not isinstance(geom, _GEOMETRY_TYPES):
                raise TypeError(
                    f"GeometryCollection items must be geometries, got {type(geom).__name__}"
                )
        _set(self, "geometries", geometries)


class Circle(GeoJSONObject, tag="Circle"):
    """A circle around a center position.

    Parameters
    ----------
    center : Position
        The center of the circle. Encoded as ``"coordinates"``.
    radius : float
        The radius, in meters.
    """

    center: Position = msgspec.field(name="coordinates")
    radius: float

    def __post_init__(self):
        super().__post_init__()
        _set(self, "center", _position(_require(self, "center")))
        _set(self, "radius", float(_require(self, "radius")))


Geometry = Union[
    Point,
    MultiPoint,
    LineString,
    MultiLineString,
    Polygon,
    MultiPolygon,
    GeometryCollection,
    Circle,
]

_GEOMETRY_TYPES = (
    Point,
    MultiPoint,
    LineString,
    MultiLineString,
    Polygon,
    MultiPolygon,
    GeometryCollection,
    Circle,
)

import pytest

from geojson_structs import (
    BoundingBox,
    BoundingBoxType,
    Circle,
    LineString,
    Point,
    Polygon,
    Position,
)


@pytest.fixture
def position():
    return Position(37.623422, 55.771145)


@pytest.fixture
def point(position):
    return Point(position)


@pytest.fixture
def ring():
    """A closed ring, suitable for a polygon boundary"""
    return LineString(
        [
            Position(-2.28, 53.48),
            Position(-2.27, 53.48),
            Position(-2.27, 53.49),
            Position(-2.28, 53.48),
        ]
    )


@pytest.fixture
def polygon(ring):
    return Polygon([ring])


@pytest.fixture
def circle():
    return Circle(center=Position(37.623422, 55.771145), radius=48)


@pytest.fixture
def bbox():
    return BoundingBox(
        BoundingBoxType.BOTTOM_LEFT_TOP_RIGHT,
        Position(37.344074, 55.708352),
        Position(37.670746, 55.801956),
    )

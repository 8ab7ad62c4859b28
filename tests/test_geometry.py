import pytest
import msgspec

from geojson_structs import (
    Circle,
    GeoJSONObjectType,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    NamedCRS,
    Point,
    Polygon,
    Position,
    UnspecifiedCRS,
)
from geojson_structs.crs import UNSPECIFIED

from utils import assert_eq_and_hash, assert_not_equal


def line(*pairs):
    return LineString([Position(*p) for p in pairs])


class TestGeoJSONObjectType:
    @pytest.mark.parametrize("value", ["Point", "point", "POINT", "pOiNt"])
    def test_lookup_ignores_case(self, value):
        assert GeoJSONObjectType.lookup(value) is GeoJSONObjectType.POINT

    @pytest.mark.parametrize("value", ["UnknownThing", "", None, 1])
    def test_lookup_invalid(self, value):
        with pytest.raises(ValueError, match="not a valid GeoJSON object type"):
            GeoJSONObjectType.lookup(value)

    def test_is_str(self):
        assert GeoJSONObjectType.FEATURE_COLLECTION == "FeatureCollection"


class TestCommon:
    def test_type_property(self, point, polygon, circle):
        assert point.type is GeoJSONObjectType.POINT
        assert polygon.type is GeoJSONObjectType.POLYGON
        assert circle.type is GeoJSONObjectType.CIRCLE

    def test_type_not_settable(self, point):
        with pytest.raises(AttributeError):
            point.type = GeoJSONObjectType.POLYGON

    def test_frozen(self, point):
        with pytest.raises(AttributeError):
            point.coordinates = Position(1, 2)

    def test_crs_default(self, point):
        assert point.crs is UNSPECIFIED

    def test_crs_none_normalized(self, position):
        assert Point(position, crs=None).crs is UNSPECIFIED

    def test_crs_is_keyword_only(self, position):
        with pytest.raises(TypeError):
            Point(position, NamedCRS("EPSG:4326"))

    def test_crs_invalid(self, position):
        with pytest.raises(TypeError, match="crs must be a CRSObject"):
            Point(position, crs="EPSG:4326")

    def test_crs_participates_in_equality(self, position):
        a = Point(position, crs=NamedCRS("EPSG:4326"))
        assert_eq_and_hash(a, Point(position, crs=NamedCRS("EPSG:4326")))
        assert_not_equal(a, Point(position))
        assert_eq_and_hash(Point(position, crs=UnspecifiedCRS()), Point(position))

    def test_different_types_never_equal(self):
        coords = [Position(1, 2), Position(3, 4)]
        assert_not_equal(MultiPoint(coords), LineString(coords))


class TestPoint:
    def test_init(self, position):
        p = Point(position)
        assert p.coordinates is position

    @pytest.mark.parametrize("coords", [(1, 2), [1, 2], (1, 2, 3)])
    def test_init_from_sequence(self, coords):
        assert Point(coords).coordinates == Position(*coords)

    def test_none(self):
        with pytest.raises(TypeError, match="must not be None"):
            Point(None)

    @pytest.mark.parametrize("coords", [(1,), (1, 2, 3, 4)])
    def test_wrong_length(self, coords):
        with pytest.raises(ValueError, match="2 or 3 values"):
            Point(coords)

    def test_equality(self):
        assert_eq_and_hash(Point(Position(1, 2)), Point(Position(1.00000000001, 2)))
        assert_not_equal(Point(Position(1, 2)), Point(Position(1, 2.1)))


class TestMultiPoint:
    def test_points(self):
        mp = MultiPoint([Point(Position(1, 2)), Position(3, 4)])
        assert mp.coordinates == (Position(1, 2), Position(3, 4))
        assert mp.points == (Point(Position(1, 2)), Point(Position(3, 4)))

    def test_empty(self):
        assert MultiPoint([]).points == ()

    def test_none(self):
        with pytest.raises(TypeError):
            MultiPoint(None)

    def test_order_matters(self):
        assert_not_equal(
            MultiPoint([Position(1, 2), Position(3, 4)]),
            MultiPoint([Position(3, 4), Position(1, 2)]),
        )


class TestLineString:
    def test_init(self):
        ls = line((1, 2), (3, 4))
        assert ls.coordinates == (Position(1, 2), Position(3, 4))
        assert isinstance(ls.coordinates, tuple)

    def test_empty(self):
        with pytest.raises(ValueError, match="at least 2 positions, got 0"):
            LineString([])

    def test_one_position(self):
        with pytest.raises(ValueError, match="at least 2 positions, got 1"):
            LineString([Position(1, 2)])

    def test_none(self):
        with pytest.raises(TypeError, match="must not be None"):
            LineString(None)

    def test_is_closed(self, ring):
        assert ring.is_closed()
        assert not line((1, 2), (3, 4)).is_closed()
        assert line((1, 2), (3, 4), (1.00000000001, 2)).is_closed()

    def test_equality(self):
        assert_eq_and_hash(line((1, 2), (3, 4)), line((1, 2), (3, 4)))
        assert_not_equal(line((1, 2), (3, 4)), line((1, 2), (3, 5)))


class TestMultiLineString:
    def test_lines(self):
        a = line((1, 2), (3, 4))
        mls = MultiLineString([a, [Position(5, 6), Position(7, 8)]])
        assert mls.lines == (a, line((5, 6), (7, 8)))

    def test_invalid_line(self):
        with pytest.raises(ValueError):
            MultiLineString([[Position(1, 2)]])

    def test_equality(self):
        a = MultiLineString([line((1, 2), (3, 4))])
        assert_eq_and_hash(a, MultiLineString([line((1, 2), (3, 4))]))
        assert_not_equal(a, MultiLineString([line((1, 2), (3, 4))] * 2))


class TestPolygon:
    def test_rings(self, ring):
        poly = Polygon([ring])
        assert poly.rings == (ring,)
        assert poly.coordinates == (ring.coordinates,)

    def test_none(self):
        with pytest.raises(TypeError, match="must not be None"):
            Polygon(None)

    def test_equality(self, ring):
        assert_eq_and_hash(Polygon([ring]), Polygon([list(ring.coordinates)]))
        assert_not_equal(Polygon([ring]), Polygon([ring, ring]))


class TestMultiPolygon:
    def test_polygons(self, ring, polygon):
        mp = MultiPolygon([polygon, [ring]])
        assert mp.polygons == (polygon, polygon)

    def test_none(self):
        with pytest.raises(TypeError, match="must not be None"):
            MultiPolygon(None)


class TestGeometryCollection:
    def test_init(self, point, polygon, circle):
        gc = GeometryCollection([point, polygon, circle])
        assert gc.geometries == (point, polygon, circle)

    def test_nested(self, point):
        inner = GeometryCollection([point])
        outer = GeometryCollection([inner, point])
        assert outer.geometries[0] == inner

    def test_rejects_non_geometry(self, point):
        with pytest.raises(TypeError, match="must be geometries"):
            GeometryCollection([point, Position(1, 2)])

    def test_none(self):
        with pytest.raises(TypeError, match="must not be None"):
            GeometryCollection(None)

    def test_equality(self, point, polygon):
        assert_eq_and_hash(
            GeometryCollection([point, polygon]), GeometryCollection([point, polygon])
        )
        assert_not_equal(
            GeometryCollection([point, polygon]), GeometryCollection([polygon, point])
        )


class TestCircle:
    def test_init(self):
        c = Circle(Position(1, 2), 48)
        assert c.center == Position(1, 2)
        assert c.radius == 48.0
        assert isinstance(c.radius, float)

    def test_center_required(self):
        with pytest.raises(TypeError):
            Circle(None, 10)

    def test_equality(self):
        assert_eq_and_hash(Circle(Position(1, 2), 48), Circle(Position(1, 2), 48.0))
        assert_not_equal(Circle(Position(1, 2), 48), Circle(Position(1, 2), 49))


def test_struct_config():
    config = Point.__struct_config__
    assert config.frozen
    assert config.omit_defaults
    assert config.tag_field == "type"
    assert config.tag == "Point"
    assert msgspec.structs.fields(Circle)[0].encode_name == "coordinates"
    assert Point.__struct_fields__ == ("coordinates", "crs")

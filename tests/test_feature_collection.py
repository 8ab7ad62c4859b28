import pytest

from geojson_structs import (
    Cluster,
    Feature,
    FeatureCollection,
    GenericCluster,
    GenericFeature,
    GeoJSONObjectType,
    NamedCRS,
)

from utils import assert_eq_and_hash, assert_not_equal


def test_init(point, circle, bbox):
    items = [Feature(point), Cluster(circle, 1, bbox)]
    fc = FeatureCollection(items)
    assert fc.features is items
    assert fc.type is GeoJSONObjectType.FEATURE_COLLECTION


def test_empty():
    assert FeatureCollection([]).features == []


def test_features_required():
    with pytest.raises(TypeError, match="must not be None"):
        FeatureCollection(None)


@pytest.mark.parametrize("item", ["point", "polygon", "position", "dict"])
def test_rejects_non_items(item, point, polygon):
    value = {
        "point": point,
        "polygon": polygon,
        "position": point.coordinates,
        "dict": {"type": "Feature", "geometry": None},
    }[item]
    with pytest.raises(TypeError, match="must be features or clusters"):
        FeatureCollection([Feature(point), value])


def test_accepts_generic_items(point, bbox):
    items = [
        GenericFeature(point, {"a": 1}, None),
        GenericCluster(point, 1, bbox, None, None),
    ]
    assert FeatureCollection(items).features == items


def test_sequence_converted_to_list(point):
    fc = FeatureCollection((Feature(point),))
    assert fc.features == [Feature(point)]
    assert isinstance(fc.features, list)


def test_features_may_be_appended(point, polygon):
    fc = FeatureCollection([Feature(point)])
    fc.features.append(Feature(polygon))
    assert fc.features == [Feature(point), Feature(polygon)]


def test_equality(point, polygon):
    a = FeatureCollection([Feature(point), Feature(polygon)])
    b = FeatureCollection([Feature(point, {"x": 1}), Feature(polygon)])
    assert_eq_and_hash(a, b)


def test_order_sensitive(point, polygon):
    assert_not_equal(
        FeatureCollection([Feature(point), Feature(polygon)]),
        FeatureCollection([Feature(polygon), Feature(point)]),
    )


def test_length_sensitive(point):
    assert_not_equal(
        FeatureCollection([Feature(point)]),
        FeatureCollection([Feature(point), Feature(point)]),
    )


def test_crs_sensitive(point):
    crs = NamedCRS("urn:ogc:def:crs:OGC:1.3:CRS84")
    assert_eq_and_hash(
        FeatureCollection([Feature(point)], crs=crs),
        FeatureCollection([Feature(point)], crs=crs),
    )
    assert_not_equal(
        FeatureCollection([Feature(point)], crs=crs),
        FeatureCollection([Feature(point)]),
    )


def test_hash_tracks_appends(point):
    fc = FeatureCollection([])
    before = hash(fc)
    fc.features.append(Feature(point))
    assert hash(fc) != before

from msgspec import DecodeError, EncodeError, ValidationError

from .position import Position
from .bbox import BoundingBox, BoundingBoxType, CoordinatesFormat
from .crs import CRSObject, CRSType, LinkedCRS, NamedCRS, UnspecifiedCRS
from ._base import GeoJSONObject, GeoJSONObjectType
from .geometry import (
    Circle,
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from .feature import (
    Cluster,
    Feature,
    FeatureCollection,
    FeatureCollectionItem,
    GenericCluster,
    GenericFeature,
    bind_properties,
)
from ._codec import GeoJSON, convert, to_builtins

from . import json
from . import yaml
from ._version import __version__
